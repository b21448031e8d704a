"""Timestamp utilities for canonical ISO 8601 formatting."""

from datetime import UTC, datetime

_CANONICAL_FORMAT = "%Y-%m-%dT%H:%M:%S.%f"


def _canonical(dt: datetime) -> str:
    return dt.strftime(_CANONICAL_FORMAT)[:-3] + "Z"


def utc_now() -> str:
    """Return current UTC time as canonical ISO 8601 string: YYYY-MM-DDTHH:MM:SS.mmmZ"""
    return _canonical(datetime.now(UTC))


def from_epoch_seconds(seconds: int) -> str:
    """Format a Unix timestamp (seconds) in the canonical ISO 8601 form."""
    return _canonical(datetime.fromtimestamp(seconds, UTC))
