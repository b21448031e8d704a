"""Tests for timestamp utilities."""

import re

from ruuvi_decoders.utils.timestamps import from_epoch_seconds, utc_now


def test_utc_now_format():
    ts = utc_now()
    assert re.match(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$", ts)
    assert len(ts) == 24


def test_from_epoch_seconds():
    assert from_epoch_seconds(0) == "1970-01-01T00:00:00.000Z"
    assert from_epoch_seconds(1700000000) == "2023-11-14T22:13:20.000Z"
