"""Tests for structured logging configuration."""

import json

import pytest
import structlog

from ruuvi_decoders.logging_config import configure_logging


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Reset structlog configuration between tests."""
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


def test_configure_logging_returns_none():
    assert configure_logging("test-service") is None


def test_log_output_is_json(capsys):
    configure_logging("test-svc")
    structlog.get_logger().info("hello world")
    parsed = json.loads(capsys.readouterr().err.strip())
    assert parsed["event"] == "hello world"


def test_stdout_left_clean(capsys):
    configure_logging("test-svc")
    structlog.get_logger().info("quiet")
    assert capsys.readouterr().out == ""


def test_log_includes_service_level_and_timestamp(capsys):
    configure_logging("gateway")
    structlog.get_logger().warning("something happened")
    parsed = json.loads(capsys.readouterr().err.strip())
    assert parsed["service"] == "gateway"
    assert parsed["level"] == "warning"
    assert "T" in parsed["timestamp"]


def test_extra_context_appears(capsys):
    configure_logging("gateway")
    structlog.get_logger().info("payload decoded", format="V5", mac="cbb8334c884f")
    parsed = json.loads(capsys.readouterr().err.strip())
    assert parsed["format"] == "V5"
    assert parsed["mac"] == "cbb8334c884f"


def test_level_threshold(capsys):
    configure_logging("test-svc", level="warning")
    log = structlog.get_logger()
    log.info("dropped")
    log.warning("kept")
    lines = capsys.readouterr().err.strip().splitlines()
    assert len(lines) == 1
    assert json.loads(lines[0])["event"] == "kept"


def test_invalid_level_raises():
    with pytest.raises(ValueError, match="Invalid log level"):
        configure_logging("test", level="BOGUS")
