"""Tests for the command line entry point."""

import json

import pytest
import structlog

from ruuvi_decoders.__main__ import main

V5_HEX = "0512FC5394C37C0004FFFC040CAC364200CDCBB8334C884F"


@pytest.fixture(autouse=True)
def _isolate(monkeypatch, tmp_path):
    """Run without a stray .env and reset structlog afterwards."""
    monkeypatch.chdir(tmp_path)
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


def test_decode_prints_record_json(capsys):
    assert main(["decode", V5_HEX]) == 0
    parsed = json.loads(capsys.readouterr().out)
    assert parsed["format"] == "V5"
    assert parsed["battery_voltage"] == 2977
    assert parsed["mac_address"] == "cbb8334c884f"


def test_decode_failure(capsys):
    assert main(["decode", "ZZ"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Invalid hex string" in captured.err


def test_extract(capsys):
    assert main(["extract", "9904" + V5_HEX]) == 0
    assert capsys.readouterr().out.strip() == V5_HEX


def test_extract_no_marker(capsys):
    assert main(["extract", "020106030316910255AA"]) == 1
    assert "no Ruuvi manufacturer data" in capsys.readouterr().err


def test_gateway(capsys):
    event = json.dumps({"gw_mac": "C8:25:2D:8E:9C:2C", "rssi": -60, "data": "9904" + V5_HEX, "ts": 0})
    assert main(["gateway", event]) == 0
    parsed = json.loads(capsys.readouterr().out)
    assert parsed["format"] == "V5"
    assert parsed["observed_at"] == "1970-01-01T00:00:00.000Z"


def test_gateway_rejects_bad_event(capsys):
    assert main(["gateway", "{}"]) == 1
    assert "invalid gateway event" in capsys.readouterr().err


def test_gateway_respects_min_rssi(monkeypatch, capsys):
    monkeypatch.setenv("RUUVI_MIN_RSSI", "-50")
    event = json.dumps({"gw_mac": "C8:25:2D:8E:9C:2C", "rssi": -60, "data": "9904" + V5_HEX})
    assert main(["gateway", event]) == 1
    assert capsys.readouterr().out == ""


def test_unknown_command(capsys):
    assert main(["scan", "x"]) == 1
    assert "Unknown command: scan" in capsys.readouterr().err


def test_usage_without_arguments(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().err


def test_gateway_rejects_millisecond_timestamp(capsys):
    event = json.dumps({"gw_mac": "C8:25:2D:8E:9C:2C", "rssi": -60, "data": "9904" + V5_HEX, "ts": 99999999999999})
    assert main(["gateway", event]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "invalid gateway event" in captured.err
