"""Tests for the format registry."""

import pytest

from ruuvi_decoders.errors import UnsupportedFormat
from ruuvi_decoders.formats import e1, v5, v6
from ruuvi_decoders.registry import DataFormat, lookup


def test_data_format_values():
    assert DataFormat.V5 == 0x05
    assert DataFormat.V6 == 0x06
    assert DataFormat.E1 == 0xE1


def test_from_byte():
    assert DataFormat.from_byte(5) is DataFormat.V5
    assert DataFormat.from_byte(0xE1) is DataFormat.E1
    assert DataFormat.from_byte(0x07) is None


@pytest.mark.parametrize(
    "fmt, payload, with_mac",
    [(DataFormat.V5, 18, 24), (DataFormat.V6, 17, 20), (DataFormat.E1, 34, 40)],
)
def test_lengths(fmt, payload, with_mac):
    assert fmt.payload_length == payload
    assert fmt.payload_with_mac_length == with_mac


def test_lookup_registered():
    assert lookup(0x05) == (24, v5.decode)
    assert lookup(0x06) == (20, v6.decode)
    assert lookup(0xE1) == (40, e1.decode)


def test_lookup_unregistered():
    with pytest.raises(UnsupportedFormat) as exc_info:
        lookup(0x99)
    assert exc_info.value.format_id == 0x99
    assert exc_info.value.transient is True
