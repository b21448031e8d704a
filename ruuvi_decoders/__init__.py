"""Decoders for Ruuvi sensor BLE advertisements (Data Formats 5, 6 and E1)."""

from ruuvi_decoders.air_quality import calc_aqi, calculate_air_quality
from ruuvi_decoders.decoder import decode, decode_bytes, extract_ruuvi_from_ble
from ruuvi_decoders.errors import (
    DecodeError,
    DecryptionFailed,
    InvalidData,
    InvalidHex,
    InvalidLength,
    MissingField,
    UnsupportedFormat,
    ValidationFailed,
)
from ruuvi_decoders.registry import DataFormat
from ruuvi_decoders.schemas import (
    DataFormatE1,
    DataFormatV5,
    DataFormatV6,
    RuuviData,
    ruuvi_data_adapter,
)

__all__ = [
    "DataFormat",
    "DataFormatE1",
    "DataFormatV5",
    "DataFormatV6",
    "DecodeError",
    "DecryptionFailed",
    "InvalidData",
    "InvalidHex",
    "InvalidLength",
    "MissingField",
    "RuuviData",
    "UnsupportedFormat",
    "ValidationFailed",
    "calc_aqi",
    "calculate_air_quality",
    "decode",
    "decode_bytes",
    "extract_ruuvi_from_ble",
    "ruuvi_data_adapter",
]
