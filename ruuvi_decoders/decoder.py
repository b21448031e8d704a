"""Hex front-end: normalize input, dispatch on the format byte, extract from BLE ads."""

import re

from ruuvi_decoders.errors import InvalidHex, InvalidLength
from ruuvi_decoders.registry import lookup
from ruuvi_decoders.schemas import RuuviData

# Ruuvi manufacturer id 0x0499 in both byte orders seen in advertisement dumps
MANUFACTURER_MARKERS = ("9904", "0499")

_HEX_RE = re.compile(r"[0-9A-Fa-f]*")


def decode(hex_data: str) -> RuuviData:
    """Decode a hex-encoded Ruuvi payload (without the manufacturer marker).

    Accepts surrounding whitespace, an optional "0x" prefix and embedded spaces.
    Raises InvalidHex, InvalidLength or UnsupportedFormat.
    """
    clean_hex = hex_data.strip()
    if clean_hex[:2].lower() == "0x":
        clean_hex = clean_hex[2:]
    clean_hex = clean_hex.replace(" ", "")

    return decode_bytes(hex_to_bytes(clean_hex))


def decode_bytes(data: bytes) -> RuuviData:
    if not data:
        raise InvalidLength(None, 0)

    length, decoder = lookup(data[0])
    if len(data) != length:
        raise InvalidLength(length, len(data))
    return decoder(bytes(data))


def hex_to_bytes(hex_str: str) -> bytes:
    if len(hex_str) % 2:
        raise InvalidHex(f"Odd number of hex characters: {len(hex_str)}")
    if not _HEX_RE.fullmatch(hex_str):
        raise InvalidHex(hex_str)
    return bytes.fromhex(hex_str)


def extract_ruuvi_from_ble(ble_data: str) -> str | None:
    """Return the Ruuvi payload hex that follows the manufacturer marker.

    The marker must open the advertisement; a marker found further in does not
    count. The remainder is returned upper-cased and unvalidated.
    """
    clean_data = ble_data.strip().upper()

    if not _HEX_RE.fullmatch(clean_data):
        return None

    for pattern in MANUFACTURER_MARKERS:
        if clean_data.find(pattern) != 0:
            continue
        return clean_data[len(pattern):]

    return None
