"""Field helpers shared by the format decoders."""

from ruuvi_decoders.errors import InvalidLength, UnsupportedFormat

I16_MIN = -0x8000
U16_MAX = 0xFFFF
U24_MAX = 0xFFFFFF

# Shared flags-byte bits holding the least significant bit of the 9-bit indices
VOC_FLAG_BIT = 6
NOX_FLAG_BIT = 7
MAX_AIR_INDEX = 500


def check_frame(data: bytes, format_id: int, length: int) -> None:
    """Reject a frame whose length or identifier byte is wrong, in that order."""
    if len(data) != length:
        raise InvalidLength(length, len(data))
    if data[0] != format_id:
        raise UnsupportedFormat(data[0])


def scaled(raw: int, scale: float, sentinel: int) -> float | None:
    if raw == sentinel:
        return None
    return raw * scale


def unless(raw: int, sentinel: int) -> int | None:
    return None if raw == sentinel else raw


def air_index(high: int, flags: int, bit: int) -> int | None:
    """Assemble a 9-bit VOC/NOx index from its data byte and one flags bit."""
    value = (high << 1) | ((flags >> bit) & 0x01)
    if value > MAX_AIR_INDEX:
        return None
    return value


def pressure_hpa(raw: int) -> float | None:
    if raw == U16_MAX:
        return None
    return (raw + 50000) / 100.0


def mac_hex(data: bytes) -> str:
    return data.hex()


def u24(data: bytes) -> int:
    return int.from_bytes(data, "big")
