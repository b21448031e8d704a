"""Format registry: identifier byte -> (frame length, decoder)."""

from __future__ import annotations

from enum import IntEnum
from typing import Callable

from ruuvi_decoders.errors import UnsupportedFormat
from ruuvi_decoders.formats import e1, v5, v6
from ruuvi_decoders.schemas import RuuviData


class DataFormat(IntEnum):
    V5 = v5.FORMAT_ID
    V6 = v6.FORMAT_ID
    E1 = e1.FORMAT_ID

    @classmethod
    def from_byte(cls, value: int) -> DataFormat | None:
        try:
            return cls(value)
        except ValueError:
            return None

    @property
    def payload_length(self) -> int:
        return _MODULES[self].PAYLOAD_LENGTH

    @property
    def payload_with_mac_length(self) -> int:
        return _MODULES[self].PAYLOAD_WITH_MAC_LENGTH


_MODULES = {
    DataFormat.V5: v5,
    DataFormat.V6: v6,
    DataFormat.E1: e1,
}

Decoder = Callable[[bytes], RuuviData]

_DECODERS: dict[int, tuple[int, Decoder]] = {
    fmt.value: (module.PAYLOAD_WITH_MAC_LENGTH, module.decode)
    for fmt, module in _MODULES.items()
}


def lookup(format_id: int) -> tuple[int, Decoder]:
    """Return (payload-with-MAC length, decoder) for a format identifier byte.

    Raises UnsupportedFormat for identifiers with no registered decoder.
    """
    try:
        return _DECODERS[format_id]
    except KeyError:
        raise UnsupportedFormat(format_id) from None
