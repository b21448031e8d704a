"""Data Format 6 (RAWv3) decoder: 17-byte payload plus the low 3 MAC bytes."""

import math
import struct

from ruuvi_decoders.formats.fields import (
    I16_MIN,
    NOX_FLAG_BIT,
    VOC_FLAG_BIT,
    air_index,
    check_frame,
    mac_hex,
    pressure_hpa,
    scaled,
)
from ruuvi_decoders.schemas import DataFormatV6

FORMAT_ID = 0x06
PAYLOAD_LENGTH = 17
PAYLOAD_WITH_MAC_LENGTH = PAYLOAD_LENGTH + 3

# format(u8), temp(i16), hum(u16), pres(u16), pm2_5(u16), co2(u16),
# voc_hi(u8), nox_hi(u8), lum_code(u8), reserved(u8), sequence(u8),
# flags(u8), mac(3s)
_FORMAT = ">BhHHHHBBBBBB3s"

_HUMIDITY_MAX = 40000
_PM_MAX = 10000
_CO2_MAX = 40000

_LUMINOSITY_INVALID = 255
_LUMINOSITY_MAX_VALUE = 65535.0
_LUMINOSITY_MAX_CODE = 254
_LUMINOSITY_DELTA = math.log(_LUMINOSITY_MAX_VALUE + 1) / _LUMINOSITY_MAX_CODE


def decode(data: bytes) -> DataFormatV6:
    check_frame(data, FORMAT_ID, PAYLOAD_WITH_MAC_LENGTH)

    (_, temp, hum, pres, pm2_5, co2, voc_hi, nox_hi,
     lum_code, reserved, sequence, flags, mac) = struct.unpack(_FORMAT, data)

    return DataFormatV6(
        temperature=scaled(temp, 0.005, I16_MIN),
        humidity=None if hum > _HUMIDITY_MAX else hum * 0.0025,
        pressure=pressure_hpa(pres),
        pm2_5=None if pm2_5 > _PM_MAX else pm2_5 * 0.1,
        co2=None if co2 > _CO2_MAX else co2,
        voc_index=air_index(voc_hi, flags, VOC_FLAG_BIT),
        nox_index=air_index(nox_hi, flags, NOX_FLAG_BIT),
        luminosity=decode_luminosity(lum_code),
        reserved=reserved,
        measurement_sequence=sequence,
        flags=flags,
        mac_address=mac_hex(mac),
    )


def decode_luminosity(code: int) -> float | None:
    """Invert the logarithmic code: value = exp(code * ln(65536) / 254) - 1."""
    if code == _LUMINOSITY_INVALID:
        return None
    value = math.exp(code * _LUMINOSITY_DELTA) - 1.0
    return min(value, _LUMINOSITY_MAX_VALUE)
