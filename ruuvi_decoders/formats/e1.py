"""Data Format E1 (Extended v1) decoder: 34-byte payload plus a 6-byte MAC."""

import struct

from ruuvi_decoders.formats.fields import (
    I16_MIN,
    NOX_FLAG_BIT,
    U16_MAX,
    U24_MAX,
    VOC_FLAG_BIT,
    air_index,
    check_frame,
    mac_hex,
    pressure_hpa,
    scaled,
    u24,
    unless,
)
from ruuvi_decoders.schemas import DataFormatE1

FORMAT_ID = 0xE1
PAYLOAD_LENGTH = 34
PAYLOAD_WITH_MAC_LENGTH = PAYLOAD_LENGTH + 6

# format(u8), temp(i16), hum(u16), pres(u16), pm1_0(u16), pm2_5(u16),
# pm4_0(u16), pm10_0(u16), co2(u16), voc_hi(u8), nox_hi(u8), lum(u24),
# reserved(3), sequence(u24), flags(u8), reserved(5), mac(6s)
_FORMAT = ">BhHHHHHHHBB3s3s3sB5s6s"


def decode(data: bytes) -> DataFormatE1:
    check_frame(data, FORMAT_ID, PAYLOAD_WITH_MAC_LENGTH)

    (_, temp, hum, pres, pm1_0, pm2_5, pm4_0, pm10_0, co2, voc_hi, nox_hi,
     lum, _, sequence, flags, _, mac) = struct.unpack(_FORMAT, data)

    return DataFormatE1(
        temperature=scaled(temp, 0.005, I16_MIN),
        humidity=scaled(hum, 0.0025, U16_MAX),
        pressure=pressure_hpa(pres),
        pm1_0=scaled(pm1_0, 0.1, U16_MAX),
        pm2_5=scaled(pm2_5, 0.1, U16_MAX),
        pm4_0=scaled(pm4_0, 0.1, U16_MAX),
        pm10_0=scaled(pm10_0, 0.1, U16_MAX),
        co2=unless(co2, U16_MAX),
        voc_index=air_index(voc_hi, flags, VOC_FLAG_BIT),
        nox_index=air_index(nox_hi, flags, NOX_FLAG_BIT),
        luminosity=scaled(u24(lum), 0.01, U24_MAX),
        measurement_sequence=unless(u24(sequence), U24_MAX),
        flags=flags,
        mac_address=mac_hex(mac),
    )
