"""Data Format 5 (RAWv2) decoder: 24-byte frame including a 6-byte MAC."""

import struct

from ruuvi_decoders.formats.fields import I16_MIN, U16_MAX, check_frame, scaled, unless
from ruuvi_decoders.schemas import DataFormatV5

FORMAT_ID = 0x05
PAYLOAD_LENGTH = 18
PAYLOAD_WITH_MAC_LENGTH = PAYLOAD_LENGTH + 6

# format(u8), temp(i16), hum(u16), pres(u16), acc_x(i16), acc_y(i16),
# acc_z(i16), power_info(u16), movement(u8), sequence(u16), mac(6s)
_FORMAT = ">BhHHhhhHBH6s"

_BATTERY_INVALID = 2047
_TX_POWER_INVALID = 31
_MOVEMENT_INVALID = 255


def decode(data: bytes) -> DataFormatV5:
    check_frame(data, FORMAT_ID, PAYLOAD_WITH_MAC_LENGTH)

    (_, temp, hum, pres, acc_x, acc_y, acc_z,
     power_info, movement, sequence, mac) = struct.unpack(_FORMAT, data)

    battery_voltage, tx_power = decode_power_info(power_info)

    return DataFormatV5(
        mac_address=decode_mac_address(mac),
        temperature=scaled(temp, 0.005, I16_MIN),
        humidity=scaled(hum, 0.0025, U16_MAX),
        pressure=decode_pressure(pres),
        acceleration_x=unless(acc_x, I16_MIN),
        acceleration_y=unless(acc_y, I16_MIN),
        acceleration_z=unless(acc_z, I16_MIN),
        battery_voltage=battery_voltage,
        tx_power=tx_power,
        movement_counter=unless(movement, _MOVEMENT_INVALID),
        measurement_sequence=unless(sequence, U16_MAX),
    )


def decode_pressure(raw: int) -> float | None:
    """Pressure in Pa; the wire value is offset by -50000 Pa."""
    if raw == U16_MAX:
        return None
    return float(raw + 50000)


def decode_power_info(raw: int) -> tuple[int | None, int | None]:
    """Split the power word into battery mV (upper 11 bits) and TX dBm (lower 5)."""
    battery_raw = (raw >> 5) & 0x07FF
    tx_raw = raw & 0x1F

    battery_voltage = None if battery_raw == _BATTERY_INVALID else battery_raw + 1600
    tx_power = None if tx_raw == _TX_POWER_INVALID else -40 + tx_raw * 2
    return battery_voltage, tx_power


def decode_mac_address(mac: bytes) -> str:
    if len(mac) != 6 or all(b == 0xFF for b in mac):
        return "invalid"
    return mac.hex()
