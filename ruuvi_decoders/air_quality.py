"""Air quality index from PM2.5 and CO2 readings."""

import math

from ruuvi_decoders.schemas import DataFormatE1, DataFormatV6, RuuviData

AQI_MAX = 100.0
PM25_MIN = 0.0
PM25_MAX = 60.0
PM25_SCALE = AQI_MAX / (PM25_MAX - PM25_MIN)
CO2_MIN = 420.0
CO2_MAX = 2300.0
CO2_SCALE = AQI_MAX / (CO2_MAX - CO2_MIN)


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def calc_aqi(pm25: float, co2: float) -> float:
    """Score 0 (worst) to 100 (best) from the distance to the clean-air corner."""
    dx = (_clamp(pm25, PM25_MIN, PM25_MAX) - PM25_MIN) * PM25_SCALE
    dy = (_clamp(co2, CO2_MIN, CO2_MAX) - CO2_MIN) * CO2_SCALE
    return _clamp(AQI_MAX - math.hypot(dx, dy), 0.0, AQI_MAX)


def calculate_air_quality(data: RuuviData) -> float | None:
    """AQI for records carrying both PM2.5 and CO2, else None."""
    if not isinstance(data, (DataFormatV6, DataFormatE1)):
        return None
    if data.pm2_5 is None or data.co2 is None:
        return None
    return calc_aqi(data.pm2_5, data.co2)
