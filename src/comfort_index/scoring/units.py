"""Temperature and wind speed normalization to °C and m/s."""

from __future__ import annotations

from typing import Tuple

from ..models import UnitSystem

MPH_PER_MS = 2.237
KELVIN_OFFSET = 273.15


def normalize_units(temperature: float, wind_speed: float, unit: UnitSystem) -> Tuple[float, float]:
    """Return ``(temp_c, wind_ms)`` for readings expressed in ``unit``.

    Only temperature and wind are converted. Pressure, humidity, UV and
    pollutant readings are taken as already canonical whatever the unit.
    """

    if unit is UnitSystem.IMPERIAL:
        return (temperature - 32) * 5 / 9, wind_speed / MPH_PER_MS
    if unit is UnitSystem.STANDARD:
        return temperature - KELVIN_OFFSET, wind_speed
    return temperature, wind_speed
