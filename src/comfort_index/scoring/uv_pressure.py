"""Step scores for UV exposure and deviation from standard pressure."""

from __future__ import annotations

from .lookup import first_match

STANDARD_PRESSURE_HPA = 1013.25

UV_STEPS = ((2, 100), (5, 85), (7, 70), (10, 55))
UV_FLOOR = 40

PRESSURE_STEPS = ((5, 100), (10, 90), (15, 80), (20, 70), (25, 60))
PRESSURE_FLOOR = 40


def uv_score(uvi: float) -> int:
    return first_match(uvi, UV_STEPS, UV_FLOOR)


def pressure_score(pressure: float) -> float:
    """Score by distance from 1013.25 hPa; past 25 hPa it decays linearly to 40."""

    deviation = abs(pressure - STANDARD_PRESSURE_HPA)
    return first_match(deviation, PRESSURE_STEPS, max(PRESSURE_FLOOR, 100 - deviation * 2))
