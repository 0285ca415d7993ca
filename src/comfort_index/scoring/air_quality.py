"""Air quality sub-score: the worst of six pollutant scores governs."""

from __future__ import annotations

from .lookup import first_match

FLOOR_SCORE = 10

# (inclusive upper bound, score), ascending. µg/m³ except CO in mg/m³.
PM2_5_BREAKPOINTS = ((5, 100), (15, 80), (25, 60), (35, 40), (50, 20))
PM10_BREAKPOINTS = ((15, 100), (45, 80), (60, 60), (90, 40), (120, 20))
O3_BREAKPOINTS = ((60, 100), (100, 80), (130, 60), (160, 40), (200, 20))
CO_BREAKPOINTS = ((1, 100), (4, 80), (7, 60), (10, 40), (15, 20))
NO2_BREAKPOINTS = ((10, 100), (25, 80), (40, 60), (60, 40), (80, 20))
SO2_BREAKPOINTS = ((20, 100), (40, 80), (60, 60), (80, 40), (100, 20))


def pollutant_score(concentration: float, breakpoints) -> int:
    return first_match(concentration, breakpoints, FLOOR_SCORE)


def pollutant_scores(
    pm2_5: float,
    pm10: float,
    o3: float,
    co: float,
    no2: float,
    so2: float,
) -> dict[str, int]:
    """Score each pollutant on its own. ``co`` is given in µg/m³."""

    co_mg = co / 1000.0
    return {
        "pm2_5": pollutant_score(pm2_5, PM2_5_BREAKPOINTS),
        "pm10": pollutant_score(pm10, PM10_BREAKPOINTS),
        "o3": pollutant_score(o3, O3_BREAKPOINTS),
        "co": pollutant_score(co_mg, CO_BREAKPOINTS),
        "no2": pollutant_score(no2, NO2_BREAKPOINTS),
        "so2": pollutant_score(so2, SO2_BREAKPOINTS),
    }


def air_quality_score(pm2_5: float, pm10: float, o3: float, co: float, no2: float, so2: float) -> int:
    return min(pollutant_scores(pm2_5, pm10, o3, co, no2, so2).values())
