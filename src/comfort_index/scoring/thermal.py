"""Thermal comfort from heat index, wind chill and the sky condition."""

from __future__ import annotations

from typing import NamedTuple, Optional, Sequence, Tuple

from .lookup import first_match, is_member

CLEAR_SKY = 800

# Steadman-style heat index coefficients for °C and %RH.
_HI_C1 = -8.78469475556
_HI_C2 = 1.61139411
_HI_C3 = 2.33854883889
_HI_C4 = -0.14611605
_HI_C5 = -0.012308094
_HI_C6 = -0.0164248277778
_HI_C7 = 0.002211732
_HI_C8 = 0.00072546
_HI_C9 = -0.000003582


class PenaltyGroup(NamedTuple):
    """One OpenWeather condition group and its penalties."""

    name: str
    codes: range
    specific: Sequence[Tuple[frozenset, int]]
    default: int


WEATHER_PENALTY_GROUPS: Tuple[PenaltyGroup, ...] = (
    PenaltyGroup("thunderstorm", range(200, 300), ((frozenset({212, 221, 232}), 20),), 15),
    PenaltyGroup("drizzle", range(300, 400), (), 6),
    PenaltyGroup(
        "rain",
        range(500, 600),
        (
            (frozenset({500, 520}), 8),
            (frozenset({501, 521, 531}), 12),
            (frozenset({502, 503, 504, 522}), 16),
            (frozenset({511}), 20),  # freezing rain
        ),
        12,
    ),
    PenaltyGroup(
        "snow",
        range(600, 700),
        (
            (frozenset({600, 615, 620}), 12),
            (frozenset({601, 612, 621}), 16),
        ),
        20,
    ),
    PenaltyGroup(
        "atmosphere",
        range(700, 800),
        (
            (frozenset({701, 711, 721, 741}), 10),  # mist, smoke, haze, fog
            (frozenset({731, 751, 761, 762, 771}), 18),  # sand, dust, ash, squalls
            (frozenset({781}), 25),  # tornado
        ),
        12,
    ),
    PenaltyGroup("clear", range(CLEAR_SKY, CLEAR_SKY + 1), (), 0),
    PenaltyGroup(
        "clouds",
        range(801, 805),
        (
            (frozenset({801}), 1),
            (frozenset({802}), 2),
            (frozenset({803}), 4),
            (frozenset({804}), 6),
        ),
        0,
    ),
)

_GROUP_TABLE = tuple((group.codes, group) for group in WEATHER_PENALTY_GROUPS)


def heat_index(temp_c: float, humidity: float) -> float:
    """Perceived temperature in warm, humid air. Below 20°C returns ``temp_c``."""

    if temp_c < 20:
        return temp_c

    t, rh = temp_c, humidity
    return (
        _HI_C1
        + _HI_C2 * t
        + _HI_C3 * rh
        + _HI_C4 * t * rh
        + _HI_C5 * t * t
        + _HI_C6 * rh * rh
        + _HI_C7 * t * t * rh
        + _HI_C8 * t * rh * rh
        + _HI_C9 * t * t * rh * rh
    )


def wind_chill(temp_c: float, wind_ms: float) -> float:
    """Perceived temperature in cold wind, only below 10°C and above 1.3 m/s."""

    if temp_c >= 10 or wind_ms <= 1.3:
        return temp_c

    wind_factor = (wind_ms * 3.6) ** 0.16
    return 13.12 + 0.6215 * temp_c - 11.37 * wind_factor + 0.3965 * temp_c * wind_factor


def effective_temperature(temp_c: float, wind_ms: float, heat_index_c: float) -> float:
    if temp_c >= 20:
        return heat_index_c
    return wind_chill(temp_c, wind_ms)


def weather_penalty(weather_id: Optional[int]) -> int:
    """Discomfort penalty in [0, 25] for an OpenWeather condition code.

    Codes outside every known group carry no penalty.
    """

    if weather_id is None:
        return 0
    group = first_match(weather_id, _GROUP_TABLE, None, is_member)
    if group is None:
        return 0
    return first_match(weather_id, group.specific, group.default, is_member)


def thermal_score(
    temp_c: float,
    humidity: float,
    wind_ms: float,
    heat_index_c: float,
    weather_id: Optional[int],
    comfort_temp: float,
) -> float:
    """Thermal sub-score clamped to [10, 100]."""

    effective = effective_temperature(temp_c, wind_ms, heat_index_c)

    temp_comfort = 100 - min(90, abs(effective - comfort_temp) * 4)
    humidity_comfort = 100 - min(80, abs(humidity - 50) * 1.6)

    if wind_ms <= 3:
        wind_comfort = 100.0
    else:
        wind_comfort = max(20, 100 - (wind_ms - 3) * 10)

    # Always the heat index, even when wind chill drives the effective temperature.
    if heat_index_c <= 27:
        heat_comfort = 100.0
    else:
        heat_comfort = max(20, 100 - (heat_index_c - 27) * 10)

    score = (
        0.3 * temp_comfort
        + 0.3 * humidity_comfort
        + 0.2 * wind_comfort
        + 0.2 * heat_comfort
    )
    score -= weather_penalty(weather_id)

    return max(10, min(100, score))
