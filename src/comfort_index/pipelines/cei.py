"""Comfort Environment Index: validation, aggregation and level ladder."""

from __future__ import annotations

import logging
import math
import operator
from typing import Mapping, Optional

from ..errors import MissingFieldError
from ..models import CeiResult, ComponentScores, UnitSystem, WeatherSample, WeightSet
from ..scoring.air_quality import air_quality_score
from ..scoring.climate import resolve_climate_context
from ..scoring.lookup import first_match, round_half_up
from ..scoring.thermal import CLEAR_SKY, heat_index, thermal_score
from ..scoring.units import normalize_units
from ..scoring.uv_pressure import pressure_score, uv_score
from ..scoring.weights import dynamic_weights

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = (
    "temp",
    "humidity",
    "wind_speed",
    "pm2_5",
    "pm10",
    "o3",
    "co",
    "no2",
    "so2",
    "uvi",
    "pressure",
)

# Six tiers; the lowest carries no level number.
LEVELS = (
    (90, "CEI Level 1 – Excellent"),
    (75, "CEI Level 2 – Comfortable"),
    (60, "CEI Level 3 – Acceptable"),
    (45, "CEI Level 4 – Uncomfortable"),
    (30, "CEI Level 5 – Poor"),
)
SEVERE_LEVEL = "Severe"


def classify_level(cei: float) -> str:
    return first_match(cei, LEVELS, SEVERE_LEVEL, operator.ge)


def _coerce_number(data: Mapping[str, object], field: str) -> float:
    value = data.get(field)
    if value is None or isinstance(value, (bool, bytes, bytearray)):
        raise MissingFieldError(field)
    # float() also takes digit separators, which are not plain numbers.
    if isinstance(value, str) and "_" in value:
        raise MissingFieldError(field)
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise MissingFieldError(field) from exc
    if not math.isfinite(number):
        raise MissingFieldError(field)
    return number


def _coerce_weather_id(value: object) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, (bool, bytes, bytearray)) or (isinstance(value, str) and "_" in value):
        raise MissingFieldError("weather_id")
    try:
        return int(float(value))  # type: ignore[arg-type]
    except (TypeError, ValueError, OverflowError) as exc:
        raise MissingFieldError("weather_id") from exc


def validate_sample(data: Mapping[str, object], weather_id: Optional[object] = None) -> WeatherSample:
    """Check the eleven required readings and build a :class:`WeatherSample`.

    An explicit ``weather_id`` takes the place of the record's own field,
    which is then neither read nor checked.

    Raises :class:`MissingFieldError` naming the first bad field.
    """

    values = {field: _coerce_number(data, field) for field in REQUIRED_FIELDS}
    if weather_id is None:
        weather_id = data.get("weather_id")
    return WeatherSample(weather_id=_coerce_weather_id(weather_id), **values)


def aggregate(scores: ComponentScores, weights: WeightSet, seasonal_factor: float) -> float:
    """Weighted sum of unrounded sub-scores, scaled by season, clamped to [0, 100]."""

    cei = (
        weights.heat * scores.heat_score
        + weights.air * scores.air_score
        + weights.uv * scores.uv_score
        + weights.press * scores.press_score
    )
    cei *= seasonal_factor
    return max(0.0, min(100.0, cei))


def score_components(
    sample: WeatherSample,
    unit: UnitSystem,
    latitude: float,
    month: int,
    weather_id: Optional[int] = None,
) -> tuple[ComponentScores, WeightSet, float]:
    """Run the pipeline up to, but not including, aggregation."""

    if weather_id is None:
        weather_id = sample.weather_id if sample.weather_id is not None else CLEAR_SKY

    temp_c, wind_ms = normalize_units(sample.temp, sample.wind_speed, unit)
    context = resolve_climate_context(latitude, month)
    weights = dynamic_weights(temp_c, sample.pm2_5, sample.uvi, wind_ms)
    logger.debug(
        "Normalized temp=%.2f°C wind=%.2fm/s zone=%s factor=%.2f weights=%s",
        temp_c,
        wind_ms,
        context.zone.value,
        context.seasonal_factor,
        weights,
    )

    hi = heat_index(temp_c, sample.humidity)
    scores = ComponentScores(
        heat_score=thermal_score(temp_c, sample.humidity, wind_ms, hi, weather_id, context.comfort_temp),
        air_score=air_quality_score(
            sample.pm2_5, sample.pm10, sample.o3, sample.co, sample.no2, sample.so2
        ),
        uv_score=uv_score(sample.uvi),
        press_score=pressure_score(sample.pressure),
    )
    logger.debug("Component scores: %s", scores)
    return scores, weights, context.seasonal_factor


def compute_cei(
    unit: object,
    data: Mapping[str, object],
    latitude: float,
    month: int,
    weather_id: Optional[int] = None,
) -> CeiResult:
    """Compute the Comfort Environment Index for one weather sample.

    ``data`` holds temp, humidity, wind_speed, pm2_5, pm10, o3, co, no2, so2,
    uvi and pressure, plus an optional weather_id used when ``weather_id`` is
    not passed. Without either the sky is taken as clear (800).

    Raises :class:`InvalidUnitError` or :class:`MissingFieldError` before any
    scoring when the input is rejected.
    """

    unit_system = UnitSystem.parse(unit)
    sample = validate_sample(data, weather_id)

    scores, weights, factor = score_components(sample, unit_system, latitude, month)
    cei = aggregate(scores, weights, factor)

    return CeiResult(
        cei=round_half_up(cei),
        level=classify_level(cei),
        components=ComponentScores(
            heat_score=round_half_up(scores.heat_score),
            air_score=round_half_up(scores.air_score),
            uv_score=round_half_up(scores.uv_score),
            press_score=round_half_up(scores.press_score),
        ),
    )
