"""Pure scoring functions for each stage of the CEI pipeline."""

from .air_quality import air_quality_score, pollutant_scores
from .climate import classify_zone, resolve_climate_context
from .lookup import first_match, round_half_up
from .thermal import heat_index, thermal_score, weather_penalty, wind_chill
from .units import normalize_units
from .uv_pressure import pressure_score, uv_score
from .weights import dynamic_weights

__all__ = [
    "air_quality_score",
    "pollutant_scores",
    "classify_zone",
    "resolve_climate_context",
    "first_match",
    "round_half_up",
    "heat_index",
    "thermal_score",
    "weather_penalty",
    "wind_chill",
    "normalize_units",
    "pressure_score",
    "uv_score",
    "dynamic_weights",
]
