"""Condition-dependent weights for the heat / air / UV / pressure sub-scores."""

from __future__ import annotations

from ..models import WeightSet

BASE_WEIGHTS = {"heat": 0.4, "air": 0.4, "uv": 0.1, "press": 0.1}
MIN_WEIGHT = 0.05


def dynamic_weights(temp_c: float, pm2_5: float, uvi: float, wind_ms: float) -> WeightSet:
    weights = dict(BASE_WEIGHTS)

    if temp_c > 30:
        weights["heat"] = 0.5
    elif temp_c < 15:
        weights["heat"] = 0.6

    # Strong wind makes thermal comfort matter more.
    if wind_ms > 8:
        weights["heat"] += 0.05
    if wind_ms > 12:
        weights["heat"] += 0.05

    if pm2_5 > 35:
        weights["air"] = 0.5

    if uvi > 8:
        weights["uv"] = 0.2

    weights = {key: max(MIN_WEIGHT, value) for key, value in weights.items()}
    total = sum(weights.values())
    return WeightSet(**{key: value / total for key, value in weights.items()})
