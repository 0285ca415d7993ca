"""Load weather samples from JSON files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Mapping

_CURRENT_KEYS = ("temp", "humidity", "wind_speed", "uvi", "pressure")
_POLLUTANT_KEYS = ("pm2_5", "pm10", "o3", "co", "no2", "so2")


def normalize_sample(payload: Mapping[str, object]) -> dict[str, object]:
    """Flatten a payload into the record expected by ``compute_cei``.

    Accepts either a flat record or an OpenWeather-shaped payload with a
    ``current`` block (carrying ``weather[0].id``) and a ``components`` block
    of pollutant concentrations. Values are not validated here.
    """

    if "current" not in payload and "components" not in payload:
        return dict(payload)

    current = payload.get("current") or {}
    components = payload.get("components") or {}
    if not isinstance(current, Mapping) or not isinstance(components, Mapping):
        raise ValueError("'current' and 'components' must be JSON objects")

    record: dict[str, object] = {}
    for key in _CURRENT_KEYS:
        if key in current:
            record[key] = current[key]
    for key in _POLLUTANT_KEYS:
        if key in components:
            record[key] = components[key]

    weather = current.get("weather")
    if isinstance(weather, list) and weather and isinstance(weather[0], Mapping):
        record["weather_id"] = weather[0].get("id")
    return record


def load_sample(path: Path) -> dict[str, object]:
    with path.open("r", encoding="utf-8") as fh:
        payload = json.load(fh)
    if not isinstance(payload, Mapping):
        raise ValueError(f"Weather sample in {path} must be a JSON object")
    return normalize_sample(payload)
