"""Data records passed through the CEI pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .errors import InvalidUnitError


class UnitSystem(str, Enum):
    """How temperature and wind speed in a sample are expressed."""

    METRIC = "metric"  # °C, m/s
    IMPERIAL = "imperial"  # °F, mph
    STANDARD = "standard"  # K, m/s

    @classmethod
    def parse(cls, value: object) -> "UnitSystem":
        if isinstance(value, cls):
            return value
        for member in cls:
            if member.value == value:
                return member
        raise InvalidUnitError(value)


class ClimateZone(str, Enum):
    TROPICAL = "tropical"
    TEMPERATE = "temperate"
    POLAR = "polar"


@dataclass(frozen=True)
class WeatherSample:
    """Raw weather and air-quality readings for one location and moment."""

    temp: float
    humidity: float
    wind_speed: float
    pm2_5: float
    pm10: float
    o3: float
    co: float
    no2: float
    so2: float
    uvi: float
    pressure: float
    weather_id: Optional[int] = None


@dataclass(frozen=True)
class ClimateContext:
    zone: ClimateZone
    seasonal_factor: float
    comfort_temp: float


@dataclass(frozen=True)
class WeightSet:
    """Normalized weights for the four sub-scores."""

    heat: float
    air: float
    uv: float
    press: float

    @property
    def total(self) -> float:
        return self.heat + self.air + self.uv + self.press


@dataclass(frozen=True)
class ComponentScores:
    heat_score: float
    air_score: float
    uv_score: float
    press_score: float


@dataclass(frozen=True)
class CeiResult:
    """Final index, its level label and the rounded sub-scores."""

    cei: int
    level: str
    components: ComponentScores

    def to_dict(self) -> dict[str, object]:
        return {
            "cei": self.cei,
            "level": self.level,
            "components": {
                "heatScore": self.components.heat_score,
                "airScore": self.components.air_score,
                "uvScore": self.components.uv_score,
                "pressScore": self.components.press_score,
            },
        }
