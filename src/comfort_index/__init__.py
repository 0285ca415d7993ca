"""Comfort Environment Index: weather and air quality to a 0-100 comfort score."""

from .config import ServiceConfig
from .errors import CEIValidationError, InvalidUnitError, MissingFieldError
from .models import CeiResult, ComponentScores, UnitSystem, WeatherSample
from .pipelines.cei import classify_level, compute_cei
from .pipelines.report import format_cei_report

__all__ = [
    "ServiceConfig",
    "CEIValidationError",
    "InvalidUnitError",
    "MissingFieldError",
    "CeiResult",
    "ComponentScores",
    "UnitSystem",
    "WeatherSample",
    "classify_level",
    "compute_cei",
    "format_cei_report",
]
