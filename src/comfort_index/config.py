"""Configuration helpers for the comfort-index project."""

from __future__ import annotations

import datetime as dt
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import pytz

from .models import UnitSystem


@dataclass(frozen=True)
class ServiceConfig:
    """Defaults applied by the CLI and web wrapper around the scoring core."""

    default_unit: UnitSystem = UnitSystem.METRIC
    timezone: str = "UTC"
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "ServiceConfig":
        return cls(
            default_unit=UnitSystem.parse(os.getenv("COMFORT_INDEX_UNIT", UnitSystem.METRIC.value)),
            timezone=os.getenv("COMFORT_INDEX_TIMEZONE", "UTC"),
            log_level=os.getenv("COMFORT_INDEX_LOG_LEVEL", "WARNING").upper(),
        )

    def current_month(self, now: Optional[dt.datetime] = None) -> int:
        """Month of ``now`` (default: the present) in the configured timezone."""

        tz = pytz.timezone(self.timezone)
        if now is None:
            return dt.datetime.now(tz).month
        if now.tzinfo is None:
            now = pytz.utc.localize(now)
        return now.astimezone(tz).month


@dataclass(frozen=True)
class ProjectPaths:
    """Centralizes the canonical project directories."""

    root: Path
    data_raw: Path

    @classmethod
    def from_root(cls, root: Path) -> "ProjectPaths":
        return cls(root=root, data_raw=root / "data" / "raw")

    @property
    def sample_file(self) -> Path:
        return self.data_raw / "sample-weather.json"
