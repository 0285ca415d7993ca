"""Climate zone, seasonal factor and baseline comfort temperature."""

from __future__ import annotations

from ..models import ClimateContext, ClimateZone

TROPIC_LATITUDE = 23.5
POLAR_CIRCLE_LATITUDE = 66.5

# Northern-hemisphere month semantics regardless of latitude sign.
SUMMER_MONTHS = frozenset({6, 7, 8})
WINTER_MONTHS = frozenset({12, 1, 2})

_BASE_COMFORT_TEMP = {
    ClimateZone.TROPICAL: 25.0,
    ClimateZone.TEMPERATE: 22.0,
    ClimateZone.POLAR: 20.0,
}

_SUMMER_FACTOR = {ClimateZone.TROPICAL: 1.1, ClimateZone.POLAR: 0.9}
_WINTER_FACTOR = {ClimateZone.TROPICAL: 0.9, ClimateZone.POLAR: 1.1}


def classify_zone(latitude: float) -> ClimateZone:
    """Classify by absolute latitude; hemispheres are treated alike."""

    magnitude = abs(latitude)
    if magnitude < TROPIC_LATITUDE:
        return ClimateZone.TROPICAL
    if magnitude > POLAR_CIRCLE_LATITUDE:
        return ClimateZone.POLAR
    return ClimateZone.TEMPERATE


def seasonal_factor(zone: ClimateZone, month: int) -> float:
    if month in SUMMER_MONTHS:
        return _SUMMER_FACTOR.get(zone, 1.0)
    if month in WINTER_MONTHS:
        return _WINTER_FACTOR.get(zone, 1.0)
    return 1.0


def comfort_temperature(zone: ClimateZone, month: int) -> float:
    temp = _BASE_COMFORT_TEMP[zone]
    if month in SUMMER_MONTHS:
        return temp + 1
    if month in WINTER_MONTHS:
        return temp - 1
    return temp


def resolve_climate_context(latitude: float, month: int) -> ClimateContext:
    """Derive the climate context for a location and month.

    Months outside 1-12 match neither season and get no adjustment.
    """

    zone = classify_zone(latitude)
    return ClimateContext(
        zone=zone,
        seasonal_factor=seasonal_factor(zone, month),
        comfort_temp=comfort_temperature(zone, month),
    )
