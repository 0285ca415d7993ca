from __future__ import annotations

import pytest

from comfort_index.scoring.thermal import (
    effective_temperature,
    heat_index,
    thermal_score,
    weather_penalty,
    wind_chill,
)


def test_heat_index_not_applied_below_20c() -> None:
    assert heat_index(19.9, 90.0) == 19.9


def test_heat_index_hot_and_humid() -> None:
    assert heat_index(35.0, 80.0) == pytest.approx(56.5466, abs=1e-3)


def test_wind_chill_cold_and_windy() -> None:
    assert wind_chill(6.0, 9.85) == pytest.approx(0.935, abs=0.01)


@pytest.mark.parametrize("temp_c, wind_ms", [(10.0, 5.0), (5.0, 1.3), (5.0, 0.0), (5.0, -4.0)])
def test_wind_chill_only_applies_when_cold_and_windy(temp_c: float, wind_ms: float) -> None:
    assert wind_chill(temp_c, wind_ms) == temp_c


def test_effective_temperature_switches_at_20c() -> None:
    assert effective_temperature(20.0, 10.0, 23.5) == 23.5
    assert effective_temperature(19.0, 10.0, 19.0) == 19.0
    assert effective_temperature(5.0, 5.0, 5.0) == pytest.approx(wind_chill(5.0, 5.0))


@pytest.mark.parametrize(
    "code, penalty",
    [
        (200, 15),
        (212, 20),
        (232, 20),
        (301, 6),
        (500, 8),
        (521, 12),
        (504, 16),
        (511, 20),
        (599, 12),
        (600, 12),
        (612, 16),
        (622, 20),
        (741, 10),
        (762, 18),
        (781, 25),
        (799, 12),
        (800, 0),
        (801, 1),
        (802, 2),
        (803, 4),
        (804, 6),
        (805, 0),
        (450, 0),
        (-1, 0),
        (None, 0),
    ],
)
def test_weather_penalty(code, penalty: int) -> None:
    assert weather_penalty(code) == penalty


def test_tornado_is_the_worst_documented_penalty() -> None:
    documented = list(range(200, 400)) + list(range(500, 805))
    assert max(weather_penalty(code) for code in documented) == weather_penalty(781) == 25


def test_thermal_score_cold_windy_broken_clouds() -> None:
    score = thermal_score(6.0, 46.0, 9.85, 6.0, 803, 24.0)
    assert score == pytest.approx(53.38, abs=0.01)


def test_thermal_score_perfect_conditions() -> None:
    assert thermal_score(19.0, 50.0, 2.0, 19.0, 800, 19.0) == pytest.approx(100.0)
    assert thermal_score(19.0, 50.0, 2.0, 19.0, 781, 19.0) == pytest.approx(75.0)


def test_thermal_score_floor_is_ten() -> None:
    hi = heat_index(45.0, 100.0)
    assert thermal_score(45.0, 100.0, 20.0, hi, 781, 22.0) == 10


def test_heat_comfort_uses_heat_index_even_in_the_cold() -> None:
    plain = thermal_score(5.0, 50.0, 5.0, 5.0, 800, 22.0)
    with_hot_index = thermal_score(5.0, 50.0, 5.0, 30.0, 800, 22.0)
    assert plain - with_hot_index == pytest.approx(6.0)
