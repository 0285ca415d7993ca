from __future__ import annotations

import datetime as dt
import json
from pathlib import Path

import pytest

from comfort_index import main as cli
from comfort_index.config import ProjectPaths, ServiceConfig
from comfort_index.models import UnitSystem
from comfort_index.errors import InvalidUnitError

SAMPLE = {
    "temp": 6.0,
    "humidity": 46,
    "wind_speed": 9.85,
    "pm2_5": 3,
    "pm10": 6,
    "o3": 50,
    "co": 150,
    "no2": 12,
    "so2": 5,
    "uvi": 1.4,
    "pressure": 1036,
}


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("COMFORT_INDEX_UNIT", "COMFORT_INDEX_TIMEZONE", "COMFORT_INDEX_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def _write_sample(tmp_path: Path, payload: dict) -> Path:
    path = tmp_path / "sample.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_score_prints_json(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write_sample(tmp_path, SAMPLE)

    exit_code = cli.main(["score", str(path), "--lat", "22.3", "--month", "1", "--weather-id", "803", "--json"])

    assert exit_code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["cei"] == 60
    assert payload["components"]["airScore"] == 80


def test_score_prints_report(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write_sample(tmp_path, SAMPLE)

    assert cli.main(["score", str(path), "--lat", "22.3", "--month", "1"]) == 0
    out = capsys.readouterr().out
    assert "CEI:" in out
    assert "Thermal:" in out


def test_score_reports_missing_field(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    payload = dict(SAMPLE)
    del payload["pressure"]
    path = _write_sample(tmp_path, payload)

    assert cli.main(["score", str(path), "--lat", "22.3", "--month", "1", "--json"]) == 1
    assert json.loads(capsys.readouterr().out) == {"error": "Missing or invalid field: pressure"}


def test_score_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["score", str(tmp_path / "nope.json"), "--lat", "0"]) == 1
    assert "Could not read weather sample" in capsys.readouterr().err


def test_score_uses_unit_from_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setenv("COMFORT_INDEX_UNIT", "imperial")
    path = _write_sample(tmp_path, dict(SAMPLE, temp=50.0, wind_speed=10.0))
    metric_path = tmp_path / "metric.json"
    metric_path.write_text(json.dumps(dict(SAMPLE, temp=10.0, wind_speed=10.0 / 2.237)), encoding="utf-8")

    assert cli.main(["score", str(path), "--lat", "45", "--month", "4", "--json"]) == 0
    imperial = json.loads(capsys.readouterr().out)
    assert cli.main(["score", str(metric_path), "--lat", "45", "--month", "4", "--unit", "metric", "--json"]) == 0
    metric = json.loads(capsys.readouterr().out)
    assert imperial == metric


def test_invalid_unit_in_env(capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COMFORT_INDEX_UNIT", "bogus")
    assert cli.main(["levels"]) == 1
    assert "Invalid unit type: bogus" in capsys.readouterr().err


def test_sample_command(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["sample", "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["cei"] == 67
    assert payload["level"] == "CEI Level 3 – Acceptable"


def test_levels_command(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["levels"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 6
    assert lines[-1].endswith("Severe")


def test_service_config_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COMFORT_INDEX_UNIT", "standard")
    monkeypatch.setenv("COMFORT_INDEX_TIMEZONE", "Asia/Hong_Kong")
    monkeypatch.setenv("COMFORT_INDEX_LOG_LEVEL", "debug")

    config = ServiceConfig.from_env()

    assert config.default_unit is UnitSystem.STANDARD
    assert config.timezone == "Asia/Hong_Kong"
    assert config.log_level == "DEBUG"


def test_service_config_rejects_unknown_unit(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COMFORT_INDEX_UNIT", "furlongs")
    with pytest.raises(InvalidUnitError):
        ServiceConfig.from_env()


def test_current_month_respects_timezone() -> None:
    new_year_utc = dt.datetime(2024, 12, 31, 20, 0)
    assert ServiceConfig(timezone="UTC").current_month(new_year_utc) == 12
    assert ServiceConfig(timezone="Asia/Hong_Kong").current_month(new_year_utc) == 1


def test_project_paths(tmp_path: Path) -> None:
    paths = ProjectPaths.from_root(tmp_path)
    assert paths.sample_file == tmp_path / "data" / "raw" / "sample-weather.json"
