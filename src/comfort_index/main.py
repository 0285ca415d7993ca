"""Command-line interface for Comfort Environment Index calculations."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import ProjectPaths, ServiceConfig
from .data_sources.sample_file import load_sample
from .errors import CEIValidationError
from .models import CeiResult, UnitSystem
from .pipelines.cei import LEVELS, SEVERE_LEVEL, compute_cei
from .pipelines.report import format_cei_report

PROJECT_ROOT = Path(__file__).resolve().parents[2]

# Parameters of the bundled sample.
SAMPLE_LATITUDE = 34.05
SAMPLE_MONTH = 11

logger = logging.getLogger(__name__)


def _print_result(result: CeiResult, as_json: bool, location: Optional[str] = None) -> None:
    if as_json:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    else:
        print(format_cei_report(result, location=location))


def _score_file(
    path: Path,
    unit: str,
    latitude: float,
    month: int,
    weather_id: Optional[int],
    as_json: bool,
) -> int:
    try:
        data = load_sample(path)
    except (OSError, ValueError) as exc:
        print(f"Could not read weather sample {path}: {exc}", file=sys.stderr)
        return 1

    try:
        result = compute_cei(unit, data, latitude, month, weather_id)
    except CEIValidationError as exc:
        logger.info("Rejected sample %s: %s", path, exc)
        if as_json:
            print(json.dumps(exc.as_dict()))
        else:
            print(f"Invalid input: {exc}", file=sys.stderr)
        return 1

    _print_result(result, as_json, location=f"lat {latitude:.2f}, month {month}")
    return 0


def cmd_score(args: argparse.Namespace, config: ServiceConfig) -> int:
    """Score a weather sample file."""

    month = args.month if args.month is not None else config.current_month()
    unit = args.unit or config.default_unit.value
    return _score_file(args.file, unit, args.lat, month, args.weather_id, args.json)


def cmd_sample(args: argparse.Namespace, config: ServiceConfig) -> int:
    """Score the bundled sample."""

    paths = ProjectPaths.from_root(args.project_root)
    return _score_file(
        paths.sample_file,
        UnitSystem.METRIC.value,
        SAMPLE_LATITUDE,
        SAMPLE_MONTH,
        None,
        args.json,
    )


def cmd_levels(args: argparse.Namespace, config: ServiceConfig) -> int:
    """Print the level ladder."""

    for threshold, label in LEVELS:
        print(f">= {threshold:>3}  {label}")
    print(f"<  {LEVELS[-1][0]:>3}  {SEVERE_LEVEL}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Comfort Environment Index (CEI) calculator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
examples:
  comfort-index score sample.json --lat 22.3 --month 1
  comfort-index score sample.json --unit imperial --lat 40.7 --json
  comfort-index sample
  comfort-index levels

environment:
  COMFORT_INDEX_UNIT       default unit system (metric, imperial, standard)
  COMFORT_INDEX_TIMEZONE   timezone used to pick the current month (default: UTC)
  COMFORT_INDEX_LOG_LEVEL  logging level (default: WARNING)
        """,
    )
    subparsers = parser.add_subparsers(dest="command", help="command")

    score = subparsers.add_parser("score", help="score a JSON weather sample")
    score.add_argument("file", type=Path, help="JSON file with the weather sample")
    score.add_argument("--unit", choices=[u.value for u in UnitSystem], default=None, help="unit system of temp and wind")
    score.add_argument("--lat", type=float, required=True, help="latitude in degrees")
    score.add_argument("--month", type=int, default=None, help="month 1-12 (default: current month)")
    score.add_argument("--weather-id", type=int, default=None, help="OpenWeather condition code")
    score.add_argument("--json", action="store_true", help="print the result record as JSON")

    sample = subparsers.add_parser("sample", help="score the bundled sample")
    sample.add_argument("--project-root", type=Path, default=PROJECT_ROOT, help="project root for locating data files")
    sample.add_argument("--json", action="store_true", help="print the result record as JSON")

    subparsers.add_parser("levels", help="show the CEI level ladder")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main CLI entry point."""

    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = ServiceConfig.from_env()
    except CEIValidationError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 1
    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")

    if not args.command:
        parser.print_help()
        return 0

    command_handlers = {
        "score": cmd_score,
        "sample": cmd_sample,
        "levels": cmd_levels,
    }
    return command_handlers[args.command](args, config)


if __name__ == "__main__":
    sys.exit(main())
