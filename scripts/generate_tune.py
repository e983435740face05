"""Generate a tune sheet for one catalog car."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from fh5tune.analysis import export_standard_plots, export_tune_json, format_tune_sheet
from fh5tune.car import find_car, load_car_catalog, load_car_catalog_csv
from fh5tune.tuning import VALID_TUNE_STYLES, VALID_WEATHER_PRESETS, compute_tune
from fh5tune.utils import configure_logging
from fh5tune.utils.exceptions import TuneError

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parents[1] / "data" / "sample_cars.json"

logger = logging.getLogger("generate_tune")


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments.

    Args:
        argv: Optional argument list; defaults to ``sys.argv[1:]``.

    Returns:
        Parsed command-line namespace.
    """
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--catalog", type=Path, default=DEFAULT_CATALOG_PATH)
    parser.add_argument("--manufacturer", required=True)
    parser.add_argument("--model", required=True)
    parser.add_argument("--year", type=int, default=None)
    parser.add_argument("--style", choices=VALID_TUNE_STYLES, default="Race")
    parser.add_argument("--weather", choices=VALID_WEATHER_PRESETS, default="Dry")
    parser.add_argument(
        "--upgrades",
        type=Path,
        default=None,
        help="JSON file with a section -> part -> option upgrade selection.",
    )
    parser.add_argument("--json-out", type=Path, default=None, help="Write the tune as JSON.")
    parser.add_argument("--plots-dir", type=Path, default=None, help="Write tune plots here.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Compute one tune from the command line and print its sheet.

    Args:
        argv: Optional argument list; defaults to ``sys.argv[1:]``.

    Returns:
        Process exit code.
    """
    args = _parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        if args.catalog.suffix.lower() == ".csv":
            cars = load_car_catalog_csv(args.catalog)
        else:
            cars = load_car_catalog(args.catalog)
        car = find_car(cars, args.manufacturer, args.model, args.year)
        if car is None:
            logger.error("Car not found in %s: %s %s", args.catalog, args.manufacturer, args.model)
            return 1

        upgrades = {}
        if args.upgrades is not None:
            upgrades = json.loads(args.upgrades.read_text(encoding="utf-8"))
            if not isinstance(upgrades, dict):
                logger.error("Upgrade file must hold a JSON object: %s", args.upgrades)
                return 1

        tune = compute_tune(car, upgrades, args.style, args.weather)
    except (TuneError, OSError, json.JSONDecodeError) as exc:
        logger.error("Tune generation failed: %s", exc)
        return 1

    print(format_tune_sheet(tune, car, args.style))
    if args.json_out is not None:
        export_tune_json(tune, args.json_out)
        logger.info("Wrote tune JSON to %s", args.json_out)
    if args.plots_dir is not None:
        export_standard_plots({args.style: tune}, args.plots_dir)
        logger.info("Wrote tune plots to %s", args.plots_dir)
    return 0


if __name__ == "__main__":
    sys.exit(main())
