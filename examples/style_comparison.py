"""Compare every driving style for one catalog car."""

from __future__ import annotations

import logging
from pathlib import Path

from fh5tune.analysis import compare_styles, export_standard_plots
from fh5tune.car import find_car, load_car_catalog
from fh5tune.tuning import VALID_TUNE_STYLES, compute_tune
from fh5tune.utils import configure_logging

COMPARED_COLUMNS = [
    "final_drive",
    "differential_accel",
    "spring_front",
    "spring_rear",
    "tire_pressure_front",
    "downforce_rear",
    "brake_bias",
]


def main() -> None:
    """Tabulate and plot all style tunes for the Porsche 911 GT3 RS."""
    configure_logging(logging.INFO)
    logger = logging.getLogger("style_comparison")

    project_root = Path(__file__).resolve().parents[1]
    cars = load_car_catalog(project_root / "data" / "sample_cars.json")
    car = find_car(cars, "Porsche", "911 GT3 RS")
    if car is None:
        logger.error("911 GT3 RS missing from sample catalog")
        return

    frame = compare_styles(car)
    logger.info("Style comparison for %s:\n%s", car.display_name, frame[COMPARED_COLUMNS])

    tunes = {style: compute_tune(car, {}, style, "Dry") for style in VALID_TUNE_STYLES}
    export_standard_plots(tunes, project_root / "examples" / "output" / "styles")


if __name__ == "__main__":
    main()
