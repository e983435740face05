"""Compute a wet race tune for an upgraded Nissan GT-R."""

from __future__ import annotations

import logging
from pathlib import Path

from fh5tune.analysis import export_tune_json, format_tune_sheet, summarize_tune
from fh5tune.car import find_car, load_car_catalog
from fh5tune.tuning import compute_tune
from fh5tune.utils import configure_logging

UPGRADES = {
    "Platform": {"Springs": "Race", "Brakes": "Race", "Weight Reduction": "Sport"},
    "Aero": {"Rear Wing": "Race", "Front Bumper": "Race"},
    "Drivetrain": {"Transmission": "Race: 7 Speed", "Differential": "Race"},
    "Tires": {"Front Compound": "Race Slick", "Rear Compound": "Race Slick"},
}


def main() -> None:
    """Compute the GT-R race tune and export sheet text plus JSON."""
    configure_logging(logging.INFO)
    logger = logging.getLogger("gtr_example")

    project_root = Path(__file__).resolve().parents[1]
    cars = load_car_catalog(project_root / "data" / "sample_cars.json")
    car = find_car(cars, "Nissan", "GT-R (R35)")
    if car is None:
        logger.error("GT-R missing from sample catalog")
        return

    tune = compute_tune(car, UPGRADES, "Race", "Wet")
    summary = summarize_tune(tune)

    output_dir = project_root / "examples" / "output"
    export_tune_json(tune, output_dir / "gtr_race_wet.json")
    print(format_tune_sheet(tune, car, "Race"))

    logger.info("Gears: %d | ratio spread: %.2f", tune.gear_count, summary.ratio_spread)
    logger.info("Front spring share: %.1f %%", 100.0 * summary.spring_front_share)


if __name__ == "__main__":
    main()
