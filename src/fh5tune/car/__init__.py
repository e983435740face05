"""Car specifications and catalog loading."""

from fh5tune.car.io import (
    car_from_record,
    cars_from_records,
    find_car,
    load_car_catalog,
    load_car_catalog_csv,
    normalize_drivetrain,
)
from fh5tune.car.models import VALID_DRIVETRAINS, Car

__all__ = [
    "VALID_DRIVETRAINS",
    "Car",
    "car_from_record",
    "cars_from_records",
    "find_car",
    "load_car_catalog",
    "load_car_catalog_csv",
    "normalize_drivetrain",
]
