"""Car catalog loading from JSON and CSV files."""

from __future__ import annotations

import csv
import json
import logging
import math
import re
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from fh5tune.car.models import Car
from fh5tune.utils.exceptions import CatalogDataError, InvalidCarSpecError

logger = logging.getLogger(__name__)

DEFAULT_DRIVETRAIN = "RWD"

_FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "manufacturer": ("Manufacturer", "manufacturer", "Make"),
    "model": ("Model", "model", "Car"),
    "year": ("Year", "year", "YEAR"),
    "pi": ("PI", "Pi", "pi"),
    "power_hp": ("Power", "power", "power_hp"),
    "weight_lbs": ("Weight", "weight", "weight_lbs", "Weight_lbs"),
    "drivetrain": ("Drivetrain", "drivetrain"),
    "engine_type": ("EngineType", "Engine_Type", "Engine Type", "engine_type"),
    "aspiration": ("Aspiration", "aspiration"),
    "displacement_l": (
        "EngineSize",
        "Engine_Displacement",
        "Displacement_L",
        "Displacement",
        "displacement_l",
    ),
    "gears": ("Gears", "gears"),
    "weight_distribution_front": ("WeightDistribution", "weight_distribution_front"),
    "top_speed_mph": ("TopSpeed", "top_speed_mph"),
    "torque_ftlb": ("Torque", "torque_ftlb"),
}

_NUMBER_NOISE = re.compile(r"[,\s]+")


def _lookup(record: Mapping[str, Any], field: str) -> Any:
    """Return the first present alias value for a logical field.

    Args:
        record: Raw catalog record.
        field: Logical field name, a key of ``_FIELD_ALIASES``.

    Returns:
        Raw value, or ``None`` when no alias is present.
    """
    for key in _FIELD_ALIASES[field]:
        if record.get(key) is not None:
            return record[key]
    return None


def _clean_text(value: Any) -> str:
    """Strip and collapse internal whitespace.

    Args:
        value: Raw value of any type.

    Returns:
        Normalized string, empty for ``None``.
    """
    if value is None:
        return ""
    return " ".join(str(value).split())


def _to_number(value: Any) -> float | None:
    """Parse a loosely formatted number such as ``"3,865"``.

    Args:
        value: Raw value of any type.

    Returns:
        Parsed finite float, or ``None`` if the value is empty or invalid.
    """
    if value is None or value == "":
        return None
    try:
        number = float(_NUMBER_NOISE.sub("", str(value)))
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def normalize_drivetrain(raw: Any) -> str | None:
    """Map free-form drivetrain text to a drivetrain code.

    Args:
        raw: Catalog drivetrain text, e.g. ``"Rear-Wheel Drive"`` or ``"AWD"``.

    Returns:
        One of ``RWD``, ``FWD``, ``AWD``, ``4WD``, or ``None`` if unrecognized.
    """
    text = _clean_text(raw).lower()
    if not text:
        return None
    if text in ("rwd", "fwd", "awd", "4wd"):
        return text.upper()
    if "rear" in text:
        return "RWD"
    if "front" in text:
        return "FWD"
    if "all" in text:
        return "AWD"
    if "4" in text:
        return "4WD"
    return None


def car_from_record(record: Mapping[str, Any]) -> Car | None:
    """Build a validated car from one loosely keyed catalog record.

    Args:
        record: Raw record with catalog or snake_case keys.

    Returns:
        Validated car, or ``None`` when required data is missing or invalid.
    """
    manufacturer = _clean_text(_lookup(record, "manufacturer"))
    model = _clean_text(_lookup(record, "model"))
    year = _to_number(_lookup(record, "year"))
    pi = _to_number(_lookup(record, "pi"))
    power_hp = _to_number(_lookup(record, "power_hp"))
    weight_lbs = _to_number(_lookup(record, "weight_lbs"))
    if not manufacturer or not model or None in (year, pi, power_hp, weight_lbs):
        return None

    gears = _to_number(_lookup(record, "gears"))
    car = Car(
        manufacturer=manufacturer,
        model=model,
        year=int(year),
        pi=int(pi),
        drivetrain=normalize_drivetrain(_lookup(record, "drivetrain")) or DEFAULT_DRIVETRAIN,
        power_hp=power_hp,
        weight_lbs=weight_lbs,
        engine_type=_clean_text(_lookup(record, "engine_type")) or "Unknown",
        aspiration=_clean_text(_lookup(record, "aspiration")) or "Unknown",
        displacement_l=_to_number(_lookup(record, "displacement_l")) or 0.0,
        gears=int(gears) if gears is not None else None,
        weight_distribution_front=_to_number(_lookup(record, "weight_distribution_front")),
        top_speed_mph=_to_number(_lookup(record, "top_speed_mph")),
        torque_ftlb=_to_number(_lookup(record, "torque_ftlb")),
    )
    try:
        car.validate()
    except InvalidCarSpecError as exc:
        logger.debug("Skipping catalog record %s %s: %s", manufacturer, model, exc)
        return None
    return car


def cars_from_records(records: Iterable[Mapping[str, Any]]) -> list[Car]:
    """Convert raw records to cars, dropping incomplete entries.

    Args:
        records: Raw catalog records.

    Returns:
        Cars in input order, without the skipped records.
    """
    cars: list[Car] = []
    skipped = 0
    for record in records:
        car = car_from_record(record)
        if car is None:
            skipped += 1
            continue
        cars.append(car)
    if skipped:
        logger.debug("Skipped %d incomplete catalog records", skipped)
    return cars


def load_car_catalog(path: str | Path) -> list[Car]:
    """Load a JSON car catalog.

    Args:
        path: Path to a JSON document holding a list of car records.

    Returns:
        Parsed cars; incomplete records are skipped.

    Raises:
        fh5tune.utils.exceptions.CatalogDataError: If the file does not exist,
            is not valid JSON, or is not a list of objects.
    """
    file_path = Path(path)
    if not file_path.exists():
        msg = f"Car catalog not found: {file_path}"
        raise CatalogDataError(msg)

    try:
        data = json.loads(file_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        msg = f"Car catalog is not valid JSON: {file_path}"
        raise CatalogDataError(msg) from exc

    if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
        msg = f"Car catalog must be a list of objects: {file_path}"
        raise CatalogDataError(msg)

    cars = cars_from_records(data)
    logger.info("Loaded %d cars from %s", len(cars), file_path)
    return cars


def load_car_catalog_csv(path: str | Path) -> list[Car]:
    """Load a CSV car catalog with a header row.

    Args:
        path: Path to a CSV file using catalog column names.

    Returns:
        Parsed cars; incomplete rows are skipped.

    Raises:
        fh5tune.utils.exceptions.CatalogDataError: If the file does not exist
            or has no header.
    """
    file_path = Path(path)
    if not file_path.exists():
        msg = f"Car catalog not found: {file_path}"
        raise CatalogDataError(msg)

    with file_path.open("r", newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        if reader.fieldnames is None:
            msg = f"CSV has no header: {file_path}"
            raise CatalogDataError(msg)
        cars = cars_from_records(reader)

    logger.info("Loaded %d cars from %s", len(cars), file_path)
    return cars


def find_car(
    cars: Iterable[Car],
    manufacturer: str,
    model: str,
    year: int | None = None,
) -> Car | None:
    """Find a car by case-insensitive manufacturer and model name.

    Args:
        cars: Catalog to search.
        manufacturer: Manufacturer name.
        model: Model name.
        year: Optional model year to disambiguate.

    Returns:
        First matching car, or ``None``.
    """
    wanted_manufacturer = _clean_text(manufacturer).lower()
    wanted_model = _clean_text(model).lower()
    for car in cars:
        if car.manufacturer.lower() != wanted_manufacturer:
            continue
        if car.model.lower() != wanted_model:
            continue
        if year is not None and car.year != year:
            continue
        return car
    return None
