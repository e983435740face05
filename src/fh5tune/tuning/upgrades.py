"""Upgrade selection access and effective-car derivation."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import replace

from fh5tune.car.models import VALID_DRIVETRAINS, Car
from fh5tune.utils.constants import STOCK

UpgradeSelection = Mapping[str, Mapping[str, str | float]]

WEIGHT_REDUCTION_FACTORS: dict[str, float] = {
    "Street": 0.95,
    "Sport": 0.90,
    "Race": 0.85,
}


def get_upgrade(upgrades: UpgradeSelection | None, section: str, part: str) -> str | None:
    """Read one selected option from a sparse upgrade selection.

    Args:
        upgrades: Section -> part -> option mapping; may be empty or ``None``.
        section: Section name, e.g. ``"Platform"``.
        part: Part name, e.g. ``"Springs"``.

    Returns:
        Selected option as a stripped string, or ``None`` when the section or
        part is absent or blank, or when ``upgrades`` is not a mapping.
    """
    if not isinstance(upgrades, Mapping):
        return None
    parts = upgrades.get(section)
    if not isinstance(parts, Mapping):
        return None
    value = parts.get(part)
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def get_upgrade_tier(upgrades: UpgradeSelection | None, section: str, part: str) -> str | None:
    """Read a selected option, treating ``Stock`` as unset.

    Args:
        upgrades: Section -> part -> option mapping.
        section: Section name.
        part: Part name.

    Returns:
        Non-stock option, or ``None``.
    """
    value = get_upgrade(upgrades, section, part)
    if value is None or value == STOCK:
        return None
    return value


def effective_car(car: Car, upgrades: UpgradeSelection | None) -> Car:
    """Apply drivetrain-swap and weight-reduction upgrades to a car copy.

    Args:
        car: Base car; never mutated.
        upgrades: Upgrade selection.

    Returns:
        The base car when no relevant upgrade is selected, otherwise a copy
        with drivetrain and/or weight replaced.
    """
    changes: dict[str, object] = {}

    swap = get_upgrade(upgrades, "Conversion", "Drivetrain Swap")
    if swap in VALID_DRIVETRAINS:
        changes["drivetrain"] = swap

    reduction = get_upgrade_tier(upgrades, "Platform", "Weight Reduction")
    factor = WEIGHT_REDUCTION_FACTORS.get(reduction or "")
    if factor is not None:
        changes["weight_lbs"] = round(car.weight_lbs * factor)

    return replace(car, **changes) if changes else car
