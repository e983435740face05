"""Tire compound and pressure calculation."""

from __future__ import annotations

from dataclasses import dataclass, replace

from fh5tune.car.models import Car
from fh5tune.tuning.result import TuneOutput
from fh5tune.tuning.styles import TireBase
from fh5tune.tuning.upgrades import UpgradeSelection, get_upgrade_tier
from fh5tune.utils.constants import MAX_TIRE_PRESSURE_PSI, MIN_TIRE_PRESSURE_PSI

MIXED_COMPOUND = "Mixed"
DRIVEN_AXLE_PRESSURE_DROP = 1.0


@dataclass(frozen=True)
class TireSetup:
    """Tire compound and pressures.

    Args:
        compound: Compound label.
        pressure_front: Front pressure [psi].
        pressure_rear: Rear pressure [psi].
    """

    compound: str
    pressure_front: float
    pressure_rear: float


def clamp_pressure(pressure: float) -> float:
    """Clamp a tire pressure to the supported range.

    Args:
        pressure: Raw pressure [psi].

    Returns:
        Pressure within ``[15, 40]`` psi.
    """
    return min(MAX_TIRE_PRESSURE_PSI, max(MIN_TIRE_PRESSURE_PSI, pressure))


def calculate_tires(car: Car, base: TireBase) -> TireSetup:
    """Compute base compound and pressures for the effective drivetrain.

    Args:
        car: Effective car.
        base: Style tire table entry.

    Returns:
        Tire settings; the driven axle of a two-wheel-drive car runs 1 psi
        lower.
    """
    pressure_front = base.pressure_front
    pressure_rear = base.pressure_rear
    if car.drivetrain == "RWD":
        pressure_rear -= DRIVEN_AXLE_PRESSURE_DROP
    elif car.drivetrain == "FWD":
        pressure_front -= DRIVEN_AXLE_PRESSURE_DROP
    return TireSetup(
        compound=base.compound,
        pressure_front=clamp_pressure(pressure_front),
        pressure_rear=clamp_pressure(pressure_rear),
    )


def compound_pressure_shift(compound: str) -> tuple[float, float]:
    """Pressure offsets for a compound name.

    Args:
        compound: Selected compound option, matched by substring.

    Returns:
        ``(front, rear)`` pressure offsets [psi].
    """
    name = compound.lower()
    if "race" in name:
        return (-1.0, -1.0)
    if "rally" in name or "offroad" in name or "off-road" in name:
        return (-2.0, -2.0)
    if "drift" in name:
        return (1.0, -1.0)
    return (0.0, 0.0)


def apply_compound_upgrade(tune: TuneOutput, upgrades: UpgradeSelection | None) -> TuneOutput:
    """Apply front/rear compound upgrades to label and pressures.

    An axle left on stock takes the other axle's compound.

    Args:
        tune: Combined tune.
        upgrades: Upgrade selection.

    Returns:
        Tune with compound label and shifted, clamped pressures.
    """
    front = get_upgrade_tier(upgrades, "Tires", "Front Compound")
    rear = get_upgrade_tier(upgrades, "Tires", "Rear Compound")
    if front is None and rear is None:
        return tune
    front_compound = str(front or rear)
    rear_compound = str(rear or front)

    front_shift, _ = compound_pressure_shift(front_compound)
    _, rear_shift = compound_pressure_shift(rear_compound)
    return replace(
        tune,
        tire_compound=front_compound if front_compound == rear_compound else MIXED_COMPOUND,
        tire_pressure_front=clamp_pressure(tune.tire_pressure_front + front_shift),
        tire_pressure_rear=clamp_pressure(tune.tire_pressure_rear + rear_shift),
    )
