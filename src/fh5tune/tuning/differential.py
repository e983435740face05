"""Differential lock, preload and AWD split calculation."""

from __future__ import annotations

from dataclasses import dataclass, replace

from fh5tune.car.models import Car
from fh5tune.tuning.result import TuneOutput
from fh5tune.tuning.styles import DifferentialBase
from fh5tune.tuning.upgrades import UpgradeSelection, get_upgrade_tier

PRELOAD_DIVISOR = 2.5
FRONT_DIFF_FACTOR = 0.8
REAR_DIFF_FACTOR = 0.9

# (accel, decel) deltas per differential upgrade tier.
DIFFERENTIAL_UPGRADE_DELTAS: dict[str, tuple[float, float]] = {
    "Sport": (5.0, 5.0),
    "Race": (10.0, 5.0),
    "Rally": (5.0, 10.0),
    "Off-Road": (10.0, 10.0),
    "Drift": (20.0, -5.0),
}


@dataclass(frozen=True)
class DifferentialSetup:
    """Differential settings.

    Args:
        accel: Acceleration lock [%].
        decel: Deceleration lock [%].
        preload: Preload [%].
        center_diff: AWD/4WD center balance [%], ``None`` for two-wheel drive.
        front_diff: AWD/4WD front acceleration lock [%].
        rear_diff: AWD/4WD rear acceleration lock [%].
    """

    accel: float
    decel: float
    preload: float
    center_diff: float | None = None
    front_diff: float | None = None
    rear_diff: float | None = None


def calculate_differential(car: Car, base: DifferentialBase) -> DifferentialSetup:
    """Compute differential settings for the effective drivetrain.

    Args:
        car: Effective car.
        base: Style differential table entry.

    Returns:
        Differential settings; AWD splits only for ``AWD``/``4WD`` cars.
    """
    preload = round((base.accel + base.decel) / PRELOAD_DIVISOR)
    if not car.is_four_wheel_drive:
        return DifferentialSetup(accel=base.accel, decel=base.decel, preload=preload)
    return DifferentialSetup(
        accel=base.accel,
        decel=base.decel,
        preload=preload,
        center_diff=base.center_balance,
        front_diff=round(base.accel * FRONT_DIFF_FACTOR, 1),
        rear_diff=round(base.accel * REAR_DIFF_FACTOR, 1),
    )


def _clamp_percent(value: float) -> float:
    """Clamp a lock percentage to ``[0, 100]``.

    Args:
        value: Raw percentage.

    Returns:
        Clamped percentage.
    """
    return min(100.0, max(0.0, value))


def apply_differential_upgrade(tune: TuneOutput, upgrades: UpgradeSelection | None) -> TuneOutput:
    """Apply the differential upgrade tier delta.

    Args:
        tune: Combined tune.
        upgrades: Upgrade selection.

    Returns:
        Tune with adjusted acceleration/deceleration locks, or ``tune``
        unchanged for stock or unknown tiers.
    """
    tier = get_upgrade_tier(upgrades, "Drivetrain", "Differential")
    delta = DIFFERENTIAL_UPGRADE_DELTAS.get(tier or "")
    if delta is None:
        return tune
    accel_delta, decel_delta = delta
    return replace(
        tune,
        differential_accel=_clamp_percent(tune.differential_accel + accel_delta),
        differential_decel=_clamp_percent(tune.differential_decel + decel_delta),
    )
