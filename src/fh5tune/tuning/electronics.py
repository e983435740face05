"""Driver assists, turbo mapping and brake calculation."""

from __future__ import annotations

from dataclasses import dataclass, replace

from fh5tune.car.models import Car
from fh5tune.tuning.result import TuneOutput
from fh5tune.tuning.styles import BrakeBase, ElectronicsBase
from fh5tune.tuning.upgrades import UpgradeSelection, get_upgrade, get_upgrade_tier
from fh5tune.utils.constants import (
    MAX_ASSIST_LEVEL,
    MAX_BRAKE_PRESSURE,
    MIN_BRAKE_PRESSURE,
    REFERENCE_FRONT_DISTRIBUTION,
)

HIGH_POWER_RWD_THRESHOLD = 0.25
TURBO_MAP_FLOOR = 0.9
ANTI_LAG_TURBO_MAP_FLOOR = 1.0
SUPERCHARGER_MAP_FLOOR = 0.95
ANTI_LAG_ASPIRATION = "Race with Anti-lag"

BRAKE_DISTRIBUTION_GAIN = 10.0
BRAKE_BIAS_DRIVETRAIN_OFFSETS: dict[str, float] = {"FWD": 3.0, "RWD": -2.0}
BRAKE_PRESSURE_UPGRADE_DELTAS: dict[str, float] = {
    "Street": 3.0,
    "Sport": 6.0,
    "Race": 10.0,
}

_SUPERCHARGER_MARKERS = ("supercharg", "centrifugal", "positive displacement")


@dataclass(frozen=True)
class ElectronicsSetup:
    """Driver assists and turbo mapping.

    Args:
        traction_control_level: Traction-control level (0-2).
        abs_level: ABS level (0-2).
        stability_control: Stability-control level (0-2).
        turbo_map: Turbo mapping fraction.
    """

    traction_control_level: int
    abs_level: int
    stability_control: int
    turbo_map: float


@dataclass(frozen=True)
class BrakeSetup:
    """Brake balance and pressure.

    Args:
        bias: Front brake bias [%].
        pressure: Brake pressure [%].
    """

    bias: float
    pressure: float


def calculate_electronics(
    car: Car,
    base: ElectronicsBase,
    power_to_weight: float,
) -> ElectronicsSetup:
    """Select assists and raise traction control for high-power RWD cars.

    Args:
        car: Effective car.
        base: Style electronics table entry.
        power_to_weight: Car power-to-weight ratio [hp/lb].

    Returns:
        Electronics settings before aspiration upgrades.
    """
    traction_control = base.traction_control
    if car.drivetrain == "RWD" and power_to_weight > HIGH_POWER_RWD_THRESHOLD:
        traction_control = min(traction_control + 1, MAX_ASSIST_LEVEL)
    return ElectronicsSetup(
        traction_control_level=traction_control,
        abs_level=base.abs_level,
        stability_control=base.stability_control,
        turbo_map=base.turbo_map,
    )


def calculate_brakes(car: Car, base: BrakeBase, front_distribution: float) -> BrakeSetup:
    """Compute brake balance from style, axle balance and drivetrain.

    The axle-balance nudge and the drivetrain offset are both added on top of
    the style balance.

    Args:
        car: Effective car.
        base: Style brake table entry.
        front_distribution: Resolved static front weight fraction.

    Returns:
        Brake settings before upgrade deltas.
    """
    nudge = round((front_distribution - REFERENCE_FRONT_DISTRIBUTION) * BRAKE_DISTRIBUTION_GAIN)
    bias = base.bias + nudge + BRAKE_BIAS_DRIVETRAIN_OFFSETS.get(car.drivetrain, 0.0)
    return BrakeSetup(bias=bias, pressure=base.pressure)


def aspiration_map_floor(upgrades: UpgradeSelection | None) -> float | None:
    """Minimum turbo mapping implied by the aspiration conversion.

    Args:
        upgrades: Upgrade selection.

    Returns:
        Turbo-map floor, or ``None`` for stock or naturally aspirated setups.
    """
    conversion = get_upgrade_tier(upgrades, "Conversion", "Aspiration")
    if conversion is None:
        return None
    name = conversion.lower()
    if "turbo" in name:
        if get_upgrade(upgrades, "Engine", "Aspiration") == ANTI_LAG_ASPIRATION:
            return ANTI_LAG_TURBO_MAP_FLOOR
        return TURBO_MAP_FLOOR
    if any(marker in name for marker in _SUPERCHARGER_MARKERS):
        return SUPERCHARGER_MAP_FLOOR
    return None


def apply_aspiration_upgrade(tune: TuneOutput, upgrades: UpgradeSelection | None) -> TuneOutput:
    """Raise turbo mapping to the aspiration floor.

    Args:
        tune: Combined tune.
        upgrades: Upgrade selection.

    Returns:
        Tune with ``turbo_map`` at least the aspiration floor.
    """
    floor = aspiration_map_floor(upgrades)
    if floor is None or tune.turbo_map >= floor:
        return tune
    return replace(tune, turbo_map=floor)


def apply_brake_upgrade(tune: TuneOutput, upgrades: UpgradeSelection | None) -> TuneOutput:
    """Add the brake upgrade tier pressure delta.

    Args:
        tune: Combined tune.
        upgrades: Upgrade selection.

    Returns:
        Tune with brake pressure clamped to ``[80, 140]``.
    """
    delta = BRAKE_PRESSURE_UPGRADE_DELTAS.get(get_upgrade_tier(upgrades, "Platform", "Brakes") or "")
    if delta is None:
        return tune
    pressure = min(MAX_BRAKE_PRESSURE, max(MIN_BRAKE_PRESSURE, tune.brake_pressure + delta))
    return replace(tune, brake_pressure=pressure)
