"""Suspension, alignment and damping calculation.

Spring and anti-roll-bar values scale with curb weight relative to a
3500 lb reference car and with the static axle load split relative to a
55/45 reference. Damping follows the axle split and the computed springs.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

from fh5tune.car.models import Car
from fh5tune.tuning.result import TuneOutput
from fh5tune.tuning.styles import AlignmentBase, ChassisBase
from fh5tune.tuning.upgrades import UpgradeSelection, get_upgrade_tier
from fh5tune.utils.constants import (
    MAX_ARB,
    MAX_FRONT_DISTRIBUTION,
    MIN_ARB,
    MIN_FRONT_DISTRIBUTION,
    REFERENCE_FRONT_DISTRIBUTION,
    REFERENCE_REAR_DISTRIBUTION,
    REFERENCE_WEIGHT_LBS,
)

ARB_DISTRIBUTION_GAIN = 64.0
ARB_FRONT_OFFSET = 0.5
ARB_REAR_OFFSET = 1.0

REBOUND_DISTRIBUTION_GAIN = 19.0
REBOUND_FRONT_OFFSET = 0.5
REBOUND_REAR_OFFSET = 1.0
REFERENCE_DAMPING_SPRING_RATE = 550.0
MIN_SPRING_DAMPING_SCALE = 0.8
MAX_SPRING_DAMPING_SCALE = 1.25

RACE_SPRING_DELTA = 50.0
RALLY_SPRING_DELTA = -50.0
RALLY_RIDE_HEIGHT_DELTA = 3.0
ARB_UPGRADE_FACTORS: dict[str, float] = {
    "Street": 1.05,
    "Sport": 1.10,
    "Race": 1.15,
}


@dataclass(frozen=True)
class SuspensionSetup:
    """Springs, anti-roll bars and ride height.

    Args:
        spring_front: Front spring rate [lb/in].
        spring_rear: Rear spring rate [lb/in].
        arb_front: Front anti-roll-bar stiffness.
        arb_rear: Rear anti-roll-bar stiffness.
        ride_height_front: Front ride height [cm].
        ride_height_rear: Rear ride height [cm].
    """

    spring_front: float
    spring_rear: float
    arb_front: float
    arb_rear: float
    ride_height_front: float
    ride_height_rear: float


@dataclass(frozen=True)
class DampingSetup:
    """Rebound and bump stiffness per axle.

    Args:
        rebound_front: Front rebound stiffness.
        rebound_rear: Rear rebound stiffness.
        compression_front: Front bump stiffness.
        compression_rear: Rear bump stiffness.
    """

    rebound_front: float
    rebound_rear: float
    compression_front: float
    compression_rear: float


def resolve_front_distribution(car: Car) -> float:
    """Resolve the static front weight fraction used for axle balancing.

    Values above 1 are read as percentages. The result is clamped to
    ``[0.40, 0.65]``; cars without the attribute use the 0.55 reference.

    Args:
        car: Effective car.

    Returns:
        Front weight fraction in ``[0.40, 0.65]``.
    """
    raw = car.weight_distribution_front
    if raw is None or not math.isfinite(raw) or raw <= 0.0:
        return REFERENCE_FRONT_DISTRIBUTION
    fraction = raw / 100.0 if raw > 1.0 else raw
    return min(MAX_FRONT_DISTRIBUTION, max(MIN_FRONT_DISTRIBUTION, fraction))


def _clamp_arb(value: float) -> float:
    """Round and clamp an anti-roll-bar value to the in-game range.

    Args:
        value: Raw stiffness.

    Returns:
        Stiffness rounded to 0.1 within ``[MIN_ARB, MAX_ARB]``.
    """
    return min(MAX_ARB, max(MIN_ARB, round(value, 1)))


def calculate_suspension(car: Car, base: ChassisBase) -> SuspensionSetup:
    """Compute weight- and balance-scaled springs, ARBs and ride height.

    Args:
        car: Effective car.
        base: Style chassis table entry.

    Returns:
        Suspension settings before upgrade deltas.
    """
    weight_factor = car.weight_lbs / REFERENCE_WEIGHT_LBS
    front = resolve_front_distribution(car)
    rear = 1.0 - front

    spring_scale = base.spring_rate * weight_factor
    spring_front = float(round(spring_scale * front / REFERENCE_FRONT_DISTRIBUTION))
    spring_rear = float(round(spring_scale * rear / REFERENCE_REAR_DISTRIBUTION))

    arb_front = (ARB_DISTRIBUTION_GAIN * front + ARB_FRONT_OFFSET) * base.arb_scale * weight_factor
    arb_rear = (ARB_DISTRIBUTION_GAIN * rear + ARB_REAR_OFFSET) * base.arb_scale * weight_factor

    return SuspensionSetup(
        spring_front=spring_front,
        spring_rear=spring_rear,
        arb_front=_clamp_arb(arb_front),
        arb_rear=_clamp_arb(arb_rear),
        ride_height_front=base.ride_height,
        ride_height_rear=base.ride_height + base.rear_ride_height_offset,
    )


def calculate_alignment(base: AlignmentBase) -> AlignmentBase:
    """Return the style alignment angles.

    Args:
        base: Style alignment table entry.

    Returns:
        Alignment angles; the table value is used as-is.
    """
    return base


def _spring_damping_scale(spring_rate: float) -> float:
    """Scale damping with spring stiffness relative to a 550 lb/in spring.

    Args:
        spring_rate: Axle spring rate [lb/in].

    Returns:
        Scale factor in ``[0.8, 1.25]``.
    """
    scale = spring_rate / REFERENCE_DAMPING_SPRING_RATE
    return min(MAX_SPRING_DAMPING_SCALE, max(MIN_SPRING_DAMPING_SCALE, scale))


def calculate_damping(car: Car, suspension: SuspensionSetup, base: ChassisBase) -> DampingSetup:
    """Compute rebound and bump stiffness from axle balance and springs.

    Args:
        car: Effective car.
        suspension: Computed suspension before upgrade deltas.
        base: Style chassis table entry.

    Returns:
        Damping settings rounded to 0.1.
    """
    front = resolve_front_distribution(car)
    rear = 1.0 - front

    rebound_front = round(
        (REBOUND_DISTRIBUTION_GAIN * front + REBOUND_FRONT_OFFSET)
        * base.damping_intent
        * _spring_damping_scale(suspension.spring_front),
        1,
    )
    rebound_rear = round(
        (REBOUND_DISTRIBUTION_GAIN * rear + REBOUND_REAR_OFFSET)
        * base.damping_intent
        * _spring_damping_scale(suspension.spring_rear),
        1,
    )
    return DampingSetup(
        rebound_front=rebound_front,
        rebound_rear=rebound_rear,
        compression_front=round(rebound_front * base.compression_front, 1),
        compression_rear=round(rebound_rear * base.compression_rear, 1),
    )


def apply_spring_upgrade(tune: TuneOutput, upgrades: UpgradeSelection | None) -> TuneOutput:
    """Apply race or rally spring upgrade deltas.

    Args:
        tune: Combined tune.
        upgrades: Upgrade selection.

    Returns:
        Tune with spring (and for rally springs, ride-height) deltas.
    """
    springs = get_upgrade_tier(upgrades, "Platform", "Springs")
    if springs == "Race":
        return replace(
            tune,
            spring_front=tune.spring_front + RACE_SPRING_DELTA,
            spring_rear=tune.spring_rear + RACE_SPRING_DELTA,
        )
    if springs == "Rally":
        return replace(
            tune,
            spring_front=tune.spring_front + RALLY_SPRING_DELTA,
            spring_rear=tune.spring_rear + RALLY_SPRING_DELTA,
            ride_height_front=tune.ride_height_front + RALLY_RIDE_HEIGHT_DELTA,
            ride_height_rear=tune.ride_height_rear + RALLY_RIDE_HEIGHT_DELTA,
        )
    return tune


def apply_arb_upgrades(tune: TuneOutput, upgrades: UpgradeSelection | None) -> TuneOutput:
    """Scale anti-roll bars by the front/rear ARB upgrade tiers.

    Args:
        tune: Combined tune.
        upgrades: Upgrade selection.

    Returns:
        Tune with upgraded anti-roll-bar stiffness.
    """
    front_factor = ARB_UPGRADE_FACTORS.get(get_upgrade_tier(upgrades, "Platform", "Front ARB") or "")
    rear_factor = ARB_UPGRADE_FACTORS.get(get_upgrade_tier(upgrades, "Platform", "Rear ARB") or "")
    if front_factor is None and rear_factor is None:
        return tune
    return replace(
        tune,
        arb_front=_clamp_arb(tune.arb_front * (front_factor or 1.0)),
        arb_rear=_clamp_arb(tune.arb_rear * (rear_factor or 1.0)),
    )
