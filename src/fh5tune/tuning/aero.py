"""Aerodynamic downforce calculation."""

from __future__ import annotations

from dataclasses import dataclass, replace

from fh5tune.car.models import Car
from fh5tune.tuning.result import TuneOutput
from fh5tune.tuning.styles import HIGH_PI_DOWNFORCE_THRESHOLD, AeroBase
from fh5tune.tuning.upgrades import UpgradeSelection, get_upgrade_tier

REAR_WING_DELTAS: dict[str, float] = {"Sport": 20.0, "Race": 50.0}
FRONT_BUMPER_DELTAS: dict[str, float] = {"Sport": 20.0, "Race": 40.0}
REAR_BUMPER_DELTAS: dict[str, float] = {"Sport": 15.0, "Race": 30.0}


@dataclass(frozen=True)
class AeroSetup:
    """Front and rear downforce.

    Args:
        downforce_front: Front downforce [kg].
        downforce_rear: Rear downforce [kg].
    """

    downforce_front: float
    downforce_rear: float


def calculate_aero(car: Car, base: AeroBase) -> AeroSetup:
    """Select style downforce, using the high-PI values where defined.

    Args:
        car: Effective car.
        base: Style aero table entry.

    Returns:
        Downforce before body-kit deltas.
    """
    if base.high_pi_downforce is not None and car.pi > HIGH_PI_DOWNFORCE_THRESHOLD:
        front, rear = base.high_pi_downforce
        return AeroSetup(downforce_front=front, downforce_rear=rear)
    return AeroSetup(downforce_front=base.downforce_front, downforce_rear=base.downforce_rear)


def apply_aero_upgrades(tune: TuneOutput, upgrades: UpgradeSelection | None) -> TuneOutput:
    """Add rear wing and bumper downforce deltas.

    Args:
        tune: Combined tune.
        upgrades: Upgrade selection.

    Returns:
        Tune with body-kit downforce added.
    """
    front_delta = FRONT_BUMPER_DELTAS.get(get_upgrade_tier(upgrades, "Aero", "Front Bumper") or "", 0.0)
    rear_delta = REAR_WING_DELTAS.get(get_upgrade_tier(upgrades, "Aero", "Rear Wing") or "", 0.0)
    rear_delta += REAR_BUMPER_DELTAS.get(get_upgrade_tier(upgrades, "Aero", "Rear Bumper") or "", 0.0)
    if not front_delta and not rear_delta:
        return tune
    return replace(
        tune,
        downforce_front=tune.downforce_front + front_delta,
        downforce_rear=tune.downforce_rear + rear_delta,
    )
