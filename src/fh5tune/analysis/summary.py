"""Summary metrics derived from a computed tune."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from fh5tune.tuning.result import TuneOutput


@dataclass(frozen=True)
class TuneSummary:
    """Gearing spread and axle balance of a tune.

    Args:
        overall_ratios: Gear ratio times final drive, per gear.
        gear_steps: Ratio of each gear to the next one.
        mean_gear_step: Mean of :attr:`gear_steps`.
        ratio_spread: First-gear ratio divided by top-gear ratio.
        spring_front_share: Front share of total spring rate.
        arb_front_share: Front share of total anti-roll-bar stiffness.
        pressure_split: Front minus rear tire pressure [psi].
        downforce_front_share: Front share of total downforce, 0 without aero.
    """

    overall_ratios: np.ndarray
    gear_steps: np.ndarray
    mean_gear_step: float
    ratio_spread: float
    spring_front_share: float
    arb_front_share: float
    pressure_split: float
    downforce_front_share: float


def _front_share(front: float, rear: float) -> float:
    """Front fraction of a front/rear pair.

    Args:
        front: Front value.
        rear: Rear value.

    Returns:
        ``front / (front + rear)``, or 0 when both are zero.
    """
    total = front + rear
    return float(front / total) if total else 0.0


def summarize_tune(tune: TuneOutput) -> TuneSummary:
    """Compute gearing and balance metrics for a tune.

    Args:
        tune: Computed tune.

    Returns:
        Summary metrics.
    """
    ratios = np.asarray(tune.gear_ratios, dtype=float)
    steps = ratios[:-1] / ratios[1:]

    return TuneSummary(
        overall_ratios=ratios * tune.final_drive,
        gear_steps=steps,
        mean_gear_step=float(np.mean(steps)) if steps.size else 0.0,
        ratio_spread=float(ratios[0] / ratios[-1]),
        spring_front_share=_front_share(tune.spring_front, tune.spring_rear),
        arb_front_share=_front_share(tune.arb_front, tune.arb_rear),
        pressure_split=float(tune.tire_pressure_front - tune.tire_pressure_rear),
        downforce_front_share=_front_share(tune.downforce_front, tune.downforce_rear),
    )
