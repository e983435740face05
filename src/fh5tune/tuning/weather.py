"""Wet-weather tune modifier."""

from __future__ import annotations

from dataclasses import replace

from fh5tune.tuning.result import TuneOutput
from fh5tune.tuning.tires import clamp_pressure
from fh5tune.utils.constants import MAX_ASSIST_LEVEL

WET_PRESSURE_DELTA = -2.0
WET_DIFF_ACCEL_DELTA = -10.0
WET_MIN_DIFF_ACCEL = 10.0
WET_CAMBER_DELTA = -0.3
WET_TOE_REAR_DELTA = 0.05
WET_DOWNFORCE_FRONT_DELTA = 20.0
WET_DOWNFORCE_REAR_DELTA = 30.0


def apply_wet_modifier(tune: TuneOutput) -> TuneOutput:
    """Soften and stabilize a tune for wet conditions.

    Args:
        tune: Fully computed dry tune.

    Returns:
        Tune with lower pressures and diff lock, more camber, rear toe,
        downforce and traction control.
    """
    return replace(
        tune,
        tire_pressure_front=clamp_pressure(tune.tire_pressure_front + WET_PRESSURE_DELTA),
        tire_pressure_rear=clamp_pressure(tune.tire_pressure_rear + WET_PRESSURE_DELTA),
        differential_accel=max(WET_MIN_DIFF_ACCEL, tune.differential_accel + WET_DIFF_ACCEL_DELTA),
        camber_front=round(tune.camber_front + WET_CAMBER_DELTA, 2),
        camber_rear=round(tune.camber_rear + WET_CAMBER_DELTA, 2),
        toe_rear=round(tune.toe_rear + WET_TOE_REAR_DELTA, 2),
        downforce_front=tune.downforce_front + WET_DOWNFORCE_FRONT_DELTA,
        downforce_rear=tune.downforce_rear + WET_DOWNFORCE_REAR_DELTA,
        traction_control_level=min(MAX_ASSIST_LEVEL, tune.traction_control_level + 1),
    )
