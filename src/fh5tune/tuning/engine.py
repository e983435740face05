"""End-to-end tune calculation."""

from __future__ import annotations

import logging

from fh5tune.car.models import Car
from fh5tune.tuning.aero import apply_aero_upgrades, calculate_aero
from fh5tune.tuning.chassis import (
    apply_arb_upgrades,
    apply_spring_upgrade,
    calculate_alignment,
    calculate_damping,
    calculate_suspension,
    resolve_front_distribution,
)
from fh5tune.tuning.config import DEFAULT_WEATHER, TuneConfig, build_tune_config
from fh5tune.tuning.differential import apply_differential_upgrade, calculate_differential
from fh5tune.tuning.electronics import (
    apply_aspiration_upgrade,
    apply_brake_upgrade,
    calculate_brakes,
    calculate_electronics,
)
from fh5tune.tuning.gearing import apply_manual_overrides, calculate_gearing, normalize_gear_count
from fh5tune.tuning.result import TuneOutput
from fh5tune.tuning.styles import style_profile
from fh5tune.tuning.tires import apply_compound_upgrade, calculate_tires
from fh5tune.tuning.upgrades import UpgradeSelection, effective_car
from fh5tune.tuning.weather import apply_wet_modifier

logger = logging.getLogger(__name__)

_UPGRADE_STEPS = (
    apply_spring_upgrade,
    apply_arb_upgrades,
    apply_brake_upgrade,
    apply_aero_upgrades,
    apply_compound_upgrade,
    apply_differential_upgrade,
    apply_aspiration_upgrade,
)


def _base_tune(car: Car, config: TuneConfig) -> TuneOutput:
    """Run every subsystem against the effective car and merge the results.

    Args:
        car: Effective car.
        config: Validated tune configuration.

    Returns:
        Combined tune before gear-count, override, upgrade and weather steps.
    """
    profile = style_profile(config.style)
    power_to_weight = car.power_to_weight
    front_distribution = resolve_front_distribution(car)

    gearing = calculate_gearing(profile.gearing, power_to_weight)
    differential = calculate_differential(car, profile.differential)
    suspension = calculate_suspension(car, profile.chassis)
    alignment = calculate_alignment(profile.alignment)
    damping = calculate_damping(car, suspension, profile.chassis)
    tires = calculate_tires(car, profile.tires)
    aero = calculate_aero(car, profile.aero)
    electronics = calculate_electronics(car, profile.electronics, power_to_weight)
    brakes = calculate_brakes(car, profile.brakes, front_distribution)

    return TuneOutput(
        final_drive=gearing.final_drive,
        gear_ratios=gearing.gear_ratios,
        differential_accel=differential.accel,
        differential_decel=differential.decel,
        differential_preload=differential.preload,
        brake_bias=brakes.bias,
        brake_pressure=brakes.pressure,
        spring_front=suspension.spring_front,
        spring_rear=suspension.spring_rear,
        arb_front=suspension.arb_front,
        arb_rear=suspension.arb_rear,
        ride_height_front=suspension.ride_height_front,
        ride_height_rear=suspension.ride_height_rear,
        camber_front=alignment.camber_front,
        camber_rear=alignment.camber_rear,
        toe_front=alignment.toe_front,
        toe_rear=alignment.toe_rear,
        caster=alignment.caster,
        damping_rebound_front=damping.rebound_front,
        damping_rebound_rear=damping.rebound_rear,
        damping_compression_front=damping.compression_front,
        damping_compression_rear=damping.compression_rear,
        tire_compound=tires.compound,
        tire_pressure_front=tires.pressure_front,
        tire_pressure_rear=tires.pressure_rear,
        downforce_front=aero.downforce_front,
        downforce_rear=aero.downforce_rear,
        turbo_map=electronics.turbo_map,
        traction_control_level=electronics.traction_control_level,
        abs_level=electronics.abs_level,
        stability_control=electronics.stability_control,
        center_diff=differential.center_diff,
        front_diff=differential.front_diff,
        rear_diff=differential.rear_diff,
    )


def compute_tune(
    car: Car,
    upgrades: UpgradeSelection | None,
    style: str,
    weather: str = DEFAULT_WEATHER,
) -> TuneOutput:
    """Compute a complete tune for a car, upgrade build, style and weather.

    Args:
        car: Car specification; never mutated.
        upgrades: Sparse section -> part -> option selection. Absent entries
            mean stock; the ``Tuning`` section carries manual overrides.
        style: Driving-style preset, one of
            :data:`fh5tune.tuning.config.VALID_TUNE_STYLES`.
        weather: ``Dry`` or ``Wet``.

    Returns:
        Freshly computed tune.

    Raises:
        fh5tune.utils.exceptions.InvalidCarSpecError: If ``car`` is
            structurally invalid.
        fh5tune.utils.exceptions.ConfigurationError: If ``style`` or
            ``weather`` is unsupported.
    """
    car.validate()
    config = build_tune_config(style, weather)
    upgrades = upgrades or {}

    tuned_car = effective_car(car, upgrades)
    if tuned_car is not car:
        logger.debug(
            "Effective car for %s: drivetrain=%s weight_lbs=%s",
            car.display_name,
            tuned_car.drivetrain,
            tuned_car.weight_lbs,
        )

    tune = _base_tune(tuned_car, config)
    tune = normalize_gear_count(tune, tuned_car, upgrades)
    tune = apply_manual_overrides(tune, upgrades)
    for step in _UPGRADE_STEPS:
        tune = step(tune, upgrades)
    if config.is_wet:
        tune = apply_wet_modifier(tune)
    return tune
