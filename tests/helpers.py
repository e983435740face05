"""Shared test helpers."""

from __future__ import annotations

from dataclasses import replace

from fh5tune.car.models import Car


def gtr_r35() -> Car:
    """Create the Nissan GT-R (R35) reference car.

    Returns:
        AWD twin-turbo car without optional attributes.
    """
    return Car(
        manufacturer="Nissan",
        model="GT-R (R35)",
        year=2017,
        pi=800,
        drivetrain="AWD",
        power_hp=565,
        weight_lbs=3865,
        engine_type="V6",
        aspiration="Twin Turbo",
        displacement_l=3.8,
    )


def porsche_911_gt3_rs() -> Car:
    """Create the Porsche 911 GT3 RS reference car.

    Returns:
        High-PI RWD car without optional attributes.
    """
    return Car(
        manufacturer="Porsche",
        model="911 GT3 RS",
        year=2019,
        pi=898,
        drivetrain="RWD",
        power_hp=520,
        weight_lbs=3153,
        engine_type="Flat-6",
        aspiration="Naturally Aspirated",
        displacement_l=4.0,
    )


def civic_type_r() -> Car:
    """Create the Honda Civic Type R reference car.

    Returns:
        FWD turbo car without optional attributes.
    """
    return Car(
        manufacturer="Honda",
        model="Civic Type R",
        year=2018,
        pi=655,
        drivetrain="FWD",
        power_hp=306,
        weight_lbs=3117,
        engine_type="I4",
        aspiration="Turbo",
        displacement_l=2.0,
    )


def high_power_rwd() -> Car:
    """Create a RWD car above the high power-to-weight threshold.

    Returns:
        RWD car with 0.27 hp/lb.
    """
    return Car(
        manufacturer="Dodge",
        model="Viper ACR",
        year=2016,
        pi=880,
        drivetrain="RWD",
        power_hp=810,
        weight_lbs=3000,
        engine_type="V10",
        aspiration="Naturally Aspirated",
        displacement_l=8.4,
    )


def reference_cars() -> list[Car]:
    """Collect all reference cars, including 4WD and distribution variants.

    Returns:
        Cars covering every drivetrain and the distribution clamp bounds.
    """
    gtr = gtr_r35()
    return [
        gtr,
        porsche_911_gt3_rs(),
        civic_type_r(),
        high_power_rwd(),
        replace(gtr, drivetrain="4WD", weight_distribution_front=0.65),
        replace(civic_type_r(), weight_distribution_front=62.0, gears=8),
        replace(porsche_911_gt3_rs(), weight_distribution_front=0.38, gears=7),
    ]
