"""Per-style base tables for every tuning subsystem.

Every driving style maps to one :class:`StyleProfile`. Subsystem functions
read only their own section of the profile, so adding a style means adding
a table entry here.
"""

from __future__ import annotations

from dataclasses import dataclass

from fh5tune.tuning.config import VALID_TUNE_STYLES
from fh5tune.utils.exceptions import ConfigurationError

HIGH_PI_DOWNFORCE_THRESHOLD = 850


@dataclass(frozen=True)
class FinalDriveNudge:
    """Power-to-weight dependent final-drive offset.

    Args:
        threshold: Power-to-weight ratio that must be exceeded [hp/lb].
        above: Offset added when the ratio exceeds ``threshold``.
        below: Offset added otherwise.
    """

    threshold: float
    above: float
    below: float = 0.0

    def offset(self, power_to_weight: float) -> float:
        """Select the offset for a power-to-weight ratio.

        Args:
            power_to_weight: Car power-to-weight ratio [hp/lb].

        Returns:
            Final-drive offset.
        """
        return self.above if power_to_weight > self.threshold else self.below


@dataclass(frozen=True)
class GearingBase:
    """Base final drive and six-speed ratio set.

    Args:
        final_drive: Base final-drive ratio.
        gear_ratios: Descending six-speed base ratios.
        nudge: Optional power-to-weight final-drive offset.
    """

    final_drive: float
    gear_ratios: tuple[float, ...]
    nudge: FinalDriveNudge | None = None


@dataclass(frozen=True)
class DifferentialBase:
    """Base differential lock percentages.

    Args:
        accel: Acceleration lock [%].
        decel: Deceleration lock [%].
        center_balance: AWD center balance toward the rear [%].
    """

    accel: float
    decel: float
    center_balance: float = 50.0


@dataclass(frozen=True)
class ChassisBase:
    """Base spring, anti-roll-bar, ride-height and damping constants.

    Args:
        spring_rate: Reference spring rate for a 3500 lb car [lb/in].
        ride_height: Front ride height [cm].
        rear_ride_height_offset: Rear ride height above front [cm].
        arb_scale: Multiplier on the distribution-weighted ARB value.
        damping_intent: Multiplier on the distribution-weighted rebound value.
        compression_front: Front compression-to-rebound ratio.
        compression_rear: Rear compression-to-rebound ratio.
    """

    spring_rate: float
    ride_height: float
    rear_ride_height_offset: float = 1.0
    arb_scale: float = 1.0
    damping_intent: float = 1.0
    compression_front: float = 0.7
    compression_rear: float = 0.6


@dataclass(frozen=True)
class AlignmentBase:
    """Camber, toe and caster angles [deg].

    Args:
        camber_front: Front camber [deg].
        camber_rear: Rear camber [deg].
        toe_front: Front toe [deg].
        toe_rear: Rear toe [deg].
        caster: Caster [deg].
    """

    camber_front: float
    camber_rear: float
    toe_front: float
    toe_rear: float
    caster: float


@dataclass(frozen=True)
class TireBase:
    """Tire compound label and cold pressures.

    Args:
        compound: Compound label.
        pressure_front: Front pressure [psi].
        pressure_rear: Rear pressure [psi].
    """

    compound: str
    pressure_front: float
    pressure_rear: float


@dataclass(frozen=True)
class AeroBase:
    """Aerodynamic downforce [kg].

    Args:
        downforce_front: Front downforce [kg].
        downforce_rear: Rear downforce [kg].
        high_pi_downforce: Optional ``(front, rear)`` override for cars above
            :data:`HIGH_PI_DOWNFORCE_THRESHOLD`.
    """

    downforce_front: float
    downforce_rear: float
    high_pi_downforce: tuple[float, float] | None = None


@dataclass(frozen=True)
class ElectronicsBase:
    """Driver-assist levels and turbo mapping.

    Args:
        traction_control: Traction-control level (0-2).
        abs_level: ABS level (0-2).
        stability_control: Stability-control level (0-2).
        turbo_map: Turbo mapping fraction (0-1).
    """

    traction_control: int
    abs_level: int
    stability_control: int
    turbo_map: float


@dataclass(frozen=True)
class BrakeBase:
    """Brake balance and pressure.

    Args:
        bias: Front brake bias [%].
        pressure: Brake pressure [%].
    """

    bias: float
    pressure: float


@dataclass(frozen=True)
class StyleProfile:
    """Complete base-constant record for one driving style.

    Args:
        gearing: Gearing base values.
        differential: Differential base values.
        chassis: Spring, ARB, ride-height and damping constants.
        alignment: Alignment angles.
        tires: Tire compound and pressures.
        aero: Downforce values.
        electronics: Assist levels and turbo mapping.
        brakes: Brake balance and pressure.
    """

    gearing: GearingBase
    differential: DifferentialBase
    chassis: ChassisBase
    alignment: AlignmentBase
    tires: TireBase
    aero: AeroBase
    electronics: ElectronicsBase
    brakes: BrakeBase


_ROAD = StyleProfile(
    gearing=GearingBase(
        final_drive=3.2,
        gear_ratios=(2.8, 1.9, 1.4, 1.1, 0.9, 0.75),
        nudge=FinalDriveNudge(threshold=0.2, above=-0.2),
    ),
    differential=DifferentialBase(accel=50.0, decel=20.0),
    chassis=ChassisBase(spring_rate=450.0, ride_height=10.0),
    alignment=AlignmentBase(
        camber_front=-1.5, camber_rear=-1.2, toe_front=0.0, toe_rear=0.1, caster=5.5
    ),
    tires=TireBase(compound="Street", pressure_front=32.0, pressure_rear=30.0),
    aero=AeroBase(downforce_front=100.0, downforce_rear=150.0),
    electronics=ElectronicsBase(
        traction_control=1, abs_level=1, stability_control=1, turbo_map=0.8
    ),
    brakes=BrakeBase(bias=52.0, pressure=100.0),
)

_OFFROAD_GEARING = GearingBase(final_drive=3.8, gear_ratios=(3.2, 2.2, 1.6, 1.25, 1.0, 0.82))

STYLE_PROFILES: dict[str, StyleProfile] = {
    "Street": _ROAD,
    "Road": _ROAD,
    "Race": StyleProfile(
        gearing=GearingBase(
            final_drive=3.5,
            gear_ratios=(3.0, 2.1, 1.5, 1.2, 1.0, 0.85),
            nudge=FinalDriveNudge(threshold=0.25, above=0.2, below=-0.2),
        ),
        differential=DifferentialBase(accel=75.0, decel=15.0),
        chassis=ChassisBase(
            spring_rate=600.0, ride_height=6.0, arb_scale=1.05, damping_intent=1.08
        ),
        alignment=AlignmentBase(
            camber_front=-2.5, camber_rear=-2.0, toe_front=-0.1, toe_rear=0.2, caster=6.5
        ),
        tires=TireBase(compound="Race", pressure_front=30.0, pressure_rear=28.0),
        aero=AeroBase(
            downforce_front=150.0, downforce_rear=200.0, high_pi_downforce=(200.0, 300.0)
        ),
        electronics=ElectronicsBase(
            traction_control=0, abs_level=0, stability_control=0, turbo_map=0.9
        ),
        brakes=BrakeBase(bias=55.0, pressure=105.0),
    ),
    "Drift": StyleProfile(
        gearing=GearingBase(final_drive=4.2, gear_ratios=(3.5, 2.4, 1.7, 1.3, 1.05, 0.9)),
        differential=DifferentialBase(accel=15.0, decel=5.0, center_balance=70.0),
        chassis=ChassisBase(
            spring_rate=500.0,
            ride_height=12.0,
            arb_scale=0.85,
            damping_intent=1.05,
            compression_front=0.55,
            compression_rear=0.45,
        ),
        alignment=AlignmentBase(
            camber_front=-3.0, camber_rear=-2.5, toe_front=0.0, toe_rear=0.3, caster=7.0
        ),
        tires=TireBase(compound="Drift", pressure_front=28.0, pressure_rear=26.0),
        aero=AeroBase(downforce_front=50.0, downforce_rear=80.0),
        electronics=ElectronicsBase(
            traction_control=0, abs_level=0, stability_control=0, turbo_map=1.0
        ),
        brakes=BrakeBase(bias=60.0, pressure=100.0),
    ),
    "Rally": StyleProfile(
        gearing=_OFFROAD_GEARING,
        differential=DifferentialBase(accel=60.0, decel=25.0),
        chassis=ChassisBase(
            spring_rate=380.0, ride_height=15.0, arb_scale=0.8, damping_intent=0.9
        ),
        alignment=AlignmentBase(
            camber_front=-1.5, camber_rear=-1.2, toe_front=0.0, toe_rear=0.15, caster=5.5
        ),
        tires=TireBase(compound="Rally", pressure_front=27.0, pressure_rear=25.0),
        aero=AeroBase(downforce_front=80.0, downforce_rear=120.0),
        electronics=ElectronicsBase(
            traction_control=1, abs_level=1, stability_control=1, turbo_map=0.88
        ),
        brakes=BrakeBase(bias=51.0, pressure=100.0),
    ),
    "Offroad": StyleProfile(
        gearing=_OFFROAD_GEARING,
        differential=DifferentialBase(accel=60.0, decel=25.0),
        chassis=ChassisBase(
            spring_rate=350.0, ride_height=18.0, arb_scale=0.8, damping_intent=0.9
        ),
        alignment=AlignmentBase(
            camber_front=-1.0, camber_rear=-0.8, toe_front=0.0, toe_rear=0.1, caster=5.0
        ),
        tires=TireBase(compound="Offroad", pressure_front=26.0, pressure_rear=24.0),
        aero=AeroBase(downforce_front=0.0, downforce_rear=0.0),
        electronics=ElectronicsBase(
            traction_control=2, abs_level=1, stability_control=1, turbo_map=0.85
        ),
        brakes=BrakeBase(bias=50.0, pressure=95.0),
    ),
    "Cruise": StyleProfile(
        gearing=GearingBase(final_drive=3.0, gear_ratios=(2.6, 1.8, 1.3, 1.05, 0.88, 0.72)),
        differential=DifferentialBase(accel=45.0, decel=25.0),
        chassis=ChassisBase(spring_rate=400.0, ride_height=12.0),
        alignment=AlignmentBase(
            camber_front=-1.0, camber_rear=-0.8, toe_front=0.0, toe_rear=0.05, caster=5.0
        ),
        tires=TireBase(compound="Street", pressure_front=33.0, pressure_rear=31.0),
        aero=AeroBase(downforce_front=60.0, downforce_rear=90.0),
        electronics=ElectronicsBase(
            traction_control=2, abs_level=2, stability_control=2, turbo_map=0.75
        ),
        brakes=BrakeBase(bias=53.0, pressure=100.0),
    ),
    "Drag": StyleProfile(
        gearing=GearingBase(
            final_drive=4.5,
            gear_ratios=(3.8, 2.6, 1.85, 1.4, 1.15, 0.95),
            nudge=FinalDriveNudge(threshold=0.2, above=0.3),
        ),
        differential=DifferentialBase(accel=100.0, decel=10.0),
        chassis=ChassisBase(
            spring_rate=550.0,
            ride_height=5.0,
            rear_ride_height_offset=3.0,
            arb_scale=0.7,
            damping_intent=0.95,
        ),
        alignment=AlignmentBase(
            camber_front=-2.0, camber_rear=-1.5, toe_front=0.0, toe_rear=0.0, caster=5.0
        ),
        tires=TireBase(compound="Drag", pressure_front=35.0, pressure_rear=22.0),
        aero=AeroBase(downforce_front=0.0, downforce_rear=0.0),
        electronics=ElectronicsBase(
            traction_control=0, abs_level=0, stability_control=0, turbo_map=1.0
        ),
        brakes=BrakeBase(bias=70.0, pressure=110.0),
    ),
}


def style_profile(style: str) -> StyleProfile:
    """Look up the base-constant profile for a driving style.

    Args:
        style: Driving-style preset name.

    Returns:
        Base-constant profile for ``style``.

    Raises:
        fh5tune.utils.exceptions.ConfigurationError: If ``style`` has no
            profile.
    """
    try:
        return STYLE_PROFILES[style]
    except KeyError:
        msg = f"Unsupported tune style {style!r}; expected one of {VALID_TUNE_STYLES}"
        raise ConfigurationError(msg) from None
