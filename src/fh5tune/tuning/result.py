"""Tune output record."""

from __future__ import annotations

from dataclasses import dataclass

AWD_DIFFERENTIAL_FIELDS: tuple[str, ...] = ("center_diff", "front_diff", "rear_diff")


@dataclass(frozen=True)
class TuneOutput:
    """Complete computed tune.

    Args:
        final_drive: Final-drive ratio.
        gear_ratios: Per-gear ratios, first gear first.
        differential_accel: Differential acceleration lock [%].
        differential_decel: Differential deceleration lock [%].
        differential_preload: Differential preload [%].
        brake_bias: Front brake bias [%].
        brake_pressure: Brake pressure [%].
        spring_front: Front spring rate [lb/in].
        spring_rear: Rear spring rate [lb/in].
        arb_front: Front anti-roll-bar stiffness.
        arb_rear: Rear anti-roll-bar stiffness.
        ride_height_front: Front ride height [cm].
        ride_height_rear: Rear ride height [cm].
        camber_front: Front camber [deg].
        camber_rear: Rear camber [deg].
        toe_front: Front toe [deg].
        toe_rear: Rear toe [deg].
        caster: Caster [deg].
        damping_rebound_front: Front rebound stiffness.
        damping_rebound_rear: Rear rebound stiffness.
        damping_compression_front: Front bump stiffness.
        damping_compression_rear: Rear bump stiffness.
        tire_compound: Tire compound label.
        tire_pressure_front: Front tire pressure [psi].
        tire_pressure_rear: Rear tire pressure [psi].
        downforce_front: Front downforce [kg].
        downforce_rear: Rear downforce [kg].
        turbo_map: Turbo mapping fraction.
        traction_control_level: Traction-control level.
        abs_level: ABS level.
        stability_control: Stability-control level.
        center_diff: AWD/4WD center balance toward the rear [%], else ``None``.
        front_diff: AWD/4WD front acceleration lock [%], else ``None``.
        rear_diff: AWD/4WD rear acceleration lock [%], else ``None``.
    """

    final_drive: float
    gear_ratios: tuple[float, ...]
    differential_accel: float
    differential_decel: float
    differential_preload: float
    brake_bias: float
    brake_pressure: float
    spring_front: float
    spring_rear: float
    arb_front: float
    arb_rear: float
    ride_height_front: float
    ride_height_rear: float
    camber_front: float
    camber_rear: float
    toe_front: float
    toe_rear: float
    caster: float
    damping_rebound_front: float
    damping_rebound_rear: float
    damping_compression_front: float
    damping_compression_rear: float
    tire_compound: str
    tire_pressure_front: float
    tire_pressure_rear: float
    downforce_front: float
    downforce_rear: float
    turbo_map: float
    traction_control_level: int
    abs_level: int
    stability_control: int
    center_diff: float | None = None
    front_diff: float | None = None
    rear_diff: float | None = None

    @property
    def gear_count(self) -> int:
        """Number of forward gears.

        Returns:
            Length of :attr:`gear_ratios`.
        """
        return len(self.gear_ratios)

    @property
    def has_awd_differential(self) -> bool:
        """Whether AWD/4WD differential splits are present.

        Returns:
            ``True`` when center, front and rear splits are all set.
        """
        return all(getattr(self, name) is not None for name in AWD_DIFFERENTIAL_FIELDS)
