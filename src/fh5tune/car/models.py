"""Car specification data model."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Literal

from fh5tune.utils.exceptions import InvalidCarSpecError

Drivetrain = Literal["RWD", "FWD", "AWD", "4WD"]
VALID_DRIVETRAINS: tuple[str, ...] = ("RWD", "FWD", "AWD", "4WD")
FOUR_WHEEL_DRIVETRAINS: tuple[str, ...] = ("AWD", "4WD")


@dataclass(frozen=True)
class Car:
    """Vehicle specification used as tune-calculation input.

    Args:
        manufacturer: Manufacturer name.
        model: Model name.
        year: Model year.
        pi: Performance index.
        drivetrain: Drivetrain layout (``RWD``, ``FWD``, ``AWD`` or ``4WD``).
        power_hp: Engine power [hp].
        weight_lbs: Curb weight [lb].
        engine_type: Descriptive engine layout, e.g. ``"V6"``.
        aspiration: Descriptive aspiration, e.g. ``"Twin Turbo"``.
        displacement_l: Engine displacement [l].
        gears: Optional native gear count.
        weight_distribution_front: Optional static front weight fraction.
        top_speed_mph: Optional top speed [mph].
        torque_ftlb: Optional peak torque [ft*lb].
    """

    manufacturer: str
    model: str
    year: int
    pi: int
    drivetrain: Drivetrain
    power_hp: float
    weight_lbs: float
    engine_type: str = "Unknown"
    aspiration: str = "Unknown"
    displacement_l: float = 0.0
    gears: int | None = None
    weight_distribution_front: float | None = None
    top_speed_mph: float | None = None
    torque_ftlb: float | None = None

    @property
    def power_to_weight(self) -> float:
        """Power-to-weight ratio.

        Returns:
            Engine power divided by curb weight [hp/lb].
        """
        return self.power_hp / self.weight_lbs

    @property
    def is_four_wheel_drive(self) -> bool:
        """Whether the drivetrain drives both axles.

        Returns:
            ``True`` for ``AWD`` and ``4WD`` layouts.
        """
        return self.drivetrain in FOUR_WHEEL_DRIVETRAINS

    @property
    def display_name(self) -> str:
        """Human-readable ``year manufacturer model`` label.

        Returns:
            Display label for sheets and plots.
        """
        return f"{self.year} {self.manufacturer} {self.model}"

    def validate(self) -> None:
        """Validate required fields before tune calculation.

        Raises:
            fh5tune.utils.exceptions.InvalidCarSpecError: If a required field
                is missing, non-finite, or outside its domain.
        """
        if not str(self.manufacturer).strip():
            msg = "manufacturer must be a non-empty string"
            raise InvalidCarSpecError(msg)
        if not str(self.model).strip():
            msg = "model must be a non-empty string"
            raise InvalidCarSpecError(msg)
        if self.drivetrain not in VALID_DRIVETRAINS:
            msg = f"drivetrain must be one of {VALID_DRIVETRAINS}, got: {self.drivetrain!r}"
            raise InvalidCarSpecError(msg)
        for name in ("year", "pi", "power_hp", "weight_lbs", "displacement_l"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                msg = f"{name} must be numeric, got {type(value).__name__}"
                raise InvalidCarSpecError(msg)
            if not math.isfinite(value):
                msg = f"{name} must be finite"
                raise InvalidCarSpecError(msg)
        for name in ("gears", "weight_distribution_front", "top_speed_mph", "torque_ftlb"):
            value = getattr(self, name)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                msg = f"{name} must be numeric when given, got {type(value).__name__}"
                raise InvalidCarSpecError(msg)
            if not math.isfinite(value):
                msg = f"{name} must be finite when given"
                raise InvalidCarSpecError(msg)
        if self.weight_lbs <= 0.0:
            msg = "weight_lbs must be positive"
            raise InvalidCarSpecError(msg)
        if self.power_hp < 0.0:
            msg = "power_hp must not be negative"
            raise InvalidCarSpecError(msg)
        if self.gears is not None and self.gears < 1:
            msg = "gears must be at least 1 when given"
            raise InvalidCarSpecError(msg)
        if self.weight_distribution_front is not None and not (
            math.isfinite(self.weight_distribution_front) and self.weight_distribution_front > 0.0
        ):
            msg = "weight_distribution_front must be a positive finite number when given"
            raise InvalidCarSpecError(msg)
