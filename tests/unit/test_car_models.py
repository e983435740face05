"""Validation tests for the car specification model."""

from __future__ import annotations

import math
import unittest
from dataclasses import replace

from fh5tune.tuning.engine import compute_tune
from fh5tune.utils.exceptions import InvalidCarSpecError
from tests.helpers import civic_type_r, gtr_r35


class CarModelTests(unittest.TestCase):
    """Unit tests for car validation and derived properties."""

    def test_reference_car_validates(self) -> None:
        """Accept a complete reference car."""
        gtr_r35().validate()

    def test_derived_properties(self) -> None:
        """Expose power-to-weight, drive layout and display label."""
        car = gtr_r35()
        self.assertAlmostEqual(car.power_to_weight, 565 / 3865)
        self.assertTrue(car.is_four_wheel_drive)
        self.assertFalse(civic_type_r().is_four_wheel_drive)
        self.assertEqual(car.display_name, "2017 Nissan GT-R (R35)")

    def test_validation_rejects_invalid_values(self) -> None:
        """Raise invalid-car errors for structurally broken specifications."""
        base = gtr_r35()
        invalid = [
            replace(base, weight_lbs=0),
            replace(base, weight_lbs=-10.0),
            replace(base, power_hp=-1.0),
            replace(base, power_hp=math.nan),
            replace(base, pi=math.inf),
            replace(base, manufacturer=" "),
            replace(base, model=""),
            replace(base, drivetrain="6WD"),
            replace(base, year="2017"),
            replace(base, gears=0),
            replace(base, weight_distribution_front=-0.5),
            replace(base, weight_distribution_front=math.nan),
            replace(base, gears="7"),
            replace(base, gears=True),
            replace(base, weight_distribution_front="54"),
            replace(base, top_speed_mph="196"),
            replace(base, torque_ftlb=math.inf),
        ]
        for car in invalid:
            with self.subTest(car=car), self.assertRaises(InvalidCarSpecError):
                car.validate()

    def test_compute_tune_reports_non_numeric_optional_fields(self) -> None:
        """Surface text in optional numeric fields as an invalid-car error."""
        with self.assertRaises(InvalidCarSpecError):
            compute_tune(replace(gtr_r35(), gears="7"), {}, "Race")
        with self.assertRaises(InvalidCarSpecError):
            compute_tune(replace(gtr_r35(), weight_distribution_front="54"), {}, "Race")

    def test_optional_numeric_fields_accept_numbers(self) -> None:
        """Accept finite numbers in every optional numeric field."""
        replace(
            gtr_r35(),
            gears=6,
            weight_distribution_front=54.0,
            top_speed_mph=196.0,
            torque_ftlb=467,
        ).validate()


if __name__ == "__main__":
    unittest.main()
