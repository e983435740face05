"""Tests for differential calculation and upgrades."""

from __future__ import annotations

import unittest

from fh5tune.tuning.differential import apply_differential_upgrade, calculate_differential
from fh5tune.tuning.engine import compute_tune
from fh5tune.tuning.styles import style_profile
from tests.helpers import gtr_r35, porsche_911_gt3_rs


class DifferentialTests(unittest.TestCase):
    """Unit tests for lock, preload and AWD split values."""

    def test_awd_splits_are_derived_from_acceleration_lock(self) -> None:
        """Derive center, front and rear splits for AWD cars."""
        setup = calculate_differential(gtr_r35(), style_profile("Race").differential)
        self.assertEqual((setup.accel, setup.decel, setup.preload), (75, 15, 36))
        self.assertEqual(setup.center_diff, 50)
        self.assertEqual(setup.front_diff, 60.0)
        self.assertEqual(setup.rear_diff, 67.5)

    def test_two_wheel_drive_has_no_splits(self) -> None:
        """Leave AWD split fields unset for RWD cars."""
        setup = calculate_differential(porsche_911_gt3_rs(), style_profile("Road").differential)
        self.assertEqual((setup.accel, setup.decel, setup.preload), (50, 20, 28))
        self.assertIsNone(setup.center_diff)
        self.assertIsNone(setup.front_diff)
        self.assertIsNone(setup.rear_diff)

    def test_drift_center_balance_is_rear_biased(self) -> None:
        """Use the drift center balance for AWD drift tunes."""
        setup = calculate_differential(gtr_r35(), style_profile("Drift").differential)
        self.assertEqual(setup.preload, 8)
        self.assertEqual(setup.center_diff, 70)


class DifferentialUpgradeTests(unittest.TestCase):
    """Unit tests for differential upgrade tier deltas."""

    def test_tier_deltas(self) -> None:
        """Add per-tier acceleration and deceleration deltas."""
        base = compute_tune(gtr_r35(), {}, "Race")
        cases = {
            "Sport": (80, 20),
            "Race": (85, 20),
            "Rally": (80, 25),
            "Off-Road": (85, 25),
            "Drift": (95, 10),
        }
        for tier, expected in cases.items():
            with self.subTest(tier=tier):
                tuned = apply_differential_upgrade(base, {"Drivetrain": {"Differential": tier}})
                self.assertEqual((tuned.differential_accel, tuned.differential_decel), expected)
                self.assertEqual(tuned.differential_preload, base.differential_preload)

    def test_locks_are_clamped(self) -> None:
        """Clamp upgraded locks to 100 percent."""
        drag = compute_tune(porsche_911_gt3_rs(), {"Drivetrain": {"Differential": "Drift"}}, "Drag")
        self.assertEqual(drag.differential_accel, 100)
        self.assertEqual(drag.differential_decel, 5)

    def test_stock_and_unknown_tiers_are_ignored(self) -> None:
        """Return the tune unchanged for stock or unknown tiers."""
        base = compute_tune(gtr_r35(), {}, "Race")
        self.assertIs(apply_differential_upgrade(base, {"Drivetrain": {"Differential": "Stock"}}), base)
        self.assertIs(apply_differential_upgrade(base, {"Drivetrain": {"Differential": "Custom"}}), base)
        self.assertIs(apply_differential_upgrade(base, None), base)


if __name__ == "__main__":
    unittest.main()
