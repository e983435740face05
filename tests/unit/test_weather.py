"""Tests for the wet-weather modifier."""

from __future__ import annotations

import unittest
from dataclasses import replace

from fh5tune.tuning.engine import compute_tune
from fh5tune.tuning.weather import apply_wet_modifier
from tests.helpers import gtr_r35


class WetModifierTests(unittest.TestCase):
    """Unit tests for wet-weather adjustments."""

    def test_reference_wet_adjustments(self) -> None:
        """Apply every wet delta to the reference race tune."""
        dry = compute_tune(gtr_r35(), {}, "Race")
        wet = apply_wet_modifier(dry)
        self.assertEqual((wet.tire_pressure_front, wet.tire_pressure_rear), (28, 26))
        self.assertEqual(wet.differential_accel, 65)
        self.assertEqual((wet.camber_front, wet.camber_rear), (-2.8, -2.3))
        self.assertEqual(wet.toe_rear, 0.25)
        self.assertEqual(wet.toe_front, dry.toe_front)
        self.assertEqual((wet.downforce_front, wet.downforce_rear), (170, 230))
        self.assertEqual(wet.traction_control_level, 1)
        self.assertEqual(wet.differential_decel, dry.differential_decel)
        self.assertEqual(wet.brake_bias, dry.brake_bias)

    def test_floors_and_caps(self) -> None:
        """Respect the diff lock floor, assist cap and pressure minimum."""
        drift = apply_wet_modifier(compute_tune(gtr_r35(), {}, "Drift"))
        self.assertEqual(drift.differential_accel, 10)

        offroad = apply_wet_modifier(compute_tune(gtr_r35(), {}, "Offroad"))
        self.assertEqual(offroad.traction_control_level, 2)

        low = replace(compute_tune(gtr_r35(), {}, "Race"), tire_pressure_front=16.0)
        self.assertEqual(apply_wet_modifier(low).tire_pressure_front, 15.0)

    def test_pipeline_applies_modifier_last(self) -> None:
        """Apply wet adjustments after upgrade deltas."""
        upgrades = {"Tires": {"Front Compound": "Race Slick", "Rear Compound": "Race Slick"}}
        wet = compute_tune(gtr_r35(), upgrades, "Race", "Wet")
        self.assertEqual((wet.tire_pressure_front, wet.tire_pressure_rear), (27, 25))
        self.assertEqual(wet, apply_wet_modifier(compute_tune(gtr_r35(), upgrades, "Race")))


if __name__ == "__main__":
    unittest.main()
