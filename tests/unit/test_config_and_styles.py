"""Tests for tune configuration and per-style base tables."""

from __future__ import annotations

import unittest

from fh5tune.tuning.config import (
    VALID_TUNE_STYLES,
    VALID_WEATHER_PRESETS,
    TuneConfig,
    build_tune_config,
)
from fh5tune.tuning.styles import STYLE_PROFILES, FinalDriveNudge, style_profile
from fh5tune.utils.exceptions import ConfigurationError


class TuneConfigTests(unittest.TestCase):
    """Unit tests for style/weather validation."""

    def test_build_accepts_every_supported_value(self) -> None:
        """Build configs for every style and weather combination."""
        for style in VALID_TUNE_STYLES:
            for weather in VALID_WEATHER_PRESETS:
                config = build_tune_config(style, weather)
                self.assertEqual(config.style, style)
                self.assertEqual(config.is_wet, weather == "Wet")

    def test_unsupported_values_raise(self) -> None:
        """Reject unknown styles and weather presets instead of defaulting."""
        with self.assertRaises(ConfigurationError):
            build_tune_config("Sprint")
        with self.assertRaises(ConfigurationError):
            build_tune_config("race")
        with self.assertRaises(ConfigurationError):
            TuneConfig(style="Race", weather="Snow").validate()


class StyleProfileTests(unittest.TestCase):
    """Unit tests for the style table contents."""

    def test_every_style_has_a_profile(self) -> None:
        """Provide one profile per supported style."""
        self.assertEqual(set(STYLE_PROFILES), set(VALID_TUNE_STYLES))

    def test_base_gear_ratios_strictly_decrease(self) -> None:
        """Keep every six-speed base set strictly descending."""
        for style, profile in STYLE_PROFILES.items():
            ratios = profile.gearing.gear_ratios
            with self.subTest(style=style):
                self.assertEqual(len(ratios), 6)
                self.assertTrue(all(a > b for a, b in zip(ratios, ratios[1:])))

    def test_street_and_road_share_tables(self) -> None:
        """Use identical base values for Street and Road."""
        self.assertEqual(style_profile("Street"), style_profile("Road"))

    def test_unknown_style_lookup_raises(self) -> None:
        """Raise configuration errors for styles without a profile."""
        with self.assertRaises(ConfigurationError):
            style_profile("Touring")

    def test_final_drive_nudge_offsets(self) -> None:
        """Select the above/below offset around the threshold."""
        nudge = FinalDriveNudge(threshold=0.25, above=0.2, below=-0.2)
        self.assertEqual(nudge.offset(0.3), 0.2)
        self.assertEqual(nudge.offset(0.25), -0.2)


if __name__ == "__main__":
    unittest.main()
