"""Tests for tune summaries, comparisons, plots and logging helpers."""

from __future__ import annotations

import logging
import math
import tempfile
import unittest
from dataclasses import replace
from pathlib import Path
from unittest import mock

import numpy as np

from fh5tune.analysis import (
    compare_styles,
    export_standard_plots,
    summarize_tune,
    tunes_to_dataframe,
)
from fh5tune.tuning.config import VALID_TUNE_STYLES
from fh5tune.tuning.engine import compute_tune
from fh5tune.utils.logging import configure_logging
from tests.helpers import gtr_r35, porsche_911_gt3_rs


class SummaryTests(unittest.TestCase):
    """Unit tests for gearing and balance metrics."""

    def test_reference_summary(self) -> None:
        """Compute overall ratios and axle shares for the race tune."""
        tune = compute_tune(gtr_r35(), {}, "Race")
        summary = summarize_tune(tune)
        np.testing.assert_allclose(summary.overall_ratios, np.asarray(tune.gear_ratios) * 3.3)
        self.assertEqual(summary.gear_steps.size, 5)
        self.assertTrue(np.all(summary.gear_steps > 1.0))
        self.assertAlmostEqual(summary.ratio_spread, 3.0 / 0.85)
        self.assertAlmostEqual(summary.spring_front_share, 0.5)
        self.assertAlmostEqual(summary.pressure_split, 2.0)
        self.assertAlmostEqual(summary.downforce_front_share, 150 / 350)

    def test_degenerate_inputs(self) -> None:
        """Handle a single gear and zero downforce."""
        tune = replace(compute_tune(gtr_r35(), {}, "Offroad"), gear_ratios=(3.0,))
        summary = summarize_tune(tune)
        self.assertEqual(summary.mean_gear_step, 0.0)
        self.assertEqual(summary.ratio_spread, 1.0)
        self.assertEqual(summary.downforce_front_share, 0.0)


class ComparisonTests(unittest.TestCase):
    """Unit tests for tabular tune comparison."""

    def test_compare_all_styles(self) -> None:
        """Return one row per style with expanded gear columns."""
        frame = compare_styles(gtr_r35())
        self.assertEqual(list(frame.index), list(VALID_TUNE_STYLES))
        for column in ("final_drive", "gear_1", "gear_6", "center_diff", "tire_compound"):
            self.assertIn(column, frame.columns)
        self.assertNotIn("gear_ratios", frame.columns)
        self.assertEqual(frame.loc["Race", "final_drive"], 3.3)
        self.assertEqual(frame.loc["Drift", "center_diff"], 70)

    def test_rwd_comparison_has_no_awd_columns(self) -> None:
        """Omit AWD split columns for two-wheel-drive cars."""
        frame = compare_styles(porsche_911_gt3_rs(), styles=("Race", "Drift"), weather="Wet")
        self.assertEqual(list(frame.index), ["Race", "Drift"])
        self.assertNotIn("center_diff", frame.columns)

    def test_mixed_gear_counts_are_padded(self) -> None:
        """Fill missing gear columns with NaN."""
        six = compute_tune(gtr_r35(), {}, "Race")
        eight = compute_tune(gtr_r35(), {"Drivetrain": {"Transmission": "Race: 8 Speed"}}, "Race")
        frame = tunes_to_dataframe({"six": six, "eight": eight})
        self.assertTrue(math.isnan(frame.loc["six", "gear_8"]))
        self.assertEqual(frame.loc["eight", "gear_8"], 0.66)
        self.assertTrue(tunes_to_dataframe({}).empty)


class PlotAndLoggingTests(unittest.TestCase):
    """Coverage tests for plotting and logging helpers."""

    def test_standard_plots_are_created(self) -> None:
        """Write every standard plot as PNG and PDF."""
        tunes = {style: compute_tune(gtr_r35(), {}, style) for style in ("Race", "Drift", "Offroad")}
        with tempfile.TemporaryDirectory() as tmp:
            out_dir = Path(tmp) / "plots"
            export_standard_plots(tunes, out_dir)
            for name in ("gear_ratios", "style_comparison"):
                for suffix in (".png", ".pdf"):
                    self.assertTrue((out_dir / name).with_suffix(suffix).exists())

    def test_configure_logging_sets_level_and_format(self) -> None:
        """Forward level and pipe-separated format to ``basicConfig``."""
        with mock.patch("logging.basicConfig") as basic_config:
            configure_logging(logging.DEBUG)
        basic_config.assert_called_once()
        kwargs = basic_config.call_args.kwargs
        self.assertEqual(kwargs["level"], logging.DEBUG)
        self.assertIn("%(levelname)s", kwargs["format"])
        self.assertIn("%(name)s", kwargs["format"])


if __name__ == "__main__":
    unittest.main()
