"""Plot generation for tune analysis."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

import matplotlib
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure

from fh5tune.analysis.summary import summarize_tune
from fh5tune.tuning.result import TuneOutput

matplotlib.use("Agg")


def _save_dual_format(fig: Figure, out_base: Path) -> None:
    """Write a figure to PNG and PDF with a shared base path.

    Args:
        fig: Figure object to persist.
        out_base: Output path without suffix.
    """
    out_base.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(out_base.with_suffix(".png"), dpi=180, bbox_inches="tight")
    fig.savefig(out_base.with_suffix(".pdf"), bbox_inches="tight")


def plot_gear_ratios(tunes: Mapping[str, TuneOutput], out_base: Path) -> None:
    """Plot overall ratio (gear times final drive) per gear for each tune.

    Args:
        tunes: Label -> tune mapping.
        out_base: Output path without suffix.
    """
    fig, ax = plt.subplots(figsize=(8, 4.5))
    for label, tune in tunes.items():
        overall = summarize_tune(tune).overall_ratios
        ax.plot(np.arange(1, overall.size + 1), overall, marker="o", lw=1.8, label=label)
    ax.set_xlabel("Gear")
    ax.set_ylabel("Overall ratio [-]")
    ax.set_title("Overall Gear Ratios")
    ax.grid(True, alpha=0.3)
    ax.legend()
    _save_dual_format(fig, out_base)
    plt.close(fig)


def plot_style_comparison(tunes: Mapping[str, TuneOutput], out_base: Path) -> None:
    """Plot front/rear spring rates and downforce side by side per tune.

    Args:
        tunes: Label -> tune mapping.
        out_base: Output path without suffix.
    """
    labels = list(tunes)
    positions = np.arange(len(labels))
    width = 0.38
    fig, (ax_springs, ax_aero) = plt.subplots(1, 2, figsize=(12, 4.5))

    ax_springs.bar(positions - width / 2, [t.spring_front for t in tunes.values()], width, label="Front")
    ax_springs.bar(positions + width / 2, [t.spring_rear for t in tunes.values()], width, label="Rear")
    ax_springs.set_ylabel("Spring rate [lb/in]")
    ax_springs.set_title("Springs")

    ax_aero.bar(positions - width / 2, [t.downforce_front for t in tunes.values()], width, label="Front")
    ax_aero.bar(positions + width / 2, [t.downforce_rear for t in tunes.values()], width, label="Rear")
    ax_aero.set_ylabel("Downforce [kg]")
    ax_aero.set_title("Aero")

    for ax in (ax_springs, ax_aero):
        ax.set_xticks(positions, labels, rotation=30)
        ax.grid(True, axis="y", alpha=0.3)
        ax.legend()
    _save_dual_format(fig, out_base)
    plt.close(fig)


def export_standard_plots(tunes: Mapping[str, TuneOutput], output_dir: str | Path) -> None:
    """Export all standard tune plots in PNG and PDF format.

    Args:
        tunes: Label -> tune mapping used as plotting input.
        output_dir: Destination directory for all generated plots.
    """
    out_dir = Path(output_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    plot_gear_ratios(tunes, out_dir / "gear_ratios")
    plot_style_comparison(tunes, out_dir / "style_comparison")
