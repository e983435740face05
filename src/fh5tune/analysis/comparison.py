"""Tabular comparison of several tunes."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

import pandas as pd

from fh5tune.analysis.export import tune_to_dict
from fh5tune.car.models import Car
from fh5tune.tuning.config import DEFAULT_WEATHER, VALID_TUNE_STYLES
from fh5tune.tuning.engine import compute_tune
from fh5tune.tuning.result import TuneOutput
from fh5tune.tuning.upgrades import UpgradeSelection


def tunes_to_dataframe(tunes: Mapping[str, TuneOutput]) -> pd.DataFrame:
    """Tabulate labelled tunes, one row per tune.

    Gear ratios are expanded into ``gear_1`` ... ``gear_N`` columns; tunes
    with fewer gears or without AWD splits have ``NaN`` in those columns.

    Args:
        tunes: Label -> tune mapping, e.g. style name -> tune.

    Returns:
        DataFrame indexed by label.
    """
    rows = []
    for label, tune in tunes.items():
        row = tune_to_dict(tune)
        ratios = row.pop("gear_ratios")
        row.update({f"gear_{gear}": ratio for gear, ratio in enumerate(ratios, start=1)})
        row["label"] = label
        rows.append(row)
    frame = pd.DataFrame(rows)
    if frame.empty:
        return frame
    return frame.set_index("label")


def compare_styles(
    car: Car,
    upgrades: UpgradeSelection | None = None,
    weather: str = DEFAULT_WEATHER,
    styles: Iterable[str] = VALID_TUNE_STYLES,
) -> pd.DataFrame:
    """Compute and tabulate one tune per driving style.

    Args:
        car: Car specification.
        upgrades: Upgrade selection applied to every style.
        weather: Weather preset applied to every style.
        styles: Styles to compare.

    Returns:
        DataFrame indexed by style name.
    """
    return tunes_to_dataframe(
        {style: compute_tune(car, upgrades, style, weather) for style in styles}
    )
