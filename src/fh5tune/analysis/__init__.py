"""Tune presentation, export and comparison tools."""

from fh5tune.analysis.comparison import compare_styles, tunes_to_dataframe
from fh5tune.analysis.export import export_tune_json, tune_to_dict, tune_to_json
from fh5tune.analysis.plots import export_standard_plots
from fh5tune.analysis.sheet import format_tune_sheet
from fh5tune.analysis.summary import TuneSummary, summarize_tune

__all__ = [
    "TuneSummary",
    "compare_styles",
    "export_standard_plots",
    "export_tune_json",
    "format_tune_sheet",
    "summarize_tune",
    "tune_to_dict",
    "tune_to_json",
    "tunes_to_dataframe",
]
