"""Forza Horizon 5 tune calculation package."""

from fh5tune.analysis.export import tune_to_dict
from fh5tune.analysis.sheet import format_tune_sheet
from fh5tune.car.models import Car
from fh5tune.tuning.engine import compute_tune
from fh5tune.tuning.result import TuneOutput

__all__ = [
    "Car",
    "TuneOutput",
    "compute_tune",
    "format_tune_sheet",
    "tune_to_dict",
]
