"""Utility helpers."""

from fh5tune.utils.constants import REFERENCE_FRONT_DISTRIBUTION, REFERENCE_WEIGHT_LBS
from fh5tune.utils.logging import configure_logging

__all__ = ["REFERENCE_FRONT_DISTRIBUTION", "REFERENCE_WEIGHT_LBS", "configure_logging"]
