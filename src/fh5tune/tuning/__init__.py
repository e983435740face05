"""Tune calculation engine, style tables and upgrade handling."""

from fh5tune.tuning.config import (
    VALID_TUNE_STYLES,
    VALID_WEATHER_PRESETS,
    TuneConfig,
    build_tune_config,
)
from fh5tune.tuning.engine import compute_tune
from fh5tune.tuning.result import TuneOutput
from fh5tune.tuning.styles import STYLE_PROFILES, StyleProfile, style_profile
from fh5tune.tuning.upgrades import UpgradeSelection, effective_car, get_upgrade

__all__ = [
    "STYLE_PROFILES",
    "VALID_TUNE_STYLES",
    "VALID_WEATHER_PRESETS",
    "StyleProfile",
    "TuneConfig",
    "TuneOutput",
    "UpgradeSelection",
    "build_tune_config",
    "compute_tune",
    "effective_car",
    "get_upgrade",
    "style_profile",
]
