"""Tune style and weather configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from fh5tune.utils.exceptions import ConfigurationError

TuneStyle = Literal["Street", "Road", "Race", "Drift", "Rally", "Offroad", "Cruise", "Drag"]
WeatherPreset = Literal["Dry", "Wet"]

VALID_TUNE_STYLES: tuple[str, ...] = (
    "Street",
    "Road",
    "Race",
    "Drift",
    "Rally",
    "Offroad",
    "Cruise",
    "Drag",
)
VALID_WEATHER_PRESETS: tuple[str, ...] = ("Dry", "Wet")
DEFAULT_WEATHER = "Dry"


@dataclass(frozen=True)
class TuneConfig:
    """Driving-style and weather selection for one tune calculation.

    Args:
        style: Driving-style preset selecting every base table.
        weather: Weather preset; ``Wet`` applies the wet modifier last.
    """

    style: TuneStyle
    weather: WeatherPreset = DEFAULT_WEATHER

    @property
    def is_wet(self) -> bool:
        """Whether the wet-weather modifier applies.

        Returns:
            ``True`` for the ``Wet`` preset.
        """
        return self.weather == "Wet"

    def validate(self) -> None:
        """Validate style and weather values.

        Raises:
            fh5tune.utils.exceptions.ConfigurationError: If style or weather is
                not one of the supported values.
        """
        if self.style not in VALID_TUNE_STYLES:
            msg = f"Unsupported tune style {self.style!r}; expected one of {VALID_TUNE_STYLES}"
            raise ConfigurationError(msg)
        if self.weather not in VALID_WEATHER_PRESETS:
            msg = (
                f"Unsupported weather preset {self.weather!r}; "
                f"expected one of {VALID_WEATHER_PRESETS}"
            )
            raise ConfigurationError(msg)


def build_tune_config(style: str, weather: str = DEFAULT_WEATHER) -> TuneConfig:
    """Build and validate a tune configuration.

    Args:
        style: Driving-style preset name.
        weather: Weather preset name.

    Returns:
        Validated tune configuration.

    Raises:
        fh5tune.utils.exceptions.ConfigurationError: If style or weather is
            unsupported.
    """
    config = TuneConfig(style=style, weather=weather)  # type: ignore[arg-type]
    config.validate()
    return config
