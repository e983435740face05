"""Gearing, gear-count normalization and manual gearing overrides."""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass, replace

from fh5tune.car.models import Car
from fh5tune.tuning.result import TuneOutput
from fh5tune.tuning.styles import GearingBase
from fh5tune.tuning.upgrades import UpgradeSelection, get_upgrade
from fh5tune.utils.constants import DEFAULT_GEAR_COUNT, MAX_GEAR_COUNT, MIN_GEAR_COUNT

logger = logging.getLogger(__name__)

EXTENSION_RATIO_STEP = 0.88
MIN_EXTENSION_RATIO = 0.4
DRIFT_TRANSMISSION_GEARS = 4

_RACE_TRANSMISSION = re.compile(r"^\s*race\s*:\s*(\d+)\s*-?\s*speed", re.IGNORECASE)
_DRIFT_TRANSMISSION = re.compile(r"^\s*drift\s*:\s*4\s*-?\s*speed", re.IGNORECASE)


@dataclass(frozen=True)
class GearingSetup:
    """Final drive and per-gear ratios.

    Args:
        final_drive: Final-drive ratio.
        gear_ratios: Per-gear ratios, first gear first.
    """

    final_drive: float
    gear_ratios: tuple[float, ...]


def calculate_gearing(base: GearingBase, power_to_weight: float) -> GearingSetup:
    """Select base gearing and apply the power-to-weight final-drive nudge.

    Args:
        base: Style gearing table entry.
        power_to_weight: Car power-to-weight ratio [hp/lb].

    Returns:
        Base gearing with a six-speed ratio set.
    """
    final_drive = base.final_drive
    if base.nudge is not None:
        final_drive = round(final_drive + base.nudge.offset(power_to_weight), 2)
    return GearingSetup(final_drive=final_drive, gear_ratios=tuple(base.gear_ratios))


def _in_gear_range(count: int | None) -> bool:
    """Check a gear count against the supported transmission range.

    Args:
        count: Candidate gear count.

    Returns:
        ``True`` if ``count`` is set and within ``[4, 10]``.
    """
    return count is not None and MIN_GEAR_COUNT <= count <= MAX_GEAR_COUNT


def resolve_gear_count(car: Car, upgrades: UpgradeSelection | None) -> int:
    """Resolve the forward gear count from transmission upgrade or car data.

    Args:
        car: Effective car.
        upgrades: Upgrade selection.

    Returns:
        ``N`` for a ``"Race: N Speed"`` transmission in range, 4 for a
        ``"Drift: 4 Speed"`` transmission, else the car's native gear count
        when in range, else the default of 6.
    """
    transmission = get_upgrade(upgrades, "Drivetrain", "Transmission") or ""
    race_match = _RACE_TRANSMISSION.match(transmission)
    if race_match is not None and _in_gear_range(int(race_match.group(1))):
        return int(race_match.group(1))
    if _DRIFT_TRANSMISSION.match(transmission):
        return DRIFT_TRANSMISSION_GEARS
    if _in_gear_range(car.gears):
        return int(car.gears)
    return DEFAULT_GEAR_COUNT


def resize_gear_ratios(ratios: tuple[float, ...], count: int) -> tuple[float, ...]:
    """Truncate or extend a ratio set to ``count`` gears.

    Extra gears are synthesized by repeatedly multiplying the last ratio by
    :data:`EXTENSION_RATIO_STEP`, rounded to two decimals and floored at
    :data:`MIN_EXTENSION_RATIO`.

    Args:
        ratios: Existing ratios, first gear first.
        count: Target gear count.

    Returns:
        Ratio set with exactly ``count`` entries.
    """
    resized = list(ratios[:count])
    while len(resized) < count:
        last = resized[-1] if resized else 1.0
        resized.append(max(MIN_EXTENSION_RATIO, round(last * EXTENSION_RATIO_STEP, 2)))
    return tuple(resized)


def normalize_gear_count(
    tune: TuneOutput,
    car: Car,
    upgrades: UpgradeSelection | None,
) -> TuneOutput:
    """Reshape the tune's ratio set to the resolved gear count.

    Args:
        tune: Combined tune so far.
        car: Effective car.
        upgrades: Upgrade selection.

    Returns:
        Tune with :attr:`TuneOutput.gear_ratios` of the resolved length.
    """
    count = resolve_gear_count(car, upgrades)
    if count == tune.gear_count:
        return tune
    return replace(tune, gear_ratios=resize_gear_ratios(tune.gear_ratios, count))


def parse_override(value: str | float | None) -> float | None:
    """Parse a free-text manual tuning value.

    Args:
        value: User-entered value, string or number.

    Returns:
        Finite float, or ``None`` when blank, non-numeric or non-finite.
    """
    if value is None:
        return None
    try:
        number = float(str(value).strip())
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def apply_manual_overrides(tune: TuneOutput, upgrades: UpgradeSelection | None) -> TuneOutput:
    """Apply ``Tuning`` section final-drive and gear-ratio overrides.

    The final drive is replaced whenever it parses. Gear ratios are
    all-or-nothing: every gear ``1..gear_count`` must carry a valid positive
    ratio, otherwise no gear override is applied.

    Args:
        tune: Tune after gear-count normalization.
        upgrades: Upgrade selection holding the ``Tuning`` section.

    Returns:
        Tune with manual overrides applied.
    """
    changes: dict[str, object] = {}

    final_drive = parse_override(get_upgrade(upgrades, "Tuning", "Final Drive"))
    if final_drive is not None:
        changes["final_drive"] = final_drive

    ratios: list[float] = []
    for gear in range(1, tune.gear_count + 1):
        raw = get_upgrade(upgrades, "Tuning", f"Gear {gear} Ratio")
        ratio = parse_override(raw)
        if ratio is None or ratio <= 0.0:
            if raw is not None or ratios:
                logger.debug("Ignoring gear ratio overrides: gear %d value %r is invalid", gear, raw)
            break
        ratios.append(ratio)
    else:
        changes["gear_ratios"] = tuple(ratios)

    return replace(tune, **changes) if changes else tune
