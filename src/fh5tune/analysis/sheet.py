"""Fixed-width text tune sheet."""

from __future__ import annotations

from fh5tune.car.models import Car
from fh5tune.tuning.result import TuneOutput

SHEET_TITLE = "FORZA HORIZON 5 TUNE SHEET"
SHEET_WIDTH = 60
LABEL_WIDTH = 18

_ORDINAL_SUFFIXES = {1: "st", 2: "nd", 3: "rd"}


def ordinal(number: int) -> str:
    """Format a gear number as an English ordinal.

    Args:
        number: Positive integer.

    Returns:
        ``"1st"``, ``"2nd"``, ``"3rd"``, ``"4th"`` and so on.
    """
    suffix = "th" if 10 <= number % 100 <= 20 else _ORDINAL_SUFFIXES.get(number % 10, "th")
    return f"{number}{suffix}"


def _row(label: str, value: str) -> str:
    """Format one label/value line.

    Args:
        label: Field label including trailing colon.
        value: Formatted value.

    Returns:
        Line with the value aligned after a fixed label column.
    """
    return f"{label:<{LABEL_WIDTH}}{value}"


def _section(title: str, rows: list[str]) -> list[str]:
    """Format a titled section with a horizontal rule.

    Args:
        title: Section title.
        rows: Formatted value lines.

    Returns:
        Section lines, separated from the previous section by a blank line.
    """
    rule = "─" * SHEET_WIDTH
    return ["", rule, f"  {title}", rule, *rows]


def format_tune_sheet(tune: TuneOutput, car: Car, style: str) -> str:
    """Render a tune as a human-readable sheet grouped by subsystem.

    Args:
        tune: Computed tune.
        car: Car the tune was computed for.
        style: Driving-style preset used.

    Returns:
        Multi-line sheet text without trailing whitespace.
    """
    gearing = [_row("Final Drive:", f"{tune.final_drive:.2f}")]
    gearing += [
        _row(f"{ordinal(gear)} Gear:", f"{ratio:.2f}")
        for gear, ratio in enumerate(tune.gear_ratios, start=1)
    ]

    differential = [
        _row("Acceleration:", f"{tune.differential_accel:g}%"),
        _row("Deceleration:", f"{tune.differential_decel:g}%"),
        _row("Preload:", f"{tune.differential_preload:g}%"),
    ]
    if tune.center_diff is not None:
        differential.append(_row("Center Balance:", f"{tune.center_diff:g}%"))
    if tune.front_diff is not None:
        differential.append(_row("Front Diff:", f"{tune.front_diff:g}%"))
    if tune.rear_diff is not None:
        differential.append(_row("Rear Diff:", f"{tune.rear_diff:g}%"))

    border = "═" * SHEET_WIDTH
    lines = [
        f"╔{border}╗",
        f"║{SHEET_TITLE:^{SHEET_WIDTH}}║",
        f"╚{border}╝",
        "",
        f"CAR: {car.display_name}",
        f"PI: {car.pi} | {car.drivetrain} | {car.power_hp:g}hp @ {car.weight_lbs:g}lbs",
        f"TUNE TYPE: {style}",
    ]
    lines += _section("GEARING", gearing)
    lines += _section("DIFFERENTIAL", differential)
    lines += _section(
        "BRAKES",
        [
            _row("Balance:", f"{tune.brake_bias:g}%"),
            _row("Pressure:", f"{tune.brake_pressure:g}%"),
        ],
    )
    lines += _section(
        "SPRINGS & ANTI-ROLL BARS",
        [
            _row("Front Springs:", f"{tune.spring_front:.1f} lb/in"),
            _row("Rear Springs:", f"{tune.spring_rear:.1f} lb/in"),
            _row("Front ARB:", f"{tune.arb_front:.1f}"),
            _row("Rear ARB:", f"{tune.arb_rear:.1f}"),
        ],
    )
    lines += _section(
        "RIDE HEIGHT",
        [
            _row("Front:", f"{tune.ride_height_front:.1f} cm"),
            _row("Rear:", f"{tune.ride_height_rear:.1f} cm"),
        ],
    )
    lines += _section(
        "ALIGNMENT",
        [
            _row("Front Camber:", f"{tune.camber_front:.1f}°"),
            _row("Rear Camber:", f"{tune.camber_rear:.1f}°"),
            _row("Front Toe:", f"{tune.toe_front:.2f}°"),
            _row("Rear Toe:", f"{tune.toe_rear:.2f}°"),
            _row("Caster:", f"{tune.caster:.1f}°"),
        ],
    )
    lines += _section(
        "DAMPING",
        [
            _row("Front Rebound:", f"{tune.damping_rebound_front:.1f}"),
            _row("Rear Rebound:", f"{tune.damping_rebound_rear:.1f}"),
            _row("Front Bump:", f"{tune.damping_compression_front:.1f}"),
            _row("Rear Bump:", f"{tune.damping_compression_rear:.1f}"),
        ],
    )
    lines += _section(
        "TIRES",
        [
            _row("Compound:", tune.tire_compound),
            _row("Front Pressure:", f"{tune.tire_pressure_front:.1f} psi"),
            _row("Rear Pressure:", f"{tune.tire_pressure_rear:.1f} psi"),
        ],
    )
    lines += _section(
        "AERO",
        [
            _row("Front Downforce:", f"{tune.downforce_front:g} kg"),
            _row("Rear Downforce:", f"{tune.downforce_rear:g} kg"),
        ],
    )
    lines += _section(
        "POWER & ASSISTS",
        [
            _row("Turbo Mapping:", f"{tune.turbo_map * 100:.0f}%"),
            _row("Traction Control:", f"{tune.traction_control_level}"),
            _row("ABS:", f"{tune.abs_level}"),
            _row("Stability:", f"{tune.stability_control}"),
        ],
    )
    return "\n".join(line.rstrip() for line in lines)
