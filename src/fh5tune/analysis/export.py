"""Structured export helpers for computed tunes."""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any

from fh5tune.tuning.result import AWD_DIFFERENTIAL_FIELDS, TuneOutput


def tune_to_dict(tune: TuneOutput) -> dict[str, Any]:
    """Convert a tune to a JSON-serializable dictionary.

    AWD differential keys are omitted entirely when not set.

    Args:
        tune: Computed tune.

    Returns:
        Field-name keyed dictionary with ``gear_ratios`` as a list.
    """
    data = asdict(tune)
    data["gear_ratios"] = list(tune.gear_ratios)
    for name in AWD_DIFFERENTIAL_FIELDS:
        if data[name] is None:
            del data[name]
    return data


def tune_to_json(tune: TuneOutput, indent: int = 2) -> str:
    """Serialize a tune as JSON text.

    Args:
        tune: Computed tune.
        indent: JSON indentation width.

    Returns:
        JSON document.
    """
    return json.dumps(tune_to_dict(tune), indent=indent)


def export_tune_json(tune: TuneOutput, path: str | Path) -> None:
    """Persist a tune as JSON.

    Args:
        tune: Computed tune.
        path: Output file path for the JSON document.
    """
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(tune_to_json(tune), encoding="utf-8")
