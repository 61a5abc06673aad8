"""Data loading utilities for date-time fixtures."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from datetime_primitives.date import DateTime
from datetime_primitives.schema import validate_datetime_strings

log = logging.getLogger(__name__)


def load_datetimes_json(path: str | Path) -> dict[str, DateTime]:
    """Load DateTime values from a JSON fixture file.

    The JSON file maps ids to wire-format strings, optionally nested:
    {
        "datetimes": {
            "release": "2020-09-24T13:21:00",
            ...
        }
    }

    Raises ValueError if validation fails.
    """
    path = Path(path)
    with open(path) as f:
        data = json.load(f)

    raw = data.get("datetimes", data) if isinstance(data, dict) else data
    if not isinstance(raw, dict):
        raise ValueError(
            f"Validation errors in {path.name}:\n"
            "  - expected a mapping of id to date-time string"
        )

    errors = validate_datetime_strings(raw)
    if errors:
        raise ValueError(
            f"Validation errors in {path.name}:\n"
            + "\n".join(f"  - {e}" for e in errors)
        )

    values = {key: DateTime.parse(text) for key, text in raw.items()}
    log.debug("Loaded %d date-times from %s", len(values), path)
    return values
