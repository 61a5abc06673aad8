"""Input validation for batches of wire-format date-time strings."""

from __future__ import annotations

from datetime_primitives.date import DateTime
from datetime_primitives.types import DateTimeError


def validate_datetime_strings(values: dict[str, str]) -> list[str]:
    """Validate date-time strings. Returns list of error messages (empty = valid).

    Checks:
    - Each value is a string
    - Each value has the YYYY-MM-DDThh:mm:ss layout
    - Each numeric field parses and is within its range
    """
    errors: list[str] = []

    for key, text in values.items():
        if not isinstance(text, str):
            errors.append(f"{key}: expected a string, got {type(text).__name__}")
            continue

        try:
            DateTime.parse(text)
        except DateTimeError as e:
            errors.append(f"{key}: {e}")

    return errors
