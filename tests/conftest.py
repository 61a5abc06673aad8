"""Shared test fixtures and data loading for datetime-primitives.

All test data lives in data/fixtures/ as JSON files.  This module loads
that data and exposes helper functions + pytest fixtures for the tests.

Reference value: 2020-09-24T13:21:00 (stored month 8, stored day 23).
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
FIXTURES_DIR = Path(__file__).resolve().parent.parent / "data" / "fixtures"
SCENARIOS_DIR = FIXTURES_DIR / "scenarios"
DATETIMES_JSON = FIXTURES_DIR / "datetimes.json"

REFERENCE_WIRE = "2020-09-24T13:21:00"


# ---------------------------------------------------------------------------
# Data loaders
# ---------------------------------------------------------------------------
def _load_json(path: Path):
    with open(path) as f:
        return json.load(f)


def load_scenarios(name: str):
    """Load a scenario file from data/fixtures/scenarios/{name}.json."""
    return _load_json(SCENARIOS_DIR / f"{name}.json")


# ---------------------------------------------------------------------------
# Convenience helpers (importable by test modules)
# ---------------------------------------------------------------------------
def field_type(name: str):
    """Bounded field class by name, e.g. field_type("Month") -> Month."""
    from datetime_primitives import fields

    return getattr(fields, name)


def error_type(kind: str):
    """Error class for a scenario error kind: parse / overflow / malformed."""
    from datetime_primitives.types import (
        FieldOverflowError,
        MalformedInputError,
        ParseError,
    )

    return {
        "parse": ParseError,
        "overflow": FieldOverflowError,
        "malformed": MalformedInputError,
    }[kind]


def write_json(path: Path, data) -> Path:
    """Write data as JSON to path and return the path."""
    with open(path, "w") as f:
        json.dump(data, f)
    return path


# ---------------------------------------------------------------------------
# pytest fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def reference_datetime():
    """DateTime parsed from REFERENCE_WIRE."""
    from datetime_primitives.date import DateTime

    return DateTime.parse(REFERENCE_WIRE)
