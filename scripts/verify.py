#!/usr/bin/env python
"""Visual verification report for datetime-primitives.

Run:  uv run python scripts/verify.py

Produces a formatted report showing:
  1. Bounded field table (name, max)
  2. Field parsing scenarios  -- input/output tables
  3. Composite parsing scenarios  -- input/stored fields/wire round-trip
  4. The datetimes.json fixture rendered through the accessor protocol
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths and data loading
# ---------------------------------------------------------------------------
ROOT = Path(__file__).resolve().parent.parent
FIXTURES = ROOT / "data" / "fixtures"
SCENARIOS = FIXTURES / "scenarios"

sys.path.insert(0, str(ROOT / "src"))

from datetime_primitives.date import DateTime
from datetime_primitives.debug import show_datetime, show_datetimes
from datetime_primitives.fields import ALL_FIELDS
from datetime_primitives.loaders import load_datetimes_json
from datetime_primitives.types import DateTimeError


def _load(path: Path):
    with open(path) as f:
        return json.load(f)


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------
WIDTH = 90


def banner(title: str):
    print()
    print("=" * WIDTH)
    print(f"  {title}")
    print("=" * WIDTH)


def heading(title: str):
    print()
    print(f"  {title}")
    print(f"  {'-' * (len(title) + 2)}")


def table(headers: list[str], rows: list[list[str]], indent: int = 4):
    """Print a formatted table with auto-sized columns."""
    col_widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            col_widths[i] = max(col_widths[i], len(cell))

    pad = " " * indent
    fmt = pad + "  ".join(f"{{:<{w}}}" for w in col_widths)
    sep = pad + "  ".join("-" * w for w in col_widths)

    print(fmt.format(*headers))
    print(sep)
    for row in rows:
        padded = row + [""] * (len(headers) - len(row))
        print(fmt.format(*padded))


def _outcome(fn, *args) -> str:
    """Run fn and describe the result or the error it raised."""
    try:
        return repr(fn(*args))
    except DateTimeError as e:
        return f"{type(e).__name__}: {e}"


# ---------------------------------------------------------------------------
# Section 1: Bounded fields
# ---------------------------------------------------------------------------
def section_fields():
    banner("BOUNDED FIELDS")
    table(["Field", "Range"], [[cls.NAME, f"0-{cls.MAX}"] for cls in ALL_FIELDS])

    data = _load(SCENARIOS / "fields.json")
    by_name = {cls.NAME: cls for cls in ALL_FIELDS}

    heading("Function: Field.parse(text)")
    rows = []
    for s in data["parse"] + data["parse_errors"]:
        cls = by_name[s["field"]]
        rows.append([s["id"], s["field"], repr(s["text"]), _outcome(cls.parse, s["text"])])
    table(["Scenario", "Field", "Text", "Result"], rows)


# ---------------------------------------------------------------------------
# Section 2: Composite
# ---------------------------------------------------------------------------
def section_composite():
    banner("DATE-TIME COMPOSITE")

    data = _load(SCENARIOS / "datetime.json")

    heading("Function: DateTime.parse(text)")
    print("    Month and day are stored zero-indexed; the wire stays one-indexed.\n")
    rows = []
    for s in data["parse"] + data["parse_errors"]:
        try:
            dt = DateTime.parse(s["text"])
        except DateTimeError as e:
            rows.append([s["id"], repr(s["text"]), f"{type(e).__name__}: {e}", ""])
            continue
        stored = (
            f"{dt.year} {int(dt.month)} {int(dt.day)} "
            f"{int(dt.hour)} {int(dt.minute)} {int(dt.second)}"
        )
        rows.append([s["id"], repr(s["text"]), stored, dt.to_wire()])
    table(["Scenario", "Text", "Stored y m d h mi s", "Wire"], rows)

    heading("Function: DateTime.try_new(...)")
    rows = []
    for s in data["try_new"] + data["try_new_errors"]:
        rows.append([s["id"], str(s["args"]), _outcome(DateTime.try_new, *s["args"])])
    table(["Scenario", "Args", "Result"], rows)


# ---------------------------------------------------------------------------
# Section 3: Fixture file
# ---------------------------------------------------------------------------
def section_fixture():
    banner("FIXTURE: datetimes.json")
    values = load_datetimes_json(FIXTURES / "datetimes.json")
    print()
    show_datetimes(values)
    for key, dt in values.items():
        heading(key)
        show_datetime(dt)


def main():
    section_fields()
    section_composite()
    section_fixture()
    print()


if __name__ == "__main__":
    main()
