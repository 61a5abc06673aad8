"""ASCII visualisation for development-time verification.

This module is dev-only and not imported by production code. It reads
values only through the DateTimeLike accessors, the same way a formatter does.
"""

from __future__ import annotations

from datetime_primitives.date import DateTimeLike


def show_datetime(dt: DateTimeLike) -> str:
    """Print a table of each field's stored value and maximum.

    Month and day are shown as stored (zero-indexed) and as written on the wire.
    Returns the string and also prints to stdout.
    """
    lines: list[str] = [f"{'Field':<8s}  {'Stored':>6s}  {'Max':>4s}  {'Wire':>4s}"]
    lines.append(f"{'-' * 8}  {'-' * 6}  {'-' * 4}  {'-' * 4}")
    lines.append(f"{'Year':<8s}  {dt.year:>6d}  {'-':>4s}  {dt.year:>4d}")

    for name, offset in (
        ("month", 1),
        ("day", 1),
        ("hour", 0),
        ("minute", 0),
        ("second", 0),
    ):
        value = getattr(dt, name)
        lines.append(
            f"{type(value).NAME:<8s}  {int(value):>6d}  {type(value).MAX:>4d}  "
            f"{int(value) + offset:>4d}"
        )

    result = "\n".join(lines)
    print(result)
    return result


def show_datetimes(values: dict[str, DateTimeLike]) -> str:
    """Print one row per value: id, then year/month/day hh:mm:ss as on the wire.

    Returns the string and also prints to stdout.
    """
    width = max((len(k) for k in values), default=0)
    lines: list[str] = []

    for key, dt in values.items():
        lines.append(
            f"{key:<{width}s}  {dt.year:04d}/{int(dt.month) + 1:02d}/"
            f"{int(dt.day) + 1:02d} {int(dt.hour):02d}:{int(dt.minute):02d}:"
            f"{int(dt.second):02d}"
        )

    result = "\n".join(lines)
    print(result)
    return result
