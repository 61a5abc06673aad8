"""Composite: DateTime and the DateTimeLike accessor protocol."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol, runtime_checkable

from datetime_primitives.fields import (
    Day,
    Hour,
    Minute,
    Month,
    Second,
    parse_decimal,
)
from datetime_primitives.types import DateTimeError, MalformedInputError

log = logging.getLogger(__name__)

# Wire layout: YYYY-MM-DDThh:mm:ss
WIRE_LENGTH = 19
WIRE_DELIMITERS: tuple[tuple[int, str], ...] = (
    (4, "-"),
    (7, "-"),
    (10, "T"),
    (13, ":"),
    (16, ":"),
)
YEAR_SLICE = slice(0, 4)
MONTH_SLICE = slice(5, 7)
DAY_SLICE = slice(8, 10)
HOUR_SLICE = slice(11, 13)
MINUTE_SLICE = slice(14, 16)
SECOND_SLICE = slice(17, 19)


@runtime_checkable
class DateTimeLike(Protocol):
    """Read-only accessors a formatter needs from a date-time value.

    Only the Gregorian DateTime below implements this today; other calendar
    systems can be added by providing the same six attributes.
    """

    @property
    def year(self) -> int: ...

    @property
    def month(self) -> Month: ...

    @property
    def day(self) -> Day: ...

    @property
    def hour(self) -> Hour: ...

    @property
    def minute(self) -> Minute: ...

    @property
    def second(self) -> Second: ...


def _reject_aware(dt: datetime, name: str) -> None:
    """Reject timezone-aware datetimes."""
    if dt.tzinfo is not None:
        raise TypeError(
            f"{name} must be a naive datetime (no tzinfo), "
            f"got tzinfo={dt.tzinfo!r}."
        )


def _check_layout(text: str) -> None:
    if len(text) != WIRE_LENGTH:
        raise MalformedInputError(
            text, f"expected {WIRE_LENGTH} characters, got {len(text)}"
        )
    for pos, expected in WIRE_DELIMITERS:
        if text[pos] != expected:
            raise MalformedInputError(
                text, f"expected {expected!r} at position {pos}, got {text[pos]!r}"
            )


@dataclass(frozen=True)
class DateTime:
    """Naive local date-time made of an unbounded year and five bounded fields.

    No cross-field checks are made: Day(30) in Month(1) is accepted.
    Month and day are zero-indexed when produced by parse() or from_datetime().
    """

    year: int = 0
    month: Month = field(default_factory=Month)
    day: Day = field(default_factory=Day)
    hour: Hour = field(default_factory=Hour)
    minute: Minute = field(default_factory=Minute)
    second: Second = field(default_factory=Second)

    def __post_init__(self) -> None:
        for name, kind in (
            ("month", Month),
            ("day", Day),
            ("hour", Hour),
            ("minute", Minute),
            ("second", Second),
        ):
            value = getattr(self, name)
            if type(value) is not kind:
                raise TypeError(
                    f"{name} must be {kind.__name__}, got {type(value).__name__}"
                )

    @classmethod
    def try_new(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        second: int,
    ) -> DateTime:
        """Build from raw ints, validating each bounded field.

        Checked in order month, day, hour, minute, second; the first
        FieldOverflowError propagates. Year is stored as given.
        """
        return cls(
            year,
            Month.try_from(month),
            Day.try_from(day),
            Hour.try_from(hour),
            Minute.try_from(minute),
            Second.try_from(second),
        )

    @classmethod
    def parse(cls, text: str) -> DateTime:
        """Parse the fixed layout YYYY-MM-DDThh:mm:ss.

        Month and day are one-indexed on the wire and stored zero-indexed.

        Raises MalformedInputError on wrong length or delimiters,
        ParseError on non-numeric fields, FieldOverflowError on out-of-range
        fields (including a wire month or day of 00).
        """
        if not isinstance(text, str):
            raise TypeError(f"expected str, got {type(text).__name__}")
        try:
            _check_layout(text)
            year = parse_decimal(text[YEAR_SLICE])
            month = Month.parse(text[MONTH_SLICE])
            day = Day.parse(text[DAY_SLICE])
            hour = Hour.parse(text[HOUR_SLICE])
            minute = Minute.parse(text[MINUTE_SLICE])
            second = Second.parse(text[SECOND_SLICE])
            return cls(year, month - 1, day - 1, hour, minute, second)
        except DateTimeError as e:
            log.debug("Rejected date-time %r: %s", text, e)
            raise

    @classmethod
    def from_datetime(cls, dt: datetime) -> DateTime:
        """Adapt a naive stdlib datetime, zero-indexing month and day.

        Raises TypeError if dt is timezone-aware. Microseconds are dropped.
        """
        _reject_aware(dt, "dt")
        return cls.try_new(
            dt.year, dt.month - 1, dt.day - 1, dt.hour, dt.minute, dt.second
        )

    def to_wire(self) -> str:
        """Render as YYYY-MM-DDThh:mm:ss, one-indexing month and day."""
        return (
            f"{self.year:04d}-{int(self.month) + 1:02d}-{int(self.day) + 1:02d}"
            f"T{int(self.hour):02d}:{int(self.minute):02d}:{int(self.second):02d}"
        )

    def __str__(self) -> str:
        return self.to_wire()
