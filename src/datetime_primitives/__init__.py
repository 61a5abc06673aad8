"""datetime-primitives: Validated calendar fields and a fixed-format date-time."""

from datetime_primitives.date import DateTime, DateTimeLike
from datetime_primitives.fields import (
    BoundedField,
    Day,
    Hour,
    Minute,
    Month,
    Second,
    WeekDay,
)
from datetime_primitives.loaders import load_datetimes_json
from datetime_primitives.schema import validate_datetime_strings
from datetime_primitives.types import (
    DateTimeError,
    FieldOverflowError,
    MalformedInputError,
    ParseError,
)

__all__ = [
    "BoundedField",
    "DateTime",
    "DateTimeError",
    "DateTimeLike",
    "Day",
    "FieldOverflowError",
    "Hour",
    "MalformedInputError",
    "Minute",
    "Month",
    "ParseError",
    "Second",
    "WeekDay",
    "load_datetimes_json",
    "validate_datetime_strings",
]
