"""Bounded fields: one range-checked value type per calendar unit."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar, TypeVar

from datetime_primitives.types import FieldOverflowError, ParseError

_DECIMAL = re.compile(r"\+?[0-9]+")

F = TypeVar("F", bound="BoundedField")


def parse_decimal(text: str) -> int:
    """Parse ASCII decimal text (optional leading '+') to a non-negative int.

    Raises ParseError wrapping the underlying ValueError for anything else,
    including whitespace, signs other than '+', underscores and non-ASCII digits.
    """
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    if _DECIMAL.fullmatch(text) is None:
        err = ValueError(f"invalid literal for int() with base 10: {text!r}")
        raise ParseError(err) from err
    return int(text)


def _require_int(raw: object, name: str) -> int:
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise TypeError(f"{name} expects an int, got {type(raw).__name__}")
    return raw


@dataclass(frozen=True)
class BoundedField:
    """Unsigned integer constrained to [0, MAX]. Immutable.

    Subclasses declare their bound with a class keyword:

        class Month(BoundedField, max=12): ...

    Each subclass is a distinct nominal type: values of different kinds never
    compare equal, even when they wrap the same integer.
    """

    value: int = 0

    MAX: ClassVar[int]
    NAME: ClassVar[str]

    def __init_subclass__(cls, *, max: int, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        cls.MAX = max
        cls.NAME = cls.__name__

    def __post_init__(self) -> None:
        self._check(_require_int(self.value, self.NAME))

    @classmethod
    def _check(cls, raw: int) -> None:
        if raw < 0 or raw > cls.MAX:
            raise FieldOverflowError(cls.NAME, cls.MAX)

    @classmethod
    def from_unchecked(cls: type[F], raw: int) -> F:
        """Construct without validation.

        Only for call sites that already guarantee 0 <= raw <= MAX.
        """
        field = object.__new__(cls)
        object.__setattr__(field, "value", raw)
        return field

    @classmethod
    def try_from(cls: type[F], raw: int) -> F:
        """Checked conversion from an int.

        Raises FieldOverflowError if raw is outside [0, MAX].
        Raises TypeError if raw is not an int.
        """
        raw = _require_int(raw, cls.NAME)
        cls._check(raw)
        return cls.from_unchecked(raw)

    @classmethod
    def parse(cls: type[F], text: str) -> F:
        """Parse decimal text, then range-check it.

        Raises ParseError for non-numeric text, FieldOverflowError when out of range.
        """
        return cls.try_from(parse_decimal(text))

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    # Arithmetic re-validates: results outside [0, MAX] raise FieldOverflowError.
    def __add__(self: F, other: int) -> F:
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return type(self).try_from(self.value + other)

    def __sub__(self: F, other: int) -> F:
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return type(self).try_from(self.value - other)


class Month(BoundedField, max=12):
    """Month of year. Stored zero-indexed by DateTime.parse."""


class WeekDay(BoundedField, max=7):
    """Day of week."""


class Day(BoundedField, max=32):
    """Day of month. Stored zero-indexed by DateTime.parse."""


class Hour(BoundedField, max=24):
    pass


class Minute(BoundedField, max=60):
    pass


class Second(BoundedField, max=60):
    pass


ALL_FIELDS: tuple[type[BoundedField], ...] = (Month, WeekDay, Day, Hour, Minute, Second)
