"""Shared error types: DateTimeError and its three failure kinds."""

from __future__ import annotations


class DateTimeError(ValueError):
    """Base class for every date/time validation failure."""


class ParseError(DateTimeError):
    """Raised when numeric text is not a valid non-negative decimal integer.

    Wraps the underlying integer-parsing error and renders its message verbatim.
    """

    def __init__(self, cause: ValueError) -> None:
        self.cause = cause
        super().__init__(str(cause))


class FieldOverflowError(DateTimeError):
    """Raised when a well-formed integer falls outside a field's [0, max] range."""

    def __init__(self, field: str, max: int) -> None:
        self.field = field
        self.max = max
        super().__init__(f"{field} must be between 0-{max}")


class MalformedInputError(DateTimeError):
    """Raised when wire text does not have the fixed YYYY-MM-DDThh:mm:ss layout."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Malformed date-time {text!r}: {reason}")
