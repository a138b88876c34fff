"""Errors raised while parsing cron expressions."""

from __future__ import annotations


class CronExpressionError(ValueError):
    """Base class for every cron parsing failure."""


class StructureError(CronExpressionError):
    """The line does not split into five fields plus a command."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__("invalid cron expression (input must contain 6 items)")


class FieldError(CronExpressionError):
    """A single field could not be expanded."""

    def __init__(self, field: str, value: str, reason: str) -> None:
        self.field = field
        self.value = value
        super().__init__(f"failed to parse cron {field} [{value}] {reason}")


class FieldFormatError(FieldError):
    """Field syntax is not a recognised numeric shape."""


class FieldRangeError(FieldError):
    """Value, range bound or step lies outside the field's range."""

    def __init__(self, field: str, value: str, min: int, max: int) -> None:
        self.min = min
        self.max = max
        super().__init__(field, value, f"(min: {min} max: {max})")


class InvalidFrequencyError(FieldError):
    """Step value below 1."""

    def __init__(self, field: str, value: str) -> None:
        super().__init__(field, value, "frequency can not be less than 1")


class InvalidRangeError(FieldError):
    """Range start is not strictly below its end."""

    def __init__(self, field: str, value: str) -> None:
        super().__init__(field, value, "invalid range")
