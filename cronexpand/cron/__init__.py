"""Cron expression parsing and expansion."""

from cronexpand.cron.errors import (
    CronExpressionError,
    FieldError,
    FieldFormatError,
    FieldRangeError,
    InvalidFrequencyError,
    InvalidRangeError,
    StructureError,
)
from cronexpand.cron.fields import CronField, FieldInput, FieldRange, parse_field
from cronexpand.cron.parser import Schedule, parse_schedule

__all__ = [
    "CronExpressionError",
    "CronField",
    "FieldError",
    "FieldFormatError",
    "FieldInput",
    "FieldRange",
    "FieldRangeError",
    "InvalidFrequencyError",
    "InvalidRangeError",
    "Schedule",
    "StructureError",
    "parse_field",
    "parse_schedule",
]
