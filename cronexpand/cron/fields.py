"""Field parser: expands one cron field into the integers it matches.

Supported forms, tried in this order:
- "*"        every value in the field's range
- "N"        a single value
- "*/N"      every Nth value, anchored at the range minimum
- "A-B"      inclusive range
- "A,B,C"    list (deduplicated and sorted)

Month and day-of-week fields also accept three-letter names (JAN, MON, ...),
which are replaced by their numbers before the numeric forms are tried.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from cronexpand.cron.errors import (
    FieldFormatError,
    FieldRangeError,
    InvalidFrequencyError,
    InvalidRangeError,
)

# Optional sign and ASCII digits only; int() alone also accepts spaces and underscores
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2 ** 63)
_INT_MAX = 2 ** 63 - 1
_MAX_DIGITS = len(str(_INT_MAX))

_WILDCARD = "*"
_STEP_PREFIX = "*/"


@dataclass(frozen=True)
class FieldRange:
    """Inclusive bounds of a field."""

    min: int
    max: int

    def values(self) -> tuple[int, ...]:
        return tuple(range(self.min, self.max + 1))

    def __contains__(self, value: int) -> bool:
        return self.min <= value <= self.max


MINUTE_RANGE = FieldRange(0, 59)
HOUR_RANGE = FieldRange(0, 23)
DAY_OF_MONTH_RANGE = FieldRange(1, 31)
MONTH_RANGE = FieldRange(1, 12)
DAY_OF_WEEK_RANGE = FieldRange(0, 6)

MONTH_NAMES: Mapping[str, int] = MappingProxyType({
    "JAN": 1, "FEB": 2, "MAR": 3, "APR": 4, "MAY": 5, "JUN": 6,
    "JUL": 7, "AUG": 8, "SEP": 9, "OCT": 10, "NOV": 11, "DEC": 12,
})

WEEKDAY_NAMES: Mapping[str, int] = MappingProxyType({
    "SUN": 0, "MON": 1, "TUE": 2, "WED": 3, "THU": 4, "FRI": 5, "SAT": 6,
})


@dataclass(frozen=True)
class FieldInput:
    """Everything needed to parse one field token."""

    token: str
    name: str
    min: int
    max: int
    symbols: Mapping[str, int] | None = field(default=None, hash=False)

    @property
    def bounds(self) -> FieldRange:
        return FieldRange(self.min, self.max)


@dataclass(frozen=True)
class CronField:
    """One of the five schedule fields."""

    name: str
    label: str
    bounds: FieldRange
    symbols: Mapping[str, int] | None = field(default=None, hash=False)

    def request(self, token: str) -> FieldInput:
        """Build the parser input for a raw token of this field."""
        return FieldInput(
            token=token,
            name=self.name,
            min=self.bounds.min,
            max=self.bounds.max,
            symbols=self.symbols,
        )


MINUTE = CronField("minutes", "minute", MINUTE_RANGE)
HOUR = CronField("hours", "hour", HOUR_RANGE)
DAY_OF_MONTH = CronField("days of month", "day of month", DAY_OF_MONTH_RANGE)
MONTH = CronField("months", "month", MONTH_RANGE, MONTH_NAMES)
DAY_OF_WEEK = CronField("days of week", "day of week", DAY_OF_WEEK_RANGE, WEEKDAY_NAMES)

FIELDS: tuple[CronField, ...] = (MINUTE, HOUR, DAY_OF_MONTH, MONTH, DAY_OF_WEEK)


def parse_int(text: str) -> int | None:
    """Return the integer spelled by ``text``, or None if it is not one.

    Values outside the signed 64-bit range are not integers either.
    """
    if _INT_PATTERN.fullmatch(text) is None:
        return None
    if len(text.lstrip("+-").lstrip("0")) > _MAX_DIGITS:
        return None
    value = int(text)
    if not _INT_MIN <= value <= _INT_MAX:
        return None
    return value


def substitute_symbols(token: str, symbols: Mapping[str, int] | None) -> str:
    """Replace every symbolic name in ``token`` with its number."""
    if not symbols:
        return token
    for name in sorted(symbols):
        token = token.replace(name, str(symbols[name]))
    return token


def parse_field(params: FieldInput) -> tuple[int, ...]:
    """Expand a field token into a sorted, duplicate-free tuple of integers.

    Raises:
        FieldFormatError: The token is not a recognised shape.
        FieldRangeError: A value, bound or step is outside [min, max].
        InvalidFrequencyError: A step is below 1.
        InvalidRangeError: A range start is not below its end.
    """
    raw = params.token
    bounds = params.bounds

    if raw == _WILDCARD:
        return bounds.values()

    replaced = substitute_symbols(raw, params.symbols)

    simple = parse_int(replaced)
    if simple is not None:
        if simple not in bounds:
            raise FieldRangeError(params.name, replaced, params.min, params.max)
        return (simple,)

    # Step syntax is matched on the raw token so names never interfere with it
    if raw.startswith(_STEP_PREFIX):
        return _parse_step(params, raw[len(_STEP_PREFIX):])

    parts = replaced.split("-")
    if len(parts) == 2:
        return _parse_range(params, replaced, parts[0], parts[1])

    parts = replaced.split(",")
    if len(parts) > 1:
        return _parse_list(params, replaced, parts)

    raise FieldFormatError(params.name, raw, "unexpected format")


def _parse_step(params: FieldInput, step_text: str) -> tuple[int, ...]:
    raw = params.token
    step = parse_int(step_text)
    if step is None:
        raise FieldFormatError(params.name, raw, "invalid number")
    if step < 1:
        raise InvalidFrequencyError(params.name, raw)
    if step not in params.bounds:
        raise FieldRangeError(params.name, raw, params.min, params.max)

    if step == 1:
        return params.bounds.values()

    # Only the step itself is returned, without the min anchor: */40 on
    # minutes yields (40,) where a full cron gives 0 and 40
    if step > params.max // 2:
        return (step,)

    return tuple(range(params.min, params.max + 1, step))


def _parse_range(params: FieldInput, replaced: str, first_text: str, second_text: str) -> tuple[int, ...]:
    first = parse_int(first_text)
    if first is None:
        raise FieldFormatError(params.name, replaced, "invalid first number")
    second = parse_int(second_text)
    if second is None:
        raise FieldFormatError(params.name, replaced, "invalid second number")

    if first >= second:
        raise InvalidRangeError(params.name, replaced)
    if first < params.min or second > params.max:
        raise FieldRangeError(params.name, replaced, params.min, params.max)

    return tuple(range(first, second + 1))


def _parse_list(params: FieldInput, replaced: str, items: list[str]) -> tuple[int, ...]:
    seen: set[int] = set()
    for item in items:
        value = parse_int(item)
        if value is None:
            raise FieldFormatError(params.name, replaced, "invalid number")
        if value not in params.bounds:
            raise FieldRangeError(params.name, replaced, params.min, params.max)
        seen.add(value)
    return tuple(sorted(seen))
