"""Schedule parser for classic five-field cron lines."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from cronexpand.cron.errors import StructureError
from cronexpand.cron.fields import (
    DAY_OF_MONTH,
    DAY_OF_WEEK,
    FIELDS,
    HOUR,
    MINUTE,
    MONTH,
    parse_field,
)

DEFAULT_LABEL_WIDTH = 14
_COMMAND_LABEL = "command"
_TOKEN_COUNT = len(FIELDS) + 1


@dataclass(frozen=True)
class Schedule:
    """Expanded cron line: five value sets and the command to run."""

    minutes: tuple[int, ...]
    hours: tuple[int, ...]
    days_of_month: tuple[int, ...]
    months: tuple[int, ...]
    days_of_week: tuple[int, ...]
    command: str

    def render(self, label_width: int = DEFAULT_LABEL_WIDTH) -> str:
        """Render the six-line summary, one field per line."""
        longest = max(len(field.label) for field in FIELDS)
        if label_width <= longest:
            raise ValueError(f"label_width must be at least {longest + 1}, got {label_width}")

        rows = [
            (MINUTE.label, _join(self.minutes)),
            (HOUR.label, _join(self.hours)),
            (DAY_OF_MONTH.label, _join(self.days_of_month)),
            (MONTH.label, _join(self.months)),
            (DAY_OF_WEEK.label, _join(self.days_of_week)),
            (_COMMAND_LABEL, self.command),
        ]
        return "\n".join(label.ljust(label_width) + value for label, value in rows)

    def to_dict(self) -> dict[str, Any]:
        return {
            "minute": list(self.minutes),
            "hour": list(self.hours),
            "day_of_month": list(self.days_of_month),
            "month": list(self.months),
            "day_of_week": list(self.days_of_week),
            "command": self.command,
        }

    def __str__(self) -> str:
        return self.render()


def _join(values: tuple[int, ...]) -> str:
    return " ".join(str(v) for v in values)


def parse_schedule(line: str) -> Schedule:
    """Parse a cron line into a Schedule.

    The line must hold exactly six single-space separated items: minute,
    hour, day of month, month, day of week and the command. The command is
    kept verbatim.

    Raises:
        StructureError: The line does not have six items.
        FieldError: A field failed to parse (first failure wins).
    """
    tokens = line.split(" ")
    if len(tokens) != _TOKEN_COUNT:
        raise StructureError(len(tokens))

    minutes, hours, days_of_month, months, days_of_week = (
        parse_field(field.request(token)) for field, token in zip(FIELDS, tokens)
    )
    return Schedule(
        minutes=minutes,
        hours=hours,
        days_of_month=days_of_month,
        months=months,
        days_of_week=days_of_week,
        command=tokens[-1],
    )
