"""Tests for the schedule parser and its rendering."""

import dataclasses

import pytest

from cronexpand.cron.errors import (
    CronExpressionError,
    FieldFormatError,
    FieldRangeError,
    InvalidRangeError,
    StructureError,
)
from cronexpand.cron.parser import Schedule, parse_schedule


class TestParseSchedule:
    def test_all_wildcards(self):
        s = parse_schedule("* * * * * /usr/bin/find")
        assert s.minutes == tuple(range(0, 60))
        assert s.hours == tuple(range(0, 24))
        assert s.days_of_month == tuple(range(1, 32))
        assert s.months == tuple(range(1, 13))
        assert s.days_of_week == tuple(range(0, 7))
        assert s.command == "/usr/bin/find"

    def test_simple_numbers(self):
        s = parse_schedule("15 5 7 11 4 /usr/bin/find")
        assert (s.minutes, s.hours, s.days_of_month, s.months, s.days_of_week) == (
            (15,), (5,), (7,), (11,), (4,),
        )

    def test_steps(self):
        s = parse_schedule("*/15 */4 */6 */3 */2 /usr/bin/find")
        assert s.minutes == (0, 15, 30, 45)
        assert s.hours == (0, 4, 8, 12, 16, 20)
        assert s.days_of_month == (1, 7, 13, 19, 25, 31)
        assert s.months == (1, 4, 7, 10)
        assert s.days_of_week == (0, 2, 4, 6)

    def test_lists(self):
        s = parse_schedule(
            "4,9,9,9,59,44,13,27,58 22,10,9,9,14,16,16,16,19 5,3,11,24,18,31,31 1,2,2,5,12,11 1,2,3 /usr/bin/find"
        )
        assert s.minutes == (4, 9, 13, 27, 44, 58, 59)
        assert s.hours == (9, 10, 14, 16, 19, 22)
        assert s.days_of_month == (3, 5, 11, 18, 24, 31)
        assert s.months == (1, 2, 5, 11, 12)
        assert s.days_of_week == (1, 2, 3)

    def test_names(self):
        s = parse_schedule("* * * JUL THU /usr/bin/find")
        assert s.months == (7,)
        assert s.days_of_week == (4,)

        s = parse_schedule("* * * MAY-SEP WED-SAT /usr/bin/find")
        assert s.months == (5, 6, 7, 8, 9)
        assert s.days_of_week == (3, 4, 5, 6)

        s = parse_schedule("* * * JAN,FEB,FEB,MAY,DEC,NOV MON,TUE,WED /usr/bin/find")
        assert s.months == (1, 2, 5, 11, 12)
        assert s.days_of_week == (1, 2, 3)

    def test_names_only_apply_to_their_field(self):
        with pytest.raises(FieldFormatError, match="days of month"):
            parse_schedule("* * MON * * cmd")
        with pytest.raises(FieldFormatError, match="days of week"):
            parse_schedule("* * * * JAN cmd")

    def test_command_kept_verbatim(self):
        s = parse_schedule("0 0 1 1 0 ./run.sh>/dev/null;echo")
        assert s.command == "./run.sh>/dev/null;echo"

    def test_empty_command_allowed(self):
        s = parse_schedule("0 0 1 1 0 ")
        assert s.command == ""

    def test_schedule_is_immutable(self):
        s = parse_schedule("* * * * * cmd")
        with pytest.raises(dataclasses.FrozenInstanceError):
            s.command = "other"  # type: ignore[misc]


class TestStructure:
    @pytest.mark.parametrize(
        "line",
        [
            "",
            "* * * * *",
            "* * * * * /usr/bin/find extra",
            "*  * * * * cmd",
            "not even close",
            "99 99 99 99 99 99 99",
        ],
    )
    def test_wrong_item_count(self, line):
        with pytest.raises(StructureError, match=r"must contain 6 items"):
            parse_schedule(line)

    def test_count_checked_before_fields(self):
        with pytest.raises(StructureError) as exc_info:
            parse_schedule("bad bad bad")
        assert exc_info.value.count == 3


class TestFieldFailures:
    def test_oversized_number_is_classified(self):
        with pytest.raises(CronExpressionError, match=r"cron minutes .* unexpected format"):
            parse_schedule("1" * 5000 + " * * * * cmd")

    def test_first_failing_field_wins(self):
        with pytest.raises(FieldRangeError) as exc_info:
            parse_schedule("60 24 * * * cmd")
        assert exc_info.value.field == "minutes"

    def test_later_field_failure(self):
        with pytest.raises(FieldRangeError, match=r"failed to parse cron days of week \[7\] \(min: 0 max: 6\)"):
            parse_schedule("0 0 1 1 7 cmd")

    def test_invalid_range(self):
        with pytest.raises(InvalidRangeError, match=r"cron hours \[9-9\] invalid range"):
            parse_schedule("* 9-9 * * * cmd")


class TestRender:
    def test_expanded_block(self):
        s = parse_schedule("3-14 11-22 9-15 5-9 3-6 /usr/bin/find")
        expected = (
            "minute        3 4 5 6 7 8 9 10 11 12 13 14\n"
            "hour          11 12 13 14 15 16 17 18 19 20 21 22\n"
            "day of month  9 10 11 12 13 14 15\n"
            "month         5 6 7 8 9\n"
            "day of week   3 4 5 6\n"
            "command       /usr/bin/find"
        )
        assert s.render() == expected
        assert str(s) == expected

    def test_six_lines(self):
        s = parse_schedule("*/15 0 1,15 * 1-5 /usr/bin/find")
        lines = s.render().splitlines()
        assert len(lines) == 6
        assert lines[0] == "minute        0 15 30 45"
        assert lines[4] == "day of week   1 2 3 4 5"

    def test_custom_label_width(self):
        s = Schedule((0,), (1,), (2,), (3,), (4,), "cmd")
        lines = s.render(label_width=16).splitlines()
        assert lines[0] == "minute          0"
        assert lines[5] == "command         cmd"

    def test_label_width_too_small(self):
        s = Schedule((0,), (1,), (2,), (3,), (4,), "cmd")
        with pytest.raises(ValueError, match="label_width"):
            s.render(label_width=12)

    def test_to_dict(self):
        s = parse_schedule("0 12 * JUN MON-FRI backup")
        d = s.to_dict()
        assert d["minute"] == [0]
        assert d["hour"] == [12]
        assert d["day_of_month"] == list(range(1, 32))
        assert d["month"] == [6]
        assert d["day_of_week"] == [1, 2, 3, 4, 5]
        assert d["command"] == "backup"
