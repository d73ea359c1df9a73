import curses

from picker import DayProps
from temporal import PlainDate, PlainYearMonth
from view_month import day_attr, month_lines


def test_month_lines_sunday_first() -> None:
    lines = month_lines(PlainYearMonth(2020, 2), first_day_of_week=0)

    assert lines[0].strip() == "February 2020"
    assert lines[1] == "Su Mo Tu We Th Fr Sa"
    # February 1st 2020 is a Saturday
    assert lines[2].strip() == "1"
    assert lines[2].endswith(" 1")
    assert lines[-1] == "23 24 25 26 27 28 29"
    assert len(lines) == 7


def test_month_lines_monday_first_with_outside_days() -> None:
    lines = month_lines(PlainYearMonth(2020, 2), show_outside_days=True)

    assert lines[1] == "Mo Tu We Th Fr Sa Su"
    assert lines[2] == "27 28 29 30 31  1  2"
    assert lines[-1] == "24 25 26 27 28 29  1"


def test_month_lines_with_week_numbers() -> None:
    lines = month_lines(PlainYearMonth(2021, 1), show_week_numbers=True)

    # 2021-01-01 falls in ISO week 53 of 2020
    assert lines[1].startswith("   Mo")
    assert lines[2].startswith("53 ")
    assert lines[3].startswith(" 1  4  5")


def _props(**flags) -> DayProps:
    values = dict(
        date=PlainDate(2020, 1, 1),
        label="January 1",
        in_month=True,
        focused=False,
        today=False,
        selected=False,
        disallowed=False,
        disabled=False,
        range_start=False,
        range_end=False,
        range_inner=False,
    )
    values.update(flags)
    return DayProps(**values)


def test_day_attr() -> None:
    assert day_attr(_props()) == 0
    assert day_attr(_props(selected=True)) == curses.A_REVERSE
    assert day_attr(_props(in_month=False)) & curses.A_DIM
    assert day_attr(_props(today=True, focused=True)) & curses.A_UNDERLINE
