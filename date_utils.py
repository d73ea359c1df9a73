#!/usr/bin/env python3
"""Week, month and range helpers over PlainDate."""

from __future__ import annotations

from typing import List, Optional, Sequence, TypeVar

from clock import Clock, SystemClock
from temporal import PlainDate, PlainYearMonth

# Day-of-week numbering used throughout calpick: 0 = Sunday ... 6 = Saturday.
DAYS_PER_WEEK = 7

T = TypeVar("T")


def _check_first_day(first_day_of_week: int) -> None:
    if not 0 <= first_day_of_week <= 6:
        raise ValueError(f"first_day_of_week must be 0-6, got {first_day_of_week}")


def today(clock: Optional[Clock] = None) -> PlainDate:
    return (clock or SystemClock()).today()


def weekday(day: PlainDate) -> int:
    """Day of week with Sunday as 0."""
    return day.to_date().isoweekday() % 7


def start_of_week(day: PlainDate, first_day_of_week: int = 0) -> PlainDate:
    _check_first_day(first_day_of_week)
    diff = (weekday(day) - first_day_of_week + DAYS_PER_WEEK) % DAYS_PER_WEEK
    return day.subtract(days=diff)


def end_of_week(day: PlainDate, first_day_of_week: int = 0) -> PlainDate:
    return start_of_week(day, first_day_of_week).add(days=DAYS_PER_WEEK - 1)


def end_of_month(year_month: PlainYearMonth) -> PlainDate:
    return year_month.to_plain_date(year_month.days_in_month)


def clamp(
    day: PlainDate,
    min_date: Optional[PlainDate] = None,
    max_date: Optional[PlainDate] = None,
) -> PlainDate:
    """Return ``min_date``/``max_date`` when ``day`` falls outside them."""
    if min_date is not None and PlainDate.compare(day, min_date) < 0:
        return min_date
    if max_date is not None and PlainDate.compare(day, max_date) > 0:
        return max_date
    return day


def in_range(
    day: PlainDate,
    min_date: Optional[PlainDate] = None,
    max_date: Optional[PlainDate] = None,
) -> bool:
    if min_date is not None and PlainDate.compare(day, min_date) < 0:
        return False
    if max_date is not None and PlainDate.compare(day, max_date) > 0:
        return False
    return True


def days_in_range(start: PlainDate, end: PlainDate) -> List[PlainDate]:
    """All days from ``start`` to ``end`` inclusive; empty if end < start."""
    days: List[PlainDate] = []
    current = start
    while PlainDate.compare(current, end) <= 0:
        days.append(current)
        current = current.add(days=1)
    return days


def chunk(items: Sequence[T], size: int) -> List[List[T]]:
    return [list(items[idx : idx + size]) for idx in range(0, len(items), size)]


def view_of_month(
    year_month: PlainYearMonth, first_day_of_week: int = 0
) -> List[List[PlainDate]]:
    """Whole weeks covering ``year_month``, including outside days.

    Every week has seven days and the first day of each week falls on
    ``first_day_of_week``.
    """
    start = start_of_week(year_month.to_plain_date(), first_day_of_week)
    end = end_of_week(end_of_month(year_month), first_day_of_week)
    return chunk(days_in_range(start, end), DAYS_PER_WEEK)


def week_number(day: PlainDate) -> int:
    """ISO-8601 week number (weeks start Monday, week 1 holds January 4th)."""
    return day.to_date().isocalendar()[1]


__all__ = [
    "DAYS_PER_WEEK",
    "today",
    "weekday",
    "start_of_week",
    "end_of_week",
    "end_of_month",
    "clamp",
    "in_range",
    "days_in_range",
    "chunk",
    "view_of_month",
    "week_number",
]
