#!/usr/bin/env python3
"""Locale-aware weekday, month and date labels.

Names come from the standard ``calendar`` tables (``day_name``,
``month_name``), read while ``LC_TIME`` is switched to the requested
locale. Formatters are memoized per (locale, options).
"""

from __future__ import annotations

import calendar
import locale as _locale
import logging
from contextlib import contextmanager
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterator, List, Literal, Optional, Sequence, Tuple

from date_utils import DAYS_PER_WEEK
from temporal import PlainDate, PlainYearMonth

logger = logging.getLogger(__name__)

WeekdayStyle = Literal["long", "short", "narrow"]
WEEKDAY_STYLES: Sequence[WeekdayStyle] = ("long", "short", "narrow")
MonthStyle = Literal["long", "short", "narrow", "numeric"]
NumericStyle = Literal["numeric", "2-digit"]

RANGE_SEPARATOR = " – "


def normalize_locale(tag: Optional[str]) -> Optional[str]:
    """Map ``de-DE``/``de_DE`` style tags to a POSIX locale name."""
    if not tag:
        return None
    language, dot, codeset = tag.strip().partition(".")
    name = language.replace("-", "_")
    if dot:
        return f"{name}.{codeset}"
    if name in ("C", "POSIX"):
        return name
    return f"{name}.UTF-8"


@contextmanager
def _time_locale(tag: Optional[str]) -> Iterator[None]:
    name = normalize_locale(tag)
    if name is None:
        yield
        return
    previous = _locale.setlocale(_locale.LC_TIME)
    switched = True
    try:
        _locale.setlocale(_locale.LC_TIME, name)
    except _locale.Error:
        logger.warning("Locale %r is not available; using the process locale", tag)
        switched = False
    try:
        yield
    finally:
        if switched:
            _locale.setlocale(_locale.LC_TIME, previous)


def _weekday_label(python_weekday: int, style: WeekdayStyle) -> str:
    if style == "long":
        return calendar.day_name[python_weekday]
    abbr = calendar.day_abbr[python_weekday]
    if style == "narrow":
        return abbr[:1]
    if style == "short":
        return abbr
    raise ValueError(f"Unknown weekday style '{style}'. Expected one of: {', '.join(WEEKDAY_STYLES)}")


@lru_cache(maxsize=64)
def _day_names(style: WeekdayStyle, first_day_of_week: int, tag: Optional[str]) -> Tuple[str, ...]:
    if not 0 <= first_day_of_week <= 6:
        raise ValueError(f"first_day_of_week must be 0-6, got {first_day_of_week}")
    with _time_locale(tag):
        # calendar tables start on Monday; calpick weekdays start on Sunday
        return tuple(
            _weekday_label((first_day_of_week + offset + 6) % 7, style)
            for offset in range(DAYS_PER_WEEK)
        )


def day_names(
    style: WeekdayStyle = "short",
    first_day_of_week: int = 0,
    locale: Optional[str] = None,
) -> List[str]:
    """Seven weekday labels in grid-column order, starting at ``first_day_of_week``."""
    return list(_day_names(style, first_day_of_week, locale))


def _month_label(month: int, style: MonthStyle) -> str:
    if style == "long":
        return calendar.month_name[month]
    if style == "short":
        return calendar.month_abbr[month]
    if style == "narrow":
        return calendar.month_abbr[month][:1]
    if style == "numeric":
        return str(month)
    raise ValueError(f"Unknown month style '{style}'")


@lru_cache(maxsize=64)
def _month_names(style: MonthStyle, tag: Optional[str]) -> Tuple[str, ...]:
    with _time_locale(tag):
        return tuple(_month_label(month, style) for month in range(1, 13))


def month_names(style: MonthStyle = "long", locale: Optional[str] = None) -> List[str]:
    """Twelve month labels, January first."""
    return list(_month_names(style, locale))


@dataclass(frozen=True)
class DateFormatter:
    """Formats a PlainDate with a subset of year/month/day fields.

    Field order follows the usual English pattern: "January 15, 2020",
    "January 2020", "January 15", "2020".
    """

    locale: Optional[str] = None
    year: Optional[NumericStyle] = None
    month: Optional[MonthStyle] = None
    day: Optional[NumericStyle] = None

    def _part(self, value: int, style: Optional[NumericStyle]) -> str:
        return f"{value:02d}" if style == "2-digit" else str(value)

    def format(self, value: PlainDate | PlainYearMonth) -> str:
        year = self._part(value.year, self.year) if self.year else None
        day = None
        if self.day and isinstance(value, PlainDate):
            day = self._part(value.day, self.day)
        if self.month is None:
            return " ".join(part for part in (day, year) if part)
        if self.month == "numeric":
            return "/".join(
                part for part in (str(value.month), day, year) if part
            )
        month = _month_names(self.month, self.locale)[value.month - 1]
        head = f"{month} {day}" if day else month
        if year is None:
            return head
        return f"{head}, {year}" if day else f"{head} {year}"


@lru_cache(maxsize=64)
def get_date_formatter(
    locale: Optional[str] = None,
    year: Optional[NumericStyle] = None,
    month: Optional[MonthStyle] = None,
    day: Optional[NumericStyle] = None,
) -> DateFormatter:
    """Shared formatter per (locale, options); identical calls return one object."""
    return DateFormatter(locale=locale, year=year, month=month, day=day)


def format_month_range(
    start: PlainYearMonth, end: PlainYearMonth, locale: Optional[str] = None
) -> str:
    """Heading for a run of months: "January 2020", "January – March 2020"."""
    verbose = get_date_formatter(locale, year="numeric", month="long")
    if start.equals(end):
        return verbose.format(start)
    if start.year == end.year:
        month_only = get_date_formatter(locale, month="long")
        return f"{month_only.format(start)}{RANGE_SEPARATOR}{verbose.format(end)}"
    return f"{verbose.format(start)}{RANGE_SEPARATOR}{verbose.format(end)}"


__all__ = [
    "WeekdayStyle",
    "WEEKDAY_STYLES",
    "MonthStyle",
    "DateFormatter",
    "normalize_locale",
    "day_names",
    "month_names",
    "get_date_formatter",
    "format_month_range",
]
