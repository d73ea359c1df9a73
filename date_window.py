#!/usr/bin/env python3
"""Paging window over a run of consecutive months."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Literal, Mapping, Optional, Sequence, Union

from temporal import MAX_YEAR, MIN_YEAR, DurationError, PlainDate, PlainYearMonth

logger = logging.getLogger(__name__)

PageBy = Literal["months", "single"]
PAGE_BY_VALUES: Sequence[PageBy] = ("months", "single")
DEFAULT_PAGE_BY: PageBy = "months"

FIRST_MONTH = PlainYearMonth(MIN_YEAR, 1)
LAST_MONTH = PlainYearMonth(MAX_YEAR, 12)


def _window_months(duration: Mapping[str, int]) -> int:
    if set(duration) != {"months"}:
        raise DurationError(f"Window duration must be {{'months': n}}; got {dict(duration)!r}")
    months = duration["months"]
    if isinstance(months, bool) or not isinstance(months, int) or months < 1:
        raise DurationError(f"Window must span at least one month; got {months!r}")
    return months


@dataclass(frozen=True)
class DateWindow:
    """Visible months ``start..end`` plus the date that holds focus.

    ``end`` is always ``start + (months - 1)``. Transitions return new windows.
    """

    start: PlainYearMonth
    duration: Dict[str, int] = field(hash=False)
    focused_date: PlainDate
    end: PlainYearMonth = field(init=False)

    def __post_init__(self) -> None:
        months = _window_months(self.duration)
        object.__setattr__(self, "duration", {"months": months})
        object.__setattr__(self, "end", self.start.add(months=months - 1))

    @classmethod
    def for_focus(cls, focused_date: PlainDate, months: int = 1) -> "DateWindow":
        """Initial window starting at the focused month.

        A twelve month window shows a calendar year, so it starts in January.
        """
        start = focused_date.to_year_month()
        if months == 12:
            start = PlainYearMonth(start.year, 1)
        return cls(start, {"months": months}, focused_date)

    @property
    def months(self) -> int:
        return self.duration["months"]

    def month_list(self) -> list[PlainYearMonth]:
        return [self.start.add(months=offset) for offset in range(self.months)]

    def contains(self, value: Union[PlainDate, PlainYearMonth]) -> bool:
        return (
            PlainYearMonth.compare(value, self.start) >= 0
            and PlainYearMonth.compare(value, self.end) <= 0
        )

    def shift(self, months: int) -> "DateWindow":
        """Move both the window and the focused date by ``months``."""
        return DateWindow(
            self.start.add(months=months),
            self.duration,
            self.focused_date.add(months=months),
        )

    def next(self) -> "DateWindow":
        return self.shift(self.months)

    def prev(self) -> "DateWindow":
        return self.shift(-self.months)

    def adjust(self, focused_date: PlainDate) -> "DateWindow":
        """Window containing ``focused_date``, reached in whole-window steps."""
        if self.contains(focused_date):
            return DateWindow(self.start, self.duration, focused_date)
        # Same result as stepping one window at a time until it contains the
        # date; floor division keeps the direction fixed for dates before start.
        steps = self.start.months_until(focused_date) // self.months
        start = self.start.add(months=steps * self.months)
        logger.debug(
            "Re-anchoring window from %s to %s (%d steps) for %s",
            self.start,
            start,
            steps,
            focused_date,
        )
        return DateWindow(start, self.duration, focused_date)


def page_step(page_by: PageBy, months: int) -> int:
    """Months moved by next/previous: one month or a full window."""
    if page_by == "single":
        return 1
    if page_by == "months":
        return months
    raise ValueError(f"Unknown page_by '{page_by}'. Expected one of: {', '.join(PAGE_BY_VALUES)}")


def can_go_previous(window: DateWindow, min_date: Optional[PlainDate] = None) -> bool:
    """False when every month before the window is already below ``min_date``
    or the window starts at the first representable month."""
    if PlainYearMonth.compare(window.start, FIRST_MONTH) <= 0:
        return False
    return min_date is None or PlainYearMonth.compare(min_date, window.start) < 0


def can_go_next(window: DateWindow, max_date: Optional[PlainDate] = None) -> bool:
    if PlainYearMonth.compare(window.end, LAST_MONTH) >= 0:
        return False
    return max_date is None or PlainYearMonth.compare(max_date, window.end) > 0


__all__ = [
    "DateWindow",
    "PageBy",
    "PAGE_BY_VALUES",
    "DEFAULT_PAGE_BY",
    "FIRST_MONTH",
    "LAST_MONTH",
    "page_step",
    "can_go_previous",
    "can_go_next",
]
