#!/usr/bin/env python3
"""Selected values of a calendar: one date, a range, or a list of dates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Literal, Optional, Sequence, Tuple, Union

from date_utils import in_range
from temporal import PlainDate

SelectionMode = Literal["date", "range", "multi"]
SELECTION_MODES: Sequence[SelectionMode] = ("date", "range", "multi")


@dataclass(frozen=True)
class Single:
    date: PlainDate


@dataclass(frozen=True)
class Range:
    start: PlainDate
    end: PlainDate

    @classmethod
    def between(cls, first: PlainDate, second: PlainDate) -> "Range":
        """Range over two picks in either order; the earlier one is ``start``."""
        if PlainDate.compare(second, first) < 0:
            return cls(second, first)
        return cls(first, second)

    def contains(self, day: PlainDate) -> bool:
        return in_range(day, self.start, self.end)


@dataclass(frozen=True)
class Multi:
    dates: Tuple[PlainDate, ...] = ()

    @classmethod
    def of(cls, dates: Iterable[PlainDate]) -> "Multi":
        return cls(tuple(dates))

    def toggle(self, day: PlainDate) -> "Multi":
        """Add ``day`` at the end, or drop it when already selected."""
        if any(existing.equals(day) for existing in self.dates):
            return Multi(tuple(existing for existing in self.dates if not existing.equals(day)))
        return Multi(self.dates + (day,))


Selection = Union[Single, Range, Multi]


@dataclass(frozen=True)
class Tentative:
    """First and latest pick of a range still being chosen (unordered)."""

    first: PlainDate
    second: PlainDate

    def with_second(self, second: PlainDate) -> "Tentative":
        return Tentative(first=self.first, second=second)

    def sorted(self) -> Range:
        return Range.between(self.first, self.second)


@dataclass(frozen=True)
class DayStatus:
    selected: bool = False
    range_start: bool = False
    range_end: bool = False
    range_inner: bool = False


def mode_of(selection: Selection) -> SelectionMode:
    if isinstance(selection, Single):
        return "date"
    if isinstance(selection, Range):
        return "range"
    if isinstance(selection, Multi):
        return "multi"
    raise TypeError(f"Unknown selection type {type(selection).__name__}")


def selected_dates(selection: Optional[Selection]) -> Tuple[PlainDate, ...]:
    if selection is None:
        return ()
    if isinstance(selection, Single):
        return (selection.date,)
    if isinstance(selection, Range):
        return (selection.start, selection.end)
    if isinstance(selection, Multi):
        return selection.dates
    raise TypeError(f"Unknown selection type {type(selection).__name__}")


def day_status(day: PlainDate, selection: Optional[Selection]) -> DayStatus:
    """How ``day`` relates to the selection, for styling a grid cell."""
    if selection is None:
        return DayStatus()
    if isinstance(selection, Single):
        return DayStatus(selected=selection.date.equals(day))
    if isinstance(selection, Multi):
        return DayStatus(selected=any(d.equals(day) for d in selection.dates))
    if isinstance(selection, Range):
        is_start = selection.start.equals(day)
        is_end = selection.end.equals(day)
        selected = selection.contains(day)
        return DayStatus(
            selected=selected,
            range_start=is_start,
            range_end=is_end,
            range_inner=selected and not is_start and not is_end,
        )
    raise TypeError(f"Unknown selection type {type(selection).__name__}")


__all__ = [
    "SelectionMode",
    "SELECTION_MODES",
    "Single",
    "Range",
    "Multi",
    "Selection",
    "Tentative",
    "DayStatus",
    "mode_of",
    "selected_dates",
    "day_status",
]
