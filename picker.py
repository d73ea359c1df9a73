#!/usr/bin/env python3
"""Headless calendar controller.

A ``CalendarState`` holds what a date picker shows: the selection, the
window of visible months with its focused date, and a range being picked.
Every operation here returns a new state; rendering lives elsewhere.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Callable, List, Optional, Union

from clock import Clock
from date_utils import clamp, in_range, today as clock_today
from date_window import (
    DEFAULT_PAGE_BY,
    FIRST_MONTH,
    LAST_MONTH,
    DateWindow,
    PageBy,
    can_go_next as window_can_go_next,
    can_go_previous as window_can_go_previous,
    page_step,
)
from encoding import encode_selection, safe_decode_selection
from formatting import MonthStyle, format_month_range, get_date_formatter, month_names
from selection import (
    SELECTION_MODES,
    Multi,
    Range,
    Selection,
    SelectionMode,
    Single,
    Tentative,
    day_status,
    mode_of,
)
from temporal import MAX_YEAR, MIN_YEAR, PlainDate, PlainYearMonth

logger = logging.getLogger(__name__)

DateFilter = Callable[[PlainDate], bool]

DEFAULT_FIRST_DAY_OF_WEEK = 1
DEFAULT_MAX_YEARS = 20


@dataclass(frozen=True)
class CalendarOptions:
    min: Optional[PlainDate] = None
    max: Optional[PlainDate] = None
    months: int = 1
    page_by: PageBy = DEFAULT_PAGE_BY
    first_day_of_week: int = DEFAULT_FIRST_DAY_OF_WEEK
    locale: Optional[str] = None
    is_date_disallowed: Optional[DateFilter] = None
    today: Optional[PlainDate] = None


@dataclass(frozen=True)
class CalendarState:
    mode: SelectionMode
    window: DateWindow
    options: CalendarOptions = field(default_factory=CalendarOptions)
    selection: Optional[Selection] = None
    tentative: Optional[Tentative] = None

    @property
    def focused_date(self) -> PlainDate:
        return self.window.focused_date


@dataclass(frozen=True)
class DayProps:
    date: PlainDate
    label: str
    in_month: bool
    focused: bool
    today: bool
    selected: bool
    disallowed: bool
    disabled: bool
    range_start: bool
    range_end: bool
    range_inner: bool

    @property
    def outside(self) -> bool:
        return not self.in_month

    @property
    def parts(self) -> str:
        flags = (
            ("selected", self.selected),
            ("today", self.today),
            ("disallowed", self.disallowed),
            ("outside", self.outside),
            ("range-start", self.range_start),
            ("range-end", self.range_end),
            ("range-inner", self.range_inner),
        )
        return " ".join(["button", "day"] + [name for name, on in flags if on])


@dataclass(frozen=True)
class YearOption:
    label: str
    value: int
    selected: bool


@dataclass(frozen=True)
class MonthOption:
    label: str
    value: int
    disabled: bool
    selected: bool


def resolve_today(options: CalendarOptions, clock: Optional[Clock] = None) -> PlainDate:
    return options.today or clock_today(clock)


def _anchor(selection: Optional[Selection]) -> Optional[PlainDate]:
    if isinstance(selection, Single):
        return selection.date
    if isinstance(selection, Range):
        return selection.end
    if isinstance(selection, Multi) and selection.dates:
        return selection.dates[0]
    return None


def _coerce_value(
    mode: SelectionMode, value: Union[Selection, str, None]
) -> Optional[Selection]:
    if value is None:
        return None
    if isinstance(value, str):
        return safe_decode_selection(mode, value)
    if mode_of(value) != mode:
        raise ValueError(f"A {mode_of(value)} value cannot be used in {mode} mode")
    return value


def create_calendar(
    mode: SelectionMode = "date",
    *,
    value: Union[Selection, str, None] = None,
    focused_date: Optional[PlainDate] = None,
    options: Optional[CalendarOptions] = None,
    clock: Optional[Clock] = None,
) -> CalendarState:
    """Initial state; focus falls back from the value to today.

    String values are decoded leniently: a malformed value counts as unset.
    """
    if mode not in SELECTION_MODES:
        raise ValueError(f"Unknown mode '{mode}'. Expected one of: {', '.join(SELECTION_MODES)}")
    options = options or CalendarOptions()
    selection = _coerce_value(mode, value)
    focus = focused_date or _anchor(selection) or resolve_today(options, clock)
    focus = clamp(focus, options.min, options.max)
    return CalendarState(
        mode=mode,
        window=DateWindow.for_focus(focus, options.months),
        options=options,
        selection=selection,
    )


def is_disallowed(state: CalendarState, day: PlainDate) -> bool:
    predicate = state.options.is_date_disallowed
    return bool(predicate and predicate(day))


def is_disabled(state: CalendarState, day: PlainDate) -> bool:
    return not in_range(day, state.options.min, state.options.max)


def focus_day(state: CalendarState, day: PlainDate) -> CalendarState:
    """Move focus to ``day`` (clamped to min/max) and snap the window to it."""
    day = clamp(day, state.options.min, state.options.max)
    tentative = state.tentative.with_second(day) if state.tentative else None
    return replace(state, window=state.window.adjust(day), tentative=tentative)


def hover_day(state: CalendarState, day: PlainDate) -> CalendarState:
    if state.tentative is None or is_disallowed(state, day) or is_disabled(state, day):
        return state
    return replace(state, tentative=state.tentative.with_second(day))


def select_day(state: CalendarState, day: PlainDate) -> CalendarState:
    """Pick ``day`` according to the mode, then focus it.

    Days outside min/max are ignored; disallowed days only take focus.
    """
    if is_disabled(state, day):
        logger.debug("Ignoring selection of %s outside %s..%s", day, state.options.min, state.options.max)
        return state
    if is_disallowed(state, day):
        logger.debug("Ignoring selection of disallowed %s", day)
        return focus_day(state, day)

    if state.mode == "date":
        state = replace(state, selection=Single(day))
    elif state.mode == "multi":
        current = state.selection if isinstance(state.selection, Multi) else Multi()
        toggled = current.toggle(day)
        state = replace(state, selection=toggled if toggled.dates else None)
    elif state.mode == "range":
        if state.tentative is None:
            state = replace(state, tentative=Tentative(first=day, second=day))
        else:
            committed = state.tentative.with_second(day).sorted()
            state = replace(state, selection=committed, tentative=None)
    else:
        raise ValueError(f"Unknown mode '{state.mode}'")
    return focus_day(state, day)


def cancel_tentative(state: CalendarState) -> CalendarState:
    return replace(state, tentative=None)


def set_value(state: CalendarState, value: Union[Selection, str, None]) -> CalendarState:
    """Replace the selection from outside; a range moves focus to its end
    when the focused date is not inside it."""
    selection = _coerce_value(state.mode, value)
    state = replace(state, selection=selection, tentative=None)
    if isinstance(selection, Range) and not selection.contains(state.focused_date):
        return focus_day(state, selection.end)
    return state


def can_go_next(state: CalendarState) -> bool:
    return window_can_go_next(state.window, state.options.max)


def can_go_previous(state: CalendarState) -> bool:
    return window_can_go_previous(state.window, state.options.min)


def _page(state: CalendarState, direction: int) -> CalendarState:
    step = page_step(state.options.page_by, state.window.months)
    # a full page may not fit before the first or after the last month
    if direction > 0:
        step = min(step, state.window.end.months_until(LAST_MONTH))
    else:
        step = min(step, FIRST_MONTH.months_until(state.window.start))
    window = state.window.shift(direction * step)
    focus = clamp(window.focused_date, state.options.min, state.options.max)
    return replace(state, window=window.adjust(focus))


def next_page(state: CalendarState) -> CalendarState:
    if not can_go_next(state):
        return state
    return _page(state, 1)


def previous_page(state: CalendarState) -> CalendarState:
    if not can_go_previous(state):
        return state
    return _page(state, -1)


def visible_months(state: CalendarState) -> List[PlainYearMonth]:
    return state.window.month_list()


def highlighted_range(state: CalendarState) -> Optional[Range]:
    """Range to draw: the pick in progress wins over the committed value."""
    if state.tentative is not None:
        return state.tentative.sorted()
    if isinstance(state.selection, Range):
        return state.selection
    return None


def day_props(
    state: CalendarState, year_month: PlainYearMonth, day: PlainDate, *, today: PlainDate
) -> DayProps:
    in_month = year_month.equals(day)
    shown: Optional[Selection] = highlighted_range(state) if state.mode == "range" else state.selection
    status = day_status(day, shown)
    formatter = get_date_formatter(state.options.locale, month="long", day="numeric")
    return DayProps(
        date=day,
        label=formatter.format(day),
        in_month=in_month,
        focused=in_month and day.equals(state.focused_date),
        today=day.equals(today),
        selected=in_month and status.selected,
        disallowed=is_disallowed(state, day),
        disabled=is_disabled(state, day),
        range_start=status.range_start,
        range_end=status.range_end,
        range_inner=status.range_inner,
    )


def year_options(state: CalendarState, max_years: int = DEFAULT_MAX_YEARS) -> List[YearOption]:
    """Years around the focused one, cut to the min/max years."""
    current = state.focused_date.year
    half = max_years // 2
    first = max(current - half, MIN_YEAR)
    last = min(current + (max_years - half - 1), MAX_YEAR)
    if state.options.min is not None:
        first = max(first, state.options.min.year)
    if state.options.max is not None:
        last = min(last, state.options.max.year)
    return [
        YearOption(label=str(year), value=year, selected=year == current)
        for year in range(first, last + 1)
    ]


def month_options(state: CalendarState, style: MonthStyle = "long") -> List[MonthOption]:
    focused = state.focused_date.to_year_month()
    options: List[MonthOption] = []
    for index, label in enumerate(month_names(style, state.options.locale), start=1):
        year_month = PlainYearMonth(focused.year, index)
        disabled = (
            state.options.min is not None and PlainYearMonth.compare(year_month, state.options.min) < 0
        ) or (
            state.options.max is not None and PlainYearMonth.compare(year_month, state.options.max) > 0
        )
        options.append(
            MonthOption(label=label, value=index, disabled=disabled, selected=index == focused.month)
        )
    return options


def select_year(state: CalendarState, year: int) -> CalendarState:
    focused = state.focused_date
    return focus_day(state, focused.add(years=year - focused.year))


def select_month(state: CalendarState, month: int) -> CalendarState:
    focused = state.focused_date
    return focus_day(state, focused.add(months=month - focused.month))


def heading(state: CalendarState) -> str:
    return format_month_range(state.window.start, state.window.end, state.options.locale)


def encode_value(state: CalendarState) -> str:
    return encode_selection(state.selection)


__all__ = [
    "CalendarOptions",
    "CalendarState",
    "DayProps",
    "YearOption",
    "MonthOption",
    "DateFilter",
    "resolve_today",
    "create_calendar",
    "is_disallowed",
    "is_disabled",
    "focus_day",
    "hover_day",
    "select_day",
    "cancel_tentative",
    "set_value",
    "can_go_next",
    "can_go_previous",
    "next_page",
    "previous_page",
    "visible_months",
    "highlighted_range",
    "day_props",
    "year_options",
    "month_options",
    "select_year",
    "select_month",
    "heading",
    "encode_value",
]
