#!/usr/bin/env python3
"""Month view rendering: plain-text grids and the curses calendar pane."""

from __future__ import annotations

import curses
from typing import List, Optional, Sequence

from date_utils import view_of_month, week_number
from formatting import WeekdayStyle, day_names, get_date_formatter
from picker import CalendarState, DayProps, day_props, visible_months
from temporal import PlainDate, PlainYearMonth
from ui_base import put, range_attr

CELL_W = 3
WEEK_COL_W = 3
MONTH_GAP = 2
MONTH_ROWS = 8  # title, weekday header, up to six weeks


def _weekday_header(
    first_day_of_week: int, locale: Optional[str], weekday_style: WeekdayStyle
) -> List[str]:
    return [name[: CELL_W - 1].rjust(CELL_W - 1) for name in day_names(weekday_style, first_day_of_week, locale)]


def _week_label(week: Sequence[PlainDate], year_month: PlainYearMonth) -> str:
    in_month = next((d for d in week if year_month.equals(d)), week[0])
    return f"{week_number(in_month):2d}"


def month_lines(
    year_month: PlainYearMonth,
    *,
    first_day_of_week: int = 1,
    locale: Optional[str] = None,
    weekday_style: WeekdayStyle = "short",
    show_week_numbers: bool = False,
    show_outside_days: bool = False,
) -> List[str]:
    """Text rendering of one month, in the style of ``cal``."""
    width = 7 * CELL_W - 1
    prefix = " " * WEEK_COL_W if show_week_numbers else ""
    title = get_date_formatter(locale, year="numeric", month="long").format(year_month)
    lines = [prefix + title.center(width).rstrip()]
    lines.append(prefix + " ".join(_weekday_header(first_day_of_week, locale, weekday_style)))
    for week in view_of_month(year_month, first_day_of_week):
        cells = []
        for day in week:
            shown = show_outside_days or year_month.equals(day)
            cells.append(f"{day.day:2d}" if shown else "  ")
        row = " ".join(cells)
        if show_week_numbers:
            row = f"{_week_label(week, year_month)} {row}"
        lines.append(row.rstrip())
    return lines


def day_attr(props: DayProps) -> int:
    attr = 0
    if props.outside or props.disabled or props.disallowed:
        attr |= curses.A_DIM
    if props.today:
        attr |= curses.A_BOLD
    if props.range_inner:
        attr |= range_attr()
    if props.selected or props.range_start or props.range_end:
        attr |= curses.A_REVERSE
    if props.focused:
        attr |= curses.A_UNDERLINE | curses.A_BOLD
    return attr


class MonthView:
    """Draws the months of a calendar state side by side, wrapping rows."""

    def __init__(
        self,
        state: CalendarState,
        *,
        today: PlainDate,
        weekday_style: WeekdayStyle = "short",
        show_week_numbers: bool = False,
        show_outside_days: bool = False,
    ) -> None:
        self.state = state
        self.today = today
        self.weekday_style = weekday_style
        self.show_week_numbers = show_week_numbers
        self.show_outside_days = show_outside_days

    @property
    def block_width(self) -> int:
        return 7 * CELL_W - 1 + (WEEK_COL_W if self.show_week_numbers else 0)

    def columns_for(self, width: int) -> int:
        return max(1, (width + MONTH_GAP) // (self.block_width + MONTH_GAP))

    def render(self, stdscr: "curses.window", top: int) -> None:  # type: ignore[name-defined]
        _, w = stdscr.getmaxyx()
        cols = self.columns_for(w)
        for idx, year_month in enumerate(visible_months(self.state)):
            row, col = divmod(idx, cols)
            self._draw_month(
                stdscr,
                top + row * (MONTH_ROWS + 1),
                col * (self.block_width + MONTH_GAP),
                year_month,
            )

    def _draw_month(
        self,
        stdscr: "curses.window",  # type: ignore[name-defined]
        y: int,
        x: int,
        year_month: PlainYearMonth,
    ) -> None:
        options = self.state.options
        lines = month_lines(
            year_month,
            first_day_of_week=options.first_day_of_week,
            locale=options.locale,
            weekday_style=self.weekday_style,
            show_week_numbers=self.show_week_numbers,
        )
        put(stdscr, y, x, lines[0], curses.A_BOLD)
        put(stdscr, y + 1, x, lines[1], curses.A_DIM)

        grid_x = x + (WEEK_COL_W if self.show_week_numbers else 0)
        for row_idx, week in enumerate(view_of_month(year_month, options.first_day_of_week)):
            row_y = y + 2 + row_idx
            if self.show_week_numbers:
                put(stdscr, row_y, x, _week_label(week, year_month), curses.A_DIM)
            for col_idx, day in enumerate(week):
                props = day_props(self.state, year_month, day, today=self.today)
                if props.outside and not self.show_outside_days:
                    continue
                put(stdscr, row_y, grid_x + col_idx * CELL_W, f"{day.day:2d}", day_attr(props))


__all__ = ["MonthView", "month_lines", "day_attr", "MONTH_ROWS"]
