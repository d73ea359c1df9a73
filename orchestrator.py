#!/usr/bin/env python3
"""Orchestrator for the calpick TUI."""
from __future__ import annotations

import curses
import logging
from typing import Optional

from clock import Clock, SystemClock
from config import Config
from help_content import HELP_LINES
from keys import (
    KEY_CAP_Q,
    KEY_ENTER_KEYS,
    KEY_ESC,
    KEY_HELP,
    KEY_NEXT,
    KEY_PREV,
    KEY_Q,
    KEY_SPACE,
    KEY_TODAY,
    NAV_KEYS,
)
from navigation import key_to_date
from picker import (
    CalendarState,
    can_go_next,
    can_go_previous,
    cancel_tentative,
    encode_value,
    focus_day,
    heading,
    is_disabled,
    is_disallowed,
    next_page,
    previous_page,
    resolve_today,
    select_day,
)
from state import AppState
from store import StorageError, save_selection
from ui_base import draw_centered_box, draw_footer, draw_header
from view_month import MonthView

logger = logging.getLogger(__name__)


class Orchestrator:
    """Owns the curses lifecycle around one calendar state."""

    def __init__(
        self,
        calendar: CalendarState,
        config: Config,
        *,
        clock: Optional[Clock] = None,
        persist: bool = True,
    ) -> None:
        self.config = config
        self.clock = clock or SystemClock()
        self.state = AppState(calendar=calendar)
        self.persist = persist

    def run(self) -> int:
        try:
            curses.wrapper(self._curses_main)
        except curses.error as exc:
            logger.error("Terminal error: %s", exc)
            return 1
        return self.finish()

    def finish(self) -> int:
        """Print and store the committed value; returns the exit code."""
        calendar = self.state.calendar
        if not self.state.committed or calendar.selection is None:
            return 1
        print(encode_value(calendar))
        if self.persist:
            try:
                save_selection(self.config.state_path, calendar.mode, calendar.selection)
            except StorageError as exc:
                logger.warning("Could not store selection: %s", exc)
        return 0

    def _curses_main(self, stdscr: "curses.window") -> None:  # type: ignore[name-defined]
        curses.curs_set(0)
        stdscr.keypad(True)
        self._draw(stdscr)

        while True:
            ch = stdscr.getch()
            if ch in (-1, curses.ERR):
                continue
            if ch in (KEY_Q, KEY_CAP_Q) and self.state.overlay == "none":
                break
            if self.handle_key(ch):
                self._draw(stdscr)

    # Rendering
    def _draw(self, stdscr: "curses.window") -> None:  # type: ignore[name-defined]
        stdscr.erase()
        calendar = self.state.calendar
        prev_label = "<" if can_go_previous(calendar) else " "
        next_label = ">" if can_go_next(calendar) else " "
        draw_header(stdscr, f"{prev_label} {heading(calendar)} {next_label}   [{calendar.mode}]")

        view = MonthView(
            calendar,
            today=resolve_today(calendar.options, self.clock),
            weekday_style=self.config.weekday_style,
            show_week_numbers=self.config.show_week_numbers,
        )
        view.render(stdscr, 2)

        value = encode_value(calendar) or "-"
        draw_footer(stdscr, f"focus {calendar.focused_date}   value {value}   ?: help  q: quit")

        if self.state.overlay == "help":
            draw_centered_box(stdscr, list(HELP_LINES) + ["", "Esc to dismiss"])
        elif self.state.overlay in ("error", "message"):
            draw_centered_box(stdscr, [self.state.overlay_message, "", "Press any key to dismiss"])

        stdscr.refresh()

    # Key handling
    def handle_key(self, ch: int) -> bool:
        """Apply one key press; returns True when the screen needs a redraw."""
        if self.state.overlay == "help":
            if ch in (KEY_ESC, KEY_HELP):
                self.state.overlay = "none"
            return True
        if self.state.overlay in ("error", "message"):
            self.state.overlay = "none"
            return True

        calendar = self.state.calendar

        if ch == KEY_HELP:
            self.state.overlay = "help"
            return True

        if ch == KEY_ESC:
            self.state.calendar = cancel_tentative(calendar)
            return True

        if ch == KEY_TODAY:
            self.state.calendar = focus_day(calendar, resolve_today(calendar.options, self.clock))
            return True

        if ch == KEY_NEXT:
            self.state.calendar = next_page(calendar)
            return True

        if ch == KEY_PREV:
            self.state.calendar = previous_page(calendar)
            return True

        if ch in KEY_ENTER_KEYS or ch == KEY_SPACE:
            return self._select_focused()

        if ch in NAV_KEYS:
            key, shift = NAV_KEYS[ch]
            try:
                target = key_to_date(
                    key,
                    calendar.focused_date,
                    shift=shift,
                    is_rtl=self.config.rtl,
                    first_day_of_week=calendar.options.first_day_of_week,
                )
                if target is None:
                    return False
                self.state.calendar = focus_day(calendar, target)
            except (OverflowError, ValueError) as exc:
                logger.debug("Ignoring %s from %s: %s", key, calendar.focused_date, exc)
                self._show_message("No dates beyond this point", kind="error")
            return True
        return False

    def _select_focused(self) -> bool:
        before = self.state.calendar
        day = before.focused_date
        if is_disabled(before, day) or is_disallowed(before, day):
            self._show_message(f"{day} cannot be selected", kind="error")
            return True
        after = select_day(before, day)
        self.state.calendar = after
        if before.mode != "range" or (before.tentative is not None and after.tentative is None):
            self.state.committed = True
        return True

    def _show_message(self, message: str, kind: str = "message") -> None:
        self.state.overlay = "error" if kind == "error" else "message"
        self.state.overlay_message = message


__all__ = ["Orchestrator"]
