#!/usr/bin/env python3
"""Basic UI helpers for curses rendering."""

from __future__ import annotations

import curses
from typing import Iterable


_RANGE_COLOR_PAIR: int | None = None


def range_attr() -> int:
    """Attribute for days inside a range; falls back to underline without colors."""
    global _RANGE_COLOR_PAIR
    if _RANGE_COLOR_PAIR is not None:
        return _RANGE_COLOR_PAIR
    _RANGE_COLOR_PAIR = curses.A_UNDERLINE
    if curses.has_colors():
        try:
            curses.init_pair(1, curses.COLOR_BLACK, curses.COLOR_CYAN)
        except curses.error:
            return _RANGE_COLOR_PAIR
        _RANGE_COLOR_PAIR = curses.color_pair(1)
    return _RANGE_COLOR_PAIR


def put(stdscr: "curses.window", y: int, x: int, text: str, attr: int = 0) -> None:  # type: ignore[name-defined]
    """addnstr clipped to the screen; writes off-screen are dropped."""
    h, w = stdscr.getmaxyx()
    if y < 0 or y >= h or x < 0 or x >= w:
        return
    room = w - x - (1 if y == h - 1 else 0)
    if room <= 0:
        return
    try:
        stdscr.addnstr(y, x, text, room, attr)
    except curses.error:
        pass


def draw_header(stdscr: "curses.window", text: str) -> None:  # type: ignore[name-defined]
    _, w = stdscr.getmaxyx()
    put(stdscr, 0, 0, text.ljust(max(1, w - 1)), curses.A_BOLD)


def draw_footer(stdscr: "curses.window", text: str) -> None:  # type: ignore[name-defined]
    h, w = stdscr.getmaxyx()
    put(stdscr, h - 1, 0, text.ljust(max(1, w - 1)), curses.A_DIM)


def draw_centered_box(stdscr: "curses.window", lines: Iterable[str]) -> None:  # type: ignore[name-defined]
    h, w = stdscr.getmaxyx()
    lines_list = list(lines) or [""]
    win_h = min(len(lines_list) + 2, h - 2)
    win_w = min(max(len(line) for line in lines_list) + 4, w - 2)
    if win_h < 3 or win_w < 5:
        return
    win = stdscr.derwin(win_h, win_w, (h - win_h) // 2, (w - win_w) // 2)
    win.erase()
    win.border()
    for idx, line in enumerate(lines_list[: win_h - 2], start=1):
        win.addnstr(idx, 2, line, win_w - 4)
    win.refresh()


__all__ = ["range_attr", "put", "draw_header", "draw_footer", "draw_centered_box"]
