#!/usr/bin/env python3
"""Thin entrypoint for calpick."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import replace
from typing import Dict, Optional, Sequence

from _version import __version__
from config import Config, load_config
from date_window import PAGE_BY_VALUES
from encoding import safe_parse_date
from orchestrator import Orchestrator
from picker import CalendarOptions, CalendarState, create_calendar
from selection import SelectionMode
from store import StorageError, load_selection
from temporal import FormatError, PlainYearMonth
from view_month import month_lines

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "CALPICK_LOG_LEVEL"

# flag -> name of the value it takes
VALUE_FLAGS: Dict[str, str] = {
    "-s": "value",
    "-n": "months",
    "-f": "first_day_of_week",
    "-l": "locale",
    "-p": "page_by",
    "-i": "min",
    "-x": "max",
    "-g": "grid",
}


class UsageError(Exception):
    pass


def _print_help() -> None:
    print(
        "calpick - keyboard-first terminal date picker\n\n"
        "Usage:\n"
        "  calpick                 Pick a single date\n"
        "  calpick -r              Pick a range (prints START/END)\n"
        "  calpick -m              Pick several dates (prints them space separated)\n"
        "  calpick -g YYYY-MM      Print a month grid and exit\n"
        "  calpick -h              Show this help\n"
        "  calpick -v              Show installed version\n\n"
        "Options:\n"
        "  -s VALUE   initial value (YYYY-MM-DD, START/END or a list)\n"
        "  -n N       months shown at once\n"
        "  -f DAY     first day of week, 0=Sunday .. 6=Saturday\n"
        "  -l LOCALE  locale for day and month names, e.g. de_DE\n"
        "  -p MODE    page by 'months' (whole window) or 'single'\n"
        "  -i DATE    earliest selectable date\n"
        "  -x DATE    latest selectable date\n"
        "  -w         show ISO week numbers\n"
    )


def parse_args(argv: Sequence[str]) -> tuple[dict[str, str | None], bool, bool]:
    flags: dict[str, str | None] = {}
    show_version = False
    show_help = False

    idx = 0
    while idx < len(argv):
        arg = argv[idx]
        if arg == "-h":
            show_help = True
        elif arg == "-v":
            show_version = True
        elif arg == "-r":
            flags["mode"] = "range"
        elif arg == "-m":
            flags["mode"] = "multi"
        elif arg == "-w":
            flags["week_numbers"] = "1"
        elif arg in VALUE_FLAGS:
            idx += 1
            if idx >= len(argv):
                raise UsageError(f"{arg} requires a {VALUE_FLAGS[arg].replace('_', ' ')} argument")
            flags[VALUE_FLAGS[arg]] = argv[idx]
        else:
            raise UsageError(f"Unknown flag '{arg}'")
        idx += 1
    return flags, show_version, show_help


def _int_flag(flags: dict[str, str | None], name: str, low: int, high: int) -> Optional[int]:
    raw = flags.get(name)
    if raw is None:
        return None
    try:
        value = int(raw)
    except ValueError as exc:
        raise UsageError(f"{name.replace('_', ' ')} must be a number") from exc
    if not low <= value <= high:
        raise UsageError(f"{name.replace('_', ' ')} must be between {low} and {high}")
    return value


def apply_flags(config: Config, flags: dict[str, str | None]) -> Config:
    """Command-line flags override config values."""
    first_day = _int_flag(flags, "first_day_of_week", 0, 6)
    months = _int_flag(flags, "months", 1, 12)
    page_by = flags.get("page_by")
    if page_by is not None and page_by not in PAGE_BY_VALUES:
        raise UsageError(f"page by must be one of: {', '.join(PAGE_BY_VALUES)}")
    return replace(
        config,
        first_day_of_week=config.first_day_of_week if first_day is None else first_day,
        months=config.months if months is None else months,
        page_by=page_by or config.page_by,  # type: ignore[arg-type]
        locale=flags.get("locale") or config.locale,
        show_week_numbers=config.show_week_numbers or "week_numbers" in flags,
    )


def _stored_value(config: Config, mode: SelectionMode):
    try:
        stored = load_selection(config.state_path)
    except StorageError as exc:
        logger.warning("Ignoring stored selection: %s", exc)
        return None
    if stored is None or stored[0] != mode:
        return None
    return stored[1]


def build_calendar(config: Config, flags: dict[str, str | None]) -> CalendarState:
    mode: SelectionMode = flags.get("mode") or "date"  # type: ignore[assignment]
    options = CalendarOptions(
        min=safe_parse_date(flags.get("min")),
        max=safe_parse_date(flags.get("max")),
        months=config.months,
        page_by=config.page_by,
        first_day_of_week=config.first_day_of_week,
        locale=config.locale,
    )
    value = flags.get("value")
    return create_calendar(
        mode,
        value=value if value is not None else _stored_value(config, mode),
        options=options,
    )


def print_grid(config: Config, raw: str) -> int:
    try:
        year_month = PlainYearMonth.parse(raw)
    except FormatError as exc:
        print(str(exc))
        return 1
    for line in month_lines(
        year_month,
        first_day_of_week=config.first_day_of_week,
        locale=config.locale,
        weekday_style=config.weekday_style,
        show_week_numbers=config.show_week_numbers,
    ):
        print(line)
    return 0


def _configure_logging() -> None:
    level = os.environ.get(LOG_LEVEL_ENV)
    if not level:
        return
    logging.basicConfig(
        level=level.upper(),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    # Make ESC detection snappy inside curses.
    os.environ.setdefault("ESCDELAY", "25")
    _configure_logging()

    if argv is None:
        argv = sys.argv[1:]

    try:
        flags, show_version, show_help = parse_args(argv)
        if show_version:
            print(__version__)
            return 0
        if show_help:
            _print_help()
            return 0
        config = apply_flags(load_config(), flags)
    except UsageError as exc:
        print(str(exc))
        return 1

    if flags.get("grid") is not None:
        return print_grid(config, flags["grid"] or "")

    return Orchestrator(build_calendar(config, flags), config).run()


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(130)
