#!/usr/bin/env python3
"""String encodings of calendar values.

- single date: ``YYYY-MM-DD``
- range: ``<start>/<end>``; either side may be missing
- multi: ISO dates separated by spaces, order kept, duplicates kept

The strict parsers raise ``FormatError``. The ``safe_*`` variants are for
values coming from users or config, where a malformed value counts as unset.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from selection import Multi, Range, Selection, SelectionMode, Single
from temporal import FormatError, PlainDate

logger = logging.getLogger(__name__)

RANGE_SEPARATOR = "/"


def parse_date(value: str) -> PlainDate:
    return PlainDate.parse(value)


def safe_parse_date(value: Optional[str]) -> Optional[PlainDate]:
    if not value:
        return None
    try:
        return PlainDate.parse(value)
    except FormatError as exc:
        logger.debug("Ignoring malformed date %r: %s", value, exc)
        return None


def parse_range(value: Optional[str]) -> Optional[Range]:
    """Parse ``start/end``. Returns None when either side is absent.

    A side that is present but malformed raises ``FormatError``.
    """
    if not value:
        return None
    if RANGE_SEPARATOR not in value:
        raise FormatError(f"Invalid ISO range: {value!r}. Expected START/END")
    start_text, _, end_text = value.partition(RANGE_SEPARATOR)
    start = parse_date(start_text) if start_text else None
    end = parse_date(end_text) if end_text else None
    if start is None or end is None:
        return None
    return Range(start, end)


def safe_parse_range(value: Optional[str]) -> Optional[Range]:
    try:
        return parse_range(value)
    except FormatError as exc:
        logger.debug("Ignoring malformed range %r: %s", value, exc)
        return None


def print_range(start: Optional[PlainDate], end: Optional[PlainDate]) -> str:
    return f"{start or ''}{RANGE_SEPARATOR}{end or ''}"


def parse_list(value: Optional[str]) -> List[PlainDate]:
    if not value:
        return []
    return [parse_date(token) for token in value.split()]


def safe_parse_list(value: Optional[str]) -> List[PlainDate]:
    """Like ``parse_list`` but malformed entries are dropped."""
    if not value:
        return []
    dates: List[PlainDate] = []
    for token in value.split():
        parsed = safe_parse_date(token)
        if parsed is not None:
            dates.append(parsed)
    return dates


def print_list(dates: Iterable[PlainDate]) -> str:
    return " ".join(str(d) for d in dates)


def encode_selection(selection: Optional[Selection]) -> str:
    if selection is None:
        return ""
    if isinstance(selection, Single):
        return str(selection.date)
    if isinstance(selection, Range):
        return print_range(selection.start, selection.end)
    if isinstance(selection, Multi):
        return print_list(selection.dates)
    raise TypeError(f"Unknown selection type {type(selection).__name__}")


def decode_selection(mode: SelectionMode, value: Optional[str]) -> Optional[Selection]:
    """Strictly decode ``value`` for ``mode``; empty input means no selection."""
    if mode == "date":
        return Single(parse_date(value)) if value else None
    if mode == "range":
        return parse_range(value)
    if mode == "multi":
        dates = parse_list(value)
        return Multi.of(dates) if dates else None
    raise ValueError(f"Unknown selection mode '{mode}'")


def safe_decode_selection(mode: SelectionMode, value: Optional[str]) -> Optional[Selection]:
    if mode == "multi":
        dates = safe_parse_list(value)
        return Multi.of(dates) if dates else None
    try:
        return decode_selection(mode, value)
    except FormatError as exc:
        logger.debug("Ignoring malformed %s value %r: %s", mode, value, exc)
        return None


__all__ = [
    "RANGE_SEPARATOR",
    "parse_date",
    "safe_parse_date",
    "parse_range",
    "safe_parse_range",
    "print_range",
    "parse_list",
    "safe_parse_list",
    "print_list",
    "encode_selection",
    "decode_selection",
    "safe_decode_selection",
]
