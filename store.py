#!/usr/bin/env python3
"""PyArrow-backed storage for the last committed calpick selection."""
from __future__ import annotations

import os
import tempfile
from datetime import date
from pathlib import Path
from typing import List, Optional, Tuple

import pyarrow as pa
import pyarrow.parquet as pq

from selection import (
    SELECTION_MODES,
    Multi,
    Range,
    Selection,
    SelectionMode,
    Single,
    selected_dates,
)
from temporal import PlainDate

_MODE_KEY = b"calpick.mode"

_SCHEMA = pa.schema(
    [
        ("mode", pa.string()),
        ("date", pa.date32()),
    ]
)


class StorageError(Exception):
    pass


def _selection_to_table(mode: SelectionMode, selection: Optional[Selection]) -> pa.Table:
    dates: List[date] = [d.to_date() for d in selected_dates(selection)]
    schema = _SCHEMA.with_metadata({_MODE_KEY: mode.encode("utf-8")})
    return pa.Table.from_pydict(
        {
            "mode": [mode] * len(dates),
            "date": dates,
        },
        schema=schema,
    )


def _table_to_selection(table: pa.Table) -> Tuple[SelectionMode, Optional[Selection]]:
    # Validate schema shape explicitly
    if table.schema != _SCHEMA:
        raise StorageError("Parquet schema mismatch for calpick selection")
    metadata = table.schema.metadata or {}
    mode = metadata.get(_MODE_KEY, b"").decode("utf-8")
    if mode not in SELECTION_MODES:
        raise StorageError(f"Unknown selection mode {mode!r} in stored selection")
    dates = [PlainDate.from_date(d) for d in table.column("date").to_pylist()]
    if not dates:
        return mode, None  # type: ignore[return-value]
    if mode == "date":
        if len(dates) != 1:
            raise StorageError(f"Expected one stored date, found {len(dates)}")
        return mode, Single(dates[0])
    if mode == "range":
        if len(dates) != 2:
            raise StorageError(f"Expected two stored range dates, found {len(dates)}")
        return mode, Range(dates[0], dates[1])
    return mode, Multi.of(dates)  # type: ignore[return-value]


def load_selection(path: Path) -> Optional[Tuple[SelectionMode, Optional[Selection]]]:
    """Return ``(mode, selection)`` or None when nothing was saved yet."""
    if not path.exists():
        return None
    try:
        table = pq.read_table(path)
        return _table_to_selection(table)
    except StorageError:
        raise
    except Exception as exc:
        raise StorageError(f"Failed to read selection from {path}: {exc}") from exc


def _write_atomic(path: Path, table: pa.Table) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with tempfile.NamedTemporaryFile(dir=str(path.parent), suffix=".parquet", delete=False) as tmp:
        tmp_path = Path(tmp.name)
    try:
        pq.write_table(table, tmp_path)
        tmp_path.replace(path)
    finally:
        if tmp_path.exists():
            try:
                os.remove(tmp_path)
            except OSError:
                pass


def save_selection(path: Path, mode: SelectionMode, selection: Optional[Selection]) -> None:
    if mode not in SELECTION_MODES:
        raise StorageError(f"Unknown selection mode {mode!r}")
    try:
        _write_atomic(path, _selection_to_table(mode, selection))
    except OSError as exc:
        raise StorageError(f"Failed to write selection to {path}: {exc}") from exc


__all__ = [
    "load_selection",
    "save_selection",
    "StorageError",
]
