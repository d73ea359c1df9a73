import pytest

from selection import Multi, Range, Single
from store import StorageError, load_selection, save_selection
from temporal import PlainDate


def test_store_round_trip_keeps_range_order(tmp_path) -> None:
    path = tmp_path / "selection.parquet"
    original = Range(PlainDate(2020, 1, 1), PlainDate(2020, 3, 31))

    save_selection(path, "range", original)

    assert load_selection(path) == ("range", original)


def test_store_round_trip_multi_and_single(tmp_path) -> None:
    multi_path = tmp_path / "multi.parquet"
    single_path = tmp_path / "nested" / "single.parquet"
    multi = Multi.of([PlainDate(2021, 5, 2), PlainDate(2021, 5, 1)])

    save_selection(multi_path, "multi", multi)
    save_selection(single_path, "date", Single(PlainDate(1999, 12, 31)))

    assert load_selection(multi_path) == ("multi", multi)
    assert load_selection(single_path) == ("date", Single(PlainDate(1999, 12, 31)))


def test_store_empty_selection_keeps_mode(tmp_path) -> None:
    path = tmp_path / "selection.parquet"

    save_selection(path, "multi", None)

    assert load_selection(path) == ("multi", None)


def test_load_missing_file_returns_none(tmp_path) -> None:
    assert load_selection(tmp_path / "absent.parquet") is None


def test_load_garbage_raises_storage_error(tmp_path) -> None:
    path = tmp_path / "selection.parquet"
    path.write_text("not parquet")

    with pytest.raises(StorageError):
        load_selection(path)


def test_save_rejects_unknown_mode(tmp_path) -> None:
    with pytest.raises(StorageError):
        save_selection(tmp_path / "x.parquet", "week", None)  # type: ignore[arg-type]
