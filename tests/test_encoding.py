import pytest

from encoding import (
    decode_selection,
    encode_selection,
    parse_list,
    parse_range,
    print_list,
    print_range,
    safe_decode_selection,
    safe_parse_date,
    safe_parse_list,
    safe_parse_range,
)
from selection import Multi, Range, Single
from temporal import FormatError, PlainDate


def test_range_round_trip() -> None:
    parsed = parse_range("2020-01-01/2020-01-03")

    assert parsed == Range(PlainDate(2020, 1, 1), PlainDate(2020, 1, 3))
    assert print_range(parsed.start, parsed.end) == "2020-01-01/2020-01-03"


@pytest.mark.parametrize("value", ["", None, "/", "2020-01-01/", "/2020-01-03"])
def test_range_with_missing_side_is_empty(value) -> None:
    assert parse_range(value) is None


def test_range_with_malformed_side() -> None:
    with pytest.raises(FormatError):
        parse_range("2020-01-01/nope")
    with pytest.raises(FormatError):
        parse_range("2020-01-01")
    assert safe_parse_range("2020-01-01/nope") is None


def test_print_range_with_missing_sides() -> None:
    assert print_range(PlainDate(2020, 1, 1), None) == "2020-01-01/"
    assert print_range(None, None) == "/"


def test_list_keeps_order_and_duplicates() -> None:
    text = "2020-01-03 2020-01-01 2020-01-03"
    dates = parse_list(text)

    assert [str(d) for d in dates] == ["2020-01-03", "2020-01-01", "2020-01-03"]
    assert print_list(dates) == text
    assert parse_list("") == []


def test_list_parsing_strict_and_lenient() -> None:
    with pytest.raises(FormatError):
        parse_list("2020-01-01 bogus")
    assert safe_parse_list("2020-01-01 bogus  2020-02-30 2020-01-02") == [
        PlainDate(2020, 1, 1),
        PlainDate(2020, 1, 2),
    ]


def test_safe_parse_date_treats_malformed_as_unset() -> None:
    assert safe_parse_date("2021-02-30") is None
    assert safe_parse_date(None) is None
    assert safe_parse_date("2021-02-03") == PlainDate(2021, 2, 3)


def test_selection_encoding() -> None:
    assert encode_selection(Single(PlainDate(2020, 1, 1))) == "2020-01-01"
    assert encode_selection(Multi.of([PlainDate(2020, 1, 1), PlainDate(2020, 1, 2)])) == "2020-01-01 2020-01-02"
    assert encode_selection(None) == ""
    assert decode_selection("date", "2020-01-01") == Single(PlainDate(2020, 1, 1))
    assert decode_selection("multi", "") is None
    assert decode_selection("range", "2020-01-01/2020-01-02") == Range(PlainDate(2020, 1, 1), PlainDate(2020, 1, 2))


def test_safe_decode_selection() -> None:
    assert safe_decode_selection("date", "junk") is None
    assert safe_decode_selection("range", "junk") is None
    assert safe_decode_selection("multi", "junk 2020-01-01") == Multi.of([PlainDate(2020, 1, 1)])
    with pytest.raises(ValueError):
        decode_selection("week", "2020-01-01")  # type: ignore[arg-type]
