from datetime import date, datetime, timedelta, timezone

import pytest

from date_utils import days_in_range
from temporal import DurationError, FormatError, PlainDate, PlainYearMonth, single_unit


def test_parse_and_format_iso_date() -> None:
    d = PlainDate.parse("2020-03-07")

    assert (d.year, d.month, d.day) == (2020, 3, 7)
    assert d.to_string() == "2020-03-07"
    assert str(d) == "2020-03-07"


def test_parse_pads_small_years() -> None:
    d = PlainDate.parse("0099-01-01")

    assert d.year == 99
    assert str(d) == "0099-01-01"


@pytest.mark.parametrize(
    "value",
    ["invalid", "2020-1-01", "20200-01-01", "2020-13-01", "2020-00-10", "2020-01-32", " 2020-01-01"],
)
def test_parse_rejects_malformed_strings(value: str) -> None:
    with pytest.raises(FormatError):
        PlainDate.parse(value)


def test_parse_rejects_days_the_month_does_not_have() -> None:
    with pytest.raises(FormatError):
        PlainDate.parse("2021-02-29")
    with pytest.raises(FormatError):
        PlainDate.parse("2020-02-31")
    assert PlainDate.parse("2020-02-29") == PlainDate(2020, 2, 29)


def test_constructor_rejects_impossible_dates() -> None:
    with pytest.raises(ValueError):
        PlainDate(2021, 2, 30)
    with pytest.raises(ValueError):
        PlainYearMonth(2021, 13)


def test_from_value_reads_utc_fields() -> None:
    plus_two = timezone(timedelta(hours=2))

    assert PlainDate.from_value(datetime(2020, 1, 1, 1, 0, tzinfo=plus_two)) == PlainDate(2019, 12, 31)
    assert PlainDate.from_value(datetime(2020, 1, 1, 23, 59)) == PlainDate(2020, 1, 1)
    assert PlainDate.from_value(date(2020, 5, 17)) == PlainDate(2020, 5, 17)
    assert PlainDate.from_value("2020-05-17") == PlainDate(2020, 5, 17)


def test_month_addition_clamps_day() -> None:
    assert PlainDate(2020, 1, 31).add({"months": 1}) == PlainDate(2020, 2, 29)
    assert PlainDate(2021, 1, 31).add({"months": 1}) == PlainDate(2021, 2, 28)
    assert PlainDate(2020, 3, 31).subtract(months=1) == PlainDate(2020, 2, 29)
    assert PlainDate(2020, 3, 31).add(months=1) == PlainDate(2020, 4, 30)


def test_year_addition_clamps_leap_day() -> None:
    assert PlainDate(2020, 2, 29).add({"years": 1}) == PlainDate(2021, 2, 28)
    assert PlainDate(2020, 2, 29).add(years=4) == PlainDate(2024, 2, 29)


def test_day_arithmetic_crosses_month_and_year() -> None:
    assert PlainDate(2020, 12, 31).add(days=1) == PlainDate(2021, 1, 1)
    assert PlainDate(2020, 3, 1).subtract(days=1) == PlainDate(2020, 2, 29)
    assert PlainDate(2020, 1, 15).add(months=-13) == PlainDate(2018, 12, 15)


def test_round_trip_through_string() -> None:
    for d in days_in_range(PlainDate(2019, 12, 1), PlainDate(2021, 3, 1)):
        assert PlainDate.parse(d.to_string()).equals(d)


def test_add_then_subtract_is_identity_unless_clamped() -> None:
    for d in days_in_range(PlainDate(2020, 1, 1), PlainDate(2020, 12, 31)):
        assert d.add(days=40).subtract(days=40) == d
        if d.day <= 28:
            assert d.add(months=1).subtract(months=1) == d
            assert d.add(years=1).subtract(years=1) == d

    # clamped on the way out, so the original day is lost
    assert PlainDate(2020, 1, 31).add(months=1).subtract(months=1) == PlainDate(2020, 1, 29)


@pytest.mark.parametrize(
    "duration",
    [{}, {"days": 1, "months": 1}, {"weeks": 1}, {"days": 1.5}, {"days": True}],
)
def test_rejects_invalid_duration_shapes(duration: dict) -> None:
    with pytest.raises(DurationError):
        PlainDate(2020, 1, 1).add(duration)


def test_rejects_mapping_and_keywords_together() -> None:
    with pytest.raises(DurationError):
        single_unit({"days": 1}, months=1)


def test_compare_and_equals() -> None:
    a = PlainDate(2020, 1, 31)
    b = PlainDate(2020, 2, 1)

    assert PlainDate.compare(a, b) == -1
    assert PlainDate.compare(b, a) == 1
    assert PlainDate.compare(a, PlainDate(2020, 1, 31)) == 0
    assert a.equals(PlainDate(2020, 1, 31))
    assert not a.equals(PlainYearMonth(2020, 1))
    assert sorted([b, a]) == [a, b]


def test_year_month_arithmetic() -> None:
    ym = PlainYearMonth(2020, 11)

    assert ym.add(months=2) == PlainYearMonth(2021, 1)
    assert ym.add({"years": 1, "months": 1}) == PlainYearMonth(2021, 12)
    assert ym.subtract(months=11) == PlainYearMonth(2019, 12)
    assert ym.to_plain_date() == PlainDate(2020, 11, 1)
    assert PlainYearMonth(2020, 2).days_in_month == 29
    assert str(ym) == "2020-11"
    assert PlainYearMonth.parse("2020-11") == ym


def test_year_month_has_no_day_unit() -> None:
    with pytest.raises(DurationError):
        PlainYearMonth(2020, 1).add(days=1)


def test_year_month_compare_accepts_dates() -> None:
    ym = PlainYearMonth(2020, 2)

    assert PlainYearMonth.compare(PlainDate(2020, 2, 29), ym) == 0
    assert PlainYearMonth.compare(ym, PlainDate(2020, 3, 1)) == -1
    assert PlainYearMonth.compare(PlainDate(2021, 1, 1), ym) == 1
    assert PlainDate(2020, 2, 10).to_year_month().equals(ym)
    assert ym.months_until(PlainDate(2019, 12, 5)) == -2
