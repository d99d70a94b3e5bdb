from __future__ import annotations

from plaindate.model import Date, Month


def test_next_month_rolls_over_year() -> None:
    assert Month(2019, 6).next() == Month(2019, 7)
    assert Month(2019, 12).next() == Month(2020, 1)


def test_prev_month_rolls_back_year() -> None:
    assert Month(2019, 6).prev() == Month(2019, 5)
    assert Month(2019, 1).prev() == Month(2018, 12)
    assert Month(1, 1).prev() == Month(0, 12)


def test_first_and_last_day_of_month() -> None:
    assert Month(2019, 2).first_day() == Date.from_ymd(2019, 2, 1)
    assert Month(2019, 2).last_day() == Date.from_ymd(2019, 2, 28)
    assert Month(2020, 2).last_day() == Date.from_ymd(2020, 2, 29)
    assert Month(2019, 12).last_day() == Date.from_ymd(2019, 12, 31)


def test_month_accessors() -> None:
    month = Month(-3, 11)

    assert month.year == -3
    assert month.number == 11
    assert month.days == 30


def test_get_month_ignores_day() -> None:
    first = Date.from_ymd(2019, 6, 1)
    last = Date.from_ymd(2019, 6, 30)

    assert first.month == last.month
    assert hash(first.month) == hash(last.month)
    assert first.month != Date.from_ymd(2018, 6, 1).month


def test_months_order_by_year_then_number() -> None:
    assert Month(2019, 12) < Month(2020, 1)
    assert Month(2019, 2) > Month(2019, 1)
    assert sorted([Month(2020, 1), Month(2018, 5), Month(2019, 12)]) == [
        Month(2018, 5),
        Month(2019, 12),
        Month(2020, 1),
    ]
