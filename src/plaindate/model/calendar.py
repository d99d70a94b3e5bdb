"""Proleptic Gregorian month lengths and component validation."""

from __future__ import annotations

_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    return year % 400 == 0 or (year % 4 == 0 and year % 100 != 0)


def month_length(year: int, month: int) -> int | None:
    """Return the number of days in ``month`` of ``year``, or ``None`` for an unknown month."""

    if not 1 <= month <= 12:
        return None
    if month == 2 and is_leap_year(year):
        return 29
    return _MONTH_LENGTHS[month - 1]


def validate_date_components(year: int, month: int, day: int) -> bool:
    """Check a raw year/month/day triple without correcting anything."""

    length = month_length(year, month)
    return length is not None and 1 <= day <= length


__all__ = ["is_leap_year", "month_length", "validate_date_components"]
