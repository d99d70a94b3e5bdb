"""Public date model surface."""

from __future__ import annotations

from plaindate.model.calendar import is_leap_year, month_length, validate_date_components
from plaindate.model.date import Date, is_greater
from plaindate.model.enums import Weekday
from plaindate.model.month import Month

__all__ = [
    "Date",
    "Month",
    "Weekday",
    "is_greater",
    "is_leap_year",
    "month_length",
    "validate_date_components",
]
