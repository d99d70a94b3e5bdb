from __future__ import annotations

from importlib import metadata

from plaindate.adapters.schema import IsoDate, decode, encode
from plaindate.common import configure_logging
from plaindate.errors import InvalidDateStringError, PlaindateError
from plaindate.model import (
    Date,
    Month,
    Weekday,
    is_greater,
    is_leap_year,
    month_length,
    validate_date_components,
)
from plaindate.ranges import date_range

try:
    __version__ = metadata.version("plaindate")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0+local"

__all__ = [
    "Date",
    "InvalidDateStringError",
    "IsoDate",
    "Month",
    "PlaindateError",
    "Weekday",
    "__version__",
    "configure_logging",
    "date_range",
    "decode",
    "encode",
    "is_greater",
    "is_leap_year",
    "month_length",
    "validate_date_components",
]
