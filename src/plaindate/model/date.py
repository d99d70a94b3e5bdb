"""Calendar date value object.

A ``Date`` is always a real day of the proleptic Gregorian calendar. There are two
public ways to obtain one, and they deliberately behave differently:

* :meth:`Date.from_ymd` is total. Out-of-range months and days are clamped to the
  nearest valid value.
* :meth:`Date.from_iso8601` is strict. Anything that is not exactly three
  hyphen-separated integers naming a real day yields ``None``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date
from logging import getLogger

from plaindate.model.calendar import validate_date_components
from plaindate.model.enums import Weekday
from plaindate.model.month import Month

log = getLogger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")

# Per-month offsets for the day-of-week congruence; Jan/Feb count against the previous year.
_WEEKDAY_OFFSETS = (0, 3, 2, 5, 0, 3, 5, 1, 4, 6, 2, 4)
_WEEKDAYS = (
    Weekday.SUNDAY,
    Weekday.MONDAY,
    Weekday.TUESDAY,
    Weekday.WEDNESDAY,
    Weekday.THURSDAY,
    Weekday.FRIDAY,
    Weekday.SATURDAY,
)


@dataclass(frozen=True, order=True, repr=False)
class Date:
    """A single calendar day, ordered by (year, month, day)."""

    _month: Month
    _day: int

    def __post_init__(self) -> None:
        if not 1 <= self._day <= self._month.days:
            raise ValueError(f"day {self._day} is outside {self._month!r}")

    @classmethod
    def from_ymd(cls, year: int, month: int, day: int) -> Date:
        """Build a date, clamping month into 1..12 and day into the month's length."""

        clamped = Month(year, min(max(month, 1), 12))
        clamped_day = min(max(day, 1), clamped.days)
        if (clamped.number, clamped_day) != (month, day):
            log.debug(
                "Clamped date components %d/%d/%d to %d/%d/%d",
                year,
                month,
                day,
                year,
                clamped.number,
                clamped_day,
            )
        return cls(clamped, clamped_day)

    @classmethod
    def from_iso8601(cls, text: str) -> Date | None:
        """Parse ``Y-M-D`` text; return ``None`` unless it names a real calendar day.

        The text is split on every hyphen, so a negative year produces more than three
        segments and is rejected.
        """

        segments = text.split("-")
        if len(segments) != 3 or not all(_INTEGER.fullmatch(segment) for segment in segments):
            log.debug("Rejected date string %r: expected three integer segments", text)
            return None

        try:
            year, month, day = (int(segment) for segment in segments)
        except ValueError:
            log.debug("Rejected date string %r: integer segment too long", text)
            return None
        if not validate_date_components(year, month, day):
            log.debug("Rejected date string %r: no such calendar day", text)
            return None
        return cls(Month(year, month), day)

    @classmethod
    def from_date(cls, value: date) -> Date:
        return cls(Month(value.year, value.month), value.day)

    def __repr__(self) -> str:
        return f"Date({self.to_iso8601()!r})"

    def __str__(self) -> str:
        return self.to_iso8601()

    @property
    def year(self) -> int:
        return self._month.year

    @property
    def month(self) -> Month:
        return self._month

    @property
    def day(self) -> int:
        return self._day

    @property
    def weekday(self) -> Weekday:
        number = self._month.number
        year = self.year - 1 if number < 3 else self.year
        index = (
            year + year // 4 - year // 100 + year // 400 + _WEEKDAY_OFFSETS[number - 1] + self._day
        ) % 7
        return _WEEKDAYS[index]

    @property
    def as_date(self) -> date | None:
        """Return the stdlib equivalent, or ``None`` outside the years ``datetime`` supports."""

        if not MINYEAR <= self.year <= MAXYEAR:
            return None
        return date(self.year, self._month.number, self._day)

    def next_day(self) -> Date:
        if self._day == self._month.days:
            return self._month.next().first_day()
        return Date(self._month, self._day + 1)

    def prev_day(self) -> Date:
        if self._day == 1:
            return self._month.prev().last_day()
        return Date(self._month, self._day - 1)

    def to_iso8601(self) -> str:
        return f"{self.year}-{self._month.number:02}-{self._day:02}"


def is_greater(a: Date, b: Date) -> bool:
    """Lexicographic comparison on (year, month, day)."""

    return a > b


__all__ = ["Date", "is_greater"]
