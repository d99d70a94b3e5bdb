"""Calendar month value object and month-level navigation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from plaindate.model.calendar import month_length

if TYPE_CHECKING:
    from plaindate.model.date import Date

# Only reachable if a Month were built around an unknown month number.
_FALLBACK_MONTH_LENGTH = 30


@dataclass(frozen=True, order=True, repr=False)
class Month:
    """A month of a given year. Years may be zero or negative (proleptic)."""

    _year: int
    _number: int

    def __post_init__(self) -> None:
        if not 1 <= self._number <= 12:
            raise ValueError(f"month number must be within 1..12, got {self._number}")

    def __repr__(self) -> str:
        return f"Month({self._year}, {self._number})"

    @property
    def year(self) -> int:
        return self._year

    @property
    def number(self) -> int:
        return self._number

    @property
    def days(self) -> int:
        length = month_length(self._year, self._number)
        if length is None:
            return _FALLBACK_MONTH_LENGTH
        return length

    def next(self) -> Month:
        if self._number == 12:
            return Month(self._year + 1, 1)
        return Month(self._year, self._number + 1)

    def prev(self) -> Month:
        if self._number == 1:
            return Month(self._year - 1, 12)
        return Month(self._year, self._number - 1)

    def first_day(self) -> Date:
        from plaindate.model.date import Date  # noqa: PLC0415

        return Date(self, 1)

    def last_day(self) -> Date:
        from plaindate.model.date import Date  # noqa: PLC0415

        return Date(self, self.days)


__all__ = ["Month"]
