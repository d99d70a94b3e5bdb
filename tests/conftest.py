from __future__ import annotations

import pytest

from plaindate.model import Date, Month


def _days_of_year(year: int) -> tuple[Date, ...]:
    days: list[Date] = []
    for number in range(1, 13):
        month = Month(year, number)
        days.extend(Date(month, day) for day in range(1, month.days + 1))
    return tuple(days)


@pytest.fixture(scope="session", params=[2019, 2020, 1900, 2000, 0, -1])
def year_of_days(request: pytest.FixtureRequest) -> tuple[Date, ...]:
    """Every day of a year, covering common, leap, century and non-positive years."""
    return _days_of_year(request.param)
