"""Inclusive ranges of consecutive calendar days."""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from plaindate.model import Date


def date_range(start: Date, end: Date) -> list[Date]:
    """Return every day between ``start`` and ``end`` inclusive, in ascending order.

    The bounds may be given in either order. The sequence is built by walking back
    from the later bound one day at a time.
    """

    if start > end:
        start, end = end, start

    days: deque[Date] = deque([end])
    current = end
    while current != start:
        current = current.prev_day()
        days.appendleft(current)
    return list(days)


__all__ = ["date_range"]
