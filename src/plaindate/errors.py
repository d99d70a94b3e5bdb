"""Error definitions."""

from __future__ import annotations


class PlaindateError(ValueError):
    """Base class for errors raised by plaindate adapters."""


class InvalidDateStringError(PlaindateError):
    """Raised when text cannot be decoded into a calendar date."""

    def __init__(self, value: str) -> None:
        super().__init__("Invalid date string")
        self.value = value
