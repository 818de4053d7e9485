"""Port for reading the current date and time."""

from datetime import date, datetime
from typing import Protocol


class ClockPort(Protocol):
    """Port exposing "now" so callers can pin time in tests."""

    def today(self) -> date:
        """Return the current local calendar day."""

    def now(self) -> datetime:
        """Return the current local date and time."""


__all__ = ["ClockPort"]
