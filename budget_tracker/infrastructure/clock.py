"""System clock adapter."""

from datetime import date, datetime

from budget_tracker.application.ports.clock import ClockPort


class SystemClock(ClockPort):
    """Clock reading the local wall time."""

    def today(self) -> date:
        return date.today()

    def now(self) -> datetime:
        return datetime.now()


__all__ = ["SystemClock"]
