"""Recurrence generator: expand a budget's frequency rule into due-dates.

Every schedule starts at the budget's anchor ``due_date`` and is computed
from that anchor by index rather than by repeated stepping, so a monthly
budget anchored on the 31st returns to the 31st after visiting February and
a yearly Feb 29 anchor comes back in leap years. All arithmetic works on
naive calendar days.
"""

from collections.abc import Iterator
from datetime import date, timedelta

from budget_tracker.domain.constants import MAX_OCCURRENCES_PER_BUDGET
from budget_tracker.domain.models import Budget, Frequency
from budget_tracker.utils.dates import add_months, add_years, to_calendar_day


def due_date_at(budget: Budget, index: int) -> date | None:
    """Return the index-th due-date of a budget.

    Args:
        budget: Budget whose frequency rule is expanded.
        index: Zero-based position in the schedule; 0 is the anchor.

    Returns:
        date | None: The due-date, or None when the rule cannot advance
        (one-off budgets, monthly without a day-of-month target, custom
        without a positive interval).
    """
    anchor = to_calendar_day(budget.due_date)
    if index == 0:
        return anchor
    frequency = Frequency(budget.frequency)
    details = budget.frequency_details
    if frequency is Frequency.DAILY:
        return anchor + timedelta(days=index)
    if frequency is Frequency.WEEKLY:
        return anchor + timedelta(weeks=index)
    if frequency is Frequency.MONTHLY:
        if not details.day_of_month:
            return None
        return add_months(anchor, index, details.day_of_month)
    if frequency is Frequency.YEARLY:
        return add_years(anchor, index)
    if frequency is Frequency.CUSTOM:
        interval = details.interval_days
        if not interval or interval <= 0:
            return None
        return anchor + timedelta(days=interval * index)
    return None


class DueDateSchedule:
    """Lazy, finite and restartable sequence of a budget's due-dates.

    Iterating twice yields the same dates. One-off budgets always yield
    their anchor; recurring budgets stop after the horizon or after
    ``limit`` dates, whichever comes first.
    """

    def __init__(
        self,
        budget: Budget,
        horizon: date | None = None,
        limit: int = MAX_OCCURRENCES_PER_BUDGET,
    ) -> None:
        """Initialize the schedule.

        Args:
            budget: Budget to expand.
            horizon: Last calendar day to include; None means unbounded.
            limit: Maximum number of dates to yield.
        """
        self._budget = budget
        self._horizon = to_calendar_day(horizon) if horizon else None
        self._limit = limit

    def __iter__(self) -> Iterator[date]:
        if self._limit <= 0:
            return
        if Frequency(self._budget.frequency) is Frequency.ONCE:
            yield to_calendar_day(self._budget.due_date)
            return
        for index in range(self._limit):
            current = due_date_at(self._budget, index)
            if current is None:
                return
            if self._horizon is not None and current > self._horizon:
                return
            yield current


def nearest_due_date_on_or_before(budget: Budget, day: date) -> date:
    """Return the last due-date at or before a day.

    The walk is capped like any schedule. Days before the anchor map to
    the anchor itself.

    Args:
        budget: Budget whose schedule is walked.
        day: Calendar day to locate.

    Returns:
        date: Matching due-date of the budget.
    """
    nearest = to_calendar_day(budget.due_date)
    for due_date in DueDateSchedule(budget, horizon=to_calendar_day(day)):
        nearest = due_date
    return nearest


__all__ = ["due_date_at", "DueDateSchedule", "nearest_due_date_on_or_before"]
