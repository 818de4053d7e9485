"""Classify occurrences into display groups and order them."""

import calendar
from collections.abc import Iterable
from datetime import date, timedelta

from budget_tracker.domain.constants import (
    FIXED_GROUP_ORDER,
    NEXT_WEEK,
    OVERDUE,
    THIS_MONTH,
    THIS_WEEK,
)
from budget_tracker.domain.models import BudgetOccurrence, OccurrenceGroup
from budget_tracker.utils.dates import month_label, parse_month_label


def week_start_date(today: date, week_start: int = calendar.SUNDAY) -> date:
    """Return the first day of the week containing today.

    Args:
        today: Reference day.
        week_start: First weekday, using ``calendar`` numbering
            (``calendar.MONDAY`` is 0, ``calendar.SUNDAY`` is 6).
    """
    offset = (today.weekday() - week_start) % 7
    return today - timedelta(days=offset)


def time_group(
    due_date: date,
    today: date,
    week_start: int = calendar.SUNDAY,
) -> str:
    """Return the display group label for a due-date.

    Args:
        due_date: Calendar day the occurrence falls due.
        today: Reference day.
        week_start: First weekday of the local calendar.

    Returns:
        str: ``Overdue``, ``This Week``, ``Next Week``, ``This Month`` or a
        month label such as ``March 2026``.
    """
    if due_date < today:
        return OVERDUE
    next_week_start = week_start_date(today, week_start) + timedelta(days=7)
    if due_date < next_week_start:
        return THIS_WEEK
    if due_date < next_week_start + timedelta(days=7):
        return NEXT_WEEK
    if (due_date.year, due_date.month) == (today.year, today.month):
        return THIS_MONTH
    return month_label(due_date)


def is_hidden_overdue(occurrence: BudgetOccurrence) -> bool:
    """Return True for overdue occurrences that should not be shown.

    Completed occurrences and occurrences of flexible budgets never appear
    in the Overdue group.
    """
    if occurrence.time_group != OVERDUE:
        return False
    return occurrence.is_completed or occurrence.budget.is_flexible


def occurrence_sort_key(occurrence: BudgetOccurrence) -> tuple:
    """Sort key: due-date, income before expense, amount, description."""
    amount = occurrence.budget.amount
    description = occurrence.budget.description or ""
    return (
        occurrence.due_date,
        0 if amount >= 0 else 1,
        abs(amount),
        description.casefold(),
        description,
    )


def sort_occurrences(
    occurrences: Iterable[BudgetOccurrence],
) -> list[BudgetOccurrence]:
    """Return occurrences in display order; full ties keep input order."""
    return sorted(occurrences, key=occurrence_sort_key)


def _group_sort_key(label: str) -> tuple[int, int, date]:
    if label in FIXED_GROUP_ORDER:
        return (0, FIXED_GROUP_ORDER.index(label), date.min)
    return (1, 0, parse_month_label(label))


def group_occurrences(
    occurrences: Iterable[BudgetOccurrence],
) -> list[OccurrenceGroup]:
    """Group occurrences by time group in display order.

    Args:
        occurrences: Occurrences with their time group already assigned.

    Returns:
        list[OccurrenceGroup]: Fixed groups first, then future months
        chronologically, each sorted with ``occurrence_sort_key``.
    """
    grouped: dict[str, list[BudgetOccurrence]] = {}
    for occurrence in occurrences:
        if is_hidden_overdue(occurrence):
            continue
        grouped.setdefault(occurrence.time_group, []).append(occurrence)

    return [
        OccurrenceGroup(label=label, occurrences=sort_occurrences(members))
        for label, members in sorted(
            grouped.items(),
            key=lambda item: _group_sort_key(item[0]),
        )
    ]


__all__ = [
    "week_start_date",
    "time_group",
    "is_hidden_overdue",
    "occurrence_sort_key",
    "sort_occurrences",
    "group_occurrences",
]
