"""Shared read helpers for budget use cases."""

import asyncio
from collections.abc import Iterable
from datetime import date, timedelta

from budget_tracker.application.ports.ledger_store import LedgerStorePort
from budget_tracker.domain.errors import NotFoundError, ValidationError
from budget_tracker.domain.models import Budget, LedgerSnapshot, Transaction
from budget_tracker.domain.services.recurrence import DueDateSchedule
from budget_tracker.utils.dates import add_years, to_calendar_day


async def load_ledger_snapshot(store: LedgerStorePort) -> LedgerSnapshot:
    """Read every ledger collection concurrently.

    Args:
        store: Ledger store port.

    Returns:
        LedgerSnapshot: Collections as returned by the store.
    """
    (
        budgets,
        transactions,
        categories,
        buckets,
        recipients,
        accounts,
    ) = await asyncio.gather(
        store.list_budgets(),
        store.list_transactions(),
        store.list_categories(),
        store.list_buckets(),
        store.list_recipients(),
        store.list_accounts(),
    )
    return LedgerSnapshot(
        budgets=budgets,
        transactions=transactions,
        categories=categories,
        buckets=buckets,
        recipients=recipients,
        accounts=accounts,
    )


async def load_budgets_and_transactions(
    store: LedgerStorePort,
) -> tuple[list[Budget], list[Transaction]]:
    """Read budgets and transactions concurrently."""
    budgets, transactions = await asyncio.gather(
        store.list_budgets(),
        store.list_transactions(),
    )
    return budgets, transactions


def resolve_horizon(today: date, horizon_days: int | None = None) -> date:
    """Return the last day to generate occurrences for.

    Args:
        today: Reference day.
        horizon_days: Optional explicit horizon length in days.

    Returns:
        date: One calendar year after today unless overridden.
    """
    if horizon_days is None:
        return add_years(today, 1)
    return today + timedelta(days=horizon_days)


def find_budget(budgets: Iterable[Budget], budget_id: int) -> Budget:
    """Return the budget with the given id.

    Raises:
        NotFoundError: When no budget has that id.
    """
    for budget in budgets:
        if budget.id == budget_id:
            return budget
    raise NotFoundError(f"Budget {budget_id} not found")


def parse_occurrence_day(value) -> date:
    """Return the calendar day of an occurrence date given by a caller.

    Raises:
        ValidationError: When the value is not a date or ISO date string.
    """
    try:
        day = to_calendar_day(value)
    except ValueError:
        day = None
    if not isinstance(day, date):
        raise ValidationError(
            f"Occurrence date must be an ISO date, got {value!r}"
        )
    return day


def ensure_due_date(budget: Budget, occurrence_day: date) -> None:
    """Reject days that are not a due-date of the budget.

    Raises:
        ValidationError: When the schedule never lands on the day.
    """
    if occurrence_day not in DueDateSchedule(budget, horizon=occurrence_day):
        raise ValidationError(
            f"{occurrence_day.isoformat()} is not a due date of budget "
            f"{budget.id}"
        )


__all__ = [
    "load_ledger_snapshot",
    "load_budgets_and_transactions",
    "resolve_horizon",
    "find_budget",
    "parse_occurrence_day",
    "ensure_due_date",
]
