"""Occurrence aggregator: join due-dates with linked transactions."""

import calendar
from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from budget_tracker.domain.constants import ACTIVE_GOALS_LIMIT
from budget_tracker.domain.models import (
    Budget,
    BudgetOccurrence,
    PaymentStatus,
    Transaction,
)
from budget_tracker.domain.services.bucketing import time_group
from budget_tracker.domain.services.recurrence import DueDateSchedule
from budget_tracker.utils.dates import to_calendar_day

LinkedIndex = dict[tuple[int, date], list[Transaction]]


def index_linked_transactions(
    transactions: Iterable[Transaction],
) -> LinkedIndex:
    """Index linked transactions by (budget id, occurrence day)."""
    index: LinkedIndex = {}
    for transaction in transactions:
        if (
            transaction.budget_id is None
            or transaction.occurrence_date is None
        ):
            continue
        key = (
            transaction.budget_id,
            to_calendar_day(transaction.occurrence_date),
        )
        index.setdefault(key, []).append(transaction)
    return index


def sum_paid(transactions: Iterable[Transaction]) -> Decimal:
    """Return the signed sum of amounts plus transaction costs."""
    return sum(
        (transaction.net_amount for transaction in transactions),
        Decimal("0"),
    )


def is_target_reached(budget: Budget, amount_paid: Decimal) -> bool:
    """Return True when the paid amount satisfies the budget target.

    Expenses (negative target) are complete once at least the target has
    been paid out; income and goals once at least the target came in.
    """
    target = budget.target_amount
    if target < 0:
        return amount_paid <= target
    return amount_paid >= target


def build_occurrence(
    budget: Budget,
    due_date: date,
    linked: Iterable[Transaction],
    today: date,
    week_start: int = calendar.SUNDAY,
) -> BudgetOccurrence:
    """Materialize one occurrence of a budget."""
    linked_transactions = tuple(linked)
    amount_paid = sum_paid(linked_transactions)
    return BudgetOccurrence(
        budget_id=budget.id,
        budget=budget,
        due_date=due_date,
        amount_paid=amount_paid,
        is_completed=is_target_reached(budget, amount_paid),
        time_group=time_group(due_date, today, week_start),
        linked_transactions=linked_transactions,
    )


def build_occurrences(
    budgets: Iterable[Budget],
    transactions: Iterable[Transaction],
    today: date,
    horizon: date,
    week_start: int = calendar.SUNDAY,
) -> list[BudgetOccurrence]:
    """Generate every occurrence of the active budgets up to a horizon.

    The result is rebuilt from scratch on every call.

    Args:
        budgets: Budgets from the ledger store.
        transactions: Transactions from the ledger store.
        today: Reference day for time grouping.
        horizon: Last calendar day to generate recurring occurrences for.
        week_start: First weekday of the local calendar.

    Returns:
        list[BudgetOccurrence]: Occurrences in budget then due-date order.
    """
    linked_index = index_linked_transactions(transactions)
    occurrences: list[BudgetOccurrence] = []
    for budget in budgets:
        if not budget.is_active:
            continue
        for due_date in DueDateSchedule(budget, horizon=horizon):
            occurrences.append(
                build_occurrence(
                    budget,
                    due_date,
                    linked_index.get((budget.id, due_date), []),
                    today,
                    week_start,
                )
            )
    return occurrences


def remaining_amount(occurrence: BudgetOccurrence) -> Decimal:
    """Return how much is still due, in absolute terms.

    Negative values mean the occurrence was overpaid.
    """
    target = abs(occurrence.budget.target_amount)
    return target - abs(occurrence.amount_paid)


def payment_status(occurrence: BudgetOccurrence) -> PaymentStatus:
    """Classify an occurrence as remaining, completed or overpaid."""
    if not occurrence.is_completed:
        return PaymentStatus.REMAINING
    if remaining_amount(occurrence) < 0:
        return PaymentStatus.OVERPAID
    return PaymentStatus.COMPLETED


def progress_percentage(occurrence: BudgetOccurrence) -> Decimal:
    """Return progress towards the target, capped at 100."""
    target = occurrence.budget.target_amount
    if target == 0:
        return Decimal("0")
    ratio = occurrence.amount_paid / target * Decimal("100")
    if target < 0:
        ratio = abs(ratio)
    return min(Decimal("100"), ratio)


def active_goals(
    occurrences: Iterable[BudgetOccurrence],
    limit: int = ACTIVE_GOALS_LIMIT,
) -> list[BudgetOccurrence]:
    """Return the first incomplete goal occurrences."""
    goals = [
        occurrence
        for occurrence in occurrences
        if occurrence.budget.is_goal and not occurrence.is_completed
    ]
    return goals[:limit]


def most_recent_completed_goal(
    occurrences: Iterable[BudgetOccurrence],
) -> BudgetOccurrence | None:
    """Return the completed goal occurrence with the latest due-date."""
    completed = [
        occurrence
        for occurrence in occurrences
        if occurrence.budget.is_goal and occurrence.is_completed
    ]
    if not completed:
        return None
    return max(completed, key=lambda occurrence: occurrence.due_date)


__all__ = [
    "index_linked_transactions",
    "sum_paid",
    "is_target_reached",
    "build_occurrence",
    "build_occurrences",
    "remaining_amount",
    "payment_status",
    "progress_percentage",
    "active_goals",
    "most_recent_completed_goal",
]
