"""Tests for period boundaries and budgeted-versus-paid totals."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from budget_tracker.domain.models import (
    Budget,
    Frequency,
    PeriodKind,
    Transaction,
)
from budget_tracker.domain.services.occurrences import build_occurrences
from budget_tracker.domain.services.period_summary import (
    period_boundaries,
    shift_period,
    summarize_period,
)


def _once(budget_id: int, amount: str, due_date: date) -> Budget:
    return Budget(
        id=budget_id,
        description=f"Budget {budget_id}",
        amount=Decimal(amount),
        frequency=Frequency.ONCE,
        due_date=due_date,
        category_id=1,
    )


def _linked(
    transaction_id: int,
    budget_id: int,
    amount: str,
    due_date: date,
) -> Transaction:
    return Transaction(
        id=transaction_id,
        amount=Decimal(amount),
        date=datetime(due_date.year, due_date.month, due_date.day),
        budget_id=budget_id,
        occurrence_date=due_date,
    )


@pytest.mark.parametrize(
    ("kind", "today", "start", "end", "label"),
    [
        (
            PeriodKind.MONTH,
            date(2026, 2, 10),
            date(2026, 2, 1),
            date(2026, 2, 28),
            "February 2026",
        ),
        (
            PeriodKind.QUARTER,
            date(2026, 11, 5),
            date(2026, 10, 1),
            date(2026, 12, 31),
            "Q4 2026",
        ),
        (
            PeriodKind.QUARTER,
            date(2026, 5, 31),
            date(2026, 4, 1),
            date(2026, 6, 30),
            "Q2 2026",
        ),
        (
            PeriodKind.YEAR,
            date(2026, 7, 4),
            date(2026, 1, 1),
            date(2026, 12, 31),
            "2026",
        ),
    ],
)
def test_period_boundaries(kind, today, start, end, label) -> None:
    boundaries = period_boundaries(kind, today)

    assert (boundaries.start, boundaries.end) == (start, end)
    assert boundaries.label == label


def test_shift_period_moves_by_whole_periods() -> None:
    assert shift_period(PeriodKind.MONTH, date(2026, 1, 31)) == date(
        2026, 2, 28
    )
    assert shift_period(PeriodKind.QUARTER, date(2026, 2, 10), -1) == date(
        2025, 11, 10
    )
    assert shift_period(PeriodKind.YEAR, date(2024, 2, 29)) == date(
        2025, 2, 28
    )


def test_quarter_summary_totals_budgeted_and_paid() -> None:
    """Income and expense are split and paid amounts are absolute."""
    income = _once(1, "3000", date(2026, 2, 1))
    expense = _once(2, "-1200", date(2026, 3, 5))
    outside = _once(3, "-800", date(2026, 4, 1))
    transactions = [
        _linked(10, 1, "1000", date(2026, 2, 1)),
        _linked(11, 2, "-1200", date(2026, 3, 5)),
        _linked(12, 3, "-800", date(2026, 4, 1)),
    ]
    occurrences = build_occurrences(
        [income, expense, outside],
        transactions,
        today=date(2026, 2, 10),
        horizon=date(2026, 12, 31),
    )

    summary = summarize_period(
        occurrences,
        period_boundaries(PeriodKind.QUARTER, date(2026, 2, 10)),
    )

    assert summary.total_income == Decimal("3000")
    assert summary.income_paid == Decimal("1000")
    assert summary.total_expense == Decimal("1200")
    assert summary.expense_paid == Decimal("1200")
    assert summary.net_budgeted == Decimal("1800")
    assert summary.net_paid == Decimal("-200")


def test_period_edges_are_inclusive() -> None:
    first = _once(1, "-10", date(2026, 3, 1))
    last = _once(2, "-20", date(2026, 3, 31))
    occurrences = build_occurrences(
        [first, last],
        [],
        today=date(2026, 3, 1),
        horizon=date(2026, 12, 31),
    )

    summary = summarize_period(
        occurrences,
        period_boundaries(PeriodKind.MONTH, date(2026, 3, 15)),
    )

    assert summary.total_expense == Decimal("30")
    assert summary.expense_paid == Decimal("0")
