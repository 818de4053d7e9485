"""Period boundaries and budgeted-versus-paid totals."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from budget_tracker.domain.models import (
    BudgetOccurrence,
    PeriodBoundaries,
    PeriodKind,
    PeriodSummary,
)
from budget_tracker.utils.dates import (
    add_months,
    add_years,
    clamp_day,
    month_label,
)


def period_boundaries(kind: PeriodKind, today: date) -> PeriodBoundaries:
    """Return the inclusive calendar range of the period containing today.

    Args:
        kind: Month, quarter or year.
        today: Reference day.

    Returns:
        PeriodBoundaries: Start, end and display label of the period.
    """
    kind = PeriodKind(kind)
    year = today.year
    if kind is PeriodKind.MONTH:
        start = date(year, today.month, 1)
        end = clamp_day(year, today.month, 31)
        return PeriodBoundaries(start=start, end=end, label=month_label(today))
    if kind is PeriodKind.QUARTER:
        quarter = (today.month - 1) // 3
        start = date(year, quarter * 3 + 1, 1)
        end = clamp_day(year, quarter * 3 + 3, 31)
        return PeriodBoundaries(
            start=start,
            end=end,
            label=f"Q{quarter + 1} {year}",
        )
    return PeriodBoundaries(
        start=date(year, 1, 1),
        end=date(year, 12, 31),
        label=str(year),
    )


def shift_period(kind: PeriodKind, anchor: date, steps: int = 1) -> date:
    """Move an anchor day by whole periods (negative steps go back)."""
    kind = PeriodKind(kind)
    if kind is PeriodKind.MONTH:
        return add_months(anchor, steps)
    if kind is PeriodKind.QUARTER:
        return add_months(anchor, steps * 3)
    return add_years(anchor, steps)


def summarize_period(
    occurrences: Iterable[BudgetOccurrence],
    boundaries: PeriodBoundaries,
) -> PeriodSummary:
    """Sum budget targets and payments of occurrences due in a period.

    Args:
        occurrences: Occurrences generated for the full horizon.
        boundaries: Inclusive period range.

    Returns:
        PeriodSummary: Expense and income totals, budgeted and paid.
    """
    total_expense = Decimal("0")
    total_income = Decimal("0")
    expense_paid = Decimal("0")
    income_paid = Decimal("0")
    for occurrence in occurrences:
        if not boundaries.contains(occurrence.due_date):
            continue
        target = occurrence.budget.target_amount
        if target < 0:
            total_expense += abs(target)
            expense_paid += abs(occurrence.amount_paid)
        else:
            total_income += target
            income_paid += occurrence.amount_paid
    return PeriodSummary(
        boundaries=boundaries,
        total_expense=total_expense,
        total_income=total_income,
        expense_paid=expense_paid,
        income_paid=income_paid,
    )


__all__ = ["period_boundaries", "shift_period", "summarize_period"]
