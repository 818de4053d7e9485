"""Domain models for period summaries and reports."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum


class PeriodKind(str, Enum):
    """Length of a summary period."""

    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"


class BucketStatus(str, Enum):
    """How a bucket's spending compares with its allocation."""

    ON_TARGET = "on-target"
    BELOW_MIN_FIXED = "below-min-fixed"
    BELOW_MIN_PERCENTAGE = "below-min-percentage"
    ABOVE_MAX = "above-max"


@dataclass(frozen=True)
class PeriodBoundaries:
    """Inclusive calendar range of a period."""

    start: date
    end: date
    label: str

    def contains(self, value: date) -> bool:
        """Return True when the day falls within the period."""
        return self.start <= value <= self.end


@dataclass(frozen=True)
class PeriodSummary:
    """Budgeted versus paid totals for a period.

    Attributes:
        boundaries: Period the totals cover.
        total_expense: Absolute sum of expense targets.
        total_income: Sum of income targets.
        expense_paid: Absolute sum paid against expenses.
        income_paid: Sum received against income.
    """

    boundaries: PeriodBoundaries
    total_expense: Decimal
    total_income: Decimal
    expense_paid: Decimal
    income_paid: Decimal

    @property
    def net_budgeted(self) -> Decimal:
        """Return total_income minus total_expense."""
        return self.total_income - self.total_expense

    @property
    def net_paid(self) -> Decimal:
        """Return income_paid minus expense_paid."""
        return self.income_paid - self.expense_paid


@dataclass(frozen=True)
class BucketReport:
    """Spending of one bucket within a period."""

    bucket_id: int
    bucket_name: str
    total_amount: Decimal
    income: Decimal
    expense: Decimal
    actual_percentage: Decimal
    min_percentage: Decimal
    max_percentage: Decimal
    min_fixed_amount: Decimal | None
    status: BucketStatus


@dataclass(frozen=True)
class PeriodReport:
    """Transaction totals for a period, split by bucket."""

    boundaries: PeriodBoundaries
    total_income: Decimal
    total_expense: Decimal
    bucket_reports: list[BucketReport]

    @property
    def net_total(self) -> Decimal:
        """Return income plus (signed) expense."""
        return self.total_income + self.total_expense


__all__ = [
    "PeriodKind",
    "BucketStatus",
    "PeriodBoundaries",
    "PeriodSummary",
    "BucketReport",
    "PeriodReport",
]
