"""Domain models for derived budget occurrences."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum

from budget_tracker.domain.models.ledger import Budget, Transaction


class PaymentStatus(str, Enum):
    """Progress of an occurrence towards its target."""

    REMAINING = "remaining"
    COMPLETED = "completed"
    OVERPAID = "overpaid"


@dataclass(frozen=True)
class BudgetOccurrence:
    """One concrete scheduled instance of a budget.

    Attributes:
        budget_id: Identifier of the owning budget.
        budget: The owning budget record.
        due_date: Calendar day the occurrence falls due.
        amount_paid: Signed sum of linked transaction amounts and costs.
        is_completed: Whether the paid amount reached the target.
        time_group: Display bucket label.
        linked_transactions: Transactions summed into amount_paid.
    """

    budget_id: int
    budget: Budget
    due_date: date
    amount_paid: Decimal
    is_completed: bool
    time_group: str
    linked_transactions: tuple[Transaction, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class OccurrenceGroup:
    """Ordered occurrences sharing a display bucket."""

    label: str
    occurrences: list[BudgetOccurrence]


@dataclass(frozen=True)
class BudgetOverview:
    """Everything a budget page needs for one render cycle."""

    occurrences: list[BudgetOccurrence]
    groups: list[OccurrenceGroup]
    goals: list[BudgetOccurrence]
    recent_completed_goal: BudgetOccurrence | None


__all__ = [
    "PaymentStatus",
    "BudgetOccurrence",
    "OccurrenceGroup",
    "BudgetOverview",
]
