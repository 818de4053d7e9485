"""Domain models for ledger records owned by the store."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum


class Frequency(str, Enum):
    """How often a budget line item falls due."""

    ONCE = "once"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    CUSTOM = "custom"


@dataclass(frozen=True)
class FrequencyDetails:
    """Frequency parameters.

    Attributes:
        day_of_month: Target day (1-31) for monthly budgets.
        day_of_week: Informational weekday (0 = Sunday) for weekly budgets.
        interval_days: Step in days for custom budgets.
    """

    day_of_month: int | None = None
    day_of_week: int | None = None
    interval_days: int | None = None


@dataclass(frozen=True)
class Budget:
    """Recurring or one-off budget line item (bill, income or goal)."""

    id: int
    description: str
    amount: Decimal
    frequency: Frequency
    due_date: date
    category_id: int
    frequency_details: FrequencyDetails = field(
        default_factory=FrequencyDetails
    )
    transaction_cost: Decimal | None = None
    recipient_id: int | None = None
    account_id: int | None = None
    is_active: bool = True
    is_flexible: bool = False
    is_goal: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def target_amount(self) -> Decimal:
        """Return amount plus transaction cost."""
        return self.amount + (self.transaction_cost or Decimal("0"))

    @property
    def is_expense(self) -> bool:
        """Return True when the budget target is negative."""
        return self.target_amount < 0


@dataclass(frozen=True)
class Transaction:
    """Money movement, optionally linked to one budget occurrence."""

    id: int
    amount: Decimal
    date: datetime
    category_id: int | None = None
    recipient_id: int | None = None
    account_id: int | None = None
    description: str = ""
    transaction_cost: Decimal | None = None
    transaction_reference: str | None = None
    budget_id: int | None = None
    occurrence_date: date | None = None

    @property
    def net_amount(self) -> Decimal:
        """Return amount plus transaction cost."""
        return self.amount + (self.transaction_cost or Decimal("0"))

    @property
    def is_linked(self) -> bool:
        """Return True when the transaction is linked to a budget."""
        return self.budget_id is not None


@dataclass(frozen=True)
class Category:
    """Spending category, grouped under a bucket."""

    id: int
    name: str
    bucket_id: int | None = None
    is_active: bool = True


@dataclass(frozen=True)
class Bucket:
    """Allocation bucket with target share of income."""

    id: int
    name: str
    min_percentage: Decimal = Decimal("0")
    max_percentage: Decimal = Decimal("100")
    min_fixed_amount: Decimal | None = None
    is_active: bool = True
    display_order: int | None = None
    exclude_from_reports: bool = False


@dataclass(frozen=True)
class Recipient:
    """Payee or payer."""

    id: int
    name: str
    is_active: bool = True


@dataclass(frozen=True)
class Account:
    """Money account (bank, mobile wallet, credit line)."""

    id: int
    name: str
    currency: str | None = None
    is_active: bool = True
    is_credit: bool = False
    credit_limit: Decimal | None = None


@dataclass(frozen=True)
class LedgerSnapshot:
    """All ledger collections read in one pass."""

    budgets: list[Budget]
    transactions: list[Transaction]
    categories: list[Category] = field(default_factory=list)
    buckets: list[Bucket] = field(default_factory=list)
    recipients: list[Recipient] = field(default_factory=list)
    accounts: list[Account] = field(default_factory=list)


__all__ = [
    "Frequency",
    "FrequencyDetails",
    "Budget",
    "Transaction",
    "Category",
    "Bucket",
    "Recipient",
    "Account",
    "LedgerSnapshot",
]
