"""Domain validation helpers for budgets and payments."""

from datetime import datetime
from decimal import Decimal

from budget_tracker.domain.errors import ValidationError
from budget_tracker.domain.models import Budget, Frequency
from budget_tracker.utils.decimal_utils import parse_decimal

MAX_TRANSACTION_AMOUNT = Decimal("999999999.99")
MAX_TRANSACTION_COST = Decimal("999999.99")


def validate_budget(budget: Budget) -> None:
    """Reject budgets whose rule cannot produce a sensible schedule.

    Args:
        budget: Budget about to be created or updated.

    Raises:
        ValidationError: With every problem found, joined by ``; ``.
    """
    problems: list[str] = []
    if not (budget.description or "").strip():
        problems.append("Description is required")
    if budget.amount is None or budget.amount == 0:
        problems.append("Amount is required")
    if not budget.category_id:
        problems.append("Category is required")
    if budget.due_date is None:
        problems.append("Due date is required")

    details = budget.frequency_details
    try:
        frequency = Frequency(budget.frequency)
    except ValueError:
        problems.append(f"Unknown frequency: {budget.frequency}")
        frequency = None
    if frequency is Frequency.MONTHLY:
        day = details.day_of_month
        if day is None:
            problems.append("Day of month is required for monthly frequency")
        elif not 1 <= day <= 31:
            problems.append("Day of month must be between 1 and 31")
    if frequency is Frequency.CUSTOM:
        interval = details.interval_days
        if interval is None:
            problems.append("Interval days is required for custom frequency")
        elif interval < 1:
            problems.append("Interval days must be a positive number")

    if problems:
        raise ValidationError("; ".join(problems))


def validate_payment_amount(raw_amount) -> Decimal:
    """Parse a payment amount, which must be a positive number.

    Raises:
        ValidationError: When missing, non-numeric, non-positive or too large.
    """
    if raw_amount is None or (
        isinstance(raw_amount, str) and not raw_amount.strip()
    ):
        raise ValidationError("Amount is required.")
    amount = parse_decimal(raw_amount)
    if amount is None:
        raise ValidationError("Amount must be a valid number.")
    if amount <= 0:
        raise ValidationError("Amount must be greater than 0.")
    if amount > MAX_TRANSACTION_AMOUNT:
        raise ValidationError("Amount is too large.")
    return amount


def validate_transaction_cost(raw_cost) -> Decimal | None:
    """Parse an optional transaction cost; blank and zero mean no cost.

    Raises:
        ValidationError: When non-numeric, negative or too large.
    """
    if raw_cost is None or (
        isinstance(raw_cost, str) and not raw_cost.strip()
    ):
        return None
    cost = parse_decimal(raw_cost)
    if cost is None:
        raise ValidationError("Transaction cost must be a valid number.")
    if cost < 0:
        raise ValidationError("Transaction cost cannot be negative.")
    if cost > MAX_TRANSACTION_COST:
        raise ValidationError("Transaction cost is too large.")
    if cost == 0:
        return None
    return cost


def validate_paid_at(paid_at: datetime | None, now: datetime) -> datetime:
    """Ensure a payment timestamp is present and not in the future.

    Naive values are taken as local time when the other value carries a
    timezone.

    Raises:
        ValidationError: When missing or later than ``now``.
    """
    if paid_at is None:
        raise ValidationError("Transaction time is required.")
    paid_at_cmp, now_cmp = paid_at, now
    if (paid_at.tzinfo is None) != (now.tzinfo is None):
        paid_at_cmp, now_cmp = paid_at.astimezone(), now.astimezone()
    if paid_at_cmp > now_cmp:
        raise ValidationError("Transaction date cannot be in the future.")
    return paid_at


__all__ = [
    "MAX_TRANSACTION_AMOUNT",
    "MAX_TRANSACTION_COST",
    "validate_budget",
    "validate_payment_amount",
    "validate_transaction_cost",
    "validate_paid_at",
]
