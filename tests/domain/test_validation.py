"""Tests for budget and payment validation."""

from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

from budget_tracker.domain.errors import ErrorKind, ValidationError
from budget_tracker.domain.models import Budget, Frequency, FrequencyDetails
from budget_tracker.domain.services.validation import (
    validate_budget,
    validate_paid_at,
    validate_payment_amount,
    validate_transaction_cost,
)


def _budget(frequency, **details) -> Budget:
    return Budget(
        id=0,
        description="Internet",
        amount=Decimal("-45"),
        frequency=frequency,
        due_date=date(2026, 1, 5),
        category_id=2,
        frequency_details=FrequencyDetails(**details),
    )


def test_valid_budgets_pass() -> None:
    validate_budget(_budget(Frequency.MONTHLY, day_of_month=5))
    validate_budget(_budget(Frequency.CUSTOM, interval_days=10))
    validate_budget(_budget(Frequency.WEEKLY))


@pytest.mark.parametrize(
    ("budget", "message"),
    [
        (
            _budget(Frequency.MONTHLY),
            "Day of month is required for monthly frequency",
        ),
        (
            _budget(Frequency.MONTHLY, day_of_month=32),
            "Day of month must be between 1 and 31",
        ),
        (
            _budget(Frequency.CUSTOM),
            "Interval days is required for custom frequency",
        ),
        (
            _budget(Frequency.CUSTOM, interval_days=0),
            "Interval days must be a positive number",
        ),
        (_budget("fortnightly"), "Unknown frequency: fortnightly"),
    ],
)
def test_invalid_rules_are_rejected(budget, message) -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate_budget(budget)

    assert message in excinfo.value.message
    assert excinfo.value.kind is ErrorKind.VALIDATION


def test_all_problems_are_reported_together() -> None:
    budget = Budget(
        id=0,
        description="  ",
        amount=Decimal("0"),
        frequency=Frequency.ONCE,
        due_date=date(2026, 1, 5),
        category_id=None,
    )

    with pytest.raises(ValidationError) as excinfo:
        validate_budget(budget)

    assert excinfo.value.message == (
        "Description is required; Amount is required; Category is required"
    )


@pytest.mark.parametrize(
    ("raw", "message"),
    [
        ("", "Amount is required."),
        (None, "Amount is required."),
        ("abc", "Amount must be a valid number."),
        ("nan", "Amount must be a valid number."),
        ("0", "Amount must be greater than 0."),
        ("-5", "Amount must be greater than 0."),
        ("1e12", "Amount is too large."),
    ],
)
def test_payment_amount_errors(raw, message) -> None:
    with pytest.raises(ValidationError, match=message):
        validate_payment_amount(raw)


def test_payment_amount_parses_decimal_text() -> None:
    assert validate_payment_amount(" 12.50 ") == Decimal("12.50")


def test_transaction_cost_rules() -> None:
    assert validate_transaction_cost(None) is None
    assert validate_transaction_cost("") is None
    assert validate_transaction_cost("0") is None
    assert validate_transaction_cost("2.5") == Decimal("2.5")
    with pytest.raises(ValidationError, match="cannot be negative"):
        validate_transaction_cost("-1")
    with pytest.raises(ValidationError, match="valid number"):
        validate_transaction_cost("fee")


def test_paid_at_rules() -> None:
    now = datetime(2026, 3, 11, 12, 0)

    assert validate_paid_at(datetime(2026, 3, 11, 11, 59), now) == datetime(
        2026, 3, 11, 11, 59
    )
    with pytest.raises(ValidationError, match="cannot be in the future"):
        validate_paid_at(datetime(2026, 3, 11, 12, 1), now)
    with pytest.raises(ValidationError, match="is required"):
        validate_paid_at(None, now)


def test_paid_at_compares_aware_and_naive_values() -> None:
    now = datetime(2026, 3, 11, 12, 0)
    earlier = datetime(2026, 1, 1, tzinfo=timezone.utc)

    assert validate_paid_at(earlier, now) is earlier
    with pytest.raises(ValidationError, match="cannot be in the future"):
        validate_paid_at(datetime(2026, 10, 1, tzinfo=timezone.utc), now)
    with pytest.raises(ValidationError, match="cannot be in the future"):
        validate_paid_at(
            datetime(2026, 10, 1), now.replace(tzinfo=timezone.utc)
        )
