"""Tests for the transaction matcher."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from budget_tracker.domain.models import Transaction
from budget_tracker.domain.services.matching import (
    find_matching_transactions,
    fuzzy_match,
    rank_transactions,
    score_transaction,
)


def _transaction(
    transaction_id: int,
    description: str,
    category_id: int | None = None,
    recipient_id: int | None = None,
    budget_id: int | None = None,
) -> Transaction:
    return Transaction(
        id=transaction_id,
        amount=Decimal("-1000"),
        date=datetime(2026, 3, 1, 8, 0),
        category_id=category_id,
        recipient_id=recipient_id,
        description=description,
        budget_id=budget_id,
        occurrence_date=date(2026, 3, 1) if budget_id else None,
    )


@pytest.mark.parametrize(
    ("pattern", "text", "expected"),
    [
        ("rent", " Rent payment ", True),
        ("Electricity bill", "electricity", True),
        ("Water", "Internet", False),
        ("", "anything", True),
        (None, "anything", True),
        ("Rent", "   ", True),
    ],
)
def test_fuzzy_match(pattern, text, expected) -> None:
    assert fuzzy_match(pattern, text) is expected


def test_scores_are_additive() -> None:
    transaction = _transaction(1, "Rent March", category_id=5, recipient_id=7)

    assert score_transaction(transaction, "Rent", 5, 7) == 175
    assert score_transaction(transaction, "Rent", 5, None) == 75
    assert score_transaction(transaction, "Food", 9, None) == 0


def test_rank_orders_by_score_and_skips_linked() -> None:
    t1 = _transaction(1, "rent March", category_id=5, recipient_id=7)
    t2 = _transaction(2, "Landlord", category_id=9, recipient_id=7)
    t3 = _transaction(3, "Monthly RENT", category_id=3, recipient_id=1)
    t4 = _transaction(
        4, "Rent", category_id=5, recipient_id=7, budget_id=12
    )
    t5 = _transaction(5, "Groceries", category_id=2, recipient_id=2)

    ranked = rank_transactions([t3, t5, t2, t4, t1], "Rent", 5, 7)

    assert [(item.transaction.id, item.score) for item in ranked] == [
        (1, 175),
        (2, 100),
        (3, 25),
    ]
    assert find_matching_transactions(
        [t3, t5, t2, t4, t1], "Rent", 5, 7
    ) == [t1, t2, t3]


def test_equal_scores_keep_input_order() -> None:
    first = _transaction(1, "Airtime", category_id=5)
    second = _transaction(2, "Bundles", category_id=5)

    ranked = rank_transactions([second, first], "Rent", 5)

    assert [item.transaction.id for item in ranked] == [2, 1]


def test_blank_description_counts_as_description_match() -> None:
    blank = _transaction(1, "", category_id=9)

    ranked = rank_transactions([blank], "Rent", 7)

    assert [(item.transaction.id, item.score) for item in ranked] == [
        (1, 25)
    ]
