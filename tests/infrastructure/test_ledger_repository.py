"""Tests for the SQLAlchemy ledger store against a SQLite file."""

import asyncio
from datetime import date, datetime
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine, text

from budget_tracker.domain.errors import (
    NotFoundError,
    StoreError,
    ValidationError,
)
from budget_tracker.domain.models import Frequency
from budget_tracker.infrastructure.ledger_repository import (
    SqlAlchemyLedgerStore,
)


@pytest.fixture
def engine(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'ledger.db'}")
    yield engine
    engine.dispose()


@pytest.fixture
def store(engine):
    db_port = MagicMock()
    db_port.get_ledger_engine.return_value = engine
    ledger_store = SqlAlchemyLedgerStore(db_port, logger=MagicMock())
    ledger_store.ensure_schema()
    return ledger_store


def _budget_fields(**overrides):
    fields = {
        "description": "Rent",
        "amount": Decimal("-1200.50"),
        "frequency": Frequency.MONTHLY,
        "due_date": date(2026, 1, 31),
        "category_id": 3,
        "day_of_month": 31,
        "transaction_cost": Decimal("-1.25"),
        "is_active": True,
        "is_flexible": False,
        "is_goal": False,
    }
    fields.update(overrides)
    return fields


def test_budget_round_trip(store) -> None:
    budget_id = asyncio.run(store.create_budget(_budget_fields()))

    (budget,) = asyncio.run(store.list_budgets())

    assert budget.id == budget_id
    assert budget.amount == Decimal("-1200.50")
    assert budget.transaction_cost == Decimal("-1.25")
    assert budget.frequency is Frequency.MONTHLY
    assert budget.due_date == date(2026, 1, 31)
    assert budget.frequency_details.day_of_month == 31
    assert budget.frequency_details.interval_days is None
    assert budget.is_active is True
    assert isinstance(budget.created_at, datetime)


def test_update_and_delete_budget(store) -> None:
    budget_id = asyncio.run(store.create_budget(_budget_fields()))

    asyncio.run(store.update_budget(budget_id, {"is_active": False}))
    (budget,) = asyncio.run(store.list_budgets())
    assert budget.is_active is False

    asyncio.run(store.delete_budget(budget_id))
    assert asyncio.run(store.list_budgets()) == []
    with pytest.raises(NotFoundError, match=f"Budget {budget_id}"):
        asyncio.run(store.delete_budget(budget_id))


def test_transaction_link_round_trip(store) -> None:
    transaction_id = asyncio.run(
        store.create_transaction(
            {
                "amount": Decimal("-600"),
                "date": datetime(2026, 2, 27, 18, 5),
                "description": "Rent part 1",
                "category_id": 3,
            }
        )
    )

    asyncio.run(
        store.update_transaction(
            transaction_id,
            {"budget_id": 1, "occurrence_date": date(2026, 2, 28)},
        )
    )
    (transaction,) = asyncio.run(store.list_transactions())

    assert transaction.amount == Decimal("-600")
    assert transaction.date == datetime(2026, 2, 27, 18, 5)
    assert transaction.budget_id == 1
    assert transaction.occurrence_date == date(2026, 2, 28)
    assert transaction.transaction_cost is None


def test_update_rejects_unknown_fields_and_missing_rows(store) -> None:
    with pytest.raises(ValidationError, match="Unknown transactions"):
        asyncio.run(store.update_transaction(1, {"colour": "red"}))
    with pytest.raises(NotFoundError, match="Transaction 5 not found"):
        asyncio.run(store.update_transaction(5, {"description": "x"}))


def test_reference_collections(store, engine) -> None:
    with engine.begin() as conn:
        conn.execute(
            text(
                "INSERT INTO buckets (name, min_percentage, max_percentage, "
                "display_order, exclude_from_reports) "
                "VALUES ('Needs', 40, 60, 1, 0)"
            )
        )
        conn.execute(
            text("INSERT INTO categories (name, bucket_id) VALUES ('Rent', 1)")
        )
        conn.execute(text("INSERT INTO recipients (name) VALUES ('Landlord')"))
        conn.execute(
            text(
                "INSERT INTO accounts (name, currency, is_credit, "
                "credit_limit) VALUES ('Card', 'KES', 1, 5000)"
            )
        )

    (bucket,) = asyncio.run(store.list_buckets())
    (category,) = asyncio.run(store.list_categories())
    (recipient,) = asyncio.run(store.list_recipients())
    (account,) = asyncio.run(store.list_accounts())

    assert bucket.min_percentage == Decimal("40")
    assert bucket.min_fixed_amount is None
    assert bucket.exclude_from_reports is False
    assert category.bucket_id == 1
    assert recipient.name == "Landlord"
    assert account.is_credit is True
    assert account.credit_limit == Decimal("5000")


def test_database_errors_become_store_errors(engine) -> None:
    db_port = MagicMock()
    db_port.get_ledger_engine.return_value = engine
    store = SqlAlchemyLedgerStore(db_port, logger=MagicMock())

    with pytest.raises(StoreError, match="Ledger store failure"):
        asyncio.run(store.list_budgets())
