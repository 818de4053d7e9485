"""SQLAlchemy-backed ledger store.

Queries are plain ``text()`` statements run on a worker thread, so the
async port never blocks the event loop. Dates are stored as ISO strings and
amounts are bound as decimal strings, which keeps SQLite and PostgreSQL
behaving the same.
"""

import asyncio
from collections.abc import Callable, Mapping
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from budget_tracker.application.ports.database import DatabaseEnginePort
from budget_tracker.application.ports.ledger_store import LedgerStorePort
from budget_tracker.domain.errors import (
    NotFoundError,
    StoreError,
    ValidationError,
)
from budget_tracker.domain.models import (
    Account,
    Bucket,
    Budget,
    Category,
    Frequency,
    FrequencyDetails,
    Recipient,
    Transaction,
)
from budget_tracker.infrastructure.logging.logger import get_app_logger
from budget_tracker.utils.dates import to_calendar_day
from budget_tracker.utils.decimal_utils import coerce_decimal

BUDGET_COLUMNS = (
    "description",
    "amount",
    "frequency",
    "due_date",
    "category_id",
    "day_of_month",
    "day_of_week",
    "interval_days",
    "transaction_cost",
    "recipient_id",
    "account_id",
    "is_active",
    "is_flexible",
    "is_goal",
)

TRANSACTION_COLUMNS = (
    "amount",
    "date",
    "category_id",
    "recipient_id",
    "account_id",
    "description",
    "transaction_cost",
    "transaction_reference",
    "budget_id",
    "occurrence_date",
)

_SCHEMA = {
    "budgets": """
        description TEXT NOT NULL,
        amount NUMERIC(14, 2) NOT NULL,
        frequency VARCHAR(16) NOT NULL,
        due_date VARCHAR(10) NOT NULL,
        category_id INTEGER NOT NULL,
        day_of_month INTEGER,
        day_of_week INTEGER,
        interval_days INTEGER,
        transaction_cost NUMERIC(14, 2),
        recipient_id INTEGER,
        account_id INTEGER,
        is_active BOOLEAN NOT NULL DEFAULT TRUE,
        is_flexible BOOLEAN NOT NULL DEFAULT FALSE,
        is_goal BOOLEAN NOT NULL DEFAULT FALSE,
        created_at VARCHAR(32),
        updated_at VARCHAR(32)
    """,
    "transactions": """
        amount NUMERIC(14, 2) NOT NULL,
        date VARCHAR(32) NOT NULL,
        category_id INTEGER,
        recipient_id INTEGER,
        account_id INTEGER,
        description TEXT NOT NULL DEFAULT '',
        transaction_cost NUMERIC(14, 2),
        transaction_reference TEXT,
        budget_id INTEGER,
        occurrence_date VARCHAR(10)
    """,
    "categories": """
        name TEXT NOT NULL,
        bucket_id INTEGER,
        is_active BOOLEAN NOT NULL DEFAULT TRUE
    """,
    "buckets": """
        name TEXT NOT NULL,
        min_percentage NUMERIC(5, 2) NOT NULL DEFAULT 0,
        max_percentage NUMERIC(5, 2) NOT NULL DEFAULT 100,
        min_fixed_amount NUMERIC(14, 2),
        is_active BOOLEAN NOT NULL DEFAULT TRUE,
        display_order INTEGER,
        exclude_from_reports BOOLEAN NOT NULL DEFAULT FALSE
    """,
    "recipients": """
        name TEXT NOT NULL,
        is_active BOOLEAN NOT NULL DEFAULT TRUE
    """,
    "accounts": """
        name TEXT NOT NULL,
        currency VARCHAR(8),
        is_active BOOLEAN NOT NULL DEFAULT TRUE,
        is_credit BOOLEAN NOT NULL DEFAULT FALSE,
        credit_limit NUMERIC(14, 2)
    """,
}


class SqlAlchemyLedgerStore(LedgerStorePort):
    """Ledger store backed by SQLAlchemy."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing access to the ledger engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    def ensure_schema(self) -> None:
        """Create the ledger tables when they do not exist yet."""
        engine = self._db_port.get_ledger_engine()
        if engine.dialect.name == "postgresql":
            id_column = "id SERIAL PRIMARY KEY"
        else:
            id_column = "id INTEGER PRIMARY KEY"
        with engine.begin() as conn:
            for table, columns in _SCHEMA.items():
                conn.execute(
                    text(
                        f"CREATE TABLE IF NOT EXISTS {table} "
                        f"({id_column}, {columns})"
                    )
                )
        self._logger.debug(f"Ledger schema ready on {engine.url}")

    async def list_budgets(self) -> list[Budget]:
        rows = await self._run(self._fetch_all, "budgets")
        return [self._to_budget(row) for row in rows]

    async def list_transactions(self) -> list[Transaction]:
        rows = await self._run(self._fetch_all, "transactions")
        return [self._to_transaction(row) for row in rows]

    async def list_categories(self) -> list[Category]:
        rows = await self._run(self._fetch_all, "categories")
        return [
            Category(
                id=row.id,
                name=row.name,
                bucket_id=row.bucket_id,
                is_active=bool(row.is_active),
            )
            for row in rows
        ]

    async def list_buckets(self) -> list[Bucket]:
        rows = await self._run(self._fetch_all, "buckets")
        return [
            Bucket(
                id=row.id,
                name=row.name,
                min_percentage=coerce_decimal(row.min_percentage),
                max_percentage=coerce_decimal(row.max_percentage),
                min_fixed_amount=self._optional_decimal(row.min_fixed_amount),
                is_active=bool(row.is_active),
                display_order=row.display_order,
                exclude_from_reports=bool(row.exclude_from_reports),
            )
            for row in rows
        ]

    async def list_recipients(self) -> list[Recipient]:
        rows = await self._run(self._fetch_all, "recipients")
        return [
            Recipient(id=row.id, name=row.name, is_active=bool(row.is_active))
            for row in rows
        ]

    async def list_accounts(self) -> list[Account]:
        rows = await self._run(self._fetch_all, "accounts")
        return [
            Account(
                id=row.id,
                name=row.name,
                currency=row.currency,
                is_active=bool(row.is_active),
                is_credit=bool(row.is_credit),
                credit_limit=self._optional_decimal(row.credit_limit),
            )
            for row in rows
        ]

    async def create_budget(self, fields: Mapping[str, Any]) -> int:
        values = self._prepare("budgets", fields, BUDGET_COLUMNS)
        stamp = datetime.now().isoformat(timespec="seconds")
        values["created_at"] = stamp
        values["updated_at"] = stamp
        return await self._run(self._insert, "budgets", values)

    async def create_transaction(self, fields: Mapping[str, Any]) -> int:
        values = self._prepare("transactions", fields, TRANSACTION_COLUMNS)
        return await self._run(self._insert, "transactions", values)

    async def update_transaction(
        self,
        transaction_id: int,
        fields: Mapping[str, Any],
    ) -> None:
        values = self._prepare("transactions", fields, TRANSACTION_COLUMNS)
        if not values:
            raise ValidationError("No transaction fields to update")
        await self._run(self._update, "transactions", transaction_id, values)

    async def delete_transaction(self, transaction_id: int) -> None:
        await self._run(self._delete, "transactions", transaction_id)

    async def update_budget(
        self,
        budget_id: int,
        fields: Mapping[str, Any],
    ) -> None:
        values = self._prepare("budgets", fields, BUDGET_COLUMNS)
        values["updated_at"] = datetime.now().isoformat(timespec="seconds")
        await self._run(self._update, "budgets", budget_id, values)

    async def delete_budget(self, budget_id: int) -> None:
        await self._run(self._delete, "budgets", budget_id)

    async def _run(self, func: Callable, *args):
        """Run a blocking helper on a worker thread.

        Raises:
            StoreError: When the database rejects the statement.
        """
        try:
            return await asyncio.to_thread(func, *args)
        except SQLAlchemyError as exc:
            self._logger.error(f"Ledger store failure: {exc}")
            raise StoreError(f"Ledger store failure: {exc}") from exc

    def _fetch_all(self, table: str) -> list:
        query = text(f"SELECT * FROM {table} ORDER BY id")
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            return conn.execute(query).all()

    def _insert(self, table: str, values: dict[str, Any]) -> int:
        columns = ", ".join(values)
        params = ", ".join(f":{name}" for name in values)
        query = text(
            f"INSERT INTO {table} ({columns}) VALUES ({params}) RETURNING id"
        )
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            new_id = conn.execute(query, values).scalar_one()
        return int(new_id)

    def _update(
        self,
        table: str,
        row_id: int,
        values: dict[str, Any],
    ) -> None:
        assignments = ", ".join(f"{name} = :{name}" for name in values)
        query = text(f"UPDATE {table} SET {assignments} WHERE id = :row_id")
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            updated = conn.execute(
                query,
                {**values, "row_id": row_id},
            ).rowcount
        if updated == 0:
            raise NotFoundError(f"{self._entity(table)} {row_id} not found")

    def _delete(self, table: str, row_id: int) -> None:
        query = text(f"DELETE FROM {table} WHERE id = :row_id")
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            deleted = conn.execute(query, {"row_id": row_id}).rowcount
        if deleted == 0:
            raise NotFoundError(f"{self._entity(table)} {row_id} not found")

    @staticmethod
    def _entity(table: str) -> str:
        return "Budget" if table == "budgets" else "Transaction"

    @classmethod
    def _prepare(
        cls,
        table: str,
        fields: Mapping[str, Any],
        allowed: tuple[str, ...],
    ) -> dict[str, Any]:
        """Whitelist column names and convert values for binding.

        Raises:
            ValidationError: When a field is not a known column.
        """
        unknown = sorted(set(fields) - set(allowed))
        if unknown:
            raise ValidationError(
                f"Unknown {table} fields: {', '.join(unknown)}"
            )
        return {name: cls._to_db(value) for name, value in fields.items()}

    @staticmethod
    def _to_db(value: Any) -> Any:
        if isinstance(value, Decimal):
            return str(value)
        if isinstance(value, (date, datetime)):
            return value.isoformat()
        if isinstance(value, Frequency):
            return value.value
        return value

    @staticmethod
    def _optional_decimal(value) -> Decimal | None:
        if value is None:
            return None
        return coerce_decimal(value)

    @staticmethod
    def _optional_day(value) -> date | None:
        if value is None:
            return None
        return to_calendar_day(value)

    @staticmethod
    def _to_datetime(value) -> datetime | None:
        if value is None or isinstance(value, datetime):
            return value
        if isinstance(value, date):
            return datetime(value.year, value.month, value.day)
        return datetime.fromisoformat(value)

    @classmethod
    def _to_budget(cls, row) -> Budget:
        return Budget(
            id=row.id,
            description=row.description,
            amount=coerce_decimal(row.amount),
            frequency=Frequency(row.frequency),
            due_date=to_calendar_day(row.due_date),
            category_id=row.category_id,
            frequency_details=FrequencyDetails(
                day_of_month=row.day_of_month,
                day_of_week=row.day_of_week,
                interval_days=row.interval_days,
            ),
            transaction_cost=cls._optional_decimal(row.transaction_cost),
            recipient_id=row.recipient_id,
            account_id=row.account_id,
            is_active=bool(row.is_active),
            is_flexible=bool(row.is_flexible),
            is_goal=bool(row.is_goal),
            created_at=cls._to_datetime(row.created_at),
            updated_at=cls._to_datetime(row.updated_at),
        )

    @classmethod
    def _to_transaction(cls, row) -> Transaction:
        return Transaction(
            id=row.id,
            amount=coerce_decimal(row.amount),
            date=cls._to_datetime(row.date),
            category_id=row.category_id,
            recipient_id=row.recipient_id,
            account_id=row.account_id,
            description=row.description or "",
            transaction_cost=cls._optional_decimal(row.transaction_cost),
            transaction_reference=row.transaction_reference,
            budget_id=row.budget_id,
            occurrence_date=cls._optional_day(row.occurrence_date),
        )


__all__ = [
    "SqlAlchemyLedgerStore",
    "BUDGET_COLUMNS",
    "TRANSACTION_COLUMNS",
]
