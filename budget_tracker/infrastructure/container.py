"""Composition root for wiring infrastructure adapters."""

from budget_tracker.application.ports.clock import ClockPort
from budget_tracker.application.ports.database import DatabaseEnginePort
from budget_tracker.application.ports.ledger_store import LedgerStorePort
from budget_tracker.infrastructure.clock import SystemClock
from budget_tracker.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from budget_tracker.infrastructure.ledger_repository import (
    SqlAlchemyLedgerStore,
)
from budget_tracker.infrastructure.logging.logger import get_app_logger
from budget_tracker.infrastructure.settings import LedgerSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_ledger_store(
    db_port: DatabaseEnginePort | None = None,
) -> LedgerStorePort:
    """Return the ledger store with its schema in place."""
    resolved_db = db_port or build_database_adapter()
    store = SqlAlchemyLedgerStore(resolved_db, logger=get_app_logger())
    store.ensure_schema()
    return store


def build_clock() -> ClockPort:
    """Return the wall clock."""
    return SystemClock()


def build_settings() -> LedgerSettings:
    """Return settings read from the environment."""
    return LedgerSettings.from_env()


__all__ = [
    "build_database_adapter",
    "build_ledger_store",
    "build_clock",
    "build_settings",
]
