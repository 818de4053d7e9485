"""Database infrastructure for the ledger store.

This module creates and reuses the SQLAlchemy engine connected to the ledger
database. The URL comes from ``LedgerSettings``.
"""

from pathlib import Path
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import QueuePool

from budget_tracker.application.ports.database import DatabaseEnginePort
from budget_tracker.infrastructure.settings import LedgerSettings


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    SQLite file databases get their parent directory created first.

    Args:
        db_url: Fully qualified database URL.

    Returns:
        Engine: A SQLAlchemy engine with a small connection pool and health
        checks enabled.
    """
    url = make_url(db_url)
    if url.get_backend_name() == "sqlite" and url.database not in (
        None,
        "",
        ":memory:",
    ):
        Path(url.database).expanduser().parent.mkdir(
            parents=True,
            exist_ok=True,
        )
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_ledger_engine: Optional[Engine] = None


def get_ledger_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the ledger database.

    Returns:
        Engine: Lazily initialized engine.
    """
    global _ledger_engine
    if _ledger_engine is None:
        settings = LedgerSettings.from_env()
        _ledger_engine = _create_engine(settings.database_url)
    return _ledger_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine."""

    def get_ledger_engine(self) -> Engine:
        """Get the engine for the ledger database.

        Returns:
            Engine: SQLAlchemy engine connected to the ledger.
        """
        return get_ledger_engine()


__all__ = ["get_ledger_engine", "SqlAlchemyDatabaseEngineAdapter"]
