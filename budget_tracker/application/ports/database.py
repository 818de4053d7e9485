"""Database port for the ledger store.

Infrastructure implementations provide the SQLAlchemy engine; adapters that
need a database depend on this protocol rather than on configuration.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the ledger database engine."""

    def get_ledger_engine(self) -> Engine:
        """Get the engine for the ledger database.

        Returns:
            Engine: SQLAlchemy engine connected to the ledger.
        """


__all__ = ["DatabaseEnginePort"]
