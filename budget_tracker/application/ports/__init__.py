"""Application ports package."""

from .clock import ClockPort
from .database import DatabaseEnginePort
from .ledger_store import LedgerStorePort

__all__ = ["ClockPort", "DatabaseEnginePort", "LedgerStorePort"]
