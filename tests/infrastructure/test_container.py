"""Tests for the composition root."""

from unittest.mock import MagicMock

from budget_tracker.infrastructure import container
from budget_tracker.infrastructure.clock import SystemClock


def test_build_ledger_store_prepares_schema(monkeypatch):
    store = MagicMock()
    captured = {}

    def fake_store(db_port, logger=None):
        captured["db_port"] = db_port
        return store

    monkeypatch.setattr(container, "SqlAlchemyLedgerStore", fake_store)
    monkeypatch.setattr(container, "get_app_logger", MagicMock)
    db_port = object()

    assert container.build_ledger_store(db_port) is store
    assert captured["db_port"] is db_port
    store.ensure_schema.assert_called_once_with()


def test_build_ledger_store_defaults_to_engine_adapter(monkeypatch):
    monkeypatch.setattr(container, "SqlAlchemyLedgerStore", MagicMock())
    monkeypatch.setattr(container, "get_app_logger", MagicMock)

    container.build_ledger_store()

    (db_port,), _ = container.SqlAlchemyLedgerStore.call_args
    assert isinstance(db_port, container.SqlAlchemyDatabaseEngineAdapter)


def test_build_clock_returns_system_clock():
    assert isinstance(container.build_clock(), SystemClock)
