"""Tests for the backfill_occurrence_dates_cli adapter."""

from unittest.mock import AsyncMock, MagicMock

from budget_tracker.adapters import backfill_occurrence_dates_cli as cli
from budget_tracker.application.use_cases import BackfillResult
from budget_tracker.domain.errors import OperationResult, StoreError


def _patch(monkeypatch, result) -> MagicMock:
    use_case = MagicMock()
    use_case.execute = AsyncMock(return_value=result)
    factory = MagicMock(return_value=use_case)
    monkeypatch.setattr(cli, "build_ledger_store", lambda: "store")
    monkeypatch.setattr(cli, "get_app_logger", lambda: "logger")
    monkeypatch.setattr(cli, "BackfillOccurrenceDatesUseCase", factory)
    return factory


def test_main_prints_backfill_summary(monkeypatch, capsys) -> None:
    factory = _patch(
        monkeypatch,
        OperationResult.success(
            BackfillResult(scanned=4, updated=3, skipped=1)
        ),
    )

    assert cli.main() == 0

    factory.assert_called_once_with("store", logger="logger")
    assert capsys.readouterr().out.strip() == (
        "Backfilled 3 of 4 linked transactions (1 skipped, 0 failed)."
    )


def test_main_exits_non_zero_on_failures(monkeypatch, capsys) -> None:
    _patch(
        monkeypatch,
        OperationResult.success(
            BackfillResult(scanned=2, updated=1, skipped=0, failed_ids=[9])
        ),
    )

    assert cli.main() == 1
    assert "1 failed" in capsys.readouterr().out


def test_main_reports_read_errors(monkeypatch, capsys) -> None:
    _patch(
        monkeypatch,
        OperationResult.failure(StoreError("database is locked")),
    )

    assert cli.main() == 1
    assert "Backfill failed: database is locked" in capsys.readouterr().out
