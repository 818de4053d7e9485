"""Use case to total budgeted versus paid amounts for a period."""

from datetime import date

from budget_tracker.application.ports.clock import ClockPort
from budget_tracker.application.ports.ledger_store import LedgerStorePort
from budget_tracker.application.use_cases.ledger_reads import (
    load_budgets_and_transactions,
    resolve_horizon,
)
from budget_tracker.domain.errors import LedgerError, OperationResult
from budget_tracker.domain.models import PeriodKind, PeriodSummary
from budget_tracker.domain.services.occurrences import build_occurrences
from budget_tracker.domain.services.period_summary import (
    period_boundaries,
    summarize_period,
)
from budget_tracker.infrastructure.logging.logger import get_app_logger


class GetPeriodSummaryUseCase:
    """Compute month, quarter or year totals from fresh occurrences."""

    def __init__(
        self,
        store: LedgerStorePort,
        clock: ClockPort,
        horizon_days: int | None = None,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            store: Ledger store port.
            clock: Source of the current day.
            horizon_days: Optional horizon length; defaults to one year.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._clock = clock
        self._horizon_days = horizon_days
        self._logger = logger or get_app_logger()

    async def execute(
        self,
        kind: PeriodKind = PeriodKind.MONTH,
        anchor: date | None = None,
    ) -> OperationResult:
        """Return the summary of the period containing the anchor day.

        Args:
            kind: Month, quarter or year.
            anchor: Day inside the period; defaults to today.

        Returns:
            OperationResult: PeriodSummary on success, or the store error.
        """
        try:
            budgets, transactions = await load_budgets_and_transactions(
                self._store
            )
        except LedgerError as exc:
            self._logger.error(f"Failed to load budgets: {exc.message}")
            return OperationResult.failure(exc)

        today = self._clock.today()
        boundaries = period_boundaries(PeriodKind(kind), anchor or today)
        horizon = max(
            resolve_horizon(today, self._horizon_days),
            boundaries.end,
        )
        occurrences = build_occurrences(
            budgets,
            transactions,
            today=today,
            horizon=horizon,
        )
        summary = summarize_period(occurrences, boundaries)
        self._logger.info(
            f"Period {boundaries.label}: income={summary.total_income} "
            f"(paid {summary.income_paid}), expense={summary.total_expense} "
            f"(paid {summary.expense_paid})"
        )
        return OperationResult.success(summary)


__all__ = ["GetPeriodSummaryUseCase", "PeriodSummary"]
