"""Use case to report a period's transactions by allocation bucket."""

from datetime import date

from budget_tracker.application.ports.clock import ClockPort
from budget_tracker.application.ports.ledger_store import LedgerStorePort
from budget_tracker.application.use_cases.ledger_reads import (
    load_ledger_snapshot,
)
from budget_tracker.domain.errors import LedgerError, OperationResult
from budget_tracker.domain.models import PeriodKind, PeriodReport
from budget_tracker.domain.services.period_summary import period_boundaries
from budget_tracker.domain.services.reports import build_period_report
from budget_tracker.infrastructure.logging.logger import get_app_logger


class GetPeriodReportUseCase:
    """Compute income, expense and bucket shares for a period."""

    def __init__(
        self,
        store: LedgerStorePort,
        clock: ClockPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            store: Ledger store port.
            clock: Source of the current day.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._clock = clock
        self._logger = logger or get_app_logger()

    async def execute(
        self,
        kind: PeriodKind = PeriodKind.MONTH,
        anchor: date | None = None,
    ) -> OperationResult:
        """Return the report of the period containing the anchor day.

        Args:
            kind: Month, quarter or year.
            anchor: Day inside the period; defaults to today.

        Returns:
            OperationResult: PeriodReport on success, or the store error.
        """
        try:
            snapshot = await load_ledger_snapshot(self._store)
        except LedgerError as exc:
            self._logger.error(f"Failed to load ledger: {exc.message}")
            return OperationResult.failure(exc)

        boundaries = period_boundaries(
            PeriodKind(kind),
            anchor or self._clock.today(),
        )
        report = build_period_report(
            snapshot.transactions,
            snapshot.categories,
            snapshot.buckets,
            boundaries,
        )
        self._logger.info(
            f"Report {boundaries.label}: income={report.total_income}, "
            f"expense={report.total_expense}, "
            f"buckets={len(report.bucket_reports)}"
        )
        return OperationResult.success(report)


__all__ = ["GetPeriodReportUseCase", "PeriodReport"]
