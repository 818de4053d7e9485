"""Use case to backfill occurrence dates on legacy linked transactions.

Transactions linked to a budget before occurrence tracking existed carry a
``budget_id`` but no ``occurrence_date``. Each one is assigned the nearest
due-date at or before the transaction date. Transactions that already have
an occurrence date are never touched, so a second run is a no-op.
"""

from dataclasses import dataclass, field

from budget_tracker.application.ports.ledger_store import LedgerStorePort
from budget_tracker.application.use_cases.ledger_reads import (
    load_budgets_and_transactions,
)
from budget_tracker.domain.errors import LedgerError, OperationResult
from budget_tracker.domain.services.recurrence import (
    nearest_due_date_on_or_before,
)
from budget_tracker.infrastructure.logging.logger import get_app_logger
from budget_tracker.utils.dates import to_calendar_day


@dataclass(frozen=True)
class BackfillResult:
    """Result of a backfill run.

    Attributes:
        scanned: Linked transactions lacking an occurrence date.
        updated: Transactions that received an occurrence date.
        skipped: Transactions whose budget no longer exists.
        failed_ids: Transactions whose update failed.
    """

    scanned: int
    updated: int
    skipped: int
    failed_ids: list[int] = field(default_factory=list)


class BackfillOccurrenceDatesUseCase:
    """Assign missing occurrence dates from each budget's schedule."""

    def __init__(self, store: LedgerStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            store: Ledger store port.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._logger = logger or get_app_logger()

    async def execute(self) -> OperationResult:
        """Run the backfill.

        Returns:
            OperationResult: BackfillResult on success, or the read error.
        """
        try:
            budgets, transactions = await load_budgets_and_transactions(
                self._store
            )
        except LedgerError as exc:
            self._logger.error(f"Backfill aborted: {exc.message}")
            return OperationResult.failure(exc)

        budgets_by_id = {budget.id: budget for budget in budgets}
        pending = [
            transaction
            for transaction in transactions
            if transaction.budget_id is not None
            and transaction.occurrence_date is None
        ]
        updated = 0
        skipped = 0
        failed_ids: list[int] = []
        for transaction in pending:
            budget = budgets_by_id.get(transaction.budget_id)
            if budget is None:
                skipped += 1
                self._logger.warning(
                    f"Transaction {transaction.id} references missing "
                    f"budget {transaction.budget_id}"
                )
                continue
            occurrence_date = nearest_due_date_on_or_before(
                budget,
                to_calendar_day(transaction.date),
            )
            try:
                await self._store.update_transaction(
                    transaction.id,
                    {"occurrence_date": occurrence_date},
                )
            except LedgerError as exc:
                failed_ids.append(transaction.id)
                self._logger.error(
                    f"Failed to backfill transaction {transaction.id}: "
                    f"{exc.message}"
                )
                continue
            updated += 1

        if pending:
            self._logger.info(
                f"Backfilled {updated} of {len(pending)} transactions "
                f"({skipped} skipped, {len(failed_ids)} failed)"
            )
        else:
            self._logger.info("No transactions need an occurrence date")
        return OperationResult.success(
            BackfillResult(
                scanned=len(pending),
                updated=updated,
                skipped=skipped,
                failed_ids=failed_ids,
            )
        )


__all__ = ["BackfillOccurrenceDatesUseCase", "BackfillResult"]
