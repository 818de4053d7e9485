"""Use case to link selected transactions to one budget occurrence.

Links are written one transaction at a time. A failed write does not undo
earlier ones; the result lists which ids were linked and why the others
were not, so callers can retry only the failures.
"""

from collections.abc import Iterable
from datetime import date

from budget_tracker.application.ports.ledger_store import LedgerStorePort
from budget_tracker.application.use_cases.ledger_reads import (
    ensure_due_date,
    find_budget,
    load_budgets_and_transactions,
    parse_occurrence_day,
)
from budget_tracker.domain.errors import (
    LedgerError,
    OperationResult,
    ValidationError,
)
from budget_tracker.domain.models import LinkResult
from budget_tracker.infrastructure.logging.logger import get_app_logger


class LinkTransactionsUseCase:
    """Assign budget id and occurrence date to existing transactions."""

    def __init__(self, store: LedgerStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            store: Ledger store port.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._logger = logger or get_app_logger()

    async def execute(
        self,
        budget_id: int,
        transaction_ids: Iterable[int],
        occurrence_date: date,
    ) -> OperationResult:
        """Link transactions to the occurrence of a budget.

        Args:
            budget_id: Budget the transactions pay towards.
            transaction_ids: Selected transactions.
            occurrence_date: Due-date of the occurrence they satisfy.

        Returns:
            OperationResult: LinkResult on success, or the error that
            prevented any link from being attempted.
        """
        requested = list(dict.fromkeys(transaction_ids))
        try:
            if not requested:
                raise ValidationError(
                    "Please select at least one transaction to link"
                )
            budgets, transactions = await load_budgets_and_transactions(
                self._store
            )
            budget = find_budget(budgets, budget_id)
            occurrence_day = parse_occurrence_day(occurrence_date)
            ensure_due_date(budget, occurrence_day)
        except LedgerError as exc:
            self._logger.error(
                f"Cannot link transactions to budget {budget_id}: "
                f"{exc.message}"
            )
            return OperationResult.failure(exc)

        by_id = {transaction.id: transaction for transaction in transactions}
        linked_ids: list[int] = []
        failures: dict[int, str] = {}
        for transaction_id in requested:
            transaction = by_id.get(transaction_id)
            if transaction is None:
                failures[transaction_id] = (
                    f"Transaction {transaction_id} not found"
                )
                continue
            if transaction.is_linked:
                failures[transaction_id] = (
                    f"Transaction {transaction_id} is already linked to "
                    f"budget {transaction.budget_id}"
                )
                continue
            try:
                await self._store.update_transaction(
                    transaction_id,
                    {
                        "budget_id": budget_id,
                        "occurrence_date": occurrence_day,
                    },
                )
            except LedgerError as exc:
                failures[transaction_id] = exc.message
                continue
            linked_ids.append(transaction_id)

        if failures:
            self._logger.warning(
                f"Linked {len(linked_ids)} of {len(requested)} transactions "
                f"to budget {budget_id}; failed ids: {sorted(failures)}"
            )
        else:
            self._logger.info(
                f"Linked {len(linked_ids)} transactions to budget "
                f"{budget_id} for {occurrence_day.isoformat()}"
            )
        return OperationResult.success(
            LinkResult(linked_ids=linked_ids, failures=failures)
        )


__all__ = ["LinkTransactionsUseCase", "LinkResult"]
