"""Use case to suggest unlinked transactions for a budget."""

from budget_tracker.application.ports.ledger_store import LedgerStorePort
from budget_tracker.application.use_cases.ledger_reads import (
    find_budget,
    load_budgets_and_transactions,
)
from budget_tracker.domain.errors import LedgerError, OperationResult
from budget_tracker.domain.models import ScoredTransaction
from budget_tracker.domain.services.matching import rank_transactions
from budget_tracker.infrastructure.logging.logger import get_app_logger


class FindMatchingTransactionsUseCase:
    """Rank the unlinked transaction pool against one budget."""

    def __init__(self, store: LedgerStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            store: Ledger store port.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._logger = logger or get_app_logger()

    async def execute(self, budget_id: int) -> OperationResult:
        """Return scored candidates for the budget, best first.

        Args:
            budget_id: Budget to reconcile.

        Returns:
            OperationResult: list[ScoredTransaction] on success.
        """
        try:
            budgets, transactions = await load_budgets_and_transactions(
                self._store
            )
            budget = find_budget(budgets, budget_id)
        except LedgerError as exc:
            self._logger.error(
                f"Cannot match transactions for budget {budget_id}: "
                f"{exc.message}"
            )
            return OperationResult.failure(exc)

        candidates = rank_transactions(
            transactions,
            budget.description,
            budget.category_id,
            budget.recipient_id,
        )
        self._logger.info(
            f"Found {len(candidates)} unlinked candidates for budget "
            f"{budget_id}"
        )
        return OperationResult.success(candidates)


__all__ = ["FindMatchingTransactionsUseCase", "ScoredTransaction"]
