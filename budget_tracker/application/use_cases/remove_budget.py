"""Use case to delete a budget, or deactivate it when it has payments."""

from enum import Enum

from budget_tracker.application.ports.ledger_store import LedgerStorePort
from budget_tracker.application.use_cases.ledger_reads import (
    find_budget,
    load_budgets_and_transactions,
)
from budget_tracker.domain.errors import LedgerError, OperationResult
from budget_tracker.infrastructure.logging.logger import get_app_logger


class RemovalOutcome(str, Enum):
    """What happened to the budget."""

    DELETED = "deleted"
    DEACTIVATED = "deactivated"


class RemoveBudgetUseCase:
    """Remove a budget without orphaning linked transactions."""

    def __init__(self, store: LedgerStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            store: Ledger store port.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._logger = logger or get_app_logger()

    async def execute(self, budget_id: int) -> OperationResult:
        """Delete or deactivate the budget.

        Budgets with at least one linked transaction are deactivated so the
        history stays consistent; others are deleted.

        Returns:
            OperationResult: RemovalOutcome on success.
        """
        try:
            budgets, transactions = await load_budgets_and_transactions(
                self._store
            )
            find_budget(budgets, budget_id)
            has_links = any(
                transaction.budget_id == budget_id
                for transaction in transactions
            )
            if has_links:
                await self._store.update_budget(
                    budget_id,
                    {"is_active": False},
                )
                outcome = RemovalOutcome.DEACTIVATED
            else:
                await self._store.delete_budget(budget_id)
                outcome = RemovalOutcome.DELETED
        except LedgerError as exc:
            self._logger.error(
                f"Failed to remove budget {budget_id}: {exc.message}"
            )
            return OperationResult.failure(exc)

        self._logger.info(f"Budget {budget_id} {outcome.value}")
        return OperationResult.success(outcome)


__all__ = ["RemoveBudgetUseCase", "RemovalOutcome"]
