"""Use case to delete a transaction linked to an occurrence."""

from budget_tracker.application.ports.ledger_store import LedgerStorePort
from budget_tracker.domain.errors import LedgerError, OperationResult
from budget_tracker.infrastructure.logging.logger import get_app_logger


class DeleteLinkedTransactionUseCase:
    """Remove a payment; callers regenerate occurrences afterwards."""

    def __init__(self, store: LedgerStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            store: Ledger store port.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._logger = logger or get_app_logger()

    async def execute(self, transaction_id: int) -> OperationResult:
        """Delete the transaction.

        Returns:
            OperationResult: The deleted id, or NotFound/Store errors.
        """
        try:
            await self._store.delete_transaction(transaction_id)
        except LedgerError as exc:
            self._logger.error(
                f"Failed to delete transaction {transaction_id}: "
                f"{exc.message}"
            )
            return OperationResult.failure(exc)
        self._logger.info(f"Deleted transaction {transaction_id}")
        return OperationResult.success(transaction_id)


__all__ = ["DeleteLinkedTransactionUseCase"]
