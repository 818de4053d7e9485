"""Port for the ledger store owning budgets and transactions.

Every operation is a coroutine: the store may suspend the caller. Use cases
treat each call as one atomic request and never rely on ordering between
concurrent reads.
"""

from collections.abc import Mapping
from typing import Any, Protocol

from budget_tracker.domain.models import (
    Account,
    Bucket,
    Budget,
    Category,
    Recipient,
    Transaction,
)


class LedgerStorePort(Protocol):
    """Port exposing the ledger collections and the writes the core needs."""

    async def list_budgets(self) -> list[Budget]:
        """Return every budget."""

    async def list_transactions(self) -> list[Transaction]:
        """Return every transaction."""

    async def list_categories(self) -> list[Category]:
        """Return every category."""

    async def list_buckets(self) -> list[Bucket]:
        """Return every bucket."""

    async def list_recipients(self) -> list[Recipient]:
        """Return every recipient."""

    async def list_accounts(self) -> list[Account]:
        """Return every account."""

    async def create_budget(self, fields: Mapping[str, Any]) -> int:
        """Insert a budget and return its identifier."""

    async def create_transaction(self, fields: Mapping[str, Any]) -> int:
        """Insert a transaction and return its identifier."""

    async def update_transaction(
        self,
        transaction_id: int,
        fields: Mapping[str, Any],
    ) -> None:
        """Update some fields of a transaction.

        Raises:
            NotFoundError: When the transaction does not exist.
        """

    async def delete_transaction(self, transaction_id: int) -> None:
        """Delete a transaction.

        Raises:
            NotFoundError: When the transaction does not exist.
        """

    async def update_budget(
        self,
        budget_id: int,
        fields: Mapping[str, Any],
    ) -> None:
        """Update some fields of a budget.

        Raises:
            NotFoundError: When the budget does not exist.
        """

    async def delete_budget(self, budget_id: int) -> None:
        """Delete a budget.

        Raises:
            NotFoundError: When the budget does not exist.
        """


__all__ = ["LedgerStorePort"]
