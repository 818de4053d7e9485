"""Domain models for transaction matching."""

from dataclasses import dataclass

from budget_tracker.domain.models.ledger import Transaction


@dataclass(frozen=True)
class ScoredTransaction:
    """Unlinked transaction with its relevance score for a budget."""

    transaction: Transaction
    score: int


@dataclass(frozen=True)
class LinkResult:
    """Per-transaction outcome of a bulk link.

    Attributes:
        linked_ids: Transactions now linked to the occurrence.
        failures: Error message per transaction id that was not linked.
    """

    linked_ids: list[int]
    failures: dict[int, str]

    @property
    def all_linked(self) -> bool:
        """Return True when no link failed."""
        return not self.failures


__all__ = ["ScoredTransaction", "LinkResult"]
