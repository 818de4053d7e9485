"""Rank unlinked transactions against a budget for manual linking.

Scores are additive: recipient match 100, category match 50 and description
match 25. Description matching is ``fuzzy_match``, a bounded substring
heuristic without tokenization or edit distance.
"""

from collections.abc import Iterable

from budget_tracker.domain.constants import (
    CATEGORY_MATCH_SCORE,
    DESCRIPTION_MATCH_SCORE,
    RECIPIENT_MATCH_SCORE,
)
from budget_tracker.domain.models import ScoredTransaction, Transaction


def fuzzy_match(pattern: str | None, text: str | None) -> bool:
    """Return True when either string contains the other.

    Comparison is case-insensitive and ignores surrounding whitespace.
    A blank string is contained in every other string, so it matches.
    """
    pattern_clean = (pattern or "").strip().casefold()
    text_clean = (text or "").strip().casefold()
    return pattern_clean in text_clean or text_clean in pattern_clean


def score_transaction(
    transaction: Transaction,
    description: str,
    category_id: int | None,
    recipient_id: int | None = None,
) -> int:
    """Return the relevance score of a transaction for a budget."""
    score = 0
    if recipient_id is not None and transaction.recipient_id == recipient_id:
        score += RECIPIENT_MATCH_SCORE
    if transaction.category_id == category_id:
        score += CATEGORY_MATCH_SCORE
    if fuzzy_match(description, transaction.description):
        score += DESCRIPTION_MATCH_SCORE
    return score


def rank_transactions(
    transactions: Iterable[Transaction],
    description: str,
    category_id: int | None,
    recipient_id: int | None = None,
) -> list[ScoredTransaction]:
    """Score unlinked transactions and rank them by descending score.

    Args:
        transactions: Full transaction collection.
        description: Budget description.
        category_id: Budget category.
        recipient_id: Budget recipient, if any.

    Returns:
        list[ScoredTransaction]: Non-zero scores, highest first; equal
        scores keep the input order.
    """
    scored = [
        ScoredTransaction(
            transaction=transaction,
            score=score_transaction(
                transaction,
                description,
                category_id,
                recipient_id,
            ),
        )
        for transaction in transactions
        if not transaction.is_linked
    ]
    return sorted(
        (item for item in scored if item.score > 0),
        key=lambda item: item.score,
        reverse=True,
    )


def find_matching_transactions(
    transactions: Iterable[Transaction],
    description: str,
    category_id: int | None,
    recipient_id: int | None = None,
) -> list[Transaction]:
    """Return ranked unlinked transactions without their scores."""
    return [
        item.transaction
        for item in rank_transactions(
            transactions,
            description,
            category_id,
            recipient_id,
        )
    ]


__all__ = [
    "fuzzy_match",
    "score_transaction",
    "rank_transactions",
    "find_matching_transactions",
]
