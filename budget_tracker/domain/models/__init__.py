"""Domain models package."""

from .ledger import (
    Account,
    Bucket,
    Budget,
    Category,
    Frequency,
    FrequencyDetails,
    LedgerSnapshot,
    Recipient,
    Transaction,
)
from .matching import LinkResult, ScoredTransaction
from .occurrences import (
    BudgetOccurrence,
    BudgetOverview,
    OccurrenceGroup,
    PaymentStatus,
)
from .summary import (
    BucketReport,
    BucketStatus,
    PeriodBoundaries,
    PeriodKind,
    PeriodReport,
    PeriodSummary,
)

__all__ = [
    "Account",
    "Bucket",
    "Budget",
    "Category",
    "Frequency",
    "FrequencyDetails",
    "LedgerSnapshot",
    "Recipient",
    "Transaction",
    "LinkResult",
    "ScoredTransaction",
    "BudgetOccurrence",
    "BudgetOverview",
    "OccurrenceGroup",
    "PaymentStatus",
    "BucketReport",
    "BucketStatus",
    "PeriodBoundaries",
    "PeriodKind",
    "PeriodReport",
    "PeriodSummary",
]
