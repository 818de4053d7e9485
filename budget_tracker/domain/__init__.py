"""Domain package for budget rules and core models."""

from .errors import (
    ErrorKind,
    LedgerError,
    NotFoundError,
    OperationError,
    OperationResult,
    StoreError,
    ValidationError,
)
from .models import (
    Budget,
    BudgetOccurrence,
    Frequency,
    FrequencyDetails,
    PeriodKind,
    Transaction,
)

__all__ = [
    "ErrorKind",
    "LedgerError",
    "NotFoundError",
    "OperationError",
    "OperationResult",
    "StoreError",
    "ValidationError",
    "Budget",
    "BudgetOccurrence",
    "Frequency",
    "FrequencyDetails",
    "PeriodKind",
    "Transaction",
]
