"""Application use cases package."""

from .backfill_occurrence_dates import (
    BackfillOccurrenceDatesUseCase,
    BackfillResult,
)
from .create_budget import CreateBudgetUseCase
from .delete_linked_transaction import DeleteLinkedTransactionUseCase
from .find_matching_transactions import FindMatchingTransactionsUseCase
from .get_budget_overview import GetBudgetOverviewUseCase
from .get_period_report import GetPeriodReportUseCase
from .get_period_summary import GetPeriodSummaryUseCase
from .link_transactions import LinkTransactionsUseCase
from .record_payment import RecordPaymentUseCase
from .remove_budget import RemovalOutcome, RemoveBudgetUseCase

__all__ = [
    "BackfillOccurrenceDatesUseCase",
    "BackfillResult",
    "CreateBudgetUseCase",
    "DeleteLinkedTransactionUseCase",
    "FindMatchingTransactionsUseCase",
    "GetBudgetOverviewUseCase",
    "GetPeriodReportUseCase",
    "GetPeriodSummaryUseCase",
    "LinkTransactionsUseCase",
    "RecordPaymentUseCase",
    "RemovalOutcome",
    "RemoveBudgetUseCase",
]
