"""Use case to record a payment against a budget occurrence."""

from datetime import date, datetime

from budget_tracker.application.ports.clock import ClockPort
from budget_tracker.application.ports.ledger_store import LedgerStorePort
from budget_tracker.application.use_cases.ledger_reads import (
    ensure_due_date,
    find_budget,
    parse_occurrence_day,
)
from budget_tracker.domain.errors import LedgerError, OperationResult
from budget_tracker.domain.services.validation import (
    validate_paid_at,
    validate_payment_amount,
    validate_transaction_cost,
)
from budget_tracker.infrastructure.logging.logger import get_app_logger


class RecordPaymentUseCase:
    """Create a transaction that pays towards one occurrence.

    Amounts are entered as positive numbers and stored with the budget's
    sign, so an expense budget receives a negative transaction.
    """

    def __init__(
        self,
        store: LedgerStorePort,
        clock: ClockPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            store: Ledger store port.
            clock: Source of the current time for future-date checks.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._clock = clock
        self._logger = logger or get_app_logger()

    async def execute(
        self,
        budget_id: int,
        occurrence_date: date,
        amount,
        paid_at: datetime | None,
        transaction_cost=None,
        reference: str | None = None,
    ) -> OperationResult:
        """Validate the payment and create the linked transaction.

        Args:
            budget_id: Budget being paid.
            occurrence_date: Due-date of the occurrence being paid.
            amount: Positive amount as entered by the user.
            paid_at: When the payment happened; must not be in the future.
            transaction_cost: Optional non-negative fee.
            reference: Optional external reference (receipt, SMS code).

        Returns:
            OperationResult: Identifier of the new transaction on success.
        """
        try:
            parsed_amount = validate_payment_amount(amount)
            parsed_cost = validate_transaction_cost(transaction_cost)
            paid_at = validate_paid_at(paid_at, self._clock.now())
            occurrence_day = parse_occurrence_day(occurrence_date)
            budget = find_budget(await self._store.list_budgets(), budget_id)
            ensure_due_date(budget, occurrence_day)
            sign = -1 if budget.amount < 0 else 1
            fields = {
                "amount": sign * parsed_amount,
                "transaction_cost": (
                    sign * parsed_cost if parsed_cost is not None else None
                ),
                "date": paid_at,
                "category_id": budget.category_id,
                "recipient_id": budget.recipient_id,
                "account_id": budget.account_id,
                "description": budget.description,
                "transaction_reference": (reference or "").strip() or None,
                "budget_id": budget.id,
                "occurrence_date": occurrence_day,
            }
            transaction_id = await self._store.create_transaction(fields)
        except LedgerError as exc:
            self._logger.error(
                f"Failed to record payment for budget {budget_id}: "
                f"{exc.message}"
            )
            return OperationResult.failure(exc)

        self._logger.info(
            f"Recorded transaction {transaction_id} of {fields['amount']} "
            f"for budget {budget_id} on {fields['occurrence_date']}"
        )
        return OperationResult.success(transaction_id)


__all__ = ["RecordPaymentUseCase"]
