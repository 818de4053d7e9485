"""Use case to create a budget after validating its recurrence rule."""

from collections.abc import Mapping
from datetime import date
from decimal import Decimal
from typing import Any

from budget_tracker.application.ports.ledger_store import LedgerStorePort
from budget_tracker.domain.errors import (
    LedgerError,
    OperationResult,
    ValidationError,
)
from budget_tracker.domain.models import Budget, Frequency, FrequencyDetails
from budget_tracker.domain.services.validation import validate_budget
from budget_tracker.infrastructure.logging.logger import get_app_logger
from budget_tracker.utils.dates import to_calendar_day
from budget_tracker.utils.decimal_utils import parse_decimal


class CreateBudgetUseCase:
    """Validate a draft budget and insert it into the store."""

    def __init__(self, store: LedgerStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            store: Ledger store port.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._logger = logger or get_app_logger()

    async def execute(self, draft: Mapping[str, Any]) -> OperationResult:
        """Create a budget from user supplied fields.

        Args:
            draft: Budget fields. ``amount`` and ``transaction_cost`` may be
                strings; ``due_date`` may be an ISO string.

        Returns:
            OperationResult: Identifier of the new budget on success.
        """
        try:
            budget = self._to_budget(draft)
            validate_budget(budget)
            budget_id = await self._store.create_budget(
                self._to_fields(budget)
            )
        except LedgerError as exc:
            self._logger.error(f"Failed to create budget: {exc.message}")
            return OperationResult.failure(exc)

        self._logger.info(
            f"Created {budget.frequency.value} budget {budget_id} "
            f"'{budget.description}' for {budget.amount}"
        )
        return OperationResult.success(budget_id)

    @staticmethod
    def _to_budget(draft: Mapping[str, Any]) -> Budget:
        raw_amount = draft.get("amount")
        amount = parse_decimal(raw_amount)
        if amount is None:
            if raw_amount not in (None, ""):
                raise ValidationError("Amount must be a valid number")
            amount = Decimal("0")
        frequency = draft.get("frequency")
        try:
            frequency = Frequency(frequency)
        except ValueError:
            # reported by validate_budget
            pass
        raw_cost = draft.get("transaction_cost")
        cost = parse_decimal(raw_cost)
        if raw_cost not in (None, "") and cost is None:
            raise ValidationError("Transaction cost must be a valid number")
        if cost:
            cost = -abs(cost) if amount < 0 else abs(cost)
        raw_due = draft.get("due_date")
        try:
            due_date: date | None = (
                to_calendar_day(raw_due) if raw_due else None
            )
        except ValueError as exc:
            raise ValidationError(
                f"Due date must be an ISO date, got {raw_due!r}"
            ) from exc
        return Budget(
            id=0,
            description=(draft.get("description") or "").strip(),
            amount=amount,
            frequency=frequency,
            due_date=due_date,
            category_id=draft.get("category_id"),
            frequency_details=FrequencyDetails(
                day_of_month=draft.get("day_of_month"),
                day_of_week=draft.get("day_of_week"),
                interval_days=draft.get("interval_days"),
            ),
            transaction_cost=cost or None,
            recipient_id=draft.get("recipient_id"),
            account_id=draft.get("account_id"),
            is_flexible=bool(draft.get("is_flexible", False)),
            is_goal=bool(draft.get("is_goal", False)),
        )

    @staticmethod
    def _to_fields(budget: Budget) -> dict[str, Any]:
        details = budget.frequency_details
        return {
            "description": budget.description,
            "amount": budget.amount,
            "frequency": budget.frequency,
            "due_date": budget.due_date,
            "category_id": budget.category_id,
            "day_of_month": details.day_of_month,
            "day_of_week": details.day_of_week,
            "interval_days": details.interval_days,
            "transaction_cost": budget.transaction_cost,
            "recipient_id": budget.recipient_id,
            "account_id": budget.account_id,
            "is_active": True,
            "is_flexible": budget.is_flexible,
            "is_goal": budget.is_goal,
        }


__all__ = ["CreateBudgetUseCase"]
