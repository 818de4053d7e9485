"""Use case to build the grouped occurrence overview of all budgets."""

import calendar

from budget_tracker.application.ports.clock import ClockPort
from budget_tracker.application.ports.ledger_store import LedgerStorePort
from budget_tracker.application.use_cases.ledger_reads import (
    load_budgets_and_transactions,
    resolve_horizon,
)
from budget_tracker.domain.errors import LedgerError, OperationResult
from budget_tracker.domain.models import BudgetOverview, Frequency
from budget_tracker.domain.services.bucketing import group_occurrences
from budget_tracker.domain.services.occurrences import (
    active_goals,
    build_occurrences,
    most_recent_completed_goal,
)
from budget_tracker.infrastructure.logging.logger import get_app_logger


class GetBudgetOverviewUseCase:
    """Generate, group and sort occurrences for one render cycle."""

    def __init__(
        self,
        store: LedgerStorePort,
        clock: ClockPort,
        week_start: int = calendar.SUNDAY,
        horizon_days: int | None = None,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            store: Ledger store port.
            clock: Source of the current day.
            week_start: First weekday of the local calendar.
            horizon_days: Optional horizon length; defaults to one year.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._clock = clock
        self._week_start = week_start
        self._horizon_days = horizon_days
        self._logger = logger or get_app_logger()

    async def execute(self) -> OperationResult:
        """Return the budget overview.

        Returns:
            OperationResult: BudgetOverview on success, or the store error.
        """
        try:
            budgets, transactions = await load_budgets_and_transactions(
                self._store
            )
        except LedgerError as exc:
            self._logger.error(f"Failed to load budgets: {exc.message}")
            return OperationResult.failure(exc)

        today = self._clock.today()
        horizon = resolve_horizon(today, self._horizon_days)
        self._warn_on_schedule_gaps(budgets)
        occurrences = build_occurrences(
            budgets,
            transactions,
            today=today,
            horizon=horizon,
            week_start=self._week_start,
        )
        groups = group_occurrences(occurrences)
        self._logger.info(
            f"Built {len(occurrences)} occurrences in {len(groups)} groups "
            f"from {len(budgets)} budgets up to {horizon.isoformat()}"
        )
        return OperationResult.success(
            BudgetOverview(
                occurrences=occurrences,
                groups=groups,
                goals=active_goals(occurrences),
                recent_completed_goal=most_recent_completed_goal(occurrences),
            )
        )

    def _warn_on_schedule_gaps(self, budgets) -> None:
        """Log budgets whose rule stops after the anchor."""
        for budget in budgets:
            if not budget.is_active:
                continue
            frequency = Frequency(budget.frequency)
            details = budget.frequency_details
            if frequency is Frequency.MONTHLY and not details.day_of_month:
                self._logger.warning(
                    f"Monthly budget {budget.id} has no day of month; "
                    "only its anchor date is scheduled"
                )
            if frequency is Frequency.CUSTOM and not (
                details.interval_days and details.interval_days > 0
            ):
                self._logger.warning(
                    f"Custom budget {budget.id} has no positive interval; "
                    "only its anchor date is scheduled"
                )


__all__ = ["GetBudgetOverviewUseCase", "BudgetOverview"]
