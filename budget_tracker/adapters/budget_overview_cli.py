"""CLI adapter printing upcoming budget occurrences and the month summary.

This module wires the overview and period summary use cases to the SQLite
or PostgreSQL ledger configured through ``LEDGER_DB_URL``.
"""

import asyncio

from budget_tracker.application.use_cases.get_budget_overview import (
    GetBudgetOverviewUseCase,
)
from budget_tracker.application.use_cases.get_period_summary import (
    GetPeriodSummaryUseCase,
)
from budget_tracker.domain.models import BudgetOccurrence, PeriodKind
from budget_tracker.domain.services.occurrences import payment_status
from budget_tracker.infrastructure.container import (
    build_clock,
    build_ledger_store,
    build_settings,
)
from budget_tracker.infrastructure.logging.logger import get_app_logger


def _format_occurrence(occurrence: BudgetOccurrence) -> str:
    """Render one occurrence as a single line."""
    status = payment_status(occurrence)
    return (
        f"  {occurrence.due_date.isoformat()}  "
        f"{occurrence.budget.description:<30}  "
        f"{occurrence.amount_paid:>12} / {occurrence.budget.amount:<12}  "
        f"{status.value}"
    )


async def _run(store, clock, settings, logger) -> int:
    overview_use_case = GetBudgetOverviewUseCase(
        store,
        clock,
        week_start=settings.week_start,
        horizon_days=settings.horizon_days,
        logger=logger,
    )
    summary_use_case = GetPeriodSummaryUseCase(
        store,
        clock,
        horizon_days=settings.horizon_days,
        logger=logger,
    )
    overview_result, summary_result = await asyncio.gather(
        overview_use_case.execute(),
        summary_use_case.execute(PeriodKind.MONTH),
    )
    if not overview_result.ok:
        print(f"Could not load budgets: {overview_result.error.message}")
        return 1

    overview = overview_result.value
    for group in overview.groups:
        print(group.label)
        for occurrence in group.occurrences:
            print(_format_occurrence(occurrence))
    if overview.goals:
        print("Goals")
        for occurrence in overview.goals:
            print(_format_occurrence(occurrence))

    if summary_result.ok:
        summary = summary_result.value
        print(
            f"{summary.boundaries.label}: "
            f"income {summary.income_paid} of {summary.total_income}, "
            f"expenses {summary.expense_paid} of {summary.total_expense}, "
            f"net {summary.net_paid} of {summary.net_budgeted}"
        )
    return 0


def main() -> int:
    """Print the budget overview for the configured ledger."""
    logger = get_app_logger()
    settings = build_settings()
    store = build_ledger_store()
    clock = build_clock()
    return asyncio.run(_run(store, clock, settings, logger))


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
