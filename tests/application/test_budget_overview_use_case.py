"""Tests for GetBudgetOverviewUseCase and GetPeriodSummaryUseCase."""

import asyncio
import calendar
from datetime import date, datetime
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from budget_tracker.application.use_cases.get_budget_overview import (
    GetBudgetOverviewUseCase,
)
from budget_tracker.application.use_cases.get_period_summary import (
    GetPeriodSummaryUseCase,
)
from budget_tracker.domain.errors import ErrorKind, StoreError
from budget_tracker.domain.models import (
    Budget,
    Frequency,
    FrequencyDetails,
    PeriodKind,
    Transaction,
)

TODAY = date(2026, 3, 11)


def _store(budgets, transactions=()) -> AsyncMock:
    store = AsyncMock()
    store.list_budgets.return_value = list(budgets)
    store.list_transactions.return_value = list(transactions)
    return store


def _clock() -> MagicMock:
    clock = MagicMock()
    clock.today.return_value = TODAY
    return clock


def _budget(budget_id, amount, frequency, due_date, **extra) -> Budget:
    details = extra.pop("details", FrequencyDetails())
    return Budget(
        id=budget_id,
        description=extra.pop("description", f"Budget {budget_id}"),
        amount=Decimal(amount),
        frequency=frequency,
        due_date=due_date,
        category_id=1,
        frequency_details=details,
        **extra,
    )


def test_overview_groups_and_hides_paid_overdue() -> None:
    """Paid overdue occurrences disappear; open ones stay in Overdue."""
    rent = _budget(
        1,
        "-1000",
        Frequency.MONTHLY,
        date(2026, 2, 1),
        details=FrequencyDetails(day_of_month=1),
    )
    water = _budget(2, "-40", Frequency.ONCE, date(2026, 3, 2))
    salary = _budget(3, "3000", Frequency.ONCE, date(2026, 3, 13))
    transactions = [
        Transaction(
            id=7,
            amount=Decimal("-1000"),
            date=datetime(2026, 2, 1, 9, 0),
            budget_id=1,
            occurrence_date=date(2026, 2, 1),
        )
    ]
    logger = MagicMock()
    use_case = GetBudgetOverviewUseCase(
        _store([rent, water, salary], transactions),
        _clock(),
        horizon_days=60,
        logger=logger,
    )

    result = asyncio.run(use_case.execute())

    assert result.ok
    overview = result.value
    labels = [group.label for group in overview.groups]
    assert labels == ["Overdue", "This Week", "April 2026", "May 2026"]
    overdue = overview.groups[0].occurrences
    assert [(occ.budget_id, occ.due_date) for occ in overdue] == [
        (1, date(2026, 3, 1)),
        (2, date(2026, 3, 2)),
    ]
    assert overview.groups[1].occurrences[0].budget_id == 3
    assert len(overview.occurrences) == 6
    logger.info.assert_called_once()


def test_overview_warns_about_monthly_budget_without_day() -> None:
    broken = _budget(1, "-20", Frequency.MONTHLY, date(2026, 3, 20))
    logger = MagicMock()
    use_case = GetBudgetOverviewUseCase(
        _store([broken]),
        _clock(),
        week_start=calendar.MONDAY,
        logger=logger,
    )

    result = asyncio.run(use_case.execute())

    assert result.ok
    assert len(result.value.occurrences) == 1
    logger.warning.assert_called_once()
    assert "no day of month" in logger.warning.call_args.args[0]


def test_overview_reports_store_errors() -> None:
    store = _store([])
    store.list_budgets.side_effect = StoreError("database is locked")
    logger = MagicMock()
    use_case = GetBudgetOverviewUseCase(store, _clock(), logger=logger)

    result = asyncio.run(use_case.execute())

    assert not result.ok
    assert result.error.kind is ErrorKind.STORE
    assert result.error.message == "database is locked"
    logger.error.assert_called_once()


def test_period_summary_extends_horizon_to_period_end() -> None:
    """A future quarter is summarized even beyond the default horizon."""
    rent = _budget(
        1,
        "-100",
        Frequency.MONTHLY,
        date(2026, 1, 1),
        details=FrequencyDetails(day_of_month=1),
    )
    use_case = GetPeriodSummaryUseCase(
        _store([rent]),
        _clock(),
        horizon_days=30,
        logger=MagicMock(),
    )

    result = asyncio.run(
        use_case.execute(PeriodKind.QUARTER, anchor=date(2026, 6, 1))
    )

    assert result.ok
    summary = result.value
    assert summary.boundaries.label == "Q2 2026"
    assert summary.total_expense == Decimal("300")
    assert summary.expense_paid == Decimal("0")


def test_period_summary_defaults_to_current_month() -> None:
    salary = _budget(1, "2500", Frequency.ONCE, date(2026, 3, 25))
    use_case = GetPeriodSummaryUseCase(
        _store([salary]),
        _clock(),
        logger=MagicMock(),
    )

    result = asyncio.run(use_case.execute())

    assert result.value.boundaries.label == "March 2026"
    assert result.value.total_income == Decimal("2500")
