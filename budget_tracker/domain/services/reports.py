"""Transaction reports split by allocation bucket."""

from collections.abc import Iterable
from decimal import Decimal

from budget_tracker.domain.constants import UNORDERED_BUCKET_POSITION
from budget_tracker.domain.models import (
    Bucket,
    BucketReport,
    BucketStatus,
    Category,
    PeriodBoundaries,
    PeriodReport,
    Transaction,
)
from budget_tracker.utils.dates import to_calendar_day


def bucket_status(
    bucket: Bucket,
    absolute_amount: Decimal,
    actual_percentage: Decimal,
) -> BucketStatus:
    """Compare a bucket's spending with its allocation rules."""
    if bucket.min_fixed_amount and absolute_amount < bucket.min_fixed_amount:
        return BucketStatus.BELOW_MIN_FIXED
    if actual_percentage < bucket.min_percentage:
        return BucketStatus.BELOW_MIN_PERCENTAGE
    if actual_percentage > bucket.max_percentage:
        return BucketStatus.ABOVE_MAX
    return BucketStatus.ON_TARGET


def build_period_report(
    transactions: Iterable[Transaction],
    categories: Iterable[Category],
    buckets: Iterable[Bucket],
    boundaries: PeriodBoundaries,
) -> PeriodReport:
    """Aggregate the period's transactions by their category's bucket.

    The bucket flagged ``exclude_from_reports`` holds income; every other
    bucket accumulates signed expenses, so refunds offset spending.

    Args:
        transactions: Transactions from the ledger store.
        categories: Categories used to resolve each transaction's bucket.
        buckets: Allocation buckets.
        boundaries: Inclusive period range.

    Returns:
        PeriodReport: Totals and per-bucket reports ordered by display order.
    """
    buckets = list(buckets)
    bucket_by_category = {
        category.id: category.bucket_id for category in categories
    }
    income_bucket = next(
        (bucket for bucket in buckets if bucket.exclude_from_reports),
        None,
    )
    income_bucket_id = income_bucket.id if income_bucket else None

    total_income = Decimal("0")
    total_expense = Decimal("0")
    income_by_bucket: dict[int, Decimal] = {}
    expense_by_bucket: dict[int, Decimal] = {}
    for transaction in transactions:
        if not boundaries.contains(to_calendar_day(transaction.date)):
            continue
        bucket_id = bucket_by_category.get(transaction.category_id)
        if not bucket_id:
            continue
        amount = transaction.net_amount
        if bucket_id == income_bucket_id:
            total_income += amount
            income_by_bucket[bucket_id] = (
                income_by_bucket.get(bucket_id, Decimal("0")) + amount
            )
        else:
            total_expense += amount
            expense_by_bucket[bucket_id] = (
                expense_by_bucket.get(bucket_id, Decimal("0")) + amount
            )

    reports: list[BucketReport] = []
    for bucket in sorted(
        buckets,
        key=lambda item: (
            item.display_order
            if item.display_order is not None
            else UNORDERED_BUCKET_POSITION
        ),
    ):
        if not bucket.is_active or bucket.exclude_from_reports:
            continue
        income = income_by_bucket.get(bucket.id, Decimal("0"))
        expense = expense_by_bucket.get(bucket.id, Decimal("0"))
        total_amount = income + expense
        absolute_amount = abs(total_amount)
        actual_percentage = (
            absolute_amount / abs(total_income) * Decimal("100")
            if total_income != 0
            else Decimal("0")
        )
        reports.append(
            BucketReport(
                bucket_id=bucket.id,
                bucket_name=bucket.name or "Unnamed",
                total_amount=total_amount,
                income=income,
                expense=expense,
                actual_percentage=actual_percentage,
                min_percentage=bucket.min_percentage,
                max_percentage=bucket.max_percentage,
                min_fixed_amount=bucket.min_fixed_amount,
                status=bucket_status(
                    bucket,
                    absolute_amount,
                    actual_percentage,
                ),
            )
        )

    return PeriodReport(
        boundaries=boundaries,
        total_income=total_income,
        total_expense=total_expense,
        bucket_reports=reports,
    )


__all__ = ["bucket_status", "build_period_report"]
