"""Domain services package."""

from .bucketing import (
    group_occurrences,
    is_hidden_overdue,
    occurrence_sort_key,
    sort_occurrences,
    time_group,
    week_start_date,
)
from .matching import (
    find_matching_transactions,
    fuzzy_match,
    rank_transactions,
    score_transaction,
)
from .occurrences import (
    active_goals,
    build_occurrence,
    build_occurrences,
    index_linked_transactions,
    is_target_reached,
    most_recent_completed_goal,
    payment_status,
    progress_percentage,
    remaining_amount,
    sum_paid,
)
from .period_summary import period_boundaries, shift_period, summarize_period
from .recurrence import (
    DueDateSchedule,
    due_date_at,
    nearest_due_date_on_or_before,
)
from .reports import bucket_status, build_period_report
from .validation import (
    validate_budget,
    validate_paid_at,
    validate_payment_amount,
    validate_transaction_cost,
)

__all__ = [
    "group_occurrences",
    "is_hidden_overdue",
    "occurrence_sort_key",
    "sort_occurrences",
    "time_group",
    "week_start_date",
    "find_matching_transactions",
    "fuzzy_match",
    "rank_transactions",
    "score_transaction",
    "active_goals",
    "build_occurrence",
    "build_occurrences",
    "index_linked_transactions",
    "is_target_reached",
    "most_recent_completed_goal",
    "payment_status",
    "progress_percentage",
    "remaining_amount",
    "sum_paid",
    "period_boundaries",
    "shift_period",
    "summarize_period",
    "DueDateSchedule",
    "due_date_at",
    "nearest_due_date_on_or_before",
    "bucket_status",
    "build_period_report",
    "validate_budget",
    "validate_paid_at",
    "validate_payment_amount",
    "validate_transaction_cost",
]
