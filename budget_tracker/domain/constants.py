"""Domain constants for budget occurrences and matching."""

MAX_OCCURRENCES_PER_BUDGET = 50

OVERDUE = "Overdue"
THIS_WEEK = "This Week"
NEXT_WEEK = "Next Week"
THIS_MONTH = "This Month"

FIXED_GROUP_ORDER = (OVERDUE, THIS_WEEK, NEXT_WEEK, THIS_MONTH)

RECIPIENT_MATCH_SCORE = 100
CATEGORY_MATCH_SCORE = 50
DESCRIPTION_MATCH_SCORE = 25

ACTIVE_GOALS_LIMIT = 2
UNORDERED_BUCKET_POSITION = 999


__all__ = [
    "MAX_OCCURRENCES_PER_BUDGET",
    "OVERDUE",
    "THIS_WEEK",
    "NEXT_WEEK",
    "THIS_MONTH",
    "FIXED_GROUP_ORDER",
    "RECIPIENT_MATCH_SCORE",
    "CATEGORY_MATCH_SCORE",
    "DESCRIPTION_MATCH_SCORE",
    "ACTIVE_GOALS_LIMIT",
    "UNORDERED_BUCKET_POSITION",
]
