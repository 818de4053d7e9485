"""Calendar-day helpers shared by the domain and adapters."""

import calendar
from datetime import date, datetime


def to_calendar_day(value: date | datetime | str) -> date:
    """Strip the time of day from a date-like value.

    Args:
        value: A date, datetime or ISO formatted string.

    Returns:
        date: The calendar day the value falls on.
    """
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    if isinstance(value, datetime):
        return value.date()
    return value


def clamp_day(year: int, month: int, day: int) -> date:
    """Build a date, clamping the day into the month's valid range."""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, max(1, min(day, last_day)))


def add_months(value: date, months: int, day: int | None = None) -> date:
    """Move a date by whole months, clamping to the target month's last day.

    Args:
        value: Starting date.
        months: Number of months to move (may be negative).
        day: Desired day of month; defaults to the starting day.

    Returns:
        date: The shifted date.
    """
    total_months = value.year * 12 + value.month - 1 + months
    year, month_index = divmod(total_months, 12)
    target_day = day if day is not None else value.day
    return clamp_day(year, month_index + 1, target_day)


def add_years(value: date, years: int) -> date:
    """Move a date by whole years, mapping Feb 29 to Feb 28 when needed."""
    return clamp_day(value.year + years, value.month, value.day)


def month_label(value: date) -> str:
    """Return a label such as ``March 2026`` for the value's month."""
    return f"{calendar.month_name[value.month]} {value.year}"


def parse_month_label(label: str) -> date:
    """Parse a ``March 2026`` style label back to the first of that month."""
    return datetime.strptime(f"{label} 1", "%B %Y %d").date()


__all__ = [
    "to_calendar_day",
    "clamp_day",
    "add_months",
    "add_years",
    "month_label",
    "parse_month_label",
]
