"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL, adapters or user input.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def parse_decimal(value) -> Decimal | None:
    """Parse user input into a Decimal, returning None when not numeric.

    Args:
        value: Raw string or number entered by the user.

    Returns:
        Decimal | None: Parsed value, or None for blank or invalid input.
    """
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        parsed = coerce_decimal(value)
    except InvalidOperation:
        return None
    if not parsed.is_finite():
        return None
    return parsed


__all__ = ["coerce_decimal", "parse_decimal"]
