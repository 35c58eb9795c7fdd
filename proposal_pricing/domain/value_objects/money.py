"""Money helpers for decimal currency arithmetic."""

from decimal import ROUND_HALF_UP, Decimal
from typing import Union

Number = Union[int, float, str, Decimal]

CENTS = Decimal("0.01")


def to_decimal(value: Number) -> Decimal:
    """
    Convert a numeric input to Decimal.

    Floats go through their shortest repr so that 5.75 becomes Decimal("5.75")
    rather than its binary expansion.

    Args:
        value: Amount, rate or factor as int, float, str or Decimal

    Returns:
        Decimal value
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(value)


def round_cents(value: Number) -> Decimal:
    """Round an amount half-up to whole cents."""
    return to_decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


def format_currency(amount: Number) -> str:
    """
    Format an amount as a USD display string.

    Args:
        amount: Amount to format (negative amounts render as credits)

    Returns:
        String such as "$1,234.50" or "-$12.00"
    """
    rounded = round_cents(amount)
    sign = "-" if rounded < 0 else ""
    return f"{sign}${abs(rounded):,.2f}"
