"""
Money helpers.

Amounts travel as JSON numbers or decimal strings. Everything is converted
to Decimal before any arithmetic so that "1000.0" and 1000 compare equal
and percentages such as 40 come out exact.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Union

CENTS = Decimal('0.01')

Number = Union[Decimal, int, float, str]


def to_decimal(value: Number) -> Decimal:
    """
    Convert a JSON-ish number to Decimal.

    Floats go through str() so 19.99 becomes Decimal('19.99') rather than
    its binary expansion.

    Args:
        value: Decimal, int, float or numeric string

    Returns:
        Decimal: The converted amount

    Raises:
        decimal.InvalidOperation: If a string is not numeric
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def quantize_cents(amount: Decimal) -> Decimal:
    """
    Round to two decimal places, half up.

    Amounts too large to carry cents at the current precision, and
    infinities, are returned unrounded.
    """
    if not amount.is_finite():
        return amount
    try:
        return amount.quantize(CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return amount


def normalize(amount: Decimal) -> str:
    """Render a Decimal without exponent or trailing zeros ("40", "12.5")."""
    return format(amount.normalize(), 'f')


def format_money(amount: Decimal, currency: str = "USD") -> str:
    return f"{quantize_cents(amount):.2f} {currency}"
