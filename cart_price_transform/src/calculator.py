"""
Discount percentage arithmetic.

Maps (original unit price, target price) to the percentage decrease the
host must apply so the line ends up at the target price.
"""

from decimal import Decimal, Overflow, localcontext

from .constants import MAX_PERCENTAGE, MIN_PERCENTAGE
from ..utils.money import Number, quantize_cents, to_decimal


def clamp_percentage(percentage: Decimal) -> Decimal:
    """Clamp to the closed interval [0, 100]."""
    return max(MIN_PERCENTAGE, min(MAX_PERCENTAGE, percentage))


def calculate_discount_percentage(original_price: Number, target_price: Number) -> Decimal:
    """
    Compute the percentage decrease from original_price down to target_price.

    A non-positive original price yields 0 since no meaningful discount can
    be expressed against it. A target above the original yields 0 (never a
    premium) and a negative target is capped at 100.

    Args:
        original_price: Current unit price of the line
        target_price: Price the line should end up at

    Returns:
        Decimal: Percentage in [0, 100]

    Example:
        >>> calculate_discount_percentage(1000, 600)
        Decimal('40.0')
        >>> calculate_discount_percentage(1000, 1500)
        Decimal('0')
    """
    original = to_decimal(original_price)
    target = to_decimal(target_price)

    if original <= 0:
        return MIN_PERCENTAGE

    # Absurd exponents saturate to +/-Infinity instead of raising, then clamp
    with localcontext() as ctx:
        ctx.traps[Overflow] = False
        difference = original - target
        percentage = (difference / original) * 100

    return clamp_percentage(percentage)


def adjusted_unit_price(original_price: Number, percentage: Number) -> Decimal:
    """
    Price the host charges once the percentage decrease is applied.

    Args:
        original_price: Current unit price of the line
        percentage: Percentage decrease in [0, 100]

    Returns:
        Decimal: Adjusted price rounded to cents where precision allows
    """
    original = to_decimal(original_price)
    decrease = clamp_percentage(to_decimal(percentage))

    with localcontext() as ctx:
        ctx.traps[Overflow] = False
        adjusted = original * (MAX_PERCENTAGE - decrease) / MAX_PERCENTAGE

    return quantize_cents(adjusted)
