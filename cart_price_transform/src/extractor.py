"""
Target price extraction from cart line attributes.

A line opts into a custom price by carrying the reserved `_Price`
attribute, e.g. `{"key": "_Price", "value": "$600"}`. Values that do not
parse are skipped without raising so that one bad line never blocks the
rest of the cart.
"""

from decimal import Decimal, InvalidOperation
from typing import Iterable, Optional

from .constants import PRICE_ATTRIBUTE_KEY, PRICE_NUMBER_PATTERN, PRICE_VALUE_PREFIX
from .models import Attribute
from ..utils.logger_setup import get_logger

logger = get_logger(__name__)


def parse_price_value(value: str) -> Optional[Decimal]:
    """
    Parse a "$<number>" attribute value.

    Only a single leading "$" is stripped. The remainder must be a plain
    '.'-separated decimal with no thousands separators or whitespace.

    Args:
        value (str): Raw attribute value

    Returns:
        Optional[Decimal]: Parsed target price, or None if the value is malformed

    Example:
        >>> parse_price_value("$19.99")
        Decimal('19.99')
        >>> parse_price_value("600") is None
        True
        >>> parse_price_value("$$600") is None
        True
    """
    if not isinstance(value, str) or not value.startswith(PRICE_VALUE_PREFIX):
        return None

    number = value[len(PRICE_VALUE_PREFIX):]
    if not PRICE_NUMBER_PATTERN.fullmatch(number):
        return None

    try:
        price = Decimal(number)
    except InvalidOperation:
        return None

    if not price.is_finite():
        return None
    return price


def extract_target_price(attributes: Optional[Iterable[Attribute]]) -> Optional[Decimal]:
    """
    Find the target price among a line's attributes.

    Scans in iteration order and returns the first `_Price` entry whose
    value parses. Duplicate keys are allowed; a malformed earlier entry
    does not hide a valid later one.

    Args:
        attributes: The line's attributes, or None when it has none

    Returns:
        Optional[Decimal]: Target price, or None when no usable entry exists
    """
    if not attributes:
        return None

    for attribute in attributes:
        if attribute.key != PRICE_ATTRIBUTE_KEY:
            continue
        price = parse_price_value(attribute.value)
        if price is not None:
            return price
        logger.debug(f"Ignoring malformed {PRICE_ATTRIBUTE_KEY} value: {attribute.value!r}")

    return None
