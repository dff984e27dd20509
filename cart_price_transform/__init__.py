"""
Turns custom target prices on cart lines into percentage discounts.

Cart lines carrying a `_Price` attribute (e.g. "$600") get a
percentage-decrease price update that brings their unit price down to the
target. Every other line is left alone.

Typical usage example:

from cart_price_transform import CartLine, Attribute, transform_cart
lines = [CartLine(id="gid://1", unit_price=Decimal("1000"),
                  attributes=[Attribute("_Price", "$600")])]
transform_cart(lines)  # [DiscountInstruction(cart_line_id='gid://1', percentage=Decimal('40.0'))]
"""

from .src.models import Attribute, CartLine, DiscountInstruction
from .src.transformer import CartTransformer, transform_cart

__version__ = "0.1.0"
__author__ = "AI Innovation Hub"

__all__ = [
    "Attribute",
    "CartLine",
    "DiscountInstruction",
    "CartTransformer",
    "transform_cart",
]
