"""
Core data structures for the cart scan.

Plain dataclasses mirroring the fields the host supplies and the
instructions it receives back. Wire formats live in schemas.py.
"""

from dataclasses import dataclass, field, asdict
from decimal import Decimal
from typing import Any, Dict, List, Optional

from .constants import DEFAULT_CURRENCY
from ..utils.money import to_decimal


@dataclass(frozen=True)
class Attribute:
    """A single key/value annotation on a cart line."""
    key: str
    value: str


@dataclass(frozen=True)
class CartLine:
    """One line of the cart snapshot, read-only to this package."""
    id: str
    unit_price: Decimal
    attributes: Optional[List[Attribute]] = None  # None when the line has no attributes at all
    currency_code: str = DEFAULT_CURRENCY

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CartLine':
        """
        Create from a plain dictionary.

        Attributes may be given as a list of {"key", "value"} dicts or as a
        mapping; a mapping keeps its iteration order.
        """
        raw_attributes = data.get('attributes')
        attributes = None
        if isinstance(raw_attributes, dict):
            attributes = [Attribute(key=k, value=v) for k, v in raw_attributes.items()]
        elif raw_attributes is not None:
            attributes = [Attribute(key=a['key'], value=a['value']) for a in raw_attributes]

        return cls(
            id=data['id'],
            unit_price=to_decimal(data['unit_price']),
            attributes=attributes,
            currency_code=data.get('currency_code', DEFAULT_CURRENCY),
        )


@dataclass(frozen=True)
class DiscountInstruction:
    """Set line `cart_line_id` to its price decreased by `percentage` percent."""
    cart_line_id: str
    percentage: Decimal

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)


@dataclass
class LineReport:
    """Per-line outcome of a scan, used for CLI summaries."""
    cart_line_id: str
    unit_price: Decimal
    target_price: Optional[Decimal] = None
    percentage: Optional[Decimal] = None
    currency_code: str = DEFAULT_CURRENCY

    @property
    def matched(self) -> bool:
        return self.percentage is not None


@dataclass
class TransformReport:
    """Instructions plus per-line detail for one scan."""
    instructions: List[DiscountInstruction] = field(default_factory=list)
    lines: List[LineReport] = field(default_factory=list)

    @property
    def lines_scanned(self) -> int:
        return len(self.lines)

    @property
    def lines_matched(self) -> int:
        return len(self.instructions)
