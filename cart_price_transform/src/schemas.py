"""
Wire schemas for the checkout function documents.

Pydantic models mirroring the JSON the host sends (cart lines with cost and
attributes) and the JSON it expects back (a list of cart line update
operations). Field names are snake_case in Python and camelCase on the
wire. These models only translate; all pricing logic lives in the core
modules and works on the dataclasses from models.py.
"""

import json
from decimal import Decimal
from typing import Any, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_serializer, field_validator

from .constants import DEFAULT_CURRENCY
from .errors import InputDocumentError
from .models import Attribute, CartLine, DiscountInstruction
from ..utils.money import normalize


class WireModel(BaseModel):
    """Base model accepting either camelCase aliases or field names."""
    model_config = ConfigDict(populate_by_name=True)


# ============================================================================
# Input document
# ============================================================================

class AttributeSchema(WireModel):
    """Line attribute as a key/value pair."""
    key: str = Field(..., description="Attribute key, e.g. '_Price'")
    value: Optional[str] = Field(None, description="Attribute value, e.g. '$600'")


class MoneySchema(WireModel):
    """Amount with its currency."""
    amount: Decimal = Field(..., description="Decimal amount, string or number")
    currency_code: str = Field(DEFAULT_CURRENCY, alias="currencyCode")

    @field_validator('amount')
    @classmethod
    def require_finite(cls, v: Decimal) -> Decimal:
        """Reject NaN and infinities."""
        if not v.is_finite():
            raise ValueError("amount must be a finite number")
        return v


class CostSchema(WireModel):
    """Line cost breakdown; only the per-unit amount is consumed."""
    amount_per_quantity: MoneySchema = Field(..., alias="amountPerQuantity")


class CartLineSchema(WireModel):
    """Single cart line as sent by the host."""
    id: str
    cost: CostSchema
    attribute: Optional[List[AttributeSchema]] = Field(
        None,
        description="Line attributes; a single object or null is also accepted"
    )

    @field_validator('attribute', mode='before')
    @classmethod
    def wrap_single_attribute(cls, v: Any) -> Any:
        """Treat a lone attribute object as a one-element list."""
        if isinstance(v, dict):
            return [v]
        return v

    def to_cart_line(self) -> CartLine:
        attributes = None
        if self.attribute is not None:
            attributes = [
                Attribute(key=a.key, value=a.value if a.value is not None else "")
                for a in self.attribute
            ]
        money = self.cost.amount_per_quantity
        return CartLine(
            id=self.id,
            unit_price=money.amount,
            attributes=attributes,
            currency_code=money.currency_code,
        )


class CartSchema(WireModel):
    lines: List[CartLineSchema] = Field(default_factory=list)


class FunctionInput(WireModel):
    """Input document: the cart snapshot."""
    cart: CartSchema

    def to_cart_lines(self) -> List[CartLine]:
        """Convert to core cart lines, preserving order."""
        return [line.to_cart_line() for line in self.cart.lines]


# ============================================================================
# Result document
# ============================================================================

class PercentageSchema(WireModel):
    value: Decimal

    @field_serializer('value')
    def serialize_value(self, value: Decimal) -> str:
        """Plain decimal string without exponent, e.g. "40" or "12.5"."""
        return normalize(value)


class PriceAdjustmentSchema(WireModel):
    percentage_decrease: PercentageSchema = Field(..., alias="percentageDecrease")


class PriceSchema(WireModel):
    adjustment: PriceAdjustmentSchema


class CartLineUpdateSchema(WireModel):
    cart_line_id: str = Field(..., alias="cartLineId")
    price: Optional[PriceSchema] = None
    title: Optional[str] = None


class CartOperationSchema(WireModel):
    update: CartLineUpdateSchema


class FunctionResult(WireModel):
    """Result document: operations for the host to apply."""
    operations: List[CartOperationSchema] = Field(default_factory=list)

    @classmethod
    def from_instructions(cls, instructions: Iterable[DiscountInstruction]) -> 'FunctionResult':
        """Build update operations from discount instructions, keeping order."""
        operations = []
        for instruction in instructions:
            adjustment = PriceAdjustmentSchema(
                percentage_decrease=PercentageSchema(value=instruction.percentage)
            )
            operations.append(CartOperationSchema(
                update=CartLineUpdateSchema(
                    cart_line_id=instruction.cart_line_id,
                    price=PriceSchema(adjustment=adjustment),
                )
            ))
        return cls(operations=operations)

    def to_instructions(self) -> List[DiscountInstruction]:
        """Convert priced update operations back to discount instructions."""
        return [
            DiscountInstruction(
                cart_line_id=op.update.cart_line_id,
                percentage=op.update.price.adjustment.percentage_decrease.value,
            )
            for op in self.operations
            if op.update.price is not None
        ]

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize with camelCase keys; `title` is emitted as null."""
        return self.model_dump_json(by_alias=True, indent=indent)


def parse_function_input(text: str) -> FunctionInput:
    """
    Parse and validate an input document.

    Args:
        text (str): Raw JSON text

    Returns:
        FunctionInput: Validated document

    Raises:
        InputDocumentError: If the text is not JSON or does not match the schema
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InputDocumentError(f"Input is not valid JSON: {e}") from e

    try:
        return FunctionInput.model_validate(data)
    except ValidationError as e:
        raise InputDocumentError(
            f"Input does not match the cart schema ({e.error_count()} error(s))",
            details=e.errors(),
        ) from e
