"""
Cart scan and operation assembly.

Walks the cart lines in host order and emits one percentage-decrease
instruction per line carrying a usable `_Price` attribute. Lines without
one get no instruction of any kind. Nothing is retained between calls.
"""

from typing import Iterable, List, Tuple

from .calculator import calculate_discount_percentage
from .extractor import extract_target_price
from .models import CartLine, DiscountInstruction, LineReport, TransformReport
from .schemas import FunctionInput, FunctionResult
from ..utils.logger_setup import get_logger

logger = get_logger(__name__)


def scan_cart(lines: Iterable[CartLine]) -> TransformReport:
    """
    Scan the cart and keep per-line detail alongside the instructions.

    Args:
        lines: Cart lines in the order supplied by the host

    Returns:
        TransformReport: Instructions in encounter order plus one LineReport per line
    """
    report = TransformReport()

    for line in lines:
        line_report = LineReport(
            cart_line_id=line.id,
            unit_price=line.unit_price,
            currency_code=line.currency_code,
        )
        report.lines.append(line_report)

        target_price = extract_target_price(line.attributes)
        if target_price is None:
            continue

        percentage = calculate_discount_percentage(line.unit_price, target_price)
        report.instructions.append(
            DiscountInstruction(cart_line_id=line.id, percentage=percentage)
        )

        line_report.target_price = target_price
        line_report.percentage = percentage
        logger.debug(
            f"Line {line.id}: unit price {line.unit_price}, target {target_price}, "
            f"decrease {percentage}%"
        )

    return report


def transform_cart(lines: Iterable[CartLine]) -> List[DiscountInstruction]:
    """
    Compute the discount instructions for a cart snapshot.

    Args:
        lines: Cart lines in the order supplied by the host

    Returns:
        List[DiscountInstruction]: One instruction per matching line, in encounter order
    """
    return scan_cart(lines).instructions


class CartTransformer:
    """Runs the scan over wire-format documents."""

    def run(self, function_input: FunctionInput) -> FunctionResult:
        """Transform an input document into a result document."""
        return self.run_with_report(function_input)[0]

    def run_with_report(self, function_input: FunctionInput) -> Tuple[FunctionResult, TransformReport]:
        """Transform an input document and return the scan report with it."""
        report = scan_cart(function_input.to_cart_lines())
        logger.info(
            f"Scanned {report.lines_scanned} cart line(s), "
            f"emitted {report.lines_matched} price update(s)"
        )
        return FunctionResult.from_instructions(report.instructions), report
