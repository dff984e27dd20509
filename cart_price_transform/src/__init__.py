"""Core functionality modules."""

from .calculator import adjusted_unit_price, calculate_discount_percentage, clamp_percentage
from .cli import cli, main
from .config import Config, ConfigManager, LoggingConfig, OutputConfig
from .constants import PRICE_ATTRIBUTE_KEY
from .errors import CartTransformError, InputDocumentError
from .extractor import extract_target_price, parse_price_value
from .models import Attribute, CartLine, DiscountInstruction, LineReport, TransformReport
from .schemas import FunctionInput, FunctionResult, parse_function_input
from .transformer import CartTransformer, scan_cart, transform_cart

__all__ = [
    # Calculator
    "adjusted_unit_price",
    "calculate_discount_percentage",
    "clamp_percentage",
    # CLI
    "cli",
    "main",
    # Config
    "Config",
    "ConfigManager",
    "LoggingConfig",
    "OutputConfig",
    # Constants
    "PRICE_ATTRIBUTE_KEY",
    # Errors
    "CartTransformError",
    "InputDocumentError",
    # Extraction
    "extract_target_price",
    "parse_price_value",
    # Models
    "Attribute",
    "CartLine",
    "DiscountInstruction",
    "LineReport",
    "TransformReport",
    # Schemas
    "FunctionInput",
    "FunctionResult",
    "parse_function_input",
    # Transformer
    "CartTransformer",
    "scan_cart",
    "transform_cart",
]
