"""Utility modules."""

from .logger_setup import get_logger, LoggerManager
from .money import format_money, to_decimal

__all__ = [
    # Logging utilities
    "get_logger",
    "LoggerManager",
    # Money utilities
    "format_money",
    "to_decimal",
]
