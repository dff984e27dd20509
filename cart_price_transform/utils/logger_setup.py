"""
Centralized logging configuration for cart-price-transform.

Provides a simple, consistent logging interface across all modules.
Console output goes to stderr so result documents written to stdout
stay clean.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

ROOT_LOGGER_NAME = 'cart_price_transform'


class LoggerManager:
    """Manages logging configuration for the application."""

    _initialized = False
    _log_file = None

    @classmethod
    def setup_logging(cls, log_file: Optional[str] = None, level: str = "WARNING", console: bool = False):
        """
        Setup logging configuration.

        Args:
            log_file (Optional[str]): Path to log file. If None, no file handler is added.
            level (str): Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            console (bool): Enable console logging on stderr
        """
        if cls._initialized:
            return

        # Convert string level to logging constant
        numeric_level = getattr(logging, level.upper(), logging.WARNING)

        formatter = logging.Formatter(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        root_logger.setLevel(numeric_level)
        root_logger.handlers.clear()

        if console:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(numeric_level)
            console_handler.setFormatter(formatter)
            root_logger.addHandler(console_handler)

        if log_file:
            cls._log_file = Path(log_file)
            cls._log_file.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(cls._log_file, encoding='utf-8')
            file_handler.setLevel(numeric_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)

        if not root_logger.handlers:
            root_logger.addHandler(logging.NullHandler())

        cls._initialized = True

    @classmethod
    def reset(cls):
        """Close handlers and allow setup_logging() to run again."""
        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        for handler in root_logger.handlers[:]:
            handler.close()
            root_logger.removeHandler(handler)
        cls._initialized = False
        cls._log_file = None

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """
        Get a logger for a specific module.

        Args:
            name (str): Module name (usually __name__)

        Returns:
            logging.Logger: Logger nested under the package root logger
        """
        if name.startswith(ROOT_LOGGER_NAME):
            return logging.getLogger(name)
        return logging.getLogger(f'{ROOT_LOGGER_NAME}.{name}')


def get_logger(name: str) -> logging.Logger:
    """
    Convenience function to get a logger.

    Args:
        name (str): Module name (usually __name__)

    Returns:
        logging.Logger: Configured logger instance
    """
    return LoggerManager.get_logger(name)
