"""
Configuration management for Cart Price Transform.

Handles loading, saving, and validating configuration settings. The
reserved `_Price` attribute key is a constant, not a setting.
"""

import os
import shutil
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from dotenv import load_dotenv

from ..utils.logger_setup import LoggerManager, get_logger

logger = get_logger(__name__)

# Environment variables from a .env file in the working directory
load_dotenv(Path.cwd() / ".env")

VALID_LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
VALID_OUTPUT_FORMATS = ['json', 'yaml']


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "WARNING"
    log_file: Optional[str] = None
    console: bool = True

    def __post_init__(self):
        """Allow environment overrides."""
        self.level = os.getenv("CART_TRANSFORM_LOG_LEVEL", self.level)
        log_file_env = os.getenv("CART_TRANSFORM_LOG_FILE")
        if log_file_env:  # Only set if env var is not empty
            self.log_file = log_file_env


@dataclass
class OutputConfig:
    """Result document output configuration."""
    format: str = "json"  # json, yaml
    indent: int = 2


@dataclass
class Config:
    """Main configuration class."""
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Config':
        """Create Config from dictionary."""
        return cls(
            logging=LoggingConfig(**(data.get('logging') or {})),
            output=OutputConfig(**(data.get('output') or {})),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert Config to dictionary."""
        return {
            'logging': asdict(self.logging),
            'output': asdict(self.output),
        }


class ConfigManager:
    """Manages configuration loading, saving, and resolution."""

    DEFAULT_CONFIG_DIR = ".cart-price-transform"
    DEFAULT_CONFIG_FILE = "config.yaml"

    def __init__(self, project_root: Optional[str] = None):
        """
        Initialize ConfigManager.

        Args:
            project_root: Directory holding the config directory. If None, uses current directory.
        """
        self.project_root = Path(project_root or os.getcwd())
        self.config_dir = self.project_root / self.DEFAULT_CONFIG_DIR
        self.config_file = self.config_dir / self.DEFAULT_CONFIG_FILE

    def load(self) -> Config:
        """
        Load configuration from file or create default.

        Returns:
            Loaded or default configuration
        """
        if self.config_file.exists():
            return self._load_from_file()
        return Config()

    def _load_from_file(self) -> Config:
        """Load configuration from YAML file, falling back to defaults on error."""
        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}

            data = self._resolve_env_vars(data)
            return Config.from_dict(data)
        except (OSError, yaml.YAMLError, TypeError, AttributeError) as e:
            logger.warning(f"Error loading config file: {e}")
            logger.info("Using default configuration.")
            return Config()

    def save(self, config: Config):
        """
        Save configuration to file.

        Args:
            config: Configuration to save
        """
        self.config_dir.mkdir(parents=True, exist_ok=True)

        with open(self.config_file, 'w', encoding='utf-8') as f:
            yaml.dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)

    def init_config(self, overwrite: bool = False) -> bool:
        """
        Initialize configuration file with defaults.

        Args:
            overwrite: Whether to overwrite existing config

        Returns:
            True if config was created/updated, False otherwise
        """
        if self.config_file.exists() and not overwrite:
            logger.info(f"Configuration already exists at: {self.config_file}")
            return False

        if overwrite and self.config_file.exists():
            self.config_file.unlink()
            logger.info("Removed existing configuration file")

        self.save(Config())

        logger.info(f"Configuration initialized at: {self.config_file}")
        return True

    def _resolve_env_vars(self, data: Any) -> Any:
        """
        Recursively resolve environment variables in configuration.

        Supports ${VAR_NAME} syntax.
        """
        if isinstance(data, dict):
            return {k: self._resolve_env_vars(v) for k, v in data.items()}
        elif isinstance(data, list):
            return [self._resolve_env_vars(item) for item in data]
        elif isinstance(data, str):
            if data.startswith('${') and data.endswith('}'):
                var_name = data[2:-1]
                return os.environ.get(var_name, data)
        return data

    def validate(self, config: Config) -> List[str]:
        """
        Validate configuration.

        Args:
            config: Configuration to validate

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if str(config.logging.level).upper() not in VALID_LOG_LEVELS:
            errors.append(f"Invalid log level: {config.logging.level}")

        if config.output.format not in VALID_OUTPUT_FORMATS:
            errors.append(f"Invalid output format: {config.output.format}")

        if not isinstance(config.output.indent, int) or config.output.indent < 0:
            errors.append(f"Invalid output indent: {config.output.indent}")

        return errors

    def cleanup(self) -> bool:
        """
        Remove configuration directory and all its contents.

        Returns:
            True if cleanup was successful, False otherwise
        """
        if not self.config_dir.exists():
            logger.info(f"No configuration found at: {self.config_dir}")
            return False

        # Release file handlers in case the log file lives in the config dir
        LoggerManager.reset()
        shutil.rmtree(self.config_dir)
        return True
