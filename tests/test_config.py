"""Test configuration loading, validation and logging setup."""

import logging

import yaml

from cart_price_transform.src.config import Config, ConfigManager, LoggingConfig
from cart_price_transform.utils.logger_setup import LoggerManager, get_logger


def test_defaults_without_file(tmp_path):
    """A missing config file gives defaults."""
    config = ConfigManager(str(tmp_path)).load()

    assert config.output.format == "json"
    assert config.output.indent == 2
    assert config.logging.console is True


def test_save_and_load(tmp_path):
    """Saved config loads back identically."""
    manager = ConfigManager(str(tmp_path))
    config = Config()
    config.output.indent = 4
    config.logging.level = "DEBUG"

    manager.save(config)
    loaded = manager.load()

    assert loaded.to_dict() == config.to_dict()


def test_env_var_references_resolved(tmp_path, monkeypatch):
    """${VAR} values are read from the environment."""
    monkeypatch.setenv("CART_LOG_PATH", str(tmp_path / "transform.log"))
    manager = ConfigManager(str(tmp_path))
    manager.config_dir.mkdir()
    manager.config_file.write_text(
        yaml.safe_dump({"logging": {"log_file": "${CART_LOG_PATH}"}}), encoding="utf-8"
    )

    assert manager.load().logging.log_file == str(tmp_path / "transform.log")


def test_env_overrides_log_level(monkeypatch):
    """CART_TRANSFORM_LOG_LEVEL wins over the default."""
    monkeypatch.setenv("CART_TRANSFORM_LOG_LEVEL", "DEBUG")
    assert LoggingConfig().level == "DEBUG"


def test_broken_file_falls_back_to_defaults(tmp_path):
    """Unknown keys or bad YAML do not crash loading."""
    manager = ConfigManager(str(tmp_path))
    manager.config_dir.mkdir()

    manager.config_file.write_text("output: {colour: blue}\n", encoding="utf-8")
    assert manager.load().to_dict() == Config().to_dict()

    manager.config_file.write_text("output: [unclosed\n", encoding="utf-8")
    assert manager.load().to_dict() == Config().to_dict()


def test_validate(tmp_path):
    """Invalid values are reported, valid config has no errors."""
    manager = ConfigManager(str(tmp_path))
    assert manager.validate(Config()) == []

    config = Config()
    config.logging.level = "LOUD"
    config.output.format = "xml"
    config.output.indent = -1

    errors = manager.validate(config)

    assert "Invalid log level: LOUD" in errors
    assert "Invalid output format: xml" in errors
    assert "Invalid output indent: -1" in errors


def test_init_config_respects_overwrite(tmp_path):
    """init_config only replaces an existing file when asked."""
    manager = ConfigManager(str(tmp_path))

    assert manager.init_config() is True
    assert manager.init_config() is False
    assert manager.init_config(overwrite=True) is True
    assert manager.cleanup() is True
    assert not manager.config_dir.exists()
    assert manager.cleanup() is False


def test_logging_to_file(tmp_path):
    """Module loggers write through the package root logger."""
    log_file = tmp_path / "logs" / "transform.log"
    LoggerManager.reset()
    try:
        LoggerManager.setup_logging(log_file=str(log_file), level="DEBUG")
        logger = get_logger("cart_price_transform.src.transformer")
        assert logger.name == "cart_price_transform.src.transformer"

        logger.debug("scanned 3 lines")
        for handler in logging.getLogger("cart_price_transform").handlers:
            handler.flush()

        content = log_file.read_text(encoding="utf-8")
        assert "cart_price_transform.src.transformer - DEBUG - scanned 3 lines" in content
    finally:
        LoggerManager.reset()
