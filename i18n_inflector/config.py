"""
Configuration for i18n_inflector

Resolves package settings with this priority:
1. I18N_INFLECTOR_LOG_LEVEL environment variable
2. log_level key in the YAML config file
   (I18N_INFLECTOR_CONFIG, else ~/.i18n_inflector/config.yaml)
3. Default (WARNING)

Settings only affect diagnostics; they never change inflection results.

Author: i18n_inflector Team
License: Apache 2.0
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

import yaml

from i18n_inflector.exceptions import ConfigError

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV_VAR = "I18N_INFLECTOR_LOG_LEVEL"
CONFIG_PATH_ENV_VAR = "I18N_INFLECTOR_CONFIG"
DEFAULT_CONFIG_PATH = Path.home() / ".i18n_inflector" / "config.yaml"
DEFAULT_LOG_LEVEL = "WARNING"

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class InflectorConfig:
    """Resolved settings and where they came from ('env', 'file' or 'default')."""

    log_level: str = DEFAULT_LOG_LEVEL
    source: str = "default"


def _validate_level(value, origin: str) -> str:
    level = str(value).strip().upper()
    if level not in VALID_LOG_LEVELS:
        raise ConfigError(
            f"Invalid log level '{value}' in {origin}. "
            f"Expected one of: {', '.join(VALID_LOG_LEVELS)}"
        )
    return level


def config_path() -> Path:
    """Return the config file path, honoring I18N_INFLECTOR_CONFIG."""
    override = os.environ.get(CONFIG_PATH_ENV_VAR, "").strip()
    return Path(override).expanduser() if override else DEFAULT_CONFIG_PATH


def _read_config_file(path: Path) -> dict:
    if not path.exists():
        logger.debug(f"No config file at {path}")
        return {}

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Could not read config file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping, got {type(data).__name__}")
    return data


def load_config(path: str | Path | None = None) -> InflectorConfig:
    """
    Resolve the package configuration.

    Args:
        path: Config file to read instead of the default location

    Returns:
        Resolved configuration

    Raises:
        ConfigError: If the config file is unreadable or malformed, or a
            log level is not a valid level name

    Example:
        >>> load_config('/nonexistent.yaml').source in ('env', 'default')
        True
    """
    env_level = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip()
    if env_level:
        level = _validate_level(env_level, LOG_LEVEL_ENV_VAR)
        logger.debug(f"Using {LOG_LEVEL_ENV_VAR} env var: {level}")
        return InflectorConfig(log_level=level, source="env")

    file_path = Path(path).expanduser() if path is not None else config_path()
    data = _read_config_file(file_path)
    if "log_level" in data:
        level = _validate_level(data["log_level"], str(file_path))
        logger.debug(f"Using config file log level: {level}")
        return InflectorConfig(log_level=level, source="file")

    return InflectorConfig()


def configure_logging(config: InflectorConfig | None = None) -> logging.Logger:
    """
    Apply the configured log level to the i18n_inflector logger hierarchy.

    The library never installs handlers by itself; call this from an
    application that wants the package's diagnostics.

    Args:
        config: Settings to apply; resolved with load_config() if omitted

    Returns:
        The package's root logger
    """
    if config is None:
        config = load_config()

    package_logger = logging.getLogger("i18n_inflector")
    package_logger.setLevel(config.log_level)
    return package_logger
