"""Configuration file management for gocost."""

import json
import logging
import os
from pathlib import Path
from typing import Any

from gocost.errors import ConfigError

logger = logging.getLogger(__name__)

CURRENCY_FIELD = "currency"
DATA_DIR_FIELD = "dataDir"
DATA_FILE_FIELD = "dataFilename"

DEFAULT_CURRENCY = "RON"
DEFAULT_DATA_FILENAME = "expenses_data.json"
CONFIG_FILENAME = "config.json"


def get_config_dir() -> Path:
    """Get the gocost directory, with GOCOST_HOME taking precedence over ~/.gocost."""
    override = os.environ.get("GOCOST_HOME")
    if override:
        return Path(override)
    return Path.home() / ".gocost"


def get_config_path() -> Path:
    """Get the config file path.

    Returns:
        Path to the config file.
    """
    return get_config_dir() / CONFIG_FILENAME


def default_config(data_dir: Path, currency: str = DEFAULT_CURRENCY) -> dict[str, Any]:
    """Build the default configuration for a data directory."""
    return {
        CURRENCY_FIELD: currency,
        DATA_DIR_FIELD: str(data_dir),
        DATA_FILE_FIELD: str(data_dir / DEFAULT_DATA_FILENAME),
    }


def normalize_currency(value: str) -> str:
    """Trim and upper-case a currency code, falling back to the default."""
    currency = value.strip().upper()
    return currency or DEFAULT_CURRENCY


def create_default_config(config_path: Path | None = None, currency: str = DEFAULT_CURRENCY) -> dict[str, Any]:
    """Create the default config file.

    Args:
        config_path: Path to config file. If None, uses default location.
        currency: Default currency to record.

    Returns:
        The configuration that was written.

    Raises:
        ConfigError: If the directory or file cannot be written.
    """
    if config_path is None:
        config_path = get_config_path()

    config = default_config(config_path.parent, normalize_currency(currency))
    save_config(config, config_path)
    logger.info("Created config file at %s", config_path)
    return config


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration, creating it with defaults on first run.

    Missing or empty fields fall back to their defaults.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary with all three fields set.

    Raises:
        ConfigError: If the file cannot be read, is not a JSON object, or
            holds a non-string field.
    """
    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        return create_default_config(config_path)

    try:
        with open(config_path, encoding="utf-8") as f:
            stored = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"failed to parse config file {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"failed to read config file {config_path}: {e}") from e

    if not isinstance(stored, dict):
        raise ConfigError(f"config file {config_path} must contain a JSON object")

    for field in (CURRENCY_FIELD, DATA_DIR_FIELD, DATA_FILE_FIELD):
        value = stored.get(field)
        if value is not None and not isinstance(value, str):
            raise ConfigError(f"config field '{field}' in {config_path} must be a string, got {value!r}")

    data_dir = Path(stored.get(DATA_DIR_FIELD) or config_path.parent)
    config = default_config(data_dir)
    config.update({key: value for key, value in stored.items() if value})
    return config


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to the JSON file.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file. If None, uses default location.

    Raises:
        ConfigError: If the directory or file cannot be written.
    """
    if config_path is None:
        config_path = get_config_path()

    try:
        config_path.parent.mkdir(mode=0o755, parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(config, f, indent=2)
    except OSError as e:
        raise ConfigError(f"failed to write config file {config_path}: {e}") from e


def get_data_path(config: dict[str, Any]) -> Path:
    """Get the data document path from a loaded configuration."""
    return Path(config[DATA_FILE_FIELD]).expanduser()
