"""Configuration management.

This module handles:
- Resolving the config file location (argument, environment, working directory)
- Creating the default config on first run
- Loading/saving the bridge URL, username and light aliases
"""

import json
import os
from pathlib import Path

from core.errors import ConfigError
from models.types import Config

# Configuration file path, relative to the working directory
CONFIG_FILE = Path('config.json')
ENV_CONFIG_PATH = 'HUE_CLI_CONFIG'


def resolve_config_path(path: str | Path | None = None) -> Path:
    """Return the config file to use.

    Priority order:
    1. Explicit path (e.g. from --config)
    2. HUE_CLI_CONFIG environment variable
    3. config.json in the working directory
    """
    if path is not None:
        return Path(path)

    env_path = os.getenv(ENV_CONFIG_PATH)
    if env_path:
        return Path(env_path)

    return CONFIG_FILE


def load_config(path: str | Path | None = None) -> Config:
    """Load configuration, creating a default file if none exists.

    Args:
        path: Optional config file location

    Returns:
        The parsed Config

    Raises:
        ConfigError: If the file cannot be read or parsed
    """
    config_path = resolve_config_path(path)

    if not config_path.exists():
        save_config(Config(), config_path)

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ConfigError(f"Invalid JSON in configuration file '{config_path}': {e}") from e
    except OSError as e:
        raise ConfigError(f"Unable to read configuration file '{config_path}': {e}") from e

    try:
        return Config.from_dict(data)
    except ValueError as e:
        raise ConfigError(f"Invalid configuration file '{config_path}': {e}") from e


def save_config(config: Config, path: str | Path | None = None):
    """Overwrite the config file with the given configuration.

    Args:
        config: Configuration to save
        path: Optional config file location

    Raises:
        ConfigError: If the file cannot be written
    """
    config_path = resolve_config_path(path)

    try:
        # Create parent directory if it doesn't exist
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, 'w', encoding='utf-8') as f:
            json.dump(config.to_dict(), f, indent=2)
    except OSError as e:
        raise ConfigError(f"Unable to write configuration file '{config_path}': {e}") from e
