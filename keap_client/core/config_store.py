"""Configuration and persistence for client settings."""

import json
import logging
import os
from pathlib import Path

from .models import ConfigurationError, EngineSettings

logger = logging.getLogger(__name__)

SETTINGS_FILE = "settings.json"


def get_base_dir() -> Path:
    """
    Get the base directory for storing configuration.

    The directory is determined by:
    1. Environment variable KEAP_CLIENT_HOME if set
    2. Otherwise, ~/.keap_client

    The directory is created if it does not exist.

    Returns:
        Path to the base directory
    """
    env_home = os.environ.get("KEAP_CLIENT_HOME")
    if env_home:
        base_dir = Path(env_home)
    else:
        base_dir = Path.home() / ".keap_client"

    base_dir.mkdir(parents=True, exist_ok=True)
    return base_dir


def settings_path() -> Path:
    """Path of the persisted settings file."""
    return get_base_dir() / SETTINGS_FILE


def save_settings(settings: EngineSettings) -> Path:
    """
    Save engine settings to disk. The API key is never written.

    Args:
        settings: Settings to save

    Returns:
        Path to the saved file
    """
    path = settings_path()

    try:
        with open(path, "w") as f:
            json.dump(settings.to_dict(), f, indent=2)
        logger.debug(f"Saved settings to {path}")
        return path
    except OSError as e:
        raise ConfigurationError(f"Failed to save settings to {path}: {e}")


def load_settings(api_key: str | None = None) -> EngineSettings:
    """
    Load engine settings.

    Values from the settings file override the defaults. The API key comes
    from the argument, falling back to the KEAP_API_KEY environment variable.

    Args:
        api_key: Explicit API key

    Returns:
        The loaded EngineSettings

    Raises:
        ConfigurationError: If the settings file is unreadable or invalid
    """
    if api_key is None:
        api_key = os.environ.get("KEAP_API_KEY")

    path = settings_path()
    if not path.exists():
        logger.debug(f"No settings file at {path}, using defaults")
        return EngineSettings(api_key=api_key)

    try:
        with open(path, "r") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in {path}: {e}")
    except OSError as e:
        raise ConfigurationError(f"Failed to load settings from {path}: {e}")

    if not isinstance(data, dict):
        raise ConfigurationError(f"Settings in {path} must be a JSON object")

    try:
        settings = EngineSettings.from_dict(data, api_key=api_key)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Failed to parse settings in {path}: {e}")

    logger.debug(f"Loaded settings from {path}")
    return settings
