"""Configuration management for Tax Calc.

Machine-specific settings live in settings.json:
   - tax_year: default year for tax rules lookup (e.g., "2025")
   - data_dir: custom data directory for salary records

Config directory resolution:
1. TAX_CALC_CONFIG_PATH environment variable (if set)
2. ~/.config/tax-calc/ (XDG_CONFIG_HOME fallback)

Data directory resolution:
1. settings.json "data_dir" key (if set via CLI)
2. XDG_DATA_HOME/tax-calc/ or ~/.local/share/tax-calc/
"""

import json
import os
from pathlib import Path
from typing import Any


APP_NAME = "tax-calc"
SETTINGS_FILENAME = "settings.json"


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Resolution order:
    1. TAX_CALC_CONFIG_PATH environment variable
    2. ~/.config/tax-calc/ (XDG_CONFIG_HOME)

    Returns:
        Path to the configuration directory
    """
    env_path = os.environ.get("TAX_CALC_CONFIG_PATH")
    if env_path:
        return Path(env_path)

    xdg_config_home = os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
    return Path(xdg_config_home) / APP_NAME


def get_settings_path() -> Path:
    """Get the path to settings.json (may not exist yet)."""
    return get_config_dir() / SETTINGS_FILENAME


def load_settings() -> dict:
    """Load machine-specific settings from settings.json.

    Returns:
        Settings dictionary (empty dict if file doesn't exist)
    """
    settings_file = get_settings_path()

    if not settings_file.exists():
        return {}

    with open(settings_file, "r") as f:
        return json.load(f)


def save_settings(settings: dict) -> Path:
    """Save machine-specific settings to settings.json.

    Args:
        settings: Settings dictionary to save

    Returns:
        Path to the saved settings file
    """
    config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)

    settings_file = config_dir / SETTINGS_FILENAME

    with open(settings_file, "w") as f:
        json.dump(settings, f, indent=2)

    return settings_file


def get_setting(key: str, default: Any = None) -> Any:
    """Get a setting value from settings.json.

    Args:
        key: Setting key (e.g., "tax_year", "data_dir")
        default: Default value if key not found

    Returns:
        Setting value or default
    """
    settings = load_settings()
    return settings.get(key, default)


def set_setting(key: str, value: Any) -> Path:
    """Set a setting value in settings.json.

    Returns:
        Path to the saved settings file
    """
    settings = load_settings()
    settings[key] = value
    return save_settings(settings)


def clear_setting(key: str) -> bool:
    """Remove a setting from settings.json.

    Returns:
        True if the key was present and removed, False otherwise
    """
    settings = load_settings()
    if key not in settings:
        return False
    del settings[key]
    save_settings(settings)
    return True


def get_data_path() -> Path:
    """Get the data directory path.

    Uses settings.json "data_dir" if set, otherwise XDG_DATA_HOME/tax-calc/.

    Returns:
        Path to the data directory (created if doesn't exist)
    """
    custom_dir = get_setting("data_dir")
    if custom_dir:
        data_path = Path(custom_dir).expanduser()
    else:
        xdg_data_home = os.environ.get("XDG_DATA_HOME", Path.home() / ".local" / "share")
        data_path = Path(xdg_data_home) / APP_NAME
    data_path.mkdir(parents=True, exist_ok=True)
    return data_path
