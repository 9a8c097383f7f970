"""Configuration file management for pockettrack."""

import os
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

DEFAULT_SETTINGS: dict[str, Any] = {
    "currency_symbol": "৳",
    "export_filename": "pockettrack_export.csv",
}


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "pockettrack" / "config.toml"


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to TOML file with secure permissions.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    save_config(dict(DEFAULT_SETTINGS), config_path)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file, filling in defaults.

    A missing config file yields the defaults.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        tomllib.TOMLDecodeError: If the config file is not valid TOML.
    """
    if config_path is None:
        config_path = get_config_path()

    config = dict(DEFAULT_SETTINGS)
    if config_path.exists():
        with open(config_path, "rb") as f:
            config.update(tomllib.load(f))
    return config


def get_setting(key: str, config_path: Path | None = None) -> Any:
    """Get a single setting.

    Args:
        key: Setting name.
        config_path: Path to config file. If None, uses default location.

    Returns:
        Setting value, or None if unset and without a default.
    """
    return load_config(config_path).get(key)


def set_setting(key: str, value: Any, config_path: Path | None = None) -> None:
    """Add or update a single setting.

    Args:
        key: Setting name.
        value: New value.
        config_path: Path to config file. If None, uses default location.
    """
    config = load_config(config_path)
    config[key] = value
    save_config(config, config_path)
