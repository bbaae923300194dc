"""XDG-compliant path management for rmtrash.

rmtrash only reads configuration, it never writes state, so only the
configuration directory is needed.

XDG default:
- Config: ~/.config/rmtrash/
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "rmtrash"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/rmtrash/ (or XDG_CONFIG_HOME/rmtrash/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_settings_path() -> Path:
    """Get the settings file path.

    Returns:
        Path to ~/.config/rmtrash/config.toml.
    """
    return get_config_dir() / "config.toml"
