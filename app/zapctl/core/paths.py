"""XDG-compliant path management for zapctl.

This module provides standardized paths following the XDG Base Directory
Specification for configuration storage, plus resolution of the user's
home directory for artifact discovery.

XDG defaults:
- Config: ~/.config/zapctl/
"""

import os
from pathlib import Path

from zapctl.core.errors import HomeDirectoryNotFoundError

# Application identifier for directory naming
APP_NAME = "zapctl"

# Default location of installed application bundles
APPLICATIONS_DIR = Path("/Applications")


def get_home_dir() -> str:
    """Resolve the user's home directory.

    Prefers ``$HOME`` and falls back to the password database.

    Returns:
        Absolute path of the home directory, without a trailing slash.

    Raises:
        HomeDirectoryNotFoundError: If no absolute home directory can be resolved.
    """
    home = os.environ.get("HOME")
    if not home:
        try:
            home = str(Path.home())
        except (KeyError, RuntimeError) as e:
            msg = "Cannot resolve home directory: HOME is unset and no passwd entry exists"
            raise HomeDirectoryNotFoundError(msg) from e

    if not home.startswith("/") or home.rstrip("/") == "":
        msg = f"Cannot resolve home directory: invalid value {home!r}"
        raise HomeDirectoryNotFoundError(msg)

    return home.rstrip("/")


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
        Path to ~/.config/zapctl/ (or XDG_CONFIG_HOME/zapctl/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_config_path() -> Path:
    """Get the uninstall configuration file path.

    Returns:
        Path to ~/.config/zapctl/config.toml.
    """
    return get_config_dir() / "config.toml"


def get_user_theme_path() -> Path:
    """Get the user theme override path.

    Returns:
        Path to ~/.config/zapctl/theme.toml.
    """
    return get_config_dir() / "theme.toml"
