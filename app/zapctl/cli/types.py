"""Shared types and utilities for CLI commands.

This module provides common enums and helper functions used across
multiple CLI command modules to avoid code duplication.
"""

from enum import Enum

import typer

from zapctl.core.config import UninstallConfig, load_config
from zapctl.core.errors import ApplicationNotFoundError, ConfigError
from zapctl.core.registry import ApplicationRegistry
from zapctl.models.application import Application
from zapctl.utils.formatting import print_error


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


def require_config() -> UninstallConfig:
    """Load the user configuration, exiting with an error if it is invalid.

    Returns:
        Loaded UninstallConfig (defaults if no file exists).

    Raises:
        typer.Exit: If the configuration cannot be loaded.
    """
    try:
        return load_config()
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def require_application(name: str) -> Application:
    """Look up an installed application, exiting with an error if not found.

    Args:
        name: Display name or bundle path.

    Returns:
        The matching Application.

    Raises:
        typer.Exit: If no application matches.
    """
    try:
        return ApplicationRegistry().find(name)
    except ApplicationNotFoundError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
