"""CLI package for zapctl.

This package contains the Typer application and all subcommands.
"""

from zapctl.cli.main import app

__all__ = ["app"]
