"""CLI commands for zapctl.

This package contains all subcommand implementations.
"""

from zapctl.cli.commands import apps, config, scan, uninstall

__all__ = ["apps", "config", "scan", "uninstall"]
