"""Utility modules for zapctl.

This module exports commonly used utility functions.
"""

from zapctl.utils.formatting import (
    console,
    create_plan_table,
    err_console,
    format_size,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from zapctl.utils.shell import CommandResult, run_command

__all__ = [
    "CommandResult",
    "console",
    "create_plan_table",
    "err_console",
    "format_size",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "run_command",
]
