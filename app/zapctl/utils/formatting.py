"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from zapctl.core.theme import get_theme
from zapctl.models.plan import RemovalPlan


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def format_size(size_bytes: int | None) -> str:
    """Format byte count as human-readable string."""
    if size_bytes is None or size_bytes == 0:
        return "0 B"
    size = float(size_bytes)
    for unit in ("B", "KB", "MB", "GB"):
        if abs(size) < 1024:
            return f"{size:.1f} {unit}" if unit != "B" else f"{int(size)} B"
        size /= 1024
    return f"{size:.1f} TB"


def create_plan_table(plan: RemovalPlan, title: str) -> Table:
    """Create a table listing the bundle and every artifact in a plan.

    The bundle row comes first. User-scoped artifacts (under the home
    directory) and system artifacts are colored differently.

    Args:
        plan: Removal plan to display.
        title: Table title.

    Returns:
        Rich Table ready for printing.
    """
    table = Table(
        title=escape(title),
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Path", no_wrap=False)
    table.add_column("Kind", style="muted", width=16)
    table.add_column("Size", style="size", justify="right", width=10)

    table.add_row(
        f"[bundle]{escape(plan.bundle_path)}[/]",
        "bundle",
        format_size(plan.bundle_size_bytes),
    )

    home_prefix = _home_prefix()
    for artifact in plan.artifacts:
        style = "artifact.user" if artifact.path.startswith(home_prefix) else "artifact.system"
        table.add_row(
            f"[{style}]{escape(artifact.path)}[/]",
            artifact.kind.value,
            format_size(artifact.size_bytes),
        )
    return table


def _home_prefix() -> str:
    try:
        return str(Path.home()).rstrip("/") + "/"
    except RuntimeError:
        return "\0"


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{escape(message)}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {escape(message)}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{escape(message)}[/]")
