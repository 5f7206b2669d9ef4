"""List command implementation.

Lists the applications that can be uninstalled.
"""

import json
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from zapctl.cli.types import OutputFormat
from zapctl.core.registry import ApplicationRegistry
from zapctl.utils.formatting import console, print_info


def list_apps(
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """List applications installed in /Applications."""
    apps = ApplicationRegistry().list_applications()

    if output_format == OutputFormat.JSON:
        data = [{"name": a.name, "install_path": a.install_path} for a in apps]
        console.print_json(json.dumps(data))
        return

    if not apps:
        print_info("No applications found.")
        return

    table = Table(
        title="Installed Applications",
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Name", style="bundle")
    table.add_column("Path", style="muted")
    for a in apps:
        table.add_row(escape(a.name), escape(a.install_path))

    console.print(table)
    console.print(f"\n[dim]{len(apps)} application(s)[/dim]")
