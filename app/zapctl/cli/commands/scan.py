"""Scan command implementation.

Shows everything that would be removed for an application, without
deleting anything.
"""

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from zapctl.cli.types import OutputFormat, require_application, require_config
from zapctl.core.errors import HomeDirectoryNotFoundError
from zapctl.core.uninstall import Uninstaller
from zapctl.models.plan import RemovalPlan
from zapctl.utils.formatting import (
    console,
    create_plan_table,
    format_size,
    print_error,
    print_info,
)


def scan(
    name: Annotated[str, typer.Argument(help="Application name or bundle path.")],
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
    export_path: Annotated[
        Path | None,
        typer.Option(
            "--export",
            "-e",
            help="Export the plan to a JSON file.",
        ),
    ] = None,
) -> None:
    """Show the application bundle and all related files that would be removed."""
    config = require_config()
    application = require_application(name)

    try:
        plan = Uninstaller(config=config).plan(application)
    except HomeDirectoryNotFoundError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if export_path is not None:
        _export_plan(plan, export_path)

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(plan_to_dict(plan)))
        return

    console.print(create_plan_table(plan, title=f"Uninstall {application.name}"))
    console.print(f"\n[dim]{escape(summarize_plan(application.name, plan))}[/dim]")


def summarize_plan(name: str, plan: RemovalPlan) -> str:
    """One-line summary of a plan, e.g. 'Foo.app and 3 related files (1.2 MB total)'."""
    return (
        f"{name}.app and {len(plan.artifacts)} related files "
        f"({format_size(plan.total_size_bytes)} total)"
    )


def plan_to_dict(plan: RemovalPlan) -> dict[str, object]:
    """Convert a plan to a JSON-serializable dictionary."""
    return {
        "bundle_path": plan.bundle_path,
        "bundle_size_bytes": plan.bundle_size_bytes,
        "total_size_bytes": plan.total_size_bytes,
        "artifacts": [
            {"path": a.path, "kind": a.kind.value, "size_bytes": a.size_bytes}
            for a in plan.artifacts
        ],
    }


def _export_plan(plan: RemovalPlan, export_path: Path) -> None:
    """Export a plan to a JSON file."""
    export_path = export_path.resolve()
    if export_path.is_dir():
        print_error(f"Export path is a directory: {export_path}")
        raise typer.Exit(code=1)

    try:
        export_path.parent.mkdir(parents=True, exist_ok=True)
        export_path.write_text(json.dumps(plan_to_dict(plan), indent=2))
        print_info(f"Plan exported to {export_path}")
    except OSError as e:
        print_error(f"Failed to export: {e}")
        raise typer.Exit(code=1) from e
