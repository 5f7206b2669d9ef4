"""Configuration commands.

View and change the uninstall preferences stored in
~/.config/zapctl/config.toml.
"""

from typing import Annotated

import typer
from rich.table import Table

from zapctl.cli.types import require_config
from zapctl.core.config import UninstallConfig, save_config
from zapctl.core.errors import ConfigError
from zapctl.core.paths import get_config_path
from zapctl.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="View and change uninstall preferences.",
    invoke_without_command=True,
    no_args_is_help=True,
)


@app.command()
def show() -> None:
    """Show the current configuration."""
    config = require_config()

    table = Table(title="zapctl Configuration", show_header=False, border_style="border")
    table.add_column("Setting", style="bold_header")
    table.add_column("Value")
    table.add_row("Config file", str(get_config_path()))
    table.add_row("Always elevate", "yes" if config.always_elevate else "no")
    table.add_row("Probe workers", str(config.probe_workers))
    table.add_row("Verify delay", f"{config.verify_delay_seconds:g}s")
    table.add_row("Excluded paths", "\n".join(config.excluded_paths) or "-")
    console.print(table)


@app.command()
def exclude(
    prefix: Annotated[
        str,
        typer.Argument(help="Path prefix never to remove (e.g. ~/Library/Mail)."),
    ],
) -> None:
    """Add a path prefix to the exclusion list."""
    config = require_config()
    if prefix in config.excluded_paths:
        print_info(f"Already excluded: {prefix}")
        return

    _save(config, {"excluded_paths": (*config.excluded_paths, prefix)})
    print_success(f"Excluded: {prefix}")


@app.command()
def include(
    prefix: Annotated[
        str,
        typer.Argument(help="Path prefix to remove from the exclusion list."),
    ],
) -> None:
    """Remove a path prefix from the exclusion list."""
    config = require_config()
    if prefix not in config.excluded_paths:
        print_error(f"Not in exclusion list: {prefix}")
        raise typer.Exit(code=1)

    remaining = tuple(p for p in config.excluded_paths if p != prefix)
    _save(config, {"excluded_paths": remaining})
    print_success(f"No longer excluded: {prefix}")


@app.command()
def elevate(
    enabled: Annotated[
        bool | None,
        typer.Option("--on/--off", help="Always use administrator privileges."),
    ] = None,
) -> None:
    """Turn forced administrator privileges on or off."""
    if enabled is None:
        print_error("Specify --on or --off.")
        raise typer.Exit(code=1)

    config = require_config()
    _save(config, {"always_elevate": enabled})
    print_success(f"Always elevate: {'on' if enabled else 'off'}")


def _save(config: UninstallConfig, update: dict[str, object]) -> None:
    """Validate and persist an updated configuration."""
    try:
        updated = UninstallConfig.model_validate({**config.model_dump(), **update})
        save_config(updated)
    except (ValueError, ConfigError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
