"""Uninstall command implementation.

Plans the removal of an application, asks for confirmation, deletes
everything and reports whether the application is really gone.
"""

from typing import Annotated

import typer
from rich.markup import escape

from zapctl.cli.commands.scan import summarize_plan
from zapctl.cli.types import require_application, require_config
from zapctl.core.errors import HomeDirectoryNotFoundError
from zapctl.core.report import UninstallReport
from zapctl.core.uninstall import Uninstaller
from zapctl.utils.formatting import (
    console,
    create_plan_table,
    print_error,
    print_info,
    print_success,
    print_warning,
)


def uninstall(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Application name or bundle path.")],
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
    admin: Annotated[
        bool,
        typer.Option("--admin", help="Use administrator privileges from the start."),
    ] = False,
) -> None:
    """Uninstall an application and remove its related files.

    Removal is permanent; nothing is moved to the Trash.
    """
    quiet = bool(ctx.obj and ctx.obj.get("quiet"))

    config = require_config()
    if admin:
        config = config.model_copy(update={"always_elevate": True})
    application = require_application(name)

    uninstaller = Uninstaller(config=config)
    try:
        plan = uninstaller.plan(application)
    except HomeDirectoryNotFoundError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if not quiet:
        console.print(create_plan_table(plan, title=f"Uninstall {application.name}"))
    console.print(f"\n{escape(summarize_plan(application.name, plan))}")

    if not yes:
        confirmed = typer.confirm(
            f"\nPermanently remove {len(plan.paths)} path(s)?",
            default=False,
        )
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    print_info(f"Uninstalling {application.name}: removing {len(plan.paths)} files...")
    outcome = uninstaller.execute(plan)
    report = UninstallReport.from_outcome(application, plan, outcome)

    if report.success:
        print_success(report.message)
        if report.used_elevated_privileges:
            print_info("Administrator privileges were used.")
        return

    print_error(report.message)
    for path in report.failed_paths:
        print_warning(f"Could not remove: {path}")
    raise typer.Exit(code=1)
