"""Bulk rename command implementation.

Lists the given paths in a temporary file, lets the user edit the names
in an editor, and renames every entry whose line changed.
"""

from pathlib import Path
from typing import Annotated

import typer

from bulkedit.cli.commands.remove import refresh_listing
from bulkedit.cli.display import (
    create_rename_failures_table,
    create_renames_table,
    print_rename_summary,
)
from bulkedit.cli.types import fail, is_quiet, require_config
from bulkedit.core.errors import BulkEditError, EmptyTargetError, InvalidTargetError
from bulkedit.editing import run_bulk_rename
from bulkedit.editing.targets import prepare_rename_paths
from bulkedit.models.operation import BulkStatus, RenamePair
from bulkedit.utils.formatting import console, print_error, print_info


def rename(
    ctx: typer.Context,
    paths: Annotated[
        list[str] | None,
        typer.Argument(
            help="Files to rename.",
            show_default=False,
        ),
    ] = None,
    application: Annotated[
        str | None,
        typer.Option(
            "--app",
            "-a",
            help="Application used to edit the list of files.",
        ),
    ] = None,
    yes: Annotated[
        bool,
        typer.Option(
            "--yes",
            "-y",
            help="Skip confirmation prompt.",
        ),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            "-n",
            help="Show what would be renamed without renaming anything.",
        ),
    ] = False,
) -> None:
    """Rename files in bulk by editing their names in an editor.

    Writes PATHS to a temporary file, one per line, and opens it. Edit
    the names in place without adding or removing lines; every changed
    line is renamed after confirmation. Quit without editing to cancel.

    Examples:
        bulkedit rename *.jpg              # Rename all JPEG files
        bulkedit rename -a nano a.txt b    # Edit with nano
        bulkedit rename --dry-run *.txt    # Preview without renaming
    """
    if not paths:
        typer.echo(ctx.get_help())
        raise typer.Exit()

    config = require_config(ctx)
    quiet = is_quiet(ctx)

    prepared = prepare_rename_paths(paths)
    for arg, reason in prepared.skipped:
        print_error(f"'{arg}': {reason}")
    if not prepared.paths:
        fail(EmptyTargetError("No valid file names to rename"))

    def confirm(pairs: list[RenamePair]) -> bool:
        console.print()
        console.print(create_renames_table(pairs, dry_run=dry_run))
        console.print()
        if yes or dry_run:
            return True
        return typer.confirm("Continue?", default=False)

    try:
        workspace = Path.cwd()
    except OSError as e:
        fail(InvalidTargetError(f"Cannot access working directory: {e.strerror or e}"))

    try:
        report = run_bulk_rename(
            prepared.paths,
            workspace,
            config,
            confirm,
            application=application,
            dry_run=dry_run,
        )
    except BulkEditError as e:
        fail(e)

    if report.status == BulkStatus.NOTHING_TO_DO:
        if not quiet:
            print_info("Nothing to do")
    elif report.status == BulkStatus.DECLINED:
        print_info("Aborted.")
    else:
        if report.failure_count:
            console.print(create_rename_failures_table(report.renames))
            console.print()
        if not quiet or report.failure_count:
            print_rename_summary(report)
        if report.workspace_affected and not quiet:
            refresh_listing(workspace, config, config.show_hidden)

    if not report.success:
        raise typer.Exit(code=1)
