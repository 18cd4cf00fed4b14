"""Bulk remove command implementation.

Lists a directory in a temporary file, lets the user delete lines in an
editor, and removes every entry whose line was deleted.
"""

from pathlib import Path
from typing import Annotated

import typer

from bulkedit.cli.display import create_removal_results_table, print_listing, print_removal_summary
from bulkedit.cli.types import fail, is_quiet, require_config
from bulkedit.core.config import BulkEditConfig
from bulkedit.core.errors import BulkEditError, InvalidTargetError
from bulkedit.editing import run_bulk_remove
from bulkedit.editing.targets import resolve_remove_request
from bulkedit.filesystem.models import DirectorySnapshot
from bulkedit.filesystem.scanner import capture_snapshot
from bulkedit.models.operation import BulkStatus
from bulkedit.utils.formatting import console, print_info, print_warning


def _capture_workspace(show_hidden: bool) -> DirectorySnapshot:
    """Capture the listing of the current working directory.

    Raises:
        InvalidTargetError: If the working directory cannot be listed.
    """
    try:
        return capture_snapshot(Path.cwd(), show_hidden=show_hidden)
    except OSError as e:
        msg = f"Cannot list working directory: {e.strerror or e}"
        raise InvalidTargetError(msg) from e


def refresh_listing(workspace: Path, config: BulkEditConfig, show_hidden: bool) -> None:
    """Re-capture and print the working directory listing.

    Args:
        workspace: Absolute path of the working directory.
        config: Active configuration.
        show_hidden: Include hidden entries.
    """
    if not config.auto_refresh:
        return
    try:
        snapshot = capture_snapshot(workspace, show_hidden=show_hidden)
    except OSError as e:
        print_warning(f"Cannot refresh listing of {workspace}: {e.strerror or e}")
        return
    print_listing(snapshot)


def remove(
    ctx: typer.Context,
    target: Annotated[
        str | None,
        typer.Argument(
            help="Directory to list, or the application to edit with.",
            show_default=False,
        ),
    ] = None,
    application: Annotated[
        str | None,
        typer.Argument(
            help="Application used to edit the list of files.",
            show_default=False,
        ),
    ] = None,
    show_all: Annotated[
        bool,
        typer.Option(
            "--all",
            "-a",
            help="Include hidden entries of the working directory.",
        ),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            "-n",
            help="Show what would be removed without removing anything.",
        ),
    ] = False,
) -> None:
    """Remove files in bulk by deleting their lines in an editor.

    Writes the entries of TARGET (default: the working directory) to a
    temporary file and opens it. Every entry whose line is deleted is
    removed once the editor exits. Quit without editing to cancel.
    An empty directory, including an empty working directory, exits
    with status 4.

    Examples:
        bulkedit remove                  # Edit the working directory
        bulkedit remove ~/Downloads      # Edit another directory
        bulkedit remove ~/Downloads vim  # ... with a specific editor
        bulkedit remove nano             # Working directory, with nano
        bulkedit remove --dry-run        # Preview without removing
    """
    config = require_config(ctx)
    quiet = is_quiet(ctx)
    show_hidden = show_all or config.show_hidden

    try:
        request = resolve_remove_request(target, application)
        workspace = _capture_workspace(show_hidden)
        report = run_bulk_remove(request, workspace, config, dry_run=dry_run)
    except BulkEditError as e:
        fail(e)

    if report.status == BulkStatus.NOTHING_TO_DO:
        if not quiet:
            print_info("Nothing to do")
        if not report.success:
            raise typer.Exit(code=1)
        return

    if not quiet or report.failure_count:
        console.print()
        console.print(create_removal_results_table(report.removals))
        console.print()
        print_removal_summary(report)

    if report.workspace_affected and not quiet:
        refresh_listing(workspace.path, config, show_hidden)

    if not report.success:
        raise typer.Exit(code=1)
