"""Shared Rich display functions for bulk operations.

Provides table builders and summary printers for pending renames,
rename and removal results, and the refreshed directory listing.
"""

from rich.columns import Columns
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from bulkedit.core.paths import abbreviate_home
from bulkedit.filesystem.models import DirectorySnapshot, EntryKind
from bulkedit.models.operation import BulkReport, RemovalResult, RenamePair, RenameResult
from bulkedit.utils.formatting import (
    console,
    print_info,
    print_success,
    print_warning,
    printable,
)

_KIND_STYLES: dict[EntryKind, str] = {
    EntryKind.DIRECTORY: "directory",
    EntryKind.SYMLINK: "symlink",
    EntryKind.SOCKET: "special",
    EntryKind.FIFO: "special",
    EntryKind.DOOR: "special",
    EntryKind.WHITEOUT: "special",
    EntryKind.UNKNOWN: "warning",
}


def _path(path: str) -> str:
    """Format a path for display inside Rich markup."""
    return escape(printable(abbreviate_home(path)))


def create_renames_table(pairs: list[RenamePair], dry_run: bool = False) -> Table:
    """Create a Rich table displaying pending renames.

    Args:
        pairs: Renames computed from the edited manifest.
        dry_run: Whether this is a dry-run (changes table title).

    Returns:
        Rich Table with one "old -> new" row per rename.
    """
    title = "Pending Renames (Dry Run)" if dry_run else "Pending Renames"

    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Old name", overflow="fold")
    table.add_column("", width=2, justify="center")
    table.add_column("New name", overflow="fold")

    for pair in pairs:
        table.add_row(
            f"[old_name]{_path(pair.old)}[/old_name]",
            "[arrow]->[/arrow]",
            f"[new_name]{_path(pair.new)}[/new_name]",
        )

    return table


def create_rename_failures_table(results: list[RenameResult]) -> Table:
    """Create a Rich table displaying failed renames.

    Args:
        results: Rename results; only failed ones are listed.

    Returns:
        Rich Table with the pair and the system reason of each failure.
    """
    table = Table(
        title="Failed Renames",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Old name", overflow="fold")
    table.add_column("New name", overflow="fold")
    table.add_column("Reason", style="muted")

    for result in results:
        if result.success:
            continue
        table.add_row(
            _path(result.pair.old),
            _path(result.pair.new),
            escape(printable(result.error or "Unknown error")),
        )

    return table


def create_removal_results_table(results: list[RemovalResult]) -> Table:
    """Create a Rich table displaying removal results.

    Args:
        results: Removal results in the order they were produced.

    Returns:
        Rich Table with the path, status and reason of each removal.
    """
    table = Table(
        title="Removal Results",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Path", overflow="fold")
    table.add_column("Status", width=10)
    table.add_column("Details", style="muted")

    for r in results:
        if r.dry_run:
            status = "[info]dry-run[/]"
            detail = "Would remove"
        elif r.success:
            status = "[success]removed[/]"
            detail = ""
        else:
            status = "[error]failed[/]"
            detail = escape(printable(r.error or "Unknown error"))
        table.add_row(_path(r.path), status, detail)

    return table


def print_rename_summary(report: BulkReport) -> None:
    """Print a summary of rename results.

    Args:
        report: Report of an applied bulk rename.
    """
    dry_count = sum(1 for r in report.renames if r.dry_run)
    renamed = report.renamed_count
    failed = report.failure_count

    if dry_count:
        print_info(f"Dry-run: {dry_count} file(s) would be renamed.")
    elif failed:
        print_warning(f"{renamed} file(s) renamed, {failed} failed")
    else:
        print_success(f"{renamed} file(s) renamed")


def print_removal_summary(report: BulkReport) -> None:
    """Print a summary of removal results.

    Args:
        report: Report of an applied bulk remove.
    """
    dry_count = sum(1 for r in report.removals if r.dry_run)
    removed = report.removed_count
    failed = report.failure_count

    if dry_count:
        print_info(f"Dry-run: {dry_count} file(s) would be removed.")
    elif failed:
        print_warning(f"{removed} file(s) removed, {failed} failed")
    else:
        print_success(f"{removed} file(s) removed")


def print_listing(snapshot: DirectorySnapshot) -> None:
    """Print a directory listing, file-manager style.

    Entries are shown in columns with their kind marker and color.

    Args:
        snapshot: The directory listing to print.
    """
    console.print(f"\n[bold_header]{_path(str(snapshot.path))}[/]")
    if not snapshot.entries:
        console.print("[muted](empty)[/]")
        return

    items = [
        Text(printable(entry.display), style=_KIND_STYLES.get(entry.kind, "text"))
        for entry in snapshot.entries
    ]
    console.print(Columns(items, padding=(0, 2)))
