"""Bulk remove and bulk rename workflows.

Both workflows run the same stages strictly in order: write the
manifest, edit it, detect a no-op, reconcile, apply. Any stage failure
aborts the rest; the temporary manifest is removed on every path.
"""

import logging
from collections.abc import Callable
from pathlib import Path

from bulkedit.core.config import BulkEditConfig
from bulkedit.core.errors import EmptyTargetError, InvalidTargetError
from bulkedit.editing.changes import has_fewer_entries, take_snapshot, was_modified
from bulkedit.editing.editor import open_in_editor
from bulkedit.editing.manifest import (
    REMOVE_HEADER,
    RENAME_HEADER,
    TemporaryManifest,
    manifest_line,
    parse_manifest,
    read_manifest_lines,
)
from bulkedit.editing.reconcile import compute_removals, compute_renames, removal_base
from bulkedit.filesystem.models import DirectorySnapshot, Entry, is_in_directory
from bulkedit.filesystem.operator import RemovalOperator, RenameOperator
from bulkedit.filesystem.scanner import list_directory
from bulkedit.models.operation import BulkReport, BulkStatus, RenamePair
from bulkedit.models.target import RemoveRequest

logger = logging.getLogger(__name__)

ConfirmCallback = Callable[[list[RenamePair]], bool]


def _target_entries(request: RemoveRequest, workspace: DirectorySnapshot) -> list[Entry]:
    """Get the entries a bulk remove works on."""
    if request.target.is_ambient or request.target.path is None:
        entries = list(workspace.entries)
        if not entries:
            raise EmptyTargetError(f"'{workspace.path}': Directory empty")
        return entries

    directory = request.target.path
    try:
        entries = list_directory(directory)
    except OSError as e:
        raise InvalidTargetError(f"'{directory}': {e.strerror or e}") from e
    if not entries:
        raise EmptyTargetError(f"'{directory}': Directory empty")
    return entries


def run_bulk_remove(
    request: RemoveRequest,
    workspace: DirectorySnapshot,
    config: BulkEditConfig,
    *,
    dry_run: bool = False,
) -> BulkReport:
    """Remove the entries whose lines the user deleted from a manifest.

    Args:
        request: Resolved target and application.
        workspace: Snapshot of the ambient working directory.
        config: Active configuration.
        dry_run: Report what would be removed without removing.

    Returns:
        BulkReport with per-path removal results.

    Raises:
        InvalidTargetError: If the target directory cannot be listed.
        EmptyTargetError: If the target has no entries.
        TempFileError: If the manifest cannot be created or read.
        EditorError: If the editor fails.
    """
    entries = _target_entries(request, workspace)
    base = removal_base(request.target, workspace.path)
    lines = [manifest_line(entry.display) for entry in entries]

    manifest = TemporaryManifest(config.scratch_dir, REMOVE_HEADER, lines)
    with manifest as path:
        snapshot = take_snapshot(path, len(entries))
        open_in_editor(path, request.application, opener=config.opener)

        if not was_modified(path, snapshot) or not has_fewer_entries(path, snapshot):
            logger.debug("Manifest %s not edited", path)
            report = BulkReport(status=BulkStatus.NOTHING_TO_DO)
        else:
            to_remove = compute_removals(entries, read_manifest_lines(path), base)
            if not to_remove:
                report = BulkReport(status=BulkStatus.NOTHING_TO_DO)
            else:
                removals = RemovalOperator(dry_run=dry_run).remove(to_remove)
                report = BulkReport(
                    status=BulkStatus.APPLIED,
                    removals=removals,
                    workspace_affected=any(
                        r.success and not r.dry_run and workspace.contains(r.path)
                        for r in removals
                    ),
                )

    report.cleanup_error = manifest.cleanup_error
    return report


def run_bulk_rename(
    paths: list[str],
    workspace: Path,
    config: BulkEditConfig,
    confirm: ConfirmCallback,
    *,
    application: str | None = None,
    dry_run: bool = False,
) -> BulkReport:
    """Rename the entries whose lines the user edited in a manifest.

    Args:
        paths: Validated paths to rename, in order.
        workspace: Absolute path of the ambient working directory.
        config: Active configuration.
        confirm: Called with the pending renames; returning False aborts
            without touching the filesystem.
        application: Program to edit the manifest with (None = default).
        dry_run: Report what would be renamed without renaming.

    Returns:
        BulkReport with per-pair rename results.

    Raises:
        EmptyTargetError: If there are no paths.
        TempFileError: If the manifest cannot be created or read.
        EditorError: If the editor fails.
        LineMismatchError: If lines were added or removed in the editor.
    """
    if not paths:
        raise EmptyTargetError("No valid file names to rename")

    originals = [manifest_line(p) for p in paths]

    manifest = TemporaryManifest(config.scratch_dir, RENAME_HEADER, originals)
    with manifest as path:
        snapshot = take_snapshot(path, len(originals))
        open_in_editor(path, application, opener=config.opener)

        if not was_modified(path, snapshot):
            logger.debug("Manifest %s not edited", path)
            report = BulkReport(status=BulkStatus.NOTHING_TO_DO)
        else:
            edited = parse_manifest(path, strip_markers=False)
            pairs = compute_renames(originals, edited)
            if not pairs:
                report = BulkReport(status=BulkStatus.NOTHING_TO_DO)
            elif not confirm(pairs):
                logger.debug("Rename of %d entries declined", len(pairs))
                report = BulkReport(status=BulkStatus.DECLINED)
            else:
                renames = RenameOperator(dry_run=dry_run).rename(pairs)
                report = BulkReport(
                    status=BulkStatus.APPLIED,
                    renames=renames,
                    workspace_affected=any(
                        r.success
                        and not r.dry_run
                        and (
                            is_in_directory(r.pair.old, workspace)
                            or is_in_directory(r.pair.new, workspace)
                        )
                        for r in renames
                    ),
                )

    report.cleanup_error = manifest.cleanup_error
    return report
