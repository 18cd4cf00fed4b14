"""Filesystem operators for bulk rename and bulk remove.

Handles removal of a list of paths and renaming of a list of path
pairs, with dry-run support. Failures are isolated per entry: one
failed entry never stops the rest of the batch.
"""

import errno
import logging
import os
import shutil
from pathlib import Path

from bulkedit.filesystem.protected import is_protected_path
from bulkedit.models.operation import RemovalResult, RenamePair, RenameResult
from bulkedit.utils.shell import run_interactive

logger = logging.getLogger(__name__)


def strip_trailing_separator(path: str) -> str:
    """Remove a single trailing path separator.

    Some rename(2) implementations reject a destination ending in a
    separator when renaming directories. The root directory is left
    untouched.

    Args:
        path: Destination path as typed by the user.

    Returns:
        The path without one trailing separator.
    """
    if len(path) > 1 and path.endswith(os.sep):
        return path[:-1]
    return path


class RemovalOperator:
    """Removes filesystem paths.

    Directories are removed recursively, symbolic links are unlinked
    without touching their target, and protected paths are refused.

    Attributes:
        _dry_run: If True, simulate removals without modifying the filesystem.
    """

    def __init__(self, dry_run: bool = False) -> None:
        """Initialize the RemovalOperator.

        Args:
            dry_run: If True, report what would be removed without removing.
        """
        self._dry_run = dry_run

    def remove(self, paths: list[str]) -> list[RemovalResult]:
        """Remove multiple filesystem paths and return results.

        Args:
            paths: List of absolute filesystem paths to remove.

        Returns:
            List of RemovalResult, one per input path, in input order.
        """
        results: list[RemovalResult] = []

        for path in paths:
            if is_protected_path(path):
                logger.warning("Refusing to remove protected path %s", path)
                results.append(
                    RemovalResult(
                        path=path,
                        success=False,
                        error=f"Protected path cannot be removed: {path}",
                    )
                )
                continue

            results.append(self._remove_single(path))

        return results

    def _remove_single(self, path: str) -> RemovalResult:
        """Remove a single filesystem path.

        Args:
            path: Absolute filesystem path to remove.

        Returns:
            RemovalResult indicating success or failure.
        """
        target = Path(path)

        if not target.exists() and not target.is_symlink():
            return RemovalResult(
                path=path,
                success=False,
                error=os.strerror(errno.ENOENT),
            )

        if self._dry_run:
            logger.info("Dry-run: would remove %s", path)
            return RemovalResult(path=path, success=True, dry_run=True)

        try:
            # Directories (but not symlinks to directories)
            if target.is_dir() and not target.is_symlink():
                shutil.rmtree(path)
            else:
                target.unlink()
        except OSError as e:
            logger.debug("Removing %s failed: %s", path, e)
            return RemovalResult(
                path=path,
                success=False,
                error=e.strerror or str(e),
            )

        logger.info("Removed %s", path)
        return RemovalResult(path=path, success=True)


class RenameOperator:
    """Renames filesystem paths.

    Each pair is renamed with rename(2). When source and destination are
    on different devices the external ``mv`` command is used instead,
    which copies and then deletes.

    Attributes:
        _dry_run: If True, simulate renames without modifying the filesystem.
    """

    def __init__(self, dry_run: bool = False) -> None:
        """Initialize the RenameOperator.

        Args:
            dry_run: If True, report what would be renamed without renaming.
        """
        self._dry_run = dry_run

    def rename(self, pairs: list[RenamePair]) -> list[RenameResult]:
        """Rename every pair and return results.

        Args:
            pairs: Pending renames in manifest order.

        Returns:
            List of RenameResult, one per pair, in input order.
        """
        return [self._rename_single(pair) for pair in pairs]

    def _rename_single(self, pair: RenamePair) -> RenameResult:
        """Rename a single path, falling back to mv across devices.

        Args:
            pair: The rename to perform.

        Returns:
            RenameResult indicating success or failure.
        """
        new_path = strip_trailing_separator(pair.new)

        if self._dry_run:
            logger.info("Dry-run: would rename %s to %s", pair.old, new_path)
            return RenameResult(pair=pair, success=True, dry_run=True)

        try:
            os.rename(pair.old, new_path)
        except OSError as e:
            if e.errno != errno.EXDEV:
                logger.debug("Renaming %s to %s failed: %s", pair.old, new_path, e)
                return RenameResult(pair=pair, success=False, error=e.strerror or str(e))
            return self._move_across_devices(pair, new_path)

        logger.info("Renamed %s to %s", pair.old, new_path)
        return RenameResult(pair=pair, success=True)

    def _move_across_devices(self, pair: RenamePair, new_path: str) -> RenameResult:
        """Move a path to another device with the external mv command.

        mv runs attached to the terminal so that its prompts (e.g. for a
        write-protected destination) reach the user.

        Args:
            pair: The rename being performed.
            new_path: Destination without trailing separator.

        Returns:
            RenameResult with cross_device set.
        """
        logger.info("Cross-device rename, moving %s to %s with mv", pair.old, new_path)
        try:
            returncode = run_interactive(["mv", "--", pair.old, new_path])
        except OSError as e:
            return RenameResult(pair=pair, success=False, error=str(e), cross_device=True)

        if returncode != 0:
            return RenameResult(
                pair=pair,
                success=False,
                error=f"mv exited with status {returncode}",
                cross_device=True,
            )

        return RenameResult(pair=pair, success=True, cross_device=True)
