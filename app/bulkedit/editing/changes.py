"""Detection of no-op edits.

A manifest's modification time and entry count are recorded before the
editor runs and compared afterwards. Saving without changes, quitting
without saving, or (for removal) keeping every line all count as
"nothing to do".
"""

import os
from dataclasses import dataclass
from pathlib import Path

from bulkedit.core.errors import TempFileError
from bulkedit.editing.manifest import count_entries


@dataclass(frozen=True, slots=True)
class ChangeSnapshot:
    """State of a manifest right before it was handed to the editor.

    Attributes:
        mtime_before: Modification time in nanoseconds.
        count_before: Number of entry lines written.
    """

    mtime_before: int
    count_before: int


def _mtime_ns(path: Path) -> int:
    try:
        return os.stat(path).st_mtime_ns
    except OSError as e:
        raise TempFileError(f"Cannot stat temporary file '{path}': {e.strerror or e}") from e


def take_snapshot(path: Path, count: int) -> ChangeSnapshot:
    """Record the state of a freshly written manifest.

    Args:
        path: Manifest file.
        count: Number of entry lines written to it.

    Returns:
        ChangeSnapshot for later comparison.

    Raises:
        TempFileError: If the file cannot be stat'ed.
    """
    return ChangeSnapshot(mtime_before=_mtime_ns(path), count_before=count)


def was_modified(path: Path, snapshot: ChangeSnapshot) -> bool:
    """Check whether the editor saved the manifest.

    Args:
        path: Manifest file.
        snapshot: State recorded before the editor ran.

    Returns:
        True if the modification time changed.

    Raises:
        TempFileError: If the file cannot be stat'ed.
    """
    return _mtime_ns(path) != snapshot.mtime_before


def has_fewer_entries(path: Path, snapshot: ChangeSnapshot) -> bool:
    """Check whether entry lines were deleted from the manifest.

    Used for removal, where a deleted line is the only meaningful edit:
    an equal or greater count means there is nothing to remove.

    Args:
        path: Manifest file.
        snapshot: State recorded before the editor ran.

    Returns:
        True if the manifest now has fewer entry lines than before.

    Raises:
        TempFileError: If the file cannot be read.
    """
    return count_entries(path) < snapshot.count_before
