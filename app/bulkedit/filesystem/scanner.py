"""Directory listing for bulk operations.

Enumerates the entries of a directory in a stable, lexicographic order
and classifies each entry's kind without following symbolic links.
"""

import logging
import os
import stat
from pathlib import Path

from bulkedit.filesystem.models import SELF_OR_PARENT, DirectorySnapshot, Entry, EntryKind

logger = logging.getLogger(__name__)


def classify_mode(mode: int) -> EntryKind:
    """Map an lstat() mode to an entry kind.

    Args:
        mode: The st_mode field of an lstat() result.

    Returns:
        The matching EntryKind. Block and character devices map to UNKNOWN.
    """
    if stat.S_ISREG(mode):
        return EntryKind.FILE
    if stat.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    if stat.S_ISLNK(mode):
        return EntryKind.SYMLINK
    if stat.S_ISSOCK(mode):
        return EntryKind.SOCKET
    if stat.S_ISFIFO(mode):
        return EntryKind.FIFO
    if stat.S_ISDOOR(mode):
        return EntryKind.DOOR
    if stat.S_ISWHT(mode):
        return EntryKind.WHITEOUT
    return EntryKind.UNKNOWN


def list_directory(path: str | Path, *, show_hidden: bool = True) -> list[Entry]:
    """List the entries of a directory.

    The "." and ".." pseudo-entries are never included. Entries are
    sorted by name so repeated runs produce the same manifest.

    Args:
        path: Directory to list.
        show_hidden: Include entries whose name starts with a dot.

    Returns:
        Sorted list of entries (names relative to the directory).

    Raises:
        OSError: If the directory cannot be read.
    """
    entries: list[Entry] = []
    with os.scandir(path) as it:
        for dir_entry in it:
            name = dir_entry.name
            if name in SELF_OR_PARENT:
                continue
            if not show_hidden and name.startswith("."):
                continue
            if "\n" in name:
                logger.warning("Skipping entry with a newline in its name: %r", name)
                continue
            try:
                kind = classify_mode(dir_entry.stat(follow_symlinks=False).st_mode)
            except OSError as e:
                logger.warning("Cannot determine type of %s: %s", dir_entry.path, e)
                kind = EntryKind.UNKNOWN
            entries.append(Entry(path=name, kind=kind))

    entries.sort(key=lambda entry: entry.path)
    return entries


def capture_snapshot(path: str | Path, *, show_hidden: bool = False) -> DirectorySnapshot:
    """Capture an in-memory listing of a directory.

    Args:
        path: Directory to capture. Relative paths are made absolute.
        show_hidden: Include entries whose name starts with a dot.

    Returns:
        DirectorySnapshot of the directory.

    Raises:
        OSError: If the directory cannot be read.
    """
    directory = Path(os.path.abspath(path))
    entries = list_directory(directory, show_hidden=show_hidden)
    logger.debug("Captured %d entries from %s", len(entries), directory)
    return DirectorySnapshot(path=directory, entries=tuple(entries))
