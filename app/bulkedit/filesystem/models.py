"""Filesystem domain models for bulk operations.

This module defines the data structures for representing directory
entries listed into a manifest, including the entry kind and the
single-character marker that makes the kind visible in plain text.
"""

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class EntryKind(str, Enum):
    """Kind of filesystem entry.

    Attributes:
        FILE: Regular file (no marker).
        DIRECTORY: Directory.
        SYMLINK: Symbolic link, never followed.
        SOCKET: Unix domain socket.
        FIFO: Named pipe.
        DOOR: Solaris door.
        WHITEOUT: BSD union-mount whiteout.
        UNKNOWN: Kind could not be determined (including block and
            character devices, which have no marker of their own).
    """

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    SOCKET = "socket"
    FIFO = "fifo"
    DOOR = "door"
    WHITEOUT = "whiteout"
    UNKNOWN = "unknown"

    @property
    def marker(self) -> str | None:
        """Get the display marker for this kind (None for regular files)."""
        return _MARKERS[self]


_MARKERS: dict[EntryKind, str | None] = {
    EntryKind.FILE: None,
    EntryKind.DIRECTORY: "/",
    EntryKind.SYMLINK: "@",
    EntryKind.SOCKET: "=",
    EntryKind.FIFO: "|",
    EntryKind.DOOR: ">",
    EntryKind.WHITEOUT: "%",
    EntryKind.UNKNOWN: "?",
}

# Markers stripped when a manifest is read back. Door and whiteout markers
# are display-only: they are also legitimate trailing filename characters.
RECOGNIZED_MARKERS: frozenset[str] = frozenset("/@=|?")

# Pseudo-entries that are never listed and never removed.
SELF_OR_PARENT: frozenset[str] = frozenset({".", ".."})


@dataclass(frozen=True, slots=True)
class Entry:
    """A single line of a manifest.

    Attributes:
        path: Entry name (remove) or path as given (rename).
        kind: Kind of the entry, used only to pick the display marker.
    """

    path: str
    kind: EntryKind = EntryKind.FILE

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not self.path:
            msg = "Entry path cannot be empty"
            raise ValueError(msg)
        if "\n" in self.path:
            msg = f"Entry path cannot contain a newline: {self.path!r}"
            raise ValueError(msg)

    @property
    def marker(self) -> str | None:
        """Get the display marker for this entry."""
        return self.kind.marker

    @property
    def display(self) -> str:
        """Get the manifest line for this entry (path plus marker)."""
        marker = self.marker
        return f"{self.path}{marker}" if marker else self.path


@dataclass(frozen=True, slots=True)
class DirectorySnapshot:
    """An in-memory listing of one directory.

    Used for the ambient working directory: the caller captures it once
    and passes it explicitly to the operations that need it.

    Attributes:
        path: Absolute path of the listed directory.
        entries: Entries in listing order.
    """

    path: Path
    entries: tuple[Entry, ...]

    def __post_init__(self) -> None:
        """Validate snapshot data after initialization."""
        if not self.path.is_absolute():
            msg = f"Snapshot path must be absolute, got {self.path}"
            raise ValueError(msg)

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def names(self) -> list[str]:
        """Get entry names in listing order."""
        return [entry.path for entry in self.entries]

    def contains(self, path: str | Path) -> bool:
        """Check whether a path is a direct child of this directory.

        Relative paths are interpreted relative to this directory.

        Args:
            path: Path to check.

        Returns:
            True if the path's parent is this directory.
        """
        return is_in_directory(path, self.path)


def is_in_directory(path: str | Path, directory: Path) -> bool:
    """Check whether a path is a direct child of a directory.

    Paths are compared lexically; symlinks are not resolved. Relative
    paths are interpreted relative to the directory.

    Args:
        path: Path to check.
        directory: Absolute directory path.

    Returns:
        True if the parent of the path is the directory.
    """
    candidate = Path(path)
    if not candidate.is_absolute():
        candidate = directory / candidate
    parent = Path(os.path.normpath(candidate)).parent
    return parent == Path(os.path.normpath(directory))
