"""Unit tests for filesystem domain models."""

from pathlib import Path

import pytest
from bulkedit.filesystem.models import (
    RECOGNIZED_MARKERS,
    DirectorySnapshot,
    Entry,
    EntryKind,
    is_in_directory,
)


class TestEntryKind:
    """Tests for EntryKind markers."""

    @pytest.mark.parametrize(
        ("kind", "marker"),
        [
            (EntryKind.FILE, None),
            (EntryKind.DIRECTORY, "/"),
            (EntryKind.SYMLINK, "@"),
            (EntryKind.SOCKET, "="),
            (EntryKind.FIFO, "|"),
            (EntryKind.DOOR, ">"),
            (EntryKind.WHITEOUT, "%"),
            (EntryKind.UNKNOWN, "?"),
        ],
    )
    def test_marker(self, kind: EntryKind, marker: str | None) -> None:
        """Each kind has its display marker."""
        assert kind.marker == marker

    def test_platform_markers_not_recognized(self) -> None:
        """Door and whiteout markers are display-only."""
        assert ">" not in RECOGNIZED_MARKERS
        assert "%" not in RECOGNIZED_MARKERS
        assert set("/@=|?") == RECOGNIZED_MARKERS


class TestEntry:
    """Tests for Entry dataclass."""

    def test_display_regular_file(self) -> None:
        """Regular files are shown without marker."""
        assert Entry("notes.txt").display == "notes.txt"

    def test_display_directory(self) -> None:
        """Directories get a trailing slash."""
        assert Entry("mydir", EntryKind.DIRECTORY).display == "mydir/"

    def test_empty_path_rejected(self) -> None:
        """An empty path raises ValueError."""
        with pytest.raises(ValueError, match="cannot be empty"):
            Entry("")

    def test_newline_rejected(self) -> None:
        """A path with a newline would break the line format."""
        with pytest.raises(ValueError, match="newline"):
            Entry("a\nb")


class TestDirectorySnapshot:
    """Tests for DirectorySnapshot dataclass."""

    def test_requires_absolute_path(self) -> None:
        """Relative snapshot paths are rejected."""
        with pytest.raises(ValueError, match="must be absolute"):
            DirectorySnapshot(path=Path("relative"), entries=())

    def test_names_and_len(self) -> None:
        """names lists entry names in order."""
        snapshot = DirectorySnapshot(
            path=Path("/srv"),
            entries=(Entry("a"), Entry("b", EntryKind.DIRECTORY)),
        )

        assert len(snapshot) == 2
        assert snapshot.names == ["a", "b"]

    def test_contains(self) -> None:
        """contains checks direct children only."""
        snapshot = DirectorySnapshot(path=Path("/srv/data"), entries=())

        assert snapshot.contains("/srv/data/file")
        assert snapshot.contains("file")
        assert not snapshot.contains("/srv/data/sub/file")
        assert not snapshot.contains("/srv/other/file")


class TestIsInDirectory:
    """Tests for is_in_directory function."""

    def test_normalizes_dot_segments(self) -> None:
        """Dot segments are resolved lexically."""
        assert is_in_directory("/srv/data/./file", Path("/srv/data"))
        assert is_in_directory("/srv/data/sub/../file", Path("/srv/data"))

    def test_trailing_separator(self) -> None:
        """A trailing separator on the path does not matter."""
        assert is_in_directory("/srv/data/sub/", Path("/srv/data"))

    def test_relative_nested(self) -> None:
        """Relative nested paths are not direct children."""
        assert not is_in_directory("sub/file", Path("/srv/data"))
