"""Temporary manifest files.

A manifest is a plain text file listing one entry per line below a
block of ``#`` comment lines. It is handed to the user's editor and
read back afterwards. Line N of the manifest always corresponds to
entry N of the original listing.

The file lives exactly as long as one bulk operation: TemporaryManifest
creates it with an exclusive, collision-free name and deletes it on
every exit path.
"""

import logging
import os
import tempfile
from collections.abc import Iterable
from pathlib import Path
from types import TracebackType

from bulkedit.core.errors import TempFileError
from bulkedit.core.paths import ensure_tmp_dir
from bulkedit.filesystem.models import RECOGNIZED_MARKERS

logger = logging.getLogger(__name__)

COMMENT_PREFIX = "#"

# Undecodable bytes in file names round-trip through the manifest.
ENCODING = "utf-8"
ENCODING_ERRORS = "surrogateescape"

TMP_PREFIX = "bulkedit."

REMOVE_HEADER = """\
# bulkedit - Remove files in bulk
# Remove the lines of the files you want to be deleted, save and exit
# Just quit the editor without any edit to cancel the operation

"""

RENAME_HEADER = """\
# bulkedit - Rename files in bulk
# Edit file names, save, and quit the editor (you will be
# asked for confirmation)
# Just quit the editor without any edit to cancel the operation

"""


def manifest_line(path: str) -> str:
    """Get the manifest line for a path.

    Paths starting with the comment character would be skipped on
    read-back, so they are written with a "./" prefix.

    Args:
        path: Entry path (with its marker already appended, if any).

    Returns:
        The line to write, without trailing newline.
    """
    if path.startswith(COMMENT_PREFIX):
        return f"./{path}"
    return path


def strip_marker(line: str) -> str:
    """Strip a single trailing entry-kind marker from a manifest line.

    Args:
        line: Manifest line without trailing newline.

    Returns:
        The line without its marker, or the line unchanged.
    """
    if len(line) > 1 and line[-1] in RECOGNIZED_MARKERS:
        return line[:-1]
    return line


def read_manifest_lines(path: Path) -> list[str]:
    """Read the entry lines of a manifest.

    Comment lines and empty lines are skipped entirely: they do not
    take a positional slot. The trailing newline of every other line is
    removed; nothing else is changed.

    Args:
        path: Manifest file to read.

    Returns:
        Entry lines in file order.

    Raises:
        TempFileError: If the file cannot be read.
    """
    lines: list[str] = []
    try:
        with open(path, encoding=ENCODING, errors=ENCODING_ERRORS, newline="\n") as f:
            for raw in f:
                line = raw[:-1] if raw.endswith("\n") else raw
                if not line or line.startswith(COMMENT_PREFIX):
                    continue
                lines.append(line)
    except OSError as e:
        raise TempFileError(f"Cannot read temporary file '{path}': {e.strerror or e}") from e
    return lines


def parse_manifest(path: Path, *, strip_markers: bool = True) -> list[str]:
    """Parse a manifest into an ordered list of entry names.

    Paths are not checked for existence.

    Args:
        path: Manifest file to read.
        strip_markers: Strip one trailing entry-kind marker per line.

    Returns:
        Entry names in file order.

    Raises:
        TempFileError: If the file cannot be read.
    """
    lines = read_manifest_lines(path)
    if strip_markers:
        return [strip_marker(line) for line in lines]
    return lines


def count_entries(path: Path) -> int:
    """Count the entry lines (non-comment, non-empty) of a manifest.

    Args:
        path: Manifest file to read.

    Returns:
        Number of entry lines.

    Raises:
        TempFileError: If the file cannot be read.
    """
    return len(read_manifest_lines(path))


class TemporaryManifest:
    """Context manager owning one temporary manifest file.

    The file is created with mkstemp() (O_CREAT | O_EXCL, mode 0600),
    filled with the header and entry lines, and closed before the
    context body runs. Leaving the context deletes the file, whatever
    the reason for leaving.

    Attributes:
        path: Location of the manifest file (set on enter).
        cleanup_error: Reason the file could not be deleted, if any.
    """

    def __init__(self, directory: Path, header: str, lines: Iterable[str]) -> None:
        """Initialize the TemporaryManifest.

        Args:
            directory: Scratch directory to create the file in.
            header: Comment block written first.
            lines: Entry lines, written one per line in order.
        """
        self._directory = directory
        self._header = header
        self._lines = list(lines)
        self.path: Path | None = None
        self.cleanup_error: str | None = None

    def __enter__(self) -> Path:
        try:
            ensure_tmp_dir(self._directory)
        except RuntimeError as e:
            raise TempFileError(str(e)) from e

        try:
            fd, name = tempfile.mkstemp(prefix=TMP_PREFIX, dir=self._directory)
        except OSError as e:
            raise TempFileError(
                f"Cannot create temporary file in '{self._directory}': {e.strerror or e}"
            ) from e

        self.path = Path(name)
        try:
            with os.fdopen(fd, "w", encoding=ENCODING, errors=ENCODING_ERRORS) as f:
                f.write(self._header)
                for line in self._lines:
                    f.write(f"{line}\n")
        except (OSError, ValueError) as e:
            self._unlink()
            raise TempFileError(f"Cannot write temporary file '{name}': {e}") from e

        logger.debug("Wrote %d entries to %s", len(self._lines), self.path)
        return self.path

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self._unlink()

    def _unlink(self) -> None:
        """Delete the manifest file, recording any failure."""
        if self.path is None:
            return
        try:
            self.path.unlink()
        except FileNotFoundError:
            logger.debug("Temporary file %s already gone", self.path)
        except OSError as e:
            self.cleanup_error = f"Cannot remove temporary file '{self.path}': {e.strerror or e}"
            logger.warning("%s", self.cleanup_error)
        else:
            logger.debug("Removed temporary file %s", self.path)
