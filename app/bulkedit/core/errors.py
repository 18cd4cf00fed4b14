"""Error taxonomy for bulk operations.

Every failure that aborts a bulk operation is a BulkEditError subclass
carrying the process exit status the CLI should return. Per-entry
rename and removal failures are not exceptions: they are recorded on
the individual result objects and the batch continues.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit statuses returned by the CLI."""

    SUCCESS = 0
    FAILURE = 1
    INVALID_TARGET = 2
    INVALID_APPLICATION = 3
    EMPTY_TARGET = 4
    TEMP_FILE = 5
    EDITOR = 6
    LINE_MISMATCH = 7
    CONFIG = 8


class BulkEditError(Exception):
    """Base exception for errors that abort a bulk operation."""

    exit_code: ExitCode = ExitCode.FAILURE


class InvalidTargetError(BulkEditError):
    """Raised when the target is neither a directory nor an application."""

    exit_code = ExitCode.INVALID_TARGET


class InvalidApplicationError(BulkEditError):
    """Raised when the requested editor cannot be found in PATH."""

    exit_code = ExitCode.INVALID_APPLICATION


class EmptyTargetError(BulkEditError):
    """Raised when there are no entries to work on."""

    exit_code = ExitCode.EMPTY_TARGET


class TempFileError(BulkEditError):
    """Raised when the temporary manifest cannot be created, written or read."""

    exit_code = ExitCode.TEMP_FILE


class EditorError(BulkEditError):
    """Raised when the editor fails to launch or exits abnormally."""

    exit_code = ExitCode.EDITOR


class LineMismatchError(BulkEditError):
    """Raised when lines were added to or removed from a rename manifest."""

    exit_code = ExitCode.LINE_MISMATCH

    def __init__(self, expected: int, found: int) -> None:
        self.expected = expected
        self.found = found
        super().__init__(
            f"Line mismatch in temporary file: expected {expected} line(s), found {found}"
        )
