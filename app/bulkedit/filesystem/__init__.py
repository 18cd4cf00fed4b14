"""Filesystem access for bulk operations.

This module provides directory listing, entry classification,
protected path management, and the rename and removal operators.
"""

from bulkedit.filesystem.models import DirectorySnapshot, Entry, EntryKind
from bulkedit.filesystem.operator import RemovalOperator, RenameOperator
from bulkedit.filesystem.protected import PROTECTED_PATH_PATTERNS, is_protected_path
from bulkedit.filesystem.scanner import capture_snapshot, list_directory

__all__ = [
    "PROTECTED_PATH_PATTERNS",
    "DirectorySnapshot",
    "Entry",
    "EntryKind",
    "RemovalOperator",
    "RenameOperator",
    "capture_snapshot",
    "is_protected_path",
    "list_directory",
]
