"""Data models for bulkedit.

This module exports the core data structures used throughout the application.
"""

from bulkedit.models.operation import (
    BulkReport,
    BulkStatus,
    RemovalResult,
    RenamePair,
    RenameResult,
)
from bulkedit.models.target import RemoveRequest, Target, TargetKind

__all__ = [
    "BulkReport",
    "BulkStatus",
    "RemovalResult",
    "RemoveRequest",
    "RenamePair",
    "RenameResult",
    "Target",
    "TargetKind",
]
