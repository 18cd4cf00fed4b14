"""Operation models for bulk rename and bulk remove.

This module defines the pending operations computed from an edited
manifest, the per-entry results of applying them, and the report that
summarizes one bulk invocation.
"""

from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True, slots=True)
class RenamePair:
    """A single pending rename.

    Attributes:
        old: Original path, as listed in the manifest.
        new: Edited path from the same manifest line.
    """

    old: str
    new: str

    def __post_init__(self) -> None:
        """Validate rename data after initialization."""
        if not self.old or not self.new:
            msg = "Rename paths cannot be empty"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class RenameResult:
    """Result of a single rename.

    Attributes:
        pair: The rename that was attempted.
        success: Whether the rename completed successfully.
        error: System reason if the rename failed, None otherwise.
        cross_device: Whether the external move fallback was used.
        dry_run: Whether this was a dry-run (no actual rename).
    """

    pair: RenamePair
    success: bool
    error: str | None = None
    cross_device: bool = False
    dry_run: bool = False

    @property
    def failed(self) -> bool:
        """Check if the rename failed."""
        return not self.success


@dataclass(frozen=True, slots=True)
class RemovalResult:
    """Result of a single removal.

    Attributes:
        path: Absolute path that was operated on.
        success: Whether the removal completed successfully.
        error: System reason if the removal failed, None otherwise.
        dry_run: Whether this was a dry-run (no actual removal).
    """

    path: str
    success: bool
    error: str | None = None
    dry_run: bool = False

    @property
    def failed(self) -> bool:
        """Check if the removal failed."""
        return not self.success


class BulkStatus(Enum):
    """Outcome of a bulk invocation.

    Attributes:
        APPLIED: Changes were computed and applied (possibly with failures).
        NOTHING_TO_DO: The manifest was not effectively edited.
        DECLINED: The user declined the confirmation prompt.
    """

    APPLIED = "applied"
    NOTHING_TO_DO = "nothing_to_do"
    DECLINED = "declined"


@dataclass(slots=True)
class BulkReport:
    """Summary of one bulk rename or bulk remove invocation.

    Attributes:
        status: Overall outcome.
        renames: Per-pair rename results (rename only).
        removals: Per-path removal results (remove only).
        workspace_affected: Whether an entry of the working directory changed.
        cleanup_error: Reason the temporary manifest could not be deleted.
    """

    status: BulkStatus
    renames: list[RenameResult] = field(default_factory=list)
    removals: list[RemovalResult] = field(default_factory=list)
    workspace_affected: bool = False
    cleanup_error: str | None = None

    @property
    def renamed_count(self) -> int:
        """Number of entries actually renamed."""
        return sum(1 for r in self.renames if r.success and not r.dry_run)

    @property
    def removed_count(self) -> int:
        """Number of entries actually removed."""
        return sum(1 for r in self.removals if r.success and not r.dry_run)

    @property
    def failure_count(self) -> int:
        """Number of per-entry failures."""
        return sum(1 for r in self.renames if r.failed) + sum(
            1 for r in self.removals if r.failed
        )

    @property
    def success(self) -> bool:
        """Check if the invocation completed without any failure."""
        return self.failure_count == 0 and self.cleanup_error is None
