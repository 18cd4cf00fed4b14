"""Reconciliation of edited manifests into file operations.

Removal compares by presence: an entry whose line disappeared is
removed. Rename compares by position: line N of the edited manifest is
the new name of entry N, so the line count must not change.
"""

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from bulkedit.core.errors import LineMismatchError
from bulkedit.editing.manifest import strip_marker
from bulkedit.filesystem.models import SELF_OR_PARENT, Entry
from bulkedit.models.operation import RenamePair
from bulkedit.models.target import Target

logger = logging.getLogger(__name__)


def removal_base(target: Target, workspace: Path) -> Path:
    """Get the directory removal candidates are resolved against.

    Args:
        target: The resolved remove target.
        workspace: Absolute path of the ambient working directory.

    Returns:
        The workspace for the ambient target, the target itself when it
        is absolute, or the target joined under the workspace otherwise.
    """
    if target.is_ambient or target.path is None:
        return workspace
    if target.path.is_absolute():
        return target.path
    return workspace / target.path


def _kept_names(lines: Iterable[str]) -> set[str]:
    """Collect every name an edited removal manifest keeps.

    A line keeps both its literal text and the text without a trailing
    marker, and a leading "./" is ignored. A regular file named "notes?"
    must survive even though "?" is also the unknown-kind marker.
    """
    kept: set[str] = set()
    for line in lines:
        for name in (line, strip_marker(line)):
            kept.add(name)
            if name.startswith("./"):
                kept.add(name[2:])
    return kept


def compute_removals(
    entries: Sequence[Entry],
    edited_lines: Iterable[str],
    base: Path,
) -> list[str]:
    """Compute the paths to remove from an edited removal manifest.

    An entry is removed when its name no longer appears in the edited
    manifest (exact string match). "." and ".." are never removed.

    Args:
        entries: Entries originally written to the manifest.
        edited_lines: Entry lines read back from the edited manifest.
        base: Directory the entry names are relative to.

    Returns:
        Paths to remove, in listing order.
    """
    kept = _kept_names(edited_lines)
    to_remove = [
        str(base / entry.path)
        for entry in entries
        if entry.path not in SELF_OR_PARENT and entry.path not in kept
    ]
    logger.debug("%d of %d entries marked for removal", len(to_remove), len(entries))
    return to_remove


def compute_renames(originals: Sequence[str], edited: Sequence[str]) -> list[RenamePair]:
    """Pair original and edited manifest lines by position.

    Args:
        originals: Lines written to the manifest, in order.
        edited: Lines read back from the edited manifest, in order.

    Returns:
        One RenamePair per line whose text changed, in manifest order.

    Raises:
        LineMismatchError: If the edited manifest has a different number
            of entry lines. No pairing is attempted in that case.
    """
    if len(edited) != len(originals):
        raise LineMismatchError(expected=len(originals), found=len(edited))

    pairs = [
        RenamePair(old=old, new=new)
        for old, new in zip(originals, edited, strict=True)
        if old != new
    ]
    logger.debug("%d of %d entries renamed in manifest", len(pairs), len(originals))
    return pairs
