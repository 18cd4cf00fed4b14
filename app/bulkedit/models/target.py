"""Target models for bulk remove.

The first positional argument of ``bulkedit remove`` can name either
the directory to work on or the application to edit with. It is
resolved once into a Target and never probed again.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class TargetKind(Enum):
    """What a bulk remove operates on.

    Attributes:
        AMBIENT: The working directory listing already held by the caller.
        DIRECTORY: An explicit directory, enumerated afresh.
    """

    AMBIENT = "ambient"
    DIRECTORY = "directory"


@dataclass(frozen=True, slots=True)
class Target:
    """Resolved bulk remove target.

    Attributes:
        kind: Whether the ambient listing or an explicit directory is used.
        path: Directory path as given by the user (None for AMBIENT).
    """

    kind: TargetKind
    path: Path | None = None

    def __post_init__(self) -> None:
        """Validate target data after initialization."""
        if self.kind == TargetKind.DIRECTORY and self.path is None:
            msg = "Directory target requires a path"
            raise ValueError(msg)
        if self.kind == TargetKind.AMBIENT and self.path is not None:
            msg = "Ambient target cannot have a path"
            raise ValueError(msg)

    @property
    def is_ambient(self) -> bool:
        """Check if this target is the ambient working listing."""
        return self.kind == TargetKind.AMBIENT

    @classmethod
    def ambient(cls) -> "Target":
        """Create a target for the ambient working listing."""
        return cls(kind=TargetKind.AMBIENT)

    @classmethod
    def directory(cls, path: str | Path) -> "Target":
        """Create a target for an explicit directory."""
        return cls(kind=TargetKind.DIRECTORY, path=Path(path))


@dataclass(frozen=True, slots=True)
class RemoveRequest:
    """Parameters of one bulk remove invocation.

    Attributes:
        target: Where the entries come from.
        application: Editor to open the manifest with (None = default opener).
    """

    target: Target
    application: str | None = None
