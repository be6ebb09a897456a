"""Domain models for directory entries and deletion outcomes.

This module defines the transient data structures passed between the
pipeline stages: scanned entries, the selection computed from them,
and the per-entry outcome recorded by the deletion engine.
"""

from dataclasses import dataclass
from enum import Enum

from leave.errors import DeletionError


class EntryKind(str, Enum):
    """Type of a directory entry, classified without following symlinks.

    Attributes:
        FILE: Regular file.
        DIRECTORY: Directory (never a symlink to one).
        SYMLINK: Symbolic link, dangling or not.
        OTHER: Device file, socket, FIFO or anything else.
    """

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    OTHER = "other"


class OutcomeStatus(str, Enum):
    """Terminal state of a deletion target.

    Attributes:
        SUCCESS: Entry was removed (or would be, in dry-run mode).
        SKIPPED: Entry was intentionally left in place.
        FAILED: Removal was attempted and failed.
    """

    SUCCESS = "success"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class DirectoryEntry:
    """A single immediate child of the working directory.

    Attributes:
        name: Base name within the working directory.
        kind: Entry type.
    """

    name: str
    kind: EntryKind

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not self.name:
            msg = "Entry name cannot be empty"
            raise ValueError(msg)

    @property
    def is_dir(self) -> bool:
        """Check if this entry is a real directory."""
        return self.kind == EntryKind.DIRECTORY


@dataclass(frozen=True, slots=True)
class Selection:
    """Result of comparing scanned entries against the preserve-set.

    Attributes:
        targets: Entries to delete, in scan order.
        missing: Preserved names with no matching entry, sorted.
    """

    targets: tuple[DirectoryEntry, ...]
    missing: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class DeletionOutcome:
    """Result of processing a single deletion target.

    Attributes:
        entry: The target that was processed.
        status: Terminal state reached.
        detail: Why the entry was skipped, None otherwise.
        error: Underlying failure if status is FAILED, None otherwise.
        dry_run: Whether the removal was only simulated.
    """

    entry: DirectoryEntry
    status: OutcomeStatus
    detail: str | None = None
    error: DeletionError | None = None
    dry_run: bool = False

    def __post_init__(self) -> None:
        """Validate that failed outcomes carry an error."""
        if self.status == OutcomeStatus.FAILED and self.error is None:
            msg = f"Failed outcome for {self.entry.name} must carry an error"
            raise ValueError(msg)

    @property
    def failed(self) -> bool:
        """Check if processing this entry failed."""
        return self.status == OutcomeStatus.FAILED
