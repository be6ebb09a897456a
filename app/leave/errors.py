"""Error types raised by the leave core.

Fatal errors (DirectoryError, ScanError, MissingFileError) are raised
before any filesystem mutation. DeletionError is per-entry and is
recorded on the entry's outcome instead of being raised out of the
deletion engine.
"""

from pathlib import Path


class LeaveError(Exception):
    """Base exception for all leave errors."""


class DirectoryError(LeaveError):
    """Raised when the working directory is missing or not a directory."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Can't use {path} as working directory: {reason}")


class ScanError(LeaveError):
    """Raised when the working directory cannot be listed."""

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Can't list contents of {path}: {_describe(cause)}")


class MissingFileError(LeaveError):
    """Raised when preserved names do not exist and --force was not given.

    Attributes:
        missing: Every preserved name that had no matching entry.
    """

    def __init__(self, missing: tuple[str, ...]) -> None:
        self.missing = missing
        names = ", ".join(missing)
        super().__init__(
            f"One or more provided files don't exist: {names}. "
            "This is likely a mistake. To continue anyways, use -f/--force."
        )


class DeletionError(LeaveError):
    """Failure to remove a single entry.

    Attributes:
        name: Base name of the entry that could not be removed.
        operation: Filesystem operation that failed (unlink, rmdir, scandir).
        cause: Underlying OS error.
    """

    def __init__(self, name: str, operation: str, cause: OSError) -> None:
        self.name = name
        self.operation = operation
        self.cause = cause
        super().__init__(f"Can't remove {name}: {operation} failed: {_describe(cause)}")


def _describe(error: OSError) -> str:
    """Render an OSError without the errno prefix."""
    if error.strerror:
        if error.filename is not None:
            return f"{error.strerror}: {error.filename}"
        return error.strerror
    return str(error)
