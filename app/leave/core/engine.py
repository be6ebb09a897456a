"""Deletion engine.

Removes the selected entries of the working directory according to the
directory policy, with failures isolated per entry. This is the only
part of leave that modifies the filesystem.
"""

import errno
import logging
import os
import stat
from collections.abc import Sequence
from pathlib import Path

from leave.core.models import DeletionOutcome, DirectoryEntry, EntryKind, OutcomeStatus
from leave.errors import DeletionError

logger = logging.getLogger(__name__)

SKIP_DIRECTORY = "Is a directory (use -d for empty or -r for all directories)"
SKIP_NOT_EMPTY = "Directory is not empty (use -r to remove it)"


class DeletionEngine:
    """Deletes directory entries and records one outcome per entry.

    Files, symlinks and other entries are unlinked. Directories are
    removed with all their contents when ``recursive`` is set, removed
    only when empty when ``delete_empty_dirs`` is set, and skipped
    otherwise.

    Attributes:
        _base_path: Directory the entries live in.
        _recursive: Remove directories regardless of contents.
        _delete_empty_dirs: Remove directories with no entries.
        _dry_run: Report removals without performing them.
    """

    def __init__(
        self,
        base_path: Path,
        *,
        recursive: bool = False,
        delete_empty_dirs: bool = False,
        dry_run: bool = False,
    ) -> None:
        """Initialize the DeletionEngine.

        Args:
            base_path: Absolute path of the working directory.
            recursive: If True, remove directories and their contents.
            delete_empty_dirs: If True, remove empty directories.
            dry_run: If True, report what would be deleted without deleting.
        """
        self._base_path = base_path
        self._recursive = recursive
        self._delete_empty_dirs = delete_empty_dirs
        self._dry_run = dry_run

    def delete(self, targets: Sequence[DirectoryEntry]) -> list[DeletionOutcome]:
        """Process every target and return the outcomes in the same order.

        A failing target never stops processing of the others.

        Args:
            targets: Entries selected for deletion.

        Returns:
            List of DeletionOutcome, one per target.
        """
        return [self._delete_single(entry) for entry in targets]

    def _delete_single(self, entry: DirectoryEntry) -> DeletionOutcome:
        """Dispatch a single entry to the matching removal strategy."""
        if entry.kind == EntryKind.DIRECTORY:
            return self._delete_directory(entry)

        if self._dry_run:
            logger.info("Dry-run: would remove %s", entry.name)
            return DeletionOutcome(entry=entry, status=OutcomeStatus.SUCCESS, dry_run=True)

        try:
            os.unlink(self._base_path / entry.name)
        except OSError as e:
            return self._failed(entry, DeletionError(entry.name, "unlink", e))

        logger.info("Removed %s %s", entry.kind.value, entry.name)
        return DeletionOutcome(entry=entry, status=OutcomeStatus.SUCCESS)

    def _delete_directory(self, entry: DirectoryEntry) -> DeletionOutcome:
        """Apply the directory policy to a single directory entry."""
        path = self._base_path / entry.name

        if self._recursive:
            if self._dry_run:
                logger.info("Dry-run: would remove directory tree %s", entry.name)
                return DeletionOutcome(entry=entry, status=OutcomeStatus.SUCCESS, dry_run=True)
            errors = remove_tree(path)
            if errors:
                return self._failed(entry, errors[0])
            logger.info("Removed directory tree %s", entry.name)
            return DeletionOutcome(entry=entry, status=OutcomeStatus.SUCCESS)

        if not self._delete_empty_dirs:
            logger.debug("Skipping directory %s", entry.name)
            return DeletionOutcome(entry=entry, status=OutcomeStatus.SKIPPED, detail=SKIP_DIRECTORY)

        try:
            with os.scandir(path) as it:
                is_empty = next(it, None) is None
        except OSError as e:
            return self._failed(entry, DeletionError(entry.name, "scandir", e))

        if not is_empty:
            logger.debug("Skipping non-empty directory %s", entry.name)
            return DeletionOutcome(entry=entry, status=OutcomeStatus.SKIPPED, detail=SKIP_NOT_EMPTY)

        if self._dry_run:
            logger.info("Dry-run: would remove empty directory %s", entry.name)
            return DeletionOutcome(entry=entry, status=OutcomeStatus.SUCCESS, dry_run=True)

        try:
            os.rmdir(path)
        except OSError as e:
            return self._failed(entry, DeletionError(entry.name, "rmdir", e))

        logger.info("Removed empty directory %s", entry.name)
        return DeletionOutcome(entry=entry, status=OutcomeStatus.SUCCESS)

    def _failed(self, entry: DirectoryEntry, error: DeletionError) -> DeletionOutcome:
        """Build a failed outcome and log it."""
        logger.warning("%s", error)
        return DeletionOutcome(entry=entry, status=OutcomeStatus.FAILED, error=error)


def remove_tree(root: Path) -> list[DeletionError]:
    """Remove a directory and everything below it, depth-first.

    Uses an explicit stack instead of call recursion. Symbolic links are
    unlinked and never followed; every directory is re-checked with
    lstat right before it is listed, so one swapped for a symlink after
    the scan is reported instead of descended into. A directory is
    removed only after all of its children. Errors do not stop the
    walk; the remaining siblings are still removed and every error is
    returned.

    Args:
        root: Directory to remove.

    Returns:
        Errors encountered, in the order they happened. Empty on success.
    """
    name = root.name
    errors: list[DeletionError] = []
    # (path, children_done)
    stack: list[tuple[str, bool]] = [(os.fspath(root), False)]

    while stack:
        current, children_done = stack.pop()

        if children_done:
            try:
                os.rmdir(current)
            except OSError as e:
                errors.append(DeletionError(name, "rmdir", e))
            continue

        try:
            mode = os.lstat(current).st_mode
        except OSError as e:
            errors.append(DeletionError(name, "lstat", e))
            continue
        if not stat.S_ISDIR(mode):
            cause = NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), current)
            errors.append(DeletionError(name, "lstat", cause))
            continue

        stack.append((current, True))
        try:
            with os.scandir(current) as it:
                children = list(it)
        except OSError as e:
            errors.append(DeletionError(name, "scandir", e))
            continue

        for child in children:
            try:
                is_dir = child.is_dir(follow_symlinks=False)
            except OSError:
                is_dir = False
            if is_dir:
                stack.append((child.path, False))
                continue
            try:
                os.unlink(child.path)
            except OSError as e:
                errors.append(DeletionError(name, "unlink", e))

    return errors
