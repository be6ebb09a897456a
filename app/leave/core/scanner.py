"""Directory scanner for the working directory.

Lists the immediate children of the working directory and classifies
each one without following symbolic links.
"""

import logging
import os
from pathlib import Path

from leave.core.models import DirectoryEntry, EntryKind
from leave.errors import ScanError

logger = logging.getLogger(__name__)


class DirectoryScanner:
    """Lists the immediate entries of a directory.

    The scan is all-or-nothing: any error while listing or classifying
    an entry raises ScanError and no entries are returned.

    Args:
        base_path: Absolute path of the directory to list.
    """

    def __init__(self, base_path: Path) -> None:
        self._base_path = base_path

    def scan(self) -> list[DirectoryEntry]:
        """Scan the directory and return its entries sorted by name.

        Returns:
            One DirectoryEntry per immediate child.

        Raises:
            ScanError: If the directory cannot be read.
        """
        entries: list[DirectoryEntry] = []
        try:
            with os.scandir(self._base_path) as it:
                for dir_entry in it:
                    entries.append(
                        DirectoryEntry(name=dir_entry.name, kind=classify(dir_entry))
                    )
        except OSError as e:
            raise ScanError(self._base_path, e) from e

        entries.sort(key=lambda entry: entry.name)
        logger.debug("Scanned %d entries in %s", len(entries), self._base_path)
        return entries


def classify(dir_entry: os.DirEntry[str]) -> EntryKind:
    """Determine the kind of a scandir entry without following symlinks.

    Args:
        dir_entry: Entry yielded by os.scandir.

    Returns:
        EntryKind of the entry.
    """
    if dir_entry.is_symlink():
        return EntryKind.SYMLINK
    if dir_entry.is_dir(follow_symlinks=False):
        return EntryKind.DIRECTORY
    if dir_entry.is_file(follow_symlinks=False):
        return EntryKind.FILE
    return EntryKind.OTHER
