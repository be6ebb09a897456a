"""Complement selection against the preserve-set."""

import logging
from collections.abc import Iterable

from leave.core.models import DirectoryEntry, Selection
from leave.errors import MissingFileError

logger = logging.getLogger(__name__)


def select_targets(
    entries: Iterable[DirectoryEntry],
    preserve_set: frozenset[str],
    force: bool = False,
) -> Selection:
    """Compute which entries to delete and which preserved names are missing.

    Matching is exact and case-sensitive on base names.

    Args:
        entries: Scanned entries of the working directory.
        preserve_set: Normalized names that must survive.
        force: If True, missing preserved names are returned instead of raising.

    Returns:
        Selection with the deletion targets and missing names.

    Raises:
        MissingFileError: If a preserved name has no matching entry and
            force is False.
    """
    entries = list(entries)
    present = {entry.name for entry in entries}
    missing = tuple(sorted(name for name in preserve_set if name not in present))

    if missing and not force:
        raise MissingFileError(missing)

    targets = tuple(entry for entry in entries if entry.name not in preserve_set)
    logger.debug(
        "Selected %d of %d entries for deletion (%d preserved name(s) missing)",
        len(targets),
        len(entries),
        len(missing),
    )
    return Selection(targets=targets, missing=missing)
