"""Working directory and preserve-name resolution.

The working directory is returned as an explicit base path that the
rest of the pipeline is anchored to. The process current directory is
never changed.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from leave.core.config import LeaveConfig
from leave.errors import DirectoryError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ResolvedTarget:
    """Canonical form of the directory and names a run operates on.

    Attributes:
        base_path: Absolute path of the working directory.
        preserve_set: Normalized preserved names.
    """

    base_path: Path
    preserve_set: frozenset[str]


def resolve_working_directory(chdir: Path | None, origin: Path | None = None) -> Path:
    """Resolve the directory leave should operate in.

    Args:
        chdir: Directory given with --chdir, or None for the current directory.
        origin: Directory a relative ``chdir`` is resolved against.
            Defaults to the process current directory.

    Returns:
        Absolute path of the working directory.

    Raises:
        DirectoryError: If the path does not exist or is not a directory.
    """
    base = origin if origin is not None else Path.cwd()
    path = base if chdir is None else base / chdir.expanduser()
    path = Path(os.path.abspath(path))

    try:
        if not path.exists():
            raise DirectoryError(path, "No such file or directory")
        if not path.is_dir():
            raise DirectoryError(path, "Not a directory")
    except OSError as e:
        raise DirectoryError(path, e.strerror or str(e)) from e

    return path


def normalize_preserve_name(name: str, base_path: Path) -> str | None:
    """Reduce a preserved name to the base name it refers to.

    Only ``.`` components and trailing separators are dropped, so
    ``./a``, ``a/`` and ``/abs/base/a`` all become ``a``. ``..`` is
    kept as-is: ``dir/../a`` is not ``a``. Names that point below or
    outside ``base_path`` keep their separators and can therefore never
    match a scanned entry.

    Args:
        name: Name as given on the command line.
        base_path: Absolute working directory.

    Returns:
        Normalized name, or None if the name is the working directory
        itself (``.``), which exists but protects no entry.
    """
    if not name:
        return name

    candidate = Path(name)
    if candidate == Path(".") or candidate == base_path:
        return None
    if candidate.is_absolute() and candidate.parent == base_path:
        return candidate.name
    return str(candidate)


def resolve_target(config: LeaveConfig, origin: Path | None = None) -> ResolvedTarget:
    """Resolve the working directory and normalize the preserve-set.

    Args:
        config: Run configuration.
        origin: Directory a relative --chdir is resolved against.

    Returns:
        ResolvedTarget with the base path and normalized names.

    Raises:
        DirectoryError: If the working directory cannot be used.
    """
    base_path = resolve_working_directory(config.working_directory, origin)
    normalized = (normalize_preserve_name(name, base_path) for name in config.preserve_names)
    preserve_set = frozenset(name for name in normalized if name is not None)
    logger.debug("Resolved working directory %s, preserving %s", base_path, sorted(preserve_set))
    return ResolvedTarget(base_path=base_path, preserve_set=preserve_set)
