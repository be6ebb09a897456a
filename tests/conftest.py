"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable
from pathlib import Path

import pytest

# None = empty file, dict = directory, str = symlink target
TreeSpec = dict[str, "None | str | TreeSpec"]


def populate_tree(root: Path, spec: TreeSpec) -> None:
    """Create files, directories and symlinks under root from a nested dict."""
    for name, value in spec.items():
        path = root / name
        if value is None:
            path.write_text("")
        elif isinstance(value, str):
            path.symlink_to(value)
        elif isinstance(value, dict):
            path.mkdir()
            populate_tree(path, value)
        else:
            msg = f"Unsupported tree value for {name}: {value!r}"
            raise TypeError(msg)


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[TreeSpec], Path]:
    """Build a directory tree in a fresh temporary directory.

    Returns:
        Factory that takes a tree spec and returns the populated directory.
    """

    def _make(spec: TreeSpec) -> Path:
        root = tmp_path / "work"
        root.mkdir()
        populate_tree(root, spec)
        return root

    return _make
