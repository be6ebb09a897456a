"""Unit tests for LeaveConfig."""

from pathlib import Path

import pytest
from leave.core.config import LeaveConfig
from pydantic import ValidationError


class TestLeaveConfig:
    """Tests for LeaveConfig Pydantic model."""

    def test_defaults(self) -> None:
        """All flags default to off and nothing is preserved."""
        config = LeaveConfig()

        assert config.working_directory is None
        assert config.preserve_names == frozenset()
        assert config.recursive is False
        assert config.delete_empty_dirs is False
        assert config.force is False
        assert config.dry_run is False

    def test_list_of_names_collapses_duplicates(self) -> None:
        """Duplicate names are collapsed into one."""
        config = LeaveConfig(preserve_names=["a", "b", "a"])

        assert config.preserve_names == frozenset({"a", "b"})

    def test_single_string_rejected(self) -> None:
        """A bare string is not silently split into characters."""
        with pytest.raises(ValidationError, match="not a single string"):
            LeaveConfig(preserve_names="abc")

    def test_working_directory_coerced_to_path(self) -> None:
        """A string directory is parsed into a Path."""
        config = LeaveConfig(working_directory="some/dir")

        assert config.working_directory == Path("some/dir")

    def test_is_frozen(self) -> None:
        """Configuration cannot be modified after construction."""
        config = LeaveConfig()

        with pytest.raises(ValidationError):
            config.recursive = True  # type: ignore[misc]

    def test_unknown_field_rejected(self) -> None:
        """Extra fields are forbidden."""
        with pytest.raises(ValidationError):
            LeaveConfig(interactive=True)  # type: ignore[call-arg]
