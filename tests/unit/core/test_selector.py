"""Unit tests for complement selection."""

import pytest
from leave.core.models import DirectoryEntry, EntryKind
from leave.core.selector import select_targets
from leave.errors import MissingFileError

ENTRIES = [
    DirectoryEntry("main.rs", EntryKind.FILE),
    DirectoryEntry("other.rs", EntryKind.FILE),
    DirectoryEntry("src", EntryKind.DIRECTORY),
    DirectoryEntry("test.rs", EntryKind.FILE),
]


class TestSelectTargets:
    """Tests for select_targets."""

    def test_complement_of_preserve_set(self) -> None:
        """Everything not preserved is selected, in scan order."""
        selection = select_targets(ENTRIES, frozenset({"main.rs"}))

        assert [e.name for e in selection.targets] == ["other.rs", "src", "test.rs"]
        assert selection.missing == ()

    def test_empty_preserve_set_selects_everything(self) -> None:
        """With nothing preserved every entry is a target."""
        selection = select_targets(ENTRIES, frozenset())

        assert list(selection.targets) == ENTRIES

    def test_everything_preserved(self) -> None:
        """Preserving every entry selects nothing."""
        names = frozenset(e.name for e in ENTRIES)

        assert select_targets(ENTRIES, names).targets == ()

    def test_missing_without_force_raises(self) -> None:
        """Missing preserved names abort with the full list."""
        with pytest.raises(MissingFileError) as exc_info:
            select_targets(ENTRIES, frozenset({"main.rs", "zeta", "alpha"}))

        assert exc_info.value.missing == ("alpha", "zeta")
        assert "alpha, zeta" in str(exc_info.value)

    def test_missing_with_force_is_reported(self) -> None:
        """With force, missing names are returned and deletion proceeds."""
        selection = select_targets(ENTRIES, frozenset({"main.rs", "gone"}), force=True)

        assert selection.missing == ("gone",)
        assert [e.name for e in selection.targets] == ["other.rs", "src", "test.rs"]

    def test_matching_is_case_sensitive(self) -> None:
        """A name differing only in case does not match."""
        with pytest.raises(MissingFileError):
            select_targets(ENTRIES, frozenset({"MAIN.rs"}))

    def test_path_does_not_match_top_level_entry(self) -> None:
        """A nested path never preserves its top-level directory."""
        selection = select_targets(ENTRIES, frozenset({"src/lib.rs"}), force=True)

        assert selection.missing == ("src/lib.rs",)
        assert "src" in [e.name for e in selection.targets]

    def test_accepts_any_iterable(self) -> None:
        """Entries may be given as a generator."""
        selection = select_targets(iter(ENTRIES), frozenset({"src"}))

        assert len(selection.targets) == 3
