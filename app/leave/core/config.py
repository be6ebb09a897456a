"""Run configuration for leave.

The configuration is built once by the CLI from the parsed options
and is immutable for the rest of the run.
"""

from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LeaveConfig(BaseModel):
    """Options for a single leave run.

    Attributes:
        working_directory: Directory to operate in. None means the
            process current directory; a relative path is resolved
            against it.
        preserve_names: Names given on the command line that must survive.
        recursive: Remove non-preserved directories and all their contents.
        delete_empty_dirs: Remove non-preserved directories that are empty.
        force: Do not fail when a preserved name does not exist.
        dry_run: Report what would be removed without removing anything.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    working_directory: Annotated[
        Path | None,
        Field(description="Directory to operate in (None = current directory)"),
    ] = None
    preserve_names: Annotated[
        frozenset[str],
        Field(default_factory=frozenset, description="Names to preserve"),
    ]
    recursive: Annotated[bool, Field(description="Delete directories recursively")] = False
    delete_empty_dirs: Annotated[bool, Field(description="Delete empty directories")] = False
    force: Annotated[bool, Field(description="Ignore missing preserved names")] = False
    dry_run: Annotated[bool, Field(description="Do not modify the filesystem")] = False

    @field_validator("preserve_names", mode="before")
    @classmethod
    def collect_names(cls, v: object) -> object:
        """Accept any iterable of names, collapsing duplicates."""
        if isinstance(v, str):
            msg = "preserve_names must be a collection of names, not a single string"
            raise ValueError(msg)
        if isinstance(v, list | tuple | set):
            return frozenset(v)
        return v
