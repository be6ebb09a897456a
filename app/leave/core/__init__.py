"""Core selection-and-deletion engine for leave.

The pipeline runs in a fixed order: resolve the working directory,
scan it, select the complement of the preserve-set, delete, and
aggregate the outcomes into a report.
"""

from leave.core.config import LeaveConfig
from leave.core.engine import DeletionEngine
from leave.core.models import (
    DeletionOutcome,
    DirectoryEntry,
    EntryKind,
    OutcomeStatus,
    Selection,
)
from leave.core.paths import ResolvedTarget, resolve_target
from leave.core.report import RunReport
from leave.core.runner import run_leave
from leave.core.scanner import DirectoryScanner
from leave.core.selector import select_targets

__all__ = [
    "DeletionEngine",
    "DeletionOutcome",
    "DirectoryEntry",
    "DirectoryScanner",
    "EntryKind",
    "LeaveConfig",
    "OutcomeStatus",
    "ResolvedTarget",
    "RunReport",
    "Selection",
    "resolve_target",
    "run_leave",
    "select_targets",
]
