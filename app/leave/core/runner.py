"""Core entry point that runs the leave pipeline.

Stages run strictly in order and none is re-entered:
resolve -> scan -> select -> delete -> report.
"""

import logging
from pathlib import Path

from leave.core.config import LeaveConfig
from leave.core.engine import DeletionEngine
from leave.core.paths import resolve_target
from leave.core.report import RunReport
from leave.core.scanner import DirectoryScanner
from leave.core.selector import select_targets

logger = logging.getLogger(__name__)


def run_leave(config: LeaveConfig, origin: Path | None = None) -> RunReport:
    """Delete everything in the working directory except the preserved names.

    Args:
        config: Run configuration.
        origin: Directory a relative working directory is resolved
            against. Defaults to the process current directory.

    Returns:
        RunReport with one outcome per deleted, skipped or failed entry.

    Raises:
        DirectoryError: If the working directory cannot be used.
        ScanError: If the working directory cannot be listed.
        MissingFileError: If preserved names are missing and force is off.
    """
    target = resolve_target(config, origin)
    entries = DirectoryScanner(target.base_path).scan()
    selection = select_targets(entries, target.preserve_set, force=config.force)

    for name in selection.missing:
        logger.warning("Preserved name %s does not exist in %s", name, target.base_path)

    engine = DeletionEngine(
        target.base_path,
        recursive=config.recursive,
        delete_empty_dirs=config.delete_empty_dirs,
        dry_run=config.dry_run,
    )
    outcomes = engine.delete(selection.targets)

    return RunReport(
        base_path=target.base_path,
        outcomes=tuple(outcomes),
        missing=selection.missing,
        dry_run=config.dry_run,
    )
