"""Run report and exit status aggregation."""

from dataclasses import dataclass
from pathlib import Path

from leave.core.models import DeletionOutcome, OutcomeStatus

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


@dataclass(frozen=True, slots=True)
class RunReport:
    """Collected outcome of a completed leave run.

    Attributes:
        base_path: Directory the run operated in.
        outcomes: One outcome per deletion target, in processing order.
        missing: Preserved names that did not exist (only with --force).
        dry_run: Whether no removal was actually performed.
    """

    base_path: Path
    outcomes: tuple[DeletionOutcome, ...]
    missing: tuple[str, ...] = ()
    dry_run: bool = False

    def _with_status(self, status: OutcomeStatus) -> list[DeletionOutcome]:
        return [o for o in self.outcomes if o.status == status]

    @property
    def succeeded(self) -> list[DeletionOutcome]:
        """Outcomes of entries that were removed."""
        return self._with_status(OutcomeStatus.SUCCESS)

    @property
    def skipped(self) -> list[DeletionOutcome]:
        """Outcomes of entries intentionally left in place."""
        return self._with_status(OutcomeStatus.SKIPPED)

    @property
    def failed(self) -> list[DeletionOutcome]:
        """Outcomes of entries whose removal failed."""
        return self._with_status(OutcomeStatus.FAILED)

    @property
    def has_failures(self) -> bool:
        """Check if any entry failed."""
        return any(o.failed for o in self.outcomes)

    @property
    def exit_code(self) -> int:
        """Process exit status for this run.

        Missing names that were forced through are warnings and do not
        affect the status.
        """
        return EXIT_FAILURE if self.has_failures else EXIT_SUCCESS
