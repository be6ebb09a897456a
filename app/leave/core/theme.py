"""Console styles for leave output.

One style per message kind and one per outcome status. Colors are
validated hex codes so a bad default fails at import, not mid-run.
"""

from pydantic import BaseModel, ConfigDict, field_validator
from rich.theme import Theme

from leave.core.models import OutcomeStatus

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class ThemeColors(BaseModel):
    """Colors used by the leave console.

    Attributes:
        info, success, warning, error: Message kinds.
        muted, header, border: Table chrome.
        removed, skipped, failed, dry_run: Outcome statuses.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    info: str = "#0ec1c8"
    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"

    muted: str = "#b2bec3"
    header: str = "#69B9A1"
    border: str = "#29526d"

    removed: str = "#03b971"
    skipped: str = "#faf870"
    failed: str = "#f53263"
    dry_run: str = "#0ec1c8"

    @field_validator("*")
    @classmethod
    def check_hex(cls, v: str) -> str:
        """Accept #RGB or #RRGGBB only."""
        digits = v.removeprefix("#")
        if not v.startswith("#") or len(digits) not in (3, 6) or not set(digits) <= _HEX_DIGITS:
            msg = f"expected a #RGB or #RRGGBB color, got {v!r}"
            raise ValueError(msg)
        return v


# Style name used for each outcome status in tables and summaries
STATUS_STYLES: dict[OutcomeStatus, str] = {
    OutcomeStatus.SUCCESS: "removed",
    OutcomeStatus.SKIPPED: "skipped",
    OutcomeStatus.FAILED: "failed",
}


def build_theme(colors: ThemeColors | None = None) -> Theme:
    """Turn ThemeColors into the Rich theme the consoles use."""
    colors = colors or ThemeColors()
    styles = colors.model_dump()
    styles["error"] = f"bold {colors.error}"
    styles["failed"] = f"bold {colors.failed}"
    styles["bold_header"] = f"bold {colors.header}"
    return Theme(styles)
