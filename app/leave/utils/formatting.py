"""Rich console output for leave.

Entry names come straight from the filesystem or the command line.
They may hold surrogate escapes for bytes that are not valid UTF-8 and
characters Rich would read as markup, so every name goes through
``printable`` before it reaches a console.
"""

import os
from collections.abc import Iterable

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from leave.core.models import DeletionOutcome
from leave.core.theme import STATUS_STYLES, build_theme

_theme = build_theme()
console = Console(theme=_theme)
err_console = Console(theme=_theme, stderr=True)


def printable(text: str) -> str:
    """Make filesystem-derived text safe to print as Rich markup.

    Undecodable bytes are shown as ``\\xNN`` escapes.
    """
    try:
        raw = os.fsencode(text)
    except UnicodeError:
        raw = text.encode("utf-8", "backslashreplace")
    return escape(raw.decode("utf-8", "backslashreplace"))


def format_outcome_row(outcome: DeletionOutcome) -> tuple[str, str, str, str]:
    """Format an outcome as (name, type, status, details) with markup."""
    if outcome.dry_run:
        style, label, detail = "dry_run", "dry-run", "Would remove"
    else:
        style = label = STATUS_STYLES[outcome.status]
        reason = outcome.error if outcome.error is not None else outcome.detail
        detail = printable(str(reason)) if reason else ""

    return (
        printable(outcome.entry.name),
        outcome.entry.kind.value,
        f"[{style}]{label}[/]",
        detail,
    )


def create_outcome_table(
    outcomes: Iterable[DeletionOutcome] = (),
    title: str = "Results",
) -> Table:
    """Build the per-entry results table shown with --verbose."""
    table = Table(title=title, header_style="bold_header", border_style="border")
    table.add_column("Name", style="bold", no_wrap=True)
    table.add_column("Type", style="muted", width=9)
    table.add_column("Status", width=9)
    table.add_column("Details", style="muted")
    for outcome in outcomes:
        table.add_row(*format_outcome_row(outcome))
    return table


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
