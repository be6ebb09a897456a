"""Main CLI application entry point.

Defines the Typer application, parses the options into a LeaveConfig,
runs the core pipeline and renders the report.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer

from leave import __version__
from leave.core.config import LeaveConfig
from leave.core.report import EXIT_FAILURE, RunReport
from leave.core.runner import run_leave
from leave.errors import LeaveError, MissingFileError
from leave.utils.formatting import (
    console,
    create_outcome_table,
    print_error,
    print_info,
    print_success,
    print_warning,
    printable,
)

app = typer.Typer(
    name="leave",
    help="Delete everything in a directory except the given files.",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"leave version {__version__}")
        raise typer.Exit()


@app.command()
def main(
    files: Annotated[
        list[str] | None,
        typer.Argument(help="Files to leave present.", show_default=False),
    ] = None,
    chdir: Annotated[
        Path | None,
        typer.Option(
            "--chdir",
            "-C",
            metavar="DIR",
            help="Run as if started in DIR.",
        ),
    ] = None,
    recursive: Annotated[
        bool,
        typer.Option("--recursive", "-r", help="Recursively delete directories."),
    ] = False,
    dirs: Annotated[
        bool,
        typer.Option("--dirs", "-d", help="Delete empty directories."),
    ] = False,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Continue even if some files given on the command line don't exist.",
        ),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", "-n", help="Show what would be deleted."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show per-entry results and debug logs."),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Suppress the summary line."),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Delete every entry in the working directory except FILES."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )

    config = LeaveConfig(
        working_directory=chdir,
        preserve_names=frozenset(files or ()),
        recursive=recursive,
        delete_empty_dirs=dirs,
        force=force,
        dry_run=dry_run,
    )

    try:
        report = run_leave(config)
    except MissingFileError as e:
        for name in e.missing:
            print_warning(f"{printable(name)} doesn't exist.")
        print_error(printable(str(e)))
        raise typer.Exit(code=EXIT_FAILURE) from e
    except LeaveError as e:
        print_error(printable(str(e)))
        raise typer.Exit(code=EXIT_FAILURE) from e

    _print_report(report, verbose=verbose, quiet=quiet)
    raise typer.Exit(code=report.exit_code)


def run() -> None:
    """Console script entry point."""
    app()


# === Private helper functions ===


def _print_report(report: RunReport, *, verbose: bool, quiet: bool) -> None:
    """Display warnings, failures and the run summary."""
    for name in report.missing:
        print_warning(f"{printable(name)} doesn't exist.")

    if verbose and report.outcomes:
        title = "Results (dry-run)" if report.dry_run else "Results"
        console.print(create_outcome_table(report.outcomes, title))

    for outcome in report.failed:
        print_error(printable(str(outcome.error)))

    if quiet:
        return

    removed = len(report.succeeded)
    skipped = len(report.skipped)
    failed = len(report.failed)

    if report.dry_run:
        print_info(f"Dry-run: {removed} entry(s) would be removed, {skipped} skipped.")
    elif failed:
        print_warning(f"{removed} removed, {skipped} skipped, {failed} failed")
    elif removed or skipped:
        print_success(f"{removed} entry(s) removed, {skipped} skipped.")
    else:
        print_info("Nothing to remove.")
