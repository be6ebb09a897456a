"""CLI package for leave.

This package contains the Typer application.
"""

from leave.cli.main import app

__all__ = ["app"]
