"""Utility modules for leave.

This module exports the console output helpers.
"""

from leave.utils.formatting import (
    console,
    create_outcome_table,
    err_console,
    format_outcome_row,
    print_error,
    print_info,
    print_success,
    print_warning,
    printable,
)

__all__ = [
    "console",
    "create_outcome_table",
    "err_console",
    "format_outcome_row",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "printable",
]
