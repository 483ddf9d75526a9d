# Author: PB & Claude
# Maintainer: PB
# Original date: 2025.06.01
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/git_ssb/cli/utils.py

"""
CLI output helpers shared by the dispatcher and the entry point.

Everything that ends the process goes through typer.Exit so that the exit
code is the same whether the app runs from the console script or CliRunner.
"""

from typing import NoReturn

import typer
from rich.console import Console

from git_ssb.system.display import out

__all__ = ["out", "report_error", "handle_operation_error"]


def report_error(err_console: Console, prog: str, message: str, code: int = 1) -> NoReturn:
    """Print `prog: message` to stderr and exit with `code`.

    Raises:
        typer.Exit: always
    """
    out(err_console, f"{prog}: {message}")
    raise typer.Exit(code)


def handle_operation_error(err_console: Console, prog: str, operation: str, error: Exception) -> NoReturn:
    """Report an error raised while performing `operation` and exit 1."""
    report_error(err_console, prog, f"error {operation}: {error}")
