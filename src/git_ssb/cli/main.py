# Author: PB & Claude
# Maintainer: PB
# Original date: 2025.05.10
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/git_ssb/cli/main.py

"""
git-ssb command line entry point.

Installed as the `git-ssb` console script so git runs it for `git ssb ...`.
Typer collects the flags and the positional tokens; the subcommand itself is
chosen by git_ssb.cli.dispatch so that `--help <command>`, `help <command>`
and unknown commands behave the same way in every position.
"""

# Standard library imports
from typing import List, Optional

# Third-party imports
import typer
from rich.console import Console

# Local imports
from git_ssb.cli.dispatch import dispatch, parse_command
from git_ssb.cli.utils import report_error
from git_ssb.config.manager import PROG, SsbConfig
from git_ssb.system.exceptions import ConfigError
from git_ssb.system.logging_setup import setup_logging

app = typer.Typer(add_completion=False)

console = Console()
err_console = Console(stderr=True)


@app.command(
    context_settings={
        "help_option_names": [],
        "ignore_unknown_options": True,
    }
)
def main(
    args: Optional[List[str]] = typer.Argument(None, help="Command and its arguments"),
    help: bool = typer.Option(False, "--help", help="Show help for a command"),
    h: bool = typer.Option(False, "-h", help="Show help for a command"),
    version: bool = typer.Option(False, "--version", help="Show version and exit"),
    public: bool = typer.Option(False, "--public", help="web: make the instance read-only"),
    appname: Optional[str] = typer.Option(None, "--appname", help="ssb profile to use"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """git ssb - git repositories on Secure Scuttlebutt."""
    setup_logging(debug=debug)

    command = parse_command(args or [], help=help or h, version=version, public=public)

    try:
        config = SsbConfig.load(appname=appname)
    except ConfigError as e:
        report_error(err_console, PROG, str(e))

    if config.local_log:
        setup_logging(debug=debug, local_log=config.local_log)

    dispatch(command, config, console, err_console)


def cli_main() -> None:  # pragma: no cover - entry point
    """Entry point for the git-ssb console script."""
    app(prog_name=PROG)


if __name__ == "__main__":  # pragma: no cover
    cli_main()
