# Author: PB & Claude
# Maintainer: PB
# Original date: 2025.06.11
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/git_ssb/cli/dispatch.py

"""
Command dispatcher.

The command line is parsed once into an immutable Command, then routed by
its CommandKind to exactly one handler. Help and usage output, version output
and user-facing errors all end here; backend errors are left to propagate.
"""

from dataclasses import dataclass
from enum import Enum
from importlib.metadata import PackageNotFoundError, version
from typing import Callable, NoReturn, Optional, Sequence

import typer
from loguru import logger
from rich.console import Console

from git_ssb.backend.protocols import Backend
from git_ssb.backend.sbot import create_backend
from git_ssb.cli.help import COMMAND_HELP, USAGE
from git_ssb.cli.utils import handle_operation_error, out, report_error
from git_ssb.config.manager import PROG, SsbConfig
from git_ssb.core import workflow
from git_ssb.core.web import run_web
from git_ssb.system.exceptions import (
    ConfigError,
    PreconditionError,
    ResolutionError,
    UsageError,
)

DIST_NAME = "git-ssb"


class CommandKind(Enum):
    CREATE = "create"
    FORK = "fork"
    FORKS = "forks"
    NAME = "name"
    WEB = "web"
    HELP = "help"
    VERSION = "version"
    USAGE = ""
    UNKNOWN = None


_KINDS_BY_TOKEN = {
    kind.value: kind for kind in CommandKind
    if kind not in (CommandKind.USAGE, CommandKind.UNKNOWN)
}


@dataclass(frozen=True)
class Command:
    """One parsed invocation: subcommand, its positional args and flags."""
    kind: CommandKind
    token: Optional[str] = None
    args: tuple[str, ...] = ()
    help: bool = False
    version: bool = False
    public: bool = False


def _is_option(arg: str) -> bool:
    return arg.startswith("-") and len(arg) > 1


def parse_command(
    argv: Sequence[str],
    help: bool = False,
    version: bool = False,
    public: bool = False,
) -> Command:
    """Build a Command from positional tokens and parsed flags.

    Unknown options are dropped, the way a minimist-style parser would
    store and ignore them. An option written without `=` takes the next
    token as its value unless that token is itself an option, so
    `create --port 8009` still creates remote `ssb`.
    """
    positional = []
    i = 0
    while i < len(argv):
        arg = argv[i]
        i += 1
        if not _is_option(arg):
            positional.append(arg)
            continue
        if "=" not in arg and i < len(argv) and not _is_option(argv[i]):
            logger.debug(f"Ignoring unknown option {arg} {argv[i]}")
            i += 1
        else:
            logger.debug(f"Ignoring unknown option {arg}")

    if not positional:
        return Command(CommandKind.USAGE, help=help, version=version, public=public)

    token, args = positional[0], tuple(positional[1:])
    kind = _KINDS_BY_TOKEN.get(token, CommandKind.UNKNOWN)
    return Command(kind, token=token, args=args, help=help, version=version, public=public)


def show_usage(console: Console, code: int = 0) -> NoReturn:
    out(console, USAGE)
    raise typer.Exit(code)


def show_help(console: Console, err_console: Console, cmd: Optional[str], prog: str = PROG) -> None:
    """Print help for `cmd`, or general usage when `cmd` is None."""
    if cmd is None:
        show_usage(console)
    if cmd not in COMMAND_HELP:
        report_error(err_console, prog, f"No help for command '{cmd}'")
    out(console, COMMAND_HELP[cmd])


def show_version(console: Console, err_console: Console, prog: str = PROG) -> None:
    try:
        pkg_version = version(DIST_NAME)
    except PackageNotFoundError as e:
        handle_operation_error(err_console, prog, "retrieving version", e)
    out(console, f"{DIST_NAME} {pkg_version}")


def _run(
    command: Command,
    config: SsbConfig,
    console: Console,
    err_console: Console,
    backend_factory: Callable[[SsbConfig], Backend],
    prog: str,
) -> None:
    kind, args = command.kind, command.args

    if kind is CommandKind.USAGE:
        show_usage(console)
    elif kind is CommandKind.CREATE:
        remote_name = args[0] if args and args[0] else workflow.DEFAULT_REMOTE_NAME
        workflow.create_repo(console, backend_factory(config), remote_name)
    elif kind is CommandKind.FORK:
        workflow.fork_repo(console, backend_factory(config), args)
    elif kind is CommandKind.FORKS:
        workflow.list_forks(console, backend_factory(config), args)
    elif kind is CommandKind.NAME:
        workflow.name_repo(console, backend_factory(config), args)
    elif kind is CommandKind.WEB:
        code = run_web(config, args, public=command.public)
        if code:
            raise typer.Exit(code)
    elif kind is CommandKind.HELP:
        show_help(console, err_console, args[0] if args else None, prog)
    elif kind is CommandKind.VERSION:
        show_version(console, err_console, prog)
    else:
        report_error(err_console, prog, f"No such command '{command.token}'")


def dispatch(
    command: Command,
    config: SsbConfig,
    console: Console,
    err_console: Console,
    backend_factory: Optional[Callable[[SsbConfig], Backend]] = None,
    prog: str = PROG,
) -> None:
    """Run the behavior selected by `command`.

    Raises:
        typer.Exit: after usage output, and with code 1 after user errors
        BackendError: backend failures are not handled here
    """
    if command.help:
        show_help(console, err_console, command.token, prog)
        return
    if command.version:
        show_version(console, err_console, prog)
        return

    try:
        _run(command, config, console, err_console, backend_factory or create_backend, prog)
    except UsageError as e:
        if e.command in COMMAND_HELP:
            logger.debug(str(e))
            out(console, COMMAND_HELP[e.command])
            raise typer.Exit(1)
        report_error(err_console, prog, str(e))
    except (PreconditionError, ResolutionError, ConfigError) as e:
        report_error(err_console, prog, str(e))
