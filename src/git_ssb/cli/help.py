# Author: PB & Claude
# Maintainer: PB
# Original date: 2025.06.11
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/git_ssb/cli/help.py

"""Usage and per-command help text."""

from typing import Final

from git_ssb.config.manager import PROG

USAGE: Final = f"""Usage: {PROG} [--version] [--help] [command]

Commands:
  create    Create a git repo on SSB
  fork      Fork a git repo on SSB
  forks     List forks of a repo
  name      Name a repo
  web       Serve a web server for repos
  help      Get help about a command"""

COMMAND_HELP: Final[dict[str, str]] = {
    "help": f"""Usage: {PROG} help <command>

  Get help about a git-ssb command

Options:
  command   Command to get help with""",

    "create": f"""Usage: {PROG} create [<remote_name>]

  Create a new git-ssb repo and add it as a git remote

Options:
  remote_name   Name of the remote to add. default: 'ssb'""",

    "fork": f"""Usage: {PROG} fork [<upstream>] <remote_name>

  Create a new git-ssb repo as a fork of another repo
  and add it as a git remote

Arguments:
  upstream      id, url, or git remote name of the repo to fork.
                default: 'origin' or 'ssb'
  remote_name   Name for the new remote""",

    "forks": f"""Usage: {PROG} forks [<repo>]

  List repos that are forks of the given repo

Arguments:
  repo      id, url, or git remote name of the base repo.
                default: 'origin' or 'ssb'""",

    "name": f"""Usage: {PROG} name [<repo>] <name>

  Publish a name for a git-ssb repo

Arguments:
  repo      id, url, or git remote name of the base repo.
                default: 'origin' or 'ssb'
  name      the name to give the repo""",

    "web": f"""Usage: {PROG} web [<host:port>] [<options>]

  Host a git ssb web server

Options:
  host        Host to bind to. default: localhost
  port        Port to bind to. default: 7718
  --public    Make the instance read-only""",
}
