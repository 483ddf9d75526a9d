# Author: PB & Claude
# Maintainer: PB
# Original date: 2025.06.10
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/git_ssb/core/workflow.py

"""
Repository workflows: create, fork, forks, name.

Preconditions and upstream resolution run before the backend is contacted.
The backend session is released as soon as the new repository URL has been
printed, and only then is the git remote added.
"""

from typing import Optional, Sequence

from loguru import logger
from rich.console import Console

from git_ssb.backend.protocols import Backend
from git_ssb.core import remotes
from git_ssb.core.resolver import repo_url, resolve
from git_ssb.system.display import out
from git_ssb.system.exceptions import PreconditionError, UsageError

DEFAULT_REMOTE_NAME = "ssb"


def create_repo(
    console: Console,
    backend: Backend,
    remote_name: str = DEFAULT_REMOTE_NAME,
    upstream: Optional[str] = None,
) -> str:
    """Create a repository on ssb and add it as git remote `remote_name`.

    Args:
        console: Rich console for output
        backend: Backend to create the repository on
        remote_name: Name of the git remote to add
        upstream: Repository id this one is forked from

    Returns:
        URL of the new repository

    Raises:
        PreconditionError: if `remote_name` is already configured
        BackendError: if the backend fails (not handled here)
    """
    if remotes.has_remote(remote_name):
        raise PreconditionError(f"Remote '{remote_name}' already exists", remote_name=remote_name)

    sbot = backend.connect()
    repo = sbot.create_repo(upstream=upstream)
    url = repo_url(repo.id)
    out(console, url)
    repo.close()
    sbot.close()

    # Not awaited: git reports its own errors on the inherited stdio
    remotes.add_remote(remote_name, url)
    return url


def fork_repo(console: Console, backend: Backend, args: Sequence[str]) -> str:
    """Fork a repository: `fork [upstream] remote_name`.

    Raises:
        UsageError: wrong number of arguments, or an empty remote name
        ResolutionError: if the upstream cannot be found
        PreconditionError: if the remote name is already configured
    """
    if len(args) == 1:
        name = args[0]
        upstream = resolve(None, what="upstream to fork")
    elif len(args) == 2:
        upstream = resolve(args[0], what="upstream")
        name = args[1]
    else:
        raise UsageError(f"fork takes 1 or 2 arguments, got {len(args)}", command="fork")

    if not name:
        raise UsageError("missing remote name")

    logger.debug(f"Forking {upstream} as remote {name!r}")
    return create_repo(console, backend, name, upstream=upstream)


def list_forks(console: Console, backend: Backend, args: Sequence[str]) -> list[dict]:
    """List repositories forked from a repo: `forks [repo]`."""
    if len(args) > 1:
        raise UsageError(f"forks takes at most 1 argument, got {len(args)}", command="forks")
    rid = resolve(args[0] if args else None, what="repo")

    sbot = backend.connect()
    forks = sbot.list_forks(rid)
    sbot.close()

    for fork in forks:
        line = repo_url(fork["id"])
        if fork.get("author"):
            line += f" {fork['author']}"
        out(console, line)
    return forks


def name_repo(console: Console, backend: Backend, args: Sequence[str]) -> str:
    """Publish a name for a repo: `name [repo] name`."""
    if len(args) == 1:
        rid = resolve(None, what="repo")
        name = args[0]
    elif len(args) == 2:
        rid = resolve(args[0], what="repo")
        name = args[1]
    else:
        raise UsageError(f"name takes 1 or 2 arguments, got {len(args)}", command="name")

    if not name:
        raise UsageError("missing name")

    sbot = backend.connect()
    key = sbot.publish_name(rid, name)
    sbot.close()
    out(console, key)
    return key
