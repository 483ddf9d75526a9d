# Author: PB & Claude
# Maintainer: PB
# Original date: 2025.06.10
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/git_ssb/core/remotes.py

"""
Access to the local git remote configuration.

Queries (list, get-url, config) block until git exits. Adding a remote is
launched in the background with inherited stdio and never awaited, so git
reports its own errors directly to the user.
"""

import subprocess
from typing import Optional

from loguru import logger


def _run_git(args: list[str]) -> Optional[str]:
    """Run a git query and return its stdout, or None if git failed."""
    cmd = ["git", *args]
    try:
        result = subprocess.run(cmd, capture_output=True, text=True, check=False)
    except OSError as e:
        logger.debug(f"Could not run {' '.join(cmd)}: {e}")
        return None

    if result.returncode != 0:
        logger.debug(f"{' '.join(cmd)} exited {result.returncode}: {result.stderr.strip()}")
        return None
    return result.stdout


def list_remote_names() -> list[str]:
    """List configured git remote names.

    Any failure (not a git repository, git not installed) is treated as
    having no remotes at all.
    """
    output = _run_git(["remote"])
    if output is None:
        return []
    return [line.strip() for line in output.splitlines() if line.strip()]


def get_remote_url(name: Optional[str]) -> Optional[str]:
    """Return the URL of remote `name`, or None if it is not configured."""
    if not name:
        return None
    output = _run_git(["remote", "get-url", name])
    if output is None:
        return None
    return output.strip() or None


def has_remote(name: str) -> bool:
    """True if a remote with exactly this name is configured."""
    return name in list_remote_names()


def add_remote(name: str, url: str) -> subprocess.Popen:
    """Start `git remote add name url` without waiting for it."""
    logger.debug(f"Adding git remote {name} -> {url}")
    return subprocess.Popen(["git", "remote", "add", name, url])


def get_git_config(key: str) -> Optional[str]:
    """Read a single git config value; None when unset."""
    output = _run_git(["config", key])
    if output is None:
        return None
    return output.strip() or None
