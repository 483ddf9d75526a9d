# Author: PB & Claude
# Maintainer: PB
# Original date: 2025.06.10
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/git_ssb/core/resolver.py

"""
Repository id resolution.

A repository on ssb is addressed by the id of the message that created it,
e.g. ``%Jd8c...Q4=.sha256``. Users may give that id directly, an
``ssb://<id>`` URL, or the name of a git remote whose URL embeds the id.
"""

import re
from typing import Final, Optional

from loguru import logger

from git_ssb.core import remotes
from git_ssb.system.exceptions import ResolutionError

URL_SCHEME: Final = "ssb"

# Remotes tried, in order, when no repository is named
DEFAULT_REMOTES: Final[tuple[str, ...]] = ("origin", "ssb")

_MSG_ID_RE = re.compile(r"%[A-Za-z0-9/+]{43}=\.\w+", re.ASCII)
_URL_PREFIX_RE = re.compile(rf"^{URL_SCHEME}:/*")


def is_repo_id(value: str) -> bool:
    return bool(_MSG_ID_RE.fullmatch(value))


def repo_id(value: Optional[str]) -> Optional[str]:
    """Extract a repository id from a bare id or an ssb:// URL.

    Returns None if `value` does not carry a well-formed id.
    """
    if not value:
        return None
    candidate = _URL_PREFIX_RE.sub("", str(value).strip())
    return candidate if is_repo_id(candidate) else None


def repo_url(rid: str) -> str:
    return f"{URL_SCHEME}://{rid}"


def repo_id_from_remote(name: str) -> Optional[str]:
    """Look up remote `name` and extract the repository id from its URL."""
    rid = repo_id(remotes.get_remote_url(name))
    logger.debug(f"Remote {name!r} -> {rid!r}")
    return rid


def resolve(token: Optional[str] = None, what: str = "repo") -> str:
    """Resolve a token (id, URL or remote name) to a repository id.

    With no token, the remotes in DEFAULT_REMOTES are tried in order and the
    first that points at an ssb repository wins.

    Args:
        token: id, URL or git remote name; None to use the default remotes
        what: wording for the error message, e.g. "upstream to fork"

    Raises:
        ResolutionError: if no repository id could be found
    """
    if token is None:
        for name in DEFAULT_REMOTES:
            rid = repo_id_from_remote(name)
            if rid:
                return rid
        raise ResolutionError(f"unable to find git-ssb {what}")

    rid = repo_id(token) or repo_id_from_remote(token)
    if not rid:
        raise ResolutionError(f"unable to find git-ssb {what} '{token}'", token=token)
    return rid
