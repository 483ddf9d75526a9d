# Author: PB & Claude
# Maintainer: PB
# Original date: 2025.06.10
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/git_ssb/backend/sbot.py

"""
Backend that talks to a running ssb server through its command-line client.

Every call runs `<sbot_command> <method> [--arg value ...]` and parses the
JSON the client prints. The `ssb_appname` environment variable is passed
through so the client reaches the server of the selected profile.
"""

import json
import os
import subprocess
from typing import Any, Iterator, Optional

import orjson
from loguru import logger

from git_ssb.backend.protocols import Backend, BackendSession, RepoHandle
from git_ssb.system.exceptions import BackendError

REPO_MSG_TYPE = "git-repo"
ABOUT_MSG_TYPE = "about"


def _iter_json_values(text: str) -> Iterator[Any]:
    """Yield each JSON document from the concatenated output of a stream call."""
    decoder = json.JSONDecoder()
    pos = 0
    text = text.strip()
    while pos < len(text):
        value, end = decoder.raw_decode(text, pos)
        yield value
        pos = end
        while pos < len(text) and text[pos].isspace():
            pos += 1


class SbotRepo(RepoHandle):
    """Handle on a repository created by an SbotSession."""

    def __init__(self, rid: str):
        self.id = rid
        self.closed = False

    def close(self) -> None:
        self.closed = True


class SbotSession(BackendSession):
    """Session against one ssb server, identified by its feed id."""

    def __init__(self, backend: "SbotBackend", feed_id: str):
        self.backend = backend
        self.feed_id = feed_id
        self.closed = False

    def _call(self, *args: str) -> str:
        if self.closed:
            raise BackendError("ssb session is closed")
        return self.backend.call(*args)

    def _publish(self, msg_type: str, **fields: str) -> dict:
        args = ["publish", "--type", msg_type]
        for key, value in fields.items():
            args += [f"--{key}", value]
        try:
            msg = orjson.loads(self._call(*args))
        except orjson.JSONDecodeError as e:
            raise BackendError(f"unexpected reply to publish: {e}") from e
        if not isinstance(msg, dict) or "key" not in msg:
            raise BackendError(f"publish returned no message key: {msg!r}")
        return msg

    def create_repo(self, upstream: Optional[str] = None) -> SbotRepo:
        fields = {"upstream": upstream} if upstream else {}
        msg = self._publish(REPO_MSG_TYPE, **fields)
        logger.debug(f"Created repo {msg['key']} (upstream={upstream})")
        return SbotRepo(msg["key"])

    def list_forks(self, rid: str) -> list[dict]:
        output = self._call("links", "--dest", rid, "--rel", "upstream", "--values")
        forks = []
        try:
            for link in _iter_json_values(output):
                if not isinstance(link, dict) or "key" not in link:
                    continue
                content = (link.get("value") or {}).get("content") or {}
                if content and content.get("type") != REPO_MSG_TYPE:
                    continue
                forks.append({"id": link["key"], "author": link.get("source")})
        except json.JSONDecodeError as e:
            raise BackendError(f"unexpected reply to links: {e}") from e
        return forks

    def publish_name(self, rid: str, name: str) -> str:
        msg = self._publish(ABOUT_MSG_TYPE, about=rid, name=name)
        return msg["key"]

    def close(self) -> None:
        self.closed = True
        logger.debug("Closed ssb session")


class SbotBackend(Backend):
    """Runs the ssb server's command-line client for each request."""

    def __init__(self, command: str = "ssb-server", appname: Optional[str] = None):
        self.command = command
        self.appname = appname

    def _env(self) -> dict[str, str]:
        env = os.environ.copy()
        if self.appname:
            env["ssb_appname"] = self.appname
        return env

    def call(self, *args: str) -> str:
        """Run one client call and return its stdout.

        Raises:
            BackendError: if the client cannot be run or exits non-zero
        """
        cmd = [self.command, *args]
        logger.debug(f"Running: {' '.join(cmd)}")
        try:
            result = subprocess.run(
                cmd, capture_output=True, text=True, check=False, env=self._env()
            )
        except OSError as e:
            raise BackendError(f"could not run {self.command}: {e}", command=cmd) from e

        if result.returncode != 0:
            stderr = result.stderr.strip()
            raise BackendError(
                f"{' '.join(cmd)} failed ({result.returncode}): {stderr}",
                command=cmd,
                stderr=stderr,
            )
        return result.stdout

    def connect(self) -> SbotSession:
        try:
            whoami = orjson.loads(self.call("whoami"))
        except orjson.JSONDecodeError as e:
            raise BackendError(f"unexpected reply to whoami: {e}") from e
        feed_id = whoami.get("id") if isinstance(whoami, dict) else None
        if not feed_id:
            raise BackendError(f"whoami returned no feed id: {whoami!r}")
        logger.debug(f"Connected to ssb server as {feed_id}")
        return SbotSession(self, feed_id)


def create_backend(config) -> SbotBackend:
    """Build the backend selected by `config` (an SsbConfig)."""
    return SbotBackend(command=config.sbot_command, appname=config.appname)
