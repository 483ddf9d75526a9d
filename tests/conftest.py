# Author: PB & Claude
# Maintainer: PB
# Original date: 2025.06.02
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# tests/conftest.py

"""
Shared test fixtures for the git-ssb test suite.

No test reaches the real git or ssb server: `subprocess.run` and
`subprocess.Popen` are replaced by FakeGit for every test, and workflows
get a Mock backend.
"""

import subprocess
from typing import Callable, Optional
from unittest.mock import Mock

import pytest
from loguru import logger

# Well-formed ssb message ids
REPO_ID = "%Jd8cLbhLQHwCyRdQgIoo0MW2hTQkXP8IZ4CTBCv8iP0=.sha256"
UPSTREAM_ID = "%q3OmzvAHx3B/yZOg5hAhPYQoVRcS4Tpm7trLhDfkq8g=.sha256"
FORK_ID = "%cTjRzdEXyx1IWk0v3zV2EJ7q5yGDsTpE2qVm8KdH9Hs=.sha256"
FEED_ID = "@EMovhfIrFk4NihAKnRNhrfRaqIhBv1Wj8pTxJNgvCCY=.ed25519"

_REAL_POPEN = subprocess.Popen


class FakeGit:
    """Stands in for the git executable: an in-memory remote list and config."""

    def __init__(self):
        self.remotes: dict[str, str] = {}
        self.config: dict[str, str] = {}
        self.fail_listing = False
        self.calls: list[list[str]] = []
        self.added: list[tuple[str, str]] = []
        self.on_popen: Optional[Callable[[list[str]], None]] = None

    def _result(self, cmd, code=0, stdout="", stderr=""):
        return subprocess.CompletedProcess(cmd, code, stdout, stderr)

    def run(self, cmd, **kwargs):
        cmd = list(cmd)
        if cmd[0] != "git":
            raise AssertionError(f"unexpected command {cmd}")
        self.calls.append(cmd)
        args = cmd[1:]

        if args == ["remote"]:
            if self.fail_listing:
                return self._result(cmd, 128, stderr="fatal: not a git repository\n")
            return self._result(cmd, stdout="".join(f"{name}\n" for name in self.remotes))

        if args[:2] == ["remote", "get-url"]:
            name = args[2]
            if name not in self.remotes:
                return self._result(cmd, 2, stderr=f"error: No such remote '{name}'\n")
            return self._result(cmd, stdout=self.remotes[name] + "\n")

        if args[0] == "config":
            key = args[1]
            if key not in self.config:
                return self._result(cmd, 1)
            return self._result(cmd, stdout=self.config[key] + "\n")

        raise AssertionError(f"unexpected git call {cmd}")

    def popen(self, cmd, **kwargs):
        cmd = list(cmd)
        if cmd[:3] != ["git", "remote", "add"]:
            raise AssertionError(f"unexpected background command {cmd}")
        self.added.append((cmd[3], cmd[4]))
        if self.on_popen:
            self.on_popen(cmd)
        return Mock(spec=_REAL_POPEN)

    def looked_up(self, name: str) -> bool:
        return ["git", "remote", "get-url", name] in self.calls


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep user config files and the ssb profile of the host out of tests."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.setenv("GIT_SSB_CONFIG_HOME", str(tmp_path / "git-ssb-config"))
    monkeypatch.setenv("ssb_appname", "ssb-test")
    return tmp_path


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop loguru sinks added during a test (CliRunner streams are closed afterwards)."""
    yield
    logger.remove()


@pytest.fixture(autouse=True)
def fake_git(monkeypatch):
    """Replace git with an in-memory FakeGit."""
    fake = FakeGit()
    monkeypatch.setattr(subprocess, "run", fake.run)
    monkeypatch.setattr(subprocess, "Popen", fake.popen)
    return fake


@pytest.fixture
def repo_handle():
    repo = Mock()
    repo.id = REPO_ID
    return repo


@pytest.fixture
def sbot_session(repo_handle):
    session = Mock()
    session.create_repo.return_value = repo_handle
    session.list_forks.return_value = []
    session.publish_name.return_value = "%about-message-key"
    return session


@pytest.fixture
def backend(sbot_session):
    backend = Mock()
    backend.connect.return_value = sbot_session
    return backend


@pytest.fixture
def console():
    return Mock()
