# Author: PB & Claude
# Maintainer: PB
# Original date: 2025.06.10
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# tests/test_workflow.py

"""Tests for the create, fork, forks and name workflows."""

import pytest

from git_ssb.core import workflow
from git_ssb.system.exceptions import (
    BackendError,
    PreconditionError,
    ResolutionError,
    UsageError,
)

from conftest import FEED_ID, FORK_ID, REPO_ID, UPSTREAM_ID


def printed(console) -> list[str]:
    return [call.args[0] for call in console.print.call_args_list]


class TestCreateRepo:
    def test_creates_prints_url_and_adds_remote(self, console, backend, sbot_session, fake_git):
        url = workflow.create_repo(console, backend, "ssb")

        assert url == f"ssb://{REPO_ID}"
        assert printed(console) == [f"ssb://{REPO_ID}"]
        sbot_session.create_repo.assert_called_once_with(upstream=None)
        assert fake_git.added == [("ssb", f"ssb://{REPO_ID}")]

    def test_default_remote_name(self, console, backend, fake_git):
        workflow.create_repo(console, backend)
        assert fake_git.added == [("ssb", f"ssb://{REPO_ID}")]

    def test_backend_released_before_remote_is_added(
        self, console, backend, sbot_session, repo_handle, fake_git
    ):
        events = []
        repo_handle.close.side_effect = lambda: events.append("repo.close")
        sbot_session.close.side_effect = lambda: events.append("session.close")
        console.print.side_effect = lambda *a, **kw: events.append("print")
        fake_git.on_popen = lambda cmd: events.append("remote.add")

        workflow.create_repo(console, backend, "ssb")

        assert events == ["print", "repo.close", "session.close", "remote.add"]

    def test_existing_remote_fails_before_backend(self, console, backend, fake_git):
        fake_git.remotes = {"ssb": f"ssb://{UPSTREAM_ID}"}

        with pytest.raises(PreconditionError) as exc_info:
            workflow.create_repo(console, backend, "ssb")

        assert str(exc_info.value) == "Remote 'ssb' already exists"
        backend.connect.assert_not_called()
        assert fake_git.added == []
        console.print.assert_not_called()

    def test_passes_upstream(self, console, backend, sbot_session):
        workflow.create_repo(console, backend, "myfork", upstream=UPSTREAM_ID)
        sbot_session.create_repo.assert_called_once_with(upstream=UPSTREAM_ID)

    def test_backend_error_propagates_without_remote(self, console, backend, sbot_session, fake_git):
        sbot_session.create_repo.side_effect = BackendError("publish failed")

        with pytest.raises(BackendError):
            workflow.create_repo(console, backend, "ssb")

        assert fake_git.added == []
        console.print.assert_not_called()

    def test_connect_error_propagates(self, console, backend, fake_git):
        backend.connect.side_effect = BackendError("server not running")

        with pytest.raises(BackendError, match="server not running"):
            workflow.create_repo(console, backend, "ssb")
        assert fake_git.added == []


class TestForkRepo:
    def test_two_args_resolves_named_remote(self, console, backend, sbot_session, fake_git):
        fake_git.remotes = {"origin": f"ssb://{UPSTREAM_ID}", "ssb": f"ssb://{FORK_ID}"}

        workflow.fork_repo(console, backend, ["origin", "myfork"])

        sbot_session.create_repo.assert_called_once_with(upstream=UPSTREAM_ID)
        assert not fake_git.looked_up("ssb")
        assert fake_git.added == [("myfork", f"ssb://{REPO_ID}")]

    def test_two_args_with_explicit_id(self, console, backend, sbot_session, fake_git):
        workflow.fork_repo(console, backend, [f"ssb://{UPSTREAM_ID}", "myfork"])

        sbot_session.create_repo.assert_called_once_with(upstream=UPSTREAM_ID)
        assert not fake_git.looked_up("origin")

    def test_one_arg_uses_default_remotes(self, console, backend, sbot_session, fake_git):
        fake_git.remotes = {"ssb": f"ssb://{UPSTREAM_ID}"}

        workflow.fork_repo(console, backend, ["myfork"])

        sbot_session.create_repo.assert_called_once_with(upstream=UPSTREAM_ID)
        assert fake_git.looked_up("origin")
        assert fake_git.added == [("myfork", f"ssb://{REPO_ID}")]

    def test_one_arg_without_upstream(self, console, backend, fake_git):
        with pytest.raises(ResolutionError, match="unable to find git-ssb upstream to fork"):
            workflow.fork_repo(console, backend, ["myfork"])
        backend.connect.assert_not_called()
        assert fake_git.added == []

    def test_two_args_unknown_upstream(self, console, backend, fake_git):
        with pytest.raises(ResolutionError) as exc_info:
            workflow.fork_repo(console, backend, ["nowhere", "myfork"])
        assert str(exc_info.value) == "unable to find git-ssb upstream 'nowhere'"
        backend.connect.assert_not_called()

    @pytest.mark.parametrize("args", [[], ["a", "b", "c"], ["a", "b", "c", "d"]])
    def test_wrong_arity_is_usage_error(self, console, backend, fake_git, args):
        with pytest.raises(UsageError) as exc_info:
            workflow.fork_repo(console, backend, args)
        assert exc_info.value.command == "fork"
        backend.connect.assert_not_called()
        assert fake_git.calls == []
        assert fake_git.added == []

    def test_empty_remote_name(self, console, backend, fake_git):
        with pytest.raises(UsageError, match="missing remote name") as exc_info:
            workflow.fork_repo(console, backend, [UPSTREAM_ID, ""])
        assert exc_info.value.command is None
        backend.connect.assert_not_called()

    def test_target_remote_exists(self, console, backend, fake_git):
        fake_git.remotes = {"origin": f"ssb://{UPSTREAM_ID}"}
        with pytest.raises(PreconditionError, match="Remote 'origin' already exists"):
            workflow.fork_repo(console, backend, ["origin"])
        backend.connect.assert_not_called()


class TestListForks:
    def test_prints_forks(self, console, backend, sbot_session, fake_git):
        fake_git.remotes = {"origin": f"ssb://{UPSTREAM_ID}"}
        sbot_session.list_forks.return_value = [
            {"id": FORK_ID, "author": FEED_ID},
            {"id": REPO_ID, "author": None},
        ]

        forks = workflow.list_forks(console, backend, [])

        sbot_session.list_forks.assert_called_once_with(UPSTREAM_ID)
        sbot_session.close.assert_called_once()
        assert len(forks) == 2
        assert printed(console) == [f"ssb://{FORK_ID} {FEED_ID}", f"ssb://{REPO_ID}"]

    def test_explicit_repo(self, console, backend, sbot_session):
        workflow.list_forks(console, backend, [UPSTREAM_ID])
        sbot_session.list_forks.assert_called_once_with(UPSTREAM_ID)
        console.print.assert_not_called()

    def test_no_repo_found(self, console, backend):
        with pytest.raises(ResolutionError, match="unable to find git-ssb repo"):
            workflow.list_forks(console, backend, [])
        backend.connect.assert_not_called()

    def test_too_many_args(self, console, backend):
        with pytest.raises(UsageError) as exc_info:
            workflow.list_forks(console, backend, ["a", "b"])
        assert exc_info.value.command == "forks"


class TestNameRepo:
    def test_names_default_repo(self, console, backend, sbot_session, fake_git):
        fake_git.remotes = {"ssb": f"ssb://{REPO_ID}"}

        key = workflow.name_repo(console, backend, ["my-project"])

        sbot_session.publish_name.assert_called_once_with(REPO_ID, "my-project")
        sbot_session.close.assert_called_once()
        assert printed(console) == [key]

    def test_names_explicit_repo(self, console, backend, sbot_session):
        workflow.name_repo(console, backend, [UPSTREAM_ID, "other"])
        sbot_session.publish_name.assert_called_once_with(UPSTREAM_ID, "other")

    def test_empty_name(self, console, backend):
        with pytest.raises(UsageError, match="missing name"):
            workflow.name_repo(console, backend, [UPSTREAM_ID, ""])
        backend.connect.assert_not_called()

    @pytest.mark.parametrize("args", [[], ["a", "b", "c"]])
    def test_wrong_arity(self, console, backend, args):
        with pytest.raises(UsageError) as exc_info:
            workflow.name_repo(console, backend, args)
        assert exc_info.value.command == "name"
