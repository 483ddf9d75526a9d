# Author: PB & Claude
# Maintainer: PB
# Original date: 2025.01.08
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/git_ssb/backend/protocols.py

"""Abstract protocols for the repository-hosting backend."""

from abc import ABC, abstractmethod
from typing import Optional


class RepoHandle(ABC):
    """A repository created on the backend."""

    id: str

    @abstractmethod
    def close(self) -> None:
        raise NotImplementedError("close() not implemented")


class BackendSession(ABC):
    """An open connection to the backend (one per invocation)."""

    @abstractmethod
    def create_repo(self, upstream: Optional[str] = None) -> RepoHandle:
        """Create a new git repository, optionally as a fork of `upstream`.

        Args:
            upstream: repository id of the repo being forked

        Returns:
            Handle of the new repository

        Raises:
            BackendError: if the backend refuses or fails
        """
        raise NotImplementedError("create_repo() not implemented")

    @abstractmethod
    def list_forks(self, rid: str) -> list[dict]:
        """Return repositories whose upstream is `rid`.

        Each entry has at least ``id`` and ``author``.
        """
        raise NotImplementedError("list_forks() not implemented")

    @abstractmethod
    def publish_name(self, rid: str, name: str) -> str:
        """Publish a name for repository `rid`, returning the message key."""
        raise NotImplementedError("publish_name() not implemented")

    @abstractmethod
    def close(self) -> None:
        raise NotImplementedError("close() not implemented")


class Backend(ABC):
    """Factory for backend sessions."""

    @abstractmethod
    def connect(self) -> BackendSession:
        """Open a session.

        Raises:
            BackendError: if the backend cannot be reached
        """
        raise NotImplementedError("connect() not implemented")
