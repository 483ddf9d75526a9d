# Author: PB & Claude
# Maintainer: PB
# Original date: 2025.06.08
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/git_ssb/system/exceptions.py

"""
git-ssb exception classes.

Usage, precondition, resolution and config errors are reported to the user
as a single line by the CLI. Backend errors are not caught and terminate
the process.
"""


class GitSsbError(Exception):
    """Base exception for all git-ssb errors."""
    pass


class ConfigError(GitSsbError):
    """Raised when configuration values or files are invalid."""
    pass


class UsageError(GitSsbError):
    """Raised when a command is invoked with missing or malformed arguments."""

    def __init__(self, message: str, command: str = None):
        self.command = command
        super().__init__(message)


class PreconditionError(GitSsbError):
    """Raised when a target git remote name is already taken."""

    def __init__(self, message: str, remote_name: str = None):
        self.remote_name = remote_name
        super().__init__(message)


class ResolutionError(GitSsbError):
    """Raised when no repository id can be found for a token or the fallback remotes."""

    def __init__(self, message: str, token: str = None):
        self.token = token
        super().__init__(message)


class BackendError(GitSsbError):
    """Raised when the ssb server fails to connect, create, publish or query."""

    def __init__(self, message: str, command: list[str] = None, stderr: str = None):
        self.command = command
        self.stderr = stderr
        super().__init__(message)
