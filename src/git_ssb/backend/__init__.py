# Author: PB & Claude
# Maintainer: PB
# Original date: 2025.01.08
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/git_ssb/backend/__init__.py

"""Backend package: where git-ssb repositories are created and looked up."""

from .protocols import Backend, BackendSession, RepoHandle
from .sbot import SbotBackend, SbotSession, SbotRepo, create_backend

__all__ = [
    'Backend', 'BackendSession', 'RepoHandle',
    'SbotBackend', 'SbotSession', 'SbotRepo', 'create_backend',
]
