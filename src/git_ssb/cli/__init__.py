# Author: PB & Claude
# Maintainer: PB
# Original date: 2025.01.08
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/git_ssb/cli/__init__.py

"""Command Line Interface package for git-ssb."""

from .main import app, cli_main

__all__ = ["app", "cli_main"]
