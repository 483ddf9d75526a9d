# Author: PB & Claude
# Maintainer: PB
# Original date: 2025.01.08
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/git_ssb/config/__init__.py

"""Configuration management for git-ssb."""

from .manager import SsbConfig, PROG, resolve_appname

__all__ = ['SsbConfig', 'PROG', 'resolve_appname']
