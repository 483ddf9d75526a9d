# Author: PB & Claude
# Maintainer: PB
# Original date: 2025.01.08
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/git_ssb/core/__init__.py

"""Core git-ssb operations: remote registry, id resolution and workflows."""
