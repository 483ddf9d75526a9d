# Author: PB & Claude
# Maintainer: PB
# Original date: 2025.01.08
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/git_ssb/__init__.py

"""git-ssb: create, fork, name and list git repositories on Secure Scuttlebutt."""
