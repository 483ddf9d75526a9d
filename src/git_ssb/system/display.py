# Author: PB & Claude
# Maintainer: PB
# Original date: 2025.06.10
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/git_ssb/system/display.py

from rich.console import Console


def out(console: Console, *lines: str) -> None:
    """Print lines verbatim (no rich markup, highlighting or emoji codes)."""
    console.print("\n".join(lines), markup=False, highlight=False, emoji=False, soft_wrap=True)
