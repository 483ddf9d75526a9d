# Author: PB & Claude
# Maintainer: PB
# Original date: 2025.06.11
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/git_ssb/core/web.py

"""Launch the external git-ssb web server."""

import subprocess
from typing import Optional, Sequence

from loguru import logger

from git_ssb.config.manager import SsbConfig
from git_ssb.system.exceptions import UsageError


def parse_listen_address(address: Optional[str], default_host: str, default_port: int) -> tuple[str, int]:
    """Split `host:port`, `host`, `:port` or `port` into (host, port)."""
    if not address:
        return default_host, default_port

    host, sep, port_str = address.rpartition(":")
    if not sep:
        # A bare value is a port if numeric, else a host
        if address.isdigit():
            host, port_str = "", address
        else:
            host, port_str = address, ""

    host = host or default_host
    if not port_str:
        return host, default_port
    if not port_str.isdigit() or not 0 < int(port_str) < 65536:
        raise UsageError(f"invalid port '{port_str}'")
    return host, int(port_str)


def run_web(config: SsbConfig, args: Sequence[str], public: bool = False) -> int:
    """Run the web server in the foreground and return its exit status.

    Raises:
        UsageError: bad arguments, or the web server program is not installed
    """
    if len(args) > 1:
        raise UsageError(f"web takes at most 1 argument, got {len(args)}", command="web")

    host, port = parse_listen_address(args[0] if args else None, config.web_host, config.web_port)
    cmd = [config.web_command, "--host", host, "--port", str(port)]
    if public:
        cmd.append("--public")
    if config.appname:
        cmd += ["--appname", config.appname]

    logger.debug(f"Running: {' '.join(cmd)}")
    try:
        return subprocess.run(cmd, check=False).returncode
    except FileNotFoundError:
        raise UsageError(f"web server '{config.web_command}' not found; is git-ssb-web installed?")
