# Author: PB & Claude
# Maintainer: PB
# Original date: 2025.05.13
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/git_ssb/config/manager.py

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Final, Optional

import yaml
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from git_ssb.core import remotes
from git_ssb.system.exceptions import ConfigError


# ---- Constants ----

PROG: Final = "git ssb"
USER_CFG: Final = "git-ssb.yml"
APPNAME_ENV: Final = "ssb_appname"
APPNAME_GIT_KEY: Final = "ssb.appname"


def _get_user_config_search_paths() -> tuple[Path, ...]:
    """Get config file search paths (ordered by priority: lowest to highest).

    Evaluated at call time so tests can redirect the environment.
    """
    return (
        Path("/etc/git-ssb") / USER_CFG,  # System defaults
        Path.home() / ".config" / "git-ssb" / USER_CFG,  # User config
        Path(os.getenv("XDG_CONFIG_HOME", "")) / "git-ssb" / USER_CFG,  # XDG override
        Path(os.getenv("GIT_SSB_CONFIG_HOME", "")) / USER_CFG,  # Explicit override (highest priority)
    )


def _load_merged_config_data(candidates: tuple[Path, ...]) -> dict:
    """Load and merge config data from candidate paths.

    Missing files are skipped; so are files that fail to parse, with a warning.
    """
    merged_data = {}
    for candidate in candidates:
        if candidate == Path(USER_CFG) or not candidate.is_file():
            continue
        try:
            with candidate.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            if not isinstance(data, dict):
                raise ValueError("top level must be a mapping")
            merged_data.update(data)  # Later configs override earlier ones
            logger.debug(f"Loaded config from {candidate}")
        except Exception as e:
            logger.warning(f"Failed to load config from {candidate}: {e}")
    return merged_data


def resolve_appname(cli_appname: Optional[str] = None) -> Optional[str]:
    """Pick the ssb profile: CLI option, then $ssb_appname, then git config."""
    if cli_appname:
        return cli_appname
    if APPNAME_ENV in os.environ:
        return os.environ[APPNAME_ENV] or None
    return remotes.get_git_config(APPNAME_GIT_KEY)


class SsbConfig(BaseModel):
    """Settings for one git-ssb invocation."""
    model_config = ConfigDict(extra="forbid")

    appname: Optional[str] = None
    sbot_command: str = "ssb-server"
    web_command: str = "git-ssb-web"
    web_host: str = "localhost"
    web_port: int = Field(default=7718, ge=1, le=65535)
    local_log: Optional[Path] = None

    @classmethod
    def load(cls, appname: Optional[str] = None, **overrides: Any) -> "SsbConfig":
        """Merge user config files, the ssb profile and explicit overrides.

        Raises:
            ConfigError: if the merged values do not validate
        """
        data = _load_merged_config_data(_get_user_config_search_paths())
        data.update({k: v for k, v in overrides.items() if v is not None})
        data["appname"] = resolve_appname(appname) or data.get("appname")
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"invalid configuration: {e}") from e
