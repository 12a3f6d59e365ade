# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

""".dotparse.toml configuration loading.

Searches upward from cwd for ``.dotparse.toml`` and merges with CLI flags.
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".dotparse.toml"
DEFAULT_ENV_FILE = ".env"
DEFAULT_ENCODING = "utf-8"

_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass
class ProfileConfig:
    """Per-profile overrides from config file."""

    env_file: str | None = None
    encoding: str | None = None
    strict: bool | None = None


@dataclass
class DotparseConfig:
    """Resolved configuration for the current invocation."""

    env_file: str = DEFAULT_ENV_FILE
    encoding: str = DEFAULT_ENCODING
    strict: bool = False
    profiles: dict[str, ProfileConfig] = field(default_factory=dict)
    config_path: Path | None = None

    def get_profile(self, name: str) -> ProfileConfig:
        try:
            return self.profiles[name]
        except KeyError:
            raise ValueError(f"Unknown profile '{name}'.") from None


@dataclass
class Settings:
    """Effective settings for one parse."""

    path: str
    encoding: str
    strict: bool


def env_flag(name: str) -> bool | None:
    """Read a boolean from the environment; ``None`` when unset or empty."""
    raw = os.environ.get(name)
    if not raw:
        return None
    return raw.strip().lower() in _TRUE_VALUES


def find_config_file(start: Path | None = None) -> Path | None:
    """Walk upward from *start* (default cwd) looking for ``.dotparse.toml``."""
    cur = (start or Path.cwd()).resolve()
    while True:
        candidate = cur / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        if cur.parent == cur:
            return None
        cur = cur.parent


def _table(value: Any, name: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise ValueError(f"'{name}' must be a table, got {type(value).__name__}.")
    return value


def _opt_bool(value: Any, name: str) -> bool | None:
    if value is not None and not isinstance(value, bool):
        raise ValueError(f"'{name}' must be true or false, got {value!r}.")
    return value


def load_config(path: Path | None = None) -> DotparseConfig:
    """Load and return config.  Returns defaults if no file found.

    Raises ``ValueError`` for invalid TOML and for tables or booleans of the
    wrong type.
    """
    if path is None:
        path = find_config_file()
    if path is None:
        return DotparseConfig()

    logger.debug("Loading config from %s", path)
    raw: dict[str, Any] = tomllib.loads(path.read_text())
    section = _table(raw.get("dotparse", {}), "dotparse")

    profiles: dict[str, ProfileConfig] = {}
    for name, pcfg in _table(section.get("profiles", {}), "dotparse.profiles").items():
        pcfg = _table(pcfg, f"dotparse.profiles.{name}")
        profiles[name] = ProfileConfig(
            env_file=pcfg.get("env_file"),
            encoding=pcfg.get("encoding"),
            strict=_opt_bool(pcfg.get("strict"), f"dotparse.profiles.{name}.strict"),
        )

    strict = _opt_bool(section.get("strict"), "dotparse.strict")
    return DotparseConfig(
        env_file=section.get("env_file", DEFAULT_ENV_FILE),
        encoding=section.get("encoding", DEFAULT_ENCODING),
        strict=bool(strict),
        profiles=profiles,
        config_path=path,
    )


def resolve_settings(
    cfg: DotparseConfig,
    *,
    profile: str | None = None,
    path: str | None = None,
    encoding: str | None = None,
    strict: bool | None = None,
) -> Settings:
    """Merge explicit values, ``DOTPARSE_*`` env vars, the profile and *cfg*.

    Explicit arguments win, then the environment, then the named profile, then
    the top-level ``[dotparse]`` table.
    """
    profile = profile or os.environ.get("DOTPARSE_PROFILE")
    pc = cfg.get_profile(profile) if profile else ProfileConfig()

    if strict is None:
        strict = env_flag("DOTPARSE_STRICT")
    if strict is None:
        strict = pc.strict if pc.strict is not None else cfg.strict

    return Settings(
        path=path or os.environ.get("DOTPARSE_FILE") or pc.env_file or cfg.env_file,
        encoding=encoding or os.environ.get("DOTPARSE_ENCODING") or pc.encoding or cfg.encoding,
        strict=strict,
    )
