# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Read .env files and streams into key-value dicts."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO

from dotparse.parser import parse_bytes, parse_string

logger = logging.getLogger(__name__)


def parse_stream(
    stream: IO[bytes] | IO[str],
    *,
    encoding: str = "utf-8",
    strict: bool = False,
) -> dict[str, str]:
    """Drain *stream* and parse its content.

    Binary streams are decoded with *encoding*; text streams are used as is.
    Errors raised while reading propagate unchanged.
    """
    content = stream.read()
    if isinstance(content, bytes):
        return parse_bytes(content, encoding=encoding, strict=strict)
    return parse_string(content, strict=strict)


def parse_env_file(
    path: str | Path,
    *,
    encoding: str = "utf-8",
    strict: bool = False,
) -> dict[str, str]:
    """Read a .env file and return an ordered dict of key-value pairs."""
    path = Path(path)
    with path.open("rb") as f:
        result = parse_stream(f, encoding=encoding, strict=strict)
    logger.debug("Parsed %d variable(s) from %s", len(result), path)
    return result
