# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Backslash escapes and ``$VAR`` substitution for dotenv values.

Double-quoted values go through :func:`expand_escapes` and then
:func:`expand_variables`; bare values only through :func:`expand_variables`;
single-quoted values through neither.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

_EXPAND_VAR_RE = re.compile(
    r"""
    (\\)?               # escaped: emit literally
    (\$)
    (\()?               # $( ... ) is never expanded
    \{?
    ([A-Z0-9_]+)?       # variable name
    \}?
    """,
    re.VERBOSE,
)
_ESCAPE_RE = re.compile(r"\\.")
_UNESCAPE_CHARS_RE = re.compile(r"\\([^$])")

_ESCAPES = {"n": "\n", "r": "\r"}


def _resolve_escape(match: re.Match[str]) -> str:
    pair = match.group(0)
    return _ESCAPES.get(pair[1], pair)


def expand_escapes(value: str) -> str:
    """Turn ``\\n`` and ``\\r`` into line breaks and drop other backslashes.

    A backslash in front of ``$`` is kept so :func:`expand_variables` can tell
    an escaped reference from a real one.
    """
    out = _ESCAPE_RE.sub(_resolve_escape, value)
    return _UNESCAPE_CHARS_RE.sub(r"\1", out)


def expand_variables(value: str, variables: Mapping[str, str]) -> str:
    """Replace ``$NAME`` and ``${NAME}`` with values from *variables*.

    Unknown names expand to the empty string.
    """

    def _substitute(match: re.Match[str]) -> str:
        escaped, _, paren, name = match.groups()
        if escaped or paren:
            return match.group(0)[1:]
        if name:
            return variables.get(name, "")
        return match.group(0)

    return _EXPAND_VAR_RE.sub(_substitute, value)
