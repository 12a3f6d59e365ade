# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Parse dotenv content into an ordered dict of key-value pairs.

Handles:
  - blank lines and ``#`` comments
  - ``export KEY=VALUE`` prefix
  - ``KEY: VALUE`` (yaml-style separator)
  - single-quoted values (literal) and double-quoted values (escapes and
    ``$VAR`` / ``${VAR}`` expansion), which may span several lines
  - inline comments after unquoted values
  - values with ``=`` or ``:`` in them (only the first separator splits)

The functions below walk a single string with integer offsets and never copy
the remaining input, so a parse is linear in the size of the content.
"""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Mapping
from types import MappingProxyType

from dotparse.errors import (
    EmptyStatementError,
    MalformedKeyError,
    TrailingContentError,
    UnterminatedQuoteError,
)
from dotparse.expand import expand_escapes, expand_variables

EXPORT_PREFIX = "export"
COMMENT_CHAR = "#"
SEPARATORS = ("=", ":")
QUOTES = ("'", '"')

# Whitespace that does not end a line (unlike str.isspace, no "\n").
INLINE_SPACE = "\t\v\f\r \x85\xa0"

_LINE_END_RE = re.compile(r"[\r\n]")

# Unicode separator categories; str.isspace also counts \x1c-\x1f, these do not.
_SPACE_CATEGORIES = ("Zs", "Zl", "Zp")


def _is_space(char: str) -> bool:
    return char == "\n" or char in INLINE_SPACE or unicodedata.category(char) in _SPACE_CATEGORIES


def _is_inline_space(char: str) -> bool:
    return char in INLINE_SPACE


def _skip_inline_space(src: str, pos: int) -> int:
    end = len(src)
    while pos < end and _is_inline_space(src[pos]):
        pos += 1
    return pos


def _line_end(src: str, pos: int) -> int:
    """Offset of the next ``\\r`` or ``\\n`` at or after *pos* (or ``len(src)``)."""
    m = _LINE_END_RE.search(src, pos)
    return m.start() if m else len(src)


def _rest_of_line(src: str, pos: int) -> str:
    end = src.find("\n", pos)
    return src[pos:] if end == -1 else src[pos:end]


def _lineno(src: str, pos: int) -> int:
    return src.count("\n", 0, pos) + 1


def find_statement_start(src: str, pos: int = 0) -> int | None:
    """Return the offset of the next statement at or after *pos*.

    Whitespace (including line breaks) and ``#`` comment lines are skipped.
    Returns ``None`` when nothing but whitespace and comments is left.
    """
    end = len(src)
    while True:
        while pos < end and _is_space(src[pos]):
            pos += 1
        if pos >= end:
            return None
        if src[pos] != COMMENT_CHAR:
            return pos
        pos = src.find("\n", pos)
        if pos == -1:
            return None


def extract_key(src: str, pos: int, *, strict: bool = False) -> tuple[str, int]:
    """Read the variable name starting at *pos*.

    Returns ``(key, value_pos)`` where *value_pos* is the offset of the value,
    past the ``=`` / ``:`` separator and any whitespace after it.
    """
    end = len(src)
    pos = _skip_inline_space(src, pos)
    if src.startswith(EXPORT_PREFIX, pos):
        after = pos + len(EXPORT_PREFIX)
        if after < end and _is_inline_space(src[after]):
            pos = _skip_inline_space(src, after)

    if pos >= end:
        raise EmptyStatementError("zero length statement", lineno=_lineno(src, pos))

    for i in range(pos, end):
        char = src[i]
        if _is_inline_space(char):
            continue
        if char in SEPARATORS:
            key = src[pos:i].rstrip()
            if not key and strict:
                raise MalformedKeyError(
                    "empty variable name",
                    fragment=_rest_of_line(src, pos),
                    lineno=_lineno(src, pos),
                    char=char,
                )
            return key, _skip_inline_space(src, i + 1)
        # variable names match [A-Za-z0-9_.], letters and digits in the unicode sense
        if char == "_" or char == "." or char.isalpha() or char.isnumeric():
            continue
        fragment = _rest_of_line(src, pos)
        raise MalformedKeyError(
            f"unexpected character {char!r} in variable name near {fragment!r}",
            fragment=fragment,
            lineno=_lineno(src, i),
            char=char,
        )

    fragment = src[pos:]
    raise MalformedKeyError(
        f"missing '=' or ':' after variable name near {fragment!r}",
        fragment=fragment,
        lineno=_lineno(src, pos),
    )


def extract_value(
    src: str,
    pos: int,
    variables: Mapping[str, str],
    *,
    strict: bool = False,
) -> tuple[str, int]:
    """Read the value starting at *pos*; return ``(value, next_pos)``.

    *variables* holds the pairs parsed so far and is only read, for ``$VAR``
    expansion.
    """
    if pos < len(src) and src[pos] in QUOTES:
        return _extract_quoted_value(src, pos, variables, strict=strict)
    return _extract_bare_value(src, pos, variables)


def _extract_bare_value(src: str, pos: int, variables: Mapping[str, str]) -> tuple[str, int]:
    line_end = _line_end(src, pos)
    if line_end == pos:
        return "", line_end

    # the last " #" on the line starts a trailing comment
    value_end = line_end
    for i in range(line_end - 1, pos, -1):
        if src[i] == COMMENT_CHAR and _is_inline_space(src[i - 1]):
            value_end = i
            break

    raw = src[pos:value_end].strip(INLINE_SPACE)
    return expand_variables(raw, variables), line_end


def _extract_quoted_value(
    src: str,
    pos: int,
    variables: Mapping[str, str],
    *,
    strict: bool,
) -> tuple[str, int]:
    quote = src[pos]
    i = src.find(quote, pos + 1)
    while i != -1:
        # \" or \' does not close the value
        if src[i - 1] != "\\":
            value = src[pos:i].strip(quote)
            if quote == '"':
                value = expand_variables(expand_escapes(value), variables)
            return value, _after_closing_quote(src, i + 1, strict=strict)
        i = src.find(quote, i + 1)

    fragment = _rest_of_line(src, pos)
    raise UnterminatedQuoteError(
        f"unterminated quoted value {fragment}",
        fragment=fragment,
        lineno=_lineno(src, pos),
    )


def _after_closing_quote(src: str, pos: int, *, strict: bool) -> int:
    """Return where scanning resumes after a closing quote.

    Scanning resumes right after the quote, so ``A='x' B='y'`` holds two
    statements. In strict mode only whitespace or a ``#`` comment may follow
    on the same line.
    """
    if not strict:
        return pos
    rest = _skip_inline_space(src, pos)
    if rest >= len(src) or src[rest] in "\r\n" or src[rest] == COMMENT_CHAR:
        return pos
    fragment = src[rest:_line_end(src, rest)]
    raise TrailingContentError(
        f"unexpected text {fragment!r} after quoted value",
        fragment=fragment,
        lineno=_lineno(src, rest),
    )


def parse_string(text: str, *, strict: bool = False) -> dict[str, str]:
    """Parse dotenv *text* and return its variables in file order.

    A key that appears twice keeps its first position and its last value.
    Values may reference any key defined above them. The first syntax error
    raises a :class:`~dotparse.errors.ParseError` subclass.

    With ``strict=True`` an empty variable name (``=value``) and text after a
    closing quote are errors instead of being tolerated.
    """
    values: dict[str, str] = {}
    context = MappingProxyType(values)
    pos = 0
    while True:
        start = find_statement_start(text, pos)
        if start is None:
            return values
        key, value_pos = extract_key(text, start, strict=strict)
        value, pos = extract_value(text, value_pos, context, strict=strict)
        values[key] = value


def parse_bytes(content: bytes, *, encoding: str = "utf-8", strict: bool = False) -> dict[str, str]:
    """Decode *content* and parse it with :func:`parse_string`."""
    return parse_string(content.decode(encoding), strict=strict)
