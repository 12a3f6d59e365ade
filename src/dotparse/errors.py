# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Exceptions raised while parsing dotenv content.

Every failure aborts the whole parse: callers get either a complete mapping or
one of these errors, never both.
"""

from __future__ import annotations


class ParseError(ValueError):
    """Base class for dotenv syntax errors.

    ``fragment`` is the source text the parser was looking at (usually the rest
    of the offending line) and ``lineno`` the 1-based line it starts on.
    """

    def __init__(self, message: str, fragment: str = "", lineno: int | None = None) -> None:
        self.message = message
        self.fragment = fragment
        self.lineno = lineno
        super().__init__(message)

    def __str__(self) -> str:
        if self.lineno is None:
            return self.message
        return f"line {self.lineno}: {self.message}"


class MalformedKeyError(ParseError):
    """A character that cannot appear in a variable name came before the separator."""

    def __init__(self, message: str, fragment: str = "", lineno: int | None = None, char: str = "") -> None:
        self.char = char
        super().__init__(message, fragment, lineno)


class EmptyStatementError(ParseError):
    """Key extraction started on a zero-length statement."""


class UnterminatedQuoteError(ParseError):
    """A quoted value has no closing quote before end of input."""


class TrailingContentError(ParseError):
    """Text follows a closing quote on the same line (strict mode only)."""
