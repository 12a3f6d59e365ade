# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""dotparse -- parse .env files with quoting, escapes and variable expansion."""

from dotparse.env_file import parse_env_file, parse_stream
from dotparse.errors import (
    EmptyStatementError,
    MalformedKeyError,
    ParseError,
    TrailingContentError,
    UnterminatedQuoteError,
)
from dotparse.parser import parse_bytes, parse_string
from dotparse.sdk import dotenv_values

__all__ = [
    "__version__",
    "dotenv_values",
    "parse_bytes",
    "parse_env_file",
    "parse_stream",
    "parse_string",
    "EmptyStatementError",
    "MalformedKeyError",
    "ParseError",
    "TrailingContentError",
    "UnterminatedQuoteError",
]
__version__ = "0.1.0"
