# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""SDK for reading .env content into a dict (python-dotenv style)."""

from __future__ import annotations

from typing import IO

from dotparse.config import load_config, resolve_settings
from dotparse.env_file import parse_env_file, parse_stream


def dotenv_values(
    *paths: str,
    stream: IO[bytes] | IO[str] | None = None,
    profile: str | None = None,
    strict: bool | None = None,
    encoding: str | None = None,
) -> dict[str, str]:
    """Return the variables of a .env file as a dict without modifying os.environ.

    Uses the same resolution as the CLI: explicit arguments, then
    ``DOTPARSE_PROFILE`` / ``DOTPARSE_FILE`` / ``DOTPARSE_ENCODING`` /
    ``DOTPARSE_STRICT``, then ``.dotparse.toml``, then defaults (``.env``,
    UTF-8, permissive).

    Parameters
    ----------
    *paths : str
        .env files to read in order; a key in a later file overrides the same
        key from an earlier one. Each file is parsed on its own, so $VAR only
        sees keys from the same file. With no paths the resolved default
        file is read. Ignored when *stream* is given.
    stream : file object, optional
        Binary or text stream to read instead of a file.
    profile : str, optional
        Named profile from ``[dotparse.profiles.<name>]`` in the config file.
    strict : bool, optional
        Reject empty variable names and text after closing quotes.
    encoding : str, optional
        Encoding used to decode the file or binary stream.

    Returns
    -------
    dict[str, str]
        Variables in file order.

    Raises
    ------
    dotparse.ParseError
        On the first syntax error; no partial result is returned.
    OSError
        When the file cannot be read.

    Examples
    --------
    >>> from dotparse import dotenv_values
    >>> dotenv_values(".env.local")
    {'DATABASE_URL': 'postgres://localhost/app'}
    >>> dotenv_values(".env", ".env.local")
    {'DATABASE_URL': 'postgres://localhost/app', 'DEBUG': '1'}
    >>> dotenv_values(profile="prod", strict=True)
    {'DATABASE_URL': 'postgres://db.internal/app'}
    """
    settings = resolve_settings(
        load_config(),
        profile=profile,
        encoding=encoding,
        strict=strict,
    )
    if stream is not None:
        return parse_stream(stream, encoding=settings.encoding, strict=settings.strict)

    result: dict[str, str] = {}
    for path in paths or (settings.path,):
        result.update(parse_env_file(path, encoding=settings.encoding, strict=settings.strict))
    return result
