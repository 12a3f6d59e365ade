# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""dotparse CLI -- validate and inspect .env files.

The CLI is split into per-command modules under this package.  The ``cli``
click group, shared helpers (``console``, ``common_options``, ``_load_pairs``,
etc.) live here so every command module can import them.
"""

from __future__ import annotations

import functools
import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler

from dotparse import __version__
from dotparse.config import Settings, load_config, resolve_settings
from dotparse.env_file import parse_env_file, parse_stream
from dotparse.errors import ParseError

console = Console(stderr=True)

STDIN_PATH = "-"


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------

def _settings(ctx: click.Context) -> Settings:
    """Resolve path/encoding/strict for the current command."""
    try:
        return resolve_settings(
            ctx.obj["config"],
            profile=ctx.obj["profile"],
            path=ctx.obj["path"],
            encoding=ctx.obj["encoding"],
            strict=ctx.obj["strict"],
        )
    except ValueError as e:
        raise click.UsageError(str(e))


def _source_label(settings: Settings) -> str:
    return "<stdin>" if settings.path == STDIN_PATH else settings.path


def _load_pairs(ctx: click.Context) -> dict[str, str]:
    """Parse the selected file (or stdin) and return its variables."""
    settings = _settings(ctx)
    try:
        if settings.path == STDIN_PATH:
            return parse_stream(
                sys.stdin.buffer,
                encoding=settings.encoding, strict=settings.strict,
            )
        return parse_env_file(settings.path, encoding=settings.encoding, strict=settings.strict)
    except FileNotFoundError:
        raise click.ClickException(f"File not found: {settings.path}")
    except ParseError as e:
        raise click.ClickException(f"{_source_label(settings)}: {e}")
    except (OSError, UnicodeDecodeError) as e:
        raise click.ClickException(f"Cannot read {_source_label(settings)}: {e}")


def _mask(value: str) -> str:
    if len(value) <= 6:
        return "****"
    return value[:3] + "****" + value[-3:]


def _merge_common(
    ctx: click.Context,
    profile: str | None,
    path: str | None,
    strict: bool | None,
) -> None:
    """Merge subcommand-level profile/path/strict into ctx.obj."""
    if profile is not None:
        ctx.obj["profile"] = profile
    if path is not None:
        ctx.obj["path"] = path
    if strict is not None:
        ctx.obj["strict"] = strict


def common_options(f: object) -> object:
    """Add --profile, --path, --strict/--no-strict to a command."""
    @functools.wraps(f)
    @click.option(
        "--strict/--no-strict", default=None,
        help="Reject empty keys and text after closing quotes. Default: DOTPARSE_STRICT or config.",
    )
    @click.option("--path", default=None, help="Path to the .env file, or - for stdin (default: DOTPARSE_FILE or config, else .env).")
    @click.option("--profile", "-p", default=None, help="Profile from .dotparse.toml (default: DOTPARSE_PROFILE env var).")
    @click.pass_context
    def wrapper(
        ctx: click.Context,
        profile: str | None,
        path: str | None,
        strict: bool | None,
        *args: object,
        **kwargs: object,
    ) -> object:
        _merge_common(ctx, profile, path, strict)
        return f(ctx, *args, **kwargs)
    return wrapper


def _setup_logging(verbose: bool) -> None:
    if not verbose:
        return
    logger = logging.getLogger("dotparse")
    logger.setLevel(logging.DEBUG)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=console, show_path=False))


# ---------------------------------------------------------------------------
# Top-level click group
# ---------------------------------------------------------------------------

@click.group()
@click.option("--profile", "-p", default=None, help="Profile from .dotparse.toml (default: DOTPARSE_PROFILE env var).")
@click.option("--path", default=None, help="Path to the .env file, or - for stdin (default: DOTPARSE_FILE or config, else .env).")
@click.option(
    "--strict/--no-strict", default=None,
    help="Reject empty keys and text after closing quotes. Default: DOTPARSE_STRICT or config.",
)
@click.option("--encoding", default=None, help="File encoding (default: DOTPARSE_ENCODING or config, else utf-8).")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output.")
@click.version_option(__version__)
@click.pass_context
def cli(
    ctx: click.Context,
    profile: str | None,
    path: str | None,
    strict: bool | None,
    encoding: str | None,
    verbose: bool,
) -> None:
    """Validate and inspect .env files."""
    _setup_logging(verbose)
    ctx.ensure_object(dict)
    try:
        ctx.obj["config"] = load_config()
    except ValueError as e:
        raise click.ClickException(f"Invalid config: {e}")
    ctx.obj["profile"] = profile
    ctx.obj["path"] = path
    ctx.obj["strict"] = strict
    ctx.obj["encoding"] = encoding
    ctx.obj["verbose"] = verbose


# ---------------------------------------------------------------------------
# Register all command modules (import triggers @cli.command registration)
# ---------------------------------------------------------------------------

from dotparse.cli import (  # noqa: E402, F401
    check_cmd,
    export_cmd,
    get_cmd,
    list_cmd,
)
