# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``dotparse get`` command."""

from __future__ import annotations

import click

from dotparse.cli import _load_pairs, cli, common_options


@cli.command()
@click.argument("key")
@common_options
def get(ctx: click.Context, key: str) -> None:
    """Print a single parsed value."""
    value = _load_pairs(ctx).get(key)
    if value is None:
        raise click.ClickException(f"Key '{key}' not found.")
    click.echo(value)
