# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``dotparse check`` command."""

from __future__ import annotations

import click

from dotparse.cli import _load_pairs, _settings, _source_label, cli, common_options, console


@cli.command()
@common_options
def check(ctx: click.Context) -> None:
    """Validate a .env file; exit non-zero on the first syntax error."""
    pairs = _load_pairs(ctx)
    label = _source_label(_settings(ctx))
    console.print(f"[green]OK: {len(pairs)} variable(s) in {label}[/green]")
