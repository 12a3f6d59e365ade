# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``dotparse list`` command."""

from __future__ import annotations

import click
from rich.table import Table
from rich.text import Text

from dotparse.cli import _load_pairs, _mask, _settings, _source_label, cli, common_options, console


@cli.command("list")
@click.option("--reveal", is_flag=True, help="Show values instead of masking them.")
@common_options
def list_keys(ctx: click.Context, reveal: bool) -> None:
    """List parsed variables in file order."""
    pairs = _load_pairs(ctx)
    table = Table(title=f"Variables ({_source_label(_settings(ctx))})")
    table.add_column("Key", style="white")
    table.add_column("Value" if reveal else "Value (masked)", style="dim")
    if not pairs:
        table.add_row("(empty)", "(empty)")
    for key, val in pairs.items():
        if reveal:
            shown = val
        else:
            shown = _mask(val) if val else "(empty)"
        table.add_row(Text(key), Text(shown))
    console.print(table)
