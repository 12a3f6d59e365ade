# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``dotparse export`` command."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import IO

import click
import yaml

from dotparse.cli import _load_pairs, cli, common_options, console


@cli.command("export")
@click.option(
    "--format", "fmt",
    type=click.Choice(["json", "yaml"]),
    default="json",
    help="Output format: json (default) or yaml.",
)
@click.option(
    "--output", "-o",
    type=click.Path(exists=False),
    default=None,
    help="Output file path (default: stdout).",
)
@common_options
def export(ctx: click.Context, fmt: str, output: str | None) -> None:
    """Dump the parsed variables as JSON or YAML.

    Keys keep their file order. Use it to feed .env files to tools that
    expect structured input: dotparse export --path .env.prod | jq .
    """
    pairs = _load_pairs(ctx)

    if output:
        path = Path(output)
        with path.open("w") as f:
            _dump(pairs, fmt, f)
        console.print(f"[green]Exported {len(pairs)} variable(s) to {output}[/green]")
    else:
        _dump(pairs, fmt, sys.stdout)


def _dump(pairs: dict[str, str], fmt: str, f: IO[str]) -> None:
    if fmt == "yaml":
        yaml.safe_dump(pairs, f, default_flow_style=False, sort_keys=False, allow_unicode=True)
    else:
        f.write(json.dumps(pairs, indent=2, ensure_ascii=False))
        f.write("\n")
