# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Entry point for the dotparse CLI (run via ``dotparse`` or ``python -m dotparse``)."""

from __future__ import annotations

from dotparse.cli import cli


def main() -> None:
    """Run the CLI."""
    cli()


if __name__ == "__main__":
    main()
