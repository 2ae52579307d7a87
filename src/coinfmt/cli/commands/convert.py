"""`coinfmt convert` command: convert a coin list between JSON and CSV.

Formats are chosen from the file suffixes (`.json` / `.csv`); the coin order is
preserved.
"""

from __future__ import annotations

import typer

from coinfmt.io import read_coins, write_coins


def register(app: typer.Typer) -> None:
    @app.command("convert")
    def convert(
        src: str = typer.Argument(..., help="Input coin list (.json or .csv)."),
        dst: str = typer.Argument(..., help="Output coin list (.json or .csv)."),
    ) -> None:
        """Convert a coin list file to another format."""
        try:
            items = read_coins(src)
            write_coins(dst, items)
        except (OSError, ValueError) as e:
            raise typer.BadParameter(str(e)) from e

        typer.echo(f"{len(items)} coins -> {dst}")
