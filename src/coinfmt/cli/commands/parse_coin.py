"""`coinfmt parse` command.

Decodes each argument from the canonical `<amount><denom>` form and prints
`amount<TAB>denom` per line. Undecodable arguments are reported on stderr and
make the command exit with status 1 (the remaining arguments are still parsed).
"""

from __future__ import annotations

import logging

import typer

from coinfmt.core.errors import CoinFromStrError
from coinfmt.core.model import parse_coin

logger = logging.getLogger(__name__)


def register(app: typer.Typer) -> None:
    @app.command("parse")
    def parse(
        texts: list[str] = typer.Argument(..., help="Coin strings such as 123ucosm."),
    ) -> None:
        """Decode canonical coin strings."""
        failed = 0
        for text in texts:
            try:
                c = parse_coin(text)
            except CoinFromStrError as e:
                logger.debug("failed to parse %r: %s", text, e)
                typer.echo(f"error: {text!r}: {e}", err=True)
                failed += 1
                continue
            typer.echo(f"{c.amount}\t{c.denom}")

        if failed:
            raise typer.Exit(code=1)
