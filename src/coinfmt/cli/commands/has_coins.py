"""`coinfmt has` command.

Loads a wallet (coin list as `.json` or `.csv`) and checks whether the first
entry of the required denom holds at least the required amount. Prints
`true`/`false`; the exit status is 0 for true and 1 for false.
"""

from __future__ import annotations

import logging

import typer

from coinfmt.core.errors import CoinFromStrError
from coinfmt.core.model import has_coins, parse_coin
from coinfmt.io import read_coins

logger = logging.getLogger(__name__)


def register(app: typer.Typer) -> None:
    @app.command("has")
    def has(
        required: str = typer.Argument(..., help="Required coin, eg 777ETH."),
        wallet: str = typer.Option(..., "--wallet", help="Coin list file (.json or .csv)."),
    ) -> None:
        """Check that a wallet holds at least REQUIRED."""
        try:
            req = parse_coin(required)
        except CoinFromStrError as e:
            raise typer.BadParameter(str(e), param_hint="REQUIRED") from e
        try:
            held = read_coins(wallet)
        except ValueError as e:
            raise typer.BadParameter(str(e), param_hint="--wallet") from e

        ok = has_coins(held, req)
        logger.info("wallet %s: %d coins, requires %s -> %s", wallet, len(held), req, ok)
        typer.echo("true" if ok else "false")
        if not ok:
            raise typer.Exit(code=1)
