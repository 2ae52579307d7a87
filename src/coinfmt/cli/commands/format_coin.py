"""`coinfmt format` command: print the canonical encoding of one coin."""

from __future__ import annotations

import typer

from coinfmt.core.errors import InvalidAmountError
from coinfmt.core.model import Coin, amount_from_digits, format_coin


def register(app: typer.Typer) -> None:
    @app.command("format")
    def format_(
        amount: str = typer.Argument(..., help="Decimal amount (0 .. 2**128-1)."),
        denom: str = typer.Argument(..., help="Denomination, eg ucosm."),
    ) -> None:
        """Encode AMOUNT and DENOM as <amount><denom>."""
        if not (amount.isascii() and amount.isdigit()):
            raise typer.BadParameter(f"expected decimal digits, got {amount!r}", param_hint="AMOUNT")
        try:
            value = amount_from_digits(amount)
        except InvalidAmountError as e:
            raise typer.BadParameter(str(e.source), param_hint="AMOUNT") from e

        typer.echo(format_coin(Coin(value, denom)))
