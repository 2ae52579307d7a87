"""coinfmt CLI entrypoint.

Global options configure logging (optionally from a JSON config file); the
subcommands live in `coinfmt.cli.commands` and register themselves on `app`.
"""

from __future__ import annotations

from typing import Optional

import typer

from coinfmt.config import Config

app = typer.Typer(
    name="coinfmt",
    add_completion=False,
    no_args_is_help=True,
    help="Parse, format and check coins in the canonical <amount><denom> text form.",
)


@app.callback()
def _callback(
    config: Optional[str] = typer.Option(None, "--config", help="Path to a JSON config file."),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override the configured log level."),
) -> None:
    """coinfmt CLI."""
    try:
        cfg = Config.from_file(config) if config else Config()
        if log_level:
            cfg = cfg.update(log_level=log_level)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e
    cfg.configure_logging()


@app.command("version")
def version() -> None:
    """Print the installed coinfmt version."""
    from coinfmt import __version__

    typer.echo(__version__)


def _register_commands() -> None:
    """Register CLI subcommands."""
    from coinfmt.cli.commands import convert as convert_cmd
    from coinfmt.cli.commands import format_coin as format_coin_cmd
    from coinfmt.cli.commands import has_coins as has_coins_cmd
    from coinfmt.cli.commands import parse_coin as parse_coin_cmd

    parse_coin_cmd.register(app)
    format_coin_cmd.register(app)
    has_coins_cmd.register(app)
    convert_cmd.register(app)


_register_commands()
