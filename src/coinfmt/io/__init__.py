"""coinfmt I/O helpers: coin lists as JSON and CSV files."""

from __future__ import annotations

from pathlib import Path

from coinfmt.core.model import Coin

from .coins_csv import read_coins_csv, write_coins_csv
from .coins_json import coin_from_json_obj, coin_to_json_obj, read_coins_json, write_coins_json

__all__ = [
    "coin_from_json_obj",
    "coin_to_json_obj",
    "read_coins",
    "read_coins_csv",
    "read_coins_json",
    "write_coins",
    "write_coins_csv",
    "write_coins_json",
]


def _format_for(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix == ".json":
        return "json"
    if suffix == ".csv":
        return "csv"
    raise ValueError(f"{path}: unsupported coin file suffix {path.suffix!r} (expected .json or .csv)")


def read_coins(path: str | Path) -> list[Coin]:
    """Read a coin list, choosing the format by file suffix."""
    p = Path(path)
    if _format_for(p) == "json":
        return read_coins_json(p)
    return read_coins_csv(p)


def write_coins(path: str | Path, coins: list[Coin]) -> None:
    """Write a coin list, choosing the format by file suffix."""
    p = Path(path)
    if _format_for(p) == "json":
        write_coins_json(p, coins)
    else:
        write_coins_csv(p, coins)
