"""Coin list JSON I/O.

Schema (one document = one array of coins):
[
  {"denom": "ucosm", "amount": "123"},
  {"denom": "ibc/27394FB0...", "amount": "11111"}
]

Rules:
- `amount` is a decimal *string*: JSON numbers lose precision well below 2**128,
  so 128-bit amounts travel as strings. Only ASCII digits are accepted.
- `denom` is any string, taken verbatim (no stripping).
- Writer is stable: UTF-8, `indent=2`, `sort_keys=True`, newline-terminated.
- Errors are `ValueError` prefixed with the JSON path of the offending value.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable

from coinfmt.core.errors import InvalidAmountError
from coinfmt.core.model import Coin, amount_from_digits

logger = logging.getLogger(__name__)


def _require_dict(value: Any, *, where: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise ValueError(f"{where}: expected JSON object, got {type(value).__name__}")
    return value


def _require_list(value: Any, *, where: str) -> list[Any]:
    if not isinstance(value, list):
        raise ValueError(f"{where}: expected JSON array, got {type(value).__name__}")
    return value


def _require_amount(value: Any, *, where: str) -> int:
    if not isinstance(value, str):
        raise ValueError(f"{where}: expected decimal string, got {type(value).__name__}")
    if not value or not (value.isascii() and value.isdigit()):
        raise ValueError(f"{where}: expected decimal digits, got {value!r}")
    try:
        return amount_from_digits(value)
    except InvalidAmountError as e:
        raise ValueError(f"{where}: {e.source}") from e


def coin_to_json_obj(c: Coin) -> dict[str, str]:
    return {"denom": c.denom, "amount": str(c.amount)}


def coin_from_json_obj(obj: Any, *, where: str = "coin") -> Coin:
    data = _require_dict(obj, where=where)
    for key in ("denom", "amount"):
        if key not in data:
            raise ValueError(f"{where}: missing required key {key!r}")
    extra = sorted(set(data) - {"denom", "amount"})
    if extra:
        raise ValueError(f"{where}: unexpected keys {extra}")

    denom = data["denom"]
    if not isinstance(denom, str):
        raise ValueError(f"{where}.denom: expected str, got {type(denom).__name__}")
    return Coin(_require_amount(data["amount"], where=f"{where}.amount"), denom)


def coins_from_json_obj(obj: Any) -> list[Coin]:
    items = _require_list(obj, where="coins")
    return [coin_from_json_obj(item, where=f"coins[{i}]") for i, item in enumerate(items)]


def read_coins_json(path: str | Path) -> list[Coin]:
    """Read a coin list JSON file.

    Hard errors:
    - unreadable file -> ValueError
    - invalid JSON -> ValueError
    - top level not an array, or any coin malformed -> ValueError
    """
    p = Path(path)
    try:
        raw = json.loads(p.read_text(encoding="utf-8"))
    except OSError as e:
        raise ValueError(f"{p}: failed to read coin list: {e}") from e
    except json.JSONDecodeError as e:
        raise ValueError(f"{p}: invalid JSON: {e}") from e

    result = coins_from_json_obj(raw)
    logger.debug("read %d coins from %s", len(result), p)
    return result


def write_coins_json(path: str | Path, coins: Iterable[Coin]) -> None:
    p = Path(path)
    payload = [coin_to_json_obj(c) for c in coins]
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(payload, indent=2, sort_keys=True) + "\n", encoding="utf-8")
    logger.debug("wrote %d coins to %s", len(payload), p)
