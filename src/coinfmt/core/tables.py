"""Canonical pandas table view of a coin list.

A coin table has exactly two columns, in this order:

- `denom`: pandas `string` dtype
- `amount`: `object` dtype holding Python ints (int64/uint64 cannot hold 128 bits)

Rows keep their input order. Order matters for `has_coins()` (the first row of
a denom wins), so normalization never sorts.

Validation lives in `coinfmt.core.validate`; this module only builds and
canonicalizes frames.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable

from coinfmt.core.errors import InvalidAmountError
from coinfmt.core.model import Coin, amount_from_digits

if TYPE_CHECKING:  # pragma: no cover
    import pandas as pd


COIN_TABLE_COLUMNS: list[str] = ["denom", "amount"]


def _coerce_amount_cell(value: Any) -> Any:
    """Turn ints and ASCII-digit strings into Python ints; leave anything else as is."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return int(value)
    if isinstance(value, str):
        if value and value.isascii() and value.isdigit():
            try:
                return amount_from_digits(value)
            except InvalidAmountError:
                # left as a string; validation reports it as out of range
                return value
        return value
    # numpy integer scalars
    if hasattr(value, "dtype") and getattr(value.dtype, "kind", "") in ("i", "u"):
        return int(value)
    return value


def coins_to_frame(coins: Iterable[Coin]) -> "pd.DataFrame":
    """Build a canonical coin table from `Coin` values."""
    import pandas as pd

    items = list(coins)
    return pd.DataFrame(
        {
            "denom": pd.Series([c.denom for c in items], dtype="string"),
            "amount": pd.Series([c.amount for c in items], dtype=object),
        },
        columns=COIN_TABLE_COLUMNS,
    )


def normalize_coin_table(df: "pd.DataFrame") -> "pd.DataFrame":
    """Return a canonicalized copy of a coin table.

    Missing canonical columns are left missing so validation can report them;
    extra columns are kept after the canonical ones.
    """
    import pandas as pd

    if not isinstance(df, pd.DataFrame):
        raise TypeError(f"coins: expected pandas.DataFrame, got {type(df).__name__}")

    out = df.copy()
    ordered = [c for c in COIN_TABLE_COLUMNS if c in out.columns]
    extras = [c for c in out.columns if c not in COIN_TABLE_COLUMNS]
    out = out[ordered + extras]

    if "denom" in out.columns:
        out["denom"] = out["denom"].astype("string")
    if "amount" in out.columns:
        out["amount"] = pd.Series(
            [_coerce_amount_cell(v) for v in out["amount"].tolist()],
            index=out.index,
            dtype=object,
        )
    return out.reset_index(drop=True)


def frame_to_coins(df: "pd.DataFrame") -> list[Coin]:
    """Normalize + validate a coin table and return its rows as `Coin` values."""
    from coinfmt.core.validate import validate_coin_table

    norm = normalize_coin_table(df)
    validate_coin_table(norm)
    return [Coin(int(amount), str(denom)) for denom, amount in zip(norm["denom"], norm["amount"])]
