"""Coin table CSV I/O.

Layout: a header row `denom,amount` followed by one row per coin, in list
order. Amounts are written as plain decimal integers.

The reader loads every cell as a string with NA inference disabled, so an empty
denom stays `""` and large amounts never pass through a float. Rows are then
normalized and validated via `coinfmt.core`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from coinfmt.core.model import Coin
from coinfmt.core.tables import COIN_TABLE_COLUMNS, coins_to_frame, frame_to_coins

logger = logging.getLogger(__name__)


def read_coins_csv(path: str | Path) -> list[Coin]:
    import pandas as pd

    p = Path(path)
    try:
        df = pd.read_csv(p, dtype=str, keep_default_na=False)
    except OSError as e:
        raise ValueError(f"{p}: failed to read coin list: {e}") from e
    result = frame_to_coins(df)
    logger.debug("read %d coins from %s", len(result), p)
    return result


def write_coins_csv(path: str | Path, coins: Iterable[Coin]) -> None:
    p = Path(path)
    df = coins_to_frame(coins)
    p.parent.mkdir(parents=True, exist_ok=True)
    # newline="" keeps line endings identical across platforms
    with p.open("w", encoding="utf-8", newline="") as f:
        df.to_csv(f, index=False, columns=COIN_TABLE_COLUMNS, lineterminator="\n")
    logger.debug("wrote %d coins to %s", len(df), p)
