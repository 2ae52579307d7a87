"""coinfmt: the canonical coin (amount + denom) value type.

Coins are encoded as `<amount><denom>` with no separator (eg `123ucosm`), the
convention used across the Cosmos SDK ecosystem.
"""

from __future__ import annotations

from coinfmt.core import (
    UINT128_MAX,
    Coin,
    CoinFromStrError,
    InvalidAmountError,
    MissingAmountError,
    MissingDenomError,
    coin,
    coins,
    format_coin,
    has_coins,
    parse_coin,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "UINT128_MAX",
    "Coin",
    "coin",
    "coins",
    "format_coin",
    "parse_coin",
    "has_coins",
    "CoinFromStrError",
    "MissingDenomError",
    "MissingAmountError",
    "InvalidAmountError",
]
