"""coinfmt core: the Coin value type, its text codec and table helpers.

This package is standalone and must not import io/cli/config to avoid
circular dependencies.
"""

from __future__ import annotations

from .errors import CoinFromStrError, InvalidAmountError, MissingAmountError, MissingDenomError
from .model import UINT128_MAX, Coin, amount_from_digits, coin, coins, format_coin, has_coins, parse_coin
from .tables import COIN_TABLE_COLUMNS, coins_to_frame, frame_to_coins, normalize_coin_table
from .validate import CoinTableValidationError, validate_coin_table

__all__ = [
    "UINT128_MAX",
    "Coin",
    "amount_from_digits",
    "coin",
    "coins",
    "format_coin",
    "parse_coin",
    "has_coins",
    "CoinFromStrError",
    "MissingDenomError",
    "MissingAmountError",
    "InvalidAmountError",
    "COIN_TABLE_COLUMNS",
    "coins_to_frame",
    "normalize_coin_table",
    "frame_to_coins",
    "CoinTableValidationError",
    "validate_coin_table",
]
