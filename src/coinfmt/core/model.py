"""Coin value type and its canonical text form.

A `Coin` is an unsigned 128-bit amount paired with a free-form denomination.
The canonical text encoding concatenates the decimal amount and the denom with
no separator (`"123ucosm"`), the convention used across the Cosmos SDK
ecosystem. Decoding splits at the first character that is not an ASCII digit.

Denoms are opaque: nothing here checks that a denom is registered, or even
well formed, beyond what the digit-boundary split needs. A denom that starts
with an ASCII digit cannot round-trip through the text form.

This module must not import io/cli/config.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .errors import InvalidAmountError, MissingAmountError, MissingDenomError

UINT128_MAX = 2**128 - 1

_ASCII_DIGITS = frozenset("0123456789")
_UINT128_MAX_DIGITS = len(str(UINT128_MAX))


def _check_amount(amount: object) -> int:
    # bool is a subclass of int; never a valid amount.
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise TypeError(f"amount: expected int, got {type(amount).__name__}")
    if amount < 0 or amount > UINT128_MAX:
        raise ValueError(f"amount: {amount} outside of uint128 range [0, {UINT128_MAX}]")
    return amount


@dataclass(frozen=True)
class Coin:
    amount: int = 0
    denom: str = ""

    def __post_init__(self) -> None:
        _check_amount(self.amount)
        if not isinstance(self.denom, str):
            raise TypeError(f"denom: expected str, got {type(self.denom).__name__}")

    @classmethod
    def new(cls, amount: int, denom: str) -> "Coin":
        return cls(amount, denom)

    @classmethod
    def from_str(cls, text: str) -> "Coin":
        """Decode the canonical text form; see `parse_coin()`."""
        return parse_coin(text)

    def __str__(self) -> str:
        return format_coin(self)


def coin(amount: int, denom: str) -> Coin:
    """Shorthand constructor for `Coin`."""
    return Coin(amount, denom)


def coins(amount: int, denom: str) -> list[Coin]:
    """A one-element list holding a single denomination."""
    return [coin(amount, denom)]


def amount_from_digits(digits: str) -> int:
    """Convert a run of ASCII digits to an amount; leading zeros are ignored.

    Raises `InvalidAmountError` when the value is above `UINT128_MAX`. Callers
    must pass ASCII digits only.
    """
    # Strip and length-check first: int() refuses very long strings.
    significant = digits.lstrip("0") or "0"
    if len(significant) > _UINT128_MAX_DIGITS or int(significant) > UINT128_MAX:
        source = OverflowError("number too large to fit in target type")
        raise InvalidAmountError(source) from source
    return int(significant)


def format_coin(c: Coin) -> str:
    """Encode as `<amount><denom>` with no separator."""
    # Users usually want a converted display unit (eg uatom -> ATOM); this is the wire form.
    return f"{c.amount}{c.denom}"


def parse_coin(text: str) -> Coin:
    """Decode `<digits><denom>` into a `Coin`.

    Rules:
    - split at the first character that is not an ASCII digit;
      no such character (empty or all digits) -> `MissingDenomError`
    - nothing before the split (leading letter, space, '-', ...) -> `MissingAmountError`
    - leading zeros are accepted and ignored
    - amounts above `UINT128_MAX` -> `InvalidAmountError`
    - the denom is the verbatim remainder
    """
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")

    pos = next((i for i, ch in enumerate(text) if ch not in _ASCII_DIGITS), None)
    if pos is None:
        raise MissingDenomError()

    amount_part, denom_part = text[:pos], text[pos:]
    if not amount_part:
        raise MissingAmountError()

    return Coin(amount_from_digits(amount_part), denom_part)


def has_coins(coins: Iterable[Coin], required: Coin) -> bool:
    """True if the first coin of `required.denom` holds at least `required.amount`.

    Later entries of the same denom are ignored; a missing denom yields False.
    """
    found = next((c for c in coins if c.denom == required.denom), None)
    if found is None:
        return False
    return found.amount >= required.amount
