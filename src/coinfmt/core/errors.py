"""Decode errors for the canonical coin text format.

Every failure of `parse_coin()` is one of the subclasses below. They all derive
from `CoinFromStrError` (itself a `ValueError`) so callers can catch the family
or a single kind. Messages are stable and suitable for test assertions.
"""

from __future__ import annotations


class CoinFromStrError(ValueError):
    """Base class for canonical coin text decoding failures."""


class MissingDenomError(CoinFromStrError):
    """Input is empty or consists only of ASCII digits."""

    def __init__(self) -> None:
        super().__init__("Missing denominator")


class MissingAmountError(CoinFromStrError):
    """The first character is not an ASCII digit (includes '-' and whitespace)."""

    def __init__(self) -> None:
        super().__init__("Missing amount or non-digit characters in amount")


class InvalidAmountError(CoinFromStrError):
    """The digit run does not fit the amount type.

    `source` is the underlying numeric conversion failure; it is also chained
    as `__cause__` when raised from `parse_coin()`.
    """

    def __init__(self, source: Exception):
        super().__init__(f"Invalid amount: {source}")
        self.source = source
