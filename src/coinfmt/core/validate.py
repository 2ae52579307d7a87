"""Schema + semantic validation for coin tables.

Normalization (`coinfmt.core.tables`) and validation are kept apart: normalize
first, then validate. All problems found in one pass are aggregated into a
single `CoinTableValidationError` whose message is deterministic.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

from coinfmt.core.model import UINT128_MAX
from coinfmt.core.tables import COIN_TABLE_COLUMNS

if TYPE_CHECKING:  # pragma: no cover
    import pandas as pd


@dataclass(frozen=True)
class Violation:
    column: str
    message: str

    def __str__(self) -> str:
        return f"{self.column}: {self.message}"


class CoinTableValidationError(ValueError):
    """Aggregates coin table validation failures."""

    def __init__(self, violations: Iterable[Violation]):
        v = sorted(violations, key=lambda x: (x.column, x.message))
        if not v:
            super().__init__("coin table validation failed (no details)")
        else:
            super().__init__("coin table validation failed:\n" + "\n".join(f"  - {item}" for item in v))
        self.violations = v


def _row_list(rows: list[int], limit: int = 5) -> str:
    shown = ", ".join(str(r) for r in rows[:limit])
    return shown + (", ..." if len(rows) > limit else "")


def _check_columns(df: "pd.DataFrame", violations: list[Violation]) -> None:
    missing = [c for c in COIN_TABLE_COLUMNS if c not in df.columns]
    if missing:
        violations.append(Violation("table", f"missing required columns: {missing}"))
    extras = [c for c in df.columns if c not in COIN_TABLE_COLUMNS]
    if extras:
        violations.append(Violation("table", f"unexpected extra columns: {extras}"))


def _check_denoms(df: "pd.DataFrame", violations: list[Violation]) -> None:
    if "denom" not in df.columns:
        return
    null_rows = [i for i, isnull in enumerate(df["denom"].isna().tolist()) if isnull]
    if null_rows:
        violations.append(Violation("denom", f"contains nulls (rows {_row_list(null_rows)})"))


def _check_amounts(df: "pd.DataFrame", violations: list[Violation]) -> None:
    import pandas as pd

    if "amount" not in df.columns:
        return
    null_rows: list[int] = []
    bad_type_rows: list[int] = []
    out_of_range_rows: list[int] = []
    for i, value in enumerate(df["amount"].tolist()):
        if value is None or (not isinstance(value, (int, str)) and pd.isna(value)):
            null_rows.append(i)
        elif isinstance(value, str) and value.isascii() and value.isdigit():
            # digit strings that survive normalization are too large for uint128
            out_of_range_rows.append(i)
        elif isinstance(value, bool) or not isinstance(value, int):
            bad_type_rows.append(i)
        elif value < 0 or value > UINT128_MAX:
            out_of_range_rows.append(i)

    if null_rows:
        violations.append(Violation("amount", f"contains nulls (rows {_row_list(null_rows)})"))
    if bad_type_rows:
        violations.append(Violation("amount", f"non-integer values (rows {_row_list(bad_type_rows)})"))
    if out_of_range_rows:
        violations.append(
            Violation("amount", f"values outside uint128 range (rows {_row_list(out_of_range_rows)})")
        )


def validate_coin_table(df: "pd.DataFrame") -> None:
    """Raise `CoinTableValidationError` if the (normalized) table is not canonical."""
    import pandas as pd

    if not isinstance(df, pd.DataFrame):
        raise TypeError(f"coins: expected pandas.DataFrame, got {type(df).__name__}")

    violations: list[Violation] = []
    _check_columns(df, violations)
    _check_denoms(df, violations)
    _check_amounts(df, violations)
    if violations:
        raise CoinTableValidationError(violations)
