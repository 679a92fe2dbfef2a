"""Currency rescaling and the profitability metric."""

from __future__ import annotations

import pandas as pd

CURRENCY_COLUMNS = ("budget", "revenue")
CURRENCY_SCALE = 1_000_000
CURRENCY_UNIT = "millions"

PROFIT = "Profit"
BREAK_EVEN = "Break Even"
LOSS = "Loss"
OUTCOME_ORDER = [PROFIT, BREAK_EVEN, LOSS]


def rescale_currency(df: pd.DataFrame) -> pd.DataFrame:
    """Return a copy of ``df`` with budget and revenue in millions.

    The copy is tagged through ``DataFrame.attrs`` so the rescale cannot be
    applied twice.
    """

    if df.attrs.get("currency_unit") == CURRENCY_UNIT:
        raise ValueError("Currency columns are already expressed in millions")

    rescaled = df.copy()
    for column in CURRENCY_COLUMNS:
        rescaled[column] = (rescaled[column] / CURRENCY_SCALE).round(2)
    rescaled.attrs["currency_unit"] = CURRENCY_UNIT
    return rescaled


def label_outcome(profitability: float) -> str:
    if profitability > 0:
        return PROFIT
    if profitability == 0:
        return BREAK_EVEN
    return LOSS


def derive_profitability(df: pd.DataFrame) -> pd.DataFrame:
    """Add ``profitability`` (revenue minus budget) and its ``profit_loss`` label."""

    if df.attrs.get("currency_unit") != CURRENCY_UNIT:
        raise ValueError("Rescale currency to millions before deriving profitability")

    derived = df.copy()
    derived["profitability"] = (derived["revenue"] - derived["budget"]).round(2)
    derived["profit_loss"] = pd.Categorical(
        derived["profitability"].apply(label_outcome), categories=OUTCOME_ORDER
    )
    return derived
