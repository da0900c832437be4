"""Summary helpers for a loaded price series."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

import pandas as pd


@dataclass(frozen=True, slots=True)
class PriceSummary:
    symbol: str
    start_date: date
    end_date: date
    first_close: float
    last_close: float
    high: float
    low: float

    @property
    def change(self) -> float:
        return self.last_close - self.first_close

    @property
    def change_pct(self) -> float | None:
        if self.first_close == 0:
            return None
        return (self.last_close / self.first_close - 1) * 100


def build_summary(prices: pd.DataFrame, symbol: str | None = None) -> PriceSummary | None:
    """Compute first/last close and the high/low range over the loaded window."""
    if prices.empty or "close" not in prices.columns:
        return None

    subset = prices.dropna(subset=["close"])
    if subset.empty:
        return None

    ordered = subset.sort_values("date")
    first = ordered.iloc[0]
    last = ordered.iloc[-1]

    highs = ordered["high"].dropna() if "high" in ordered.columns else pd.Series(dtype=float)
    lows = ordered["low"].dropna() if "low" in ordered.columns else pd.Series(dtype=float)
    high = float(highs.max()) if not highs.empty else float(ordered["close"].max())
    low = float(lows.min()) if not lows.empty else float(ordered["close"].min())

    if symbol is None:
        symbol = str(last["ticker"]) if "ticker" in ordered.columns else ""

    return PriceSummary(
        symbol=symbol,
        start_date=pd.Timestamp(first["date"]).date(),
        end_date=pd.Timestamp(last["date"]).date(),
        first_close=float(first["close"]),
        last_close=float(last["close"]),
        high=high,
        low=low,
    )
