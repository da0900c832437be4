"""Normalize yfinance outputs into a canonical schema."""

from __future__ import annotations

from typing import Any

import pandas as pd

from ..domain import StockProfile

CANONICAL_COLUMNS = ["date", "ticker", "open", "high", "low", "close", "volume"]

_RENAME_MAP = {
    "Date": "date",
    "Datetime": "date",
    "index": "date",
    "Open": "open",
    "High": "high",
    "Low": "low",
    "Close": "close",
    "Close*": "close",
    "Volume": "volume",
}


def empty_prices_frame() -> pd.DataFrame:
    """Return an empty canonical frame."""
    return pd.DataFrame(columns=CANONICAL_COLUMNS)


def normalize_history_frame(raw: pd.DataFrame | None, symbol: str) -> pd.DataFrame:
    """Convert a ``Ticker.history`` frame to the canonical long-form schema."""
    if raw is None or raw.empty:
        return empty_prices_frame()

    working = raw.copy()
    if isinstance(working.columns, pd.MultiIndex):
        # yf.download-style frames carry (field, ticker) columns
        working.columns = working.columns.get_level_values(0)

    working = working.reset_index()
    working = working.rename(columns=_RENAME_MAP)
    if "date" not in working.columns:
        working = working.rename(columns={working.columns[0]: "date"})

    for missing in ("open", "high", "low", "close", "volume"):
        if missing not in working.columns:
            working[missing] = pd.NA

    dates = pd.to_datetime(working["date"], utc=True)
    working["date"] = dates.dt.tz_localize(None).dt.normalize()
    working["ticker"] = symbol.upper()

    normalized = working[CANONICAL_COLUMNS].dropna(subset=["close"])
    return normalized.sort_values("date").reset_index(drop=True)


def _text(info: dict[str, Any], *keys: str) -> str | None:
    for key in keys:
        value = info.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


def normalize_profile(info: dict[str, Any] | None, symbol: str) -> StockProfile:
    """Pick the descriptive fields out of a ``Ticker.info`` mapping."""
    info = info or {}
    return StockProfile(
        symbol=(_text(info, "symbol") or symbol).upper(),
        name=_text(info, "longName", "shortName"),
        exchange=_text(info, "fullExchangeName", "exchange"),
        currency=_text(info, "currency"),
        sector=_text(info, "sector"),
    )
