"""yfinance-backed stock data provider."""

from __future__ import annotations

import logging
from datetime import timedelta

import pandas as pd
import yfinance as yf

from ..domain import PriceQuery, StockProfile
from ..utils import DataRetrievalError
from ..utils.yf_patch import patch_yfinance
from .normalization import empty_prices_frame, normalize_history_frame, normalize_profile
from .providers import PricesProvider

logger = logging.getLogger(__name__)

patch_yfinance()

DAILY_BARS = "1d"


class YFinancePricesProvider(PricesProvider):
    """Adapter around yfinance.Ticker that emits canonical frames."""

    def fetch_profile(self, symbol: str) -> StockProfile:
        if not symbol:
            raise DataRetrievalError("cannot fetch a profile without a symbol")

        logger.info("Fetching profile for %s", symbol)
        try:
            info = yf.Ticker(symbol).info
        except Exception as err:  # pragma: no cover - defensive against network issues
            raise DataRetrievalError(f"yfinance profile lookup failed for {symbol}: {err}") from err

        return normalize_profile(info, symbol)

    def fetch_prices(self, query: PriceQuery) -> pd.DataFrame:
        if not query.symbol:
            return empty_prices_frame()

        if query.date_range is None:
            kwargs = {"period": query.interval}
        else:
            # yfinance treats ``end`` as exclusive
            kwargs = {
                "start": query.date_range.start.date(),
                "end": query.date_range.end.date() + timedelta(days=1),
            }

        logger.info("Fetching %s prices for %s (%s)", query.time_frame, query.symbol, kwargs)
        try:
            raw = yf.Ticker(query.symbol).history(
                interval=DAILY_BARS,
                auto_adjust=query.auto_adjust,
                **kwargs,
            )
        except Exception as err:  # pragma: no cover - defensive against network issues
            raise DataRetrievalError(f"yfinance history failed for {query.symbol}: {err}") from err

        return normalize_history_frame(raw, query.symbol)
