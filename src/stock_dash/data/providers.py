"""Provider protocol for fetching stock data."""

from __future__ import annotations

from typing import Protocol

import pandas as pd

from ..domain import PriceQuery, StockProfile


class PricesProvider(Protocol):
    """Abstraction for stock data sources."""

    def fetch_profile(self, symbol: str) -> StockProfile:
        """Fetch descriptive data for one symbol."""
        raise NotImplementedError

    def fetch_prices(self, query: PriceQuery) -> pd.DataFrame:
        """Fetch prices in canonical long form."""
        raise NotImplementedError
