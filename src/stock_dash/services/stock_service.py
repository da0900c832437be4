"""Service layer that loads stock data for the active UI state."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field

import pandas as pd

from ..analytics.summary import PriceSummary, build_summary
from ..data.normalization import empty_prices_frame
from ..data.providers import PricesProvider
from ..domain import PriceQuery, StockProfile
from ..ui.state import UiState
from ..utils import DataRetrievalError

logger = logging.getLogger(__name__)


@dataclass
class Stock:
    symbol: str = ""
    profile: StockProfile | None = None
    prices: pd.DataFrame = field(default_factory=empty_prices_frame)

    @property
    def display_name(self) -> str:
        if self.profile is not None:
            return self.profile.display_name
        return self.symbol

    def summary(self) -> PriceSummary | None:
        return build_summary(self.prices, self.symbol)


class App:
    """Current stock plus the session's interaction state."""

    def __init__(self, ui_state: UiState, provider: PricesProvider) -> None:
        self.ui_state = ui_state
        self.provider = provider
        self.stock = Stock()

    async def load_stock(self, symbol: str) -> Stock:
        """Switch to ``symbol`` and load its profile and price history."""
        self.stock = Stock(symbol=symbol.strip().upper())
        self.ui_state.clear_date_range()

        await self.load_profile()
        await self.load_historical_prices()
        return self.stock

    async def load_profile(self) -> StockProfile:
        symbol = self.stock.symbol
        try:
            profile = await asyncio.to_thread(self.provider.fetch_profile, symbol)
        except Exception as err:
            logger.warning("Profile load failed for %s: %s", symbol, err)
            if isinstance(err, DataRetrievalError):
                raise
            raise DataRetrievalError(f"Failed to fetch profile for {symbol}: {err}") from err

        self.stock.profile = profile
        return profile

    async def load_historical_prices(self) -> pd.DataFrame:
        query = PriceQuery(
            symbol=self.stock.symbol,
            time_frame=self.ui_state.time_frame,
            date_range=self.ui_state.date_range,
        )
        try:
            prices = await asyncio.to_thread(self.provider.fetch_prices, query)
        except Exception as err:
            logger.warning("Price load failed for %s: %s", query.symbol, err)
            if isinstance(err, DataRetrievalError):
                raise
            raise DataRetrievalError(f"Failed to fetch prices for {query.symbol}: {err}") from err

        logger.info("Loaded %d %s bars for %s", len(prices), query.time_frame, query.symbol)
        self.stock.prices = prices
        return prices
