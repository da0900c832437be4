"""Data access layer."""

from .providers import PricesProvider
from .yfinance_provider import YFinancePricesProvider

__all__ = ["PricesProvider", "YFinancePricesProvider"]
