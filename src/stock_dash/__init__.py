"""stock_dash package with UI-agnostic state for the terminal dashboard."""

from .domain import DateRange, PriceQuery, StockProfile, TimeFrame
from .ui import UiState, UiTarget

__all__ = ["DateRange", "PriceQuery", "StockProfile", "TimeFrame", "UiState", "UiTarget"]
