"""Service layer entry points."""

from .stock_service import App, Stock

__all__ = ["App", "Stock"]
