"""Utility helpers."""

from .errors import (
    DataRetrievalError,
    EmptyTimeFrameError,
    InvalidTimeFrameError,
    MenuItemNotFoundError,
    MenuOverflowError,
    NoSelectionError,
    ParseTimeFrameError,
)
from .logging import configure_logging, get_logger

__all__ = [
    "DataRetrievalError",
    "EmptyTimeFrameError",
    "InvalidTimeFrameError",
    "MenuItemNotFoundError",
    "MenuOverflowError",
    "NoSelectionError",
    "ParseTimeFrameError",
    "configure_logging",
    "get_logger",
]
