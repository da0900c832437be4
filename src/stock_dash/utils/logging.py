"""Minimal logger helpers to avoid duplicating setup."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s %(message)s"


def configure_logging(level: str = "INFO") -> int:
    """Configure the root logger once and return the resolved level."""
    resolved = getattr(logging, str(level or "INFO").strip().upper(), logging.INFO)
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    logging.getLogger().setLevel(resolved)
    # yfinance is chatty at INFO
    logging.getLogger("yfinance").setLevel(max(resolved, logging.WARNING))
    return resolved


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers and not logging.getLogger().handlers:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    return logger
