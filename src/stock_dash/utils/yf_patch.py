"""Opt-in patch that lets yfinance skip the fc.yahoo.com cookie check."""

import logging
import os

import yfinance.data

logger = logging.getLogger(__name__)

ENV_FLAG = "STOCK_DASH_SKIP_COOKIE_CHECK"

_applied = False


def cookie_check_disabled() -> bool:
    return os.getenv(ENV_FLAG, "0").strip().lower() in ("1", "true", "yes")


def patch_yfinance() -> bool:
    """Apply the cookie check bypass when requested. Returns True once applied."""
    global _applied
    if _applied:
        return True
    if not cookie_check_disabled():
        logger.debug("yfinance patch skipped (%s not set)", ENV_FLAG)
        return False

    logger.warning("Patching yfinance to skip fc.yahoo.com cookie check (%s is set)", ENV_FLAG)

    def _get_cookie_basic_patched(self, timeout=30):
        return True

    yfinance.data.YfData._get_cookie_basic = _get_cookie_basic_patched
    _applied = True
    return True
