"""Configuration loader for the stock dashboard."""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Any

from dotenv import load_dotenv
import yaml

from .domain import TimeFrame


@dataclass(frozen=True)
class DashboardConfig:
    """Session defaults for the interaction state."""

    symbol: str = "AAPL"
    time_frame: TimeFrame = TimeFrame.ONE_MONTH
    frame_rate_interval_ms: int = 1_000
    debug_draw: bool = False


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"


@dataclass(frozen=True)
class AppConfig:
    """Top-level application configuration."""

    dashboard: DashboardConfig
    log: LoggingConfig


def _section(data: dict[str, Any], key: str) -> dict[str, Any]:
    section = data.get(key, {})
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ValueError(f"'{key}' config must be a mapping")
    return section


def _parse_interval(raw: Any) -> int:
    if isinstance(raw, bool) or not isinstance(raw, int) or raw <= 0:
        raise ValueError(f"frame_rate_interval_ms must be a positive integer, got {raw!r}")
    return raw


def load_config(path: str | None = None) -> AppConfig:
    """Load configuration from an optional YAML file plus environment overrides."""
    load_dotenv()
    data: dict[str, Any] = {}
    if path is not None:
        try:
            with open(path, "r", encoding="utf-8") as handle:
                loaded = yaml.safe_load(handle)
        except FileNotFoundError as exc:
            raise ValueError(f"Config file not found: {path}") from exc
        if loaded is not None and not isinstance(loaded, dict):
            raise ValueError("Config file must contain a mapping at the top level")
        data = loaded or {}

    dashboard_section = _section(data, "dashboard")
    logging_section = _section(data, "logging")
    defaults = DashboardConfig()

    symbol = os.environ.get("STOCK_DASH_SYMBOL") or dashboard_section.get("symbol", defaults.symbol)
    raw_time_frame = os.environ.get("STOCK_DASH_TIME_FRAME") or dashboard_section.get("time_frame")
    # ParseTimeFrameError is a ValueError
    time_frame = TimeFrame.parse(str(raw_time_frame)) if raw_time_frame is not None else defaults.time_frame

    dashboard = DashboardConfig(
        symbol=str(symbol).strip().upper(),
        time_frame=time_frame,
        frame_rate_interval_ms=_parse_interval(
            dashboard_section.get("frame_rate_interval_ms", defaults.frame_rate_interval_ms)
        ),
        debug_draw=bool(dashboard_section.get("debug_draw", defaults.debug_draw)),
    )

    level = os.environ.get("STOCK_DASH_LOG_LEVEL") or logging_section.get("level", LoggingConfig.level)
    log = LoggingConfig(level=str(level).upper())

    if not dashboard.symbol:
        raise ValueError("dashboard.symbol must not be empty")

    return AppConfig(dashboard=dashboard, log=log)
