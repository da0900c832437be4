"""Domain models: time frames, date ranges and provider query types."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum

from .utils.errors import EmptyTimeFrameError, InvalidTimeFrameError

_DAYS_PER_MONTH = 30
_DAYS_PER_YEAR = _DAYS_PER_MONTH * 12


class TimeFrame(Enum):
    """Historical window selectable in the dashboard.

    The value is the short display code. ``interval`` is the period code
    understood by the price provider.
    """

    FIVE_DAYS = "5D"
    ONE_MONTH = "1M"
    THREE_MONTHS = "3M"
    SIX_MONTHS = "6M"
    YEAR_TO_DATE = "YTD"
    ONE_YEAR = "1Y"
    TWO_YEARS = "2Y"
    FIVE_YEARS = "5Y"
    TEN_YEARS = "10Y"
    MAX = "MAX"

    @property
    def display_code(self) -> str:
        return self.value

    @property
    def duration(self) -> timedelta | None:
        """Nominal length in days, or None for open-ended frames (YTD, MAX)."""
        days = _DURATION_DAYS.get(self)
        if days is None:
            return None
        return timedelta(days=days)

    @property
    def interval(self) -> str:
        return _INTERVALS[self]

    @classmethod
    def parse(cls, text: str) -> TimeFrame:
        """Parse a short code ("1M") or provider code ("1mo"), ignoring case."""
        key = (text or "").strip().lower()
        if not key:
            raise EmptyTimeFrameError()
        try:
            return _LOOKUP[key]
        except KeyError:
            raise InvalidTimeFrameError(text) from None

    def __str__(self) -> str:
        return self.value


_DURATION_DAYS: dict[TimeFrame, int] = {
    TimeFrame.FIVE_DAYS: 5,
    TimeFrame.ONE_MONTH: _DAYS_PER_MONTH,
    TimeFrame.THREE_MONTHS: _DAYS_PER_MONTH * 3,
    TimeFrame.SIX_MONTHS: _DAYS_PER_MONTH * 6,
    TimeFrame.ONE_YEAR: _DAYS_PER_YEAR,
    TimeFrame.TWO_YEARS: _DAYS_PER_YEAR * 2,
    TimeFrame.FIVE_YEARS: _DAYS_PER_YEAR * 5,
    TimeFrame.TEN_YEARS: _DAYS_PER_YEAR * 10,
}

_INTERVALS: dict[TimeFrame, str] = {
    TimeFrame.FIVE_DAYS: "5d",
    TimeFrame.ONE_MONTH: "1mo",
    TimeFrame.THREE_MONTHS: "3mo",
    TimeFrame.SIX_MONTHS: "6mo",
    TimeFrame.YEAR_TO_DATE: "ytd",
    TimeFrame.ONE_YEAR: "1y",
    TimeFrame.TWO_YEARS: "2y",
    TimeFrame.FIVE_YEARS: "5y",
    TimeFrame.TEN_YEARS: "10y",
    TimeFrame.MAX: "max",
}

_LOOKUP: dict[str, TimeFrame] = {}
for _tf in TimeFrame:
    _LOOKUP[_tf.value.lower()] = _tf
    _LOOKUP[_INTERVALS[_tf]] = _tf
del _tf


@dataclass(frozen=True, slots=True)
class DateRange:
    """Whole-day UTC window, start at 00:00:00 and end at 23:59:59."""

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(f"date range start {self.start} is after end {self.end}")

    @property
    def days(self) -> int:
        return (self.end.date() - self.start.date()).days + 1


def as_utc(dt: datetime) -> datetime:
    """Treat naive datetimes as UTC, convert aware ones, drop sub-second precision."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    else:
        dt = dt.astimezone(timezone.utc)
    return dt.replace(microsecond=0)


@dataclass(slots=True)
class PriceQuery:
    symbol: str
    time_frame: TimeFrame
    date_range: DateRange | None = None
    auto_adjust: bool = True

    @property
    def interval(self) -> str:
        return self.time_frame.interval


@dataclass(slots=True)
class StockProfile:
    symbol: str
    name: str | None = None
    exchange: str | None = None
    currency: str | None = None
    sector: str | None = None

    @property
    def display_name(self) -> str:
        return self.name or self.symbol
