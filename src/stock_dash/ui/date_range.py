"""Derive whole-day query windows from a time frame and a reference date."""

from __future__ import annotations

import logging
from datetime import datetime, time, timedelta, timezone

from ..domain import DateRange, TimeFrame, as_utc

logger = logging.getLogger(__name__)

_ONE_DAY = timedelta(days=1)
_START_OF_DAY = time(0, 0, 0, tzinfo=timezone.utc)
_END_OF_DAY = time(23, 59, 59, tzinfo=timezone.utc)


def _fixed_duration(time_frame: TimeFrame) -> timedelta:
    duration = time_frame.duration
    if duration is None:
        raise ValueError(f"time frame {time_frame} has no duration")
    return duration


def _start_of(dt: datetime) -> datetime:
    return datetime.combine(dt.date(), _START_OF_DAY)


def _end_of(dt: datetime) -> datetime:
    return datetime.combine(dt.date(), _END_OF_DAY)


def date_range_before(time_frame: TimeFrame, dt: datetime) -> DateRange:
    """Window of ``time_frame.duration`` whole days ending the day before ``dt``."""
    duration = _fixed_duration(time_frame)
    dt = as_utc(dt)

    end = _end_of(dt - _ONE_DAY)
    start = _start_of(end - duration + _ONE_DAY)
    return DateRange(start=start, end=end)


def date_range_after(
    time_frame: TimeFrame, dt: datetime, now: datetime | None = None
) -> DateRange | None:
    """Window of ``time_frame.duration`` whole days starting the day after ``dt``.

    Returns None when the window would end later than ``now``.
    """
    duration = _fixed_duration(time_frame)
    dt = as_utc(dt)
    now = as_utc(now) if now is not None else datetime.now(timezone.utc)

    start = _start_of(dt + _ONE_DAY)
    end = _end_of(start + duration - _ONE_DAY)
    if end > now:
        logger.debug("Window %s..%s ends after %s; discarding", start, end, now)
        return None
    return DateRange(start=start, end=end)
