"""Mutable interaction state for one dashboard session."""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Any

from ..domain import DateRange, TimeFrame
from .date_range import date_range_after, date_range_before
from .frame_rate import FrameRateCounter
from .input import InputState
from .menu import MenuState
from .targets import Rect, TargetAreaRegistry, UiTarget, menu_hit_index

if TYPE_CHECKING:
    from ..config import AppConfig

logger = logging.getLogger(__name__)

DEFAULT_TIME_FRAME = TimeFrame.ONE_MONTH
DEFAULT_FRAME_RATE_INTERVAL = timedelta(milliseconds=1_000)


class UiState:
    """Single source of truth for the session's interaction state.

    Created once at startup and passed explicitly to whatever renders or
    handles input. Composite operations (``set_time_frame``) update the menu
    and the date range under one lock.
    """

    def __init__(
        self,
        time_frame: TimeFrame = DEFAULT_TIME_FRAME,
        frame_rate_interval: timedelta = DEFAULT_FRAME_RATE_INTERVAL,
        debug_draw: bool = False,
        frame_rate_counter: FrameRateCounter | None = None,
    ) -> None:
        self._lock = threading.Lock()
        self._debug_draw = debug_draw
        self._time_frame = time_frame
        self._date_range: DateRange | None = None
        self.frame_rate_counter = frame_rate_counter or FrameRateCounter(frame_rate_interval)
        self.stock_symbol_input_state = InputState()
        self.time_frame_menu_state: MenuState[TimeFrame] = MenuState(TimeFrame)
        self.time_frame_menu_state.select(time_frame)
        self.target_areas = TargetAreaRegistry()

    @classmethod
    def from_config(cls, config: AppConfig) -> UiState:
        dashboard = config.dashboard
        return cls(
            time_frame=dashboard.time_frame,
            frame_rate_interval=timedelta(milliseconds=dashboard.frame_rate_interval_ms),
            debug_draw=dashboard.debug_draw,
        )

    def __repr__(self) -> str:
        return (
            f"UiState(time_frame={self._time_frame}, date_range={self._date_range!r}, "
            f"debug_draw={self._debug_draw!r})"
        )

    # --------------- Read accessors ---------------

    @property
    def time_frame(self) -> TimeFrame:
        return self._time_frame

    @property
    def date_range(self) -> DateRange | None:
        return self._date_range

    @property
    def start_date(self) -> datetime | None:
        date_range = self._date_range
        return date_range.start if date_range else None

    @property
    def end_date(self) -> datetime | None:
        date_range = self._date_range
        return date_range.end if date_range else None

    @property
    def debug_draw(self) -> bool:
        return self._debug_draw

    @property
    def frame_time(self) -> timedelta | None:
        return self.frame_rate_counter.last_sample()

    def snapshot(self) -> dict[str, Any]:
        """Plain values the renderer needs for one frame."""
        return {
            "time_frame": self._time_frame,
            "date_range": self._date_range,
            "selected_time_frame": self.time_frame_menu_state.current(),
            "time_frame_menu_active": self.time_frame_menu_state.active,
            "symbol_input": self.stock_symbol_input_state.value,
            "symbol_input_active": self.stock_symbol_input_state.active,
            "frame_time": self.frame_time,
            "debug_draw": self._debug_draw,
        }

    # --------------- Setters ---------------

    def set_debug_draw(self, debug_draw: bool) -> None:
        self._debug_draw = debug_draw

    def set_time_frame(self, time_frame: TimeFrame) -> None:
        with self._lock:
            self.time_frame_menu_state.select(time_frame)
            self._time_frame = time_frame
            self._date_range = None
        logger.debug("Time frame set to %s; date range cleared", time_frame)

    def clear_date_range(self) -> None:
        with self._lock:
            self._date_range = None

    def shift_date_range_before(self, dt: datetime) -> DateRange:
        with self._lock:
            self._date_range = date_range_before(self._time_frame, dt)
            date_range = self._date_range
        logger.debug("Date range shifted before %s: %s..%s", dt, date_range.start, date_range.end)
        return date_range

    def shift_date_range_after(self, dt: datetime, now: datetime | None = None) -> DateRange | None:
        with self._lock:
            self._date_range = date_range_after(self._time_frame, dt, now=now)
            date_range = self._date_range
        if date_range is None:
            logger.debug("Date range after %s reaches past now; cleared", dt)
        else:
            logger.debug("Date range shifted after %s: %s..%s", dt, date_range.start, date_range.end)
        return date_range

    # --------------- Target areas ---------------

    def target_area(self, x: int, y: int) -> tuple[UiTarget, Rect] | None:
        return self.target_areas.hit_test(x, y)

    def set_target_area(self, target: UiTarget, area: Rect) -> None:
        self.target_areas.register(target, area)

    def clear_target_areas(self) -> None:
        self.target_areas.clear()

    def target_area_snapshot(self) -> Mapping[UiTarget, Rect]:
        return self.target_areas.snapshot()

    def input_cursor(self, input_state: InputState, input_target: UiTarget) -> tuple[int, int] | None:
        return self.target_areas.cursor_position(input_target, input_state)

    def menu_index(self, menu_state: MenuState[Any], menu_area: Rect, x: int, y: int) -> int | None:
        return menu_hit_index(len(menu_state), menu_area, x, y)

    def record_frame(self) -> timedelta | None:
        return self.frame_rate_counter.record_frame()
