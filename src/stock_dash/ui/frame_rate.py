"""Average frame time sampling for the redraw loop."""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable
from datetime import timedelta

logger = logging.getLogger(__name__)


class FrameRateCounter:
    """Counts frames and, once per interval, stores the average frame time.

    ``clock`` returns integer nanoseconds from a monotonic source.
    """

    def __init__(
        self,
        update_interval: timedelta = timedelta(milliseconds=1_000),
        clock: Callable[[], int] = time.monotonic_ns,
    ) -> None:
        if update_interval <= timedelta(0):
            raise ValueError("update_interval must be positive")
        self.update_interval = update_interval
        self._interval_ns = update_interval // timedelta(microseconds=1) * 1_000
        self._clock = clock
        self._frames = 0
        self._frame_time: timedelta | None = None
        self._last_interval = clock()
        self._lock = threading.Lock()

    @property
    def frames(self) -> int:
        with self._lock:
            return self._frames

    def record_frame(self) -> timedelta | None:
        """Count one frame. Returns the new average when an interval elapsed."""
        with self._lock:
            self._frames += 1
            now = self._clock()
            elapsed_ns = now - self._last_interval
            if elapsed_ns < self._interval_ns:
                return None

            frame_ms = elapsed_ns // 1_000_000 // self._frames
            self._frame_time = timedelta(milliseconds=frame_ms)
            self._frames = 0
            self._last_interval = now
            sample = self._frame_time

        logger.debug("Frame time sample: %d ms", frame_ms)
        return sample

    def last_sample(self) -> timedelta | None:
        with self._lock:
            return self._frame_time
