"""Hit-testing of rendered regions against pointer coordinates."""

from __future__ import annotations

import threading
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from ..utils.errors import MenuOverflowError
from .input import InputState


class UiTarget(Enum):
    """Addressable rendered elements, in declaration order."""

    STOCK_NAME = "stock_name"
    STOCK_SYMBOL = "stock_symbol"
    STOCK_SYMBOL_INPUT = "stock_symbol_input"
    TIME_FRAME = "time_frame"
    TIME_FRAME_MENU = "time_frame_menu"

    @property
    def zindex(self) -> int:
        return _ZINDEX[self]

    @property
    def stacking_key(self) -> tuple[int, int]:
        return (self.zindex, _DECLARATION_ORDER[self])

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, UiTarget):
            return NotImplemented
        return self.stacking_key < other.stacking_key


_ZINDEX: dict[UiTarget, int] = {
    UiTarget.STOCK_NAME: 0,
    UiTarget.STOCK_SYMBOL: 0,
    UiTarget.STOCK_SYMBOL_INPUT: 1,
    UiTarget.TIME_FRAME: 0,
    UiTarget.TIME_FRAME_MENU: 1,
}

_DECLARATION_ORDER: dict[UiTarget, int] = {target: n for n, target in enumerate(UiTarget)}


@dataclass(frozen=True, slots=True)
class Rect:
    """Rectangle in character cells. ``right`` and ``bottom`` are exclusive."""

    x: int
    y: int
    width: int
    height: int

    @property
    def left(self) -> int:
        return self.x

    @property
    def top(self) -> int:
        return self.y

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    def inner(self, horizontal: int = 1, vertical: int = 1) -> Rect:
        """Shrink by a margin on every side; collapses to zero size when too small."""
        if self.width < 2 * horizontal or self.height < 2 * vertical:
            return Rect(self.x, self.y, 0, 0)
        return Rect(
            self.x + horizontal,
            self.y + vertical,
            self.width - 2 * horizontal,
            self.height - 2 * vertical,
        )

    def contains(self, x: int, y: int) -> bool:
        return self.left <= x < self.right and self.top <= y < self.bottom


class TargetAreaRegistry:
    """Last-rendered rectangle of every target drawn in the current frame.

    Writers serialize on a lock and publish a fresh read-only mapping;
    readers grab the current mapping without locking, so they always see a
    complete frame.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._areas: Mapping[UiTarget, Rect] = MappingProxyType({})

    def __len__(self) -> int:
        return len(self._areas)

    def __contains__(self, target: object) -> bool:
        return target in self._areas

    def snapshot(self) -> Mapping[UiTarget, Rect]:
        return self._areas

    def get(self, target: UiTarget) -> Rect | None:
        return self._areas.get(target)

    def register(self, target: UiTarget, rect: Rect) -> None:
        with self._lock:
            areas = dict(self._areas)
            areas[target] = rect
            self._areas = MappingProxyType(areas)

    def clear(self) -> None:
        with self._lock:
            self._areas = MappingProxyType({})

    @contextmanager
    def layout_pass(self) -> Iterator[dict[UiTarget, Rect]]:
        """Collect one frame's registrations and publish them together.

        The previous frame stays visible to readers until the block exits.
        Nothing is published if the block raises.
        """
        staged: dict[UiTarget, Rect] = {}
        yield staged
        with self._lock:
            self._areas = MappingProxyType(dict(staged))

    def hit_test(self, x: int, y: int) -> tuple[UiTarget, Rect] | None:
        """Return the topmost target whose rectangle contains (x, y)."""
        areas = self._areas
        for target in sorted(areas, reverse=True):
            rect = areas[target]
            if rect.contains(x, y):
                return target, rect
        return None

    def cursor_position(self, target: UiTarget, input_state: InputState) -> tuple[int, int] | None:
        """Caret cell for an input box: interior top-left plus the text length."""
        rect = self._areas.get(target)
        if rect is None:
            return None
        inner = rect.inner(1, 1)
        return inner.left + len(input_state.value), inner.top


def menu_hit_index(item_count: int, menu_rect: Rect, x: int, y: int) -> int | None:
    """Map a point inside a bordered menu to a zero-based item row.

    Scrolling is not supported: a menu with more items than interior rows
    raises ``MenuOverflowError`` for any point inside it.
    """
    inner = menu_rect.inner(1, 1)
    if not inner.contains(x, y):
        return None
    if inner.height < item_count:
        raise MenuOverflowError(
            f"cannot map a row in a scrolled menu ({item_count} items, {inner.height} rows)"
        )
    n = y - inner.top
    if n < item_count:
        return n
    return None
