"""Selection state behind list-of-choices widgets."""

from __future__ import annotations

import threading
from collections.abc import Iterable
from typing import Generic, TypeVar

from ..utils.errors import MenuItemNotFoundError, NoSelectionError

T = TypeVar("T")


class MenuState(Generic[T]):
    """Fixed item list with at most one selected index and an open/closed flag.

    The item list never changes after construction, so a selected index
    stays valid for the lifetime of the menu.
    """

    def __init__(self, items: Iterable[T], active: bool = False) -> None:
        self.items: tuple[T, ...] = tuple(items)
        self.active = active
        self._selected: int | None = None
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self.items)

    def __repr__(self) -> str:
        return f"MenuState(items={list(self.items)!r}, selected={self._selected!r}, active={self.active!r})"

    @property
    def selected_index(self) -> int | None:
        with self._lock:
            return self._selected

    def current(self) -> T | None:
        """Return the selected item, or None."""
        with self._lock:
            if self._selected is None:
                return None
            return self.items[self._selected]

    def select(self, item: T) -> None:
        try:
            n = self.items.index(item)
        except ValueError:
            raise MenuItemNotFoundError(f"item not found: {item!r}") from None
        self.select_index(n)

    def select_index(self, n: int) -> None:
        if not 0 <= n < len(self.items):
            raise IndexError(f"menu index {n} out of range for {len(self.items)} items")
        with self._lock:
            self._selected = n

    def select_prev(self) -> None:
        with self._lock:
            if self._selected is None:
                raise NoSelectionError("cannot select previous item when nothing is selected")
            if self._selected > 0:
                self._selected -= 1

    def select_next(self) -> None:
        with self._lock:
            if self._selected is None:
                raise NoSelectionError("cannot select next item when nothing is selected")
            if self._selected < len(self.items) - 1:
                self._selected += 1

    def clear_selection(self) -> None:
        with self._lock:
            self._selected = None

    def open(self) -> None:
        self.active = True

    def close(self) -> None:
        self.active = False

    def toggle(self) -> bool:
        self.active = not self.active
        return self.active
