from __future__ import annotations

import threading

import pytest

from stock_dash.ui.menu import MenuState
from stock_dash.utils.errors import MenuItemNotFoundError, NoSelectionError


def _menu() -> MenuState[str]:
    return MenuState(["A", "B", "C"])


def test_new_menu_has_no_selection() -> None:
    menu = _menu()

    assert menu.current() is None
    assert menu.selected_index is None
    assert menu.active is False


def test_navigation_requires_selection() -> None:
    menu = _menu()

    with pytest.raises(NoSelectionError):
        menu.select_next()
    with pytest.raises(NoSelectionError):
        menu.select_prev()


def test_select_next_moves_forward() -> None:
    menu = _menu()
    menu.select("A")

    menu.select_next()

    assert menu.current() == "B"


def test_select_next_clamps_at_end() -> None:
    menu = _menu()
    menu.select("C")

    menu.select_next()

    assert menu.current() == "C"
    assert menu.selected_index == 2


def test_select_prev_clamps_at_start() -> None:
    menu = _menu()
    menu.select("B")

    menu.select_prev()
    menu.select_prev()

    assert menu.current() == "A"


def test_select_picks_first_match() -> None:
    menu = MenuState(["A", "B", "A"])

    menu.select("A")

    assert menu.selected_index == 0


def test_select_missing_item() -> None:
    menu = _menu()

    with pytest.raises(MenuItemNotFoundError):
        menu.select("Z")
    assert menu.current() is None


def test_select_index_and_clear() -> None:
    menu = _menu()

    menu.select_index(1)
    assert menu.current() == "B"

    menu.clear_selection()
    assert menu.current() is None


def test_select_index_out_of_range() -> None:
    menu = _menu()

    with pytest.raises(IndexError):
        menu.select_index(3)
    with pytest.raises(IndexError):
        menu.select_index(-1)


def test_items_are_fixed() -> None:
    source = ["A", "B"]
    menu = MenuState(source)
    source.append("C")

    assert menu.items == ("A", "B")
    assert len(menu) == 2


def test_open_close_toggle() -> None:
    menu = _menu()

    menu.open()
    assert menu.active
    assert menu.toggle() is False
    menu.toggle()
    menu.close()
    assert not menu.active


def test_concurrent_navigation_keeps_index_valid() -> None:
    menu = MenuState(range(10))
    menu.select_index(5)

    def forward() -> None:
        for _ in range(500):
            menu.select_next()

    def backward() -> None:
        for _ in range(500):
            menu.select_prev()

    threads = [threading.Thread(target=forward), threading.Thread(target=backward)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert 0 <= menu.selected_index < 10
