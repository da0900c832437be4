from __future__ import annotations

import pytest

from stock_dash.ui.input import InputState
from stock_dash.ui.targets import Rect, TargetAreaRegistry, UiTarget, menu_hit_index
from stock_dash.utils.errors import MenuOverflowError


def test_rect_edges_and_contains() -> None:
    rect = Rect(2, 3, 4, 2)

    assert (rect.left, rect.top, rect.right, rect.bottom) == (2, 3, 6, 5)
    assert rect.contains(2, 3)
    assert rect.contains(5, 4)
    assert not rect.contains(6, 4)
    assert not rect.contains(5, 5)
    assert not rect.contains(1, 3)


def test_rect_inner() -> None:
    assert Rect(0, 0, 10, 5).inner() == Rect(1, 1, 8, 3)
    assert Rect(0, 0, 1, 1).inner().area == 0


def test_target_ordering() -> None:
    assert sorted(UiTarget) == [
        UiTarget.STOCK_NAME,
        UiTarget.STOCK_SYMBOL,
        UiTarget.TIME_FRAME,
        UiTarget.STOCK_SYMBOL_INPUT,
        UiTarget.TIME_FRAME_MENU,
    ]


def test_hit_test_empty_registry() -> None:
    assert TargetAreaRegistry().hit_test(0, 0) is None


def test_hit_test_prefers_higher_zindex() -> None:
    registry = TargetAreaRegistry()
    registry.register(UiTarget.TIME_FRAME_MENU, Rect(10, 0, 8, 12))
    registry.register(UiTarget.TIME_FRAME, Rect(10, 0, 6, 1))

    target, rect = registry.hit_test(12, 0)

    assert target is UiTarget.TIME_FRAME_MENU
    assert rect == Rect(10, 0, 8, 12)


def test_hit_test_ties_break_on_declaration_order() -> None:
    registry = TargetAreaRegistry()
    registry.register(UiTarget.TIME_FRAME, Rect(0, 0, 5, 1))
    registry.register(UiTarget.STOCK_NAME, Rect(0, 0, 5, 1))

    assert registry.hit_test(1, 0)[0] is UiTarget.TIME_FRAME


def test_hit_test_miss() -> None:
    registry = TargetAreaRegistry()
    registry.register(UiTarget.STOCK_NAME, Rect(0, 0, 5, 1))

    assert registry.hit_test(5, 0) is None
    assert registry.hit_test(0, 1) is None


def test_register_replaces_and_keeps_insertion_order() -> None:
    registry = TargetAreaRegistry()
    registry.register(UiTarget.STOCK_NAME, Rect(0, 0, 5, 1))
    registry.register(UiTarget.TIME_FRAME, Rect(20, 0, 5, 1))
    registry.register(UiTarget.STOCK_NAME, Rect(0, 0, 9, 1))

    assert list(registry.snapshot()) == [UiTarget.STOCK_NAME, UiTarget.TIME_FRAME]
    assert registry.get(UiTarget.STOCK_NAME) == Rect(0, 0, 9, 1)
    assert len(registry) == 2


def test_clear_removes_every_hit() -> None:
    registry = TargetAreaRegistry()
    registry.register(UiTarget.STOCK_NAME, Rect(0, 0, 5, 1))
    registry.register(UiTarget.TIME_FRAME_MENU, Rect(0, 0, 50, 50))

    registry.clear()

    assert all(registry.hit_test(x, y) is None for x in range(50) for y in range(50))
    assert UiTarget.STOCK_NAME not in registry


def test_snapshot_is_read_only() -> None:
    registry = TargetAreaRegistry()
    registry.register(UiTarget.STOCK_NAME, Rect(0, 0, 5, 1))

    with pytest.raises(TypeError):
        registry.snapshot()[UiTarget.TIME_FRAME] = Rect(0, 0, 1, 1)  # type: ignore[index]


def test_layout_pass_publishes_on_exit() -> None:
    registry = TargetAreaRegistry()
    registry.register(UiTarget.STOCK_NAME, Rect(0, 0, 5, 1))

    with registry.layout_pass() as staged:
        staged[UiTarget.TIME_FRAME] = Rect(20, 0, 5, 1)
        # previous frame still visible mid-pass
        assert registry.hit_test(1, 0)[0] is UiTarget.STOCK_NAME
        assert registry.hit_test(21, 0) is None

    assert registry.hit_test(1, 0) is None
    assert registry.hit_test(21, 0)[0] is UiTarget.TIME_FRAME


def test_layout_pass_discarded_on_error() -> None:
    registry = TargetAreaRegistry()
    registry.register(UiTarget.STOCK_NAME, Rect(0, 0, 5, 1))

    with pytest.raises(RuntimeError):
        with registry.layout_pass() as staged:
            staged[UiTarget.TIME_FRAME] = Rect(20, 0, 5, 1)
            raise RuntimeError("render failed")

    assert list(registry.snapshot()) == [UiTarget.STOCK_NAME]


def test_cursor_position() -> None:
    registry = TargetAreaRegistry()
    registry.register(UiTarget.STOCK_SYMBOL_INPUT, Rect(4, 0, 12, 3))

    assert registry.cursor_position(UiTarget.STOCK_SYMBOL_INPUT, InputState(value="ÄBC")) == (8, 1)
    assert registry.cursor_position(UiTarget.STOCK_SYMBOL_INPUT, InputState()) == (5, 1)


def test_cursor_position_without_render() -> None:
    registry = TargetAreaRegistry()

    assert registry.cursor_position(UiTarget.STOCK_SYMBOL_INPUT, InputState(value="A")) is None


def test_menu_hit_index_rows() -> None:
    menu_rect = Rect(10, 1, 7, 5)  # interior rows 2..4

    assert menu_hit_index(3, menu_rect, 12, 2) == 0
    assert menu_hit_index(3, menu_rect, 12, 4) == 2


def test_menu_hit_index_outside_interior() -> None:
    menu_rect = Rect(10, 1, 7, 5)

    assert menu_hit_index(3, menu_rect, 10, 2) is None  # left border
    assert menu_hit_index(3, menu_rect, 12, 1) is None  # top border
    assert menu_hit_index(3, menu_rect, 12, 5) is None  # bottom border


def test_menu_hit_index_past_last_item() -> None:
    menu_rect = Rect(0, 0, 6, 6)  # 4 interior rows

    assert menu_hit_index(2, menu_rect, 2, 3) is None


def test_menu_hit_index_rejects_scrolled_list() -> None:
    menu_rect = Rect(0, 0, 6, 4)  # 2 interior rows

    with pytest.raises(MenuOverflowError):
        menu_hit_index(3, menu_rect, 2, 1)
    assert menu_hit_index(3, menu_rect, 0, 0) is None
