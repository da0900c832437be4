"""Header layout: where each addressable element lands on screen.

The header occupies the top row::

     Apple Inc. (AAPL)                                  1M ▾

The symbol input box (3 rows, bordered) is drawn over the symbol label while
the field is active, and the time-frame dropdown opens below its label.
Overlays are registered after the labels so they stack above them.
"""

from __future__ import annotations

from datetime import timedelta

from ..domain import TimeFrame
from ..ui.state import UiState
from ..ui.targets import Rect, UiTarget

HEADER_ROW = 0
MARGIN = 1
MIN_INPUT_WIDTH = 12
MENU_ARROW = " ▾"

_CODE_WIDTH = max(len(tf.display_code) for tf in TimeFrame)


def time_frame_label(time_frame: TimeFrame) -> str:
    return time_frame.display_code.rjust(_CODE_WIDTH) + MENU_ARROW


def layout_header(ui_state: UiState, name: str, symbol: str, width: int) -> dict[UiTarget, Rect]:
    """Compute the rectangles for the header elements at terminal ``width``."""
    areas: dict[UiTarget, Rect] = {}

    x = MARGIN
    if name:
        areas[UiTarget.STOCK_NAME] = Rect(x, HEADER_ROW, len(name), 1)
        x += len(name) + 1

    symbol_label = f"({symbol})" if symbol else "(...)"
    symbol_rect = Rect(x, HEADER_ROW, len(symbol_label), 1)
    areas[UiTarget.STOCK_SYMBOL] = symbol_rect

    label = time_frame_label(ui_state.time_frame)
    label_x = max(symbol_rect.right + 1, width - MARGIN - len(label))
    time_frame_rect = Rect(label_x, HEADER_ROW, len(label), 1)
    areas[UiTarget.TIME_FRAME] = time_frame_rect

    symbol_input = ui_state.stock_symbol_input_state
    if symbol_input.active:
        input_width = max(MIN_INPUT_WIDTH, len(symbol_input.value) + 3)
        areas[UiTarget.STOCK_SYMBOL_INPUT] = Rect(symbol_rect.x - 1, HEADER_ROW, input_width, 3)

    menu = ui_state.time_frame_menu_state
    if menu.active:
        menu_width = _CODE_WIDTH + 4
        menu_x = min(time_frame_rect.x - 1, width - menu_width)
        areas[UiTarget.TIME_FRAME_MENU] = Rect(
            max(menu_x, 0), time_frame_rect.bottom, menu_width, len(menu) + 2
        )

    return areas


def run_layout_pass(ui_state: UiState, name: str, symbol: str, width: int) -> timedelta | None:
    """Replace the registered target areas with this frame's layout and count the frame.

    Returns the new frame time sample, if one was taken.
    """
    with ui_state.target_areas.layout_pass() as staged:
        staged.update(layout_header(ui_state, name, symbol, width))
    return ui_state.record_frame()
