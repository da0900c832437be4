"""Route pointer clicks and key presses to the state of the targeted element."""

from __future__ import annotations

import logging

from .state import UiState
from .targets import UiTarget

logger = logging.getLogger(__name__)

# Key -> action while the time-frame menu is open.
MENU_KEYMAP: dict[str, str] = {
    "up": "prev",
    "k": "prev",
    "down": "next",
    "j": "next",
    "enter": "confirm",
    "escape": "cancel",
}


def handle_click(ui_state: UiState, x: int, y: int) -> UiTarget | None:
    """Resolve a click to its target and apply it. Returns the target hit."""
    hit = ui_state.target_area(x, y)
    target = hit[0] if hit else None
    menu = ui_state.time_frame_menu_state
    symbol_input = ui_state.stock_symbol_input_state

    if target is UiTarget.TIME_FRAME_MENU:
        n = ui_state.menu_index(menu, hit[1], x, y)
        if n is not None:
            ui_state.set_time_frame(menu.items[n])
            menu.close()
        return target

    # any click outside the dropdown closes it
    menu.close()

    if target is UiTarget.TIME_FRAME:
        menu.select(ui_state.time_frame)
        menu.open()
        symbol_input.active = False
    elif target in (UiTarget.STOCK_SYMBOL, UiTarget.STOCK_SYMBOL_INPUT):
        symbol_input.active = True
    else:
        symbol_input.active = False

    logger.debug("Click at (%d, %d) -> %s", x, y, target)
    return target


def handle_menu_key(ui_state: UiState, key: str) -> bool:
    """Apply a navigation key to the open time-frame menu. Returns True if consumed."""
    menu = ui_state.time_frame_menu_state
    action = MENU_KEYMAP.get(key)
    if not menu.active or action is None:
        return False

    if menu.current() is None:
        menu.select(ui_state.time_frame)

    if action == "prev":
        menu.select_prev()
    elif action == "next":
        menu.select_next()
    elif action == "confirm":
        ui_state.set_time_frame(menu.current())
        menu.close()
    elif action == "cancel":
        menu.select(ui_state.time_frame)
        menu.close()
    return True


def handle_input_key(ui_state: UiState, key: str) -> str | None:
    """Edit the active symbol field. Returns the submitted symbol on enter."""
    symbol_input = ui_state.stock_symbol_input_state
    if not symbol_input.active:
        return None

    if key == "enter":
        symbol = symbol_input.submit().strip().upper()
        return symbol or None
    if key == "escape":
        symbol_input.clear()
        symbol_input.active = False
    elif key == "backspace":
        symbol_input.backspace()
    elif len(key) == 1 and key.isprintable():
        symbol_input.insert(key.upper())
    return None
