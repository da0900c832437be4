"""Interaction state: menus, inputs, hit-testing and frame timing."""

from .date_range import date_range_after, date_range_before
from .frame_rate import FrameRateCounter
from .input import InputState
from .menu import MenuState
from .state import UiState
from .targets import Rect, TargetAreaRegistry, UiTarget, menu_hit_index

__all__ = [
    "FrameRateCounter",
    "InputState",
    "MenuState",
    "Rect",
    "TargetAreaRegistry",
    "UiState",
    "UiTarget",
    "date_range_after",
    "date_range_before",
    "menu_hit_index",
]
