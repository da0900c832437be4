"""Layout helpers for the terminal header."""

from .layout import layout_header, run_layout_pass, time_frame_label

__all__ = ["layout_header", "run_layout_pass", "time_frame_label"]
