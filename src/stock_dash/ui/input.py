"""Single-line text input state."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class InputState:
    value: str = ""
    active: bool = False

    def insert(self, text: str) -> None:
        self.value += text

    def backspace(self) -> None:
        self.value = self.value[:-1]

    def clear(self) -> None:
        self.value = ""

    def submit(self) -> str:
        """Return the current value, then reset and deactivate the field."""
        value = self.value
        self.value = ""
        self.active = False
        return value
