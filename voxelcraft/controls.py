"""Keyboard and mouse state fed by window input events."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

KEY_LAST = 348
MOUSE_BUTTON_LAST = 7


class Action(IntEnum):
    """Input event action."""

    RELEASE = 0
    PRESS = 1
    REPEAT = 2


@dataclass
class Input:
    """Current state of keys, mouse buttons, cursor and scroll."""

    keys: list = field(default_factory=lambda: [False] * KEY_LAST)
    mouse_buttons: list = field(default_factory=lambda: [False] * MOUSE_BUTTON_LAST)
    mouse_x: float = 0.0
    mouse_y: float = 0.0
    scroll_offset_x: float = 0.0
    scroll_offset_y: float = 0.0

    def on_key(self, key: int, action: int) -> None:
        """Record a key event; keys outside the known range are ignored."""
        if 0 <= key < KEY_LAST:
            self.keys[key] = action != Action.RELEASE

    def on_mouse_button(self, button: int, action: int) -> None:
        """Record a mouse button event; unknown buttons are ignored."""
        if 0 <= button < MOUSE_BUTTON_LAST:
            self.mouse_buttons[button] = action != Action.RELEASE

    def on_cursor(self, x: float, y: float) -> None:
        """Record the cursor position."""
        self.mouse_x = x
        self.mouse_y = y

    def on_scroll(self, x_offset: float, y_offset: float) -> None:
        """Record the latest scroll offsets."""
        self.scroll_offset_x = x_offset
        self.scroll_offset_y = y_offset