"""Tracking of which movement and rotation keys are held down."""

from __future__ import annotations

import sys
from dataclasses import dataclass

from .constants import KeyCode

_BINDINGS = {
    KeyCode.A: "left",
    KeyCode.D: "right",
    KeyCode.W: "up",
    KeyCode.S: "down",
    KeyCode.RIGHT: "right_rotation",
    KeyCode.LEFT: "left_rotation",
}


@dataclass
class KeyState:
    """Held state of the keys that move and turn the player."""

    up: bool = False
    down: bool = False
    right: bool = False
    left: bool = False
    right_rotation: bool = False
    left_rotation: bool = False

    def _set(self, keycode: int, held: bool) -> None:
        if keycode == KeyCode.ESC:
            key_exit()
        attribute = _BINDINGS.get(keycode)
        if attribute is not None:
            setattr(self, attribute, held)

    def press(self, keycode: int) -> None:
        """Mark a key as held; Escape ends the program."""
        self._set(keycode, True)

    def release(self, keycode: int) -> None:
        """Mark a key as released; Escape ends the program."""
        self._set(keycode, False)

    def reset(self) -> None:
        """Release every key."""
        for attribute in _BINDINGS.values():
            setattr(self, attribute, False)


def key_exit() -> None:
    """End the program with status 0, as when the window is closed."""
    sys.exit(0)