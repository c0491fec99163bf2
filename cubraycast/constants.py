"""Shared constants: geometry, speeds, colours, key codes and scene elements."""

from __future__ import annotations

from enum import IntEnum


class Element(IntEnum):
    """Scene description elements, in the order the file declares them."""

    NO = 0
    SO = 1
    WE = 2
    EA = 3
    F = 4
    C = 5


class KeyCode(IntEnum):
    """Keyboard codes the game reacts to."""

    ESC = 53
    W = 13
    A = 0
    S = 1
    D = 2
    LEFT = 123
    RIGHT = 124
    UP = 126
    DOWN = 125


class MinimapCorner(IntEnum):
    """Corner of the window where the minimap is drawn."""

    LEFTUP = 1
    LEFTDOWN = 2
    RIGHTUP = 3
    RIGHTDOWN = 4


TILE_SIZE = 40
RAY_RANGE = 1.047197551

MINIMAP_SCALE = 0.25
MAP_LOCATION = MinimapCorner.RIGHTDOWN
PLAYER_THICKNESS = 6
WALKSPEED = 1
TURNSPEED = 0.0261799387799
WALL_STRIP_WIDTH = 1

IS_3D_AREA = 0x663333
PLAYER_2D_COLOR = 0x00AAAA
RAY_COLOR = 0xFF0000
WALL_2D_COLOR = 0xFFFFFF
TILE_2D_COLOR = 0x000000

X_EVENT_KEY_PRESS = 2
X_EVENT_KEY_RELEASE = 3
X_EVENT_KEY_EXIT = 17

NO_HIT_DISTANCE = 999999999999.0