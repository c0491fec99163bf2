"""The player: spawn position, heading and movement through the map."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .constants import PLAYER_THICKNESS, TILE_SIZE, TURNSPEED, WALKSPEED
from .grid import GameMap
from .keys import KeyState

_SPAWN_ANGLES = {"N": math.pi * 1.5, "E": 0.0, "W": math.pi}


@dataclass
class Player:
    """Position in world pixels and heading in radians."""

    x: float
    y: float
    rotation_angle: float
    thickness: int = PLAYER_THICKNESS
    walk_speed: float = WALKSPEED
    turn_speed: float = TURNSPEED

    def update(self, keys: KeyState, grid: GameMap) -> None:
        """Turn and move according to the held keys, unless a wall blocks."""
        moveside, walk_dir = 0.0, 0.0
        if keys.left:
            moveside, walk_dir = math.pi / 2, 1.0
        if keys.right:
            moveside, walk_dir = math.pi / 2, -1.0
        if keys.up:
            moveside, walk_dir = 0.0, 1.0
        if keys.down:
            moveside, walk_dir = 0.0, -1.0

        turn_dir = 0
        if keys.left_rotation:
            turn_dir = -1
        if keys.right_rotation:
            turn_dir = 1

        self.rotation_angle += turn_dir * self.turn_speed
        step = int(walk_dir * self.walk_speed)
        heading = self.rotation_angle - moveside
        new_x = self.x + step * math.cos(heading)
        new_y = self.y + step * math.sin(heading)
        if not grid.is_wall(new_x, new_y) and not grid.check_edge(
            self.x, self.y, new_x, new_y
        ):
            self.x, self.y = new_x, new_y


def spawn_player(col: int, row: int, direction: str) -> Player:
    """Place a player in the centre of a tile, facing N, E, W or S."""
    return Player(
        x=(col + 0.5) * TILE_SIZE,
        y=(row + 0.5) * TILE_SIZE,
        rotation_angle=_SPAWN_ANGLES.get(direction, math.pi * 0.5),
    )