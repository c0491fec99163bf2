"""The parsed tile map and the collision tests done against it."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import MAP_LOCATION, MINIMAP_SCALE, TILE_SIZE, MinimapCorner

# Cell values: -1 is empty space outside the level, 0 is floor, 1 is wall.
SPACE = -1
FLOOR = 0
WALL = 1


@dataclass
class GameMap:
    """A rectangular grid of cells with the floor and sky colours."""

    matrix: list[list[int]]
    floor_color: int = 0
    sky_color: int = 0

    @property
    def rows(self) -> int:
        return len(self.matrix)

    @property
    def cols(self) -> int:
        return len(self.matrix[0]) if self.matrix else 0

    @property
    def window_width(self) -> int:
        return self.cols * TILE_SIZE

    @property
    def window_height(self) -> int:
        return self.rows * TILE_SIZE

    @property
    def ray_count(self) -> int:
        return self.window_width

    def _cell(self, row: int, col: int) -> int:
        """Return a cell value; cells outside the grid count as space."""
        if 0 <= row < self.rows and 0 <= col < self.cols:
            return self.matrix[row][col]
        return SPACE

    def is_wall(self, x: float, y: float) -> bool:
        """Return True when the pixel position lies in or squeezes past a wall.

        Positions within one pixel of the window border are walls. A point
        between two diagonally touching walls also counts as a wall.
        """
        if (
            x < 1
            or x > self.window_width - 1
            or y < 1
            or y > self.window_height - 1
        ):
            return True
        ix, iy = int(x), int(y)
        cell = self._cell
        if cell(iy // TILE_SIZE, ix // TILE_SIZE) == WALL:
            return True
        if (
            cell((iy + 1) // TILE_SIZE, (ix + 1) // TILE_SIZE) == WALL
            and cell((iy - 1) // TILE_SIZE, (ix - 1) // TILE_SIZE) == WALL
        ):
            return True
        return (
            cell((iy - 1) // TILE_SIZE, (ix + 1) // TILE_SIZE) == WALL
            and cell((iy + 1) // TILE_SIZE, (ix - 1) // TILE_SIZE) == WALL
        )

    def check_edge(self, x1: float, y1: float, new_x: float, new_y: float) -> bool:
        """Return True when a move crosses a corner blocked on both sides."""
        old_diff = int(x1 / TILE_SIZE) - int(y1 / TILE_SIZE)
        new_diff = int(new_x / TILE_SIZE) - int(new_y / TILE_SIZE)
        old_col = int(x1 / TILE_SIZE)
        new_col = int(new_x / TILE_SIZE)
        if abs(old_diff) != 1 or abs(new_diff) != 1:
            return False
        return (
            self._cell(new_col - new_diff, old_col) != FLOOR
            and self._cell(new_col, old_col - old_diff) != FLOOR
        )

    def minimap_location(self, x: float, y: float) -> tuple[int, int]:
        """Map a world pixel position to its place on the minimap."""
        map_w = (1 - MINIMAP_SCALE) * TILE_SIZE * self.cols
        map_h = (1 - MINIMAP_SCALE) * TILE_SIZE * self.rows
        if MAP_LOCATION == MinimapCorner.LEFTUP:
            return int(MINIMAP_SCALE * x), int(MINIMAP_SCALE * y)
        if MAP_LOCATION == MinimapCorner.LEFTDOWN:
            return int(MINIMAP_SCALE * x), int(map_h + MINIMAP_SCALE * y)
        if MAP_LOCATION == MinimapCorner.RIGHTUP:
            return int(map_w + MINIMAP_SCALE * x), int(MINIMAP_SCALE * y)
        return int(map_w + MINIMAP_SCALE * x), int(map_h + MINIMAP_SCALE * y)