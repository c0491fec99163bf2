"""Drawing of a frame: the 3D walls, sky, floor, minimap, player and rays."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .constants import (
    IS_3D_AREA,
    MINIMAP_SCALE,
    PLAYER_2D_COLOR,
    RAY_COLOR,
    RAY_RANGE,
    TILE_2D_COLOR,
    TILE_SIZE,
    WALL_2D_COLOR,
    WALL_STRIP_WIDTH,
    Element,
)
from .grid import FLOOR, WALL, GameMap
from .keys import KeyState
from .parsing import Scene
from .player import Player
from .raycast import Ray, cast_ray


@dataclass
class Frame:
    """A window-sized pixel buffer of 0xRRGGBB values, stored row by row.

    Pixels are addressed through the flat offset ``width * y + x``, so an
    ``x`` past the right edge lands on the following row.
    """

    width: int
    height: int
    data: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        size = self.width * self.height
        if not self.data:
            self.data = [0] * size
        elif len(self.data) != size:
            raise ValueError(
                f"frame of {self.width}x{self.height} needs {size} pixels, "
                f"got {len(self.data)}"
            )

    def _offset(self, x: int, y: int) -> int:
        return self.width * y + x

    def _contains(self, offset: int) -> bool:
        return 0 <= offset < len(self.data)

    def get(self, x: int, y: int) -> int:
        """Return the pixel at ``(x, y)``."""
        offset = self._offset(x, y)
        if not self._contains(offset):
            raise IndexError(f"pixel ({x}, {y}) outside the frame")
        return self.data[offset]

    def set(self, x: int, y: int, color: int) -> None:
        """Store ``color`` at ``(x, y)``."""
        offset = self._offset(x, y)
        if not self._contains(offset):
            raise IndexError(f"pixel ({x}, {y}) outside the frame")
        self.data[offset] = color


def _peek(frame: Frame, x: int, y: int) -> int | None:
    offset = frame._offset(x, y)
    return frame.data[offset] if frame._contains(offset) else None


def _put(frame: Frame, x: int, y: int, color: int) -> None:
    offset = frame._offset(x, y)
    if frame._contains(offset):
        frame.data[offset] = color


def _paint_3d(frame: Frame, x: int, y: int, color: int) -> None:
    """Paint a pixel only while it still belongs to the 3D area."""
    if _peek(frame, x, y) == IS_3D_AREA:
        _put(frame, x, y, color)


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def fill_3d_color(frame: Frame) -> None:
    """Mark the 3D view area so later passes know which pixels are free."""
    for y in range(1, frame.height + 1):
        for x in range(1, frame.width + 1):
            _put(frame, x, y, IS_3D_AREA)


def _fill_square(grid: GameMap, frame: Frame, x: int, y: int, color: int) -> None:
    left, top = grid.minimap_location(x, y)
    size = int(MINIMAP_SCALE * TILE_SIZE)
    for j in range(size):
        for i in range(size):
            _put(frame, left + i, top + j, color)


def render_2d_map(grid: GameMap, frame: Frame) -> None:
    """Draw the tiles of the map into the minimap corner."""
    for row, cells in enumerate(grid.matrix):
        for col, value in enumerate(cells):
            if value == WALL:
                color = TILE_2D_COLOR
            elif value == FLOOR:
                color = WALL_2D_COLOR
            else:
                continue
            _fill_square(grid, frame, TILE_SIZE * col, TILE_SIZE * row, color)


def draw_player(grid: GameMap, player: Player, frame: Frame) -> None:
    """Draw the player as a small square on the minimap."""
    x, y = grid.minimap_location(int(player.x), int(player.y))
    half = _cdiv(player.thickness, 2)
    for row in range(-half, half + 1):
        for col in range(-half, half + 1):
            _put(frame, x + col, y + row, PLAYER_2D_COLOR)


def draw_line(
    grid: GameMap, player: Player, frame: Frame, dx: float, dy: float
) -> None:
    """Draw a ray on the minimap from the player until it meets a wall."""
    max_value = max(abs(dx), abs(dy))
    if max_value == 0:
        return
    dx /= max_value
    dy /= max_value
    x, y = player.x, player.y
    while not grid.is_wall(x, y):
        px, py = grid.minimap_location(int(x), int(y))
        _put(frame, px, py, RAY_COLOR)
        x += dx
        y += dy


def wall_direction(player: Player, ray: Ray) -> Element:
    """Return which wall texture the ray's hit shows."""
    if ray.hit_vertical:
        return Element.WE if player.x - ray.wall_hit_x > 0 else Element.EA
    return Element.NO if player.y - ray.wall_hit_y > 0 else Element.SO


def draw_sky(frame: Frame, ray_num: int, wall_top: int, color: int) -> None:
    """Paint the sky above the wall strip of one ray."""
    for y in range(1, wall_top + 1):
        for x in range(1, WALL_STRIP_WIDTH + 1):
            _paint_3d(frame, x + ray_num * WALL_STRIP_WIDTH, y, color)


def draw_floor(frame: Frame, ray_num: int, wall_bottom: int, color: int) -> None:
    """Paint the floor below the wall strip of one ray."""
    for y in range(wall_bottom + 1, frame.height + 1):
        for x in range(1, WALL_STRIP_WIDTH + 1):
            _paint_3d(frame, x + ray_num * WALL_STRIP_WIDTH, y, color)


def render_wall_strip(
    scene: Scene, player: Player, ray: Ray, frame: Frame, ray_num: int
) -> None:
    """Draw the textured wall column of one ray with its sky and floor."""
    grid = scene.grid
    if ray.distance == 0:
        ray.distance = 0.01
    correct = ray.distance * math.cos(ray.angle - player.rotation_angle)
    plane = (grid.window_width // 2) / math.tan(RAY_RANGE / 2)
    projected = (TILE_SIZE / correct) * plane if correct else math.inf
    if math.isfinite(projected):
        strip = int(projected)
    else:
        strip = grid.window_height
    half_height = grid.window_height // 2
    wall_top = half_height - _cdiv(strip, 2)
    wall_bottom = half_height + _cdiv(strip, 2)
    top, bottom = wall_top, wall_bottom
    if strip >= grid.window_height:
        top, bottom = 0, grid.window_height - 1

    direction = wall_direction(player, ray)
    texture = scene.textures[direction]
    if direction in (Element.WE, Element.EA):
        column = int(ray.wall_hit_y)
    else:
        column = int(ray.wall_hit_x)
    column = (column % TILE_SIZE) * texture.width // TILE_SIZE

    for y in range(top, bottom):
        for x in range(WALL_STRIP_WIDTH):
            px = x + ray_num * WALL_STRIP_WIDTH
            if _peek(frame, px, y) != IS_3D_AREA:
                continue
            idx = (y - wall_top) * WALL_STRIP_WIDTH + x
            row = idx * texture.height // strip
            _put(frame, px, y, texture.data[row * texture.width + column])

    draw_floor(frame, ray_num, bottom, grid.floor_color)
    draw_sky(frame, ray_num, top, grid.sky_color)


def render_frame(
    scene: Scene, player: Player, keys: KeyState, frame: Frame
) -> None:
    """Move the player by the held keys and draw one complete frame."""
    grid = scene.grid
    fill_3d_color(frame)
    render_2d_map(grid, frame)
    draw_player(grid, player, frame)
    player.update(keys, grid)

    count = grid.ray_count
    angle = player.rotation_angle - RAY_RANGE / 2.0
    for ray_num in range(count):
        ray = cast_ray(grid, player, angle)
        draw_line(
            grid,
            player,
            frame,
            ray.wall_hit_x - player.x,
            ray.wall_hit_y - player.y,
        )
        render_wall_strip(scene, player, ray, frame, ray_num)
        angle += RAY_RANGE / count