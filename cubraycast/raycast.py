"""Ray casting against the tile grid."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .constants import NO_HIT_DISTANCE, TILE_SIZE
from .grid import GameMap
from .player import Player

_TWO_PI = math.pi * 2


@dataclass
class Ray:
    """A cast ray: its angle, where it faces, and the wall it struck."""

    angle: float
    facing_down: bool
    facing_up: bool
    facing_right: bool
    facing_left: bool
    wall_hit_x: float = 0.0
    wall_hit_y: float = 0.0
    distance: float = 0.0
    hit_vertical: bool = False


@dataclass
class Hit:
    """The outcome of stepping a ray across grid lines of one orientation."""

    x_intercept: float
    y_intercept: float
    x_step: float
    y_step: float
    found: bool = False
    wall_hit_x: float = 0.0
    wall_hit_y: float = 0.0
    distance: float = NO_HIT_DISTANCE


def normalize_angle(angle: float) -> float:
    """Bring an angle into [0, 2π); negative angles land in (0, 2π]."""
    if angle >= 0:
        while angle >= _TWO_PI:
            angle -= _TWO_PI
    else:
        while angle <= 0:
            angle += _TWO_PI
    return angle


def distance_between_points(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points."""
    return math.sqrt((x2 - x1) * (x2 - x1) + (y2 - y1) * (y2 - y1))


def _divide(a: float, b: float) -> float:
    """Floating division that yields infinities or NaN for a zero divisor."""
    if b:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def make_ray(angle: float) -> Ray:
    """Create a ray at the normalised angle with its facing flags set."""
    angle = normalize_angle(angle)
    down = 0 < angle < math.pi
    right = angle < 0.5 * math.pi or angle > 1.5 * math.pi
    return Ray(
        angle=angle,
        facing_down=down,
        facing_up=not down,
        facing_right=right,
        facing_left=not right,
    )


def _trace(
    grid: GameMap, player: Player, hit: Hit, x_adjust: int, y_adjust: int
) -> Hit:
    x, y = hit.x_intercept, hit.y_intercept
    while 0 <= x <= grid.window_width and 0 <= y <= grid.window_height:
        if grid.is_wall(x + x_adjust, y + y_adjust):
            hit.found = True
            hit.wall_hit_x = x
            hit.wall_hit_y = y
            break
        x += hit.x_step
        y += hit.y_step
    if hit.found:
        hit.distance = distance_between_points(
            player.x, player.y, hit.wall_hit_x, hit.wall_hit_y
        )
    else:
        hit.distance = NO_HIT_DISTANCE
    return hit


def cast_horizontal(grid: GameMap, player: Player, ray: Ray) -> Hit:
    """Find the first wall the ray meets on horizontal grid lines."""
    tan_a = math.tan(ray.angle)
    y_int = math.floor(player.y / TILE_SIZE) * TILE_SIZE
    if ray.facing_down:
        y_int += TILE_SIZE
    x_int = player.x + _divide(y_int - player.y, tan_a)
    y_step = -TILE_SIZE if ray.facing_up else TILE_SIZE
    x_step = _divide(TILE_SIZE, tan_a)
    if ray.facing_left and x_step > 0:
        x_step = -x_step
    if ray.facing_right and x_step < 0:
        x_step = -x_step
    hit = Hit(float(x_int), float(y_int), float(x_step), float(y_step))
    return _trace(grid, player, hit, 0, -1 if ray.facing_up else 0)


def cast_vertical(grid: GameMap, player: Player, ray: Ray) -> Hit:
    """Find the first wall the ray meets on vertical grid lines."""
    tan_a = math.tan(ray.angle)
    x_int = math.floor(player.x / TILE_SIZE) * TILE_SIZE
    if ray.facing_right:
        x_int += TILE_SIZE
    y_int = player.y + (x_int - player.x) * tan_a
    x_step = -TILE_SIZE if ray.facing_left else TILE_SIZE
    y_step = TILE_SIZE * tan_a
    if ray.facing_up and y_step > 0:
        y_step = -y_step
    if ray.facing_down and y_step < 0:
        y_step = -y_step
    hit = Hit(float(x_int), float(y_int), float(x_step), float(y_step))
    return _trace(grid, player, hit, -1 if ray.facing_left else 0, 0)


def cast_ray(grid: GameMap, player: Player, angle: float) -> Ray:
    """Cast one ray and keep the nearer of its horizontal and vertical hits."""
    ray = make_ray(angle)
    horz = cast_horizontal(grid, player, ray)
    vert = cast_vertical(grid, player, ray)
    best = vert if vert.distance < horz.distance else horz
    ray.wall_hit_x = best.wall_hit_x
    ray.wall_hit_y = best.wall_hit_y
    ray.distance = best.distance
    ray.hit_vertical = best is vert
    return ray