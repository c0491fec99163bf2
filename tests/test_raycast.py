import math

import pytest

from cubraycast.constants import NO_HIT_DISTANCE, TILE_SIZE
from cubraycast.grid import GameMap
from cubraycast.player import spawn_player
from cubraycast.raycast import (
    cast_horizontal,
    cast_ray,
    cast_vertical,
    distance_between_points,
    make_ray,
    normalize_angle,
)


@pytest.fixture
def box():
    inner = [1, 0, 0, 0, 1]
    return GameMap([[1] * 5, list(inner), list(inner), list(inner), [1] * 5])


@pytest.fixture
def player():
    return spawn_player(2, 2, "E")


def test_normalize_angle_fixed_points():
    assert normalize_angle(0.0) == 0.0
    assert normalize_angle(2 * math.pi) == 0.0
    assert normalize_angle(-math.pi / 2) == pytest.approx(1.5 * math.pi)


@pytest.mark.parametrize("angle", [-10.0, -0.1, 0.5, 7.0, 20.0])
def test_normalize_angle_range_and_direction(angle):
    result = normalize_angle(angle)
    assert 0 <= result <= 2 * math.pi
    assert math.cos(result) == pytest.approx(math.cos(angle))
    assert math.sin(result) == pytest.approx(math.sin(angle))


def test_distance_between_points():
    assert distance_between_points(0, 0, 3, 4) == 5.0
    assert distance_between_points(1, 2, 1, 2) == 0.0
    assert distance_between_points(1, 7, -2, 3) == distance_between_points(
        -2, 3, 1, 7
    )


def test_make_ray_facing_flags():
    ray = make_ray(math.pi / 4)
    assert ray.facing_down and ray.facing_right
    assert not ray.facing_up and not ray.facing_left
    ray = make_ray(3 * math.pi / 4)
    assert ray.facing_down and ray.facing_left
    ray = make_ray(math.pi)
    assert ray.facing_up and ray.facing_left


def test_make_ray_normalizes():
    ray = make_ray(-math.pi / 2)
    assert ray.angle == pytest.approx(1.5 * math.pi)
    assert ray.facing_up


def test_horizontal_cast_parallel_ray_misses(box, player):
    hit = cast_horizontal(box, player, make_ray(0.0))
    assert not hit.found
    assert hit.distance == NO_HIT_DISTANCE


def test_vertical_cast_hits_wall_line(box, player):
    hit = cast_vertical(box, player, make_ray(0.0))
    assert hit.found
    assert hit.wall_hit_x % TILE_SIZE == 0
    assert box.is_wall(hit.wall_hit_x, hit.wall_hit_y)
    assert hit.distance == distance_between_points(
        player.x, player.y, hit.wall_hit_x, hit.wall_hit_y
    )


def test_cast_ray_east_uses_vertical_hit(box, player):
    ray = cast_ray(box, player, 0.0)
    assert ray.hit_vertical
    assert ray.distance == cast_vertical(box, player, make_ray(0.0)).distance


def test_cast_ray_south_uses_horizontal_hit(box, player):
    ray = cast_ray(box, player, math.pi / 2)
    assert not ray.hit_vertical
    assert ray.wall_hit_y % TILE_SIZE == 0
    assert box.is_wall(ray.wall_hit_x, ray.wall_hit_y)


def test_cast_ray_north_stops_above_wall(box, player):
    ray = cast_ray(box, player, 1.5 * math.pi)
    assert not ray.hit_vertical
    assert ray.wall_hit_y % TILE_SIZE == 0
    assert box.is_wall(ray.wall_hit_x, ray.wall_hit_y - 1)
    assert not box.is_wall(ray.wall_hit_x, ray.wall_hit_y + 1)


def test_cast_ray_symmetric_box(box, player):
    east = cast_ray(box, player, 0.0)
    west = cast_ray(box, player, math.pi)
    south = cast_ray(box, player, math.pi / 2)
    assert west.hit_vertical
    assert east.distance == pytest.approx(west.distance)
    assert east.distance == pytest.approx(south.distance)


@pytest.mark.parametrize("angle", [0.3, 1.0, 2.0, 3.5, 5.0, -0.7])
def test_cast_ray_always_hits_inside_closed_box(box, player, angle):
    ray = cast_ray(box, player, angle)
    assert ray.distance < NO_HIT_DISTANCE
    assert ray.distance == pytest.approx(
        distance_between_points(player.x, player.y, ray.wall_hit_x, ray.wall_hit_y)
    )
    assert 0 <= ray.wall_hit_x <= box.window_width
    assert 0 <= ray.wall_hit_y <= box.window_height