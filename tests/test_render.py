import math

import pytest

from cubraycast.constants import (
    IS_3D_AREA,
    PLAYER_2D_COLOR,
    RAY_COLOR,
    WALL_2D_COLOR,
    Element,
)
from cubraycast.grid import GameMap
from cubraycast.keys import KeyState
from cubraycast.parsing import parse_scene
from cubraycast.player import spawn_player
from cubraycast.raycast import cast_ray, make_ray
from cubraycast.render import (
    Frame,
    draw_floor,
    draw_line,
    draw_player,
    draw_sky,
    fill_3d_color,
    render_2d_map,
    render_frame,
    render_wall_strip,
    wall_direction,
)
from cubraycast.xpm import Image

TEXTURE_COLORS = {
    "north.xpm": 0x111111,
    "south.xpm": 0x222222,
    "west.xpm": 0x333333,
    "east.xpm": 0x444444,
}

SCENE_LINES = [
    "NO north.xpm\n",
    "SO south.xpm\n",
    "WE west.xpm\n",
    "EA east.xpm\n",
    "F 10,20,30\n",
    "C 40,50,60\n",
    "\n",
    "111111\n",
    "100001\n",
    "10N001\n",
    "100001\n",
    "111111\n",
]


def _loader(path):
    return Image(4, 4, [TEXTURE_COLORS[path]] * 16)


@pytest.fixture
def scene():
    return parse_scene(SCENE_LINES, _loader)


def _frame_for(grid, fill=None):
    size = grid.window_width * grid.window_height
    data = [fill] * size if fill is not None else []
    return Frame(grid.window_width, grid.window_height, data)


def test_frame_set_get_round_trip():
    frame = Frame(5, 4)
    frame.set(2, 3, 0xABCDEF)
    assert frame.get(2, 3) == 0xABCDEF
    assert frame.get(0, 0) == 0


def test_frame_out_of_range_raises():
    frame = Frame(3, 3)
    with pytest.raises(IndexError):
        frame.get(0, 3)
    with pytest.raises(IndexError):
        frame.set(0, -1, 1)


def test_frame_rejects_wrong_data_size():
    with pytest.raises(ValueError):
        Frame(2, 2, [0, 0, 0])


def test_fill_3d_color_skips_first_row_and_one_pixel():
    frame = Frame(4, 3)
    fill_3d_color(frame)
    assert frame.data[:5] == [0] * 5
    assert all(pixel == IS_3D_AREA for pixel in frame.data[5:])


def test_render_2d_map_paints_floor_cell():
    grid = GameMap([[1, 1, 1], [1, 0, 1], [1, 1, 1]])
    frame = _frame_for(grid, IS_3D_AREA)
    render_2d_map(grid, frame)
    x, y = grid.minimap_location(40, 40)
    assert frame.get(x, y) == WALL_2D_COLOR
    assert frame.get(x + 9, y + 9) == WALL_2D_COLOR


def test_render_2d_map_leaves_space_cells():
    grid = GameMap([[-1, 1], [1, 1]])
    frame = _frame_for(grid, IS_3D_AREA)
    render_2d_map(grid, frame)
    x, y = grid.minimap_location(0, 0)
    assert frame.get(x, y) == IS_3D_AREA


def test_draw_player_marks_square(scene):
    grid = scene.grid
    player = scene.player
    before = (player.x, player.y)
    frame = _frame_for(grid)
    draw_player(grid, player, frame)
    x, y = grid.minimap_location(int(player.x), int(player.y))
    half = player.thickness // 2
    assert frame.get(x, y) == PLAYER_2D_COLOR
    assert frame.get(x - half, y - half) == PLAYER_2D_COLOR
    assert frame.get(x + half, y + half) == PLAYER_2D_COLOR
    assert (player.x, player.y) == before


def test_draw_line_marks_ray(scene):
    grid = scene.grid
    player = scene.player
    frame = _frame_for(grid)
    draw_line(grid, player, frame, 0, -60)
    x, y = grid.minimap_location(int(player.x), int(player.y) - 1)
    assert frame.get(x, y) == RAY_COLOR


def test_draw_line_zero_length_draws_nothing(scene):
    frame = _frame_for(scene.grid)
    before = list(frame.data)
    draw_line(scene.grid, scene.player, frame, 0, 0)
    assert frame.data == before


def test_wall_direction():
    player = spawn_player(2, 2, "N")
    ray = make_ray(0.0)
    ray.hit_vertical = True
    ray.wall_hit_x = player.x - 10
    assert wall_direction(player, ray) == Element.WE
    ray.wall_hit_x = player.x + 10
    assert wall_direction(player, ray) == Element.EA
    ray.hit_vertical = False
    ray.wall_hit_y = player.y - 10
    assert wall_direction(player, ray) == Element.NO
    ray.wall_hit_y = player.y + 10
    assert wall_direction(player, ray) == Element.SO


def test_draw_sky_only_paints_3d_area():
    frame = Frame(10, 20, [IS_3D_AREA] * 200)
    frame.set(3, 2, 0)
    draw_sky(frame, 2, 5, 0x123456)
    assert frame.get(3, 1) == 0x123456
    assert frame.get(3, 5) == 0x123456
    assert frame.get(3, 2) == 0
    assert frame.get(3, 0) == IS_3D_AREA
    assert frame.get(3, 6) == IS_3D_AREA


def test_draw_floor_paints_below_bottom():
    frame = Frame(10, 20, [IS_3D_AREA] * 200)
    draw_floor(frame, 2, 10, 0x654321)
    assert frame.get(3, 11) == 0x654321
    assert frame.get(3, 19) == 0x654321
    assert frame.get(3, 10) == IS_3D_AREA


def test_render_wall_strip_straight_up(scene):
    grid = scene.grid
    player = scene.player
    frame = _frame_for(grid)
    fill_3d_color(frame)
    ray = cast_ray(grid, player, player.rotation_angle)
    assert wall_direction(player, ray) == Element.NO
    render_wall_strip(scene, player, ray, frame, 0)
    middle = grid.window_height // 2
    assert frame.get(0, middle) == TEXTURE_COLORS["north.xpm"]
    assert frame.get(1, 5) == grid.sky_color
    assert frame.get(1, grid.window_height - 10) == grid.floor_color


def test_render_wall_strip_replaces_zero_distance(scene):
    frame = _frame_for(scene.grid)
    fill_3d_color(frame)
    ray = make_ray(scene.player.rotation_angle)
    ray.wall_hit_x, ray.wall_hit_y = scene.player.x, scene.player.y - 40
    render_wall_strip(scene, scene.player, ray, frame, 0)
    assert ray.distance > 0
    assert frame.get(0, scene.grid.window_height // 2) in TEXTURE_COLORS.values()


def test_render_frame_draws_and_moves(scene):
    grid = scene.grid
    player = scene.player
    keys = KeyState()
    keys.up = True
    start_y = player.y
    frame = _frame_for(grid)
    render_frame(scene, player, keys, frame)
    assert player.y == pytest.approx(start_y - player.walk_speed)
    assert math.isclose(player.rotation_angle, math.pi * 1.5)
    assert PLAYER_2D_COLOR in frame.data
    assert RAY_COLOR in frame.data
    assert grid.sky_color in frame.data
    assert grid.floor_color in frame.data