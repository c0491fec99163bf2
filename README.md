# cubraycast

A compact raycasting engine in the style of early first-person games. It reads a
`.cub` scene file, loads XPM wall textures, and draws a textured 3D view with a
minimap of the level in the bottom-right corner of the window.

## Installation

```
pip install .
```

To run the tests, install with the `test` extra instead:

```
pip install ".[test]"
pytest
```

The window is drawn with pygame, which is installed as a dependency.

## Running

```
cubraycast path/to/scene.cub
```

When no file name, or more than one, is given, the program prints
`Input A map's file name.` and exits with status 1. If the scene cannot be
loaded, it prints a message starting with `Error:` to standard error and exits
with status 1.

The window is as large as the map: 40 pixels for every map cell in each
direction.

### Controls

| Key         | Action             |
|-------------|--------------------|
| W / S       | walk forward/back  |
| A / D       | step sideways      |
| Left/Right  | turn               |
| Esc         | quit               |

Closing the window also quits. Walls block movement, and the player cannot
slip diagonally between two walls that touch at a corner.

## Scene files

A scene file must have the `.cub` extension. It opens with six element lines,
which may come in any order and may be separated by empty lines:

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 220,100,0
C 225,30,0
```

* `NO`, `SO`, `WE`, `EA` give the XPM texture for each wall face. Everything
  after the prefix and its single space is taken as the path. A texture that
  cannot be read or decoded is an error.
* `F` and `C` give the floor and ceiling colours as `R,G,B`. Each of the three
  parts must consist of digits only and lie between 0 and 255.
* Each element may appear only once; any other line is an error.

The map follows these lines:

```
111111
100101
101001
1100N1
111111
```

* `1` is a wall, `0` is open floor, and a space is outside the level. Shorter
  lines are padded with space to the length of the longest one.
* The player starts at the one `N`, `S`, `E` or `W`, facing that direction; the
  start cell counts as open floor. There must be exactly one start.
* Every open cell must be closed in: an open cell on the edge of the map, or
  next to a space, is an error.
* Empty lines before the map and at its end are ignored.

## Using it as a library

* `cubraycast.parsing`: `read_scene(path, load_texture)`,
  `parse_scene(lines, load_texture)`, `parse_color`, `find_player`,
  `build_map`, `check_around_wall` and the `Scene` dataclass. Problems are
  raised as `cubraycast.utils.CubError`.
* `cubraycast.xpm`: `load_xpm`, `parse_xpm`, `parse_xpm_text`, `strip_comments`,
  `text_to_rgb` and `Image`; decoding failures raise `XpmError`.
* `cubraycast.colors`: `color_by_name`, the named X11 colours used by XPM files.
* `cubraycast.grid`: `GameMap`, with `is_wall`, `check_edge` and
  `minimap_location`.
* `cubraycast.player` and `cubraycast.keys`: `Player`, `spawn_player`,
  `KeyState`.
* `cubraycast.raycast`: `cast_ray`, `cast_horizontal`, `cast_vertical`,
  `make_ray`, `normalize_angle`, `distance_between_points`.
* `cubraycast.render`: `Frame`, `render_frame` and the separate drawing passes
  (`fill_3d_color`, `render_2d_map`, `draw_player`, `draw_line`,
  `render_wall_strip`, `draw_sky`, `draw_floor`).
* `cubraycast.app`: `Game`, which renders one frame per `step()`, and `main`.

Rendering works without a window:

```python
from cubraycast.app import Game
from cubraycast.constants import KeyCode
from cubraycast.parsing import read_scene

scene = read_scene("maps/demo.cub")
game = Game(scene)
game.handle_key(KeyCode.W, True)   # hold "forward"
frame = game.step()                # a Frame of 0xRRGGBB pixels
print(frame.width, frame.height, hex(frame.get(10, 10)))
```

`Game.handle_key` takes the codes of `cubraycast.constants.KeyCode`, and
pressing or releasing `KeyCode.ESC` ends the program.

## Limitations

* Wall textures are read from XPM files only; no other image format is
  supported.
* There are no sprites, doors, mouse look or sound; the view shows walls,
  floor and ceiling colours, the minimap, the player and the cast rays.