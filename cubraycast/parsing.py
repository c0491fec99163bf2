"""Reading of scene description files: textures, colours and the tile map."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from itertools import dropwhile
from pathlib import Path
from typing import Optional

from .constants import Element
from .grid import FLOOR, SPACE, WALL, GameMap
from .player import Player, spawn_player
from .utils import (
    CubError,
    atoi,
    check_extension,
    is_digit_str,
    is_empty_line,
    split,
)
from .xpm import Image, XpmError, load_xpm

TextureLoader = Callable[[str], Optional[Image]]

_PREFIXES = (
    (Element.NO, "NO "),
    (Element.SO, "SO "),
    (Element.WE, "WE "),
    (Element.EA, "EA "),
    (Element.F, "F "),
    (Element.C, "C "),
)
_TEXTURES = frozenset({Element.NO, Element.SO, Element.WE, Element.EA})
_START_CHARS = "NESW"
_MAP_CHARS = " 01"
_LINE = re.compile(r"[^\n]*\n|[^\n]+")


@dataclass
class Scene:
    """A fully loaded scene: the map, the player and the wall textures."""

    grid: GameMap
    player: Player
    textures: dict[Element, Image] = field(default_factory=dict)


def parse_color(text: str) -> int:
    """Parse ``R,G,B`` with each part in 0..255 into a 0xRRGGBB value."""
    pieces = split(text, ",")
    color = 0
    for piece in pieces[:3]:
        color <<= 8
        num = atoi(piece)
        if not is_digit_str(piece) or (num == 0 and not piece.startswith("0")):
            raise CubError("non-digit")
        if not 0 <= num <= 255:
            raise CubError("color: Out of Range!")
        color |= num
    if len(pieces) < 3:
        raise CubError("lack of color")
    return color


def find_player(lines: Sequence[str]) -> Player:
    """Check the map characters and return the player at its start point."""
    player: Player | None = None
    for row, line in enumerate(lines):
        for col, char in enumerate(line):
            if char in _MAP_CHARS:
                continue
            if char not in _START_CHARS:
                raise CubError("Invalid Character in Map")
            if player is not None:
                raise CubError("Need 1 Start Point!")
            player = spawn_player(col, row, char)
    if player is None:
        raise CubError("There is no Start Point")
    return player


def _cell_value(char: str) -> int:
    if char == " ":
        return SPACE
    if char == "1":
        return WALL
    return FLOOR


def build_map(lines: Sequence[str]) -> GameMap:
    """Turn map lines into a grid, dropping trailing blank lines.

    Every row is as wide as the longest line; missing cells and spaces
    become empty space.
    """
    cols = max((len(line) for line in lines), default=0)
    trailing = sum(1 for _ in _takewhile_empty(reversed(lines)))
    kept = lines[: len(lines) - trailing]
    matrix = [[_cell_value(char) for char in line.ljust(cols)] for line in kept]
    return GameMap(matrix)


def _takewhile_empty(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        if not is_empty_line(line):
            return
        yield line


def check_around_wall(grid: GameMap) -> None:
    """Raise CubError unless every floor cell is enclosed by the level."""
    matrix = grid.matrix
    last_row, last_col = grid.rows - 1, grid.cols - 1
    for r, row in enumerate(matrix):
        for c, value in enumerate(row):
            if value != FLOOR:
                continue
            if r in (0, last_row) or c in (0, last_col):
                raise CubError("wall error")
            if SPACE in (
                matrix[r - 1][c],
                matrix[r + 1][c],
                row[c - 1],
                row[c + 1],
            ):
                raise CubError("wall error")


def _load_texture(path: str, load_texture: TextureLoader) -> Image:
    try:
        image = load_texture(path)
    except (XpmError, OSError):
        image = None
    if image is None:
        raise CubError("FAIL to Load Texture")
    return image


def _map_rows(lines: Iterator[str]) -> list[str]:
    body = dropwhile(lambda line: line == "\n", lines)
    return [line.removesuffix("\n") or " " for line in body]


def parse_scene(
    lines: Iterable[str], load_texture: TextureLoader = load_xpm
) -> Scene:
    """Build a scene from file lines that keep their ``\\n`` endings.

    Six element lines come first, in any order and separated by empty
    lines; the map follows. ``load_texture`` turns a path into an image.
    """
    source = iter(lines)
    textures: dict[Element, Image] = {}
    colors: dict[Element, int] = {}
    seen: set[Element] = set()
    while len(seen) < len(_PREFIXES):
        line = next(source, None)
        if line is None:
            raise CubError("read_info")
        if line == "\n":
            continue
        line = line.removesuffix("\n")
        for element, prefix in _PREFIXES:
            if line.startswith(prefix):
                break
        else:
            raise CubError("Mismatch type")
        if element in seen:
            raise CubError("Duplicated type")
        value = line[len(prefix):]
        if element in _TEXTURES:
            textures[element] = _load_texture(value, load_texture)
        else:
            colors[element] = parse_color(value)
        seen.add(element)

    rows = _map_rows(source)
    player = find_player(rows)
    grid = build_map(rows)
    check_around_wall(grid)
    grid.floor_color = colors[Element.F]
    grid.sky_color = colors[Element.C]
    return Scene(grid=grid, player=player, textures=textures)


def read_scene(
    path: str | Path, load_texture: TextureLoader = load_xpm
) -> Scene:
    """Read a ``.cub`` scene file."""
    if not check_extension(str(path)):
        raise CubError('Input the ".cub" extension file.')
    try:
        raw = Path(path).read_bytes()
    except OSError as exc:
        raise CubError("Fail to open file.") from exc
    text = raw.decode("utf-8", errors="surrogateescape")
    return parse_scene(_LINE.findall(text), load_texture)