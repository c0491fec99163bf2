"""Loader for XPM images, producing 32-bit pixels."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from .colors import color_by_name

TRANSPARENT = 0xFF000000

_HEX_NUMBER = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")
_DEC_NUMBER = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")


class XpmError(ValueError):
    """Raised when XPM data cannot be turned into an image."""


@dataclass
class Image:
    """A decoded image; ``data`` holds ``width * height`` pixels row by row."""

    width: int
    height: int
    data: list[int] = field(default_factory=list)

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel at column ``x`` and row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return self.data[y * self.width + x]


def split_words(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs."""
    return [word for word in re.split(r"[ \t]+", text) if word]


def _find_outside_quotes(text: str, pattern: str, start: int = 0) -> int:
    in_quote = False
    for pos in range(start, len(text) - len(pattern) + 1):
        if text[pos] == '"':
            in_quote = not in_quote
        if not in_quote and text.startswith(pattern, pos):
            return pos
    return -1


def _blank(text: str, start: int, length: int) -> str:
    end = min(len(text), start + length)
    return text[:start] + " " * (end - start) + text[end:]


def strip_comments(text: str) -> str:
    """Replace C-style comments lying outside double quotes with spaces.

    The text keeps its length. A ``//`` comment is blanked together with
    the newline that ends it.
    """
    while (begin := _find_outside_quotes(text, "/*")) != -1:
        end = text.find("*/", begin + 2)
        span = 3 if end == -1 else end - begin + 2
        text = _blank(text, begin, span)
    while (begin := _find_outside_quotes(text, "//")) != -1:
        end = text.find("\n", begin + 2)
        span = 2 if end == -1 else end - begin + 1
        text = _blank(text, begin, span)
    return text


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _parse_hex(text: str) -> int:
    match = _HEX_NUMBER.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits, 16)
    return _to_int32(-value if sign == "-" else value)


def _atoi(text: str) -> int:
    match = _DEC_NUMBER.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value


def text_to_rgb(name: str, end: str | None = None) -> int:
    """Turn a colour specification into a 0xRRGGBB value.

    ``#RRGGBB`` is read as hexadecimal. Otherwise ``name`` (joined with
    ``end`` by a space when given) is looked up among the named colours;
    an unknown name gives 0.
    """
    if name.startswith("#"):
        return _parse_hex(name[1:])
    if end is not None:
        name = f"{name} {end}"[:63]
    try:
        return color_by_name(name)
    except KeyError:
        return 0


def _read_header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError(f"incomplete XPM header: {line!r}")
    values = tuple(_atoi(word) for word in words[:4])
    if any(value <= 0 for value in values):
        raise XpmError(f"invalid XPM header: {line!r}")
    return values  # type: ignore[return-value]


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from the strings of an XPM array, header first."""
    source = iter(lines)

    def next_line(what: str) -> str:
        try:
            return next(source)
        except StopIteration:
            raise XpmError(f"missing {what}") from None

    width, height, ncolors, cpp = _read_header(next_line("header"))
    direct = cpp <= 2

    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = next_line("colour definition")
        words = split_words(line[cpp:])
        try:
            at = words.index("c") + 1
            spec = words[at]
        except (ValueError, IndexError):
            raise XpmError(f"bad colour definition: {line!r}") from None
        extra = words[at + 1] if at + 1 < len(words) else None
        rgb = text_to_rgb(spec, extra)
        key = line[:cpp]
        if direct:
            palette[key] = rgb
        else:
            palette.setdefault(key, rgb)

    data: list[int] = []
    for _ in range(height):
        line = next_line("pixel row")
        for x in range(width):
            color = palette.get(line[cpp * x:cpp * (x + 1)], 0)
            if color == -1:
                color = TRANSPARENT
            data.append(color & 0xFFFFFFFF)
    return Image(width, height, data)


def _quoted_strings(text: str) -> Iterator[str]:
    pos = 0
    while True:
        start = text.find('"', pos)
        if start == -1:
            return
        end = text.find('"', start + 1)
        if end == -1:
            return
        yield text[start + 1:end]
        pos = end + 1


def parse_xpm_text(text: str) -> Image:
    """Build an image from the text of an XPM file."""
    return parse_xpm(_quoted_strings(strip_comments(text)))


def load_xpm(path: str | Path) -> Image:
    """Read and decode an XPM file."""
    try:
        text = Path(path).read_bytes().decode("latin-1")
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc}") from exc
    return parse_xpm_text(text)


def _as_lines(rows: Sequence[str]) -> list[str]:
    return list(rows)