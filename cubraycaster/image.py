"""Pixel buffers: the drawing canvas and textures loaded from XPM files."""

from __future__ import annotations

import os
import re
import sys
from array import array
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from PIL import ImageColor

from .constants import HEIGHT, WIDTH
from .errors import CubError

TRANSPARENT = 0
_LOAD_FAILED = "Error: Failed to load texture image"
_STRING = re.compile(r'"((?:[^"\\]|\\.)*)"')
_VISUAL_KEYS = ("c", "g", "g4", "m", "s")


def rgb(r: int, g: int, b: int) -> int:
    """Pack three 8-bit channels into a ``0xRRGGBB`` colour."""
    return (r << 16) | (g << 8) | b


class Canvas:
    """A 32-bit colour image that the game draws into."""

    def __init__(self, width: int = WIDTH, height: int = HEIGHT, fill: int = 0) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("canvas dimensions must be positive")
        self.width = width
        self.height = height
        self.pixels = [fill & 0xFFFFFFFF] * (width * height)

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def draw_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; coordinates outside the canvas are ignored."""
        if self._inside(x, y):
            self.pixels[y * self.width + x] = color & 0xFFFFFFFF

    def get_pixel(self, x: int, y: int) -> int:
        """The colour at ``(x, y)``, or 0 outside the canvas."""
        if not self._inside(x, y):
            return 0
        return self.pixels[y * self.width + x]

    def draw_column(self, x: int, start: int, end: int, color: int) -> None:
        """Fill column ``x`` from row ``start`` up to, not including, ``end``."""
        if not 0 <= x < self.width:
            return
        for y in range(max(start, 0), min(end, self.height)):
            self.pixels[y * self.width + x] = color & 0xFFFFFFFF

    def fill(self, color: int) -> None:
        """Set every pixel to ``color``."""
        self.pixels = [color & 0xFFFFFFFF] * (self.width * self.height)

    def to_bytes(self) -> bytes:
        """The pixels as little-endian 32-bit words (B, G, R, X per pixel)."""
        words = array("I", self.pixels)
        if sys.byteorder == "big":
            words.byteswap()
        return words.tobytes()


@dataclass(frozen=True)
class Texture:
    """A decoded image: ``pixels`` holds ``width * height`` colours row by row."""

    width: int
    height: int
    pixels: tuple[int, ...]

    def pixel(self, x: int, y: int) -> int:
        """The colour at ``(x, y)``, or 0 outside the texture."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            return 0
        return self.pixels[y * self.width + x]


def _parse_hex(digits: str) -> int:
    if not digits or len(digits) % 3 or len(digits) > 12:
        raise ValueError(f"bad hex colour: #{digits}")
    size = len(digits) // 3
    channels = [int(digits[i * size:(i + 1) * size], 16) for i in range(3)]
    if size == 1:
        channels = [value * 17 for value in channels]
    elif size > 2:
        channels = [value >> (4 * (size - 2)) for value in channels]
    return rgb(*channels)


def _parse_color_value(value: str) -> int:
    if value.lower() == "none":
        return TRANSPARENT
    if value.startswith("#"):
        return _parse_hex(value[1:])
    red, green, blue = ImageColor.getrgb(value)[:3]
    return rgb(red, green, blue)


def _parse_color_spec(spec: str) -> int:
    entries: dict[str, list[str]] = {}
    current: list[str] | None = None
    for token in spec.split():
        if token in _VISUAL_KEYS:
            current = entries.setdefault(token, [])
        elif current is not None:
            current.append(token)
        else:
            raise ValueError(f"bad colour entry: {spec!r}")
    for key in _VISUAL_KEYS:
        words = entries.get(key)
        if words:
            return _parse_color_value(" ".join(words))
    raise ValueError(f"colour entry without a colour: {spec!r}")


def _parse_xpm(strings: Sequence[str]) -> Texture:
    if not strings:
        raise ValueError("no XPM data")
    header = strings[0].split()
    width, height, ncolors, cpp = (int(value) for value in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise ValueError("bad XPM header")
    color_lines = strings[1:1 + ncolors]
    pixel_lines = strings[1 + ncolors:1 + ncolors + height]
    if len(color_lines) != ncolors or len(pixel_lines) != height:
        raise ValueError("truncated XPM data")
    palette: dict[str, int] = {}
    for line in color_lines:
        key = line[:cpp]
        if len(key) != cpp:
            raise ValueError(f"bad colour line: {line!r}")
        palette[key] = _parse_color_spec(line[cpp:])
    pixels: list[int] = []
    for row in pixel_lines:
        if len(row) < width * cpp:
            raise ValueError("short pixel row")
        pixels.extend(palette[row[i:i + cpp]] for i in range(0, width * cpp, cpp))
    return Texture(width, height, tuple(pixels))


def load_xpm(path: str | os.PathLike[str]) -> Texture:
    """Load an XPM image. Raises ``CubError`` when it cannot be read."""
    try:
        text = Path(path).read_text(encoding="latin-1")
    except OSError as exc:
        raise CubError(_LOAD_FAILED) from exc
    try:
        return _parse_xpm(_STRING.findall(text))
    except (ValueError, KeyError, IndexError) as exc:
        raise CubError(_LOAD_FAILED) from exc