"""Extracting, padding and validating the map grid of a scene file."""

from __future__ import annotations

from collections.abc import Sequence

from .constants import MAX_MAP_SIZE, MAX_SPRITES
from .errors import CubError
from .maputils import is_line_empty, is_player_char, map_height, max_len

_VALID_CHARS = frozenset("01NESW DA")
_OPEN_CELLS = frozenset("0NSEWDA")


def normalize_map(rows: Sequence[str]) -> list[str]:
    """Pad every row with spaces to the length of the longest one."""
    width = max_len(rows)
    return [row.ljust(width, " ") for row in rows]


def has_valid_characters(rows: Sequence[str]) -> bool:
    """True when no row is blank and every character is a map character."""
    return all(
        not row or (not is_line_empty(row) and set(row) <= _VALID_CHARS)
        for row in rows
    )


def check_sprite_count(rows: Sequence[str]) -> bool:
    """True when the map holds at most ``MAX_SPRITES`` sprites."""
    return sum(row.count("A") for row in rows) <= MAX_SPRITES


def has_single_player_start(rows: Sequence[str]) -> bool:
    """True when exactly one player start is on the map."""
    return sum(1 for row in rows for char in row if is_player_char(char)) == 1


def _cell(rows: Sequence[str], y: int, x: int) -> str:
    row = rows[y]
    return row[x] if x < len(row) else " "


def _is_cell_enclosed(rows: Sequence[str], y: int, x: int) -> bool:
    if y == 0 or x == 0 or y + 1 >= len(rows) or x + 1 >= len(rows[y]):
        return False
    neighbours = (
        _cell(rows, y - 1, x),
        _cell(rows, y + 1, x),
        rows[y][x - 1],
        rows[y][x + 1],
    )
    return " " not in neighbours


def is_enclosed(rows: Sequence[str]) -> bool:
    """True when no open cell touches the map edge or a space."""
    return all(
        _is_cell_enclosed(rows, y, x)
        for y, row in enumerate(rows)
        for x, char in enumerate(row)
        if char in _OPEN_CELLS
    )


def validate_map(rows: Sequence[str]) -> None:
    """Raise ``CubError`` describing the first problem with the map."""
    if max_len(rows) > MAX_MAP_SIZE or map_height(rows) > MAX_MAP_SIZE:
        raise CubError("Error : Map too big")
    if not has_valid_characters(rows):
        raise CubError("Error: Invalid character in map")
    if not check_sprite_count(rows):
        raise CubError("Error: Invalid number of sprites starts")
    if not has_single_player_start(rows):
        raise CubError("Error: Invalid number of player starts")
    if not is_enclosed(rows):
        raise CubError("Error: Invalid map is not closed")


def extract_map(lines: Sequence[str], index: int) -> list[str]:
    """Take the map from ``lines[index:]``, pad it and validate it."""
    if not lines or not 0 <= index < len(lines):
        raise CubError("Error: Map not found")
    rows = normalize_map(lines[index:])
    if not rows:
        raise CubError("Error: Failed to normalize map")
    validate_map(rows)
    return rows