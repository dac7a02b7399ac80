"""Helpers for map rows and scene files."""

from __future__ import annotations

import os
from collections.abc import Sequence

PLAYER_CHARS = frozenset("NSEW")


def is_line_empty(line: str | None) -> bool:
    """True when ``line`` is missing or holds only spaces and newlines."""
    if line is None:
        return True
    return all(char in " \n" for char in line)


def max_len(rows: Sequence[str]) -> int:
    """Length of the longest row, 0 for no rows."""
    return max((len(row) for row in rows), default=0)


def map_height(rows: Sequence[str]) -> int:
    """Number of rows."""
    return len(rows)


def is_player_char(char: str) -> bool:
    """True for a player start: ``N``, ``S``, ``E`` or ``W``."""
    return char in PLAYER_CHARS and len(char) == 1


def has_extension(path: str, ext: str) -> bool:
    """True when ``path`` is longer than four characters and ends with ``ext``."""
    return len(path) > 4 and path.endswith(ext)


def is_readable_file(path: str | os.PathLike[str]) -> bool:
    """True when ``path`` exists and can be read."""
    return os.path.exists(path) and os.access(path, os.R_OK)