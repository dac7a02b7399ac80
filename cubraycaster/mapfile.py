"""Reading scene files into lines."""

from __future__ import annotations

import os

from .errors import CubError
from .maputils import is_readable_file

_FAILED = "Error: Failed to get map"


def read_lines(path: str | os.PathLike[str]) -> list[str]:
    """Read the scene file at ``path`` as a list of lines.

    Lines end at ``\\n`` only and carry no newline characters. Raises
    ``CubError`` when the file cannot be read or holds no lines at all.
    """
    if not is_readable_file(path):
        raise CubError(_FAILED)
    try:
        with open(path, encoding="utf-8", errors="surrogateescape", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise CubError(_FAILED) from exc
    if not text:
        raise CubError(_FAILED)
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines