"""Scene configuration: wall textures and floor and ceiling colours."""

from __future__ import annotations

import enum
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any

from .errors import CubError
from .maputils import has_extension, is_line_empty, is_readable_file
from .textutils import atoi_safe, split_with_sep

_INVALID = "Error: Invalid configuration"
_MISSING = "Error: Missing or duplicate configuration"
_NO_MAP = "Error: No valid lines found in the map"
_BAD_PATH = "Error: Invalid texture path"
_LOAD_FAILED = "Error: Failed to load texture image"


class ConfigKind(enum.Enum):
    """The six configuration entries a scene file must hold."""

    NO = "NO"
    SO = "SO"
    WE = "WE"
    EA = "EA"
    F = "F"
    C = "C"

    @property
    def is_texture(self) -> bool:
        return self in _TEXTURE_KINDS


_TEXTURE_KINDS = frozenset({ConfigKind.NO, ConfigKind.SO, ConfigKind.WE, ConfigKind.EA})

Color = tuple[int, int, int]


@dataclass
class SceneConfig:
    """Textures and colours read from the head of a scene file."""

    textures: dict[ConfigKind, Any] = field(default_factory=dict)
    floor_color: Color | None = None
    ceiling_color: Color | None = None
    map_index: int = 0

    def is_complete(self) -> bool:
        """True when all four wall textures and both colours are set."""
        return (
            all(kind in self.textures for kind in _TEXTURE_KINDS)
            and self.floor_color is not None
            and self.ceiling_color is not None
        )


def config_kind(line: str) -> ConfigKind | None:
    """The entry named at the start of ``line``, ignoring leading spaces."""
    stripped = line.lstrip(" ")
    for kind in ConfigKind:
        if stripped.startswith(kind.value + " "):
            return kind
    return None


def extract_value(line: str) -> str | None:
    """Everything after the identifier and the spaces that follow it.

    Returns ``None`` when nothing follows the identifier.
    """
    rest = line.lstrip(" ")
    space = rest.find(" ")
    if space < 0:
        return None
    value = rest[space:].lstrip(" ")
    return value or None


def is_valid_texture_path(path: str) -> bool:
    """True when ``path`` is a readable file with an ``.xpm`` extension."""
    return is_readable_file(path) and has_extension(path, ".xpm")


def _parse_component(text: str) -> int:
    trimmed = text.strip(" ")
    if not trimmed or any(char not in "0123456789" for char in trimmed):
        raise ValueError(f"invalid colour component: {text!r}")
    value = atoi_safe(trimmed)
    if not 0 <= value <= 255:
        raise ValueError(f"colour component out of range: {text!r}")
    return value


def parse_color(text: str) -> Color:
    """Parse ``R,G,B`` with each component 0 to 255.

    Spaces around components are allowed. Raises ``ValueError`` otherwise.
    """
    if len(split_with_sep(text, ",")) != 5:
        raise ValueError(f"invalid colour: {text!r}")
    fields = [part for part in text.split(",") if part]
    if len(fields) != 3:
        raise ValueError(f"invalid colour: {text!r}")
    red, green, blue = (_parse_component(part) for part in fields)
    return red, green, blue


def _apply_entry(
    config: SceneConfig,
    kind: ConfigKind,
    line: str,
    load_texture: Callable[[str], Any],
) -> None:
    value = extract_value(line)
    if value is None:
        raise CubError(_INVALID)
    if kind.is_texture:
        if not is_valid_texture_path(value):
            raise CubError(_BAD_PATH)
        texture = load_texture(value)
        if texture is None:
            raise CubError(_LOAD_FAILED)
        config.textures[kind] = texture
        return
    try:
        color = parse_color(value)
    except ValueError as exc:
        raise CubError(_INVALID) from exc
    if kind is ConfigKind.F:
        config.floor_color = color
    else:
        config.ceiling_color = color


def parse_config(
    lines: Sequence[str], load_texture: Callable[[str], Any]
) -> SceneConfig:
    """Read the six configuration entries at the head of ``lines``.

    ``load_texture`` is called with each texture path and returns the
    loaded texture. The returned config's ``map_index`` is the first
    non-empty line after the entries. Raises ``CubError`` on an unknown,
    duplicate, missing or invalid entry.
    """
    config = SceneConfig()
    seen: set[ConfigKind] = set()
    index = 0
    for position, line in enumerate(lines):
        if len(seen) == len(ConfigKind):
            index = position
            break
        if is_line_empty(line):
            continue
        kind = config_kind(line)
        if kind is None or kind in seen:
            raise CubError(_INVALID)
        seen.add(kind)
        _apply_entry(config, kind, line, load_texture)
    if not config.is_complete():
        raise CubError(_MISSING)
    while index < len(lines) and is_line_empty(lines[index]):
        index += 1
    if index == 0:
        raise CubError(_NO_MAP)
    config.map_index = index
    return config