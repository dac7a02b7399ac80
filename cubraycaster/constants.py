"""Keys, screen geometry, colours and limits used throughout the game."""

from __future__ import annotations

import enum


class Key(enum.IntEnum):
    """X11 key symbols the game reacts to."""

    ESC = 65307
    W = 119
    A = 97
    S = 115
    D = 100
    E = 101
    LEFT = 65361
    RIGHT = 65363

    @classmethod
    def from_code(cls, code: int) -> Key | None:
        """The key for ``code``, or ``None`` for keys the game ignores."""
        try:
            return cls(code)
        except ValueError:
            return None


# Main window and movement
WIDTH = 1000
HEIGHT = 800
SPEED = 1.5
ANGLE_SPEED = 0.05
PI = 3.14159265

# Doors
MAX_DOORS = 5
PATH_DOOR = "./textures/door.xpm"

# Minimap
MAP_WIDTH = 800
MAP_HEIGHT = 600
RAYS = 10
PLAYER_COLOR = 0xF7230C
RAY_COLOR = 0xFF0000
WALL_COLOR = 0x00888888
FLOOR_COLOR = 0xFFFFFF
EMPTY_COLOR = 0x000000
DOOR_COLOR = 0xFF0000
DOOR_OPEN_COLOR = 0x00FF00
SPRITE_COLOR = 0xFF00FF

# Compass
CROSS_SIZE = 50
BASE_WIDTH = 10
COLOR_NORTH = 0xFF0000
COLOR_OTHER = 0xFFFFFF

# Animated sprites
MAX_SPRITES = 5
TIME_SPRITE = 1.2
SPRITE_PATHS = (
    "textures/sprite1.xpm",
    "textures/sprite2.xpm",
    "textures/sprite3.xpm",
)

# Largest accepted map, in cells on either side
MAX_MAP_SIZE = 100