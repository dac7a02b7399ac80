"""The overhead map: tiles, the player marker and, in debug mode, view rays."""

from __future__ import annotations

import math

from .constants import (
    DOOR_COLOR,
    DOOR_OPEN_COLOR,
    EMPTY_COLOR,
    FLOOR_COLOR,
    PI,
    PLAYER_COLOR,
    RAY_COLOR,
    RAYS,
    SPRITE_COLOR,
    WALL_COLOR,
)
from .image import Canvas
from .maputils import is_player_char


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def draw_square(canvas: Canvas, x: int, y: int, size: int, color: int) -> None:
    """Fill a ``size`` by ``size`` square whose top-left corner is ``(x, y)``."""
    for row in range(y, y + size):
        for col in range(x, x + size):
            canvas.draw_pixel(col, row, color)


def ray_hits_wall(game, x: float, y: float) -> bool:
    """True when the map point ``(x, y)`` lies outside the map or in a blocking cell."""
    row = _cdiv(int(y), game.tile_size)
    col = _cdiv(int(x), game.tile_size)
    if not (0 <= row < game.map_height and 0 <= col < game.map_width):
        return True
    cell = game.map[row][col] if col < len(game.map[row]) else " "
    if cell in ("1", "A"):
        return True
    return cell == "D" and game.is_closed_door(col, row)


def draw_ray_line(game, canvas: Canvas, angle: float) -> None:
    """Trace a ray from the player along ``angle`` until it meets a wall."""
    x = game.player.x
    y = game.player.y
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    while not ray_hits_wall(game, x, y):
        canvas.draw_pixel(
            int(x + game.map_offset_x), int(y + game.map_offset_y), RAY_COLOR
        )
        x += cos_a
        if ray_hits_wall(game, x, y):
            break
        y += sin_a
        if ray_hits_wall(game, x, y):
            break


def _tile_color(game, row: int, col: int) -> int:
    cell = game.map[row][col] if col < len(game.map[row]) else " "
    if cell == "1":
        return WALL_COLOR
    if cell == "0" or is_player_char(cell):
        return FLOOR_COLOR
    if cell == "D":
        return DOOR_COLOR if game.is_closed_door(col, row) else DOOR_OPEN_COLOR
    if cell == "A":
        return SPRITE_COLOR
    return EMPTY_COLOR


def render_minimap(game, canvas: Canvas) -> None:
    """Draw every map cell as a square of its colour."""
    tile = game.tile_size
    for row in range(game.map_height):
        for col in range(game.map_width):
            draw_square(
                canvas,
                col * tile + game.map_offset_x,
                row * tile + game.map_offset_y,
                tile,
                _tile_color(game, row, col),
            )


def _draw_rays(game, canvas: Canvas) -> None:
    fraction = PI / 3 / RAYS
    angle = game.player.angle - PI / 6
    for _ in range(RAYS):
        draw_ray_line(game, canvas, angle)
        angle += fraction


def _draw_player(game, canvas: Canvas) -> None:
    player = game.player
    half = player.size // 2
    draw_square(
        canvas,
        int(player.x - half + game.map_offset_x),
        int(player.y - half + game.map_offset_y),
        player.size,
        PLAYER_COLOR,
    )


def update_minimap(game, canvas: Canvas) -> None:
    """Redraw the map, the view rays in debug mode, and the player marker."""
    render_minimap(game, canvas)
    if game.debug:
        _draw_rays(game, canvas)
    _draw_player(game, canvas)