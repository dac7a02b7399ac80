"""Grid raycasting (DDA) and the projected height of wall slices."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass

from .constants import HEIGHT

MIN_WALL_DISTANCE = 0.0001


class Side(enum.IntEnum):
    """Which kind of grid line a ray crossed last."""

    VERTICAL = 0
    HORIZONTAL = 1


@dataclass
class Ray:
    """One ray cast from the player, and where it stopped."""

    angle: float
    dir_x: float
    dir_y: float
    map_x: int
    map_y: int
    delta_dist_x: float
    delta_dist_y: float
    step_x: int = 1
    step_y: int = 1
    side_dist_x: float = 0.0
    side_dist_y: float = 0.0
    side: Side = Side.VERTICAL
    perp_wall_dist: float = 0.0
    hit: bool = False


def _delta(direction: float) -> float:
    return math.inf if direction == 0 else abs(1.0 / direction)


def _inside(game, col: int, row: int) -> bool:
    return 0 <= row < len(game.map) and 0 <= col < len(game.map[row])


def _blocks(game, col: int, row: int) -> bool:
    cell = game.map[row][col]
    if cell in ("1", "A"):
        return True
    return cell == "D" and game.is_closed_door(col, row)


def _start(ray: Ray, px: float, py: float) -> None:
    if ray.dir_x < 0:
        ray.step_x = -1
        ray.side_dist_x = (px - ray.map_x) * ray.delta_dist_x
    else:
        ray.step_x = 1
        ray.side_dist_x = (ray.map_x + 1.0 - px) * ray.delta_dist_x
    if ray.dir_y < 0:
        ray.step_y = -1
        ray.side_dist_y = (py - ray.map_y) * ray.delta_dist_y
    else:
        ray.step_y = 1
        ray.side_dist_y = (ray.map_y + 1.0 - py) * ray.delta_dist_y


def _advance(ray: Ray) -> None:
    if ray.side_dist_x < ray.side_dist_y:
        ray.side_dist_x += ray.delta_dist_x
        ray.map_x += ray.step_x
        ray.side = Side.VERTICAL
    else:
        ray.side_dist_y += ray.delta_dist_y
        ray.map_y += ray.step_y
        ray.side = Side.HORIZONTAL


def cast_ray(game, angle: float) -> Ray:
    """Walk the grid from the player along ``angle`` to the first blocking cell.

    Walls, sprites and closed doors stop the ray. A ray that leaves the
    grid comes back with ``hit`` set to False.
    """
    tile = float(game.tile_size)
    px = game.player.x / tile
    py = game.player.y / tile
    dir_x = math.cos(angle)
    dir_y = math.sin(angle)
    ray = Ray(angle, dir_x, dir_y, int(px), int(py), _delta(dir_x), _delta(dir_y))
    _start(ray, px, py)
    while True:
        _advance(ray)
        if not _inside(game, ray.map_x, ray.map_y):
            ray.hit = False
            break
        if _blocks(game, ray.map_x, ray.map_y):
            ray.hit = True
            break
    if ray.side is Side.VERTICAL:
        ray.perp_wall_dist = ray.side_dist_x - ray.delta_dist_x
    else:
        ray.perp_wall_dist = ray.side_dist_y - ray.delta_dist_y
    if ray.perp_wall_dist <= MIN_WALL_DISTANCE:
        ray.perp_wall_dist = MIN_WALL_DISTANCE
    return ray


def wall_span(game, ray: Ray) -> tuple[int, int]:
    """First and last screen rows of the wall slice hit by ``ray``.

    The distance is corrected by the angle to the player's heading so
    that flat walls do not bulge.
    """
    corrected = ray.perp_wall_dist * math.cos(game.player.angle - ray.angle)
    line_height = int(HEIGHT / corrected)
    half = int(line_height / 2)
    return -half + HEIGHT // 2, half + HEIGHT // 2