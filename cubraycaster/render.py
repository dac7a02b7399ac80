"""Drawing textured wall slices, ceiling and floor into the canvas."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from .config import ConfigKind, SceneConfig
from .constants import HEIGHT, PI, WIDTH
from .image import Canvas, Texture, rgb
from .raycast import Ray, Side, cast_ray, wall_span

_BLACK = (0, 0, 0)


@dataclass(frozen=True)
class TextureSet:
    """Every image a wall slice can be drawn with."""

    north: Texture
    south: Texture
    west: Texture
    east: Texture
    door: Texture
    sprite_frames: tuple[Texture, ...]

    @classmethod
    def from_config(
        cls, config: SceneConfig, door: Texture, sprite_frames: Sequence[Texture]
    ) -> TextureSet:
        """Build a set from the wall textures of a scene configuration."""
        return cls(
            north=config.textures[ConfigKind.NO],
            south=config.textures[ConfigKind.SO],
            west=config.textures[ConfigKind.WE],
            east=config.textures[ConfigKind.EA],
            door=door,
            sprite_frames=tuple(sprite_frames),
        )


def texture_for(game, ray: Ray, textures: TextureSet) -> Texture:
    """The texture of the cell hit by ``ray``.

    Sprites show their current frame, closed doors the door image, and
    walls the image of the side the ray struck.
    """
    sprite = game.sprite_at(ray.map_x, ray.map_y)
    if sprite is not None and 0 <= sprite.frame < len(textures.sprite_frames):
        return textures.sprite_frames[sprite.frame]
    if game.map[ray.map_y][ray.map_x] == "D" and game.is_closed_door(ray.map_x, ray.map_y):
        return textures.door
    if ray.side is Side.VERTICAL:
        return textures.west if ray.dir_x < 0 else textures.east
    return textures.north if ray.dir_y < 0 else textures.south


def texture_column(game, ray: Ray, width: int) -> int:
    """Column of a ``width``-pixel texture where ``ray`` meets the wall."""
    tile = float(game.tile_size)
    if ray.side is Side.VERTICAL:
        wall_x = game.player.y / tile + ray.perp_wall_dist * ray.dir_y
    else:
        wall_x = game.player.x / tile + ray.perp_wall_dist * ray.dir_x
    wall_x -= math.floor(wall_x)
    column = int(wall_x * width)
    if ray.side is Side.VERTICAL and ray.dir_x > 0:
        column = width - column - 1
    if ray.side is Side.HORIZONTAL and ray.dir_y < 0:
        column = width - column - 1
    return width - column - 1


def _draw_wall(
    game, canvas: Canvas, ray: Ray, texture: Texture, x: int, start: int, end: int
) -> None:
    line_height = end - start
    if line_height <= 0:
        return
    step = texture.height / line_height
    tex_pos = (start - HEIGHT // 2 + line_height // 2) * step
    if start < 0:
        tex_pos += step * -start
    column = texture_column(game, ray, texture.width)
    mask = texture.height - 1
    shaded = ray.side is Side.HORIZONTAL
    for y in range(max(start, 0), min(end, HEIGHT - 1)):
        tex_pos += step
        color = texture.pixel(column, int(tex_pos) & mask)
        if shaded:
            color = (color >> 1) & 0x7F7F7F
        canvas.draw_pixel(x, y, color)


def render_walls(game, canvas: Canvas, textures: TextureSet) -> None:
    """Cast one ray per screen column and draw ceiling, wall and floor."""
    config = game.config
    ceiling = rgb(*(config.ceiling_color or _BLACK))
    floor = rgb(*(config.floor_color or _BLACK))
    base = game.player.angle - PI / 6
    for x in range(WIDTH):
        ray = cast_ray(game, base + (x / WIDTH) * (PI / 3))
        if not ray.hit:
            continue
        start, end = wall_span(game, ray)
        canvas.draw_column(x, 0, start, ceiling)
        canvas.draw_column(x, end, HEIGHT, floor)
        _draw_wall(game, canvas, ray, texture_for(game, ray, textures), x, start, end)