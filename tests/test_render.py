import math

import pytest

from cubraycaster.config import ConfigKind, SceneConfig
from cubraycaster.constants import HEIGHT, PI
from cubraycaster.game import Game
from cubraycaster.image import Canvas, Texture, rgb
from cubraycaster.raycast import cast_ray
from cubraycaster.render import TextureSet, render_walls, texture_column, texture_for

ROOM = ["11111", "10001", "10N01", "10001", "11111"]
GREY = 0x808080


def _solid(color, size=4):
    return Texture(size, size, (color,) * (size * size))


def _named_set():
    return TextureSet(
        north=_solid(1),
        south=_solid(2),
        west=_solid(3),
        east=_solid(4),
        door=_solid(5),
        sprite_frames=(_solid(6), _solid(7), _solid(8)),
    )


@pytest.mark.parametrize(
    "angle, attr",
    [(0.0, "east"), (PI, "west"), (3 * PI / 2, "north"), (PI / 2, "south")],
)
def test_texture_for_wall_sides(angle, attr):
    game = Game(ROOM, now=0.0)
    textures = _named_set()
    ray = cast_ray(game, angle)
    assert texture_for(game, ray, textures) is getattr(textures, attr)


def test_texture_for_closed_door_and_open_door():
    game = Game(["1111111", "1N0D001", "1111111"], now=0.0)
    textures = _named_set()
    assert texture_for(game, cast_ray(game, 0.0), textures) is textures.door
    game.toggle_door_at(3, 1)
    assert texture_for(game, cast_ray(game, 0.0), textures) is textures.east


def test_texture_for_sprite_follows_frame():
    game = Game(["11111", "1N0A1", "11111"], now=0.0)
    textures = _named_set()
    ray = cast_ray(game, 0.0)
    assert texture_for(game, ray, textures) is textures.sprite_frames[0]
    game.sprites[0].frame = 2
    assert texture_for(game, ray, textures) is textures.sprite_frames[2]


@pytest.mark.parametrize("step", range(24))
def test_texture_column_within_texture(step):
    game = Game(ROOM, now=0.0)
    ray = cast_ray(game, step * 2 * math.pi / 24 + 0.01)
    column = texture_column(game, ray, 64)
    assert 0 <= column < 64


def test_from_config_picks_wall_textures():
    config = SceneConfig(
        textures={
            ConfigKind.NO: _solid(1),
            ConfigKind.SO: _solid(2),
            ConfigKind.WE: _solid(3),
            ConfigKind.EA: _solid(4),
        }
    )
    door = _solid(5)
    textures = TextureSet.from_config(config, door, [_solid(6)])
    assert textures.north is config.textures[ConfigKind.NO]
    assert textures.east is config.textures[ConfigKind.EA]
    assert textures.door is door
    assert len(textures.sprite_frames) == 1


@pytest.fixture(scope="module")
def rendered():
    config = SceneConfig(floor_color=(0, 0, 255), ceiling_color=(255, 0, 0))
    game = Game(ROOM, config, now=0.0)
    solid = _solid(GREY)
    textures = TextureSet(solid, solid, solid, solid, solid, (solid, solid, solid))
    canvas = Canvas()
    render_walls(game, canvas, textures)
    return canvas


def test_render_draws_ceiling_and_floor(rendered):
    assert rendered.get_pixel(500, 0) == rgb(255, 0, 0)
    assert rendered.get_pixel(500, HEIGHT - 1) == rgb(0, 0, 255)
    assert rendered.get_pixel(0, 0) == rgb(255, 0, 0)


def test_render_shades_horizontal_walls(rendered):
    assert rendered.get_pixel(500, HEIGHT // 2) == 0x404040