import math

import pytest

from cubraycaster.constants import HEIGHT, PI
from cubraycaster.game import Game
from cubraycaster.raycast import MIN_WALL_DISTANCE, Side, cast_ray, wall_span

ROOM = ["11111", "10001", "10N01", "10001", "11111"]
CORRIDOR = ["1111111", "1N00001", "1111111"]


def test_east_ray_hits_wall_in_player_row():
    game = Game(ROOM, now=0.0)
    ray = cast_ray(game, 0.0)
    assert ray.hit is True
    assert game.map[ray.map_y][ray.map_x] == "1"
    assert ray.map_y == int(game.player.y / game.tile_size)
    assert ray.map_x > int(game.player.x / game.tile_size)
    assert ray.side is Side.VERTICAL
    assert ray.perp_wall_dist == pytest.approx(0.5)


def test_west_ray_moves_left():
    game = Game(ROOM, now=0.0)
    ray = cast_ray(game, PI)
    assert ray.hit is True
    assert ray.step_x == -1
    assert ray.map_x < int(game.player.x / game.tile_size)
    assert game.map[ray.map_y][ray.map_x] == "1"


def test_north_ray_crosses_horizontal_line():
    game = Game(ROOM, now=0.0)
    ray = cast_ray(game, 3 * PI / 2)
    assert ray.hit is True
    assert ray.side is Side.HORIZONTAL
    assert ray.step_y == -1
    assert ray.map_y < int(game.player.y / game.tile_size)


def test_closed_door_stops_ray_and_open_door_does_not():
    game = Game(["1111111", "1N0D001", "1111111"], now=0.0)
    ray = cast_ray(game, 0.0)
    assert game.map[ray.map_y][ray.map_x] == "D"
    game.toggle_door_at(ray.map_x, ray.map_y)
    through = cast_ray(game, 0.0)
    assert game.map[through.map_y][through.map_x] == "1"
    assert through.perp_wall_dist > ray.perp_wall_dist


def test_sprite_stops_ray():
    game = Game(["11111", "1N0A1", "11111"], now=0.0)
    ray = cast_ray(game, 0.0)
    assert ray.hit is True
    assert game.map[ray.map_y][ray.map_x] == "A"


def test_ray_leaving_grid_does_not_hit():
    game = Game(["N00"], now=0.0)
    ray = cast_ray(game, 0.0)
    assert ray.hit is False


@pytest.mark.parametrize("step", range(16))
def test_distance_is_never_below_minimum(step):
    game = Game(ROOM, now=0.0)
    ray = cast_ray(game, step * 2 * math.pi / 16)
    assert ray.hit is True
    assert ray.perp_wall_dist >= MIN_WALL_DISTANCE


def test_wall_span_is_centred_on_screen():
    game = Game(ROOM, now=0.0)
    game.player.angle = 0.0
    start, end = wall_span(game, cast_ray(game, 0.1))
    assert start + end == HEIGHT
    assert start < end


def test_closer_wall_gives_taller_span():
    game = Game(CORRIDOR, now=0.0)
    game.player.angle = PI
    near_start, near_end = wall_span(game, cast_ray(game, PI))
    game.player.angle = 0.0
    far_start, far_end = wall_span(game, cast_ray(game, 0.0))
    assert near_end - near_start > far_end - far_start