"""Game state: the map, the player, doors, sprites and input handling."""

from __future__ import annotations

import math
import time
from collections.abc import Sequence
from dataclasses import dataclass

from .config import SceneConfig
from .constants import (
    ANGLE_SPEED,
    MAP_HEIGHT,
    MAP_WIDTH,
    MAX_DOORS,
    MAX_SPRITES,
    PI,
    SPEED,
    TIME_SPRITE,
    Key,
)
from .errors import CubError
from .maputils import is_player_char, map_height, max_len

_ORIENTATIONS = {"N": 3 * PI / 2, "S": PI / 2, "E": 0.0, "W": PI}
_SPRITE_FRAMES = 3


def _wrap_angle(angle: float) -> float:
    if angle > 2 * PI:
        return 0.0
    if angle < 0:
        return 2 * PI
    return angle


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


@dataclass
class Player:
    """The player's position, pending move, heading and held inputs."""

    x: float = 0.0
    y: float = 0.0
    tmp_x: float = 0.0
    tmp_y: float = 0.0
    ray_x: float = 0.0
    ray_y: float = 0.0
    ray_offset: float = 0.0
    angle: float = 0.0
    size: int = 0
    go_up: bool = False
    go_down: bool = False
    go_left: bool = False
    go_right: bool = False
    rotate_left: bool = False
    rotate_right: bool = False

    def rotate(self) -> None:
        """Turn by one step for each held rotation key, wrapping the angle."""
        if self.rotate_left:
            self.angle -= ANGLE_SPEED
        if self.rotate_right:
            self.angle += ANGLE_SPEED
        self.angle = _wrap_angle(self.angle)

    def reset_pending(self) -> None:
        """Bring the pending and ray positions back to the current position."""
        self.tmp_x = self.x
        self.tmp_y = self.y
        self.ray_x = self.x
        self.ray_y = self.y


@dataclass
class Door:
    """A door cell; closed doors block movement and rays."""

    x: int
    y: int
    is_open: bool = False


@dataclass
class Sprite:
    """An animated sprite cell cycling through three frames."""

    x: int
    y: int
    frame: int = 0
    last_time: float = 0.0
    active: bool = True


class Game:
    """The running game: a validated map grid and everything moving on it."""

    def __init__(
        self,
        rows: Sequence[str],
        config: SceneConfig | None = None,
        debug: bool = False,
        now: float | None = None,
    ) -> None:
        self.map = list(rows)
        self.map_width = max_len(self.map)
        self.map_height = map_height(self.map)
        if self.map_width == 0 or self.map_height == 0:
            raise CubError("Error: Map not found")
        self.config = config if config is not None else SceneConfig()
        self.debug = debug
        self.running = True
        self.tile_size = min(MAP_WIDTH // self.map_width, MAP_HEIGHT // self.map_height)
        self.map_offset_x = (MAP_WIDTH - self.map_width * self.tile_size) // 2
        self.map_offset_y = (MAP_HEIGHT - self.map_height * self.tile_size) // 2
        self.mouse_x = -1
        self.mouse_click = False
        self.player = Player(size=self.tile_size // 2)
        self.player.ray_offset = self.player.size // 2
        self._place_player()
        self.doors: list[Door] = self._find_doors()
        self.sprites: list[Sprite] = self._find_sprites(time.time() if now is None else now)

    def _cells(self):
        for y, row in enumerate(self.map):
            for x, char in enumerate(row):
                yield x, y, char

    def _cell(self, row: int, col: int) -> str:
        if 0 <= row < len(self.map) and 0 <= col < len(self.map[row]):
            return self.map[row][col]
        return ""

    def _place_player(self) -> None:
        half = self.tile_size // 2
        for x, y, char in self._cells():
            if is_player_char(char):
                self.player.x = x * self.tile_size + half
                self.player.y = y * self.tile_size + half
                self.player.reset_pending()
                self.player.angle = _ORIENTATIONS[char]
                return

    def _find_doors(self) -> list[Door]:
        doors: list[Door] = []
        for x, y, char in self._cells():
            if len(doors) >= MAX_DOORS:
                raise CubError("Error: Too many doors")
            if char == "D":
                doors.append(Door(x, y))
        return doors

    def _find_sprites(self, now: float) -> list[Sprite]:
        sprites: list[Sprite] = []
        for x, y, char in self._cells():
            if char == "A" and len(sprites) < MAX_SPRITES:
                sprites.append(Sprite(x, y, last_time=now))
        return sprites

    def door_at(self, x: int, y: int) -> Door | None:
        """The door at column ``x`` and row ``y``, if there is one."""
        return next((door for door in self.doors if door.x == x and door.y == y), None)

    def is_closed_door(self, x: int, y: int) -> bool:
        """True when a closed door stands at column ``x`` and row ``y``."""
        door = self.door_at(x, y)
        return door is not None and not door.is_open

    def sprite_at(self, x: int, y: int) -> Sprite | None:
        """The active sprite at column ``x`` and row ``y``, if there is one."""
        return next(
            (s for s in self.sprites if s.active and s.x == x and s.y == y), None
        )

    def toggle_door_at(self, x: int, y: int) -> None:
        """Open a closed door or close an open one; no-op without a door."""
        door = self.door_at(x, y)
        if door is not None:
            door.is_open = not door.is_open

    def is_blocked(self, row: int, col: int) -> bool:
        """True when the cell cannot be walked into."""
        if not (0 <= row < self.map_height and 0 <= col < self.map_width):
            return True
        cell = self._cell(row, col)
        if cell in ("1", "A"):
            return True
        return cell == "D" and self.is_closed_door(col, row)

    def _collides(self, x: float, y: float) -> bool:
        ix, iy = int(x), int(y)
        half = self.player.size // 2
        tile = self.tile_size
        top = _cdiv(iy - half, tile)
        bottom = _cdiv(iy + half - 1, tile)
        left = _cdiv(ix - half, tile)
        right = _cdiv(ix + half - 1, tile)
        return any(
            self.is_blocked(row, col)
            for row, col in ((top, left), (top, right), (bottom, left), (bottom, right))
        )

    def move_player(self) -> None:
        """Move by the held direction keys, sliding along walls."""
        player = self.player
        cos_a = math.cos(player.angle)
        sin_a = math.sin(player.angle)
        if player.go_up:
            player.tmp_x += cos_a * SPEED
            player.tmp_y += sin_a * SPEED
        if player.go_down:
            player.tmp_x -= cos_a * SPEED
            player.tmp_y -= sin_a * SPEED
        if player.go_left:
            player.tmp_x += sin_a * SPEED
            player.tmp_y -= cos_a * SPEED
        if player.go_right:
            player.tmp_x -= sin_a * SPEED
            player.tmp_y += cos_a * SPEED
        if not self._collides(player.tmp_x, player.tmp_y):
            player.x = player.tmp_x
            player.y = player.tmp_y
            return
        if not self._collides(player.tmp_x, player.y):
            player.x = player.tmp_x
        if not self._collides(player.x, player.tmp_y):
            player.y = player.tmp_y

    def interact(self) -> None:
        """Toggle every door right, left, below and above the player's cell."""
        px = int(self.player.x / self.tile_size)
        py = int(self.player.y / self.tile_size)
        if self._cell(py, px + 1) == "D":
            self.toggle_door_at(px + 1, py)
        if px > 0 and self._cell(py, px - 1) == "D":
            self.toggle_door_at(px - 1, py)
        if self._cell(py + 1, px) == "D":
            self.toggle_door_at(px, py + 1)
        if py > 0 and self._cell(py - 1, px) == "D":
            self.toggle_door_at(px, py - 1)

    def key_press(self, keycode: int) -> None:
        """Handle a key going down; Escape stops the game."""
        key = Key.from_code(keycode)
        player = self.player
        if key is Key.ESC:
            self.running = False
        elif key is Key.W:
            player.go_up = True
        elif key is Key.S:
            player.go_down = True
        elif key is Key.A:
            player.go_left = True
        elif key is Key.D:
            player.go_right = True
        elif key is Key.LEFT:
            player.rotate_left = True
        elif key is Key.RIGHT:
            player.rotate_right = True
        elif key is Key.E:
            self.interact()

    def key_release(self, keycode: int) -> None:
        """Handle a key going up."""
        key = Key.from_code(keycode)
        player = self.player
        if key is Key.W:
            player.go_up = False
        elif key is Key.S:
            player.go_down = False
        elif key is Key.A:
            player.go_left = False
        elif key is Key.D:
            player.go_right = False
        elif key is Key.LEFT:
            player.rotate_left = False
        elif key is Key.RIGHT:
            player.rotate_right = False

    def mouse_press(self, button: int) -> None:
        """Start mouse look when the left button goes down."""
        if button == 1:
            self.mouse_click = True

    def mouse_release(self, button: int) -> None:
        """Stop mouse look when the left button goes up."""
        if button == 1:
            self.mouse_click = False

    def mouse_move(self, x: int) -> bool:
        """Turn with the mouse while the left button is held.

        Moves of less than ten pixels are ignored. Returns True when the
        position was taken into account.
        """
        if self.mouse_x == -1:
            self.mouse_x = x
            return False
        if self.mouse_x < x < self.mouse_x + 10:
            return False
        if self.mouse_x - 10 < x < self.mouse_x:
            return False
        if self.mouse_click:
            direction = x - self.mouse_x
            if direction < 0:
                self.player.angle -= ANGLE_SPEED
            if direction > 0:
                self.player.angle += ANGLE_SPEED
            self.player.angle = _wrap_angle(self.player.angle)
        self.mouse_x = x
        return True

    def update_sprites(self, now: float) -> None:
        """Advance each active sprite whose frame has lasted long enough."""
        for sprite in self.sprites:
            if sprite.active and now - sprite.last_time > TIME_SPRITE:
                sprite.frame = (sprite.frame + 1) % _SPRITE_FRAMES
                sprite.last_time = now

    def update(self, now: float) -> None:
        """Advance one frame: animate sprites, turn and move the player."""
        self.update_sprites(now)
        self.player.rotate()
        self.move_player()
        self.player.reset_pending()