"""Command line entry point, debug output and the main game loop."""

from __future__ import annotations

import os
import sys
import time
from collections.abc import Sequence
from dataclasses import dataclass

from .compass import draw_compass
from .config import parse_config
from .constants import HEIGHT, MAP_HEIGHT, MAP_WIDTH, PATH_DOOR, SPRITE_PATHS, WIDTH, Key
from .errors import CubError, report_error
from .game import Game, Player
from .image import Canvas, load_xpm
from .mapfile import read_lines
from .mapgrid import extract_map
from .maputils import has_extension
from .minimap import update_minimap
from .render import TextureSet, render_walls

_USAGE = "Error: usage: <map.cub> [-d]"


@dataclass
class FpsCounter:
    """Counts frames and works out frames per second about once a second."""

    last_time: float = 0.0
    frame_count: int = 0
    fps: float = 0.0

    def tick(self, now: float) -> float | None:
        """Count one frame; return the new rate when a second has passed."""
        self.frame_count += 1
        elapsed = now - self.last_time
        if elapsed < 1.0:
            return None
        self.fps = self.frame_count / elapsed
        self.frame_count = 0
        self.last_time = now
        return self.fps


def parse_args(argv: Sequence[str]) -> tuple[str, bool]:
    """Return the scene path and whether debug mode was asked for."""
    debug = False
    if len(argv) == 2:
        if not argv[1].startswith("-d"):
            raise CubError("Error: Invalid option. Use -d")
        debug = True
    elif len(argv) != 1:
        raise CubError(_USAGE)
    path = argv[0]
    if not has_extension(path, ".cub"):
        raise CubError("Error: Expected .cub extension")
    return path, debug


def load_game(path: str | os.PathLike[str], debug: bool) -> Game:
    """Read, check and set up the scene at ``path``."""
    lines = read_lines(path)
    config = parse_config(lines, load_xpm)
    rows = extract_map(lines, config.map_index)
    return Game(rows, config, debug)


def _load_textures(game: Game) -> TextureSet:
    try:
        door = load_xpm(PATH_DOOR)
    except CubError as exc:
        raise CubError("Error: Failed to load door texture") from exc
    try:
        sprites = [load_xpm(path) for path in SPRITE_PATHS]
    except CubError as exc:
        raise CubError("Error: Failed to load sprites textures") from exc
    return TextureSet.from_config(game.config, door, sprites)


def format_config(game: Game) -> str:
    """The debug summary of colours, map size and layout."""
    ceiling = game.config.ceiling_color or (0, 0, 0)
    floor = game.config.floor_color or (0, 0, 0)
    lines = [
        "",
        "===== CONFIGURATION =====",
        "Ceiling color: R:{}, G:{}, B:{}".format(*ceiling),
        "Floor color:   R:{}, G:{}, B:{}".format(*floor),
        f"Map dimensions: Width: {game.map_width}, Height: {game.map_height}",
        f"Tile size: {game.tile_size}",
        f"Map offset: X:{game.map_offset_x}, Y:{game.map_offset_y}",
        f"Debug mode: {'ON' if game.debug else 'OFF'}",
        "==========================",
    ]
    return "\n".join(lines)


def format_map(rows: Sequence[str]) -> str:
    """The map rows framed for debug output."""
    return "\n".join(["", "===== MAP =====", *rows, "================"])


def format_player(player: Player) -> str:
    """The debug summary of the player's state."""
    lines = [
        "",
        "===== PLAYER =====",
        f"Position: X:{player.x:.2f}, Y:{player.y:.2f}",
        f"Angle: {player.angle:.2f}",
        f"Ray X: {player.ray_x:.2f}, Ray Y: {player.ray_y:.2f}",
        f"Temporary Position: X:{player.tmp_x:.2f}, Y:{player.tmp_y:.2f}",
        f"Ray Offset: {player.ray_offset:.2f}",
        f"Movement: Up: {int(player.go_up)}, Down: {int(player.go_down)}, "
        f"Left: {int(player.go_left)}, Right: {int(player.go_right)}",
        f"Rotation: Left: {int(player.rotate_left)}, Right: {int(player.rotate_right)}",
        f"Player size: {player.size}",
        "===================",
    ]
    return "\n".join(lines)


def _to_surface(canvas: Canvas):
    import pygame
    from PIL import Image

    size = (canvas.width, canvas.height)
    image = Image.frombytes("RGB", size, canvas.to_bytes(), "raw", "BGRX")
    return pygame.image.frombuffer(image.tobytes(), size, "RGB")


def _dispatch(game: Game, event, keymap: dict[int, Key]) -> None:
    import pygame

    if event.type == pygame.QUIT:
        game.running = False
    elif event.type == pygame.KEYDOWN and event.key in keymap:
        game.key_press(keymap[event.key])
    elif event.type == pygame.KEYUP and event.key in keymap:
        game.key_release(keymap[event.key])
    elif event.type == pygame.MOUSEBUTTONDOWN:
        game.mouse_press(event.button)
    elif event.type == pygame.MOUSEBUTTONUP:
        game.mouse_release(event.button)
    elif event.type == pygame.MOUSEMOTION and event.pos[0] < WIDTH:
        game.mouse_move(event.pos[0])


def run(game: Game, textures: TextureSet) -> None:
    """Open the window and run frames until the game stops."""
    import pygame

    keymap = {
        pygame.K_ESCAPE: Key.ESC,
        pygame.K_w: Key.W,
        pygame.K_a: Key.A,
        pygame.K_s: Key.S,
        pygame.K_d: Key.D,
        pygame.K_e: Key.E,
        pygame.K_LEFT: Key.LEFT,
        pygame.K_RIGHT: Key.RIGHT,
    }
    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH + MAP_WIDTH, max(HEIGHT, MAP_HEIGHT)))
        pygame.display.set_caption("Raycaster")
        font = pygame.font.Font(None, 24)
        view = Canvas(WIDTH, HEIGHT)
        minimap = Canvas(MAP_WIDTH, MAP_HEIGHT)
        fps = FpsCounter()
        while game.running:
            for event in pygame.event.get():
                _dispatch(game, event, keymap)
            if not game.running:
                break
            now = time.time()
            if game.debug:
                rate = fps.tick(now)
                if rate is not None:
                    print(f"FPS: {rate:.2f}")
            game.update(now)
            update_minimap(game, minimap)
            render_walls(game, view, textures)
            draw_compass(view, game.player.angle)
            screen.blit(_to_surface(view), (0, 0))
            screen.blit(_to_surface(minimap), (WIDTH, 0))
            if game.debug:
                label = font.render(f"FPS: {int(fps.fps)}", True, (255, 255, 255))
                screen.blit(label, (WIDTH + MAP_WIDTH // 2 - 10, 15))
            pygame.display.flip()
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game from the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        path, debug = parse_args(args)
        game = load_game(path, debug)
        door_and_walls = None
        if debug:
            print(format_config(game))
            print(format_map(game.map))
            print(format_player(game.player))
        door_and_walls = _load_textures(game)
    except CubError as exc:
        report_error(str(exc))
        return 1
    run(game, door_and_walls)
    return 0