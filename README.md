# cubraycaster

A small first-person maze explorer. It reads a `.cub` scene file that
names four wall textures and the floor and ceiling colours and holds a
grid map, then renders the maze with grid raycasting in a pygame window.
Doors can be opened and closed, sprites cycle through three animation
frames, an overhead minimap is drawn beside the view, and a compass in
the top-right corner of the view shows where north lies.

## Installing

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Running

```
cubraycaster path/to/level.cub
cubraycaster path/to/level.cub -d
```

The scene path must end in `.cub`. An optional second argument must start
with `-d`; it turns on debug mode:

- the configuration, the map and the player state are printed at start;
- the frame rate is printed about once a second and shown on the minimap;
- the view rays are drawn on the minimap.

Any problem with the arguments, the scene file or a texture is written to
standard error as a line starting with `Error`, and the command exits
with status 1.

The window shows the 1000×800 first-person view on the left and the
800×600 minimap on the right.

## Controls

| Input                     | Action                                         |
|---------------------------|------------------------------------------------|
| W / S                     | move forward / backward                        |
| A / D                     | strafe                                         |
| Left / Right arrows       | turn                                           |
| E                         | open or close doors next to the player's cell  |
| Left mouse button + drag  | turn (over the view; moves under 10 px ignored)|
| Esc, or closing the window| quit                                           |

Movement slides along walls: when a move is blocked, the x and y parts
are tried on their own.

## Scene files

A scene file starts with six configuration lines, in any order, each
given once. Blank lines may go between them:

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 220,100,0
C 225,30,0
```

Texture paths must be readable files ending in `.xpm`. Colours are three
whole numbers from 0 to 255 separated by commas; spaces around each
number are allowed, signs are not.

The map follows the configuration, after any blank lines. Shorter rows are
padded with spaces. It may use these characters:

- `1` wall
- `0` floor
- `N`, `S`, `E`, `W` the player start and facing; exactly one is required
- `D` a door, closed at start; closed doors block movement and sight
- `A` an animated sprite, which blocks like a wall; at most 5
- space: outside the map

The map must be closed: no floor, door, sprite or start cell may sit on
the edge of the map or next to a space. Neither side may exceed 100
cells. Door counting stops the load once five doors have been found and
any cell follows, so in practice a map holds at most four doors, or five
if the fifth is the map's very last cell.

The door texture is read from `./textures/door.xpm` and the sprite frames
from `textures/sprite1.xpm`, `textures/sprite2.xpm` and
`textures/sprite3.xpm`, relative to the working directory. Textures are
read by a built-in XPM reader; colours may be `#RGB`-style hex values,
`None` (drawn black) or colour names.

## Using it as a library

Parsing, game state and rendering work without opening a window:

```python
from cubraycaster.app import load_game
from cubraycaster.image import Canvas
from cubraycaster.raycast import cast_ray, wall_span

game = load_game("maps/level.cub", debug=False)
ray = cast_ray(game, game.player.angle)
if ray.hit:
    start, end = wall_span(game, ray)

game.key_press(119)      # W held down
game.update(now=0.0)     # one frame of movement
```

- `cubraycaster.mapfile.read_lines`, `cubraycaster.config.parse_config` and
  `cubraycaster.mapgrid.extract_map` read a scene in stages;
  `cubraycaster.game.Game` holds the map, player, doors and sprites.
- `cubraycaster.render.render_walls`, `cubraycaster.minimap.update_minimap`
  and `cubraycaster.compass.draw_compass` draw into a
  `cubraycaster.image.Canvas`; `cubraycaster.render.TextureSet` gathers
  the textures they use, and `cubraycaster.image.load_xpm` loads one.
- `cubraycaster.app.run` opens the pygame window and runs the frame loop;
  `cubraycaster.app.main` is the command above.

Configuration, map and texture problems raise
`cubraycaster.errors.CubError`.