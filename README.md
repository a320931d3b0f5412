# cubraycaster

A small first-person raycaster. It reads a `.cub` scene description that gives a
window resolution, floor and ceiling colours, four wall textures and a grid map.
It then opens a window where you can walk around the map.

## Installing

```
pip install .
```

The window, the keyboard input and PNG loading all use `pygame`.

## Running

```
cubraycaster path/to/scene.cub
```

The command takes exactly one argument. In these cases it prints an error in red
and exits with status 1:

* the scene file is missing or invalid
* a texture cannot be loaded

If the requested resolution is larger than the screen, the program reduces it to
90% of the screen size and prints a notice.

### Controls

| Key          | Action                       |
|--------------|------------------------------|
| W / S        | move forward / backwards     |
| A / D        | strafe left / right          |
| Left / Right | turn left / right            |
| 9            | turn a quarter turn at once  |
| Esc          | quit                         |

Closing the window also quits. The player cannot walk into walls, and moves one
axis at a time, so it slides along them.

## The `.cub` format

```
R 640 480
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 220,100,0
C 225,30,0

111111
100101
1000N1
111111
```

* `R` sets the window width and height. Both values must be positive.
* `NO`, `SO`, `WE` and `EA` give the texture for each wall face.
  * A path containing `.xpm` is read by the built-in XPM reader.
  * A path containing `.png` is loaded through pygame.
  * Any other path is rejected.
* `F` and `C` set the floor and ceiling colours as `r,g,b`. Each value must be
  between 0 and 255. The ceiling gets gradually darker towards the horizon.
* The map comes last, after an empty line.
  * `1` is a wall.
  * `0` is floor you can walk on.
  * `2` counts as open space when the map is checked for enclosure, but you
    cannot walk into it.
  * Exactly one of `N`, `E`, `S` or `W` marks where the player starts and which
    way they face.
  * Every open cell must be surrounded by map cells, including diagonally. A
    cell must not border a space or the end of its row.

## Using it as a library

```python
from cubraycaster.image import Image
from cubraycaster.parse import load_cub
from cubraycaster.raycast import Player, cast_ray
from cubraycaster.render import Textures, draw_frame, load_texture

config = load_cub("scene.cub")
player = Player.from_spawn(config.spawn_x, config.spawn_y, config.spawn_dir)
textures = Textures(
    north=load_texture(config.north),
    south=load_texture(config.south),
    west=load_texture(config.west),
    east=load_texture(config.east),
)
frame = draw_frame(Image(config.width, config.height), player, config.rows,
                   textures, config.ceiling, config.floor)
rgb = frame.to_rgb_bytes()
```

`load_cub` and `parse_cub` raise `cubraycaster.errors.CubError` with a readable
message when a scene is invalid. `load_texture` raises the same error when a
texture cannot be read.

The modules:

* `cubraycaster.parse` reads scene files into a `CubConfig`. It also provides
  the individual checks: `parse_resolution`, `parse_color`, `check_rgb`,
  `find_map`, `check_spawn`, `check_map`, `spawn_position` and
  `parse_textures`.
* `cubraycaster.raycast` contains `Player`, which handles movement, rotation and
  held keys, and `cast_ray`, a DDA cast for one screen column that returns a
  `RayHit`.
* `cubraycaster.render` draws frames: `draw_background`, `draw_column` and
  `draw_frame`. It also has `load_texture`.
* `cubraycaster.image` holds `Image`, a 32-bit pixel buffer with `put_pixel`,
  `get_pixel`, `fill_row` and `to_rgb_bytes`.
* `cubraycaster.xpm` is an XPM reader: `load_xpm`, `parse_xpm`,
  `strip_comments`, `quoted_strings` and `split_words`. It raises `XpmError`.
* `cubraycaster.colornames` provides `lookup_color` for X11 colour names.
* `cubraycaster.color` packs and unpacks 0xRRGGBB values and darkens them.
* `cubraycaster.app` contains the `Game` state with its key handling and
  `tick`, the `Key` codes, `fit_resolution`, and the `main` entry point.