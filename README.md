# cub3d

A small raycasting maze viewer. It reads a `.cub` scene file naming four
wall textures, a floor and a ceiling colour and a walled map, checks it,
and lets you walk through it in a 1280×720 window drawn with pygame.

## Installing

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Running

```
cub3d path/to/scene.cub
```

The command takes exactly one argument; otherwise it prints
`Usage: ./cub <map_file.cub>` and exits with status 1. If the scene is
invalid, a line beginning with `Error : ` (the prefix in red) is written to
standard error and no window is opened. If a texture image cannot be read,
`Error` and the name of the failing texture are printed and the command
exits with status 1.

### Controls

| Key                | Action              |
|--------------------|---------------------|
| W / S              | move forward / back |
| A / D              | strafe left / right |
| Left / Right arrow | turn                |
| Esc                | quit                |

The player has a small collision radius and slides along walls.

## The scene file

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm

F 220,100,0
C 225,30,0

111111
100101
101001
1100N1
111111
```

Rules enforced when loading:

- The file must exist and be readable, and its name must end in `.cub`.
- Each of `NO`, `SO`, `WE`, `EA` appears exactly once, followed by a path
  that ends in `.xpm` and contains no `..`.
- `F` and `C` each appear exactly once, with three comma separated whole
  numbers between 0 and 255.
- The map comes last. It uses only `1`, `0`, spaces, tabs and exactly one
  player start `N`, `S`, `E` or `W`, which also sets the facing direction.
- The map must be closed: its first and last rows hold only walls, every
  other row begins and ends with a wall, and no open cell can reach a
  space or the edge of the map. A row may not hold map pieces separated by
  a gap of more than two blanks.

Texture files are opened with Pillow, so they must be in a format Pillow
can read.

## Using it as a library

```python
from cub3d.config import load_config, describe

config = load_config("scene.cub")
print(describe(config))
```

`load_config` returns a `CubConfig` (grid, size, packed `0xRRGGBB`
colours, player start and `TexturePaths`) and raises
`cub3d.errors.ConfigError`, whose `message` is the same text the command
reports.

The drawing pieces work on plain data and need no window:

```python
from cub3d.player import spawn_player
from cub3d.raycast import cast_ray
from cub3d.render import Textures, new_frame, render

player = spawn_player(config)
ray = cast_ray(player, config.grid, 640)
textures = Textures.load(config.textures)
frame = render(new_frame(), player, config.grid, textures,
               config.ceiling, config.floor)
```

`frame` is a NumPy array of packed colours, 720 rows by 1280 columns.
`cub3d.app.Game` ties these together: `Game.from_config(config, textures)`
starts a game, and `handle_key(keycode)` moves or turns the player, redraws
the frame and returns `False` for Esc.

## What it does not do

There is no mouse look, no resizable window, no sound, no sprites or
doors, and no way to save or edit a scene; the view is only walls, a flat
floor and a flat ceiling.