# raycastmvc

A small first-person raycasting renderer. It draws a walled grid level the way
classic grid shooters did. The code is split into a model (player and level), a
controller (movement), and a view (ray casting and drawing with pygame).

## Install

```
pip install .
```

## Run

```
raycastmvc
```

A 640×480 window titled "Game" opens with you standing inside the level.

| Key          | Action       |
|--------------|--------------|
| Up arrow     | move forward |
| Down arrow   | move back    |
| Left arrow   | turn left    |
| Right arrow  | turn right   |
| Escape       | quit         |

Releasing an arrow key stops the movement. Walking is checked separately along
each axis, so a wall just ahead stops you on that axis only. Walls that are
farther away are drawn darker, and walls hit on their y-facing sides are drawn
at half brightness. Everything that is not wall is black.

## Using it as a library

The model, controller and ray caster do not need a window:

```python
from raycastmvc.model import default_player, default_level
from raycastmvc.controller import Movement, control
from raycastmvc.view import cast_ray, wall_slice, wall_color, render_frame

player = default_player()      # a Player dataclass
level = default_level()        # 25×25 grid of ints, indexed level[x][y]

control(player, level, Movement.FORWARD, 0.1)   # updates player in place

hit = cast_ray(player, level, 320, 640)         # RayHit
piece = wall_slice(hit, 480)                    # WallSlice, draw_end exclusive
print(hit.perp_wall_dist, piece.draw_start, piece.draw_end, wall_color(hit))

frame = render_frame(player, level, 640, 480)   # bytearray of packed RGB, row by row
```

- `raycastmvc.model`: `Player` (position, direction, camera plane, move and
  rotation speeds), `default_player()`, `default_level()`, `MAP_WIDTH`,
  `MAP_HEIGHT`.
- `raycastmvc.controller`: `Movement` (`NONE`, `FORWARD`, `BACKWARD`,
  `TURNING_LEFT`, `TURNING_RIGHT`) and `control(player, level, movement,
  delta_time)`.
- `raycastmvc.view`: `cast_ray` raises `IndexError` if a ray leaves the grid
  without meeting a wall. `movement_for_key(key, pressed, current)` maps pygame
  arrow-key events to a `Movement` and leaves other keys' movement unchanged.
  `View(width, height)` opens a pygame window, `View.draw(player, level)`
  renders one frame into it, and `View.close()` shuts it down; `View` also works
  as a context manager. `main()` runs the game loop behind the `raycastmvc`
  command.

## What it does not do

Walls are flat grey: there are no textures, no floor or ceiling drawing, no
sprites, no sound, and only the one built-in level. There is no way to load a
level from a file.

## Tests

```
pip install .[test]
pytest
```