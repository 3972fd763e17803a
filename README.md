# cubecaster

A small first-person raycasting engine. It reads a `.cub` scene file that
describes the wall textures, the floor and ceiling colours and a grid map, then
lets you walk around the maze in a pygame window.

## Installing

```
pip install .
```

## Playing

```
cubecaster maps/example.cub
```

Controls:

- `W` / `Up`: walk forward
- `S` / `Down`: walk backward
- `A` / `D`: step sideways
- `Left` / `Right`: turn
- moving the mouse sideways across the window also turns
- `Esc` or closing the window quits

Walking stops at walls and slides along them. A minimap in the top-left corner
shows the cells around you and your position.

## The scene file

A scene file has six information lines, in any order, followed by the map:

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 220,100,0
C 225,30,0

111111
100001
10N001
111111
```

- `NO`, `SO`, `WE`, `EA` give the path of the texture for each wall face. The
  file must exist and be readable, and must be an image format Pillow can
  open.
- `F` and `C` give the floor and ceiling colours as three values from 0 to 255
  separated by two commas.
- Each identifier must appear exactly once. Blank lines are allowed among the
  information lines.
- The map uses `1` for walls, `0` for open floor and one of `N`, `S`, `E`, `W`
  for the starting position and the direction faced. Spaces and tabs are
  allowed outside the walls. The map must be closed by walls, must hold
  exactly one start position, may not contain empty lines and must not end
  with a newline.

Any problem with the arguments or the file is printed to standard error as
`Error` followed by the reason, and the command exits with status 1.

## Using it as a library

```python
from cubecaster.scene import load_scene
from cubecaster.player import init_player
from cubecaster.raycast import cast_rays

scene = load_scene("maps/example.cub")
player = init_player(scene)
for hit, wall in cast_rays(scene.grid, player, 1280):
    print(hit.direction, wall.dist)
```

- `cubecaster.scene` reads and validates scene files; `load_scene` returns a
  `Scene` and raises `SceneError` for an invalid file.
- `cubecaster.player` holds the `Player`, its key and mouse handling and
  collision-checked movement.
- `cubecaster.raycast` casts rays through the grid and sizes wall slices
  (`RayHit`, `WallSlice`).
- `cubecaster.render` draws into `Frame` pixel arrays with `Texture` images;
  `render_scene` advances the player one frame and draws the view and the
  minimap.
- `cubecaster.app.run(scene)` opens a window and plays a loaded scene.

## Running the tests

```
pip install .[test]
pytest
```