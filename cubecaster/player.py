"""Player position, input state and movement with wall collision."""

import math
from dataclasses import dataclass

from .constants import (
    PI,
    PLAYER_SPEED,
    TILE_SIZE,
    TURN_SPEED,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    Key,
)

_WALK_KEYS = {Key.UP: -1, Key.UP_ARROW: -1, Key.DOWN: 1, Key.DOWN_ARROW: 1}
_TURN_KEYS = {Key.RIGHT: 1, Key.LEFT: -1}
_ROTATE_KEYS = {Key.LEFT_ARROW: -TURN_SPEED, Key.RIGHT_ARROW: TURN_SPEED}


def _is_wall(grid, row, column):
    if row < 0 or column < 0 or row >= len(grid) or column >= len(grid[row]):
        return True
    return grid[row][column] == "1"


def check_wall(grid, x, y):
    """True when the point (or the point one unit to its right) lies in a wall.

    Positions outside the grid count as walls.
    """
    row = math.floor(y / TILE_SIZE)
    return _is_wall(grid, row, math.floor(x / TILE_SIZE)) or _is_wall(
        grid, row, math.floor((x + 1) / TILE_SIZE)
    )


@dataclass
class Player:
    """Where the player stands and which movement keys are held."""

    x: float
    y: float
    angle: float = 0.0
    turn: int = 0
    walk: int = 0
    rotate: float = 0
    last_x: int = 0

    def key_pressed(self, keycode):
        """Start a movement; return False when the key asks to quit."""
        if keycode in _WALK_KEYS:
            self.walk = _WALK_KEYS[keycode]
        elif keycode in _TURN_KEYS:
            self.turn = _TURN_KEYS[keycode]
        elif keycode in _ROTATE_KEYS:
            self.rotate = _ROTATE_KEYS[keycode]
        elif keycode == Key.ESC:
            return False
        return True

    def key_released(self, keycode):
        """Stop the movement bound to the key."""
        if keycode in _WALK_KEYS:
            self.walk = 0
        elif keycode in _TURN_KEYS:
            self.turn = 0
        elif keycode in _ROTATE_KEYS:
            self.rotate = 0

    def mouse_move(self, x, y):
        """Turn the view when the pointer moves sideways inside the window."""
        if 0 <= y <= WINDOW_HEIGHT and 0 <= x <= WINDOW_WIDTH:
            if self.last_x < x < WINDOW_WIDTH:
                self.angle += TURN_SPEED
            elif 0 < x < self.last_x:
                self.angle -= TURN_SPEED
        self.last_x = x

    def move_angle(self, grid, angle):
        """Step up to PLAYER_SPEED units along angle, sliding along walls."""
        y_sin = math.sin(angle * (PI / 180.0))
        x_cos = math.cos(angle * (PI / 180.0))
        steps = 0
        while steps < PLAYER_SPEED and not check_wall(
            grid, self.x - steps * x_cos, self.y - steps * y_sin
        ):
            steps += 1
        if not check_wall(grid, self.x - steps * x_cos, self.y):
            self.x -= steps * x_cos
        if not check_wall(grid, self.x, self.y - steps * y_sin):
            self.y -= steps * y_sin

    def update(self, grid):
        """Apply one frame of rotation and movement from the held keys."""
        self.angle += self.rotate
        if self.walk == -1:
            self.move_angle(grid, self.angle)
        if self.walk == 1:
            self.move_angle(grid, self.angle + 180.0)
        if self.turn == 1:
            self.move_angle(grid, self.angle + 90.0)
        if self.turn == -1:
            self.move_angle(grid, self.angle - 90.0)


def init_player(scene):
    """Place a player at the centre of the scene's spawn cell."""
    for row, line in enumerate(scene.grid):
        column = line.find(scene.spawn)
        if column != -1:
            return Player(
                x=TILE_SIZE * column + TILE_SIZE // 2,
                y=TILE_SIZE * row + TILE_SIZE // 2,
                angle=scene.angle,
            )
    raise ValueError(f"no spawn {scene.spawn!r} in the map")