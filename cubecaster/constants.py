"""Game-wide constants: geometry, speeds, colours, key codes and wall faces."""

from enum import IntEnum


class Direction(IntEnum):
    """Wall face a ray hit; also the index of the matching texture."""

    NO = 0
    EA = 1
    SO = 2
    WE = 3


class Key(IntEnum):
    """Keyboard codes the game reacts to."""

    LEFT = 0
    DOWN = 1
    RIGHT = 2
    UP = 13
    ESC = 53
    LEFT_ARROW = 123
    RIGHT_ARROW = 124
    DOWN_ARROW = 125
    UP_ARROW = 126


RED = 0x00CC5803
GREEN = 0x00E2711D
BLUE = 0x00FF9505
YELLOW = 0x00FFB627
LINE_COLOR = 0x00FF0000
LINE_GREEN_COLOR = 0x0000FF00
WALL_COLOR = 0x00FFFFFF
FLOOR_COLOR = 0x0000FFFF
PLAYER_COLOR = 0x00FF0000

TILE_SIZE = 100
SCALE_SIZE = 0.07
PI = 3.141592653589793238
PLAYER_SPEED = 20
TURN_SPEED = 2
ONE_DEGREE = 0.0174533
WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720

TEXTURE_IDS = ("NO", "EA", "SO", "WE")
COLOR_IDS = ("F", "C")

_SPAWN_ANGLES = {"N": 90.0, "E": 180.0, "S": 270.0, "W": 0.0}


def spawn_angle(token):
    """Return the starting view angle, in degrees, for a spawn letter."""
    try:
        return _SPAWN_ANGLES[token]
    except KeyError:
        raise ValueError(f"not a spawn token: {token!r}") from None