"""Pixel frames, wall textures and drawing of the 3D view and the minimap."""

import math
from dataclasses import dataclass, field

import numpy as np
from PIL import Image

from .constants import (
    FLOOR_COLOR,
    PLAYER_COLOR,
    SCALE_SIZE,
    TILE_SIZE,
    WALL_COLOR,
    Direction,
)
from .raycast import cast_rays
from .scene import SceneError

_MINI_TILE = math.floor(TILE_SIZE * SCALE_SIZE)
_MINI_LIMIT = 20 * TILE_SIZE * SCALE_SIZE
_PLAYER_LIMIT = 10 * TILE_SIZE * SCALE_SIZE
_PLAYER_SIZE = 3
_VIEW_RADIUS = 10


@dataclass
class Frame:
    """An image of 0xRRGGBB pixels, indexed [row, column]."""

    width: int
    height: int
    pixels: np.ndarray = field(init=False, repr=False)

    def __post_init__(self):
        self.pixels = np.zeros((self.height, self.width), dtype=np.uint32)

    def put_pixel(self, y, x, color):
        """Set one pixel; points outside the frame are ignored."""
        if 0 <= y < self.height and 0 <= x < self.width:
            self.pixels[y, x] = color

    def fill_square(self, y, x, size, color):
        """Fill a size-by-size square whose top-left corner is (y, x)."""
        top, left = max(y, 0), max(x, 0)
        bottom, right = min(y + size, self.height), min(x + size, self.width)
        if top < bottom and left < right:
            self.pixels[top:bottom, left:right] = color

    def clear(self):
        """Paint the whole frame black."""
        self.pixels.fill(0)


@dataclass
class Texture:
    """A wall texture stored row by row as 0xRRGGBB values."""

    width: int
    height: int
    data: np.ndarray

    @classmethod
    def from_file(cls, path):
        """Load an image file that Pillow can read."""
        try:
            with Image.open(path) as image:
                rgb = np.asarray(image.convert("RGB"), dtype=np.uint32)
        except (OSError, ValueError):
            raise SceneError("invalid texture") from None
        height, width = rgb.shape[:2]
        packed = (rgb[..., 0] << 16) | (rgb[..., 1] << 8) | rgb[..., 2]
        return cls(width=width, height=height, data=packed.reshape(-1))

    def _clamped(self, index):
        return np.clip(index, 0, self.data.size - 1)

    def pixel(self, row, column):
        """Colour at row * width + column, clamped to the texture's storage."""
        return int(self.data[self._clamped(row * self.width + column)])


def load_textures(scene):
    """Load the scene's wall textures, indexed by Direction."""
    return [Texture.from_file(scene.texture_path(face.name)) for face in Direction]


def draw_floor_sky(frame, ceil, floor):
    """Paint the upper half with the ceiling colour and the lower with the floor."""
    rows = np.arange(frame.height)
    half = frame.height // 2
    frame.pixels[rows < half] = ceil
    frame.pixels[rows > half] = floor


def _draw_player(frame, player):
    x = int(player.x * SCALE_SIZE)
    y = int(player.y * SCALE_SIZE)
    if x > _PLAYER_LIMIT:
        x = int(_PLAYER_LIMIT)
    if y > _PLAYER_LIMIT:
        y = int(_PLAYER_LIMIT)
    frame.fill_square(y, x, _PLAYER_SIZE, PLAYER_COLOR)


def draw_minimap(frame, grid, player):
    """Draw the map cells around the player, then the player marker."""
    frame.clear()
    first_row = max(math.floor(player.y / TILE_SIZE) - _VIEW_RADIUS, -1) + 1
    first_column = max(math.floor(player.x / TILE_SIZE) - _VIEW_RADIUS, -1) + 1
    y_pos = 0
    for line in grid[first_row:]:
        if y_pos >= _MINI_LIMIT:
            break
        x_pos = 0
        for cell in line[first_column:]:
            if x_pos >= _MINI_LIMIT:
                break
            color = WALL_COLOR if cell == "1" else FLOOR_COLOR
            frame.fill_square(y_pos, x_pos, _MINI_TILE, color)
            x_pos += _MINI_TILE
        y_pos += _MINI_TILE
    _draw_player(frame, player)


def draw_column(frame, column, hit, wall, texture):
    """Draw one textured wall column for a ray hit."""
    if wall.rows <= 0 or not 0 <= column < frame.width:
        return
    rows = wall.start_y + np.arange(wall.rows)
    scale = texture.height / wall.real_wall_len
    texture_rows = ((rows - wall.text_start_pixel) * scale).astype(np.int64)
    along = hit.x if hit.direction in (Direction.NO, Direction.SO) else hit.y
    offset = int(along) % TILE_SIZE
    colors = texture.data[texture._clamped(texture.width * texture_rows + offset)]
    visible = (rows >= 0) & (rows < frame.height)
    frame.pixels[rows[visible], column] = colors[visible]


def render_scene(frame, minimap, grid, player, textures, ceil, floor):
    """Advance the player one frame and draw the 3D view and the minimap."""
    frame.clear()
    player.update(grid)
    draw_floor_sky(frame, ceil, floor)
    draw_minimap(minimap, grid, player)
    for column, (hit, wall) in enumerate(cast_rays(grid, player, frame.width)):
        draw_column(frame, column, hit, wall, textures[hit.direction])