"""Casting rays through the map grid and sizing the wall slices they hit."""

import math
from dataclasses import dataclass, replace
from typing import Optional

from .constants import PI, TILE_SIZE, WINDOW_HEIGHT, Direction
from .player import check_wall

_FIELD_OF_VIEW = 60.0
_FAR = 1_000_000_000
_MIN_DISTANCE = 1e-6


@dataclass(frozen=True)
class RayHit:
    """Where a ray stopped, the angle it was cast at and the wall face it met."""

    x: float
    y: float
    angle: float
    direction: Optional[Direction]


@dataclass(frozen=True)
class WallSlice:
    """Vertical extent on screen of the wall seen by one ray."""

    dist: float
    wall_len: float
    real_wall_len: float
    start_y: int
    text_start_pixel: int
    rows: int


def hit_direction(grid, x, y, x_inc, y_inc):
    """Tell which wall face a ray stepping by (x_inc, y_inc) hit at (x, y).

    Returns None when no face can be told apart from the last step.
    """
    y -= y_inc
    x -= x_inc
    if check_wall(grid, x, y + y_inc) and y_inc <= 0:
        return Direction.NO
    if check_wall(grid, x + x_inc, y) and x_inc <= 0:
        return Direction.WE
    if check_wall(grid, x, y + y_inc):
        return Direction.SO
    if check_wall(grid, x + x_inc, y):
        return Direction.EA
    return None


def cast_ray(grid, x, y, angle):
    """March a ray from (x, y) along angle (degrees) until it enters a wall."""
    rad = angle * (PI / 180.0)
    dir_x = x - math.floor(_FAR * math.cos(rad))
    dir_y = y - math.floor(_FAR * math.sin(rad))
    dif_x = dir_x - x
    dif_y = dir_y - y
    steps = max(abs(int(dif_x)), abs(int(dif_y)))
    x_inc = dif_x / steps
    y_inc = dif_y / steps
    hit_x, hit_y = x, y
    while not check_wall(grid, hit_x, hit_y):
        hit_x += x_inc
        hit_y += y_inc
    return RayHit(
        x=hit_x,
        y=hit_y,
        angle=angle,
        direction=hit_direction(grid, hit_x, hit_y, x_inc, y_inc),
    )


def wall_slice(hit, player_x, player_y, player_angle):
    """Size the wall column for a hit, corrected for the fish-eye effect."""
    dist = math.sqrt(int((hit.x - player_x) ** 2) + int((hit.y - player_y) ** 2))
    dist *= math.cos(player_angle * (PI / 180.0) - hit.angle * (PI / 180.0))
    dist = max(dist, _MIN_DISTANCE)
    real_wall_len = (TILE_SIZE * WINDOW_HEIGHT) / dist
    wall_len = min(real_wall_len, WINDOW_HEIGHT)
    return WallSlice(
        dist=dist,
        wall_len=wall_len,
        real_wall_len=real_wall_len,
        start_y=int((WINDOW_HEIGHT - wall_len) / 2.0),
        text_start_pixel=int((WINDOW_HEIGHT - real_wall_len) / 2.0),
        rows=math.ceil(wall_len) if wall_len > 0 else 0,
    )


def cast_rays(grid, player, width):
    """Cast one ray per screen column across the field of view.

    Returns a list of (RayHit, WallSlice) pairs, left column first. A ray
    whose face cannot be told keeps the face of the ray before it.
    """
    results = []
    angle = player.angle - _FIELD_OF_VIEW / 2
    direction = Direction.NO
    for _ in range(width):
        hit = cast_ray(grid, player.x, player.y, angle)
        if hit.direction is None:
            hit = replace(hit, direction=direction)
        direction = hit.direction
        results.append((hit, wall_slice(hit, player.x, player.y, player.angle)))
        angle += _FIELD_OF_VIEW / width
    return results