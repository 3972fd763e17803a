"""Command entry: load a scene and run the game window."""

import sys

import numpy as np
import pygame

from .constants import (
    SCALE_SIZE,
    TILE_SIZE,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    Key,
)
from .player import init_player
from .render import Frame, load_textures, render_scene
from .scene import SceneError, load_scene

_MINIMAP_SIZE = int(20 * TILE_SIZE * SCALE_SIZE)
_FPS = 60
_RED = "\033[0;31m"
_RESET = "\033[0;37m"

_KEYS = {
    pygame.K_w: Key.UP,
    pygame.K_a: Key.LEFT,
    pygame.K_s: Key.DOWN,
    pygame.K_d: Key.RIGHT,
    pygame.K_ESCAPE: Key.ESC,
    pygame.K_LEFT: Key.LEFT_ARROW,
    pygame.K_RIGHT: Key.RIGHT_ARROW,
    pygame.K_UP: Key.UP_ARROW,
    pygame.K_DOWN: Key.DOWN_ARROW,
}


def keycode_for(pygame_key):
    """Game key code for a pygame key constant, or None if the game ignores it."""
    return _KEYS.get(pygame_key)


def _surface(frame):
    pixels = frame.pixels.T
    rgb = np.empty(pixels.shape + (3,), dtype=np.uint8)
    rgb[..., 0] = (pixels >> 16) & 0xFF
    rgb[..., 1] = (pixels >> 8) & 0xFF
    rgb[..., 2] = pixels & 0xFF
    return pygame.surfarray.make_surface(rgb)


def _handle_event(event, player):
    """Apply one event to the player; return False when the game should stop."""
    if event.type == pygame.QUIT:
        return False
    if event.type == pygame.KEYDOWN:
        code = keycode_for(event.key)
        return code is None or player.key_pressed(code)
    if event.type == pygame.KEYUP:
        code = keycode_for(event.key)
        if code is not None:
            player.key_released(code)
    elif event.type == pygame.MOUSEMOTION:
        player.mouse_move(*event.pos)
    return True


def run(scene):
    """Open the window and play the scene until the player quits."""
    textures = load_textures(scene)
    player = init_player(scene)
    frame = Frame(WINDOW_WIDTH, WINDOW_HEIGHT)
    minimap = Frame(_MINIMAP_SIZE, _MINIMAP_SIZE)
    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption("cubecaster")
        clock = pygame.time.Clock()
        while all(_handle_event(event, player) for event in pygame.event.get()):
            render_scene(
                frame, minimap, scene.grid, player, textures, scene.ceil, scene.floor
            )
            screen.blit(_surface(frame), (0, 0))
            screen.blit(_surface(minimap), (0, 0))
            pygame.display.flip()
            clock.tick(_FPS)
    finally:
        pygame.quit()


def _report(message):
    sys.stderr.write(f"{_RED}Error\n{message}\n{_RESET}")


def main(argv=None):
    """Run the game on the .cub file named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        _report("Usage: cubecaster <map_file.cub>")
        return 1
    try:
        run(load_scene(args[0]))
    except SceneError as error:
        _report(error.message)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())