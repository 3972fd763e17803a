"""Reading and validating .cub scene files."""

from dataclasses import dataclass, field
from pathlib import Path

from .constants import COLOR_IDS, TEXTURE_IDS, spawn_angle
from .textutil import (
    atoi,
    dup_line,
    find_any,
    is_empty,
    is_info,
    split_set,
    trim,
)

_SPACES = "\f\n\r\t\v "
_VALID_IDS = TEXTURE_IDS + COLOR_IDS
_INFO_COUNT = 6
_SPAWN_TOKENS = "NWES"
_MAP_TOKENS = " NWES01\t"
_CLOSED_NEIGHBOURS = "x1"


class SceneError(Exception):
    """A scene file that cannot be played."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message


@dataclass
class Scene:
    """A validated scene: wall textures, floor and ceiling colours, and the map."""

    grid: tuple
    width: int
    spawn: str
    angle: float
    floor: int = 0
    ceil: int = 0
    textures: dict = field(default_factory=dict)

    @property
    def height(self):
        return len(self.grid)

    def texture_path(self, ident):
        """Path of the texture for a wall face identifier such as 'NO'."""
        return self.textures[ident]


def valid_id(ident):
    """Return ident when it is one of the six scene identifiers."""
    if ident in _VALID_IDS:
        return ident
    raise SceneError("Invalid id")


def parse_color(text):
    """Parse 'R,G,B' (each 0-255) into a 0xRRGGBB integer."""
    commas = 0
    for char, following in zip(text, text[1:] + "\0"):
        if char == ",":
            if following == ",":
                raise SceneError("Invalid color")
            commas += 1
        elif not "0" <= char <= "9":
            raise SceneError("Invalid color")
    parts = split_set(text, " ,\t\n")
    if len(parts) != 3:
        raise SceneError("Invalid color")
    channels = [atoi(part) for part in parts]
    if any(not 0 <= channel <= 255 for channel in channels):
        raise SceneError("Invalid color")
    if commas != 2:
        raise SceneError("Invalid color")
    red, green, blue = channels
    return red << 16 | green << 8 | blue


def parse_info(line):
    """Parse one identifier line into (ident, value).

    The value is a colour integer for 'F' and 'C', and the texture path for
    the wall faces; the texture file must be readable.
    """
    text = line.lstrip(_SPACES)
    end = find_any(text, " \t")
    ident = text if end == -1 else text[:end]
    content = trim(text[len(ident):], " \t\n")
    valid_id(ident)
    if ident in COLOR_IDS:
        return ident, parse_color(content)
    try:
        with open(content, "rb"):
            pass
    except OSError:
        raise SceneError("Cannot open xpm file") from None
    return ident, content


def _split_lines(text):
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


def read_scene_lines(path):
    """Read a .cub file into lines that keep their newline characters."""
    path = Path(path)
    if path.is_dir():
        raise SceneError("Is a directory")
    if not str(path).endswith(".cub"):
        raise SceneError("Invalid file <*.cub>")
    try:
        data = path.read_bytes()
    except OSError:
        raise SceneError("Cannot read file") from None
    lines = _split_lines(data.decode("utf-8", errors="surrogateescape"))
    if all(is_empty(line) for line in lines):
        raise SceneError("Empty file")
    return lines


def is_closed(grid, width):
    """True when every walkable cell is fenced off from the outside by walls."""
    size = width + 3
    padded = [dup_line(None, size)]
    padded.extend(dup_line(row, size) for row in grid)
    padded.append(dup_line(None, size))
    for y, row in enumerate(padded):
        for x, cell in enumerate(row):
            if cell != "x":
                continue
            neighbours = []
            if x + 1 < len(row):
                neighbours.append(row[x + 1])
            if y + 1 < len(padded):
                neighbours.append(padded[y + 1][x])
            if x:
                neighbours.append(row[x - 1])
            if y:
                neighbours.append(padded[y - 1][x])
            if any(n not in _CLOSED_NEIGHBOURS for n in neighbours):
                return False
    return True


def find_spawn(grid):
    """Return the single spawn letter of the map, checking every token."""
    spawns = []
    for row in grid:
        for cell in row:
            if cell in _SPAWN_TOKENS:
                spawns.append(cell)
            elif cell not in _MAP_TOKENS:
                raise SceneError("Invalid token")
    if len(spawns) != 1:
        raise SceneError("Invalid position")
    return spawns[-1]


def _read_map(rows):
    if not rows:
        raise SceneError("Invalid map")
    width = 0
    grid = []
    for line in rows:
        if len(line) > width:
            width = len(line) - 1
        if is_empty(line):
            raise SceneError("Invalid map")
        cut = line.find("\n")
        grid.append(line if cut == -1 else line[:cut])
    if "\n" in rows[-1]:
        raise SceneError("Invalid map")
    return tuple(grid), width


def parse_scene(lines):
    """Validate the lines of a scene file and build a Scene."""
    lines = list(lines)
    start = next(
        (index for index, line in enumerate(lines) if not is_info(line)),
        len(lines),
    )
    full = [line for line in lines[:start] if not is_empty(line)] + lines[start:]
    info_lines = [line for line in full if is_info(line)]
    if len(info_lines) != _INFO_COUNT:
        raise SceneError("Invalid file")
    infos = [parse_info(line) for line in info_lines]
    idents = [ident for ident, _ in infos]
    if len(set(idents)) != len(idents):
        raise SceneError("Duplicate infos")
    values = dict(infos)
    grid, width = _read_map(full[len(info_lines):])
    if not is_closed(grid, width):
        raise SceneError("Invalid map")
    spawn = find_spawn(grid)
    return Scene(
        grid=grid,
        width=width,
        spawn=spawn,
        angle=spawn_angle(spawn),
        floor=values["F"],
        ceil=values["C"],
        textures={ident: values[ident] for ident in TEXTURE_IDS},
    )


def load_scene(path):
    """Read and validate a .cub scene file."""
    return parse_scene(read_scene_lines(path))