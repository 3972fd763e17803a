import pytest

from cubecaster.constants import FLOOR_COLOR, TEXTURE_IDS, WALL_COLOR, spawn_angle
from cubecaster.scene import (
    Scene,
    SceneError,
    find_spawn,
    is_closed,
    load_scene,
    parse_color,
    parse_info,
    parse_scene,
    read_scene_lines,
    valid_id,
)

MAP = ["111111", "100001", "10N001", "111111"]


@pytest.fixture
def textures(tmp_path):
    paths = {}
    for ident in TEXTURE_IDS:
        path = tmp_path / f"{ident.lower()}.xpm"
        path.write_text("xpm")
        paths[ident] = str(path)
    return paths


def _lines(textures, rows, floor="0,255,255", ceil="255,255,255"):
    head = [f"{ident} {textures[ident]}\n" for ident in TEXTURE_IDS]
    head += ["\n", f"F {floor}\n", f"C {ceil}\n", "\n"]
    body = [row + "\n" for row in rows[:-1]] + [rows[-1]]
    return head + body


@pytest.mark.parametrize("ident", ["NO", "EA", "SO", "WE", "F", "C"])
def test_valid_id_accepts(ident):
    assert valid_id(ident) == ident


@pytest.mark.parametrize("ident", ["NOX", "NO\n", "", "X"])
def test_valid_id_rejects(ident):
    with pytest.raises(SceneError, match="^Invalid id$"):
        valid_id(ident)


def test_parse_color_values():
    assert parse_color("255,255,255") == WALL_COLOR
    assert parse_color("0,255,255") == FLOOR_COLOR
    assert parse_color("0,0,0") == 0


@pytest.mark.parametrize(
    "text",
    ["1,,2,3", "1,2", "1,2,3,", ",1,2,3", "256,0,0", "1, 2,3", "-1,0,0", "a,b,c", ""],
)
def test_parse_color_rejects(text):
    with pytest.raises(SceneError, match="^Invalid color$"):
        parse_color(text)


def test_parse_info_color():
    assert parse_info("F 0,255,255\n") == ("F", FLOOR_COLOR)
    assert parse_info("  C\t0,0,0") == ("C", 0)


def test_parse_info_texture(textures):
    assert parse_info(f"NO {textures['NO']}  \n") == ("NO", textures["NO"])


def test_parse_info_missing_texture(tmp_path):
    with pytest.raises(SceneError, match="^Cannot open xpm file$"):
        parse_info(f"SO {tmp_path / 'missing.xpm'}\n")


def test_parse_info_without_content_is_invalid_id():
    with pytest.raises(SceneError, match="^Invalid id$"):
        parse_info("NO\n")


def test_is_closed():
    assert is_closed(("111", "101", "111"), 3)
    assert not is_closed(("111", "100", "111"), 3)
    assert not is_closed(("1111", "1 01", "1111"), 4)


def test_find_spawn():
    assert find_spawn(("111", "1N1", "111")) == "N"
    assert find_spawn(("111", "1W1", "111")) == "W"


@pytest.mark.parametrize("grid", [("111", "101", "111"), ("1111", "1NS1", "1111")])
def test_find_spawn_position_errors(grid):
    with pytest.raises(SceneError, match="^Invalid position$"):
        find_spawn(grid)


def test_find_spawn_invalid_token():
    with pytest.raises(SceneError, match="^Invalid token$"):
        find_spawn(("111", "1Z1", "1N1"))


def test_parse_scene(textures):
    scene = parse_scene(_lines(textures, MAP))
    assert scene.grid == tuple(MAP)
    assert scene.height == len(MAP)
    assert scene.width == len(MAP[0])
    assert scene.spawn == "N"
    assert scene.angle == spawn_angle("N")
    assert scene.floor == FLOOR_COLOR
    assert scene.ceil == WALL_COLOR
    assert scene.texture_path("EA") == textures["EA"]


def test_texture_path_unknown(textures):
    scene = parse_scene(_lines(textures, MAP))
    with pytest.raises(KeyError):
        scene.texture_path("F")


def test_parse_scene_trailing_newline(textures):
    lines = _lines(textures, MAP)
    lines[-1] += "\n"
    with pytest.raises(SceneError, match="^Invalid map$"):
        parse_scene(lines)


def test_parse_scene_open_map(textures):
    rows = ["111111", "100000", "10N001", "111111"]
    with pytest.raises(SceneError, match="^Invalid map$"):
        parse_scene(_lines(textures, rows))


def test_parse_scene_blank_line_in_map(textures):
    lines = _lines(textures, MAP)
    lines.insert(len(lines) - 2, "\n")
    with pytest.raises(SceneError, match="^Invalid file$"):
        parse_scene(lines)


def test_parse_scene_without_map(textures):
    lines = _lines(textures, MAP)[:8]
    with pytest.raises(SceneError, match="^Invalid map$"):
        parse_scene(lines)


def test_parse_scene_missing_info(textures):
    lines = [line for line in _lines(textures, MAP) if not line.startswith("F ")]
    with pytest.raises(SceneError, match="^Invalid file$"):
        parse_scene(lines)


def test_parse_scene_duplicate(textures):
    lines = [
        f"NO {textures['NO']}\n" if line.startswith("WE ") else line
        for line in _lines(textures, MAP)
    ]
    with pytest.raises(SceneError, match="^Duplicate infos$"):
        parse_scene(lines)


def test_parse_scene_invalid_id(textures):
    lines = [
        f"NOX {textures['NO']}\n" if line.startswith("NO ") else line
        for line in _lines(textures, MAP)
    ]
    with pytest.raises(SceneError, match="^Invalid id$"):
        parse_scene(lines)


def test_parse_scene_bad_color(textures):
    with pytest.raises(SceneError, match="^Invalid color$"):
        parse_scene(_lines(textures, MAP, floor="300,0,0"))


def test_parse_scene_no_spawn(textures):
    rows = ["111111", "100001", "100001", "111111"]
    with pytest.raises(SceneError, match="^Invalid position$"):
        parse_scene(_lines(textures, rows))


def test_load_scene_round_trip(tmp_path, textures):
    lines = _lines(textures, MAP)
    path = tmp_path / "level.cub"
    path.write_text("".join(lines))
    assert read_scene_lines(path) == lines
    loaded = load_scene(path)
    assert isinstance(loaded, Scene)
    assert loaded == parse_scene(lines)


def test_read_scene_lines_directory(tmp_path):
    folder = tmp_path / "maps.cub"
    folder.mkdir()
    with pytest.raises(SceneError, match="^Is a directory$"):
        read_scene_lines(folder)


def test_read_scene_lines_extension(tmp_path):
    path = tmp_path / "level.txt"
    path.write_text("NO x\n")
    with pytest.raises(SceneError, match=r"^Invalid file <\*\.cub>$"):
        read_scene_lines(path)


def test_read_scene_lines_missing(tmp_path):
    with pytest.raises(SceneError, match="^Cannot read file$"):
        read_scene_lines(tmp_path / "nothing.cub")


def test_read_scene_lines_empty(tmp_path):
    path = tmp_path / "blank.cub"
    path.write_text("\n  \n\t\n")
    with pytest.raises(SceneError, match="^Empty file$"):
        read_scene_lines(path)