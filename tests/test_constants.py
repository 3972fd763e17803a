import pytest

from cubecaster.constants import Direction, Key, spawn_angle


@pytest.mark.parametrize(
    "token, angle",
    [("N", 90.0), ("E", 180.0), ("S", 270.0), ("W", 0.0)],
)
def test_spawn_angle(token, angle):
    assert spawn_angle(token) == angle


@pytest.mark.parametrize("token", ["n", "0", "1", "", "NE"])
def test_spawn_angle_rejects_other_tokens(token):
    with pytest.raises(ValueError):
        spawn_angle(token)


def test_spawn_angles_are_distinct_quarter_turns():
    angles = {spawn_angle(t) for t in "NESW"}
    assert len(angles) == 4
    assert all(a % 90 == 0 for a in angles)


@pytest.mark.parametrize(
    "value, name",
    [(0, "NO"), (1, "EA"), (2, "SO"), (3, "WE")],
)
def test_direction_lookup_by_value_matches_texture_order(value, name):
    assert Direction(value).name == name


def test_direction_rejects_unknown_value():
    with pytest.raises(ValueError):
        Direction(4)


def test_key_lookup_by_code():
    assert Key(13) is Key.UP
    assert Key(126) is Key.UP_ARROW
    assert Key(53) is Key.ESC