import pytest

from dinorun.units import Color, Direction, Vec2


def test_width_and_height_alias_coordinates():
    v = Vec2(3, 4)
    assert v.width == 3
    assert v.height == 4
    assert (v.width, v.height) == (v.x, v.y)


def test_setting_aliases_updates_coordinates():
    v = Vec2(0, 0)
    v.width = 7
    v.height = 9
    assert v == Vec2(7, 9)


def test_vec2_is_mutable():
    v = Vec2(1, 1)
    v.x -= 1
    v.y += 2
    assert (v.x, v.y) == (0, 3)


def test_vec2_equality_by_value():
    assert Vec2(2, 5) == Vec2(2, 5)
    assert not Vec2(2, 5) == Vec2(5, 2)


@pytest.mark.parametrize("pair", [(Direction.UP, Direction.DOWN), (Direction.LEFT, Direction.RIGHT)])
def test_opposite_directions_negate(pair):
    a, b = pair
    assert Direction(-a) is b


def test_color_lookup_by_ansi_index():
    assert Color(int(Color.YELLOW)) is Color.YELLOW
    assert max(Color) is Color.NOCHANGE