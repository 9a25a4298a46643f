import pytest

from ulan.dungeon import PLAYER_GLYPH, Direction, Tile


def test_opposites():
    assert Direction.NORTH.opposite is Direction.SOUTH
    assert Direction.SOUTH.opposite is Direction.NORTH
    assert Direction.EAST.opposite is Direction.WEST
    assert Direction.WEST.opposite is Direction.EAST


@pytest.mark.parametrize(
    "text,expected",
    [
        ("n", Direction.NORTH),
        ("north", Direction.NORTH),
        ("NORTH", Direction.NORTH),
        (" s ", Direction.SOUTH),
        ("East", Direction.EAST),
        ("w", Direction.WEST),
        ("xyz", None),
        ("", None),
        ("no", None),
    ],
)
def test_from_string(text, expected):
    assert Direction.from_string(text) is expected


def test_direction_strings_are_lowercase_and_round_trip():
    for d in Direction:
        assert str(d) == str(d).lower()
        assert Direction.from_string(str(d)) is d


def test_deltas_are_unit_steps_with_y_down():
    assert Direction.NORTH.delta == (0, -1)
    assert Direction.SOUTH.delta == (0, 1)
    assert Direction.EAST.delta == (1, 0)
    assert Direction.WEST.delta == (-1, 0)


def test_walkable_tiles():
    walkable = {t for t in Tile if t.walkable}
    assert walkable == {Tile.FLOOR, Tile.DOOR, Tile.STAIRS, Tile.CORRIDOR}
    assert not Tile.WALL.walkable
    assert not Tile.EMPTY.walkable


def test_glyph_table():
    assert {t: t.glyph for t in Tile} == {
        Tile.FLOOR: ".",
        Tile.WALL: "#",
        Tile.DOOR: "+",
        Tile.STAIRS: ">",
        Tile.CORRIDOR: "=",
        Tile.EMPTY: " ",
    }
    assert PLAYER_GLYPH == "@"
    assert Tile.from_glyph(">") is Tile.STAIRS
