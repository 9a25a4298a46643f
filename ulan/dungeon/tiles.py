# Tile kinds centralized for modular imports
from enum import Enum


class Tile(Enum):
    FLOOR = "."
    WALL = "#"
    DOOR = "+"
    STAIRS = ">"
    CORRIDOR = "="
    EMPTY = " "

    @property
    def glyph(self) -> str:
        return self.value

    @property
    def walkable(self) -> bool:
        return self in WALKABLE

    @classmethod
    def from_glyph(cls, ch: str) -> "Tile":
        return cls(ch)

    def __str__(self) -> str:
        return self.name.lower()


WALKABLE = frozenset({Tile.FLOOR, Tile.DOOR, Tile.STAIRS, Tile.CORRIDOR})
PLAYER_GLYPH = "@"

__all__ = ["Tile", "WALKABLE", "PLAYER_GLYPH"]
