from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple


class Direction(Enum):
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @property
    def delta(self) -> Tuple[int, int]:
        """Unit (dx, dy) step in room tile space; y grows downward."""
        return _DELTAS[self]

    @classmethod
    def from_string(cls, text: str) -> Optional["Direction"]:
        """Parse 'north' / 'N' / ' west ' style input; None when unrecognised."""
        if not text:
            return None
        return _ALIASES.get(text.strip().lower())

    def __str__(self) -> str:
        return self.value


_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}

_DELTAS = {
    Direction.NORTH: (0, -1),
    Direction.SOUTH: (0, 1),
    Direction.EAST: (1, 0),
    Direction.WEST: (-1, 0),
}

_ALIASES = {}
for _d in Direction:
    _ALIASES[_d.value] = _d
    _ALIASES[_d.value[0]] = _d

__all__ = ["Direction"]
