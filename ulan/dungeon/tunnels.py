"""Corridor planning between consecutively generated rooms.

Corridors are kept as geometry on the Dungeon: two orthogonal segments
between room centres in dungeon coordinates. They are not carved into room
tile grids; rooms reach each other through their adjacency doors.
"""

import random
from typing import Iterator, List, NamedTuple, Sequence, Tuple

from .rooms import RoomPlacement


class CorridorSegment(NamedTuple):
    start_x: int
    start_y: int
    end_x: int
    end_y: int

    def cells(self) -> Iterator[Tuple[int, int]]:
        """Every grid cell on the segment, start and end inclusive."""
        dx = 1 if self.end_x >= self.start_x else -1
        dy = 1 if self.end_y >= self.start_y else -1
        if self.start_y == self.end_y:
            for x in range(self.start_x, self.end_x + dx, dx):
                yield x, self.start_y
        else:
            for y in range(self.start_y, self.end_y + dy, dy):
                yield self.start_x, y

    @property
    def length(self) -> int:
        return abs(self.end_x - self.start_x) + abs(self.end_y - self.start_y)

    def to_dict(self):
        return self._asdict()


def plan_corridor(a: RoomPlacement, b: RoomPlacement, rng=None) -> List[CorridorSegment]:
    """L-shaped path from a's centre to b's centre, horizontal or vertical leg first at random."""
    if rng is None:
        rng = random
    (x1, y1) = a.center
    (x2, y2) = b.center
    if rng.random() < 0.5:
        return [CorridorSegment(x1, y1, x2, y1), CorridorSegment(x2, y1, x2, y2)]
    return [CorridorSegment(x1, y1, x1, y2), CorridorSegment(x1, y2, x2, y2)]


def plan_corridors(placements: Sequence[RoomPlacement], rng=None) -> List[List[CorridorSegment]]:
    return [plan_corridor(placements[i], placements[i + 1], rng) for i in range(len(placements) - 1)]


__all__ = ["CorridorSegment", "plan_corridor", "plan_corridors"]
