"""Final dungeon data types: Room and Dungeon.

Rooms are self-contained tile grids (row-major, ``tiles[y][x]``, origin top
left) with a wall border and a floor interior. Doors sit at fixed,
edge-centred positions keyed by direction and every door has a matching
entry in ``connections``. The player always occupies a tile of
``Dungeon.current_room``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .config import GeneratorConfig
from .directions import Direction
from .tiles import Tile
from .tunnels import CorridorSegment


@dataclass
class Room:
    id: str
    name: str
    description: str
    width: int
    height: int
    tiles: List[List[Tile]]
    connections: Dict[Direction, str] = field(default_factory=dict)
    x: int = 0
    y: int = 0

    @classmethod
    def blank(cls, id: str, name: str, description: str, width: int, height: int, x: int = 0, y: int = 0) -> "Room":
        tiles = [[Tile.WALL for _ in range(width)] for _ in range(height)]
        for ty in range(1, height - 1):
            for tx in range(1, width - 1):
                tiles[ty][tx] = Tile.FLOOR
        return cls(id, name, description, width, height, tiles, {}, x, y)

    @property
    def center(self) -> Tuple[int, int]:
        return (self.width // 2, self.height // 2)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def tile_at(self, x: int, y: int) -> Tile:
        return self.tiles[y][x]

    def set_tile(self, x: int, y: int, tile: Tile) -> None:
        if self.in_bounds(x, y):
            self.tiles[y][x] = tile

    def door_position(self, direction: Direction) -> Tuple[int, int]:
        if direction is Direction.NORTH:
            return (self.width // 2, 0)
        if direction is Direction.SOUTH:
            return (self.width // 2, self.height - 1)
        if direction is Direction.EAST:
            return (self.width - 1, self.height // 2)
        return (0, self.height // 2)

    def add_door(self, direction: Direction, target_id: str) -> Tuple[int, int]:
        """Carve the door for ``direction`` and register the connection to ``target_id``."""
        x, y = self.door_position(direction)
        self.set_tile(x, y, Tile.DOOR)
        self.connections[direction] = target_id
        return x, y

    def entry_point(self, travel: Direction) -> Tuple[int, int]:
        """Where a player lands after travelling ``travel`` into this room.

        One tile inside the border, centred on the side opposite the travel
        direction (heading north you arrive at the south edge).
        """
        if travel is Direction.NORTH:
            return (self.width // 2, self.height - 2)
        if travel is Direction.SOUTH:
            return (self.width // 2, 1)
        if travel is Direction.EAST:
            return (1, self.height // 2)
        return (self.width - 2, self.height // 2)

    def exits(self) -> List[Direction]:
        return [d for d in Direction if d in self.connections]

    def count(self, tile: Tile) -> int:
        return sum(1 for row in self.tiles for t in row if t is tile)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "tiles": ["".join(t.glyph for t in row) for row in self.tiles],
            "connections": {str(d): rid for d, rid in self.connections.items()},
        }


@dataclass
class Dungeon:
    rooms: Dict[str, Room]
    current_room_id: str
    player_x: int
    player_y: int
    seed: Optional[int] = None
    config: Optional[GeneratorConfig] = None
    corridors: List[List[CorridorSegment]] = field(default_factory=list)
    generator: str = ""
    metrics: Dict[str, Any] = field(default_factory=dict)
    # Wall-clock values differ between runs of one seed; not part of equality
    timings: Dict[str, Any] = field(default_factory=dict, compare=False)

    def __post_init__(self):
        if self.current_room_id not in self.rooms:
            raise ValueError(f"current room {self.current_room_id!r} is not part of this dungeon")

    @property
    def current_room(self) -> Room:
        return self.rooms[self.current_room_id]

    @property
    def player_pos(self) -> Tuple[int, int]:
        return (self.player_x, self.player_y)

    def room_order(self) -> List[str]:
        """Room ids in generation order (room_0, room_1, ...)."""
        return list(self.rooms.keys())

    def stairs_location(self) -> Optional[Tuple[str, int, int]]:
        for rid, room in self.rooms.items():
            for y, row in enumerate(room.tiles):
                for x, t in enumerate(row):
                    if t is Tile.STAIRS:
                        return (rid, x, y)
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "seed": self.seed,
            "generator": self.generator,
            "config": self.config.to_dict() if self.config else None,
            "current_room_id": self.current_room_id,
            "player": {"x": self.player_x, "y": self.player_y},
            "rooms": {rid: room.to_dict() for rid, room in self.rooms.items()},
            "corridors": [[seg.to_dict() for seg in path] for path in self.corridors],
            "metrics": dict(self.metrics),
            "timings": dict(self.timings),
        }


__all__ = ["Room", "Dungeon"]
