import random
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from .config import GeneratorConfig
from .errors import InsufficientRooms

MAX_PLACEMENT_ATTEMPTS = 1000

ROOM_NAMES = [
    "Stone Chamber",
    "Dark Hall",
    "Ancient Vault",
    "Forgotten Crypt",
    "Mystic Sanctum",
    "Guard Room",
    "Treasury",
    "Library",
    "Throne Room",
    "Prison Cell",
    "Workshop",
    "Storage Room",
    "Armory",
    "Ossuary",
    "Flooded Cistern",
    "Collapsed Gallery",
]


@dataclass(frozen=True)
class RoomPlacement:
    id: str
    name: str
    x: int
    y: int
    width: int
    height: int

    def cells(self) -> Iterator[Tuple[int, int]]:
        for iy in range(self.y, self.y + self.height):
            for ix in range(self.x, self.x + self.width):
                yield ix, iy

    @property
    def center(self) -> Tuple[int, int]:
        return (self.x + self.width // 2, self.y + self.height // 2)

    def padded(self, pad: int = 1) -> Tuple[int, int, int, int]:
        """(x, y, w, h) of the footprint grown by ``pad`` cells on every side."""
        return (self.x - pad, self.y - pad, self.width + 2 * pad, self.height + 2 * pad)

    def intersects(self, other: "RoomPlacement", pad: int = 0) -> bool:
        x, y, w, h = self.padded(pad)
        return x < other.x + other.width and x + w > other.x and y < other.y + other.height and y + h > other.y


def new_occupancy_grid(config: GeneratorConfig) -> List[List[bool]]:
    return [[False for _ in range(config.dungeon_width)] for _ in range(config.dungeon_height)]


def place_rooms(config: GeneratorConfig, rng=None, metrics: Optional[dict] = None) -> List[RoomPlacement]:
    """Scatter non-overlapping rooms across the dungeon grid.

    Each room keeps a one-cell margin to the grid edge and a one-cell gap to
    every other room. Raises InsufficientRooms when fewer than
    ``config.min_rooms`` could be placed within MAX_PLACEMENT_ATTEMPTS.
    """
    if rng is None:
        rng = random
    target = rng.randint(config.min_rooms, config.max_rooms)
    grid = new_occupancy_grid(config)
    placements: List[RoomPlacement] = []
    attempts = 0
    rejected = 0
    while len(placements) < target and attempts < MAX_PLACEMENT_ATTEMPTS:
        attempts += 1
        w = rng.randint(config.min_room_size, config.max_room_size)
        h = rng.randint(config.min_room_size, config.max_room_size)
        if w + 2 > config.dungeon_width or h + 2 > config.dungeon_height:
            rejected += 1
            continue
        x = rng.randint(1, config.dungeon_width - w - 1)
        y = rng.randint(1, config.dungeon_height - h - 1)
        name = rng.choice(ROOM_NAMES)
        candidate = RoomPlacement(f"room_{len(placements)}", name, x, y, w, h)
        if _is_occupied(grid, candidate):
            rejected += 1
            continue
        for cx, cy in candidate.cells():
            grid[cy][cx] = True
        placements.append(candidate)
    if metrics is not None:
        metrics["rooms_target"] = target
        metrics["placement_attempts"] = attempts
        metrics["placements_rejected"] = rejected
    if len(placements) < config.min_rooms:
        raise InsufficientRooms(len(placements), config.min_rooms)
    return placements


def _is_occupied(grid: List[List[bool]], candidate: RoomPlacement) -> bool:
    px, py, pw, ph = candidate.padded()
    height = len(grid)
    width = len(grid[0])
    for cy in range(max(0, py), min(height, py + ph)):
        row = grid[cy]
        for cx in range(max(0, px), min(width, px + pw)):
            if row[cx]:
                return True
    return False


__all__ = ["RoomPlacement", "ROOM_NAMES", "MAX_PLACEMENT_ATTEMPTS", "place_rooms", "new_occupancy_grid"]
