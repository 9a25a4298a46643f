"""Public dungeon package interface."""

from .config import GeneratorConfig, coerce_seed
from .directions import Direction
from .dungeon import Dungeon, Room
from .errors import (
    GenerationError,
    InsufficientRooms,
    InvalidConfig,
    MoveBlocked,
    MovementError,
    NoExitDirection,
)
from .generator import (
    DungeonGenerator,
    GeneratorRegistry,
    SimpleGenerator,
    build_dungeon,
    default_registry,
)
from .tiles import PLAYER_GLYPH, Tile  # noqa: F401

__all__ = [
    "GeneratorConfig",
    "coerce_seed",
    "Direction",
    "Dungeon",
    "Room",
    "Tile",
    "PLAYER_GLYPH",
    "GenerationError",
    "InsufficientRooms",
    "InvalidConfig",
    "MoveBlocked",
    "MovementError",
    "NoExitDirection",
    "DungeonGenerator",
    "GeneratorRegistry",
    "SimpleGenerator",
    "build_dungeon",
    "default_registry",
]
