"""Flavour and special tiles assigned while materializing rooms.

Descriptions cycle through a fixed pool by generation index rather than
being drawn from the RNG, so adding descriptions never shifts room layouts
for an existing seed.
"""
from __future__ import annotations

from .dungeon import Room
from .tiles import Tile

ROOM_DESCRIPTIONS = [
    "A damp chamber with moss growing on the walls.",
    "The air is thick with dust in this ancient room.",
    "Strange symbols are carved into the stone floor here.",
    "Water drips steadily from cracks in the ceiling.",
    "Old bones are scattered across the floor.",
    "Tattered banners hang from rusty chains.",
    "The walls are covered in faded murals.",
    "A faint, eerie glow emanates from phosphorescent fungi.",
    "The room smells of decay and forgotten ages.",
    "Cobwebs fill every corner of this abandoned chamber.",
]


def describe_room(index: int) -> str:
    return ROOM_DESCRIPTIONS[index % len(ROOM_DESCRIPTIONS)]


def place_stairs(room: Room) -> tuple[int, int]:
    """Put the level exit at the room's centre, replacing the floor there."""
    cx, cy = room.center
    room.set_tile(cx, cy, Tile.STAIRS)
    return cx, cy
