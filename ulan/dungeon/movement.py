"""Movement-related helpers operating on a generated Dungeon.

These helpers encapsulate:
- Stepping the player one tile inside the current room
- Travelling through a registered exit into the neighbouring room
- Describing the current position and its exits

Rejected moves raise MovementError subclasses whose text is meant for the player.
"""

from __future__ import annotations

from typing import List, Tuple

from .directions import Direction
from .dungeon import Dungeon
from .errors import MoveBlocked, NoExitDirection
from .tiles import Tile


def move_player(dungeon: Dungeon, direction: Direction) -> str:
    """Step one tile in ``direction``; returns the message for the tile entered."""
    room = dungeon.current_room
    dx, dy = direction.delta
    nx, ny = dungeon.player_x + dx, dungeon.player_y + dy
    if not room.in_bounds(nx, ny):
        raise MoveBlocked("You can't move there!")
    tile = room.tile_at(nx, ny)
    if not tile.walkable:
        raise MoveBlocked("You bump into a wall!")
    dungeon.player_x, dungeon.player_y = nx, ny
    if tile is Tile.STAIRS:
        return "You see stairs leading down..."
    if tile is Tile.DOOR:
        return "You stand at a doorway."
    return "You move."


def change_room(dungeon: Dungeon, direction: Direction) -> str:
    """Travel through the current room's ``direction`` exit."""
    target_id = dungeon.current_room.connections.get(direction)
    if target_id is None:
        raise NoExitDirection(direction)
    dungeon.current_room_id = target_id
    dungeon.player_x, dungeon.player_y = dungeon.current_room.entry_point(direction)
    return f"You move {direction} into a new area."


def describe_position(dungeon: Dungeon) -> Tuple[str, List[str]]:
    """Return (description, exits) for the player's current room."""
    room = dungeon.current_room
    tile = room.tile_at(dungeon.player_x, dungeon.player_y)
    desc = f"{room.name}: {room.description}"
    if tile is Tile.STAIRS:
        desc += " Stairs lead down from here."
    elif tile is Tile.DOOR:
        desc += " You stand at a doorway."
    exits = [str(d) for d in room.exits()]
    if exits:
        desc += " Exits: " + ", ".join(e.capitalize() for e in exits) + "."
    return desc, exits
