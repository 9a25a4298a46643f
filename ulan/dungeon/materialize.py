"""Turn room placements plus the connection graph into final Room objects."""
from __future__ import annotations

from typing import Dict, Optional, Sequence

from .connectivity import ConnectionGraph
from .dungeon import Room
from .features import describe_room, place_stairs
from .rooms import RoomPlacement


def build_rooms(
    placements: Sequence[RoomPlacement],
    connections: ConnectionGraph,
    metrics: Optional[dict] = None,
) -> Dict[str, Room]:
    """Materialize every placement, in generation order.

    Doors are carved for each recorded connection; the last placement
    receives the single Stairs tile at its centre.
    """
    rooms: Dict[str, Room] = {}
    doors = 0
    for idx, p in enumerate(placements):
        room = Room.blank(p.id, p.name, describe_room(idx), p.width, p.height, x=p.x, y=p.y)
        for target_id, direction in connections.get(p.id, []):
            room.add_door(direction, target_id)
            doors += 1
        rooms[p.id] = room
    if placements:
        place_stairs(rooms[placements[-1].id])
    if metrics is not None:
        metrics["doors"] = doors
    return rooms
