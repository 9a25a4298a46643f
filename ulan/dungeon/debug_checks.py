"""Structural diagnostics for generated dungeons.

``analyze`` never raises on a malformed dungeon; it reports what it found so
scripts and tests can print the offending seed and rooms.
"""

from __future__ import annotations

from itertools import combinations
from typing import Any, Dict

from .dungeon import Dungeon, Room
from .tiles import Tile


def _padded_overlap(a: Room, b: Room) -> bool:
    # a grown by one cell against b's raw footprint
    return a.x - 1 < b.x + b.width and a.x + a.width + 1 > b.x and a.y - 1 < b.y + b.height and a.y + a.height + 1 > b.y


def analyze(dungeon: Dungeon) -> Dict[str, Any]:
    rooms = dungeon.rooms
    config = dungeon.config
    overlapping = [(a.id, b.id) for a, b in combinations(rooms.values(), 2) if _padded_overlap(a, b)]
    out_of_bounds = []
    if config is not None:
        for room in rooms.values():
            if room.x < 0 or room.y < 0 or room.x + room.width > config.dungeon_width or room.y + room.height > config.dungeon_height:
                out_of_bounds.append(room.id)
    dangling = []
    asymmetric = []
    missing_doors = []
    for room in rooms.values():
        for direction, target_id in room.connections.items():
            if target_id not in rooms:
                dangling.append((room.id, str(direction), target_id))
                continue
            if rooms[target_id].connections.get(direction.opposite) != room.id:
                asymmetric.append((room.id, str(direction), target_id))
            dx, dy = room.door_position(direction)
            if room.tile_at(dx, dy) is not Tile.DOOR:
                missing_doors.append((room.id, str(direction)))
    stairs = sum(room.count(Tile.STAIRS) for room in rooms.values())
    current = rooms.get(dungeon.current_room_id)
    spawn_walkable = bool(
        current is not None
        and current.in_bounds(dungeon.player_x, dungeon.player_y)
        and current.tile_at(dungeon.player_x, dungeon.player_y).walkable
    )
    count_ok = True
    if config is not None:
        count_ok = config.min_rooms <= len(rooms) <= config.max_rooms
    return {
        "rooms": len(rooms),
        "overlapping_rooms": overlapping,
        "out_of_bounds_rooms": out_of_bounds,
        "dangling_connections": dangling,
        "asymmetric_connections": asymmetric,
        "missing_doors": missing_doors,
        "stairs": stairs,
        "spawn_walkable": spawn_walkable,
        "room_count_ok": count_ok,
    }


def is_healthy(report: Dict[str, Any]) -> bool:
    return (
        not report["overlapping_rooms"]
        and not report["out_of_bounds_rooms"]
        and not report["dangling_connections"]
        and not report["asymmetric_connections"]
        and not report["missing_doors"]
        and report["stairs"] == 1
        and report["spawn_walkable"]
        and report["room_count_ok"]
    )
