"""Plain-text room views built from the tile glyph table."""

from __future__ import annotations

from typing import Optional, Tuple

from .dungeon import Dungeon, Room
from .tiles import PLAYER_GLYPH


def room_rows(room: Room, player: Optional[Tuple[int, int]] = None):
    rows = []
    for y, row in enumerate(room.tiles):
        chars = [t.glyph for t in row]
        if player is not None and player[1] == y and 0 <= player[0] < len(chars):
            chars[player[0]] = PLAYER_GLYPH
        rows.append("".join(chars))
    return rows


def render_room(room: Room, player: Optional[Tuple[int, int]] = None) -> str:
    lines = [f"=== {room.name} ===", room.description, ""]
    lines.extend(room_rows(room, player))
    exits = room.exits()
    if exits:
        lines.append("")
        lines.append("Exits: " + ", ".join(str(d) for d in exits))
    return "\n".join(lines)


def render_current_room(dungeon: Dungeon) -> str:
    return render_room(dungeon.current_room, dungeon.player_pos)
