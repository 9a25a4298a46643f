"""Adjacency inference between placed rooms.

A room B counts as north of room A when B lies entirely above A and A's
horizontal centre falls inside B's horizontal span (south/east/west are the
mirrored tests). That predicate is evaluated from A's side only, so scanning
(B, A) does not necessarily yield the mirror image. Edges are therefore
accepted once per unordered pair and written to both rooms, nearest gap
first, with at most one neighbour per room and direction.
"""

from __future__ import annotations

from collections import deque
from typing import Dict, List, Optional, Sequence, Set, Tuple

from .directions import Direction
from .rooms import RoomPlacement

ConnectionGraph = Dict[str, List[Tuple[str, Direction]]]


def adjacent_direction(a: RoomPlacement, b: RoomPlacement) -> Optional[Direction]:
    """Direction from ``a`` to ``b`` when they face each other, else None."""
    acx, acy = a.center
    in_b_columns = b.x <= acx < b.x + b.width
    in_b_rows = b.y <= acy < b.y + b.height
    if b.y + b.height < a.y and in_b_columns:
        return Direction.NORTH
    if a.y + a.height < b.y and in_b_columns:
        return Direction.SOUTH
    if a.x + a.width < b.x and in_b_rows:
        return Direction.EAST
    if b.x + b.width < a.x and in_b_rows:
        return Direction.WEST
    return None


def gap_between(a: RoomPlacement, b: RoomPlacement, direction: Direction) -> int:
    if direction is Direction.NORTH:
        return a.y - (b.y + b.height)
    if direction is Direction.SOUTH:
        return b.y - (a.y + a.height)
    if direction is Direction.EAST:
        return b.x - (a.x + a.width)
    return a.x - (b.x + b.width)


def infer_connections(placements: Sequence[RoomPlacement]) -> ConnectionGraph:
    candidates = []
    for i, a in enumerate(placements):
        for j, b in enumerate(placements):
            if i == j:
                continue
            direction = adjacent_direction(a, b)
            if direction is not None:
                candidates.append((gap_between(a, b, direction), i, j, direction))
    candidates.sort(key=lambda c: (c[0], c[1], c[2]))

    taken: Set[Tuple[int, Direction]] = set()
    linked: Set[Tuple[int, int]] = set()
    edges: Dict[int, List[Tuple[int, Direction]]] = {}
    for _gap, i, j, direction in candidates:
        pair = (min(i, j), max(i, j))
        if pair in linked:
            continue
        if (i, direction) in taken or (j, direction.opposite) in taken:
            continue
        linked.add(pair)
        taken.add((i, direction))
        taken.add((j, direction.opposite))
        edges.setdefault(i, []).append((j, direction))
        edges.setdefault(j, []).append((i, direction.opposite))

    connections: ConnectionGraph = {}
    for i in sorted(edges):
        connections[placements[i].id] = [(placements[j].id, d) for j, d in sorted(edges[i], key=lambda e: e[0])]
    return connections


def count_edges(connections: ConnectionGraph) -> int:
    """Number of undirected links in the graph."""
    return sum(len(v) for v in connections.values()) // 2


def unreachable_from(start_id: str, room_ids: Sequence[str], connections: ConnectionGraph) -> List[str]:
    """Room ids not reachable from ``start_id`` by following connections (generation order)."""
    seen = {start_id}
    q = deque([start_id])
    while q:
        rid = q.popleft()
        for neighbor, _direction in connections.get(rid, []):
            if neighbor not in seen:
                seen.add(neighbor)
                q.append(neighbor)
    return [rid for rid in room_ids if rid not in seen]


__all__ = ["ConnectionGraph", "adjacent_direction", "gap_between", "infer_connections", "count_edges", "unreachable_from"]
