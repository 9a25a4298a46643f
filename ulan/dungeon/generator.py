"""Dungeon assembly: generation strategies and the registry that holds them.

A strategy is anything with ``name() -> str`` and
``generate(config, seed) -> Dungeon``. ``SimpleGenerator`` runs the phases:
validate config, place rooms, plan corridors, infer connections,
materialize rooms, then put the player at the first room's centre.
"""
from __future__ import annotations

import random
import time
from typing import Dict, List, Optional, Protocol, runtime_checkable

from ..logging_utils import get_logger
from .config import GeneratorConfig
from .connectivity import count_edges, infer_connections, unreachable_from
from .dungeon import Dungeon
from .errors import GenerationError
from .materialize import build_rooms
from .metrics import init_metrics, init_timings
from .rooms import place_rooms
from .tunnels import plan_corridors

log = get_logger("ulan.dungeon")


@runtime_checkable
class DungeonGenerator(Protocol):
    def name(self) -> str: ...

    def generate(self, config: GeneratorConfig, seed: int) -> Dungeon: ...


class SimpleGenerator:
    def name(self) -> str:
        return "Simple Room Generator"

    def generate(self, config: GeneratorConfig, seed: int) -> Dungeon:
        config.validate()
        # Local RNG so callers' use of the random module never affects layouts
        rng = random.Random(seed)
        plog = log.bind(generator=self.name(), seed=seed)
        metrics = init_metrics()
        timings = init_timings()
        phase_times: Dict[str, int] = timings["phase_ms"]
        start = time.perf_counter()

        def _phase(label, fn, *a, **k):
            ps = time.perf_counter(); r = fn(*a, **k); pe = time.perf_counter()
            phase_times[label] = int((pe - ps) * 1000)
            plog.debug(event="generation_phase", phase=label, ms=phase_times[label])
            return r

        placements = _phase("place_rooms", place_rooms, config, rng, metrics)
        corridors = _phase("plan_corridors", plan_corridors, placements, rng)
        connections = _phase("infer_connections", infer_connections, placements)
        rooms = _phase("materialize", build_rooms, placements, connections, metrics)

        start_room = rooms[placements[0].id]
        player_x, player_y = start_room.center
        metrics["rooms"] = len(rooms)
        metrics["connections"] = count_edges(connections)
        metrics["corridor_segments"] = sum(len(path) for path in corridors)
        metrics["unreachable_rooms"] = len(unreachable_from(start_room.id, [p.id for p in placements], connections))
        timings["runtime_ms"] = int((time.perf_counter() - start) * 1000)
        return Dungeon(
            rooms=rooms,
            current_room_id=start_room.id,
            player_x=player_x,
            player_y=player_y,
            seed=seed,
            config=config,
            corridors=corridors,
            generator=self.name(),
            metrics=metrics,
            timings=timings,
        )


class GeneratorRegistry:
    """Caller-owned lookup of generation strategies by short key."""

    def __init__(self):
        self._generators: Dict[str, DungeonGenerator] = {}

    def register(self, key: str, generator: DungeonGenerator) -> DungeonGenerator:
        if not isinstance(generator, DungeonGenerator):
            raise TypeError(f"{generator!r} does not implement name()/generate()")
        if key in self._generators:
            raise ValueError(f"generator {key!r} already registered")
        self._generators[key] = generator
        return generator

    def get(self, key: str) -> DungeonGenerator:
        try:
            return self._generators[key]
        except KeyError:
            raise KeyError(f"unknown generator {key!r}") from None

    def __contains__(self, key: str) -> bool:
        return key in self._generators

    def keys(self) -> List[str]:
        return sorted(self._generators)

    def describe(self) -> List[Dict[str, str]]:
        return [{"key": k, "name": self._generators[k].name()} for k in self.keys()]


def default_registry() -> GeneratorRegistry:
    registry = GeneratorRegistry()
    registry.register("simple", SimpleGenerator())
    return registry


def build_dungeon(config: GeneratorConfig, seed: int, generator: Optional[DungeonGenerator] = None) -> Dungeon:
    """Generate a dungeon, logging the outcome. GenerationError propagates to the caller."""
    generator = generator or SimpleGenerator()
    glog = log.bind(generator=generator.name(), seed=seed)
    try:
        dungeon = generator.generate(config, seed)
    except GenerationError as exc:
        glog.warn(event="dungeon_generation_failed", reason=exc)
        raise
    glog.info(
        event="dungeon_generated",
        rooms=dungeon.metrics.get("rooms"),
        connections=dungeon.metrics.get("connections"),
        runtime_ms=dungeon.timings.get("runtime_ms"),
    )
    return dungeon


__all__ = ["DungeonGenerator", "SimpleGenerator", "GeneratorRegistry", "default_registry", "build_dungeon"]
