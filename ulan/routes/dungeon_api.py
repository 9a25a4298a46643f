"""
project: Myths of Ulan
module: dungeon_api.py
License: MIT

Dungeon generation API routes.

Generates dungeons from a seed plus optional config overrides and serves
individual rooms (with a plain-text view) of a generated dungeon. Results
are cached per (generator, config, seed) since generation is deterministic.
"""

import threading

from flask import Blueprint, current_app, jsonify, request

from ulan.dungeon import (
    GeneratorConfig,
    InsufficientRooms,
    InvalidConfig,
    build_dungeon,
    coerce_seed,
)
from ulan.dungeon.display import render_room

bp_dungeon = Blueprint("dungeon_api", __name__)

# Query parameter -> GeneratorConfig field
_QUERY_FIELDS = {
    "min_rooms": "min_rooms",
    "max_rooms": "max_rooms",
    "min_room_size": "min_room_size",
    "max_room_size": "max_room_size",
    "width": "dungeon_width",
    "height": "dungeon_height",
}

# Simple in-process cache (generator, config, seed) -> Dungeon. Locked because
# the threaded dev server may serve requests concurrently.
_dungeon_cache = {}
_dungeon_cache_lock = threading.Lock()

DEFAULT_MAX_GRID = 250_000


def registry():
    return current_app.extensions["ulan.generators"]


def clear_dungeon_cache():
    with _dungeon_cache_lock:
        _dungeon_cache.clear()


def get_cached_dungeon(generator_key: str, config: GeneratorConfig, seed: int):
    generator = registry().get(generator_key)
    cap = current_app.config.get("DUNGEON_CACHE_MAX")
    if cap is None:
        cap = 8
    # DUNGEON_CACHE_MAX=0 behaves like DUNGEON_DISABLE_CACHE
    if current_app.config.get("DUNGEON_DISABLE_CACHE") or cap <= 0:
        return build_dungeon(config, seed, generator)
    key = (generator_key, config, seed)
    with _dungeon_cache_lock:
        dungeon = _dungeon_cache.get(key)
        if dungeon is not None:
            return dungeon
    dungeon = build_dungeon(config, seed, generator)
    with _dungeon_cache_lock:
        while len(_dungeon_cache) >= cap:
            _dungeon_cache.pop(next(iter(_dungeon_cache)))
        _dungeon_cache[key] = dungeon
    return dungeon


def config_from_request() -> GeneratorConfig:
    """App-level DUNGEON_* defaults overridden by query parameters."""
    base = GeneratorConfig.from_mapping(current_app.config)
    overrides = {}
    for param, field_name in _QUERY_FIELDS.items():
        raw = request.args.get(param)
        if raw is None or raw == "":
            continue
        try:
            overrides[field_name] = int(raw)
        except ValueError:
            raise InvalidConfig(field_name, f"{param} must be an integer (got {raw!r})")
    config = base.with_overrides(**overrides)
    # Placement allocates a width x height occupancy grid; refuse oversized requests up front
    max_grid = current_app.config.get("DUNGEON_MAX_GRID") or DEFAULT_MAX_GRID
    cells = config.dungeon_width * config.dungeon_height
    if cells > max_grid:
        raise InvalidConfig(
            "grid_size",
            f"Dungeon grid of {config.dungeon_width}x{config.dungeon_height} exceeds the {max_grid} cell limit",
        )
    return config.validate()


def _error(status: int, **payload):
    return jsonify(payload), status


def _generate(seed):
    generator_key = request.args.get("generator", "simple")
    if generator_key not in registry():
        return None, _error(404, error="unknown_generator", generator=generator_key)
    try:
        config = config_from_request()
        dungeon = get_cached_dungeon(generator_key, config, seed)
    except InvalidConfig as exc:
        return None, _error(400, error="invalid_config", constraint=exc.constraint, message=exc.message)
    except InsufficientRooms as exc:
        return None, _error(
            422, error="insufficient_rooms", achieved=exc.achieved, required=exc.required, message=str(exc)
        )
    return dungeon, None


@bp_dungeon.route("/api/generators")
def list_generators():
    return jsonify({"generators": registry().describe()})


@bp_dungeon.route("/api/dungeon")
def generate_dungeon():
    """Generate (or fetch cached) dungeon.

    Query (all optional): seed (int or text), generator, min_rooms, max_rooms,
    min_room_size, max_room_size, width, height.
    """
    seed = coerce_seed(request.args.get("seed"))
    dungeon, err = _generate(seed)
    if err is not None:
        return err
    return jsonify(dungeon.to_dict())


@bp_dungeon.route("/api/dungeon/<seed>/rooms/<room_id>")
def get_room(seed, room_id):
    dungeon, err = _generate(coerce_seed(seed))
    if err is not None:
        return err
    room = dungeon.rooms.get(room_id)
    if room is None:
        return _error(404, error="unknown_room", room_id=room_id)
    player = dungeon.player_pos if room_id == dungeon.current_room_id else None
    payload = room.to_dict()
    payload["ascii"] = render_room(room, player)
    return jsonify(payload)
