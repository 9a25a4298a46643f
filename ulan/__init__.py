"""
project: Myths of Ulan
module: __init__.py
License: MIT

Flask application setup for the dungeon generation service.

Configuration is sourced from environment variables (optionally via a local
``.env`` file) with defaults matching the stock generator settings. A local
`instance/` directory holds runtime data such as the server log.
"""

import os

from dotenv import load_dotenv
from flask import Flask

from ulan.dungeon import default_registry

# Load .env if present so DUNGEON_* settings can be supplied without
# exporting shell variables during development.
load_dotenv()

app = Flask(__name__, instance_relative_config=True)
# Keep room ids and connection maps in generation order
app.json.sort_keys = False

try:
    os.makedirs(app.instance_path, exist_ok=True)
except OSError:
    # Read-only installs still serve requests; only file logging needs it
    pass


def _env_int(key: str, default: int | None = None) -> int | None:
    raw = os.getenv(key)
    if raw is None or raw.strip() == "":
        return default
    return int(raw)


app.config.update(
    SECRET_KEY=os.getenv("SECRET_KEY", "dev-secret-change-me"),
    # Dungeon generation defaults (None falls back to GeneratorConfig defaults)
    DUNGEON_MIN_ROOMS=_env_int("DUNGEON_MIN_ROOMS"),
    DUNGEON_MAX_ROOMS=_env_int("DUNGEON_MAX_ROOMS"),
    DUNGEON_MIN_ROOM_SIZE=_env_int("DUNGEON_MIN_ROOM_SIZE"),
    DUNGEON_MAX_ROOM_SIZE=_env_int("DUNGEON_MAX_ROOM_SIZE"),
    DUNGEON_WIDTH=_env_int("DUNGEON_WIDTH"),
    DUNGEON_HEIGHT=_env_int("DUNGEON_HEIGHT"),
    DUNGEON_CACHE_MAX=_env_int("DUNGEON_CACHE_MAX", 8),
    # Upper bound on width * height accepted from API requests
    DUNGEON_MAX_GRID=_env_int("DUNGEON_MAX_GRID", 250_000),
    DUNGEON_DISABLE_CACHE=os.getenv("DUNGEON_DISABLE_CACHE", "0") == "1",
)

# The app owns its generator registry; routes look strategies up here
app.extensions["ulan.generators"] = default_registry()

from ulan.routes.dungeon_api import bp_dungeon  # noqa: E402

app.register_blueprint(bp_dungeon)


def create_app():
    """Return the Flask app instance."""
    return app
