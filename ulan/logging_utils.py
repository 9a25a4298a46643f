"""Minimal structured logging helper.

Emits key=value pairs with a timestamp and level (or one JSON object per
line when ``ULAN_LOG_JSON`` is set). Generation code logs through this so
seeds and room counts stay greppable in server output.

Usage:
    from ulan.logging_utils import log
    log.info(event="dungeon_generated", seed=42, rooms=7)

    glog = log.bind(seed=42, generator="simple")
    glog.debug(event="generation_phase", phase="place_rooms", ms=3)

All non-str values are str()'d. Reserved keys: level, ts, logger.
"""

from __future__ import annotations

import json
import os
import sys
import time

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}
CURRENT_LEVEL = LEVELS.get(os.getenv("ULAN_LOG_LEVEL", "info"), 20)
JSON_MODE = os.getenv("ULAN_LOG_JSON", "0") in ("1", "true", "TRUE", "yes", "on")


def _format(level: str, **fields):
    if JSON_MODE:
        rec = {k: v for k, v in fields.items() if v is not None}
        rec["level"] = level
        rec["ts"] = int(time.time())
        return json.dumps(rec, separators=(",", ":"), default=str)
    parts = [f"level={level}", f"ts={int(time.time())}"]
    for k, v in fields.items():
        if v is None:
            continue
        if isinstance(v, (int, float)):
            parts.append(f"{k}={v}")
        else:
            s = str(v).replace(" ", "_")
            parts.append(f"{k}={s}")
    return " ".join(parts)


class _Logger:
    def __init__(self, name: str | None = None, context: dict | None = None):
        self.name = name or "ulan"
        self.context = dict(context or {})

    def bind(self, **context):
        """Return a logger that adds ``context`` (e.g. seed, generator) to every record."""
        merged = dict(self.context)
        merged.update(context)
        return _Logger(self.name, merged)

    def _log(self, lvl: str, **fields):
        if LEVELS[lvl] < CURRENT_LEVEL:
            return
        # Call-site fields come first and win over bound context
        for k, v in self.context.items():
            fields.setdefault(k, v)
        if "logger" not in fields:
            fields["logger"] = self.name
        print(_format(lvl, **fields), file=sys.stderr)

    def debug(self, **fields):
        self._log("debug", **fields)

    def info(self, **fields):
        self._log("info", **fields)

    def warn(self, **fields):
        self._log("warn", **fields)

    def error(self, **fields):
        self._log("error", **fields)


_LOGGER_CACHE = {}


def get_logger(name: str):
    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = _Logger(name)
    return _LOGGER_CACHE[name]


log = get_logger("ulan")
