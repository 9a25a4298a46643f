from __future__ import annotations

import hashlib
import random
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Mapping, Optional

from .errors import InvalidConfig

SEED_MODULUS = 2**64

# Config attribute -> upper-case key suffix used in env / Flask config
_KEY_NAMES = {
    "min_rooms": "MIN_ROOMS",
    "max_rooms": "MAX_ROOMS",
    "min_room_size": "MIN_ROOM_SIZE",
    "max_room_size": "MAX_ROOM_SIZE",
    "dungeon_width": "WIDTH",
    "dungeon_height": "HEIGHT",
}


@dataclass(frozen=True)
class GeneratorConfig:
    min_rooms: int = 5
    max_rooms: int = 10
    min_room_size: int = 5
    max_room_size: int = 12
    dungeon_width: int = 80
    dungeon_height: int = 50

    def validate(self) -> "GeneratorConfig":
        """Raise InvalidConfig for the first violated constraint; return self otherwise."""
        if self.min_rooms < 1:
            raise InvalidConfig("min_rooms", f"min_rooms must be at least 1 (got {self.min_rooms})")
        if self.min_rooms > self.max_rooms:
            raise InvalidConfig(
                "room_count",
                f"min_rooms ({self.min_rooms}) must not exceed max_rooms ({self.max_rooms})",
            )
        if self.min_room_size < 3:
            raise InvalidConfig(
                "min_room_size",
                f"min_room_size must be at least 3 to leave an interior floor (got {self.min_room_size})",
            )
        if self.min_room_size > self.max_room_size:
            raise InvalidConfig(
                "room_size",
                f"min_room_size ({self.min_room_size}) must not exceed max_room_size ({self.max_room_size})",
            )
        for axis, extent in (("width", self.dungeon_width), ("height", self.dungeon_height)):
            if self.min_room_size + 2 > extent:
                raise InvalidConfig(
                    f"fit_{axis}",
                    f"a {self.min_room_size}-cell room plus border margin cannot fit in dungeon {axis} {extent}",
                )
            if self.max_room_size >= extent:
                raise InvalidConfig(
                    f"max_room_size_{axis}",
                    f"max_room_size ({self.max_room_size}) must be smaller than dungeon {axis} ({extent})",
                )
        return self

    def with_overrides(self, **overrides: Optional[int]) -> "GeneratorConfig":
        """Copy with every non-None override applied."""
        changes = {k: int(v) for k, v in overrides.items() if v is not None}
        return replace(self, **changes)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any], prefix: str = "DUNGEON_") -> "GeneratorConfig":
        """Build from upper-case keys such as ``DUNGEON_MIN_ROOMS`` (env or Flask config)."""
        values = {}
        for f in fields(cls):
            raw = mapping.get(prefix + _KEY_NAMES[f.name])
            if raw is None or raw == "":
                continue
            try:
                values[f.name] = int(raw)
            except (TypeError, ValueError):
                raise InvalidConfig(f.name, f"{prefix}{_KEY_NAMES[f.name]} must be an integer (got {raw!r})")
        return cls(**values)

    def to_dict(self):
        return asdict(self)


def coerce_seed(value) -> int:
    """Convert a provided seed (int, integer string, free text or None) into a 64-bit seed."""
    if value is None:
        return random.randint(1, 1_000_000)
    if isinstance(value, bool):
        raise TypeError("seed must be an int or str")
    if isinstance(value, int):
        return value % SEED_MODULUS
    if isinstance(value, str):
        s = value.strip()
        if not s:
            return random.randint(1, 1_000_000)
        try:
            return int(s) % SEED_MODULUS
        except ValueError:
            pass
        h = hashlib.sha256(s.encode("utf-8")).digest()
        return int.from_bytes(h[:8], "big")
    raise TypeError(f"unsupported seed type: {type(value).__name__}")


__all__ = ["GeneratorConfig", "coerce_seed", "SEED_MODULUS"]
