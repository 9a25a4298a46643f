"""Exceptions raised by dungeon generation and movement.

Nothing here is fatal: generation can be retried with another seed or a
relaxed config, and movement errors carry text meant for the player.
"""

from __future__ import annotations


class GenerationError(Exception):
    """Base class for failures while building a dungeon."""


class InvalidConfig(GenerationError):
    def __init__(self, constraint: str, message: str):
        super().__init__(message)
        self.constraint = constraint
        self.message = message


class InsufficientRooms(GenerationError):
    def __init__(self, achieved: int, required: int):
        super().__init__(f"Could only generate {achieved} rooms, minimum is {required}")
        self.achieved = achieved
        self.required = required


class MovementError(Exception):
    """Base class for rejected player moves; str(exc) is user-facing."""


class MoveBlocked(MovementError):
    pass


class NoExitDirection(MovementError):
    def __init__(self, direction):
        super().__init__("There's no exit in that direction!")
        self.direction = direction


__all__ = [
    "GenerationError",
    "InvalidConfig",
    "InsufficientRooms",
    "MovementError",
    "MoveBlocked",
    "NoExitDirection",
]
