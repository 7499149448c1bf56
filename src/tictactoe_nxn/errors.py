"""
Errors raised by the rules engine.

All of them are recoverable: the caller keeps the previous state and retries
with valid input.
"""


class GameError(ValueError):
    """Base class for rejected game events."""


class InvalidSize(GameError):
    def __init__(self, size: object):
        self.size = size
        super().__init__(f"Board size must be a positive integer, got {size!r}")


class OutOfBounds(GameError):
    def __init__(self, coord: object, size: int):
        self.coord = coord
        self.size = size
        super().__init__(f"Coordinate {coord!r} is outside a {size}x{size} board")


class OccupiedCell(GameError):
    def __init__(self, coord: object):
        self.coord = coord
        super().__init__(f"Cell {tuple(coord)!r} is already occupied")


class InvalidTransition(GameError):
    def __init__(self, event: str, phase: object):
        self.event = event
        self.phase = phase
        super().__init__(f"Cannot {event} while {phase}")
