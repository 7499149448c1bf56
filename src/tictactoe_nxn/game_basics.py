"""
Game basics: coordinates, players, and winning sets for an N x N board.
Notes:
- A cell is a (row, col) pair with 0 <= row, col < N.
- A winning set is one full line: a row, a column, or one of the two diagonals.
- There are 2N + 2 winning sets. For N = 1 all four collapse onto the single cell.
"""
from __future__ import annotations

import enum
from functools import lru_cache
from numbers import Integral
from types import MappingProxyType
from typing import FrozenSet, Iterable, Mapping, NamedTuple, Tuple

from .errors import InvalidSize, OutOfBounds


class Coordinate(NamedTuple):
    row: int
    col: int


WinningSet = Tuple[Coordinate, ...]
PlayerState = FrozenSet[Coordinate]


class Player(enum.Enum):
    X = "X"
    O = "O"

    @property
    def other(self) -> "Player":
        return Player.O if self is Player.X else Player.X


class Outcome(enum.Enum):
    X_WINS = "x_wins"
    O_WINS = "o_wins"
    DRAW = "draw"


def is_valid_size(size: object) -> bool:
    # bool is an Integral subclass but never a board size
    return isinstance(size, Integral) and not isinstance(size, bool) and size >= 1


def validate_size(size: object) -> int:
    if not is_valid_size(size):
        raise InvalidSize(size)
    return int(size)  # type: ignore[arg-type]


def in_bounds(coord: Tuple[int, int], size: int) -> bool:
    row, col = coord
    return 0 <= row < size and 0 <= col < size


def to_coordinate(coord: Iterable[int], size: int) -> Coordinate:
    """Normalize a (row, col) pair and check it against the board size."""
    try:
        row, col = coord
    except (TypeError, ValueError):
        raise OutOfBounds(coord, size) from None
    if not all(isinstance(v, Integral) and not isinstance(v, bool) for v in (row, col)):
        raise OutOfBounds(coord, size)
    c = Coordinate(int(row), int(col))
    if not in_bounds(c, size):
        raise OutOfBounds(c, size)
    return c


@lru_cache(maxsize=None)
def _lines(n: int) -> Mapping[str, Tuple[WinningSet, ...]]:
    rows = tuple(tuple(Coordinate(i, j) for j in range(n)) for i in range(n))
    cols = tuple(tuple(Coordinate(i, j) for i in range(n)) for j in range(n))
    main_diag = tuple(Coordinate(k, k) for k in range(n))
    anti_diag = tuple(Coordinate(n - 1 - k, k) for k in range(n))
    return MappingProxyType({'row': rows, 'col': cols, 'diag': (main_diag, anti_diag)})


def winning_sets_by_kind(n: int) -> Mapping[str, Tuple[WinningSet, ...]]:
    return _lines(validate_size(n))


def generate_winning_sets(n: int) -> Tuple[WinningSet, ...]:
    """All winning sets for an n x n board: rows, then columns, then both diagonals.

    The result is immutable and cached per n, so every game of the same size
    shares one tuple.
    """
    return _all_lines(validate_size(n))


@lru_cache(maxsize=None)
def _all_lines(n: int) -> Tuple[WinningSet, ...]:
    by_kind = _lines(n)
    return by_kind['row'] + by_kind['col'] + by_kind['diag']


def is_winning(marks: PlayerState, winning_set: WinningSet) -> bool:
    return all(c in marks for c in winning_set)


def has_any_winning_set(marks: PlayerState, winning_sets: Iterable[WinningSet]) -> bool:
    # A line needs n marks; skip the scan while the player has fewer than that.
    for ws in winning_sets:
        if len(marks) < len(ws):
            return False
        if is_winning(marks, ws):
            return True
    return False


def parse_coordinate(text: str, size: int) -> Coordinate:
    """Parse "r,c" (spaces allowed) into an in-bounds Coordinate."""
    parts = [p.strip() for p in text.split(',')]
    if len(parts) != 2:
        raise OutOfBounds(text, size)
    try:
        row, col = int(parts[0]), int(parts[1])
    except ValueError:
        raise OutOfBounds(text, size) from None
    return to_coordinate((row, col), size)
