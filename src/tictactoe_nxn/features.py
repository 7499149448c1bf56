"""
Line features for N x N boards.

Lines are the winning sets in generation order (rows, columns, diagonals).
Cells are flattened as r * n + c.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Dict

import numpy as np

from .engine import GameState
from .game_basics import Player, generate_winning_sets, validate_size


@lru_cache(maxsize=None)
def _incidence(n: int) -> np.ndarray:
    lines = generate_winning_sets(n)
    inc = np.zeros((len(lines), n * n), dtype=np.uint8)
    for li, line in enumerate(lines):
        for r, c in line:
            inc[li, r * n + c] = 1
    inc.setflags(write=False)
    return inc


def line_incidence(n: int) -> np.ndarray:
    """(2n+2, n*n) 0/1 matrix; row i marks the cells of winning set i. Read-only."""
    return _incidence(validate_size(n))


def cell_line_counts(n: int) -> np.ndarray:
    """Number of winning sets passing through each cell, shaped (n, n)."""
    n = validate_size(n)
    return line_incidence(n).sum(axis=0, dtype=np.int64).reshape(n, n)


def _mark_vector(state: GameState, player: Player) -> np.ndarray:
    v = np.zeros(state.size * state.size, dtype=np.int64)
    for r, c in state.marks_of(player):
        v[r * state.size + c] = 1
    return v


def line_progress(state: GameState, player: Player) -> np.ndarray:
    """Marks `player` holds on each winning set. Empty for a game not started."""
    if state.size == 0:
        return np.zeros(0, dtype=np.int64)
    return line_incidence(state.size).astype(np.int64) @ _mark_vector(state, player)


def calculate_line_threats(state: GameState, player: Player) -> Dict[str, int]:
    threats = {
        'row_threats': 0,
        'col_threats': 0,
        'diag_threats': 0,
        'total_threats': 0,
        'best_line': 0,
    }
    if state.size == 0:
        return threats
    n = state.size
    mine = line_progress(state, player)
    theirs = line_progress(state, player.other)
    # only lines the opponent has not touched can still be completed
    open_mine = np.where(theirs == 0, mine, 0)
    threats['row_threats'] = int(open_mine[:n].sum())
    threats['col_threats'] = int(open_mine[n:2 * n].sum())
    threats['diag_threats'] = int(open_mine[2 * n:].sum())
    threats['total_threats'] = int(open_mine.sum())
    threats['best_line'] = int(open_mine.max())
    return threats


def calculate_game_phase(state: GameState) -> str:
    cells = state.size * state.size
    filled = state.move_count / cells if cells else 0.0
    if filled <= 0.25:
        return 'opening'
    elif filled <= 2 / 3:
        return 'midgame'
    else:
        return 'endgame'
