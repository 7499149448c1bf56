"""tictactoe_nxn package.

Winning-set generation and a turn state machine for N x N tic-tac-toe, plus
line features and a small CLI.

Convenience imports are exposed for common workflows.
"""

from .engine import (
    GamePhase,
    GameState,
    cell_label,
    cell_playable,
    current_status_text,
    evaluate_terminal,
    new_game,
    outcome_text,
    place_mark,
    restart,
    start_game,
)
from .errors import GameError, InvalidSize, InvalidTransition, OccupiedCell, OutOfBounds
from .game_basics import Coordinate, Outcome, Player, generate_winning_sets, is_winning

__all__ = [
    "Coordinate",
    "Player",
    "Outcome",
    "GamePhase",
    "GameState",
    "generate_winning_sets",
    "is_winning",
    "new_game",
    "start_game",
    "place_mark",
    "evaluate_terminal",
    "restart",
    "current_status_text",
    "outcome_text",
    "cell_label",
    "cell_playable",
    "GameError",
    "InvalidSize",
    "OutOfBounds",
    "OccupiedCell",
    "InvalidTransition",
]
