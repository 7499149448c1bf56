"""
Turn state machine for N x N tic-tac-toe.

Every transition is a pure function: it takes a GameState and returns a new
one, or raises a GameError and leaves the caller's state as it was.

    NotStarted --start_game(n)--> TurnOf(X) --place_mark--> TurnOf(O) --> ...
                                         \--> Ended(XWins | OWins | Draw)
    any phase --restart--> NotStarted
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import List, Optional, Tuple

from .errors import InvalidSize, InvalidTransition, OccupiedCell
from .game_basics import (
    Outcome,
    Player,
    PlayerState,
    WinningSet,
    generate_winning_sets,
    has_any_winning_set,
    to_coordinate,
    validate_size,
)

NOT_STARTED_KIND = 'not_started'
TURN_KIND = 'turn'
ENDED_KIND = 'ended'

STATUS_ENTER_SIZE = "enter size"
STATUS_GAME_OVER = "game over"

OUTCOME_TEXT = {
    Outcome.X_WINS: "X won",
    Outcome.O_WINS: "O won",
    Outcome.DRAW: "Draw",
}


@dataclass(frozen=True)
class GamePhase:
    kind: str
    player: Optional[Player] = None
    outcome: Optional[Outcome] = None

    @classmethod
    def turn_of(cls, player: Player) -> "GamePhase":
        return cls(TURN_KIND, player=player)

    @classmethod
    def ended(cls, outcome: Outcome) -> "GamePhase":
        return cls(ENDED_KIND, outcome=outcome)

    @property
    def is_turn(self) -> bool:
        return self.kind == TURN_KIND

    @property
    def is_ended(self) -> bool:
        return self.kind == ENDED_KIND

    def __str__(self) -> str:
        if self.kind == TURN_KIND:
            return f"TurnOf({self.player.value})"
        if self.kind == ENDED_KIND:
            return f"Ended({self.outcome.value})"
        return "NotStarted"


NOT_STARTED = GamePhase(NOT_STARTED_KIND)


@dataclass(frozen=True)
class GameState:
    phase: GamePhase = NOT_STARTED
    size: int = 0
    winning_sets: Tuple[WinningSet, ...] = ()
    x_marks: PlayerState = field(default_factory=frozenset)
    o_marks: PlayerState = field(default_factory=frozenset)

    def marks_of(self, player: Player) -> PlayerState:
        return self.x_marks if player is Player.X else self.o_marks

    def owner(self, coord: Tuple[int, int]) -> Optional[Player]:
        if coord in self.x_marks:
            return Player.X
        if coord in self.o_marks:
            return Player.O
        return None

    @property
    def move_count(self) -> int:
        return len(self.x_marks) + len(self.o_marks)

    @property
    def to_move(self) -> Optional[Player]:
        return self.phase.player if self.phase.is_turn else None


def new_game() -> GameState:
    return GameState()


def _coerce_size(size: object) -> int:
    # Input layers hand over raw text; accept strict decimal integers only.
    if isinstance(size, str):
        try:
            size = int(size.strip())
        except ValueError:
            raise InvalidSize(size) from None
    return validate_size(size)


def start_game(size: object) -> GameState:
    """Start a new game on a size x size board with X to move.

    Raises InvalidSize for anything that is not a positive integer (strings of
    decimal digits are accepted).
    """
    n = _coerce_size(size)
    logging.debug("start_game size=%d", n)
    return GameState(
        phase=GamePhase.turn_of(Player.X),
        size=n,
        winning_sets=generate_winning_sets(n),
    )


def evaluate_terminal(state: GameState) -> GamePhase:
    """Decide the phase that follows the move just applied to `state`.

    Precedence is fixed: X win, then O win, then draw. A non-terminal result
    hands the turn to the other player.
    """
    if not state.phase.is_turn:
        return state.phase
    if has_any_winning_set(state.x_marks, state.winning_sets):
        return GamePhase.ended(Outcome.X_WINS)
    if has_any_winning_set(state.o_marks, state.winning_sets):
        return GamePhase.ended(Outcome.O_WINS)
    if state.move_count == state.size * state.size:
        return GamePhase.ended(Outcome.DRAW)
    return GamePhase.turn_of(state.phase.player.other)


def place_mark(state: GameState, coord: Tuple[int, int]) -> GameState:
    """Place the current player's mark on `coord` and advance the game.

    Raises InvalidTransition outside a turn, OutOfBounds for cells off the
    board and OccupiedCell for cells either player already holds. On any error
    the given state is untouched and the same player is still to move.
    """
    if not state.phase.is_turn:
        logging.debug("rejected place_mark %r in phase %s", coord, state.phase)
        raise InvalidTransition("place a mark", state.phase)
    c = to_coordinate(coord, state.size)
    if state.owner(c) is not None:
        logging.debug("rejected place_mark %r: occupied by %s", c, state.owner(c).value)
        raise OccupiedCell(c)

    player = state.phase.player
    if player is Player.X:
        moved = replace(state, x_marks=state.x_marks | {c})
    else:
        moved = replace(state, o_marks=state.o_marks | {c})
    phase = evaluate_terminal(moved)
    logging.debug("%s -> (%d, %d); phase=%s", player.value, c.row, c.col, phase)
    if phase.is_ended:
        logging.info("game over: %s", OUTCOME_TEXT[phase.outcome])
    return replace(moved, phase=phase)


def restart(state: GameState) -> GameState:
    logging.debug("restart from phase=%s", state.phase)
    return new_game()


def current_status_text(state: GameState) -> str:
    if state.phase.is_turn:
        return f"{state.phase.player.value} plays"
    if state.phase.is_ended:
        return STATUS_GAME_OVER
    return STATUS_ENTER_SIZE


def outcome_text(state: GameState) -> Optional[str]:
    if not state.phase.is_ended:
        return None
    return OUTCOME_TEXT[state.phase.outcome]


def cell_label(state: GameState, coord: Tuple[int, int]) -> str:
    owner = state.owner(tuple(coord))
    return owner.value if owner is not None else ""


def cell_playable(state: GameState, coord: Tuple[int, int]) -> bool:
    """True when placing on `coord` would be accepted right now."""
    if not state.phase.is_turn:
        return False
    row, col = coord
    if not (0 <= row < state.size and 0 <= col < state.size):
        return False
    return state.owner((row, col)) is None


def format_marks(marks: PlayerState) -> List[str]:
    return [f"{c.row},{c.col}" for c in sorted(marks)]
