from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, List, Optional

from .config import default_board_size, default_log_level
from .engine import (
    GameState,
    current_status_text,
    format_marks,
    outcome_text,
    place_mark,
    start_game,
)
from .errors import GameError
from .features import calculate_game_phase, calculate_line_threats, cell_line_counts
from .game_basics import Player, parse_coordinate, winning_sets_by_kind


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ttt-nxn", description="N x N tic-tac-toe rules engine")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument(
        "--info",
        action="store_true",
        help="Print environment and dependency info and exit",
    )

    p_ws = sub.add_parser("winsets", help="List the winning sets for a board size")
    p_ws.add_argument("--size", default=None, help="Board size (default: $TTT_BOARD_SIZE or 3)")
    p_ws.add_argument(
        "--coverage", action="store_true", help="Also print how many sets pass through each cell"
    )

    p_play = sub.add_parser("play", help="Replay a sequence of moves, X first")
    p_play.add_argument("--size", default=None, help="Board size (default: $TTT_BOARD_SIZE or 3)")
    p_play.add_argument("--moves", nargs="*", default=[], help='Moves as "row,col", e.g. 0,0 1,1')
    p_play.add_argument(
        "--stdin",
        action="store_true",
        help="Read one move per line from stdin; rejected moves are skipped",
    )

    p_feat = sub.add_parser("features", help="Line features for both players after some moves")
    p_feat.add_argument("--size", default=None, help="Board size (default: $TTT_BOARD_SIZE or 3)")
    p_feat.add_argument("--moves", nargs="*", default=[], help='Moves as "row,col"')

    return p


def _print_info() -> None:
    import importlib.util
    import platform

    print(f"python={sys.version.split()[0]} platform={platform.platform()}")
    for pkg in ["numpy"]:
        spec = importlib.util.find_spec(pkg)
        if spec is None:
            print(f"{pkg}=<not installed>")
        else:
            mod = __import__(pkg)
            ver = getattr(mod, "__version__", "?")
            print(f"{pkg}={ver}")


def _replay(state: GameState, moves: Iterable[str]) -> GameState:
    for raw in moves:
        coord = parse_coordinate(raw, state.size)
        mover = state.to_move
        state = place_mark(state, coord)
        logging.info(
            "%s -> %d,%d status=%s",
            mover.value if mover else "?",
            coord.row,
            coord.col,
            current_status_text(state),
        )
    return state


def _replay_lenient(state: GameState, lines: Iterable[str]) -> GameState:
    for line in lines:
        raw = line.strip()
        if not raw:
            continue
        try:
            state = _replay(state, [raw])
        except GameError as e:
            logging.warning("skipped %r: %s", raw, e)
    return state


def _report(state: GameState) -> None:
    logging.info("x=%s", " ".join(format_marks(state.x_marks)))
    logging.info("o=%s", " ".join(format_marks(state.o_marks)))
    result = outcome_text(state)
    if result is not None:
        logging.info("result=%s", result)
    else:
        logging.info("status=%s", current_status_text(state))


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else default_log_level(),
                        format="[%(levelname)s] %(message)s")

    # Early exits
    if getattr(ns, "version", False):
        try:
            from importlib.metadata import version as _ver

            print(_ver("tictactoe-nxn"))
        except Exception:
            print("unknown")
        return 0
    if getattr(ns, "info", False):
        _print_info()
        return 0

    if ns.cmd is None:
        parser.print_help()
        return 0

    try:
        size = ns.size if ns.size is not None else default_board_size()
        state = start_game(size)
    except GameError as e:
        logging.error("%s", e)
        return 2

    if ns.cmd == "winsets":
        by_kind = winning_sets_by_kind(state.size)
        for kind in ("row", "col", "diag"):
            for ws in by_kind[kind]:
                print(kind, " ".join(f"{r},{c}" for r, c in ws))
        if ns.coverage:
            for row in cell_line_counts(state.size):
                print(" ".join(str(int(v)) for v in row))
        logging.info("size=%d winning_sets=%d", state.size, len(state.winning_sets))
        return 0

    if ns.cmd == "play":
        if ns.stdin:
            state = _replay_lenient(state, sys.stdin)
        else:
            for raw in ns.moves:
                try:
                    state = _replay(state, [raw])
                except GameError as e:
                    logging.error("%s", e)
                    _report(state)
                    return 2
        _report(state)
        return 0

    if ns.cmd == "features":
        try:
            state = _replay(state, ns.moves)
        except GameError as e:
            logging.error("%s", e)
            return 2
        for player in (Player.X, Player.O):
            t = calculate_line_threats(state, player)
            logging.info(
                "%s rows=%d cols=%d diags=%d total=%d best_line=%d/%d",
                player.value,
                t['row_threats'],
                t['col_threats'],
                t['diag_threats'],
                t['total_threats'],
                t['best_line'],
                state.size,
            )
        logging.info("phase=%s", calculate_game_phase(state))
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
