from __future__ import annotations

import argparse
import csv
import logging
import sys
from typing import List, Optional

from .board import Board
from .config import configure_logging, load_settings
from .errors import InvalidBoardError
from .game import outcome
from .minimax import MiniMax
from .play import play_out
from .players import Mark
from .tactics import blocking_moves, immediate_winning_moves

BOARD_HELP = 'Board string of 9 squares: "o" (self), "x" (opponent), " " or "." (empty)'


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ttt-minimax", description="Perfect-play noughts and crosses")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument(
        "--stop-at-line",
        action="store_true",
        help="End searched games at the first completed line (default: only when the board is full)",
    )

    p_move = sub.add_parser("move", help="Best next move for self (o)")
    p_move.add_argument("--board", help=BOARD_HELP + " (omit with --stdin)")
    p_move.add_argument(
        "--stdin", action="store_true", help="Read many boards from stdin and stream CSV output"
    )
    p_move.add_argument("--scores", action="store_true", help="Also print the score of every empty square")

    p_play = sub.add_parser("selfplay", help="Let the search play both sides until the game ends")
    p_play.add_argument("--board", default=None, help=BOARD_HELP + " (default: empty board)")

    p_tac = sub.add_parser("tactics", help="List immediate wins and blocks for self (o)")
    p_tac.add_argument("--board", required=True, help=BOARD_HELP)

    return p


def parse_board(raw: str) -> Board:
    return Board(raw.replace(".", " "))


def _moves_played(history: List[Board]) -> List[int]:
    return [
        next(i for i in range(len(a)) if a[i] != b[i])
        for a, b in zip(history, history[1:])
    ]


def _read_board(raw: Optional[str]) -> Optional[Board]:
    try:
        return parse_board(raw or "")
    except InvalidBoardError as e:
        logging.error("Invalid board string: %s", e)
        return None


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    try:
        settings = load_settings()
    except ValueError as e:
        parser.error(str(e))
    configure_logging("DEBUG" if ns.verbose else settings.log_level)

    if ns.version:
        try:
            from importlib.metadata import version as _ver

            print(_ver("ttt-minimax"))
        except Exception:
            print("unknown")
        return 0

    searcher = MiniMax(stop_at_line=ns.stop_at_line or settings.stop_at_line)

    if ns.cmd == "move":
        if ns.stdin:
            w = csv.writer(sys.stdout)
            w.writerow(["board", "move", "value"])
            for line in sys.stdin:
                raw = line.rstrip("\r\n")
                if not raw:
                    continue
                try:
                    board = parse_board(raw)
                except InvalidBoardError:
                    continue
                if searcher.is_terminal(board):
                    continue
                value, move = searcher.evaluate(board)
                w.writerow([str(board), move, value])
            return 0
        if ns.board is None:
            parser.error("--board is required unless --stdin is given")
        board = _read_board(ns.board)
        if board is None:
            return 2
        if searcher.is_terminal(board):
            logging.error("Board is already over; there is no move to make.")
            return 2
        value, move = searcher.evaluate(board)
        print(f"move={move} value={value}")
        if ns.scores:
            print(f"scores={searcher.move_scores(board)}")
        return 0

    if ns.cmd == "selfplay":
        board = Board.empty() if ns.board is None else _read_board(ns.board)
        if board is None:
            return 2
        history = play_out(board, searcher)
        final = history[-1]
        print(f"result={outcome(final)} board={str(final)!r} moves={_moves_played(history)}")
        return 0

    if ns.cmd == "tactics":
        board = _read_board(ns.board)
        if board is None:
            return 2
        print(
            f"wins={immediate_winning_moves(board, Mark.SELF)} "
            f"blocks={blocking_moves(board, Mark.SELF)}"
        )
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
