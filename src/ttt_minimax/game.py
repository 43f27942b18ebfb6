"""
Terminal detection and scoring.
Notes:
- A board is over only when it is full. A board with a completed line but
  empty squares left is not over here; the search keeps playing on it.
- Scores are from SELF's perspective: quicker wins score higher, slower
  losses score less negatively.
"""
from .board import Board
from .players import Mark
from .winning import has_line

WIN_SCORE = 10


def is_over(board: Board) -> bool:
    return board.is_full()


def score(board: Board, depth: int) -> int:
    if has_line(board, Mark.SELF):
        return WIN_SCORE - depth
    if has_line(board, Mark.OPPONENT):
        return depth - WIN_SCORE
    return 0


def outcome(board: Board) -> str:
    """Describe a position: "self", "opponent", "both", "draw" or "in_progress"."""
    self_won = has_line(board, Mark.SELF)
    opponent_won = has_line(board, Mark.OPPONENT)
    if self_won and opponent_won:
        return "both"
    if self_won:
        return "self"
    if opponent_won:
        return "opponent"
    return "draw" if board.is_full() else "in_progress"
