"""ttt_minimax package.

Perfect play for 3x3 noughts and crosses by exhaustive minimax search.

Convenience imports are exposed for common workflows.
"""

from .board import Board
from .errors import InvalidBoardError, InvalidBoardPiece, InvalidBoardSize
from .game import is_over, outcome, score
from .minimax import MiniMax, best_next_move
from .play import play_out
from .players import Mark, next_player
from .winning import WINNING_LINES, has_line

__all__ = [
    "Board",
    "Mark",
    "next_player",
    "InvalidBoardError",
    "InvalidBoardSize",
    "InvalidBoardPiece",
    "WINNING_LINES",
    "has_line",
    "is_over",
    "score",
    "outcome",
    "MiniMax",
    "best_next_move",
    "play_out",
]
