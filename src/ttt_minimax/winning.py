"""Winning lines and line detection."""
from .board import Board
from .players import Piece, as_player

WINNING_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


def has_line(board: Board, player: Piece) -> bool:
    player = as_player(player)
    squares = board.squares
    for a, b, c in WINNING_LINES:
        if squares[a] is player and squares[b] is player and squares[c] is player:
            return True
    return False
