"""
Tactics: immediate wins and blocks.
"""
from typing import List

from .board import Board
from .players import Piece, as_player, next_player
from .winning import has_line


def immediate_winning_moves(board: Board, player: Piece) -> List[int]:
    player = as_player(player)
    wins: List[int] = []
    for i in board.empty_squares():
        if has_line(board.add_piece(player, i), player):
            wins.append(i)
    return wins


def blocking_moves(board: Board, player: Piece) -> List[int]:
    return immediate_winning_moves(board, next_player(player))
