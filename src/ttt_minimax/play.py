"""
Self-play: the search plays both sides of a game.
Notes:
- The search always moves for SELF. On OPPONENT turns the board is swapped
  so the same search chooses the OPPONENT move.
- The game stops when the searcher considers the board terminal.
"""
import logging
from typing import List, Optional

from .board import Board
from .minimax import MiniMax
from .players import Mark, next_player


def play_out(
    board: Optional[Board] = None,
    searcher: Optional[MiniMax] = None,
    player: Mark = Mark.SELF,
) -> List[Board]:
    """Play ``board`` to the end, ``player`` moving first.

    Returns every position of the game, starting position first.
    """
    if board is None:
        board = Board.empty()
    if searcher is None:
        searcher = MiniMax()
    history = [board]
    while not searcher.is_terminal(board):
        view = board if player is Mark.SELF else board.swapped()
        location = searcher.best_next_move(view)
        board = board.add_piece(player, location)
        logging.debug("ply=%d player=%s move=%d board=%r", len(history), player.name, location, str(board))
        history.append(board)
        player = next_player(player)
    return history
