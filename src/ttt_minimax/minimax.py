"""
Exhaustive minimax search from SELF's perspective.
Tie-break policy:
- SELF takes the maximum score, OPPONENT the minimum.
- Child scores are collected in a dict keyed by score while visiting empty
  squares in ascending order, so among equally scored moves the highest index
  is kept.
- No pruning: every empty square is explored at every ply.
"""
import logging
from typing import Dict, List, Optional, Tuple

from .board import Board
from .game import is_over, score
from .players import Mark, next_player
from .winning import has_line


class MiniMax:
    """Perfect-play search.

    By default a board is terminal only when it is full, so play continues on
    positions that already contain a line. With ``stop_at_line=True`` a
    completed line also ends the game.
    """

    def __init__(self, stop_at_line: bool = False):
        self.stop_at_line = stop_at_line

    def is_terminal(self, board: Board) -> bool:
        if is_over(board):
            return True
        if self.stop_at_line:
            return has_line(board, Mark.SELF) or has_line(board, Mark.OPPONENT)
        return False

    def _child_scores(self, board: Board, depth: int, player: Mark) -> List[Tuple[int, int]]:
        scores: List[Tuple[int, int]] = []
        for location in board.empty_squares():
            played = board.add_piece(player, location)
            child_score, _ = self.evaluate(played, depth, next_player(player))
            scores.append((location, child_score))
        return scores

    def evaluate(self, board: Board, depth: int = 0, player: Mark = Mark.SELF) -> Tuple[int, Optional[int]]:
        """Return ``(score, location)`` for ``player`` to move on ``board``.

        ``location`` is None on a terminal board.
        """
        if self.is_terminal(board):
            return score(board, depth), None

        depth += 1

        moves: Dict[int, int] = {}
        for location, child_score in self._child_scores(board, depth, player):
            moves[child_score] = location

        best = max(moves) if player is Mark.SELF else min(moves)
        return best, moves[best]

    def best_next_move(self, board: Board) -> Optional[int]:
        value, location = self.evaluate(board, 0, Mark.SELF)
        logging.debug("best_next_move board=%r value=%d move=%s", str(board), value, location)
        return location

    def move_scores(self, board: Board) -> Dict[int, int]:
        """Score of every empty square for SELF to move, keyed by location."""
        if self.is_terminal(board):
            return {}
        return dict(self._child_scores(board, 1, Mark.SELF))


def best_next_move(board: Board, stop_at_line: bool = False) -> Optional[int]:
    return MiniMax(stop_at_line=stop_at_line).best_next_move(board)
