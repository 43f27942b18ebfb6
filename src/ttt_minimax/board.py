"""
Board representation.
Notes:
- A board is a tuple of 9 marks, row-major: 0-2 top row, 3-5 middle, 6-8 bottom.
- Boards are frozen values; placing a piece builds a new board through the
  same validating constructor.
"""
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from .errors import InvalidBoardPiece, InvalidBoardSize
from .players import BOARD_SIZE, VALID_PIECES, Mark, Piece, parse_piece


@dataclass(frozen=True)
class Board:
    squares: Tuple[Mark, ...]

    def __init__(self, squares: Iterable[Piece]):
        squares = tuple(squares)
        if len(squares) != BOARD_SIZE:
            raise InvalidBoardSize(len(squares), BOARD_SIZE)
        parsed = [parse_piece(s) for s in squares]
        invalid = [s for s, p in zip(squares, parsed) if p is None]
        if invalid:
            raise InvalidBoardPiece(invalid, VALID_PIECES)
        object.__setattr__(self, "squares", tuple(parsed))

    @classmethod
    def empty(cls) -> "Board":
        return cls([Mark.EMPTY] * BOARD_SIZE)

    def __str__(self) -> str:
        return "".join(m.value for m in self.squares)

    def __repr__(self) -> str:
        return f"Board({str(self)!r})"

    def __getitem__(self, location: int) -> Mark:
        return self.squares[location]

    def __len__(self) -> int:
        return len(self.squares)

    def is_full(self) -> bool:
        return Mark.EMPTY not in self.squares

    def empty_squares(self) -> List[int]:
        return [i for i, m in enumerate(self.squares) if m is Mark.EMPTY]

    def add_piece(self, player: Piece, location: int) -> "Board":
        """Return a new board with ``player`` placed at ``location``.

        Occupancy is not checked: the caller picks an empty square.
        """
        return Board(
            player if square == location else piece
            for square, piece in enumerate(self.squares)
        )

    def swapped(self) -> "Board":
        """Exchange SELF and OPPONENT marks, leaving empty squares alone."""
        swap = {
            Mark.SELF: Mark.OPPONENT,
            Mark.OPPONENT: Mark.SELF,
            Mark.EMPTY: Mark.EMPTY,
        }
        return Board(swap[m] for m in self.squares)
