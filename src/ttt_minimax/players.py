"""
Players and board marks.
Notes:
- "o" is the side the search plays for (SELF), "x" is the OPPONENT.
- An empty square is a single space.
- Functions taking a player accept a Mark or its one-character symbol.
"""
from enum import Enum
from typing import Optional, Union

from .errors import InvalidBoardPiece

BOARD_SIZE = 3 * 3


class Mark(Enum):
    SELF = "o"
    OPPONENT = "x"
    EMPTY = " "

    def __str__(self) -> str:
        return self.value


Piece = Union[Mark, str]

VALID_PIECES = "".join(m.value for m in Mark)

_PIECES_BY_SYMBOL = {m.value: m for m in Mark}


def parse_piece(piece: object) -> Optional[Mark]:
    if isinstance(piece, Mark):
        return piece
    if isinstance(piece, str):
        return _PIECES_BY_SYMBOL.get(piece)
    return None


def as_player(player: Piece) -> Mark:
    mark = parse_piece(player)
    if mark is None:
        raise InvalidBoardPiece([player], VALID_PIECES)
    return mark


def next_player(player: Piece) -> Mark:
    return Mark.OPPONENT if as_player(player) is Mark.SELF else Mark.SELF
