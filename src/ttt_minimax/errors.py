"""Board validation errors."""
from typing import Iterable


class InvalidBoardError(ValueError):
    pass


class InvalidBoardSize(InvalidBoardError):
    def __init__(self, size: int, valid_size: int):
        self.size = size
        self.valid_size = valid_size
        super().__init__(
            f"invalid board with {size} squares. "
            f"valid board has {valid_size} squares"
        )


class InvalidBoardPiece(InvalidBoardError):
    def __init__(self, pieces: Iterable[object], valid_pieces: str):
        self.pieces = tuple(pieces)
        invalid = "".join(str(p) for p in self.pieces)
        super().__init__(
            f'invalid board piece(s) "{invalid}". '
            f'valid board pieces are "{valid_pieces}"'
        )
