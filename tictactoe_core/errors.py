from __future__ import annotations

from .board import Mark
from .notation import format_move


class MoveError(Exception):
    """Base class for a move the game refused. The state is left untouched."""


class AlreadyOver(MoveError):
    def __init__(self) -> None:
        super().__init__("the game is already over")


class OutOfRange(MoveError):
    def __init__(self, row: int, col: int):
        super().__init__(f"position ({row}, {col}) is outside the board")
        self.row = row
        self.col = col


class CellOccupied(MoveError):
    def __init__(self, occupant: Mark, row: int, col: int):
        super().__init__(
            f"the tile at position {format_move(row, col)} already has piece {occupant.glyph} in it"
        )
        self.occupant = occupant
        self.row = row
        self.col = col
