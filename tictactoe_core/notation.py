from __future__ import annotations

from .board import COLUMN_LETTERS, Coord

ROW_DIGITS = "123"


class InvalidMove(ValueError):
    """A move token that does not name a square. Carries the original token."""

    def __init__(self, token: str):
        super().__init__(f"invalid move token {token!r}")
        self.token = token


def parse_move(text: str) -> Coord:
    """
    Maps a two-character token to (row, col).
    '1'/'2'/'3' select row 0/1/2; 'A'/'B'/'C' (any case) select column 0/1/2.
    """
    if len(text) != 2:
        raise InvalidMove(text)
    row_ch, col_ch = text[0], text[1].upper()
    if row_ch not in ROW_DIGITS or col_ch not in COLUMN_LETTERS:
        raise InvalidMove(text)
    return ROW_DIGITS.index(row_ch), COLUMN_LETTERS.index(col_ch)


def format_move(row: int, col: int) -> str:
    """Inverse of parse_move: (0, 0) -> '1A'."""
    return f"{row + 1}{COLUMN_LETTERS[col]}"
