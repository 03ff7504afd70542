from __future__ import annotations

from typing import Iterator, List, Optional, Sequence, Tuple

from .board import BOARD_SIZE, Board, Cell, Coord, Mark, Outcome

Line = Tuple[Coord, ...]

LAST = BOARD_SIZE - 1


def row_line(r: int) -> Line:
    return tuple((r, c) for c in range(BOARD_SIZE))


def col_line(c: int) -> Line:
    return tuple((r, c) for r in range(BOARD_SIZE))


MAIN_DIAGONAL: Line = tuple((i, i) for i in range(BOARD_SIZE))
ANTI_DIAGONAL: Line = tuple((i, LAST - i) for i in range(BOARD_SIZE))


def all_lines() -> List[Line]:
    """Every row, column and diagonal; 8 lines on a 3x3 board."""
    lines: List[Line] = [row_line(r) for r in range(BOARD_SIZE)]
    lines.extend(col_line(c) for c in range(BOARD_SIZE))
    lines.append(MAIN_DIAGONAL)
    lines.append(ANTI_DIAGONAL)
    return lines


def lines_through(r: int, c: int) -> Iterator[Line]:
    """Yields the lines through a cell: row, column, then any diagonals."""
    yield row_line(r)
    yield col_line(c)
    if r == c:
        yield MAIN_DIAGONAL
    if r + c == LAST:
        yield ANTI_DIAGONAL


def line_winner(cells: Sequence[Cell]) -> Optional[Mark]:
    """Returns the common Mark if all cells hold the same one, else None."""
    first = cells[0]
    if first is None:
        return None
    if all(cell is first for cell in cells):
        return first
    return None


def _cells(board: Board, line: Line) -> List[Cell]:
    return [board.at(r, c) for r, c in line]


def winner_through(board: Board, r: int, c: int) -> Optional[Mark]:
    """
    Checks only the lines through (r, c).
    Enough after a single placement, since any new line must include it.
    """
    for line in lines_through(r, c):
        mark = line_winner(_cells(board, line))
        if mark is not None:
            return mark
    return None


def winning_lines(board: Board) -> List[Tuple[Line, Mark]]:
    out: List[Tuple[Line, Mark]] = []
    for line in all_lines():
        mark = line_winner(_cells(board, line))
        if mark is not None:
            out.append((line, mark))
    return out


def scan_outcome(board: Board) -> Optional[Outcome]:
    """
    Full-board scan for an arbitrary position.
    Returns an Outcome or None while the game is still open.
    """
    winners = {mark for _, mark in winning_lines(board)}
    if len(winners) > 1:
        raise ValueError("both sides have three in a row")
    if winners:
        return Outcome.for_mark(winners.pop())
    if board.is_full():
        return Outcome.TIE
    return None
