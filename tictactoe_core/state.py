from __future__ import annotations

import logging
from typing import List, Optional

from .board import BOARD_SIZE, Board, Cell, Coord, Mark, Outcome, in_bounds
from .errors import AlreadyOver, CellOccupied, OutOfRange
from .lines import scan_outcome, winner_through

log = logging.getLogger(__name__)


class GameState:
    """
    Board, side to move and outcome of one game.

    The only mutation is attempt_move. A finished game refuses every
    further move and never changes again.
    """

    def __init__(self) -> None:
        self._cells: List[Cell] = [None] * (BOARD_SIZE * BOARD_SIZE)
        self._current: Mark = Mark.FIRST
        self._outcome: Optional[Outcome] = None

    @classmethod
    def from_board(cls, board: Board, current: Optional[Mark] = None) -> "GameState":
        """
        Loads an arbitrary position.

        The mark counts must fit alternating play that starts with FIRST.
        The outcome comes from a full-board scan, since the position was
        not reached one move at a time.
        """
        firsts = board.count(Mark.FIRST)
        seconds = board.count(Mark.SECOND)
        if firsts - seconds not in (0, 1):
            raise ValueError(f"inconsistent position: {firsts} x against {seconds} o")
        derived = Mark.FIRST if firsts == seconds else Mark.SECOND
        if current is not None and current is not derived:
            raise ValueError(f"{current.glyph} cannot be to move in this position")

        outcome = scan_outcome(board)
        if outcome is not None and outcome.winner is not None and outcome.winner is derived:
            # The winner would have had to move after the line was complete.
            raise ValueError(f"{derived.glyph} has already won but is still to move")

        state = cls()
        state._cells = list(board.grid)
        state._current = derived
        if outcome is not None:
            state._set_outcome(outcome)
        return state

    def attempt_move(self, row: int, col: int) -> None:
        """
        Places the current mark at (row, col) and passes the turn.

        Raises AlreadyOver, OutOfRange or CellOccupied without touching
        the state.
        """
        if self.is_finished():
            log.debug("rejected (%s, %s): game over", row, col)
            raise AlreadyOver()
        if not in_bounds(row, col):
            log.debug("rejected (%s, %s): off the board", row, col)
            raise OutOfRange(row, col)
        occupant = self._cells[row * BOARD_SIZE + col]
        if occupant is not None:
            log.debug("rejected (%s, %s): held by %s", row, col, occupant.glyph)
            raise CellOccupied(occupant, row, col)

        mark = self._current
        self._cells[row * BOARD_SIZE + col] = mark
        self._current = mark.other()
        log.debug("%s plays (%s, %s)", mark.glyph, row, col)
        self._update_outcome(row, col)

    def _update_outcome(self, row: int, col: int) -> None:
        if self._outcome is not None:
            return
        board = self.board_view()
        winner = winner_through(board, row, col)
        if winner is not None:
            self._set_outcome(Outcome.for_mark(winner))
        elif board.is_full():
            self._set_outcome(Outcome.TIE)

    def _set_outcome(self, outcome: Outcome) -> None:
        if self._outcome is not None:
            raise RuntimeError(f"outcome already set to {self._outcome.name}")
        self._outcome = outcome
        log.debug("game finished: %s", outcome.name)

    def is_finished(self) -> bool:
        return self._outcome is not None

    def outcome(self) -> Optional[Outcome]:
        return self._outcome

    def current_mark(self) -> Mark:
        return self._current

    def board_view(self) -> Board:
        """Immutable snapshot; later moves do not show through it."""
        return Board(grid=tuple(self._cells))

    def legal_moves(self) -> List[Coord]:
        if self.is_finished():
            return []
        return self.board_view().empty_coords()

    def move_count(self) -> int:
        return sum(1 for cell in self._cells if cell is not None)

    def __repr__(self) -> str:
        outcome = self._outcome.name if self._outcome is not None else None
        return f"GameState(current={self._current.name}, outcome={outcome}, moves={self.move_count()})"
