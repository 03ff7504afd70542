from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

BOARD_SIZE = 3
COLUMN_LETTERS = "ABC"


class Mark(Enum):
    """The two sides of the game. An empty cell is None, never a Mark."""
    FIRST = "x"
    SECOND = "o"

    def other(self) -> "Mark":
        return Mark.SECOND if self is Mark.FIRST else Mark.FIRST

    @property
    def glyph(self) -> str:
        return self.value


class Outcome(Enum):
    """Terminal result of a game. Set at most once."""
    FIRST_WINS = "first"
    SECOND_WINS = "second"
    TIE = "tie"

    @classmethod
    def for_mark(cls, mark: Mark) -> "Outcome":
        return cls.FIRST_WINS if mark is Mark.FIRST else cls.SECOND_WINS

    @property
    def winner(self) -> Optional[Mark]:
        if self is Outcome.FIRST_WINS:
            return Mark.FIRST
        if self is Outcome.SECOND_WINS:
            return Mark.SECOND
        return None


Cell = Optional[Mark]
Coord = Tuple[int, int]


def in_bounds(r: int, c: int) -> bool:
    return 0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE


@dataclass(frozen=True)
class Board:
    """Read-only snapshot of the 3x3 grid."""
    grid: Tuple[Cell, ...]  # row-major, length == BOARD_SIZE * BOARD_SIZE

    def __post_init__(self) -> None:
        if len(self.grid) != BOARD_SIZE * BOARD_SIZE:
            raise ValueError(f"expected {BOARD_SIZE * BOARD_SIZE} cells, got {len(self.grid)}")

    @classmethod
    def empty(cls) -> "Board":
        return cls(grid=(None,) * (BOARD_SIZE * BOARD_SIZE))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Cell]]) -> "Board":
        """Builds a board from three rows of three cells each."""
        if len(rows) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in rows):
            raise ValueError(f"board must be {BOARD_SIZE}x{BOARD_SIZE}")
        flat: List[Cell] = []
        for row in rows:
            flat.extend(row)
        return cls(grid=tuple(flat))

    def index(self, r: int, c: int) -> int:
        """Calculates the 1D index for a given row and column."""
        return r * BOARD_SIZE + c

    def at(self, r: int, c: int) -> Cell:
        """Gets the cell at a given row and column. No wrap-around."""
        if not in_bounds(r, c):
            raise IndexError(f"({r}, {c}) is off the board")
        return self.grid[self.index(r, c)]

    def rows(self) -> Tuple[Tuple[Cell, ...], ...]:
        return tuple(self.grid[r * BOARD_SIZE:(r + 1) * BOARD_SIZE] for r in range(BOARD_SIZE))

    def coords(self) -> Iterator[Coord]:
        """Iterates over all coordinates on the board."""
        for r in range(BOARD_SIZE):
            for c in range(BOARD_SIZE):
                yield (r, c)

    def empty_coords(self) -> List[Coord]:
        return [coord for coord in self.coords() if self.at(*coord) is None]

    def is_full(self) -> bool:
        return all(cell is not None for cell in self.grid)

    def count(self, mark: Mark) -> int:
        return sum(1 for cell in self.grid if cell is mark)

    def pretty(self, empty: str = ".") -> str:
        """Generates a human-readable grid with column letters and row numbers."""
        lines: List[str] = ["  " + " ".join(COLUMN_LETTERS[:BOARD_SIZE])]
        for r, row in enumerate(self.rows()):
            cells = [empty if cell is None else cell.glyph for cell in row]
            lines.append(f"{r + 1} " + " ".join(cells))
        return "\n".join(lines)


def marks_from_text(rows: Iterable[str], empty: str = ".") -> List[List[Cell]]:
    """Turns rows like 'x.o' into cell lists; handy for loading positions."""
    by_glyph = {m.glyph: m for m in Mark}
    out: List[List[Cell]] = []
    for text in rows:
        row: List[Cell] = []
        for ch in text:
            if ch == empty:
                row.append(None)
            elif ch.lower() in by_glyph:
                row.append(by_glyph[ch.lower()])
            else:
                raise ValueError(f"unknown cell glyph {ch!r}")
        out.append(row)
    return out
