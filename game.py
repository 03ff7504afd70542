from __future__ import annotations

# Facade module that re-exports the tic-tac-toe core.
# Tests and scripts import from here; single-responsibility modules live
# under tictactoe_core/*.

from tictactoe_core.board import (  # noqa: F401
    BOARD_SIZE,
    Board,
    Cell,
    Coord,
    Mark,
    Outcome,
    in_bounds,
    marks_from_text,
)
from tictactoe_core.errors import (  # noqa: F401
    AlreadyOver,
    CellOccupied,
    MoveError,
    OutOfRange,
)
from tictactoe_core.lines import (  # noqa: F401
    ANTI_DIAGONAL,
    MAIN_DIAGONAL,
    all_lines,
    line_winner,
    lines_through,
    scan_outcome,
    winner_through,
    winning_lines,
)
from tictactoe_core.notation import InvalidMove, format_move, parse_move  # noqa: F401
from tictactoe_core.state import GameState  # noqa: F401


def main() -> int:
    # CLI driver delegated to tictactoe_core.cli
    from tictactoe_core.cli import main as _main
    return _main()


if __name__ == '__main__':
    raise SystemExit(main())
