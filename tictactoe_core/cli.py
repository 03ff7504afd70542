from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional, TextIO

from .board import Coord, Outcome
from .errors import CellOccupied
from .notation import InvalidMove, format_move, parse_move
from .state import GameState

log = logging.getLogger(__name__)

_TRUTHY = ('1', 'true', 'yes', 'on')


def _env_debug() -> bool:
    return os.getenv('TICTACTOE_DEBUG', '0').lower() in _TRUTHY


def read_line(stream: Optional[TextIO] = None, out: Optional[TextIO] = None) -> str:
    """Reads one line without its newline. Exits with status 0 on end of input."""
    stream = stream if stream is not None else sys.stdin
    out = out if out is not None else sys.stdout
    line = stream.readline()
    if line == '':
        print(file=out)
        raise SystemExit(0)
    return line.rstrip('\r\n')


def prompt_move(stream: Optional[TextIO] = None, out: Optional[TextIO] = None,
                err: Optional[TextIO] = None) -> Coord:
    """Prompts until the player types a token that names a square."""
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr
    while True:
        print('Enter move (e.g. 1A): ', end='', file=out)
        out.flush()
        text = read_line(stream, out)
        try:
            return parse_move(text)
        except InvalidMove as e:
            print(f"Invalid move: '{e.token}'. Please try again.", file=err)


def outcome_message(outcome: Outcome) -> str:
    if outcome is Outcome.TIE:
        return 'Tie!'
    return f'{outcome.winner.glyph} wins!'


def play(stream: Optional[TextIO] = None, out: Optional[TextIO] = None,
         err: Optional[TextIO] = None) -> Outcome:
    """Runs one game on the console and returns how it ended."""
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr
    game = GameState()

    while not game.is_finished():
        print(game.board_view().pretty(), file=out)
        print(f'Current piece: {game.current_mark().glyph}', file=out)
        row, col = prompt_move(stream, out, err)
        try:
            game.attempt_move(row, col)
        except CellOccupied as e:
            print(
                f'The tile at position {format_move(e.row, e.col)} '
                f'already has piece {e.occupant.glyph} in it!',
                file=err,
            )

    print(game.board_view().pretty(), file=out)
    outcome = game.outcome()
    assert outcome is not None, 'finished game should have an outcome'
    print(outcome_message(outcome), file=out)
    return outcome


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Two-player tic-tac-toe on the console')
    parser.add_argument('--debug', action='store_true',
                        help='Log moves and outcome checks to stderr (or set TICTACTOE_DEBUG=1)')
    args = parser.parse_args(argv)

    debug = args.debug or _env_debug()
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )
    log.debug('starting session')
    outcome = play()
    log.debug('session ended with %s', outcome.name)
    return 0


if __name__ == '__main__':
    sys.exit(main())
