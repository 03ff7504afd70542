"""
Tic-tac-toe core Python package.

Pure game logic for a two-player 3x3 console game, kept free of I/O so it
can be driven and tested without a terminal.
Modules:
- board.py: Mark, Cell, Coord, Board
- errors.py: MoveError and its subclasses
- lines.py: rows, columns, diagonals and win detection
- state.py: Outcome, GameState
- notation.py: move tokens such as '1A'
- cli.py: the interactive console session
"""
