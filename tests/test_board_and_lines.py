import unittest

from game import (
    ANTI_DIAGONAL,
    MAIN_DIAGONAL,
    Board,
    Mark,
    Outcome,
    all_lines,
    line_winner,
    lines_through,
    marks_from_text,
    scan_outcome,
    winner_through,
    winning_lines,
)

X, O = Mark.FIRST, Mark.SECOND


class TestBoard(unittest.TestCase):
    def _mk_board(self, rows):
        return Board.from_rows(marks_from_text(rows))

    def test_given_board_when_accessing_cells_then_row_major_without_wraparound(self):
        board = self._mk_board(['x..', '.o.', '..x'])
        self.assertEqual(board.index(1, 2), 5)
        self.assertIs(board.at(1, 1), O)
        self.assertIsNone(board.at(0, 1))
        with self.assertRaises(IndexError):
            board.at(3, 0)
        with self.assertRaises(IndexError):
            board.at(-1, -1)
        self.assertEqual(board.rows()[2], (None, None, X))

    def test_given_wrong_shape_when_building_then_value_error(self):
        with self.assertRaises(ValueError):
            Board.from_rows([[None] * 3] * 2)
        with self.assertRaises(ValueError):
            Board.from_rows([[None] * 4] * 3)
        with self.assertRaises(ValueError):
            Board(grid=(None,) * 8)
        with self.assertRaises(ValueError):
            marks_from_text(['x?.', '...', '...'])

    def test_given_board_when_pretty_then_header_margin_and_glyphs(self):
        self.assertEqual(
            Board.empty().pretty(),
            '  A B C\n'
            '1 . . .\n'
            '2 . . .\n'
            '3 . . .',
        )
        board = self._mk_board(['X..', '.o.', '...'])
        lines = board.pretty().splitlines()
        self.assertEqual(lines[1], '1 x . .')
        self.assertEqual(lines[2], '2 . o .')
        self.assertIn('_', board.pretty(empty='_'))

    def test_given_board_when_counting_then_empty_coords_and_counts_agree(self):
        board = self._mk_board(['xo.', '...', '..x'])
        self.assertEqual(board.count(X), 2)
        self.assertEqual(board.count(O), 1)
        self.assertEqual(len(board.empty_coords()), 6)
        self.assertFalse(board.is_full())
        self.assertEqual(list(board.coords())[:3], [(0, 0), (0, 1), (0, 2)])


class TestLines(unittest.TestCase):
    def _mk_board(self, rows):
        return Board.from_rows(marks_from_text(rows))

    def test_given_cell_when_listing_lines_through_then_only_applicable_diagonals(self):
        self.assertEqual(len(list(lines_through(1, 1))), 4)
        self.assertEqual(len(list(lines_through(0, 1))), 2)
        corner = list(lines_through(0, 0))
        self.assertEqual(len(corner), 3)
        self.assertIn(MAIN_DIAGONAL, corner)
        self.assertNotIn(ANTI_DIAGONAL, corner)
        self.assertIn(ANTI_DIAGONAL, list(lines_through(2, 0)))
        self.assertEqual(len(all_lines()), 8)

    def test_given_lines_through_when_ordered_then_row_column_diagonals(self):
        row, col, main, anti = lines_through(1, 1)
        self.assertEqual(row, ((1, 0), (1, 1), (1, 2)))
        self.assertEqual(col, ((0, 1), (1, 1), (2, 1)))
        self.assertEqual(main, MAIN_DIAGONAL)
        self.assertEqual(anti, ((0, 2), (1, 1), (2, 0)))

    def test_given_cells_when_checking_line_then_common_mark_or_none(self):
        self.assertIs(line_winner([X, X, X]), X)
        self.assertIs(line_winner([O, O, O]), O)
        self.assertIsNone(line_winner([X, X, None]))
        self.assertIsNone(line_winner([X, O, X]))
        self.assertIsNone(line_winner([None, None, None]))

    def test_given_line_elsewhere_when_checking_through_cell_then_not_seen(self):
        board = self._mk_board(['xxx', 'oo.', '...'])
        self.assertIs(winner_through(board, 0, 1), X)
        # (2, 2) does not lie on row 0
        self.assertIsNone(winner_through(board, 2, 2))
        self.assertEqual(winning_lines(board), [(((0, 0), (0, 1), (0, 2)), X)])

    def test_given_positions_when_scanning_full_board_then_outcome(self):
        self.assertIsNone(scan_outcome(Board.empty()))
        self.assertEqual(scan_outcome(self._mk_board(['xo.', 'xo.', '.o.'])), Outcome.SECOND_WINS)
        self.assertEqual(scan_outcome(self._mk_board(['xox', 'xxo', 'oxo'])), Outcome.TIE)
        with self.assertRaises(ValueError):
            scan_outcome(self._mk_board(['xxx', 'ooo', '...']))


if __name__ == '__main__':
    unittest.main(verbosity=2)
