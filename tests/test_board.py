import unittest

from game import Board, OffBoardError, STANDARD_ROWS, EMPTY, BLACK_KING


class TestBoard(unittest.TestCase):
    def test_given_partial_rows_when_building_then_missing_cells_are_empty(self):
        board = Board.from_rows([".w.", "..b"])
        self.assertEqual(board.get(0, 1), 'w')
        self.assertEqual(board.get(1, 2), 'b')
        self.assertEqual(board.get(7, 7), EMPTY)
        self.assertEqual(board.get(0, 5), EMPTY)

    def test_given_full_layout_when_serializing_then_text_round_trips(self):
        board = Board.from_rows(STANDARD_ROWS)
        text = board.to_text()
        self.assertEqual(text, "".join(row + "\n" for row in STANDARD_ROWS))
        self.assertEqual(Board.from_rows(text.splitlines()), board)
        self.assertEqual(Board.standard(), board)

    def test_given_short_rows_when_serializing_then_padded_to_eight_columns(self):
        text = Board.from_rows(["..", "b."]).to_text()
        lines = text.split("\n")
        self.assertEqual(len(lines), 9)  # eight rows plus trailing newline
        self.assertEqual(lines[1], "b.......")
        self.assertTrue(text.endswith("\n"))

    def test_given_off_board_coordinates_when_reading_or_writing_then_raises(self):
        board = Board()
        for r, c in [(-1, 0), (0, -1), (8, 0), (0, 8)]:
            with self.assertRaises(OffBoardError):
                board.get(r, c)
            with self.assertRaises(IndexError):
                board.set(r, c, 'b')

    def test_given_set_when_overwriting_then_no_rule_checks(self):
        board = Board.from_rows(["b"])
        board.set(0, 0, BLACK_KING)
        self.assertEqual(board.get(0, 0), 'B')
        board.set(0, 0, EMPTY)
        self.assertEqual(board.get(0, 0), '.')
        with self.assertRaises(ValueError):
            board.set(0, 0, 'x')

    def test_given_malformed_layout_when_building_then_value_error(self):
        with self.assertRaises(ValueError):
            Board.from_rows(["........"] * 9)
        with self.assertRaises(ValueError):
            Board.from_rows(["........."])
        with self.assertRaises(ValueError):
            Board.from_rows(["..q"])

    def test_given_board_when_copied_then_copies_are_independent(self):
        board = Board.from_rows(["b"])
        other = board.copy()
        other.set(0, 0, EMPTY)
        self.assertEqual(board.get(0, 0), 'b')
        self.assertNotEqual(board, other)

    def test_given_board_when_counting_and_pretty_then_expected_values(self):
        board = Board.standard()
        self.assertEqual(board.count('b'), 12)
        self.assertEqual(board.count('w'), 12)
        txt = board.pretty([(3, 0)])
        self.assertIn("0 1 2 3 4 5 6 7", txt)
        self.assertIn("3 * . . .", txt)


if __name__ == '__main__':
    unittest.main(verbosity=2)
