"""
Unit tests for Tic-Tac-Toe board logic: winner detection, status text,
click handling and the board view model.

Run (with venv activated):
  python -m unittest tests.tic_tac_toe.test_board -v
  pytest tests/tic_tac_toe/ -v
"""
import unittest

from app.projects.tic_tac_toe.core.board import (
    build_board,
    calculate_winner,
    empty_board,
    game_status,
    is_board_filled,
    next_squares,
)
from app.projects.tic_tac_toe.core.constants import WIN_LINES


def board_from(text):
    """Build a snapshot from a 9-char string like 'XO.X.....'."""
    return [None if c == "." else c for c in text]


class TestCalculateWinner(unittest.TestCase):

    def test_empty_board_has_no_winner(self):
        self.assertIsNone(calculate_winner(empty_board()))

    def test_two_in_a_row_is_not_a_win(self):
        self.assertIsNone(calculate_winner(board_from("XX.OO....")))

    def test_mixed_line_is_not_a_win(self):
        self.assertIsNone(calculate_winner(board_from("XOX......")))

    def test_every_line_wins_for_x(self):
        for line in WIN_LINES:
            squares = empty_board()
            for index in line:
                squares[index] = "X"
            with self.subTest(line=line):
                self.assertEqual(calculate_winner(squares), line)

    def test_o_wins_middle_column(self):
        squares = board_from("XOX.O..OX")
        self.assertEqual(calculate_winner(squares), [1, 4, 7])

    def test_rows_checked_before_diagonals(self):
        # Top row and main diagonal both complete; the row comes first
        squares = board_from("XXXOXOOOX")
        self.assertEqual(calculate_winner(squares), [0, 1, 2])


class TestGameStatus(unittest.TestCase):

    def test_next_player_x_on_even_turn(self):
        self.assertEqual(game_status(empty_board(), True), "Next player: X")

    def test_next_player_o_on_odd_turn(self):
        self.assertEqual(game_status(board_from("X........"), False), "Next player: O")

    def test_winner_text(self):
        self.assertEqual(game_status(board_from("OOOXX.X.."), True), "Winner: O")

    def test_full_board_without_line_is_draw(self):
        squares = board_from("XOXXOOOXX")
        self.assertTrue(is_board_filled(squares))
        self.assertIsNone(calculate_winner(squares))
        self.assertEqual(game_status(squares, False), "Draw!")

    def test_full_board_with_line_is_a_win_not_draw(self):
        squares = board_from("XXXOOXXOO")
        self.assertEqual(game_status(squares, False), "Winner: X")


class TestNextSquares(unittest.TestCase):

    def test_places_x_when_x_is_next(self):
        squares = empty_board()
        result = next_squares(squares, 4, True)
        self.assertEqual(result[4], "X")
        self.assertEqual(sum(1 for s in result if s), 1)

    def test_places_o_when_o_is_next(self):
        result = next_squares(board_from("X........"), 8, False)
        self.assertEqual(result[8], "O")

    def test_does_not_mutate_input(self):
        squares = empty_board()
        next_squares(squares, 0, True)
        self.assertEqual(squares, empty_board())

    def test_filled_cell_is_ignored(self):
        squares = board_from("X........")
        self.assertIsNone(next_squares(squares, 0, False))
        self.assertEqual(squares, board_from("X........"))

    def test_click_after_win_is_ignored(self):
        squares = board_from("XXXOO....")
        self.assertIsNone(next_squares(squares, 8, False))

    def test_out_of_range_index_raises(self):
        with self.assertRaises(ValueError):
            next_squares(empty_board(), 9, True)
        with self.assertRaises(ValueError):
            next_squares(empty_board(), -1, True)


class TestBuildBoard(unittest.TestCase):

    def test_three_rows_of_three(self):
        view = build_board(empty_board(), True)
        self.assertEqual(len(view.rows), 3)
        for row_number, row in enumerate(view.rows):
            self.assertEqual([c.index for c in row], [row_number * 3 + i for i in range(3)])

    def test_winning_cells_are_tagged(self):
        view = build_board(board_from("XXXOO...."), False)
        winning = [c.index for row in view.rows for c in row if c.is_winning]
        self.assertEqual(winning, [0, 1, 2])
        self.assertEqual(view.rows[0][0].css_class, "square win")
        self.assertEqual(view.rows[1][0].css_class, "square")
        self.assertTrue(view.is_over)
        self.assertEqual(view.status, "Winner: X")

    def test_no_tags_without_winner(self):
        view = build_board(board_from("XO......."), True)
        self.assertFalse(any(c.is_winning for row in view.rows for c in row))
        self.assertFalse(view.is_over)
        self.assertEqual(view.rows[0][1].value, "O")


if __name__ == "__main__":
    unittest.main()
