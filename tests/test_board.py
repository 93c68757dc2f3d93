import unittest

from tetris_board import (collide, create_board, get_cell, ghost_y, merge,
                          remove_row, set_cell, sweep)
from tetris_piece import Piece
from tests.helpers import fill_row


class GridTests(unittest.TestCase):
    def test_create_board_is_empty_and_sized(self):
        board = create_board()
        self.assertEqual(len(board), 20)
        self.assertTrue(all(len(row) == 10 for row in board))
        self.assertTrue(all(cell is None for row in board for cell in row))

    def test_rows_are_independent(self):
        board = create_board(4, 4)
        set_cell(board, 1, 2, "T")
        self.assertEqual(get_cell(board, 1, 2), "T")
        self.assertIsNone(get_cell(board, 1, 1))

    def test_remove_row_shifts_down_and_blanks_top(self):
        board = create_board(3, 3)
        set_cell(board, 0, 0, "I")
        fill_row(board, 2, "O")
        removed = remove_row(board, 2)
        self.assertEqual(removed, [None, None, None])
        self.assertIs(board[0], removed)
        self.assertEqual(get_cell(board, 0, 1), "I")
        self.assertEqual(len(board), 3)


class CollideTests(unittest.TestCase):
    def setUp(self):
        self.board = create_board()

    def test_inside_empty_board(self):
        self.assertFalse(collide(self.board, Piece.spawn("T")))

    def test_walls_and_floor(self):
        self.assertTrue(collide(self.board, Piece("O", [[1, 1], [1, 1]], -1, 0)))
        self.assertTrue(collide(self.board, Piece("O", [[1, 1], [1, 1]], 9, 0)))
        self.assertTrue(collide(self.board, Piece("O", [[1, 1], [1, 1]], 0, 19)))
        self.assertFalse(collide(self.board, Piece("O", [[1, 1], [1, 1]], 8, 18)))

    def test_empty_shape_cells_are_ignored(self):
        # blank left column hangs past the wall
        self.assertFalse(collide(self.board, Piece("I", [[0, 1], [0, 1]], -1, 0)))
        self.assertFalse(collide(self.board, Piece("J", [[1, 0, 0], [1, 1, 1]], 7, 18)))

    def test_occupied_cell(self):
        set_cell(self.board, 4, 5, "L")
        self.assertTrue(collide(self.board, Piece("O", [[1, 1], [1, 1]], 3, 4)))
        self.assertFalse(collide(self.board, Piece("O", [[1, 1], [1, 1]], 5, 4)))

    def test_above_board_skips_occupancy_but_not_walls(self):
        fill_row(self.board, 19)
        above = Piece("I", [[1], [1], [1], [1]], 4, -3)
        self.assertFalse(collide(self.board, above))
        self.assertTrue(collide(self.board, Piece("I", [[1], [1]], -1, -2)))
        self.assertTrue(collide(self.board, Piece("I", [[1], [1]], 10, -2)))


class MergeSweepTests(unittest.TestCase):
    def test_merge_writes_type_tag(self):
        board = create_board()
        merge(board, Piece("T", [[0, 1, 0], [1, 1, 1]], 3, 18))
        self.assertEqual(get_cell(board, 4, 18), "T")
        self.assertEqual([get_cell(board, x, 19) for x in (3, 4, 5)], ["T"] * 3)
        self.assertIsNone(get_cell(board, 3, 18))

    def test_merge_drops_cells_above_board(self):
        board = create_board()
        merge(board, Piece("I", [[1], [1], [1], [1]], 0, -2))
        self.assertEqual(get_cell(board, 0, 0), "I")
        self.assertEqual(get_cell(board, 0, 1), "I")
        self.assertEqual(sum(cell is not None for row in board for cell in row), 2)

    def test_sweep_without_full_rows_is_noop(self):
        board = create_board()
        fill_row(board, 19, skip=(0,))
        before = [row[:] for row in board]
        self.assertEqual(sweep(board), 0)
        self.assertEqual(board, before)

    def test_sweep_reexamines_shifted_rows(self):
        board = create_board()
        set_cell(board, 2, 17, "J")
        fill_row(board, 18)
        fill_row(board, 19)
        self.assertEqual(sweep(board), 2)
        self.assertEqual(get_cell(board, 2, 19), "J")
        self.assertEqual(sum(cell is not None for row in board for cell in row), 1)

    def test_sweep_non_adjacent_rows(self):
        board = create_board()
        fill_row(board, 15)
        fill_row(board, 17, skip=(5,))
        fill_row(board, 19)
        self.assertEqual(sweep(board), 2)
        self.assertTrue(all(cell is None for cell in board[19]))
        self.assertIsNone(get_cell(board, 5, 18))
        self.assertEqual(get_cell(board, 0, 18), "Z")

    def test_ghost_y_on_empty_board(self):
        board = create_board()
        self.assertEqual(ghost_y(board, Piece.spawn("O")), 18)

    def test_ghost_y_rests_on_stack(self):
        board = create_board()
        set_cell(board, 4, 10, "I")
        self.assertEqual(ghost_y(board, Piece.spawn("O")), 8)


if __name__ == "__main__":
    unittest.main()
