import itertools

from tetris_board import Board, set_cell


class SequenceRandomizer:
    """Deals piece types from a fixed, repeating sequence."""

    def __init__(self, *types):
        self.types = itertools.cycle(types)

    def next_piece(self):
        return next(self.types)


def fill_row(board: Board, y: int, t: str = "Z", skip=()):
    for x in range(len(board[0])):
        if x not in skip:
            set_cell(board, x, y, t)
