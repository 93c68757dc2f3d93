"""Piece model, canonical shapes, matrix rotation"""
from dataclasses import dataclass
from typing import List, Optional

from tetris_config import CONFIG
from tetris_rng import PieceRandomizer

SHAPES = {
    "I": [[1,1,1,1]],
    "J": [[1,0,0],[1,1,1]],
    "L": [[0,0,1],[1,1,1]],
    "O": [[1,1],[1,1]],
    "S": [[0,1,1],[1,1,0]],
    "T": [[0,1,0],[1,1,1]],
    "Z": [[1,1,0],[0,1,1]],
}

CW, CCW = 1, -1


def rotate(m: List[List[int]], direction: int = CW) -> List[List[int]]:
    """Quarter turn: transpose, then flip rows (CW) or row order (CCW)."""
    t = [list(c) for c in zip(*m)]
    if direction == CW:
        return [r[::-1] for r in t]
    return t[::-1]


@dataclass
class Piece:
    t: str
    shape: List[List[int]]
    x: int
    y: int

    @property
    def width(self) -> int:
        return len(self.shape[0])

    def copy(self) -> "Piece":
        return Piece(self.t, [r[:] for r in self.shape], self.x, self.y)

    def cells(self):
        """Absolute (x, y) of every set cell, including rows above the board."""
        return [(self.x+c, self.y+r)
                for r,row in enumerate(self.shape)
                for c,v in enumerate(row) if v]

    @staticmethod
    def spawn(t: str, cols: Optional[int] = None) -> "Piece":
        if cols is None:
            cols = CONFIG["COLS"]
        s = [r[:] for r in SHAPES[t]]
        return Piece(t, s, cols//2 - 2, 0)


def random_piece(rng: PieceRandomizer, cols: Optional[int] = None) -> Piece:
    return Piece.spawn(rng.next_piece(), cols)
