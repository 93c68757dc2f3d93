"""Uniform piece randomizer with an injectable random source"""
import random
from typing import Optional


class PieceRandomizer:
    PIECES = ["I","J","L","O","S","T","Z"]

    def __init__(self, seed: Optional[int] = None, source: Optional[random.Random] = None):
        # An explicit source wins over a seed; None/None gives an unseeded generator
        self.source = source if source is not None else random.Random(seed)

    def next_piece(self) -> str:
        return self.PIECES[self.source.randrange(len(self.PIECES))]
