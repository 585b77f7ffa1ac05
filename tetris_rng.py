
"""Piece-kind randomizer module"""
import random
from typing import Optional

class UniformRandom:
    """Uniform choice over the seven kinds. Any object with next_piece() can stand in."""
    PIECES = ["I","J","L","O","S","T","Z"]
    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def next_piece(self) -> str:
        return self._rng.choice(self.PIECES)
