
"""Piece model, shapes, clockwise rotation"""
from dataclasses import dataclass, replace
from typing import List

COLS, ROWS = 10, 20

SHAPES = {
    "I": [[0,0,0,0],[1,1,1,1],[0,0,0,0],[0,0,0,0]],
    "J": [[1,0,0],[1,1,1],[0,0,0]],
    "L": [[0,0,1],[1,1,1],[0,0,0]],
    "O": [[1,1],[1,1]],
    "S": [[0,1,1],[1,1,0],[0,0,0]],
    "T": [[0,1,0],[1,1,1],[0,0,0]],
    "Z": [[1,1,0],[0,1,1],[0,0,0]],
}

# transpose, then reverse each row
def rotate_cw(m): return [list(r)[::-1] for r in zip(*m)]

@dataclass(frozen=True)
class Piece:
    t: str
    shape: List[List[int]]
    x: int
    y: int
    @staticmethod
    def spawn(t: str):
        return Piece(t, [r[:] for r in SHAPES[t]], COLS//2 - 1, 0)

    def moved(self, dx: int, dy: int) -> "Piece":
        return replace(self, x=self.x+dx, y=self.y+dy)

    def rotated(self) -> "Piece":
        return replace(self, shape=rotate_cw(self.shape))

    def cells(self):
        """Absolute (x, y) of every occupied cell."""
        return [(self.x+x, self.y+y)
                for y,row in enumerate(self.shape)
                for x,v in enumerate(row) if v]

