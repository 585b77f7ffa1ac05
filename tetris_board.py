
"""Board helpers: probe, collide, lock, sweep, drop distance"""
from enum import Enum
from typing import List, Optional, Tuple
from tetris_piece import Piece, COLS, ROWS

Board = List[List[int]]

class Contact(Enum):
    FREE = 0
    BLOCKED = 1
    CEILING = 2   # a cell sits above row 0: the stack has overflowed

def empty_board() -> Board:
    return [[0]*COLS for _ in range(ROWS)]

def probe(board: Board, piece: Piece) -> Contact:
    blocked = False
    for bx,by in piece.cells():
        if by<0: return Contact.CEILING
        if bx<0 or bx>=COLS or by>=ROWS or board[by][bx]:
            blocked = True
    return Contact.BLOCKED if blocked else Contact.FREE

def collide(board: Board, piece: Piece) -> bool:
    return probe(board, piece) is not Contact.FREE

def lock(board: Board, piece: Piece) -> Optional[Board]:
    """Copy of board with piece written in, or None if any cell is above the ceiling."""
    cells = piece.cells()
    if any(by<0 for _,by in cells): return None
    out = [r[:] for r in board]
    for bx,by in cells: out[by][bx] = 1
    return out

def sweep(board: Board) -> Tuple[Board, int]:
    """Drop complete rows, refill from the top. Returns (new board, rows cleared)."""
    keep = [r[:] for r in board if not all(v==1 for v in r)]
    c = len(board) - len(keep)
    return [[0]*COLS for _ in range(c)] + keep, c

def drop_distance(board: Board, piece: Piece) -> int:
    d = 0
    while not collide(board, piece.moved(0, d+1)): d += 1
    return d
