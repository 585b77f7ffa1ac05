# tetris_layout.py
from dataclasses import dataclass
from tetris_config import CONFIG
from tetris_piece import COLS, ROWS

@dataclass
class Dims:
    cell: int
    margin: int
    panel_w: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int
    panel_x: int
    panel_y: int
    button_w: int
    button_h: int

def compute_dims() -> Dims:
    cell = int(CONFIG["CELL_SIZE"])
    margin = 16
    panel_w = 200

    board_w = COLS * cell
    board_h = ROWS * cell

    total_w = margin + board_w + margin + panel_w + margin
    total_h = margin + board_h + margin

    return Dims(
        cell=cell, margin=margin, panel_w=panel_w,
        board_w=board_w, board_h=board_h,
        total_w=total_w, total_h=total_h,
        board_x=margin, board_y=margin,
        panel_x=margin + board_w + margin, panel_y=margin,
        button_w=panel_w - 24, button_h=32,
    )

def button_rects(d: Dims):
    """(x, y, w, h) of each panel button, keyed by action name."""
    x = d.panel_x + 12
    y = d.panel_y + d.board_h - 2*(d.button_h + 10)
    return {
        "start": (x, y, d.button_w, d.button_h),
        "pause": (x, y + d.button_h + 10, d.button_w, d.button_h),
    }

def button_at(d: Dims, pos):
    px, py = pos
    for name,(x,y,w,h) in button_rects(d).items():
        if x <= px < x+w and y <= py < y+h: return name
    return None
