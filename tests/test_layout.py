from tetris_config import CONFIG
from tetris_layout import button_at, button_rects, compute_dims
from tetris_piece import COLS, ROWS


def test_dims_follow_cell_size(monkeypatch):
    monkeypatch.setitem(CONFIG, "CELL_SIZE", 20)
    d = compute_dims()
    assert (d.board_w, d.board_h) == (COLS * 20, ROWS * 20)
    assert d.panel_x == d.board_x + d.board_w + d.margin
    assert d.total_w == d.panel_x + d.panel_w + d.margin


def test_buttons_inside_panel_and_hit_test():
    d = compute_dims()
    rects = button_rects(d)
    for name, (x, y, w, h) in rects.items():
        assert d.panel_x <= x and x + w <= d.panel_x + d.panel_w
        assert y + h <= d.panel_y + d.board_h
        assert button_at(d, (x + w // 2, y + h // 2)) == name
    assert button_at(d, (d.board_x, d.board_y)) is None
