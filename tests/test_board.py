from tetris_board import Contact, collide, drop_distance, empty_board, lock, probe, sweep
from tetris_piece import COLS, ROWS, Piece

O = [[1, 1], [1, 1]]


def test_empty_board_dimensions():
    b = empty_board()
    assert len(b) == ROWS
    assert all(len(r) == COLS and not any(r) for r in b)


def test_probe_walls_and_floor():
    b = empty_board()
    assert probe(b, Piece("O", O, 0, 0)) is Contact.FREE
    assert probe(b, Piece("O", O, -1, 0)) is Contact.BLOCKED
    assert probe(b, Piece("O", O, COLS - 1, 0)) is Contact.BLOCKED
    assert probe(b, Piece("O", O, 0, ROWS - 1)) is Contact.BLOCKED


def test_probe_occupied_cell():
    b = empty_board()
    b[5][5] = 1
    assert probe(b, Piece("O", O, 4, 4)) is Contact.BLOCKED
    assert collide(b, Piece("O", O, 4, 4))


def test_probe_above_ceiling_is_distinct():
    b = empty_board()
    assert probe(b, Piece("O", O, 4, -1)) is Contact.CEILING
    assert collide(b, Piece("O", O, 4, -1))


def test_empty_rows_in_shape_do_not_collide():
    # the I template's first row is empty, so it may sit one row into the floor
    i = Piece.spawn("I")
    assert not collide(empty_board(), i.moved(0, ROWS - 2))


def test_lock_copies_board():
    b = empty_board()
    out = lock(b, Piece("O", O, 0, 18))
    assert out[18][:2] == [1, 1] and out[19][:2] == [1, 1]
    assert not any(map(any, b))


def test_lock_above_ceiling_refused():
    assert lock(empty_board(), Piece("O", O, 0, -1)) is None


def test_sweep_removes_only_complete_rows_in_order():
    b = empty_board()
    b[19] = [1] * COLS
    b[17] = [1] * COLS
    b[18] = [1, 0] * 5
    b[16] = [0, 1] * 5
    b[10][3] = 1
    out, n = sweep(b)
    assert n == 2
    assert len(out) == ROWS
    assert out[0] == [0] * COLS and out[1] == [0] * COLS
    assert out[19] == [1, 0] * 5
    assert out[18] == [0, 1] * 5
    assert out[12][3] == 1


def test_sweep_no_complete_rows():
    b = empty_board()
    b[19] = [1] * (COLS - 1) + [0]
    out, n = sweep(b)
    assert n == 0
    assert out == b


def test_drop_distance_to_floor_and_stack():
    b = empty_board()
    assert drop_distance(b, Piece("O", O, 0, 0)) == ROWS - 2
    b[10][1] = 1
    assert drop_distance(b, Piece("O", O, 0, 0)) == 8
