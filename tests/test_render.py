import pytest

from tetrust.render import Vertex, board_vertices, quad_indices, quad_rects

WIDTH, HEIGHT = 10, 20


def empty_board():
    return [[None] * WIDTH for _ in range(HEIGHT)]


def test_quad_indices_pattern():
    assert quad_indices(2) == [0, 1, 2, 3, 2, 1, 4, 5, 6, 7, 6, 5]


def test_quad_indices_length_and_range():
    indices = quad_indices(200)
    assert len(indices) == 1200
    assert max(indices) == 799
    assert quad_indices(0) == []


def test_quad_indices_negative():
    with pytest.raises(ValueError):
        quad_indices(-1)


def test_vertices_exact_ratio_fills_screen():
    vertices = board_vertices(empty_board(), 100, 200)
    assert len(vertices) == 800
    assert vertices[0] == Vertex((-1.0, -1.0, 0.0), (0.01, 0.01, 0.01))
    assert vertices[-1].position == pytest.approx((1.0, 1.0, 0.0))


def test_vertices_wide_surface_centred_horizontally():
    vertices = board_vertices(empty_board(), 400, 200)
    xs = [v.position[0] for v in vertices]
    ys = [v.position[1] for v in vertices]
    assert min(xs) == pytest.approx(-max(xs))
    assert min(ys) == pytest.approx(-1.0)
    assert max(ys) == pytest.approx(1.0)


def test_vertices_tall_surface_centred_vertically():
    vertices = board_vertices(empty_board(), 100, 400)
    xs = [v.position[0] for v in vertices]
    ys = [v.position[1] for v in vertices]
    assert min(xs) == pytest.approx(-1.0)
    assert max(xs) == pytest.approx(1.0)
    assert min(ys) == pytest.approx(-max(ys))


def test_vertices_bottom_row_comes_first():
    board = empty_board()
    red = (1.0, 0.0, 0.0)
    blue = (0.0, 0.0, 1.0)
    board[HEIGHT - 1][0] = red
    board[0][0] = blue
    vertices = board_vertices(board, 100, 200)
    assert all(v.color == red for v in vertices[0:4])
    top_left = (HEIGHT - 1) * WIDTH * 4
    assert all(v.color == blue for v in vertices[top_left : top_left + 4])
    assert vertices[4].color == (0.01, 0.01, 0.01)


def test_vertices_reject_zero_size():
    with pytest.raises(ValueError):
        board_vertices(empty_board(), 0, 100)


def test_rects_tile_surface_at_exact_ratio():
    rects = quad_rects(empty_board(), 100, 200)
    assert len(rects) == 200
    area = sum(w * h for (_, _, w, h), _ in rects)
    assert area == pytest.approx(100 * 200)
    (left, top, w, h), _ = rects[0]
    assert (left, top + h) == pytest.approx((0.0, 200.0))


def test_rects_stay_inside_surface():
    for size in ((640, 480), (120, 700)):
        for (left, top, w, h), _ in quad_rects(empty_board(), *size):
            assert left >= -1e-9 and top >= -1e-9
            assert left + w <= size[0] + 1e-9
            assert top + h <= size[1] + 1e-9


def test_rects_carry_cell_colour():
    board = empty_board()
    green = (0.0, 1.0, 0.0)
    board[HEIGHT - 1][3] = green
    rects = quad_rects(board, 100, 200)
    assert rects[3][1] == green
    assert rects[2][1] == (0.01, 0.01, 0.01)