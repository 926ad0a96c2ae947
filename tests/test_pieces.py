import math

import pytest

from tetrust.pieces import Point, Tetromino, TetrominoKind


@pytest.mark.parametrize("kind", list(TetrominoKind))
def test_from_kind_keeps_kind_and_has_four_blocks(kind):
    piece = Tetromino.from_kind(kind)
    assert piece.kind is kind
    assert len(piece.points) == 4
    assert len(piece.cells()) == 4


def test_kind_from_integer():
    assert TetrominoKind(0) is TetrominoKind.I
    assert TetrominoKind(6) is TetrominoKind.T
    assert Tetromino.from_kind(2).kind is TetrominoKind.S


def test_kind_out_of_range_raises():
    with pytest.raises(ValueError):
        TetrominoKind(7)
    with pytest.raises(ValueError):
        Tetromino.from_kind(7)


def test_i_piece_spawn_cells():
    assert Tetromino.from_kind(TetrominoKind.I).cells() == [(3, 0), (4, 0), (5, 0), (6, 0)]


def test_negative_rows_clamp_to_top():
    cells = Tetromino.from_kind(TetrominoKind.S).cells()
    assert all(y == 0 for _, y in cells)


@pytest.mark.parametrize("kind", list(TetrominoKind))
def test_four_quarter_turns_restore_points(kind):
    piece = Tetromino.from_kind(kind)
    original = piece.points
    for _ in range(4):
        piece.rotate(math.pi / 2)
    assert piece.points == original


@pytest.mark.parametrize("kind", list(TetrominoKind))
def test_turn_and_turn_back(kind):
    piece = Tetromino.from_kind(kind)
    original = piece.points
    piece.rotate(math.pi / 2)
    piece.rotate(-math.pi / 2)
    assert piece.points == original


def test_o_piece_rotation_is_symmetric():
    piece = Tetromino.from_kind(TetrominoKind.O)
    before = set(piece.points)
    piece.rotate(math.pi / 2)
    assert set(piece.points) == before


def test_copy_is_independent():
    piece = Tetromino.from_kind(TetrominoKind.T)
    clone = piece.copy()
    clone.rotate(math.pi / 2)
    clone.anchor = clone.anchor + Point(1.0, 1.0)
    assert piece.points == Tetromino.from_kind(TetrominoKind.T).points
    assert piece.anchor == Tetromino.from_kind(TetrominoKind.T).anchor
    assert clone.points != piece.points and clone.anchor != piece.anchor


def test_point_addition_with_zero_is_identity():
    p = Point(2.5, -1.0)
    assert p + Point(0.0, 0.0) == p
    assert (p + Point(1.0, 1.0)) + Point(-1.0, -1.0) == p