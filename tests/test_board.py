"""Tests for the matrix: fit test, locking and line clearing."""

from __future__ import annotations

import numpy as np
import pytest

from blockfall.game.board import EMPTY, Matrix
from blockfall.game.pieces import Tetromino, TetrominoType


def test_new_matrix_is_empty():
    matrix = Matrix()
    assert matrix.grid.shape == (22, 10)
    assert not matrix.grid.any()


def test_fits_respects_bounds():
    matrix = Matrix()
    assert matrix.fits(Tetromino(TetrominoType.T, (4, 10), 0))
    assert matrix.fits(Tetromino(TetrominoType.T, (1, 0), 0))
    # Left mino at col -1
    assert not matrix.fits(Tetromino(TetrominoType.T, (0, 10), 0))
    # Right mino at col 10
    assert not matrix.fits(Tetromino(TetrominoType.T, (9, 10), 0))
    # Below the floor
    assert not matrix.fits(Tetromino(TetrominoType.T, (4, -1), 0))
    # Nub at row 22
    assert not matrix.fits(Tetromino(TetrominoType.T, (4, 21), 0))


def test_fits_rejects_occupied_cells():
    matrix = Matrix()
    matrix.grid[11, 4] = int(TetrominoType.Z)
    assert not matrix.fits(Tetromino(TetrominoType.T, (4, 10), 0))
    assert matrix.fits(Tetromino(TetrominoType.T, (4, 10), 2))


def test_place_tags_cells_with_kind():
    matrix = Matrix()
    matrix.place(Tetromino(TetrominoType.L, (4, 0), 0))
    for col, row in [(3, 0), (4, 0), (5, 0), (5, 1)]:
        assert matrix.cell(col, row) is TetrominoType.L
    assert matrix.cell(4, 1) is None
    assert int((matrix.grid != EMPTY).sum()) == 4


def test_place_outside_matrix_raises():
    matrix = Matrix()
    # Left mino at col -1
    with pytest.raises(IndexError):
        matrix.place(Tetromino(TetrominoType.T, (0, 10), 0))
    # Below the floor
    with pytest.raises(IndexError):
        matrix.place(Tetromino(TetrominoType.T, (4, -1), 0))
    assert not matrix.grid.any()


def test_clear_lines_compacts_multiple_rows():
    matrix = Matrix()
    matrix.grid[2, :] = int(TetrominoType.I)
    matrix.grid[5, :] = int(TetrominoType.I)
    for row in (0, 1, 3, 4, 6, 7):
        matrix.grid[row, row] = int(TetrominoType.T)
    matrix.grid[21, 9] = int(TetrominoType.L)
    before = matrix.get_grid()

    assert matrix.clear_lines() == 2

    remaining = np.delete(before, [2, 5], axis=0)
    expected = np.vstack([remaining, np.zeros((2, 10), dtype=np.int8)])
    np.testing.assert_array_equal(matrix.grid, expected)
    # Rows below the first clear stay put
    assert matrix.cell(0, 0) is TetrominoType.T
    assert matrix.cell(1, 1) is TetrominoType.T
    # Between the clears: down by one
    assert matrix.cell(3, 2) is TetrominoType.T
    assert matrix.cell(4, 3) is TetrominoType.T
    # Above both clears: down by two
    assert matrix.cell(6, 4) is TetrominoType.T
    assert matrix.cell(7, 5) is TetrominoType.T
    assert matrix.cell(9, 19) is TetrominoType.L
    assert not matrix.grid[20:].any()


def test_clear_lines_without_full_rows_is_a_no_op():
    matrix = Matrix()
    matrix.grid[0, :9] = int(TetrominoType.O)
    before = matrix.get_grid()
    assert matrix.clear_lines() == 0
    np.testing.assert_array_equal(matrix.grid, before)


def test_get_grid_returns_a_copy():
    matrix = Matrix()
    grid = matrix.get_grid()
    grid[0, 0] = 5
    assert matrix.grid[0, 0] == EMPTY


def test_custom_size():
    matrix = Matrix(6, 8)
    assert matrix.grid.shape == (8, 6)
    assert matrix.fits(Tetromino(TetrominoType.I, (2, 6), 0))
    assert not matrix.fits(Tetromino(TetrominoType.I, (4, 6), 0))
