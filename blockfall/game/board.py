"""
Matrix logic for the play field.

The matrix is a 2D numpy array (height x width) of int8 values:
  - 0 = empty cell
  - 1-7 = TetrominoType value of the piece that locked there

Row 0 is the bottom of the field. With the default 22 rows, rows 20-21 are
the hidden spawn buffer above the 20 visible rows.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

import numpy as np

from blockfall.game.pieces import Coordinate, Tetromino, TetrominoType

logger = logging.getLogger(__name__)

EMPTY = 0


class Matrix:
    """Play field with the fit test, locking and line clearing.

    Attributes:
        width: Number of columns (default 10).
        height: Number of rows including the hidden buffer (default 22).
        grid: 2D numpy array of shape (height, width), dtype int8, indexed
            ``grid[row, col]``.
    """

    def __init__(self, width: int = 10, height: int = 22) -> None:
        """Initialize an empty matrix.

        Args:
            width: Number of columns.
            height: Total number of rows (including hidden buffer rows).
        """
        self.width = width
        self.height = height
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)

    def is_inside(self, col: int, row: int) -> bool:
        return 0 <= col < self.width and 0 <= row < self.height

    def cells_fit(self, cells: Iterable[Coordinate]) -> bool:
        """Check whether every cell is on the matrix and empty."""
        for col, row in cells:
            if not self.is_inside(col, row):
                return False
            if self.grid[row, col] != EMPTY:
                return False
        return True

    def fits(self, tetromino: Tetromino) -> bool:
        """Check whether ``tetromino`` can occupy its current position.

        A piece fits if all 4 of its minoes satisfy ``0 <= col < width``,
        ``0 <= row < height`` and lie on an empty cell.
        """
        return self.cells_fit(tetromino.minoes())

    def place(self, tetromino: Tetromino) -> None:
        """Write the piece's minoes into the matrix, tagged with its kind.

        Does NOT check whether the cells are empty.

        Raises:
            IndexError: If a mino lies outside the matrix.
        """
        minoes = tetromino.minoes()
        for col, row in minoes:
            # numpy would wrap a negative index onto the opposite edge
            if not self.is_inside(col, row):
                raise IndexError(f"Mino ({col}, {row}) is outside the {self.width}x{self.height} matrix")
        value = int(tetromino.kind)
        for col, row in minoes:
            self.grid[row, col] = value

    def clear_lines(self) -> int:
        """Remove all full rows and let the rows above fall into place.

        Rows are scanned bottom to top. Every non-full row is copied down by
        the number of full rows found beneath it, then the top rows vacated
        by the shift are emptied.

        Returns:
            The number of rows cleared.
        """
        num_cleared = 0
        for row in range(self.height):
            if np.all(self.grid[row] != EMPTY):
                num_cleared += 1
            elif num_cleared:
                self.grid[row - num_cleared] = self.grid[row]

        if num_cleared:
            self.grid[self.height - num_cleared:] = EMPTY
            logger.debug("cleared %d line(s)", num_cleared)
        return num_cleared

    def cell(self, col: int, row: int) -> TetrominoType | None:
        """Return the kind locked at (col, row), or None if the cell is empty."""
        value = int(self.grid[row, col])
        return TetrominoType(value) if value != EMPTY else None

    def get_grid(self) -> np.ndarray:
        """Return a copy of the matrix grid.

        Returns:
            A numpy array of shape (height, width), dtype int8.
        """
        return self.grid.copy()
