"""
Game state — the spatial core of the game.

Owns the matrix, the falling tetromino, the piece bag, the preview queue and
the held kind, and exposes every player action. Each action builds a
candidate tetromino, runs the fit test, and either commits it or leaves the
state untouched.
"""

from __future__ import annotations

import logging
import random

import numpy as np

from blockfall.config import GameConfig
from blockfall.game.bag import Bag
from blockfall.game.board import Matrix
from blockfall.game.pieces import Tetromino, TetrominoType, kick_candidates

logger = logging.getLogger(__name__)


class GameState:
    """State of a game: matrix, falling piece, preview queue and hold.

    Rows are indexed from bottom to top and columns from left to right;
    coordinates are (col, row).

    Attributes:
        config: The configuration the game was created with.
        lines_cleared: Total number of rows cleared since the game started.
        spawn_blocked: Whether the most recently spawned piece overlapped
            the matrix. The game does not stop on its own; callers decide
            what a blocked spawn means.
    """

    def __init__(self, config: GameConfig | None = None) -> None:
        """Create the initial state: empty matrix, full preview queue and a
        falling piece at the spawn position.

        Args:
            config: Game configuration; defaults to ``GameConfig()``.
        """
        self.config = config or GameConfig()
        self._matrix = Matrix(self.config.width, self.config.height)
        self._bag = Bag(random.Random(self.config.seed))
        self.lines_cleared = 0
        self.spawn_blocked = False
        self._held: TetrominoType | None = None

        first = self._bag.draw()
        self._next_preview: list[TetrominoType] = [
            self._bag.draw() for _ in range(self.config.preview_length)
        ]
        self._falling = self._spawn(first)

    # ── Accessors ──────────────────────────────────────────────────────────

    @property
    def matrix(self) -> np.ndarray:
        """Copy of the locked cells, shape (height, width), indexed [row, col].

        0 marks an empty cell, otherwise the cell holds a TetrominoType value.
        """
        return self._matrix.get_grid()

    def placed_square(self, col: int, row: int) -> TetrominoType | None:
        """Kind locked at (col, row), or None if the cell is empty."""
        return self._matrix.cell(col, row)

    @property
    def falling_tetromino(self) -> Tetromino:
        return self._falling

    @property
    def next_preview(self) -> tuple[TetrominoType, ...]:
        """The upcoming kinds, front first."""
        return tuple(self._next_preview)

    @property
    def held(self) -> TetrominoType | None:
        return self._held

    @property
    def width(self) -> int:
        return self._matrix.width

    @property
    def height(self) -> int:
        return self._matrix.height

    def fits(self, tetromino: Tetromino) -> bool:
        """Fit test against the current matrix."""
        return self._matrix.fits(tetromino)

    def fits_after_gravity(self) -> bool:
        """Whether the falling piece could move down one row. Mutates nothing."""
        return self._matrix.fits(self._falling.moved(0, -1))

    # ── Player actions ─────────────────────────────────────────────────────

    def apply_gravity(self) -> bool:
        """Move the falling piece down one row.

        Returns:
            True if it moved, False if it rests on the floor or the stack.
        """
        return self._move_if_fits(self._falling.moved(0, -1))

    def move_left(self) -> bool:
        """Move the falling piece one column left. Returns True on success."""
        return self._move_if_fits(self._falling.moved(-1, 0))

    def move_right(self) -> bool:
        """Move the falling piece one column right. Returns True on success."""
        return self._move_if_fits(self._falling.moved(1, 0))

    def rotate_left(self) -> bool:
        """Rotate counter-clockwise, trying all 5 kicks. Returns True on success."""
        return self._rotate_to_orientation((self._falling.orientation + 3) % 4)

    def rotate_right(self) -> bool:
        """Rotate clockwise, trying all 5 kicks. Returns True on success."""
        return self._rotate_to_orientation((self._falling.orientation + 1) % 4)

    def hard_drop(self) -> bool:
        """Drop the falling piece as far as it goes and lock it.

        Returns:
            True if the next piece spawned clear, False if it is blocked.
        """
        while self.apply_gravity():
            pass
        return self.lock_piece()

    def hold(self) -> None:
        """Swap the falling piece's kind with the held kind.

        With nothing held, the falling kind is put on hold and the next piece
        comes from the preview queue. Otherwise the held kind re-spawns at
        the spawn position and the falling kind takes its place on hold.
        Holding is allowed any number of times per piece.
        """
        new_held = self._falling.kind
        if self._held is None:
            self._spawn_next_piece()
        else:
            self._falling = self._spawn(self._held)
        self._held = new_held

    def lock_piece(self) -> bool:
        """Lock the falling piece onto the matrix, clear lines, spawn the next.

        Returns:
            True if the next piece spawned clear, False if it is blocked.
        """
        self._matrix.place(self._falling)
        logger.debug("locked %s at %s", self._falling.kind.name, self._falling.center)
        self.lines_cleared += self._matrix.clear_lines()
        self._spawn_next_piece()
        return not self.spawn_blocked

    # ── Helpers ────────────────────────────────────────────────────────────

    def _spawn(self, kind: TetrominoType) -> Tetromino:
        tetromino = Tetromino(kind, self.config.spawn_center, 0)
        self.spawn_blocked = not self._matrix.fits(tetromino)
        if self.spawn_blocked:
            logger.debug("spawn of %s is blocked", kind.name)
        return tetromino

    def _spawn_next_piece(self) -> None:
        self._next_preview.append(self._bag.draw())
        self._falling = self._spawn(self._next_preview.pop(0))

    def _move_if_fits(self, candidate: Tetromino) -> bool:
        if not self._matrix.fits(candidate):
            return False
        self._falling = candidate
        return True

    def _rotate_to_orientation(self, new_orientation: int) -> bool:
        old = self._falling
        for dcol, drow in kick_candidates(old.kind, old.orientation, new_orientation):
            if self._move_if_fits(old.rotated(dcol, drow, new_orientation)):
                return True
        return False
