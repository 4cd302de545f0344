"""
Tetromino definitions: shapes, rotation transform, and offset (kick) tables.

Every piece is described by 4 mino offsets around a center cell. Rotating a
piece rotates those offsets in 90-degree clockwise steps; the offset tables
then decide where the center may be nudged when the plain rotation collides.

Coordinate convention:
  - Offsets and positions are (col, row) pairs.
  - Row 0 is the bottom of the matrix and rows grow upward.
  - Column 0 is the left edge and columns grow rightward.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

Coordinate = tuple[int, int]


class TetrominoType(enum.IntEnum):
    """The 7 tetromino kinds. The value doubles as the matrix cell code."""
    I = 1
    O = 2
    T = 3
    J = 4
    L = 5
    S = 6
    Z = 7


ALL_TETROMINO_TYPES: tuple[TetrominoType, ...] = tuple(TetrominoType)

# =============================================================================
# Piece Colors — standard guideline colors (RGB), used by the hosts
# =============================================================================

COLOR_CYAN   = (0, 255, 255)    # I
COLOR_YELLOW = (255, 255, 0)    # O
COLOR_PURPLE = (160, 0, 240)    # T
COLOR_BLUE   = (0, 0, 255)      # J
COLOR_ORANGE = (255, 165, 0)    # L
COLOR_GREEN  = (0, 255, 0)      # S
COLOR_RED    = (255, 0, 0)      # Z

PIECE_COLORS: dict[TetrominoType, tuple[int, int, int]] = {
    TetrominoType.I: COLOR_CYAN,
    TetrominoType.O: COLOR_YELLOW,
    TetrominoType.T: COLOR_PURPLE,
    TetrominoType.J: COLOR_BLUE,
    TetrominoType.L: COLOR_ORANGE,
    TetrominoType.S: COLOR_GREEN,
    TetrominoType.Z: COLOR_RED,
}

# =============================================================================
# Shapes
# =============================================================================
# Mino offsets at orientation 0 (spawn), relative to the piece center.

SHAPES: dict[TetrominoType, tuple[Coordinate, ...]] = {
    TetrominoType.I: ((-1, 0), (0, 0), (1, 0), (2, 0)),
    TetrominoType.J: ((-1, 1), (-1, 0), (0, 0), (1, 0)),
    TetrominoType.L: ((-1, 0), (0, 0), (1, 0), (1, 1)),
    TetrominoType.O: ((0, 0), (0, 1), (1, 0), (1, 1)),
    TetrominoType.S: ((-1, 0), (0, 0), (0, 1), (1, 1)),
    TetrominoType.T: ((-1, 0), (0, 0), (0, 1), (1, 0)),
    TetrominoType.Z: ((-1, 1), (0, 1), (0, 0), (1, 0)),
}

# =============================================================================
# Offset Data
# =============================================================================
#
# Each table has 5 rows. A row holds one (dcol, drow) entry per orientation
# (0=spawn, 1=CW, 2=180, 3=CCW). Rotating from orientation `a` to `b` tries,
# row by row, the center translation row[a] - row[b]; the first translation
# that fits wins. Kick offsets in the usual SRS wiki tables are exactly these
# differences.
#
# J, L, S, T and Z share one table. I and O have their own: the O piece uses
# its table only to cancel the drift of its off-center rotation, so all 5 of
# its rows are identical.
# =============================================================================

OffsetTable = tuple[tuple[Coordinate, Coordinate, Coordinate, Coordinate], ...]

JLSTZ_OFFSET_DATA: OffsetTable = (
    ((0, 0), (0, 0), (0, 0), (0, 0)),
    ((0, 0), (1, 0), (0, 0), (-1, 0)),
    ((0, 0), (1, -1), (0, 0), (-1, -1)),
    ((0, 0), (0, 2), (0, 0), (0, 2)),
    ((0, 0), (1, 2), (0, 0), (-1, 2)),
)

I_OFFSET_DATA: OffsetTable = (
    ((0, 0), (-1, 0), (-1, 1), (0, 1)),
    ((-1, 0), (0, 0), (1, 1), (0, 1)),
    ((2, 0), (0, 0), (-2, 1), (0, 1)),
    ((-1, 0), (0, 1), (1, 0), (0, -1)),
    ((2, 0), (0, -2), (-2, 0), (0, 2)),
)

O_OFFSET_DATA: OffsetTable = (
    ((0, 0), (0, -1), (-1, -1), (-1, 0)),
) * 5

OFFSET_DATA: dict[TetrominoType, OffsetTable] = {
    TetrominoType.I: I_OFFSET_DATA,
    TetrominoType.O: O_OFFSET_DATA,
    TetrominoType.T: JLSTZ_OFFSET_DATA,
    TetrominoType.J: JLSTZ_OFFSET_DATA,
    TetrominoType.L: JLSTZ_OFFSET_DATA,
    TetrominoType.S: JLSTZ_OFFSET_DATA,
    TetrominoType.Z: JLSTZ_OFFSET_DATA,
}


def tetromino_shape(kind: TetrominoType) -> tuple[Coordinate, ...]:
    """Return the 4 mino offsets of ``kind`` at orientation 0."""
    return SHAPES[kind]


def offset_data(kind: TetrominoType) -> OffsetTable:
    """Return the 5-row offset table used to kick ``kind`` when rotating."""
    return OFFSET_DATA[kind]


def rotate_offset(offset: Coordinate, orientation: int) -> Coordinate:
    """Rotate a mino offset clockwise by ``orientation`` quarter turns.

    Args:
        offset: (col, row) offset relative to the piece center.
        orientation: Number of clockwise quarter turns; taken modulo 4.

    Returns:
        The rotated (col, row) offset.
    """
    x, y = offset
    orientation %= 4
    if orientation == 1:
        return (y, -x)
    if orientation == 2:
        return (-x, -y)
    if orientation == 3:
        return (-y, x)
    return (x, y)


def kick_candidates(
    kind: TetrominoType, old_orientation: int, new_orientation: int
) -> list[Coordinate]:
    """Return the 5 center translations to try, in order, for a rotation.

    Args:
        kind: Tetromino kind being rotated.
        old_orientation: Orientation before the rotation (0-3).
        new_orientation: Target orientation (0-3).

    Returns:
        List of (dcol, drow) translations; the first that fits is used.
    """
    old_orientation %= 4
    new_orientation %= 4
    return [
        (row[old_orientation][0] - row[new_orientation][0],
         row[old_orientation][1] - row[new_orientation][1])
        for row in offset_data(kind)
    ]


@dataclass(frozen=True)
class Tetromino:
    """A tetromino of some kind at some position and orientation.

    Instances are immutable values: moving or rotating a piece produces a
    new ``Tetromino``.

    Attributes:
        kind: The tetromino kind.
        center: (col, row) of the piece center on the matrix.
        orientation: Clockwise quarter turns from spawn, normalised to 0-3.
    """

    kind: TetrominoType
    center: Coordinate
    orientation: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "orientation", self.orientation % 4)

    def minoes(self) -> list[Coordinate]:
        """Return the absolute (col, row) position of each of the 4 minoes."""
        col, row = self.center
        return [
            (col + dx, row + dy)
            for dx, dy in (
                rotate_offset(offset, self.orientation)
                for offset in tetromino_shape(self.kind)
            )
        ]

    def moved(self, dcol: int, drow: int) -> Tetromino:
        """Return a copy translated by (dcol, drow) at the same orientation."""
        return Tetromino(self.kind, (self.center[0] + dcol, self.center[1] + drow), self.orientation)

    def rotated(self, dcol: int, drow: int, orientation: int) -> Tetromino:
        """Return a copy translated by (dcol, drow) and set to ``orientation``."""
        return Tetromino(self.kind, (self.center[0] + dcol, self.center[1] + drow), orientation)
