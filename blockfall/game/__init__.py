"""Game logic: pieces, bag, matrix, game state and the timed wrapper."""

from blockfall.game.pieces import (
    ALL_TETROMINO_TYPES,
    I_OFFSET_DATA,
    JLSTZ_OFFSET_DATA,
    O_OFFSET_DATA,
    Tetromino,
    TetrominoType,
)
from blockfall.game.bag import Bag
from blockfall.game.board import Matrix
from blockfall.game.game_state import GameState
from blockfall.game.timing import Phase, Snapshot, TimedGameState, TimeState

__all__ = [
    "ALL_TETROMINO_TYPES",
    "I_OFFSET_DATA",
    "JLSTZ_OFFSET_DATA",
    "O_OFFSET_DATA",
    "Tetromino",
    "TetrominoType",
    "Bag",
    "Matrix",
    "GameState",
    "Phase",
    "Snapshot",
    "TimedGameState",
    "TimeState",
]
