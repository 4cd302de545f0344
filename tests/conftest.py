from __future__ import annotations

import pytest

from blockfall.config import GameConfig
from blockfall.game.game_state import GameState
from blockfall.game.pieces import Tetromino, TetrominoType
from blockfall.game.timing import TimedGameState


def _place_falling(state: GameState, kind, center, orientation):
    state._falling = Tetromino(kind, center or state.config.spawn_center, orientation)


@pytest.fixture
def make_state():
    """Build a seeded GameState with a chosen falling piece."""
    def factory(kind=TetrominoType.T, center=None, orientation=0, seed=0, **config_kwargs):
        state = GameState(GameConfig(seed=seed, **config_kwargs))
        _place_falling(state, kind, center, orientation)
        return state
    return factory


@pytest.fixture
def make_timed():
    """Build a seeded TimedGameState with a chosen falling piece."""
    def factory(kind=TetrominoType.T, center=None, orientation=0, seed=0, **config_kwargs):
        game = TimedGameState(GameConfig(seed=seed, **config_kwargs))
        _place_falling(game.game_state, kind, center, orientation)
        game.update_time_state()
        return game
    return factory


@pytest.fixture
def fill():
    """Write cells straight into a state's matrix: fill(state, [(col, row), ...])."""
    def factory(state: GameState, cells, kind=TetrominoType.Z):
        for col, row in cells:
            state._matrix.grid[row, col] = int(kind)
    return factory
