"""Rules engine for a falling-block puzzle game, with console and pygame hosts."""

from blockfall.config import GameConfig, load_config
from blockfall.game import GameState, TetrominoType, TimedGameState

__all__ = ["GameConfig", "load_config", "GameState", "TetrominoType", "TimedGameState"]
