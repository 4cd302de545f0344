"""
Timed game state — fall cadence and lock delay.

Wraps a GameState with a two-phase clock:

  - Falling: the piece has room below it; every ``fall_interval_ms`` gravity
    moves it down one row.
  - Locking: the piece rests on something; once ``time_to_lock`` runs out
    the piece locks.

The clock only moves when the caller passes elapsed time to
``advance_time``. After every action the phase is re-derived from whether
the piece could still fall.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

import numpy as np

from blockfall.config import GameConfig
from blockfall.game.game_state import GameState
from blockfall.game.pieces import Tetromino, TetrominoType

logger = logging.getLogger(__name__)


class Phase(enum.Enum):
    FALLING = "falling"
    LOCKING = "locking"


@dataclass(frozen=True)
class TimeState:
    """Snapshot of the clock.

    Attributes:
        phase: Current phase.
        time_to_fall: Milliseconds until the next gravity step; None while
            locking.
        time_to_lock: Milliseconds of lock delay left. Kept across phase
            changes and only restored by a lock, hard drop or hold.
    """

    phase: Phase
    time_to_fall: int | None
    time_to_lock: int


@dataclass(frozen=True, eq=False)
class Snapshot:
    """Everything a host needs to draw one frame."""

    matrix: np.ndarray
    falling_tetromino: Tetromino
    next_preview: tuple[TetrominoType, ...]
    held: TetrominoType | None
    time_state: TimeState
    lines_cleared: int
    spawn_blocked: bool


class TimedGameState:
    """A GameState driven by caller-supplied elapsed time.

    Attributes:
        game_state: The wrapped spatial state.
        fall_interval: Milliseconds between gravity steps.
        lock_interval: Milliseconds of lock delay.
    """

    def __init__(self, config: GameConfig | None = None) -> None:
        config = config or GameConfig()
        self.game_state = GameState(config)
        self.fall_interval = config.fall_interval_ms
        self.lock_interval = config.lock_interval_ms

        self._phase = Phase.FALLING
        self._time_to_fall = self.fall_interval
        self._time_to_lock = self.lock_interval
        self.update_time_state()

    # ── Accessors ──────────────────────────────────────────────────────────

    @property
    def time_state(self) -> TimeState:
        return TimeState(
            phase=self._phase,
            time_to_fall=self._time_to_fall if self._phase is Phase.FALLING else None,
            time_to_lock=self._time_to_lock,
        )

    @property
    def matrix(self) -> np.ndarray:
        return self.game_state.matrix

    @property
    def falling_tetromino(self) -> Tetromino:
        return self.game_state.falling_tetromino

    @property
    def next_preview(self) -> tuple[TetrominoType, ...]:
        return self.game_state.next_preview

    @property
    def held(self) -> TetrominoType | None:
        return self.game_state.held

    def snapshot(self) -> Snapshot:
        """Bundle the readable state into one immutable value."""
        return Snapshot(
            matrix=self.matrix,
            falling_tetromino=self.falling_tetromino,
            next_preview=self.next_preview,
            held=self.held,
            time_state=self.time_state,
            lines_cleared=self.game_state.lines_cleared,
            spawn_blocked=self.game_state.spawn_blocked,
        )

    # ── Clock ──────────────────────────────────────────────────────────────

    def update_time_state(self) -> None:
        """Re-derive the phase from whether the piece could fall one row.

        Going from Locking back to Falling starts a fresh fall interval.
        Entering or staying in Locking leaves ``time_to_lock`` as it is.
        """
        if self.game_state.fits_after_gravity():
            if self._phase is Phase.LOCKING:
                logger.debug("locking -> falling")
                self._phase = Phase.FALLING
                self._time_to_fall = self.fall_interval
        elif self._phase is Phase.FALLING:
            logger.debug("falling -> locking (%d ms left)", self._time_to_lock)
            self._phase = Phase.LOCKING

    def advance_time(self, milliseconds: int) -> bool:
        """Let ``milliseconds`` of game time pass.

        Several gravity steps and locks may happen in one call; whatever is
        left of the budget is carried over in the counters.

        Args:
            milliseconds: Elapsed time to consume; must not be negative.

        Returns:
            False if the falling piece is blocked at its spawn position when
            the call returns, True otherwise.

        Raises:
            ValueError: If ``milliseconds`` is negative.
        """
        if milliseconds < 0:
            raise ValueError(f"Cannot advance time by a negative amount: {milliseconds}")

        budget = milliseconds
        while budget > 0:
            if self._phase is Phase.FALLING:
                if budget < self._time_to_fall:
                    self._time_to_fall -= budget
                    break
                budget -= self._time_to_fall
                self.game_state.apply_gravity()
                self._time_to_fall = self.fall_interval
            else:
                if budget < self._time_to_lock:
                    self._time_to_lock -= budget
                    break
                budget -= self._time_to_lock
                self.game_state.lock_piece()
                self._time_to_lock = self.lock_interval
            self.update_time_state()

        return not self.game_state.spawn_blocked

    # ── Player actions ─────────────────────────────────────────────────────

    def move_left(self) -> bool:
        moved = self.game_state.move_left()
        self.update_time_state()
        return moved

    def move_right(self) -> bool:
        moved = self.game_state.move_right()
        self.update_time_state()
        return moved

    def rotate_left(self) -> bool:
        rotated = self.game_state.rotate_left()
        self.update_time_state()
        return rotated

    def rotate_right(self) -> bool:
        rotated = self.game_state.rotate_right()
        self.update_time_state()
        return rotated

    def apply_gravity(self) -> bool:
        fell = self.game_state.apply_gravity()
        self.update_time_state()
        return fell

    def hard_drop(self) -> bool:
        """Hard drop with a full lock delay for the next piece.

        Returns:
            True if the next piece spawned clear, False if it is blocked.
        """
        self._time_to_lock = self.lock_interval
        spawned = self.game_state.hard_drop()
        self.update_time_state()
        return spawned

    def hold(self) -> None:
        self._time_to_lock = self.lock_interval
        self.game_state.hold()
        self.update_time_state()
