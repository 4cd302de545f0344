"""
Host-side glue shared by the console and pygame front ends.

The game core knows nothing about drawing or input devices. A host renders
``Snapshot`` values it polls from a ``TimedGameState`` and translates its
own key codes into ``Action`` values, which ``perform`` applies.
"""

from __future__ import annotations

import enum
from collections.abc import Hashable
from typing import Protocol

from blockfall.game.timing import Snapshot, TimedGameState


class Action(enum.IntEnum):
    """Player actions a host can trigger."""
    MOVE_LEFT = 0
    MOVE_RIGHT = 1
    ROTATE_LEFT = 2
    ROTATE_RIGHT = 3
    HARD_DROP = 4
    HOLD = 5


class Frontend(Protocol):
    """What a host provides: a way to draw and a way to react to keys."""

    def draw(self, snapshot: Snapshot) -> None:
        ...

    def on_key(self, code: Hashable) -> bool:
        """Handle one key press. Returns False once the game should end."""
        ...


def perform(game: TimedGameState, action: Action) -> bool:
    """Apply ``action`` to ``game``.

    Returns:
        False if the action left the falling piece blocked at spawn (the
        caller may treat that as the end of the game), True otherwise.
    """
    if action == Action.MOVE_LEFT:
        game.move_left()
    elif action == Action.MOVE_RIGHT:
        game.move_right()
    elif action == Action.ROTATE_LEFT:
        game.rotate_left()
    elif action == Action.ROTATE_RIGHT:
        game.rotate_right()
    elif action == Action.HARD_DROP:
        return game.hard_drop()
    elif action == Action.HOLD:
        game.hold()
    return not game.game_state.spawn_blocked
