"""
7-bag randomizer.

Each cycle of 7 draws hands out every tetromino kind exactly once, in a
uniformly random order.
"""

from __future__ import annotations

import random

from blockfall.game.pieces import ALL_TETROMINO_TYPES, TetrominoType


class Bag:
    """Randomly yields tetromino kinds so that every 7 draws from a refill
    contain one of each kind.

    Attributes:
        remaining: Kinds not yet drawn in the current cycle. Never empty
            between draws.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        """Create a bag holding all 7 kinds.

        Args:
            rng: Random source. Pass a seeded ``random.Random`` for a
                reproducible sequence; defaults to a fresh unseeded one.
        """
        self._rng = rng or random.Random()
        self.remaining: list[TetrominoType] = list(ALL_TETROMINO_TYPES)

    def draw(self) -> TetrominoType:
        """Remove and return a random kind, refilling the bag once it empties."""
        index = self._rng.randrange(len(self.remaining))
        result = self.remaining.pop(index)

        if not self.remaining:
            self.remaining = list(ALL_TETROMINO_TYPES)

        return result
