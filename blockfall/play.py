"""
Window play mode.

Runs a TimedGameState in a pygame window: key presses are applied as they
arrive and the clock is advanced by the real time elapsed between frames.
All game access happens on this single loop, one operation at a time.
"""

from __future__ import annotations

try:
    import pygame
except ImportError:
    pygame = None  # type: ignore[assignment]

from blockfall.config import GameConfig
from blockfall.game.timing import TimedGameState
from blockfall.renderer import PygameFrontend


def play_window(config: GameConfig) -> None:
    """Run the game in a pygame window.

    Controls:
      - Left/Right arrow: move piece
      - Up arrow / X: rotate clockwise
      - Z: rotate counter-clockwise
      - Down arrow / Space: hard drop
      - A / Shift: hold
      - R: restart after a blocked spawn
      - Escape / close window: quit

    Args:
        config: Game configuration.

    Raises:
        ImportError: If pygame is not installed.
    """
    if pygame is None:
        raise ImportError("pygame is required for play mode. Install it: pip install pygame")

    game = TimedGameState(config)
    frontend = PygameFrontend(game, cell_size=config.cell_size, visible_height=config.visible_height)
    # Force window init before the event loop (pygame must be initialized for event.get())
    frontend.draw(game.snapshot())
    clock = pygame.time.Clock()

    running = True
    game_over = False
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
                break
            if event.type != pygame.KEYDOWN:
                continue
            if event.key == pygame.K_ESCAPE:
                running = False
                break
            if game_over:
                if event.key == pygame.K_r:
                    game = TimedGameState(config)
                    frontend.game = game
                    game_over = False
                continue
            if not frontend.on_key(event.key):
                game_over = True

        if not running:
            break

        elapsed = clock.tick(config.fps)
        if not game_over and not game.advance_time(elapsed):
            game_over = True

        frontend.draw(game.snapshot())

    frontend.close()
