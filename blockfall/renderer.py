"""
Pygame front end.

Draws the visible rows of the matrix, the falling piece, its ghost (landing
preview), the preview queue, the held piece and the timer counters, and maps
keyboard keys to game actions.
"""

from __future__ import annotations

from collections.abc import Hashable

try:
    import pygame
except ImportError:
    pygame = None  # type: ignore[assignment]

from blockfall.frontend import Action, perform
from blockfall.game.board import EMPTY
from blockfall.game.pieces import PIECE_COLORS, Tetromino, TetrominoType, tetromino_shape
from blockfall.game.timing import Phase, Snapshot, TimedGameState


# ── Color constants ───────────────────────────────────────────────────────
BACKGROUND_COLOR = (30, 30, 30)
GRID_LINE_COLOR = (60, 60, 60)
BORDER_COLOR = (200, 200, 200)
TEXT_COLOR = (255, 255, 255)
GHOST_ALPHA = 80  # transparency for ghost piece (0-255)
SIDEBAR_BG_COLOR = (20, 20, 20)
EMPTY_CELL_COLOR = (40, 40, 40)

# ── Keyboard mapping ─────────────────────────────────────────────────────
# Arrows to move, Up/X/Z to rotate, Down/Space to hard drop, A/Shift to hold
KEY_MAP: dict[int, Action] = {}
if pygame is not None:
    KEY_MAP = {
        pygame.K_LEFT: Action.MOVE_LEFT,
        pygame.K_RIGHT: Action.MOVE_RIGHT,
        pygame.K_UP: Action.ROTATE_RIGHT,
        pygame.K_x: Action.ROTATE_RIGHT,
        pygame.K_z: Action.ROTATE_LEFT,
        pygame.K_DOWN: Action.HARD_DROP,
        pygame.K_SPACE: Action.HARD_DROP,
        pygame.K_a: Action.HOLD,
        pygame.K_LSHIFT: Action.HOLD,
        pygame.K_RSHIFT: Action.HOLD,
    }


def _darker(color: tuple[int, int, int]) -> tuple[int, ...]:
    return tuple(max(0, c - 40) for c in color)


class PygameFrontend:
    """Pygame window showing a TimedGameState.

    The window is divided into:
      - Left: hold box
      - Middle: matrix area (cell_size * width) x (cell_size * visible_height)
      - Right: preview queue and timer counters

    Attributes:
        game: The game being shown.
        cell_size: Pixel size of each matrix cell.
        visible_height: Number of bottom rows shown; the rest is spawn buffer.
        screen: Pygame display surface (created on first draw).
    """

    SIDE_PANEL_WIDTH_CELLS: int = 6

    def __init__(self, game: TimedGameState, cell_size: int = 30, visible_height: int = 20) -> None:
        """Initialize the front end.

        Does NOT create the Pygame window yet — that happens on the first
        call to draw(), so headless environments don't open a window.

        Raises:
            ImportError: If pygame is not installed.
        """
        if pygame is None:
            raise ImportError("pygame is required for the window front end. Install it: pip install pygame")

        self.game = game
        self.cell_size = cell_size
        self.visible_height = visible_height

        self.panel_width = cell_size * self.SIDE_PANEL_WIDTH_CELLS
        self.board_left = self.panel_width
        self.board_pixel_width = cell_size * game.game_state.width
        self.board_pixel_height = cell_size * visible_height
        self.window_width = self.board_pixel_width + 2 * self.panel_width
        self.window_height = self.board_pixel_height

        self.screen: pygame.Surface | None = None
        self._font: pygame.font.Font | None = None
        self._initialized: bool = False

    def draw(self, snapshot: Snapshot) -> None:
        """Draw one frame. Initializes Pygame on the first call."""
        if not self._initialized:
            self._init_pygame()

        self.screen.fill(BACKGROUND_COLOR)
        self._draw_matrix(snapshot)
        self._draw_ghost_piece(snapshot)
        self._draw_piece(snapshot.falling_tetromino)
        self._draw_panels(snapshot)

        pygame.draw.rect(
            self.screen,
            BORDER_COLOR,
            (self.board_left, 0, self.board_pixel_width, self.board_pixel_height),
            2,
        )
        if snapshot.spawn_blocked:
            self._draw_blocked_overlay()

        pygame.display.flip()

    def on_key(self, code: Hashable) -> bool:
        """Apply the action bound to a pygame key code, if any."""
        action = KEY_MAP.get(code)
        if action is None:
            return True
        return perform(self.game, action)

    def close(self) -> None:
        """Shut down Pygame and close the window."""
        if self._initialized:
            pygame.quit()
            self._initialized = False

    # ── Drawing helpers ──────────────────────────────────────────────────

    def _init_pygame(self) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode((self.window_width, self.window_height))
        pygame.display.set_caption("blockfall")
        self._font = pygame.font.SysFont("monospace", 18)
        self._initialized = True

    def _cell_rect(self, col: int, row: int) -> tuple[int, int, int, int] | None:
        """Screen rectangle of matrix cell (col, row), or None if hidden."""
        if row >= self.visible_height:
            return None
        x = self.board_left + col * self.cell_size
        y = (self.visible_height - 1 - row) * self.cell_size
        return (x, y, self.cell_size, self.cell_size)

    def _draw_block(self, rect: tuple[int, int, int, int], color: tuple[int, int, int]) -> None:
        pygame.draw.rect(self.screen, color, rect)
        pygame.draw.rect(self.screen, _darker(color), rect, 1)

    def _draw_matrix(self, snapshot: Snapshot) -> None:
        grid = snapshot.matrix
        for row in range(self.visible_height):
            for col in range(grid.shape[1]):
                rect = self._cell_rect(col, row)
                value = int(grid[row, col])
                if value != EMPTY:
                    self._draw_block(rect, PIECE_COLORS[TetrominoType(value)])
                else:
                    pygame.draw.rect(self.screen, EMPTY_CELL_COLOR, rect)
                pygame.draw.rect(self.screen, GRID_LINE_COLOR, rect, 1)

    def _draw_piece(self, tetromino: Tetromino) -> None:
        color = PIECE_COLORS[tetromino.kind]
        for col, row in tetromino.minoes():
            rect = self._cell_rect(col, row)
            if rect is not None:
                self._draw_block(rect, color)

    def _draw_ghost_piece(self, snapshot: Snapshot) -> None:
        """Outline where the falling piece would land if hard-dropped."""
        state = self.game.game_state
        ghost = snapshot.falling_tetromino
        while state.fits(ghost.moved(0, -1)):
            ghost = ghost.moved(0, -1)
        if ghost == snapshot.falling_tetromino:
            return

        color = PIECE_COLORS[ghost.kind]
        ghost_surface = pygame.Surface((self.cell_size, self.cell_size), pygame.SRCALPHA)
        ghost_surface.fill((*color, GHOST_ALPHA))
        for col, row in ghost.minoes():
            rect = self._cell_rect(col, row)
            if rect is not None:
                self.screen.blit(ghost_surface, rect[:2])
                pygame.draw.rect(self.screen, color, rect, 1)

    def _draw_panels(self, snapshot: Snapshot) -> None:
        right = self.board_left + self.board_pixel_width
        for x in (0, right):
            pygame.draw.rect(self.screen, SIDEBAR_BG_COLOR, (x, 0, self.panel_width, self.window_height))

        margin = 12
        self._draw_kind_preview(snapshot.held, margin, 20, "HOLD")

        y = 20
        for i, kind in enumerate(snapshot.next_preview):
            self._draw_kind_preview(kind, right + margin, y, "NEXT" if i == 0 else None)
            y += self.cell_size * 2 + (30 if i == 0 else 10)

        time_state = snapshot.time_state
        fall = "---" if time_state.phase is Phase.LOCKING else f"{time_state.time_to_fall}"
        text_y = self.window_height - 110
        self._draw_text(f"LOCK {time_state.time_to_lock}", margin, text_y)
        self._draw_text(f"FALL {fall}", margin, text_y + 25)
        self._draw_text(f"LINES {snapshot.lines_cleared}", margin, text_y + 50)

    def _draw_kind_preview(self, kind: TetrominoType | None, x_offset: int, y_offset: int,
                           label: str | None) -> None:
        """Draw a small piece preview box, with an optional label above it."""
        preview_cell = self.cell_size * 2 // 3
        box_w, box_h = preview_cell * 5, preview_cell * 3

        box_y = y_offset
        if label is not None:
            self._draw_text(label, x_offset, y_offset)
            box_y += 22
        pygame.draw.rect(self.screen, EMPTY_CELL_COLOR, (x_offset, box_y, box_w, box_h))
        pygame.draw.rect(self.screen, BORDER_COLOR, (x_offset, box_y, box_w, box_h), 1)

        if kind is None:
            return

        color = PIECE_COLORS[kind]
        for dx, dy in tetromino_shape(kind):
            px = x_offset + (dx + 1) * preview_cell + preview_cell // 2
            py = box_y + (1 - dy) * preview_cell + preview_cell // 2
            self._draw_block((px, py, preview_cell, preview_cell), color)

    def _draw_blocked_overlay(self) -> None:
        overlay = pygame.Surface((self.board_pixel_width, self.board_pixel_height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 150))
        self.screen.blit(overlay, (self.board_left, 0))
        text = self._font.render("GAME OVER", True, (255, 50, 50))
        cx = self.board_left + self.board_pixel_width // 2
        self.screen.blit(text, (cx - text.get_width() // 2, self.board_pixel_height // 2 - 10))

    def _draw_text(self, text: str, x: int, y: int, color: tuple[int, int, int] = TEXT_COLOR) -> None:
        surface = self._font.render(text, True, color)
        self.screen.blit(surface, (x, y))
