"""
Text console front end.

Renders the hold box, the matrix, the preview queue and the timer counters
side by side as plain text, and drives the game from line commands read on
stdin. An empty line advances time by 150 ms.
"""

from __future__ import annotations

import sys
from collections.abc import Hashable, Iterable
from typing import TextIO

from blockfall.config import GameConfig
from blockfall.frontend import Action, perform
from blockfall.game.board import EMPTY
from blockfall.game.pieces import TetrominoType, tetromino_shape
from blockfall.game.timing import Phase, Snapshot, TimedGameState

FILLED_CELL = "▣ "
EMPTY_CELL = "· "
BLANK_CELL = "  "

TICK_MS = 150

COMMANDS: dict[str, Action] = {
    "l": Action.MOVE_LEFT,
    "r": Action.MOVE_RIGHT,
    "rl": Action.ROTATE_LEFT,
    "rr": Action.ROTATE_RIGHT,
    "hd": Action.HARD_DROP,
    "h": Action.HOLD,
}

HELP_ROWS: list[tuple[str, str]] = [
    ("?", "print this help"),
    ("[empty]", f"advance time by {TICK_MS} ms"),
    ("l", "move left"),
    ("r", "move right"),
    ("rl", "rotate left"),
    ("rr", "rotate right"),
    ("hd", "hard drop"),
    ("h", "hold"),
]


def render_tetromino(kind: TetrominoType) -> list[str]:
    """Render a kind at spawn orientation as 2 text lines, top line first."""
    cells = [[False] * 4 for _ in range(2)]
    for dx, dy in tetromino_shape(kind):
        cells[dy][dx + 1] = True
    return [
        "".join(FILLED_CELL if filled else BLANK_CELL for filled in cells[row])
        for row in (1, 0)
    ]


def render_matrix(snapshot: Snapshot) -> list[str]:
    """Render the matrix with the falling piece overlaid, top row first."""
    grid = snapshot.matrix.copy()
    for col, row in snapshot.falling_tetromino.minoes():
        if 0 <= row < grid.shape[0] and 0 <= col < grid.shape[1]:
            grid[row, col] = int(snapshot.falling_tetromino.kind)
    return [
        " " + "".join(EMPTY_CELL if value == EMPTY else FILLED_CELL for value in grid[row])
        for row in range(grid.shape[0] - 1, -1, -1)
    ]


def render_hold(snapshot: Snapshot) -> list[str]:
    lines = ["HOLD:"]
    if snapshot.held is None:
        lines += [BLANK_CELL * 4] * 2
    else:
        lines += render_tetromino(snapshot.held)
    return lines


def render_next_preview(snapshot: Snapshot) -> list[str]:
    lines = ["NEXT:"]
    for i, kind in enumerate(snapshot.next_preview):
        lines += render_tetromino(kind)
        if i == 0:
            lines.append("-" * 8)
    return lines


def render_time(snapshot: Snapshot) -> list[str]:
    time_state = snapshot.time_state
    fall = "---" if time_state.phase is Phase.LOCKING else f"{time_state.time_to_fall} ms"
    return [
        f"time to lock  {time_state.time_to_lock} ms",
        f"time to fall  {fall}",
        f"lines         {snapshot.lines_cleared}",
    ]


def render_snapshot(snapshot: Snapshot) -> str:
    """Lay out hold, matrix, preview and timers as side-by-side columns."""
    columns = [render_hold(snapshot), render_matrix(snapshot),
               render_next_preview(snapshot), render_time(snapshot)]
    widths = [max(len(line) for line in column) for column in columns]
    height = max(len(column) for column in columns)
    rows = []
    for i in range(height):
        parts = [
            (column[i] if i < len(column) else "").ljust(width)
            for column, width in zip(columns, widths)
        ]
        rows.append("  ".join(parts).rstrip())
    return "\n".join(rows)


def format_help() -> str:
    width = max(len(command) for command, _ in HELP_ROWS)
    lines = ["Available commands:"]
    lines += [f"  {command.ljust(width)}  {text}" for command, text in HELP_ROWS]
    return "\n".join(lines)


class ConsoleFrontend:
    """Line-command front end writing to a text stream.

    Attributes:
        game: The game being played.
        out: Stream the frames and messages are written to.
    """

    def __init__(self, game: TimedGameState, out: TextIO | None = None) -> None:
        self.game = game
        self.out = out or sys.stdout

    def draw(self, snapshot: Snapshot) -> None:
        print(render_snapshot(snapshot), file=self.out)
        print(file=self.out)

    def on_key(self, code: Hashable) -> bool:
        """Handle one command line. Returns False once the game should end."""
        if code == "?":
            print(format_help(), file=self.out)
            return True
        if code == "":
            keep_going = self.game.advance_time(TICK_MS)
        elif code in COMMANDS:
            keep_going = perform(self.game, COMMANDS[code])
        else:
            print("unknown command", file=self.out)
            return True
        self.draw(self.game.snapshot())
        return keep_going

    def run(self, lines: Iterable[str]) -> None:
        """Read commands until input ends or a spawn is blocked."""
        print(format_help(), file=self.out)
        self.draw(self.game.snapshot())
        for line in lines:
            if not self.on_key(line.strip()):
                print("GAME OVER", file=self.out)
                break


def play_console(config: GameConfig, stdin: TextIO | None = None) -> None:
    """Play in the terminal, reading commands from ``stdin``."""
    game = TimedGameState(config)
    ConsoleFrontend(game).run(stdin or sys.stdin)
