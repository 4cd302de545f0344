"""Tests for the text console front end and action dispatch."""

from __future__ import annotations

import io

from blockfall.config import GameConfig
from blockfall.console import (
    ConsoleFrontend,
    render_matrix,
    render_snapshot,
    render_tetromino,
)
from blockfall.frontend import Action, perform
from blockfall.game.pieces import TetrominoType
from blockfall.game.timing import TimedGameState


def test_render_tetromino():
    assert render_tetromino(TetrominoType.T) == ["  ▣     ", "▣ ▣ ▣   "]
    assert render_tetromino(TetrominoType.I) == ["        ", "▣ ▣ ▣ ▣ "]


def test_render_matrix_overlays_falling_piece(make_timed):
    game = make_timed(TetrominoType.O)
    lines = render_matrix(game.snapshot())
    assert len(lines) == 22
    # Top row is row 21: the O occupies cols 4 and 5
    assert lines[0] == " " + "· " * 4 + "▣ ▣ " + "· " * 4
    assert lines[-1] == " " + "· " * 10


def test_render_snapshot_shows_panels(make_timed):
    game = make_timed(TetrominoType.T)
    game.hold()
    text = render_snapshot(game.snapshot())
    assert "HOLD:" in text
    assert "NEXT:" in text
    assert "time to lock  1000 ms" in text
    assert "time to fall  500 ms" in text


def test_perform_dispatches_actions(make_timed):
    game = make_timed(TetrominoType.T)
    assert perform(game, Action.MOVE_LEFT) is True
    assert game.falling_tetromino.center == (3, 20)
    perform(game, Action.ROTATE_RIGHT)
    assert game.falling_tetromino.orientation == 1
    perform(game, Action.HOLD)
    assert game.held is TetrominoType.T
    assert perform(game, Action.HARD_DROP) is True


def test_console_commands(make_timed):
    game = make_timed(TetrominoType.T)
    out = io.StringIO()
    frontend = ConsoleFrontend(game, out)

    assert frontend.on_key("r") is True
    assert game.falling_tetromino.center == (5, 20)
    assert frontend.on_key("") is True
    assert game.time_state.time_to_fall == 350
    assert frontend.on_key("?") is True
    assert "Available commands:" in out.getvalue()
    assert frontend.on_key("bogus") is True
    assert "unknown command" in out.getvalue()


def test_console_run_stops_on_blocked_spawn(make_timed, fill):
    game = make_timed(TetrominoType.T, center=(4, 5))
    fill(game.game_state, [(4, 20)])
    out = io.StringIO()
    ConsoleFrontend(game, out).run(["hd\n", "l\n"])
    assert out.getvalue().rstrip().endswith("GAME OVER")


def test_console_run_until_input_ends():
    game = TimedGameState(GameConfig(seed=4))
    out = io.StringIO()
    ConsoleFrontend(game, out).run(["hd", "", "rl", "h"])
    assert "GAME OVER" not in out.getvalue()
    assert int((game.matrix != 0).sum()) == 4
