"""Tests for the keyboard input adapter."""

import pytest

from tick_arcade.controls import KeyAction, handle_key, resolve_key
from tick_arcade.engine import SnakeEngine
from tick_arcade.snake import Direction, SnakeState


class TestResolveKey:
    @pytest.mark.parametrize(("key", "direction"), [
        ("ArrowUp", Direction.UP),
        ("ArrowDown", Direction.DOWN),
        ("ArrowLeft", Direction.LEFT),
        ("ArrowRight", Direction.RIGHT),
        ("w", Direction.UP),
        ("A", Direction.LEFT),
        ("s", Direction.DOWN),
        ("D", Direction.RIGHT),
    ])
    def test_direction_keys(self, key, direction):
        assert resolve_key(key) == (KeyAction.TURN, direction)

    def test_space_pauses(self):
        assert resolve_key(" ") == (KeyAction.PAUSE, None)
        assert resolve_key("Space") == (KeyAction.PAUSE, None)

    def test_r_restarts(self):
        assert resolve_key("r") == (KeyAction.RESTART, None)
        assert resolve_key("R") == (KeyAction.RESTART, None)

    @pytest.mark.parametrize("key", ["Enter", "q", "Escape", "x", "Tab"])
    def test_unknown_keys(self, key):
        assert resolve_key(key) is None


class TestHandleKey:
    def test_turn_buffers_direction(self):
        engine = SnakeEngine(seed=0)
        assert handle_key(engine, "ArrowUp")
        assert engine.pending_direction is Direction.UP
        assert engine.state.direction is Direction.RIGHT

    def test_unknown_key_ignored(self):
        engine = SnakeEngine(seed=0)
        before = engine.state
        assert not handle_key(engine, "Enter")
        assert engine.state is before

    def test_space_toggles_pause(self):
        engine = SnakeEngine(seed=0)
        handle_key(engine, " ")
        assert engine.state.is_paused
        handle_key(engine, " ")
        assert not engine.state.is_paused

    def test_restart_ignored_while_alive(self):
        engine = SnakeEngine(seed=0)
        engine.step()
        before = engine.state
        assert handle_key(engine, "r")
        assert engine.state is before

    def test_restart_after_game_over(self):
        engine = SnakeEngine(seed=0)
        engine._state = SnakeState(
            snake=((0, 0),), food=(5, 5), direction=Direction.LEFT,
        )
        engine._pending_direction = Direction.LEFT
        engine.step()
        assert engine.game_over
        assert handle_key(engine, "R")
        assert not engine.game_over
        assert engine.state.snake == ((10, 10),)
