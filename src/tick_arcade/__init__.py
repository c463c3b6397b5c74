"""Tick Arcade: snake and self-playing tic-tac-toe engines."""

from tick_arcade.config import GameSpeed, SnakeConfig, TicTacToeConfig
from tick_arcade.controls import KeyAction, handle_key
from tick_arcade.engine import SnakeEngine
from tick_arcade.scheduler import TickScheduler
from tick_arcade.snake import Direction, SnakeState
from tick_arcade.tictactoe import Mark, TicTacToeEngine

__all__ = [
    "Direction",
    "GameSpeed",
    "KeyAction",
    "Mark",
    "SnakeConfig",
    "SnakeEngine",
    "SnakeState",
    "TicTacToeConfig",
    "TicTacToeEngine",
    "TickScheduler",
    "handle_key",
]
