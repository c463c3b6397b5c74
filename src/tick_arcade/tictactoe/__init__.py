"""Self-playing tic-tac-toe: board rules, move policy and engine."""

from tick_arcade.tictactoe.board import (
    WINNING_COMBINATIONS,
    Evaluation,
    GameStatus,
    Mark,
    apply_move,
    available_moves,
    evaluate,
    replay,
)
from tick_arcade.tictactoe.engine import (
    GameStats,
    MoveRecord,
    TicTacToeEngine,
    TicTacToeSnapshot,
)
from tick_arcade.tictactoe.policy import choose_move

__all__ = [
    "WINNING_COMBINATIONS",
    "Evaluation",
    "GameStats",
    "GameStatus",
    "Mark",
    "MoveRecord",
    "TicTacToeEngine",
    "TicTacToeSnapshot",
    "apply_move",
    "available_moves",
    "choose_move",
    "evaluate",
    "replay",
]
