"""Tic-tac-toe board rules: marks, winning lines, evaluation."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tick_arcade.tictactoe.engine import MoveRecord

BOARD_CELLS = 9


class Mark(str, enum.Enum):
    """A player's mark."""

    X = "X"
    O = "O"  # noqa: E741

    @property
    def opponent(self) -> Mark:
        return Mark.O if self is Mark.X else Mark.X


class GameStatus(str, enum.Enum):
    """Lifecycle of a single board."""

    PLAYING = "playing"
    WON = "won"
    DRAW = "draw"


Cell = Mark | None
Board = tuple[Cell, ...]

# Rows, columns, diagonals.
WINNING_COMBINATIONS: tuple[tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)

EMPTY_BOARD: Board = (None,) * BOARD_CELLS


@dataclass(frozen=True)
class Evaluation:
    """Outcome of scanning a board."""

    status: GameStatus
    winner: Mark | None = None
    winning_line: tuple[int, ...] = ()


def available_moves(board: Board) -> list[int]:
    """Return the empty cell indices in ascending order."""
    return [i for i, cell in enumerate(board) if cell is None]


def apply_move(board: Board, player: Mark, index: int) -> Board:
    """Return a new board with *player* placed at *index*."""
    if not 0 <= index < BOARD_CELLS:
        raise ValueError(f"Cell index {index} is off the board.")
    if board[index] is not None:
        raise ValueError(f"Cell {index} is already taken by {board[index].value}.")
    cells = list(board)
    cells[index] = player
    return tuple(cells)


def find_winner(board: Board) -> tuple[Mark | None, tuple[int, ...]]:
    """Return the first winning mark and its line, or ``(None, ())``."""
    for a, b, c in WINNING_COMBINATIONS:
        mark = board[a]
        if mark is not None and mark == board[b] == board[c]:
            return mark, (a, b, c)
    return None, ()


def evaluate(board: Board) -> Evaluation:
    """Classify *board* as won, drawn or still in play."""
    winner, line = find_winner(board)
    if winner is not None:
        return Evaluation(GameStatus.WON, winner, line)
    if all(cell is not None for cell in board):
        return Evaluation(GameStatus.DRAW)
    return Evaluation(GameStatus.PLAYING)


def replay(history: Iterable[MoveRecord]) -> Board:
    """Rebuild a board by applying *history* in order to an empty board."""
    board = EMPTY_BOARD
    for move in history:
        board = apply_move(board, move.player, move.position)
    return board
