"""Text projections of game snapshots."""

from __future__ import annotations

from tick_arcade.grid import CellType, Grid
from tick_arcade.snake import SnakeState
from tick_arcade.tictactoe.board import GameStatus
from tick_arcade.tictactoe.engine import MoveRecord, TicTacToeSnapshot

_SNAKE_GLYPHS: dict[CellType, str] = {
    CellType.EMPTY: ".",
    CellType.SNAKE: "o",
    CellType.HEAD: "@",
    CellType.FOOD: "*",
}


def render_snake(state: SnakeState) -> str:
    """Draw the snake grid, one text row per grid row, plus a status line."""
    grid = Grid.from_snake_state(state)
    rows = [
        "".join(_SNAKE_GLYPHS[CellType(v)] for v in row)
        for row in grid.cells.tolist()
    ]
    if state.game_over:
        status = "GAME OVER"
    elif state.is_paused:
        status = "PAUSED"
    else:
        status = state.direction.name
    rows.append(f"score {state.score} | {status}")
    return "\n".join(rows)


def latest_move(history: tuple[MoveRecord, ...]) -> MoveRecord | None:
    return history[-1] if history else None


def status_message(snapshot: TicTacToeSnapshot) -> str:
    if snapshot.status is GameStatus.WON:
        return f"{snapshot.winner.value} wins!"
    if snapshot.status is GameStatus.DRAW:
        return "It's a draw!"
    return f"Current player: {snapshot.current_player.value}"


def render_board(snapshot: TicTacToeSnapshot) -> str:
    """Draw the 3x3 board; winning cells are bracketed, the last move starred."""
    last = latest_move(snapshot.move_history)
    cells: list[str] = []
    for index, mark in enumerate(snapshot.board):
        glyph = mark.value if mark is not None else " "
        if index in snapshot.winning_line:
            cells.append(f"[{glyph}]")
        elif last is not None and last.position == index:
            cells.append(f"*{glyph}*")
        else:
            cells.append(f" {glyph} ")
    rows = ["|".join(cells[r * 3:r * 3 + 3]) for r in range(3)]
    return "\n---+---+---\n".join(rows) + "\n" + status_message(snapshot)
