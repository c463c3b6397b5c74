"""Heuristic move policy for the self-playing tic-tac-toe agents."""

from __future__ import annotations

import logging

import numpy as np

from tick_arcade.tictactoe.board import (
    Board,
    Mark,
    apply_move,
    available_moves,
    find_winner,
)

logger = logging.getLogger(__name__)

CENTER = 4
CORNERS = (0, 2, 6, 8)
EDGES = (1, 3, 5, 7)


def _completing_move(board: Board, mark: Mark, moves: list[int]) -> int | None:
    for move in moves:
        winner, _ = find_winner(apply_move(board, mark, move))
        if winner is mark:
            return move
    return None


def _random_choice(moves: list[int], rng: np.random.Generator) -> int:
    return moves[int(rng.integers(len(moves)))]


def choose_move(
    board: Board,
    player: Mark,
    rng: np.random.Generator | None = None,
) -> int | None:
    """Pick a cell for *player* using a fixed one-ply heuristic.

    In order: complete a line, block the opponent's line, then positional
    preference (X takes the centre, else a random corner; O takes a random
    edge), else any free cell at random. Returns ``None`` on a full board.
    """
    moves = available_moves(board)
    if not moves:
        logger.warning("Move requested for %s on a full board.", player.value)
        return None
    if rng is None:
        rng = np.random.default_rng()

    winning = _completing_move(board, player, moves)
    if winning is not None:
        return winning

    blocking = _completing_move(board, player.opponent, moves)
    if blocking is not None:
        return blocking

    if player is Mark.X:
        if CENTER in moves:
            return CENTER
        preferred = [c for c in CORNERS if c in moves]
    else:
        preferred = [e for e in EDGES if e in moves]
    if preferred:
        return _random_choice(preferred, rng)

    return _random_choice(moves, rng)
