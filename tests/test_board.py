"""Tests for tic-tac-toe board rules."""

import itertools

import pytest

from tick_arcade.tictactoe.board import (
    EMPTY_BOARD,
    WINNING_COMBINATIONS,
    GameStatus,
    Mark,
    apply_move,
    available_moves,
    evaluate,
    replay,
)
from tick_arcade.tictactoe.engine import MoveRecord

X, O, _ = Mark.X, Mark.O, None


class TestMark:
    def test_opponent(self):
        assert X.opponent is O
        assert O.opponent is X


class TestApplyMove:
    def test_places_mark(self):
        board = apply_move(EMPTY_BOARD, X, 4)
        assert board[4] is X
        assert EMPTY_BOARD[4] is None

    def test_occupied_cell_rejected(self):
        board = apply_move(EMPTY_BOARD, X, 0)
        with pytest.raises(ValueError, match="already taken"):
            apply_move(board, O, 0)

    def test_off_board_rejected(self):
        with pytest.raises(ValueError, match="off the board"):
            apply_move(EMPTY_BOARD, X, 9)


class TestAvailableMoves:
    def test_ascending_empty_cells(self):
        board = (X, _, O, _, _, _, _, _, X)
        assert available_moves(board) == [1, 3, 4, 5, 6, 7]


class TestEvaluate:
    def test_top_row_win(self):
        result = evaluate((X, X, X, _, _, _, _, _, _))
        assert result.status is GameStatus.WON
        assert result.winner is X
        assert result.winning_line == (0, 1, 2)

    def test_diagonal_win_for_o(self):
        result = evaluate((O, X, X, _, O, _, X, _, O))
        assert result.status is GameStatus.WON
        assert result.winner is O
        assert result.winning_line == (0, 4, 8)

    def test_draw(self):
        result = evaluate((X, O, X, X, O, O, O, X, X))
        assert result.status is GameStatus.DRAW
        assert result.winner is None
        assert result.winning_line == ()

    def test_full_board_with_win_is_won(self):
        result = evaluate((X, X, X, O, O, X, X, O, O))
        assert result.status is GameStatus.WON

    def test_playing(self):
        assert evaluate(EMPTY_BOARD).status is GameStatus.PLAYING

    def test_eight_combinations(self):
        assert len(WINNING_COMBINATIONS) == 8
        assert len(set(WINNING_COMBINATIONS)) == 8

    def test_never_both_won_and_draw(self):
        for cells in itertools.product((X, O, _), repeat=9):
            result = evaluate(cells)
            if result.status is GameStatus.WON:
                assert len(result.winning_line) == 3
                assert all(cells[i] is result.winner for i in result.winning_line)
            else:
                assert result.winner is None
                assert result.winning_line == ()


class TestReplay:
    def test_rebuilds_board(self):
        history = [
            MoveRecord(X, 4, 1), MoveRecord(O, 1, 2), MoveRecord(X, 0, 3),
        ]
        assert replay(history) == (X, O, _, _, X, _, _, _, _)

    def test_empty_history(self):
        assert replay([]) == EMPTY_BOARD
