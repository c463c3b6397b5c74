"""Tests for the heuristic tic-tac-toe move policy."""

import itertools

import numpy as np
import pytest

from tick_arcade.tictactoe.board import EMPTY_BOARD, Mark, available_moves
from tick_arcade.tictactoe.policy import CORNERS, EDGES, choose_move

X, O, _ = Mark.X, Mark.O, None


@pytest.fixture()
def rng():
    return np.random.default_rng(0)


class TestWinAndBlock:
    def test_takes_win(self, rng):
        board = (O, O, _, X, X, _, _, _, _)
        assert choose_move(board, X, rng) == 5

    def test_win_beats_block(self, rng):
        board = (O, O, _, X, X, _, _, _, _)
        assert choose_move(board, O, rng) == 2

    def test_lowest_winning_index_first(self, rng):
        board = (X, _, X, _, _, _, X, _, _)
        assert choose_move(board, X, rng) == 1

    def test_o_blocks_x(self, rng):
        board = (X, X, _, _, _, _, _, _, _)
        assert choose_move(board, O, rng) == 2

    def test_x_blocks_o(self, rng):
        board = (O, _, _, _, O, _, _, X, _)
        assert choose_move(board, X, rng) == 8


class TestPositionalPreference:
    def test_x_takes_centre(self, rng):
        assert choose_move(EMPTY_BOARD, X, rng) == 4

    def test_x_takes_corner_when_centre_gone(self):
        board = (_, _, _, _, O, _, _, _, _)
        for seed in range(20):
            assert choose_move(board, X, np.random.default_rng(seed)) in CORNERS

    def test_x_corner_choice_is_random(self):
        board = (_, _, _, _, O, _, _, _, _)
        picks = {
            choose_move(board, X, np.random.default_rng(seed))
            for seed in range(50)
        }
        assert picks == set(CORNERS)

    def test_o_takes_edge(self):
        board = (_, _, _, _, X, _, _, _, _)
        for seed in range(20):
            assert choose_move(board, O, np.random.default_rng(seed)) in EDGES

    def test_o_falls_back_to_any_free_cell(self, rng):
        # All edges taken, no threats on the board.
        board = (_, X, _, O, X, X, _, O, _)
        move = choose_move(board, O, rng)
        assert move in available_moves(board)

    def test_x_falls_back_when_no_corner(self, rng):
        board = (X, O, O, O, X, X, X, _, O)
        assert choose_move(board, X, rng) == 7


class TestPolicyInvariants:
    def test_full_board_returns_none(self, rng):
        board = (X, O, X, X, O, O, O, X, X)
        assert choose_move(board, X, rng) is None

    def test_never_picks_occupied_cell(self, rng):
        for cells in itertools.product((X, O, _), repeat=9):
            if None not in cells:
                continue
            for player in (X, O):
                assert cells[choose_move(cells, player, rng)] is None

    def test_default_rng(self):
        assert choose_move(EMPTY_BOARD, O) in EDGES
