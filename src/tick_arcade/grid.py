"""NumPy cell grid projected from a snake snapshot."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from tick_arcade.snake import SnakeState


class CellType(enum.IntEnum):
    """Integer codes stored in the grid array."""

    EMPTY = 0
    SNAKE = 1
    HEAD = 2
    FOOD = 3


class Grid:
    """Square NumPy-backed grid of :class:`CellType` codes.

    Coordinates are ``(x, y)``; the backing array is indexed ``[y, x]`` so
    rows print top to bottom.
    """

    def __init__(self, size: int) -> None:
        if size < 4:
            raise ValueError("Grid size must be at least 4.")
        self.size = size
        self.cells = np.zeros((size, size), dtype=np.int8)

    @classmethod
    def from_snake_state(cls, state: SnakeState) -> Grid:
        """Paint *state* onto a fresh grid."""
        grid = cls(state.grid_size)
        grid.set(*state.food, CellType.FOOD)
        for x, y in state.snake[1:]:
            if grid.in_bounds(x, y):
                grid.set(x, y, CellType.SNAKE)
        hx, hy = state.head
        if grid.in_bounds(hx, hy):
            grid.set(hx, hy, CellType.HEAD)
        return grid

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether a coordinate lies within the grid."""
        return 0 <= x < self.size and 0 <= y < self.size

    def get(self, x: int, y: int) -> CellType:
        return CellType(self.cells[y, x])

    def set(self, x: int, y: int, cell_type: CellType) -> None:
        self.cells[y, x] = cell_type

    def count(self, cell_type: CellType) -> int:
        return int(np.count_nonzero(self.cells == cell_type))

    def empty_cells(self) -> list[tuple[int, int]]:
        """Return a list of all empty cell coordinates."""
        ys, xs = np.where(self.cells == CellType.EMPTY)
        return list(zip(xs.tolist(), ys.tolist(), strict=True))

    def to_dict(self) -> dict:
        """Serialize grid state to a dictionary."""
        return {"size": self.size, "cells": self.cells.tolist()}
