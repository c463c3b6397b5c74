"""Snake snapshot and pure tick transition."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, replace

import numpy as np

from tick_arcade.config import FOOD_REWARD, GRID_SIZE

logger = logging.getLogger(__name__)

Cell = tuple[int, int]


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values; y grows downward."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def is_reversal(current: Direction, requested: Direction) -> bool:
    """Return True if *requested* points straight back along *current*."""
    return _OPPOSITES[current] is requested


@dataclass(frozen=True)
class SnakeState:
    """Immutable snapshot of a snake game.

    ``snake`` is ordered head first. A new snapshot replaces the old one on
    every live tick.
    """

    snake: tuple[Cell, ...]
    food: Cell
    direction: Direction = Direction.RIGHT
    score: int = 0
    game_over: bool = False
    is_paused: bool = False
    grid_size: int = GRID_SIZE

    def __post_init__(self) -> None:
        if not self.snake:
            raise ValueError("Snake must have at least one segment.")

    @property
    def head(self) -> Cell:
        return self.snake[0]

    def in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.grid_size and 0 <= y < self.grid_size

    def to_dict(self) -> dict:
        """Serialize the snapshot to a JSON-safe dictionary."""
        return {
            "snake": [list(seg) for seg in self.snake],
            "food": list(self.food),
            "direction": self.direction.name,
            "score": self.score,
            "game_over": self.game_over,
            "is_paused": self.is_paused,
            "grid_size": self.grid_size,
        }


def place_food(
    snake: tuple[Cell, ...] | list[Cell],
    grid_size: int,
    rng: np.random.Generator,
) -> Cell:
    """Pick a uniformly random cell not occupied by *snake*.

    Rejection sampling over the full grid; expected O(1) while the snake
    covers a small share of the board.
    """
    occupied = set(snake)
    if len(occupied) >= grid_size * grid_size:
        raise ValueError("No free cell left for food.")
    while True:
        x, y = rng.integers(0, grid_size, size=2).tolist()
        if (x, y) not in occupied:
            return x, y


def initial_state(
    rng: np.random.Generator,
    grid_size: int = GRID_SIZE,
) -> SnakeState:
    """Return a fresh single-segment snake in the grid centre."""
    start = (grid_size // 2, grid_size // 2)
    return SnakeState(
        snake=(start,),
        food=place_food((start,), grid_size, rng),
        grid_size=grid_size,
    )


def tick(
    state: SnakeState,
    pending_direction: Direction | None,
    rng: np.random.Generator,
    food_reward: int = FOOD_REWARD,
) -> SnakeState:
    """Advance *state* by one tick and return the next snapshot.

    Paused or finished games are returned unchanged. A collision returns the
    same snapshot with only ``game_over`` set.
    """
    if state.game_over or state.is_paused:
        return state

    direction = state.direction
    if pending_direction is not None and not is_reversal(
        state.direction, pending_direction,
    ):
        direction = pending_direction

    dx, dy = direction.value
    x, y = state.head
    new_head = (x + dx, y + dy)

    # Collision is checked against the pre-move body, tail included.
    if not state.in_bounds(new_head) or new_head in state.snake:
        logger.info(
            "Snake crashed at %s with score %d.", new_head, state.score,
        )
        return replace(state, game_over=True)

    body = (new_head, *state.snake)
    if new_head == state.food:
        if len(body) >= state.grid_size * state.grid_size:
            # Board filled: nowhere left for food, the game ends here.
            logger.info("Snake filled the board with score %d.", state.score)
            return replace(
                state,
                snake=body,
                direction=direction,
                score=state.score + food_reward,
                game_over=True,
            )
        return replace(
            state,
            snake=body,
            food=place_food(body, state.grid_size, rng),
            direction=direction,
            score=state.score + food_reward,
        )

    return replace(state, snake=body[:-1], direction=direction)


def toggle_pause(state: SnakeState) -> SnakeState:
    """Flip ``is_paused``; finished games are left untouched."""
    if state.game_over:
        return state
    return replace(state, is_paused=not state.is_paused)
