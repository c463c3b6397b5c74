"""Stateful snake engine: snapshot owner, direction mailbox, subscribers."""

from __future__ import annotations

import logging
from collections.abc import Callable

import numpy as np

from tick_arcade.config import SnakeConfig
from tick_arcade.snake import (
    Direction,
    SnakeState,
    initial_state,
    is_reversal,
    tick,
    toggle_pause,
)

logger = logging.getLogger(__name__)

SnakeListener = Callable[[SnakeState], None]


class SnakeEngine:
    """Single-snake, step-based game engine.

    The engine owns the current :class:`SnakeState` snapshot and a
    single-slot mailbox holding the latest requested direction. Each call
    to :meth:`step` consumes the mailbox, commits the next snapshot and
    notifies subscribers.
    """

    def __init__(
        self,
        config: SnakeConfig | None = None,
        seed: int | None = None,
    ) -> None:
        self.config = config if config is not None else SnakeConfig()
        self.rng = np.random.default_rng(seed)
        self._listeners: list[SnakeListener] = []
        self._state = initial_state(self.rng, self.config.grid_size)
        self._pending_direction: Direction = self._state.direction
        self.tick_count = 0

    @property
    def state(self) -> SnakeState:
        return self._state

    @property
    def pending_direction(self) -> Direction:
        return self._pending_direction

    @property
    def game_over(self) -> bool:
        return self._state.game_over

    def set_direction(self, requested: Direction) -> bool:
        """Buffer *requested* for the next tick.

        The request is dropped if it reverses the buffered direction.
        Returns True if the buffer was updated.
        """
        if is_reversal(self._pending_direction, requested):
            return False
        self._pending_direction = requested
        return True

    def step(self) -> SnakeState:
        """Advance the game by one tick and return the committed snapshot."""
        previous = self._state
        self._state = tick(
            previous, self._pending_direction, self.rng,
            food_reward=self.config.food_reward,
        )
        if self._state is not previous and not self._state.game_over:
            self.tick_count += 1
        if self._state.game_over and not previous.game_over:
            logger.info(
                "Game over after %d ticks with score %d.",
                self.tick_count, self._state.score,
            )
        self._publish()
        return self._state

    def toggle_pause(self) -> SnakeState:
        """Flip the pause flag (ignored once the game is over)."""
        self._state = toggle_pause(self._state)
        self._publish()
        return self._state

    def reset(self) -> SnakeState:
        """Replace the game with a fresh initial snapshot."""
        self._state = initial_state(self.rng, self.config.grid_size)
        self._pending_direction = self._state.direction
        self.tick_count = 0
        logger.info("Snake game reset.")
        self._publish()
        return self._state

    def subscribe(self, listener: SnakeListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: SnakeListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        d = self._state.to_dict()
        d["tick"] = self.tick_count
        return d

    def _publish(self) -> None:
        for listener in list(self._listeners):
            listener(self._state)
