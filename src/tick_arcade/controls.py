"""Keyboard input adapter for the snake engine."""

from __future__ import annotations

import enum
import logging
from typing import TYPE_CHECKING

from tick_arcade.snake import Direction

if TYPE_CHECKING:
    from tick_arcade.engine import SnakeEngine

logger = logging.getLogger(__name__)


class KeyAction(enum.Enum):
    """What a recognised key asks the engine to do."""

    TURN = "turn"
    PAUSE = "pause"
    RESTART = "restart"


# Key values as reported by ``KeyboardEvent.key``.
_DIRECTION_KEYS: dict[str, Direction] = {
    "arrowup": Direction.UP,
    "arrowdown": Direction.DOWN,
    "arrowleft": Direction.LEFT,
    "arrowright": Direction.RIGHT,
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
}

_PAUSE_KEYS = frozenset({" ", "space", "spacebar"})
_RESTART_KEYS = frozenset({"r"})


def resolve_key(key: str) -> tuple[KeyAction, Direction | None] | None:
    """Map a raw key value to an action, or ``None`` for unknown keys."""
    normalized = key if key == " " else key.strip().lower()
    direction = _DIRECTION_KEYS.get(normalized)
    if direction is not None:
        return KeyAction.TURN, direction
    if normalized in _PAUSE_KEYS:
        return KeyAction.PAUSE, None
    if normalized in _RESTART_KEYS:
        return KeyAction.RESTART, None
    return None


def handle_key(engine: SnakeEngine, key: str) -> bool:
    """Apply a key press to *engine*.

    Returns True when the key is recognised, so the host can suppress the
    key's default behaviour. Unrecognised keys are ignored.
    """
    resolved = resolve_key(key)
    if resolved is None:
        return False

    action, direction = resolved
    if action is KeyAction.TURN:
        engine.set_direction(direction)
    elif action is KeyAction.PAUSE:
        engine.toggle_pause()
    elif engine.game_over:
        engine.reset()
    else:
        logger.debug("Restart ignored while the game is running.")
    return True
