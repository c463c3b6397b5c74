"""Game constants and frozen configuration dataclasses."""

from __future__ import annotations

import enum
import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

GRID_SIZE = 20
TICK_INTERVAL_MS = 150
FOOD_REWARD = 10
RESTART_DELAY_MS = 2000


class GameSpeed(enum.Enum):
    """Tic-tac-toe playback speeds, in milliseconds between moves."""

    SLOW = 2000
    NORMAL = 1000
    FAST = 500
    VERY_FAST = 200

    @property
    def seconds(self) -> float:
        return self.value / 1000.0


@dataclass(frozen=True)
class SnakeConfig:
    """Configuration for a snake game."""

    grid_size: int = GRID_SIZE
    tick_interval_ms: int = TICK_INTERVAL_MS
    food_reward: int = FOOD_REWARD

    def __post_init__(self) -> None:
        if self.grid_size < 4:
            raise ValueError("grid_size must be at least 4.")
        if self.tick_interval_ms < 10:
            raise ValueError("tick_interval_ms must be at least 10.")
        if self.food_reward < 1:
            raise ValueError("food_reward must be at least 1.")

    @property
    def tick_interval(self) -> float:
        return self.tick_interval_ms / 1000.0

    def to_dict(self) -> dict:
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Snake config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> SnakeConfig:
        """Load config from a JSON file."""
        return cls(**json.loads(Path(path).read_text()))


@dataclass(frozen=True)
class TicTacToeConfig:
    """Configuration for an auto-playing tic-tac-toe table."""

    speed: GameSpeed = GameSpeed.NORMAL
    restart_delay_ms: int = RESTART_DELAY_MS
    autoplay: bool = True

    def __post_init__(self) -> None:
        if self.restart_delay_ms < 0:
            raise ValueError("restart_delay_ms must be >= 0.")

    @property
    def restart_delay(self) -> float:
        return self.restart_delay_ms / 1000.0

    def to_dict(self) -> dict:
        """Serialize to a plain dict (the speed becomes milliseconds)."""
        d = asdict(self)
        d["speed"] = self.speed.value
        return d

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Tic-tac-toe config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> TicTacToeConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        if "speed" in raw:
            raw["speed"] = GameSpeed(raw["speed"])
        return cls(**raw)
