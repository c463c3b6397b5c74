"""Self-playing tic-tac-toe engine with cumulative statistics."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field, replace

import numpy as np

from tick_arcade.config import GameSpeed, TicTacToeConfig
from tick_arcade.tictactoe.board import (
    EMPTY_BOARD,
    Board,
    GameStatus,
    Mark,
    apply_move,
    evaluate,
)
from tick_arcade.tictactoe.policy import choose_move

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveRecord:
    """One entry of the append-only move history."""

    player: Mark
    position: int
    timestamp: int

    def to_dict(self) -> dict:
        return {
            "player": self.player.value,
            "position": self.position,
            "timestamp": self.timestamp,
        }


@dataclass(frozen=True)
class GameStats:
    """Cumulative results across board resets."""

    x_wins: int = 0
    o_wins: int = 0
    draws: int = 0
    games_played: int = 0

    def record_win(self, winner: Mark) -> GameStats:
        if winner is Mark.X:
            return replace(
                self, x_wins=self.x_wins + 1,
                games_played=self.games_played + 1,
            )
        return replace(
            self, o_wins=self.o_wins + 1,
            games_played=self.games_played + 1,
        )

    def record_draw(self) -> GameStats:
        return replace(
            self, draws=self.draws + 1, games_played=self.games_played + 1,
        )

    def to_dict(self) -> dict:
        return {
            "x_wins": self.x_wins,
            "o_wins": self.o_wins,
            "draws": self.draws,
            "games_played": self.games_played,
        }


@dataclass(frozen=True)
class TicTacToeSnapshot:
    """Immutable view of a table after a move, reset or control change."""

    board: Board = EMPTY_BOARD
    current_player: Mark = Mark.X
    status: GameStatus = GameStatus.PLAYING
    winner: Mark | None = None
    winning_line: tuple[int, ...] = ()
    move_history: tuple[MoveRecord, ...] = ()
    stats: GameStats = field(default_factory=GameStats)
    autoplay: bool = True
    speed: GameSpeed = GameSpeed.NORMAL

    @property
    def latest_move(self) -> MoveRecord | None:
        return self.move_history[-1] if self.move_history else None

    def to_dict(self) -> dict:
        """Serialize the snapshot to a JSON-safe dictionary."""
        latest = self.latest_move
        return {
            "board": [c.value if c is not None else None for c in self.board],
            "current_player": self.current_player.value,
            "status": self.status.value,
            "winner": self.winner.value if self.winner is not None else None,
            "winning_line": list(self.winning_line),
            "move_history": [m.to_dict() for m in self.move_history],
            "stats": self.stats.to_dict(),
            "autoplay": self.autoplay,
            "speed_ms": self.speed.value,
            "latest_move": latest.position if latest is not None else None,
        }


TicTacToeListener = Callable[[TicTacToeSnapshot], None]


def _now_ms() -> int:
    return int(time.time() * 1000)


class TicTacToeEngine:
    """Two heuristic agents playing each other, one move per :meth:`step`.

    :meth:`advance` is the scheduler entry point: it plays a move while the
    board is live and restarts the board once it is finished, as long as
    autoplay is on. :meth:`next_delay` tells the scheduler how long to wait
    before calling it again.
    """

    def __init__(
        self,
        config: TicTacToeConfig | None = None,
        seed: int | None = None,
        clock: Callable[[], int] = _now_ms,
    ) -> None:
        self.config = config if config is not None else TicTacToeConfig()
        self.rng = np.random.default_rng(seed)
        self._clock = clock
        self._listeners: list[TicTacToeListener] = []
        self._snapshot = TicTacToeSnapshot(
            autoplay=self.config.autoplay, speed=self.config.speed,
        )

    @property
    def snapshot(self) -> TicTacToeSnapshot:
        return self._snapshot

    @property
    def status(self) -> GameStatus:
        return self._snapshot.status

    @property
    def autoplay(self) -> bool:
        return self._snapshot.autoplay

    @property
    def stats(self) -> GameStats:
        return self._snapshot.stats

    def step(self) -> TicTacToeSnapshot:
        """Play one move for the current player."""
        snap = self._snapshot
        if snap.status is not GameStatus.PLAYING or not snap.autoplay:
            return snap

        player = snap.current_player
        position = choose_move(snap.board, player, self.rng)
        if position is None:
            return snap

        board = apply_move(snap.board, player, position)
        history = (
            *snap.move_history,
            MoveRecord(player=player, position=position, timestamp=self._clock()),
        )
        outcome = evaluate(board)

        if outcome.status is GameStatus.WON:
            logger.info(
                "%s wins on line %s after %d moves.",
                outcome.winner.value, outcome.winning_line, len(history),
            )
            self._commit(replace(
                snap,
                board=board,
                move_history=history,
                status=GameStatus.WON,
                winner=outcome.winner,
                winning_line=outcome.winning_line,
                stats=snap.stats.record_win(outcome.winner),
            ))
        elif outcome.status is GameStatus.DRAW:
            logger.info("Draw after %d moves.", len(history))
            self._commit(replace(
                snap,
                board=board,
                move_history=history,
                status=GameStatus.DRAW,
                stats=snap.stats.record_draw(),
            ))
        else:
            self._commit(replace(
                snap,
                board=board,
                move_history=history,
                current_player=player.opponent,
            ))
        return self._snapshot

    def advance(self) -> TicTacToeSnapshot:
        """Scheduler callback: move while playing, auto-restart when done."""
        if not self._snapshot.autoplay:
            return self._snapshot
        if self._snapshot.status is GameStatus.PLAYING:
            return self.step()
        return self.reset()

    def next_delay(self) -> float:
        """Seconds to wait before the next :meth:`advance` call."""
        if self._snapshot.status is GameStatus.PLAYING:
            return self._snapshot.speed.seconds
        return self.config.restart_delay

    def reset(self) -> TicTacToeSnapshot:
        """Clear the board and history; X moves first. Stats are kept."""
        snap = self._snapshot
        self._commit(TicTacToeSnapshot(
            stats=snap.stats, autoplay=snap.autoplay, speed=snap.speed,
        ))
        return self._snapshot

    def reset_stats(self) -> TicTacToeSnapshot:
        self._commit(replace(self._snapshot, stats=GameStats()))
        return self._snapshot

    def toggle_autoplay(self) -> TicTacToeSnapshot:
        self._commit(replace(self._snapshot, autoplay=not self._snapshot.autoplay))
        logger.info(
            "Autoplay %s.", "resumed" if self._snapshot.autoplay else "paused",
        )
        return self._snapshot

    def set_speed(self, speed: GameSpeed) -> TicTacToeSnapshot:
        self._commit(replace(self._snapshot, speed=speed))
        return self._snapshot

    def subscribe(self, listener: TicTacToeListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: TicTacToeListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def get_state(self) -> dict:
        """Return the full, serializable table state."""
        return self._snapshot.to_dict()

    def _commit(self, snapshot: TicTacToeSnapshot) -> None:
        self._snapshot = snapshot
        for listener in list(self._listeners):
            listener(snapshot)
