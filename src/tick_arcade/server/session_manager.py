"""In-memory session registry, tick scheduling and snapshot broadcast."""

from __future__ import annotations

import asyncio
import json
import logging
import time
import uuid
from dataclasses import dataclass, field

from starlette.websockets import WebSocket, WebSocketState

from tick_arcade.config import GameSpeed, SnakeConfig, TicTacToeConfig
from tick_arcade.controls import handle_key
from tick_arcade.engine import SnakeEngine
from tick_arcade.scheduler import TickScheduler
from tick_arcade.server.models import GameKind, SessionSummary
from tick_arcade.tictactoe.engine import TicTacToeEngine

logger = logging.getLogger(__name__)

MAX_SESSIONS = 64


@dataclass
class Session:
    """One engine, its scheduler and the sockets watching it."""

    session_id: str
    kind: GameKind
    engine: SnakeEngine | TicTacToeEngine
    scheduler: TickScheduler | None = None
    subscribers: list[WebSocket] = field(default_factory=list)
    created_at: float = field(default_factory=time.monotonic)
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)

    @property
    def running(self) -> bool:
        return self.scheduler is not None and self.scheduler.running

    def get_state(self) -> dict:
        return self.engine.get_state()

    def summary(self) -> SessionSummary:
        return SessionSummary(
            session_id=self.session_id,
            kind=self.kind,
            running=self.running,
            subscribers=len(self.subscribers),
        )


class SessionManager:
    """Central registry managing all game sessions.

    Every mutation of an engine goes through the session lock, and every
    committed snapshot is broadcast to the session's sockets.
    """

    def __init__(
        self,
        max_sessions: int = MAX_SESSIONS,
        snake_config: SnakeConfig | None = None,
    ) -> None:
        if max_sessions < 1:
            raise ValueError("max_sessions must be >= 1.")
        self._sessions: dict[str, Session] = {}
        self._max_sessions = max_sessions
        self._snake_config = snake_config if snake_config is not None else SnakeConfig()

    def create_session(
        self,
        kind: GameKind,
        speed_ms: int | None = None,
        seed: int | None = None,
    ) -> Session:
        """Create a session and start its tick loop."""
        if len(self._sessions) >= self._max_sessions:
            raise RuntimeError("Session limit reached. Close a session first.")

        session_id = uuid.uuid4().hex[:12]
        if kind is GameKind.SNAKE:
            if speed_ms is not None:
                raise ValueError("speed_ms applies to tictactoe sessions only.")
            engine = SnakeEngine(self._snake_config, seed=seed)
            session = Session(session_id=session_id, kind=kind, engine=engine)
            interval = self._snake_config.tick_interval
        else:
            speed = GameSpeed(speed_ms) if speed_ms is not None else GameSpeed.NORMAL
            engine = TicTacToeEngine(TicTacToeConfig(speed=speed), seed=seed)
            session = Session(session_id=session_id, kind=kind, engine=engine)
            interval = engine.next_delay

        session.scheduler = TickScheduler(
            lambda: self._tick(session), interval, name=f"session-{session_id}",
        )
        self._sessions[session_id] = session
        session.scheduler.start()
        logger.info("Session %s created (kind=%s).", session_id, kind.value)
        return session

    def get_session(self, session_id: str) -> Session | None:
        return self._sessions.get(session_id)

    def list_sessions(self) -> list[SessionSummary]:
        return [s.summary() for s in self._sessions.values()]

    def _require(self, session_id: str, kind: GameKind | None = None) -> Session:
        session = self._sessions.get(session_id)
        if session is None:
            raise KeyError(f"Session {session_id} not found.")
        if kind is not None and session.kind is not kind:
            raise ValueError(
                f"Operation not supported for {session.kind.value} sessions.",
            )
        return session

    async def _tick(self, session: Session) -> bool:
        """One scheduled tick: advance the engine, then broadcast."""
        async with session.lock:
            if isinstance(session.engine, SnakeEngine):
                session.engine.step()
                keep_running = not session.engine.game_over
            else:
                session.engine.advance()
                keep_running = session.engine.autoplay
            state = session.get_state()
        await self._broadcast(session, state)
        return keep_running

    async def press_key(self, session_id: str, key: str) -> tuple[bool, dict]:
        """Route a key press to a snake session."""
        session = self._require(session_id, GameKind.SNAKE)
        async with session.lock:
            was_over = session.engine.game_over
            handled = handle_key(session.engine, key)
            if was_over and not session.engine.game_over:
                session.scheduler.reschedule()
            state = session.get_state()
        if handled:
            await self._broadcast(session, state)
        return handled, state

    async def toggle_pause(self, session_id: str) -> dict:
        """Pause a snake game, or toggle autoplay on a tic-tac-toe table."""
        session = self._require(session_id)
        async with session.lock:
            if isinstance(session.engine, SnakeEngine):
                session.engine.toggle_pause()
            else:
                session.engine.toggle_autoplay()
                if session.engine.autoplay:
                    session.scheduler.reschedule()
                else:
                    session.scheduler.stop()
            state = session.get_state()
        await self._broadcast(session, state)
        return state

    async def restart(self, session_id: str) -> dict:
        """Reset the engine and restart its interval cleanly."""
        session = self._require(session_id)
        async with session.lock:
            session.engine.reset()
            session.scheduler.reschedule()
            state = session.get_state()
        await self._broadcast(session, state)
        return state

    async def set_speed(self, session_id: str, speed: GameSpeed) -> dict:
        session = self._require(session_id, GameKind.TICTACTOE)
        async with session.lock:
            session.engine.set_speed(speed)
            if session.engine.autoplay:
                session.scheduler.reschedule()
            state = session.get_state()
        await self._broadcast(session, state)
        return state

    async def reset_stats(self, session_id: str) -> dict:
        session = self._require(session_id, GameKind.TICTACTOE)
        async with session.lock:
            session.engine.reset_stats()
            state = session.get_state()
        await self._broadcast(session, state)
        return state

    async def close_session(self, session_id: str) -> None:
        """Stop the session's loop, close its sockets and forget it."""
        session = self._sessions.pop(session_id, None)
        if session is None:
            raise KeyError(f"Session {session_id} not found.")
        await self._shutdown(session)
        logger.info("Session %s closed.", session_id)

    async def _shutdown(self, session: Session) -> None:
        if session.scheduler is not None:
            await session.scheduler.aclose()
        for ws in list(session.subscribers):
            try:
                if ws.client_state == WebSocketState.CONNECTED:
                    await ws.close(code=1000, reason="Session closed.")
            except Exception:
                logger.warning(
                    "Failed closing socket in session %s.", session.session_id,
                )
        session.subscribers.clear()

    async def _broadcast(self, session: Session, state: dict) -> None:
        """Send a snapshot to every connected socket of *session*."""
        payload = json.dumps(state, separators=(",", ":"))
        dead: list[WebSocket] = []

        # Iterate over a snapshot so concurrent disconnect handlers can mutate
        # the live subscriber list without affecting this send loop.
        for ws in list(session.subscribers):
            try:
                if ws.client_state == WebSocketState.CONNECTED:
                    await ws.send_text(payload)
            except Exception:
                dead.append(ws)

        for ws in dead:
            if ws in session.subscribers:
                session.subscribers.remove(ws)

    async def cleanup(self) -> None:
        """Cancel all running tick loops and close every session."""
        sessions = list(self._sessions.values())
        self._sessions.clear()
        for session in sessions:
            await self._shutdown(session)
        logger.info("SessionManager cleanup complete.")
