"""WebSocket handler streaming snapshots and accepting key presses."""

from __future__ import annotations

import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from tick_arcade.server.models import GameKind
from tick_arcade.server.session_manager import SessionManager

logger = logging.getLogger(__name__)

ws_router = APIRouter()


def _get_manager(ws: WebSocket) -> SessionManager:
    return ws.app.state.session_manager


@ws_router.websocket("/sessions/{session_id}/stream")
async def stream(websocket: WebSocket, session_id: str) -> None:
    """Send every committed snapshot; route ``{"key": ...}`` to snake games."""
    manager = _get_manager(websocket)
    session = manager.get_session(session_id)
    if session is None:
        await websocket.close(code=4004, reason="Session not found.")
        return

    await websocket.accept()
    session.subscribers.append(websocket)
    logger.info("Client connected to session %s.", session_id)

    # Send initial state snapshot so the client can render immediately.
    await websocket.send_text(
        json.dumps(session.get_state(), separators=(",", ":")),
    )

    try:
        while True:
            raw = await websocket.receive_text()
            try:
                msg = json.loads(raw)
            except json.JSONDecodeError:
                continue
            if not isinstance(msg, dict):
                continue

            key = msg.get("key")
            if not isinstance(key, str) or session.kind is not GameKind.SNAKE:
                continue
            if manager.get_session(session_id) is None:
                break
            await manager.press_key(session_id, key)
    except WebSocketDisconnect:
        logger.info("Client disconnected from session %s.", session_id)
    finally:
        if websocket in session.subscribers:
            session.subscribers.remove(websocket)
