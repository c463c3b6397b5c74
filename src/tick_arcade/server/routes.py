"""REST API route handlers for session lifecycle and controls."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request, Response

from tick_arcade.config import GameSpeed
from tick_arcade.server.models import (
    CreateSessionRequest,
    ErrorResponse,
    KeyRequest,
    KeyResponse,
    SessionSummary,
    SpeedRequest,
)
from tick_arcade.server.session_manager import SessionManager

router = APIRouter(
    prefix="/sessions",
    tags=["sessions"],
    responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)


def _get_manager(request: Request) -> SessionManager:
    return request.app.state.session_manager


@router.post("", status_code=201)
async def create_session(
    body: CreateSessionRequest, request: Request,
) -> SessionSummary:
    """Create a new game session and start ticking it."""
    manager = _get_manager(request)
    try:
        session = manager.create_session(
            kind=body.kind, speed_ms=body.speed_ms, seed=body.seed,
        )
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except RuntimeError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return session.summary()


@router.get("")
async def list_sessions(request: Request) -> list[SessionSummary]:
    """List live sessions."""
    return _get_manager(request).list_sessions()


@router.get("/{session_id}")
async def get_session(session_id: str, request: Request) -> dict:
    """Get session metadata and the current snapshot."""
    session = _get_manager(request).get_session(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found.")
    result = session.summary().model_dump(mode="json")
    result["state"] = session.get_state()
    return result


@router.post("/{session_id}/keys")
async def press_key(
    session_id: str, body: KeyRequest, request: Request,
) -> KeyResponse:
    """Send a key press to a snake session."""
    try:
        handled, state = await _get_manager(request).press_key(
            session_id, body.key,
        )
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return KeyResponse(handled=handled, state=state)


@router.post("/{session_id}/pause")
async def toggle_pause(session_id: str, request: Request) -> dict:
    """Toggle snake pause, or tic-tac-toe autoplay."""
    try:
        return await _get_manager(request).toggle_pause(session_id)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@router.post("/{session_id}/restart")
async def restart(session_id: str, request: Request) -> dict:
    """Reset the board and restart the tick interval."""
    try:
        return await _get_manager(request).restart(session_id)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@router.post("/{session_id}/speed")
async def set_speed(
    session_id: str, body: SpeedRequest, request: Request,
) -> dict:
    """Change tic-tac-toe playback speed."""
    try:
        speed = GameSpeed(body.speed_ms)
    except ValueError as exc:
        allowed = ", ".join(str(s.value) for s in GameSpeed)
        raise HTTPException(
            status_code=422, detail=f"speed_ms must be one of {allowed}.",
        ) from exc
    try:
        return await _get_manager(request).set_speed(session_id, speed)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc


@router.post("/{session_id}/reset-stats")
async def reset_stats(session_id: str, request: Request) -> dict:
    """Zero the tic-tac-toe win/draw counters."""
    try:
        return await _get_manager(request).reset_stats(session_id)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc


@router.delete("/{session_id}", status_code=204)
async def close_session(session_id: str, request: Request) -> Response:
    """Stop and discard a session."""
    try:
        await _get_manager(request).close_session(session_id)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return Response(status_code=204)
