"""Pydantic models for API request/response schemas."""

from __future__ import annotations

import enum

from pydantic import BaseModel, Field


class GameKind(str, enum.Enum):
    """Which engine a session hosts."""

    SNAKE = "snake"
    TICTACTOE = "tictactoe"


class CreateSessionRequest(BaseModel):
    """Request body for POST /sessions."""

    kind: GameKind
    speed_ms: int | None = None
    seed: int | None = Field(default=None, ge=0)


class KeyRequest(BaseModel):
    """Request body for POST /sessions/{session_id}/keys."""

    key: str = Field(min_length=1, max_length=32)


class SpeedRequest(BaseModel):
    """Request body for POST /sessions/{session_id}/speed."""

    speed_ms: int


class SessionSummary(BaseModel):
    """Compact session info for list endpoints."""

    session_id: str
    kind: GameKind
    running: bool
    subscribers: int


class KeyResponse(BaseModel):
    """Result of routing a key press to a snake session."""

    handled: bool
    state: dict


class ErrorResponse(BaseModel):
    """Standard error envelope."""

    detail: str
