"""REST API route handlers for session lifecycle and input."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request, Response

from grid_snake.controls import direction_from_button, direction_from_key
from grid_snake.server.models import (
    CreateSessionRequest,
    DirectionRequest,
    DirectionResponse,
    SessionSummary,
    SettingsRequest,
)
from grid_snake.server.session_manager import Session, SessionManager

router = APIRouter(prefix="/sessions", tags=["sessions"])


def _get_manager(request: Request) -> SessionManager:
    return request.app.state.session_manager


def _get_session(request: Request, session_id: str) -> Session:
    try:
        return _get_manager(request).get_session(session_id)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@router.post("", status_code=201)
async def create_session(
    body: CreateSessionRequest, request: Request,
) -> SessionSummary:
    """Start a new game session."""
    try:
        session = _get_manager(request).create_session(
            snake_color=body.snake_color, speed=body.speed, seed=body.seed,
        )
    except ValueError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return session.summary()


@router.get("")
async def list_sessions(request: Request) -> list[SessionSummary]:
    """List live sessions."""
    return _get_manager(request).list_sessions()


@router.get("/{session_id}")
async def get_session(session_id: str, request: Request) -> dict:
    """Get session metadata and the full game state."""
    session = _get_session(request, session_id)
    return {
        **session.summary().model_dump(),
        "state": session.engine.get_state(),
    }


@router.post("/{session_id}/direction")
async def request_direction(
    session_id: str, body: DirectionRequest, request: Request,
) -> DirectionResponse:
    """Buffer a direction change; unknown names are ignored."""
    session = _get_session(request, session_id)
    direction = None
    if body.direction is not None:
        direction = direction_from_button(body.direction)
    elif body.key is not None:
        direction = direction_from_key(body.key)

    accepted = (
        direction is not None and session.engine.request_direction(direction)
    )
    return DirectionResponse(
        accepted=accepted,
        pending=session.engine.state.pending.name.lower(),
    )


@router.post("/{session_id}/reset")
async def reset_session(session_id: str, request: Request) -> dict:
    """Start the session's game over, keeping the high score."""
    session = _get_session(request, session_id)
    session.engine.reset()
    return session.engine.get_state()


@router.patch("/{session_id}/settings")
async def update_settings(
    session_id: str, body: SettingsRequest, request: Request,
) -> SessionSummary:
    """Change snake color or speed of a live session."""
    try:
        session = _get_manager(request).update_settings(
            session_id, snake_color=body.snake_color, speed=body.speed,
        )
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return session.summary()


@router.delete("/{session_id}", status_code=204)
async def close_session(session_id: str, request: Request) -> Response:
    """Stop a session and drop it from the registry."""
    try:
        await _get_manager(request).close_session(session_id)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return Response(status_code=204)
