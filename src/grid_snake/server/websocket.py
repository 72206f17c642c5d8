"""WebSocket handler streaming frames and receiving input."""

from __future__ import annotations

import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from grid_snake.controls import (
    direction_from_button,
    direction_from_key,
    direction_from_swipe,
)
from grid_snake.server.session_manager import SessionManager
from grid_snake.snake import Direction

logger = logging.getLogger(__name__)

ws_router = APIRouter()


def _get_manager(ws: WebSocket) -> SessionManager:
    return ws.app.state.session_manager


def _point(value) -> tuple[float, float] | None:
    if not isinstance(value, list | tuple) or len(value) != 2:
        return None
    x, y = value
    if not all(
        isinstance(v, int | float) and not isinstance(v, bool) for v in (x, y)
    ):
        return None
    return float(x), float(y)


def parse_message(msg: dict) -> Direction | None:
    """Extract a direction from a client message, or ``None``."""
    if isinstance(msg.get("direction"), str):
        return direction_from_button(msg["direction"])
    if isinstance(msg.get("key"), str):
        return direction_from_key(msg["key"])
    swipe = msg.get("swipe")
    if isinstance(swipe, dict):
        start = _point(swipe.get("start"))
        end = _point(swipe.get("end"))
        if start is not None and end is not None:
            return direction_from_swipe(start, end)
    return None


@ws_router.websocket("/sessions/{session_id}/play")
async def play(websocket: WebSocket, session_id: str) -> None:
    """Player WebSocket: send input, receive a state frame each tick."""
    manager = _get_manager(websocket)
    try:
        session = manager.get_session(session_id)
    except KeyError:
        await websocket.close(code=4004, reason="Session not found.")
        return

    await websocket.accept()
    session.subscribers.append(websocket)
    logger.info("Client connected to session %s.", session_id)

    # Initial snapshot so the client can draw before the first tick.
    await websocket.send_text(
        json.dumps(session.engine.get_state(), separators=(",", ":")),
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

            direction = parse_message(msg)
            if direction is None:
                continue
            session.engine.request_direction(direction)
    except WebSocketDisconnect:
        logger.info("Client disconnected from session %s.", session_id)
    finally:
        if websocket in session.subscribers:
            session.subscribers.remove(websocket)
