"""In-memory session registry and per-session async tick loops."""

from __future__ import annotations

import asyncio
import json
import logging
import uuid
from dataclasses import dataclass, field

from starlette.websockets import WebSocket, WebSocketState

from grid_snake.config import GameConfig
from grid_snake.engine import GameEngine
from grid_snake.scheduler import FrameTicker
from grid_snake.server.models import SessionSummary
from grid_snake.state import TickResult
from grid_snake.storage import HighScoreStore

logger = logging.getLogger(__name__)

_MAX_SESSIONS = 100


@dataclass
class Session:
    """All state for a single player's game."""

    session_id: str
    engine: GameEngine
    ticker: FrameTicker | None = None
    subscribers: list[WebSocket] = field(default_factory=list)
    notices: list[dict] = field(default_factory=list)
    _task: asyncio.Task | None = field(default=None, repr=False)

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def summary(self) -> SessionSummary:
        state = self.engine.state
        return SessionSummary(
            session_id=self.session_id,
            score=state.score,
            high_score=state.high_score,
            tick_interval_ms=self.engine.config.tick_interval_ms,
            snake_color=self.engine.config.snake_color,
            running=self.running,
        )


class SessionManager:
    """Central registry owning every live game session.

    All sessions share one high-score store; mutation happens on the event
    loop only, so the store never sees concurrent writers.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        max_sessions: int = _MAX_SESSIONS,
        frame_rate: int = 60,
        autostart: bool = True,
    ) -> None:
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1.")
        self.config = config if config is not None else GameConfig()
        self.store = HighScoreStore(self.config.high_score_path)
        self._sessions: dict[str, Session] = {}
        self._max_sessions = max_sessions
        self._frame_rate = frame_rate
        self._autostart = autostart

    def create_session(
        self,
        snake_color: str | None = None,
        speed: int | None = None,
        seed: int | None = None,
    ) -> Session:
        """Create a session and start its tick loop when a loop is running."""
        if len(self._sessions) >= self._max_sessions:
            raise ValueError("Too many active sessions.")

        config = self.config
        if snake_color is not None:
            config = config.with_color(snake_color)
        if speed is not None:
            config = config.with_slider(speed)

        engine = GameEngine(config, store=self.store, seed=seed)
        session = Session(session_id=uuid.uuid4().hex[:12], engine=engine)
        engine.game_over_listeners.append(
            lambda score, message: session.notices.append(
                {"event": "game_over", "score": score, "message": message},
            ),
        )
        session.ticker = FrameTicker(
            engine, on_frame=self._make_frame_callback(session),
            frame_rate=self._frame_rate,
        )
        self._sessions[session.session_id] = session

        if self._autostart:
            self.start_session(session)
        logger.info("Session %s created.", session.session_id)
        return session

    def start_session(self, session: Session) -> None:
        """Launch the tick loop on the running event loop, if there is one."""
        if session.running:
            return
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            logger.debug(
                "No running loop; session %s not started.", session.session_id,
            )
            return
        session._task = asyncio.create_task(self._run(session))

    def get_session(self, session_id: str) -> Session:
        session = self._sessions.get(session_id)
        if session is None:
            raise KeyError(f"Session {session_id} not found.")
        return session

    def list_sessions(self) -> list[SessionSummary]:
        return [s.summary() for s in self._sessions.values()]

    def update_settings(
        self,
        session_id: str,
        snake_color: str | None = None,
        speed: int | None = None,
    ) -> Session:
        """Apply color and speed changes to a live session."""
        session = self.get_session(session_id)
        config = session.engine.config
        if snake_color is not None:
            config = config.with_color(snake_color)
        if speed is not None:
            config = config.with_slider(speed)
        session.engine.apply_config(config)
        logger.info(
            "Session %s settings: color=%s interval=%dms.",
            session_id, config.snake_color, config.tick_interval_ms,
        )
        return session

    async def close_session(self, session_id: str) -> None:
        """Stop a session's loop and disconnect its subscribers."""
        session = self._sessions.pop(session_id, None)
        if session is None:
            raise KeyError(f"Session {session_id} not found.")
        await self._stop(session)
        logger.info("Session %s closed.", session_id)

    async def _run(self, session: Session) -> None:
        assert session.ticker is not None  # noqa: S101
        try:
            await session.ticker.run()
        except asyncio.CancelledError:
            logger.info("Tick loop cancelled for session %s.", session.session_id)
        except Exception:
            logger.exception("Tick loop error in session %s.", session.session_id)

    def _make_frame_callback(self, session: Session):
        async def on_frame(engine: GameEngine, result: TickResult | None) -> None:
            if result is None:
                return
            await self.broadcast(session)

        return on_frame

    async def broadcast(self, session: Session) -> None:
        """Send pending notices and the current state to every subscriber."""
        payloads = [json.dumps(n, separators=(",", ":")) for n in session.notices]
        session.notices.clear()
        payloads.append(
            json.dumps(session.engine.get_state(), separators=(",", ":")),
        )

        # Iterate over a snapshot so disconnect handlers can mutate the
        # live subscriber list without affecting this send loop.
        dead: list[WebSocket] = []
        for ws in list(session.subscribers):
            try:
                if ws.client_state == WebSocketState.CONNECTED:
                    for payload in payloads:
                        await ws.send_text(payload)
            except Exception:
                dead.append(ws)

        for ws in dead:
            if ws in session.subscribers:
                session.subscribers.remove(ws)

    async def _stop(self, session: Session) -> None:
        if session.ticker is not None:
            session.ticker.stop()
        task = session._task
        if task is not None and not task.done():
            task.cancel()
            await asyncio.gather(task, return_exceptions=True)

        for ws in list(session.subscribers):
            try:
                if ws.client_state == WebSocketState.CONNECTED:
                    await ws.close(code=1000, reason="Session closed.")
            except Exception:
                logger.warning(
                    "Failed closing socket in session %s.", session.session_id,
                )
        session.subscribers.clear()

    async def cleanup(self) -> None:
        """Stop every session loop."""
        for session in list(self._sessions.values()):
            await self._stop(session)
        self._sessions.clear()
        logger.info("SessionManager cleanup complete.")
