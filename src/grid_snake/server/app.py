"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from grid_snake.config import GameConfig
from grid_snake.server.routes import router
from grid_snake.server.session_manager import SessionManager
from grid_snake.server.websocket import ws_router


@asynccontextmanager
async def _lifespan(app: FastAPI):
    if getattr(app.state, "session_manager", None) is None:
        app.state.session_manager = SessionManager(app.state.config)
    yield
    await app.state.session_manager.cleanup()


def create_app(config: GameConfig | None = None) -> FastAPI:
    """Build and return the FastAPI application."""
    app = FastAPI(
        title="Grid Snake API", version="0.1.0", lifespan=_lifespan,
    )
    app.state.config = config if config is not None else GameConfig()
    app.state.session_manager = None
    app.include_router(router)
    app.include_router(ws_router)
    return app
