"""Pydantic models for API request/response schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from grid_snake.config import SLIDER_MAX, SLIDER_MIN, SNAKE_COLORS


class SettingsRequest(BaseModel):
    """Request body for PATCH /sessions/{session_id}/settings.

    ``speed`` is the slider position; higher is faster.
    """

    snake_color: str | None = None
    speed: int | None = Field(default=None, ge=SLIDER_MIN, le=SLIDER_MAX)

    @field_validator("snake_color")
    @classmethod
    def check_color(cls, value: str | None) -> str | None:
        if value is not None and value not in SNAKE_COLORS:
            raise ValueError(
                f"snake_color must be one of {', '.join(SNAKE_COLORS)}",
            )
        return value


class CreateSessionRequest(SettingsRequest):
    """Request body for POST /sessions."""

    seed: int | None = None


class DirectionRequest(BaseModel):
    """Request body for POST /sessions/{session_id}/direction.

    Either a button-style ``direction`` name or a keyboard ``key`` name.
    """

    direction: str | None = None
    key: str | None = None


class DirectionResponse(BaseModel):
    accepted: bool
    pending: str


class SessionSummary(BaseModel):
    """Compact session info for list endpoints."""

    session_id: str
    score: int
    high_score: int
    tick_interval_ms: int
    snake_color: str
    running: bool
