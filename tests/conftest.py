"""Shared fixtures."""

from __future__ import annotations

import pytest

from grid_snake.config import GameConfig


@pytest.fixture()
def game_config(tmp_path):
    """Config whose high score lives in a per-test temporary file."""
    return GameConfig(high_score_path=str(tmp_path / "high_score.json"))
