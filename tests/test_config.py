"""Tests for the game configuration dataclass."""

import json

import pytest

from grid_snake.config import (
    MAX_TICK_INTERVAL_MS,
    SNAKE_COLORS,
    GameConfig,
    tick_interval_from_slider,
)


class TestSlider:
    def test_mapping(self):
        assert tick_interval_from_slider(0) == MAX_TICK_INTERVAL_MS
        assert tick_interval_from_slider(200) == 100

    def test_clamped(self):
        assert tick_interval_from_slider(-20) == 300
        assert tick_interval_from_slider(1_000) == 50


class TestGameConfig:
    def test_defaults(self):
        cfg = GameConfig()
        assert cfg.grid_dimension == 20
        assert cfg.tick_interval_ms == 100
        assert cfg.snake_color == "green"
        assert cfg.snake_color in SNAKE_COLORS

    def test_unknown_color(self):
        with pytest.raises(ValueError, match="Unknown snake color"):
            GameConfig(snake_color="plaid")

    def test_bad_interval(self):
        with pytest.raises(ValueError, match="positive"):
            GameConfig(tick_interval_ms=0)

    def test_too_small_board(self):
        with pytest.raises(ValueError, match="at least 4"):
            GameConfig(board_size_px=60)

    def test_with_helpers(self):
        cfg = GameConfig().with_color("cyan").with_slider(50)
        assert cfg.snake_color == "cyan"
        assert cfg.tick_interval_ms == 250

    def test_save_and_load(self, tmp_path):
        cfg = GameConfig(board_size_px=300, cell_size_px=15, snake_color="blue")
        path = tmp_path / "cfg" / "game.json"
        cfg.save(path)
        loaded = GameConfig.load(path)
        assert loaded == cfg
        assert loaded.grid_dimension == 20

    def test_to_dict_serializable(self):
        assert isinstance(json.dumps(GameConfig().to_dict()), str)
