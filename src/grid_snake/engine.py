"""Game controller owning a single game's state and its collaborators."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace

import numpy as np

from grid_snake.audio import AudioPlayer, NullAudio
from grid_snake.config import GameConfig
from grid_snake.display import (
    Frame,
    format_game_over,
    format_high_score,
    format_score,
)
from grid_snake.snake import Direction
from grid_snake.state import (
    Event,
    EventKind,
    GameState,
    TickResult,
    initial_state,
    request_direction,
    reset,
    tick,
)
from grid_snake.storage import HighScoreStore

logger = logging.getLogger(__name__)

ScoreListener = Callable[[str, str], None]
GameOverListener = Callable[[int, str], None]


class GameEngine:
    """Single-player, step-based game engine.

    The engine is the only writer of its :class:`GameState`. Each call to
    :meth:`step` runs one pure tick and then dispatches the resulting events
    to audio, storage, and listeners.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        store: HighScoreStore | None = None,
        audio: AudioPlayer | None = None,
        seed: int | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.grid = self.config.grid()
        self.store = store
        self.audio = audio if audio is not None else NullAudio()
        self.rng = np.random.default_rng(seed)
        self.score_listeners: list[ScoreListener] = []
        self.game_over_listeners: list[GameOverListener] = []
        self.games_played = 0

        high_score = store.load() if store is not None else 0
        self.state: GameState = initial_state(self.grid, high_score=high_score)

    def request_direction(self, direction: Direction) -> bool:
        """Buffer a direction change. Returns True if it was accepted."""
        before = self.state
        self.state = request_direction(before, direction)
        return self.state is not before

    def step(self) -> TickResult:
        """Advance the game by one tick and handle its events."""
        previous = self.state
        result = tick(previous, self.grid, self.rng)
        self.state = result.state
        for event in result.events:
            self._dispatch(event, previous)
        return result

    def reset(self) -> GameState:
        """Start a fresh game, keeping the high score."""
        self.state = reset(self.state, self.grid)
        self._refresh_high_score()
        self._notify_score()
        return self.state

    def apply_config(self, config: GameConfig) -> None:
        """Swap in new settings; the grid size may not change mid-game."""
        if config.grid_dimension != self.grid.dimension:
            raise ValueError("Grid dimension cannot change during a game.")
        self.config = config

    def frame(self) -> Frame:
        """Snapshot for rendering the current board."""
        return Frame(
            snake=self.state.snake,
            food=self.state.food,
            snake_color=self.config.snake_color,
            food_color=self.config.food_color,
            score_text=format_score(self.state.score),
            high_score_text=format_high_score(self.state.high_score),
            grid_dimension=self.grid.dimension,
            cell_size_px=self.config.cell_size_px,
        )

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        cells = self.grid.rasterize(self.state.snake, self.state.food)
        return {
            **self.state.to_dict(),
            "games_played": self.games_played,
            "frame": self.frame().to_dict(),
            "grid": {**self.grid.to_dict(), "cells": cells.tolist()},
        }

    def _dispatch(self, event: Event, previous: GameState) -> None:
        if event.kind is EventKind.FOOD_EATEN:
            self._play(self.audio.play_eat_sound)
            self._notify_score()
        elif event.kind is EventKind.HIGH_SCORE:
            self._save_high_score(event.score)
        elif event.kind is EventKind.GAME_OVER:
            self.games_played += 1
            logger.info(
                "Game over at tick %d with score %d.",
                previous.tick, event.score,
            )
            self._play(self.audio.play_game_over_sound)
            self._refresh_high_score()
            message = format_game_over(event.score)
            for listener in self.game_over_listeners:
                listener(event.score, message)
            self._notify_score()

    def _save_high_score(self, score: int) -> None:
        if self.store is None:
            return
        try:
            stored = self.store.save(score)
        except OSError:
            logger.warning("Could not persist high score %d.", score)
            return
        self._adopt_high_score(stored)

    def _refresh_high_score(self) -> None:
        """Pick up records written by other engines sharing the store."""
        if self.store is not None:
            self._adopt_high_score(self.store.load())

    def _adopt_high_score(self, stored: int) -> None:
        if stored > self.state.high_score:
            self.state = replace(self.state, high_score=stored)

    def _play(self, sound: Callable[[], None]) -> None:
        # Audio is fire-and-forget.
        try:
            sound()
        except Exception:
            logger.warning("Audio playback failed.", exc_info=True)

    def _notify_score(self) -> None:
        score_text = format_score(self.state.score)
        high_text = format_high_score(self.state.high_score)
        for listener in self.score_listeners:
            listener(score_text, high_text)
