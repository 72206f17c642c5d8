"""Headless game runs driven by random input."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

import numpy as np

from grid_snake.audio import LoggingAudio
from grid_snake.config import GameConfig
from grid_snake.engine import GameEngine
from grid_snake.snake import CARDINALS
from grid_snake.storage import HighScoreStore

logger = logging.getLogger(__name__)


@dataclass
class SimulationResult:
    """Totals from a batch of headless games."""

    games: int
    ticks: int
    best_score: int
    high_score: int
    wall_time_seconds: float

    def summary(self) -> str:
        return (
            f"Simulation: {self.games} game(s), {self.ticks} ticks in "
            f"{self.wall_time_seconds:.2f}s | best score {self.best_score}, "
            f"high score {self.high_score}"
        )


def simulate(
    *,
    config: GameConfig | None = None,
    games: int = 10,
    max_ticks: int = 1_000,
    seed: int | None = None,
    store: HighScoreStore | None = None,
    turn_probability: float = 0.2,
) -> SimulationResult:
    """Play *games* games with random turns.

    A game ends at its first game over or after *max_ticks* ticks. A direction
    request is issued on each tick with probability *turn_probability*.
    """
    if games < 1:
        raise ValueError("games must be at least 1.")
    rng = np.random.default_rng(seed)
    engine = GameEngine(
        config, store=store, audio=LoggingAudio(),
        seed=int(rng.integers(2**31)),
    )

    total_ticks = 0
    best = 0
    start = time.perf_counter()
    for game in range(games):
        engine.reset()
        engine.request_direction(CARDINALS[int(rng.integers(len(CARDINALS)))])
        for _ in range(max_ticks):
            if rng.random() < turn_probability:
                choice = CARDINALS[int(rng.integers(len(CARDINALS)))]
                engine.request_direction(choice)
            score = engine.state.score
            result = engine.step()
            total_ticks += 1
            if result.game_over:
                best = max(best, score)
                break
        else:
            best = max(best, engine.state.score)
        logger.debug("Game %d finished.", game)
    elapsed = time.perf_counter() - start

    return SimulationResult(
        games=games,
        ticks=total_ticks,
        best_score=best,
        high_score=engine.state.high_score,
        wall_time_seconds=elapsed,
    )
