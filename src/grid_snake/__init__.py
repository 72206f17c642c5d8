"""Grid Snake — single-player snake game engine."""

from grid_snake.config import GameConfig
from grid_snake.engine import GameEngine
from grid_snake.grid import Grid
from grid_snake.snake import Direction
from grid_snake.state import Event, EventKind, GameState, TickResult

__all__ = [
    "Direction",
    "Event",
    "EventKind",
    "GameConfig",
    "GameEngine",
    "GameState",
    "Grid",
    "TickResult",
]
