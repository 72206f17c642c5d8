"""Game configuration: board geometry, speed, and colors."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, replace
from pathlib import Path

from grid_snake.grid import Grid

logger = logging.getLogger(__name__)

SNAKE_COLORS: tuple[str, ...] = (
    "green",
    "cyan",
    "blue",
    "yellow",
    "purple",
    "orange",
)

# Speed slider: a larger value means a shorter tick interval.
MAX_TICK_INTERVAL_MS = 300
SLIDER_MIN = 0
SLIDER_MAX = 250


def tick_interval_from_slider(value: int) -> int:
    """Map a speed slider position to a tick interval in milliseconds."""
    clamped = min(max(int(value), SLIDER_MIN), SLIDER_MAX)
    return MAX_TICK_INTERVAL_MS - clamped


@dataclass(frozen=True)
class GameConfig:
    """Full game configuration.

    Supports JSON serialization so a setup can be shared between runs.
    """

    board_size_px: int = 400
    cell_size_px: int = 20
    tick_interval_ms: int = 100
    snake_color: str = "green"
    food_color: str = "red"
    high_score_path: str = "high_score.json"

    def __post_init__(self) -> None:
        if self.snake_color not in SNAKE_COLORS:
            raise ValueError(
                f"Unknown snake color {self.snake_color!r}; "
                f"choose one of {', '.join(SNAKE_COLORS)}.",
            )
        if self.tick_interval_ms <= 0:
            raise ValueError("tick_interval_ms must be positive.")
        # Validates the derived grid dimension.
        self.grid()

    @property
    def grid_dimension(self) -> int:
        return self.board_size_px // self.cell_size_px

    def grid(self) -> Grid:
        return Grid.from_board(self.board_size_px, self.cell_size_px)

    def with_slider(self, value: int) -> GameConfig:
        """Return a copy whose tick interval follows the speed slider."""
        return replace(self, tick_interval_ms=tick_interval_from_slider(value))

    def with_color(self, color: str) -> GameConfig:
        return replace(self, snake_color=color)

    def to_dict(self) -> dict:
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)
