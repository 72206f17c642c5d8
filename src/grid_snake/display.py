"""Text and frame snapshots handed to rendering sinks."""

from __future__ import annotations

from dataclasses import dataclass

from grid_snake.snake import Cell


def format_score(score: int) -> str:
    return f"Score: {score}"


def format_high_score(high_score: int) -> str:
    return f"High score: {high_score}"


def format_game_over(score: int) -> str:
    return f"Game over! Your score: {score}"


@dataclass(frozen=True)
class Frame:
    """Everything a renderer needs to draw one frame."""

    snake: tuple[Cell, ...]
    food: Cell
    snake_color: str
    food_color: str
    score_text: str
    high_score_text: str
    grid_dimension: int
    cell_size_px: int

    def to_dict(self) -> dict:
        return {
            "snake": [list(c) for c in self.snake],
            "food": list(self.food),
            "snake_color": self.snake_color,
            "food_color": self.food_color,
            "score_text": self.score_text,
            "high_score_text": self.high_score_text,
            "grid_dimension": self.grid_dimension,
            "cell_size_px": self.cell_size_px,
        }
