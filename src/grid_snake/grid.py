"""Square play field geometry and rasterization."""

from __future__ import annotations

import enum
from collections.abc import Iterable

import numpy as np

from grid_snake.snake import Cell


class CellType(enum.IntEnum):
    """Integer codes stored in a rasterized board."""

    EMPTY = 0
    SNAKE = 1
    FOOD = 2


class Grid:
    """Square grid of ``dimension`` x ``dimension`` cells.

    Coordinates are ``(x, y)`` with the origin in the top-left corner.
    """

    MIN_DIMENSION = 4

    def __init__(self, dimension: int = 20) -> None:
        if dimension < self.MIN_DIMENSION:
            raise ValueError(
                f"Grid dimension must be at least {self.MIN_DIMENSION}.",
            )
        self.dimension = dimension

    @classmethod
    def from_board(cls, board_size_px: int, cell_size_px: int) -> Grid:
        """Derive the grid from a pixel board and cell size."""
        if cell_size_px <= 0:
            raise ValueError("Cell size must be positive.")
        return cls(board_size_px // cell_size_px)

    @property
    def center(self) -> Cell:
        return self.dimension // 2, self.dimension // 2

    @property
    def default_food(self) -> Cell:
        return self.dimension // 4, self.dimension // 4

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether a coordinate lies within the grid."""
        return 0 <= x < self.dimension and 0 <= y < self.dimension

    def random_cell(self, rng: np.random.Generator) -> Cell:
        """Pick a cell uniformly over the whole grid.

        Occupancy is not considered; the same cell may come up repeatedly.
        """
        x, y = rng.integers(0, self.dimension, size=2).tolist()
        return x, y

    def rasterize(self, snake: Iterable[Cell], food: Cell) -> np.ndarray:
        """Paint the snake and food onto a ``(rows, cols)`` int8 array.

        Food is painted last, matching the draw order of the board.
        """
        cells = np.zeros((self.dimension, self.dimension), dtype=np.int8)
        for x, y in snake:
            if self.in_bounds(x, y):
                cells[y, x] = CellType.SNAKE
        fx, fy = food
        if self.in_bounds(fx, fy):
            cells[fy, fx] = CellType.FOOD
        return cells

    def to_dict(self) -> dict:
        return {"dimension": self.dimension}
