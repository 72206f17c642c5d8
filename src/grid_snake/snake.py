"""Directions and snake body movement."""

from __future__ import annotations

import enum

Cell = tuple[int, int]


class Direction(enum.Enum):
    """Movement directions with (dx, dy) values.

    ``NONE`` is the resting state before the first move.
    """

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    NONE = (0, 0)

    @property
    def horizontal(self) -> bool:
        return self.value[0] != 0

    @property
    def vertical(self) -> bool:
        return self.value[1] != 0


CARDINALS: tuple[Direction, ...] = (
    Direction.UP,
    Direction.DOWN,
    Direction.LEFT,
    Direction.RIGHT,
)


def accepts_turn(current: Direction, requested: Direction) -> bool:
    """Return True if *requested* may replace *current*.

    Only turns onto the other axis are allowed; any cardinal direction is
    allowed while the snake is at rest.
    """
    if requested not in CARDINALS:
        return False
    if current is Direction.NONE:
        return True
    if current.horizontal:
        return requested.vertical
    return requested.horizontal


def next_head(body: tuple[Cell, ...], direction: Direction) -> Cell:
    """Compute the next head position without moving."""
    dx, dy = direction.value
    x, y = body[0]
    return x + dx, y + dy


def advance(
    body: tuple[Cell, ...], head: Cell, grow: bool = False,
) -> tuple[Cell, ...]:
    """Return a new body with *head* prepended.

    The tail is dropped first unless the snake grows this tick, so the
    length changes by exactly one when growing and not at all otherwise.
    """
    if not body:
        raise ValueError("Snake body must contain at least one cell.")
    kept = body if grow else body[:-1]
    return (head, *kept)
