"""Translate raw input events into direction requests."""

from __future__ import annotations

from grid_snake.snake import Direction

KEY_MAP: dict[str, Direction] = {
    "ArrowUp": Direction.UP,
    "ArrowDown": Direction.DOWN,
    "ArrowLeft": Direction.LEFT,
    "ArrowRight": Direction.RIGHT,
}

BUTTON_MAP: dict[str, Direction] = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


def direction_from_key(key: str) -> Direction | None:
    """Map a keyboard key name; unknown keys map to ``None``."""
    return KEY_MAP.get(key)


def direction_from_button(name: str) -> Direction | None:
    """Map an on-screen button name (case-insensitive)."""
    if not isinstance(name, str):
        return None
    return BUTTON_MAP.get(name.strip().lower())


def direction_from_swipe(
    start: tuple[float, float], end: tuple[float, float],
) -> Direction | None:
    """Infer a direction from touch start/end coordinates.

    The dominant axis wins; ties count as vertical. Screen coordinates grow
    downwards, so a positive ``dy`` is a swipe down.
    """
    dx = end[0] - start[0]
    dy = end[1] - start[1]
    if abs(dx) > abs(dy):
        return Direction.RIGHT if dx > 0 else Direction.LEFT
    if dy > 0:
        return Direction.DOWN
    if dy < 0:
        return Direction.UP
    return None
