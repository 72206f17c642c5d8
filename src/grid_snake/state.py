"""Pure game-state transitions: input buffering, ticks, and reset.

Every function here takes a :class:`GameState` and returns a new one; no
function performs I/O. Side effects are described by the :class:`Event`
values returned from :func:`tick` and carried out by the engine.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace

import numpy as np

from grid_snake.grid import Grid
from grid_snake.snake import Cell, Direction, accepts_turn, advance, next_head


class Status(str, enum.Enum):
    """Outcome of a tick. A game never rests in ``GAME_OVER``."""

    RUNNING = "running"
    GAME_OVER = "game_over"


class EventKind(str, enum.Enum):
    FOOD_EATEN = "food_eaten"
    HIGH_SCORE = "high_score"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class Event:
    """A signal for collaborators produced by a tick."""

    kind: EventKind
    score: int


@dataclass(frozen=True)
class GameState:
    """Immutable snapshot of a single game."""

    snake: tuple[Cell, ...]
    food: Cell
    direction: Direction = Direction.NONE
    pending: Direction = Direction.NONE
    score: int = 0
    high_score: int = 0
    tick: int = 0

    def __post_init__(self) -> None:
        if not self.snake:
            raise ValueError("Snake must have at least one cell.")
        if self.score < 0 or self.high_score < 0:
            raise ValueError("Scores must be non-negative.")

    @property
    def head(self) -> Cell:
        return self.snake[0]

    def to_dict(self) -> dict:
        """Serialize to a JSON-friendly dict."""
        return {
            "snake": [list(c) for c in self.snake],
            "food": list(self.food),
            "direction": self.direction.name.lower(),
            "pending": self.pending.name.lower(),
            "score": self.score,
            "high_score": self.high_score,
            "tick": self.tick,
        }


@dataclass(frozen=True)
class TickResult:
    state: GameState
    events: tuple[Event, ...] = field(default_factory=tuple)

    @property
    def game_over(self) -> bool:
        return any(e.kind is EventKind.GAME_OVER for e in self.events)

    @property
    def status(self) -> Status:
        return Status.GAME_OVER if self.game_over else Status.RUNNING

    @property
    def food_eaten(self) -> bool:
        return any(e.kind is EventKind.FOOD_EATEN for e in self.events)


def initial_state(grid: Grid, high_score: int = 0) -> GameState:
    """Build the state a new or reset game starts from."""
    return GameState(
        snake=(grid.center,),
        food=grid.default_food,
        high_score=high_score,
    )


def reset(state: GameState, grid: Grid) -> GameState:
    """Start over, keeping only the high score."""
    return initial_state(grid, high_score=state.high_score)


def request_direction(state: GameState, direction: Direction) -> GameState:
    """Buffer *direction* for the next tick boundary.

    Requests on the axis of the committed direction are ignored, as is
    anything that is not a cardinal direction.
    """
    if not accepts_turn(state.direction, direction):
        return state
    return replace(state, pending=direction)


def tick(
    state: GameState, grid: Grid, rng: np.random.Generator,
) -> TickResult:
    """Advance the game by one cell in the committed direction."""
    head = next_head(state.snake, state.direction)

    if not grid.in_bounds(*head):
        over = Event(EventKind.GAME_OVER, state.score)
        return TickResult(reset(state, grid), (over,))

    events: list[Event] = []
    food = state.food
    score = state.score
    high_score = state.high_score
    grow = head == food
    if grow:
        events.append(Event(EventKind.FOOD_EATEN, score + 1))
        food = grid.random_cell(rng)
        score += 1
        if score > high_score:
            high_score = score
            events.append(Event(EventKind.HIGH_SCORE, score))

    new_state = replace(
        state,
        snake=advance(state.snake, head, grow=grow),
        food=food,
        score=score,
        high_score=high_score,
        direction=state.pending,
        tick=state.tick + 1,
    )
    return TickResult(new_state, tuple(events))
