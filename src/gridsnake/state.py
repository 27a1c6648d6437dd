from __future__ import annotations

import enum
from collections import namedtuple

Cell = tuple[int, int]  # (row, col)


class ConfigurationError(ValueError):
    """Raised when a game cannot be built for the requested grid."""


class Direction(enum.Enum):
    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Outcome(enum.Enum):
    CONTINUE = "continue"
    ATE = "ate"
    COLLIDED = "collided"


class Phase(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    GAME_OVER = "game_over"


GameState = namedtuple(
    "GameState",
    ["rows", "cols", "snake", "food", "direction", "pending", "locked", "score", "ticks"],
)
# snake: tuple[Cell, ...], tail is first element, head is last.
# food: Cell | None
# direction: committed Direction
# pending: Direction accepted since the last tick, or None
# locked: True once a direction change was accepted this tick
# score, ticks: int

Snapshot = namedtuple("Snapshot", ["cells", "food", "score", "outcome", "phase", "ticks", "won"])
# cells: tuple[Cell, ...] in render order, head first.
# outcome: Outcome of the last step, or None before the first one.


def add_vectors(a: Cell, b: tuple[int, int]) -> Cell:
    return (a[0] + b[0], a[1] + b[1])


def in_bounds(state: GameState, cell: Cell) -> bool:
    row, col = cell
    return 0 <= row < state.rows and 0 <= col < state.cols


def head(state: GameState) -> Cell:
    return state.snake[-1]
