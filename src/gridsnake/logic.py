from __future__ import annotations

import random

from . import config
from .state import Cell, ConfigurationError, Direction, GameState, Outcome, add_vectors, head, in_bounds


def initialize(rows: int, cols: int) -> GameState:
    if rows < 1 or cols < 1:
        raise ConfigurationError(f"grid must be at least 1x1, got {rows}x{cols}")
    if any(r >= rows or c >= cols for r, c in config.START_CELLS):
        raise ConfigurationError(f"grid {rows}x{cols} is too small for the starting snake")

    return GameState(
        rows=rows,
        cols=cols,
        snake=tuple(config.START_CELLS),
        food=None,
        direction=Direction.DOWN,
        pending=None,
        locked=False,
        score=0,
        ticks=0,
    )


def place_food(state: GameState, rng: random.Random | None = None) -> Cell | None:
    """Pick a uniformly random free cell, or None when the snake fills the board."""
    rng = rng or random
    occupied = set(state.snake)
    if len(occupied) >= state.rows * state.cols:
        return None
    while True:
        cell = (rng.randrange(state.rows), rng.randrange(state.cols))
        if cell not in occupied:
            return cell


def with_food(state: GameState, rng: random.Random | None = None) -> GameState:
    return state._replace(food=place_food(state, rng))


def request_direction(state: GameState, requested: Direction) -> GameState:
    # One accepted change per tick, and never a straight reversal.
    if state.locked or requested is state.direction.opposite:
        return state
    return state._replace(pending=requested, locked=True)


def step(state: GameState) -> tuple[GameState, Outcome]:
    direction = state.pending or state.direction
    state = state._replace(direction=direction, pending=None, locked=False, ticks=state.ticks + 1)

    new_head = add_vectors(head(state), direction.value)
    if not in_bounds(state, new_head):
        return state, Outcome.COLLIDED

    if new_head == state.food:
        grown = state.snake + (new_head,)
        return state._replace(snake=grown, score=state.score + 1, food=None), Outcome.ATE

    # The tail moves away this tick, so stepping onto it is legal.
    if new_head in state.snake[1:]:
        return state, Outcome.COLLIDED

    return state._replace(snake=state.snake[1:] + (new_head,)), Outcome.CONTINUE
