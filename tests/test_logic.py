"""
Tests for the pure game-state transitions in gridsnake.logic.
"""

import random

import pytest

from gridsnake.logic import initialize, place_food, request_direction, step, with_food
from gridsnake.state import ConfigurationError, Direction, GameState, Outcome


def make_state(snake, direction, rows=10, cols=10, food=None):
    return GameState(
        rows=rows,
        cols=cols,
        snake=tuple(snake),
        food=food,
        direction=direction,
        pending=None,
        locked=False,
        score=0,
        ticks=0,
    )


class TestInitialize:
    @pytest.mark.parametrize("rows,cols", [(3, 5), (10, 10), (7, 40), (50, 5)])
    def test_snake_is_adjacent_and_in_bounds(self, rows, cols):
        state = initialize(rows, cols)
        for r, c in state.snake:
            assert 0 <= r < rows and 0 <= c < cols
        for (r1, c1), (r2, c2) in zip(state.snake, state.snake[1:]):
            assert abs(r1 - r2) + abs(c1 - c2) == 1

    def test_initial_values(self):
        state = initialize(10, 10)
        assert state.snake == ((2, 2), (2, 3), (2, 4))
        assert state.direction is Direction.DOWN
        assert state.food is None
        assert state.score == 0
        assert state.ticks == 0
        assert state.pending is None
        assert state.locked is False

    @pytest.mark.parametrize("rows,cols", [(0, 10), (10, 0), (-1, 5), (2, 10), (10, 4)])
    def test_invalid_grid_raises(self, rows, cols):
        with pytest.raises(ConfigurationError):
            initialize(rows, cols)

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            initialize(0, 0)


class TestPlaceFood:
    def test_food_never_on_snake(self):
        rng = random.Random(7)
        snake = [(0, c) for c in range(5)] + [(1, c) for c in reversed(range(5))]
        state = make_state(snake, Direction.DOWN, rows=3, cols=5)
        for _ in range(200):
            food = place_food(state, rng)
            assert food not in state.snake
            assert food[0] == 2

    def test_single_free_cell_is_found(self):
        cells = [(r, c) for r in range(2) for c in range(3)]
        snake = [(0, 0), (0, 1), (0, 2), (1, 2), (1, 1)]
        state = make_state(snake, Direction.LEFT, rows=2, cols=3)
        assert set(cells) - set(snake) == {(1, 0)}
        assert place_food(state, random.Random(1)) == (1, 0)

    def test_full_board_returns_none(self):
        snake = [(0, 0), (0, 1), (1, 1), (1, 0)]
        state = make_state(snake, Direction.UP, rows=2, cols=2)
        assert place_food(state) is None

    def test_with_food_sets_food(self):
        state = with_food(initialize(10, 10), random.Random(3))
        assert state.food is not None
        assert state.food not in state.snake


class TestRequestDirection:
    @pytest.mark.parametrize("direction", list(Direction))
    def test_reversal_is_ignored(self, direction):
        state = make_state([(5, 4), (5, 5)], direction)
        after = request_direction(state, direction.opposite)
        assert after == state

    def test_accepted_request_sets_pending_and_locks(self):
        state = initialize(10, 10)
        after = request_direction(state, Direction.RIGHT)
        assert after.pending is Direction.RIGHT
        assert after.locked is True
        assert after.direction is Direction.DOWN

    def test_only_first_request_per_tick_applies(self):
        state = initialize(10, 10)
        state = request_direction(state, Direction.RIGHT)
        state = request_direction(state, Direction.LEFT)
        assert state.pending is Direction.RIGHT

        state, outcome = step(state)
        assert outcome is Outcome.CONTINUE
        assert state.direction is Direction.RIGHT
        assert state.snake[-1] == (2, 5)

    def test_lock_resets_after_step(self):
        state = request_direction(initialize(10, 10), Direction.RIGHT)
        state, _ = step(state)
        assert state.locked is False
        state = request_direction(state, Direction.DOWN)
        assert state.pending is Direction.DOWN


class TestStep:
    def test_first_step_moves_down_from_horizontal_body(self):
        state, outcome = step(initialize(10, 10))
        assert outcome is Outcome.CONTINUE
        assert state.snake == ((2, 3), (2, 4), (3, 4))
        assert state.ticks == 1

    def test_continue_preserves_length(self):
        state = initialize(10, 10)
        for _ in range(5):
            before = len(state.snake)
            state, outcome = step(state)
            assert outcome is Outcome.CONTINUE
            assert len(state.snake) == before

    def test_eating_grows_and_scores(self):
        state = initialize(10, 10)._replace(food=(3, 4))
        state, outcome = step(state)
        assert outcome is Outcome.ATE
        assert state.score == 1
        assert len(state.snake) == 4
        assert state.food is None
        assert state.snake[-1] == (3, 4)
        assert state.snake[0] == (2, 2)

    def test_wall_collision_at_origin(self):
        state = make_state([(1, 0), (0, 0)], Direction.UP)
        after, outcome = step(state)
        assert outcome is Outcome.COLLIDED
        assert after.snake == state.snake

    def test_wall_collision_top_edge(self):
        state = make_state([(0, 3), (0, 4), (0, 5)], Direction.UP)
        after, outcome = step(state)
        assert outcome is Outcome.COLLIDED
        assert after.snake == state.snake
        assert after.ticks == 1

    @pytest.mark.parametrize(
        "snake,direction",
        [
            ([(8, 0), (9, 0)], Direction.DOWN),
            ([(0, 8), (0, 9)], Direction.RIGHT),
            ([(0, 1), (0, 0)], Direction.LEFT),
        ],
    )
    def test_wall_collision_other_edges(self, snake, direction):
        _, outcome = step(make_state(snake, direction))
        assert outcome is Outcome.COLLIDED

    def test_self_collision(self):
        # Head at (5,5) turning back into the body at (5,4).
        snake = [(6, 3), (5, 3), (5, 4), (4, 4), (4, 5), (5, 5)]
        state = make_state(snake, Direction.LEFT)
        after, outcome = step(state)
        assert outcome is Outcome.COLLIDED
        assert after.snake == state.snake

    def test_moving_into_vacating_tail_is_legal(self):
        # 2x2 loop: head (5,4) moves up into tail (4,4).
        snake = [(4, 4), (4, 5), (5, 5), (5, 4)]
        state, outcome = step(make_state(snake, Direction.UP))
        assert outcome is Outcome.CONTINUE
        assert state.snake == ((4, 5), (5, 5), (5, 4), (4, 4))

    def test_pending_direction_is_committed(self):
        state = request_direction(initialize(10, 10), Direction.RIGHT)
        state, _ = step(state)
        assert state.direction is Direction.RIGHT
        assert state.pending is None

    def test_eat_scenario_on_ten_by_ten(self):
        state = initialize(10, 10)
        state = state._replace(food=(3, 4))
        state, outcome = step(state)
        assert (outcome, state.score, len(state.snake), state.food) == (Outcome.ATE, 1, 4, None)

    def test_collision_scenario_head_at_top(self):
        state = make_state([(2, 5), (1, 5), (0, 5)], Direction.UP)
        _, outcome = step(state)
        assert outcome is Outcome.COLLIDED
