from __future__ import annotations

import logging
import random
import threading

from .logic import initialize, place_food, request_direction, step, with_food
from .state import Direction, GameState, Outcome, Phase, Snapshot

logger = logging.getLogger(__name__)


class Engine:
    """Owns one GameState and drives it through Idle -> Running -> GameOver.

    All mutation goes through the lock, so `tick` and `request_direction` are
    serialised even when input arrives on another thread.
    """

    def __init__(self, rows: int, cols: int, rng: random.Random | None = None):
        self.rows = rows
        self.cols = cols
        self.rng = rng or random.Random()
        self._lock = threading.Lock()
        # Validate the grid up front; no engine exists for a bad configuration.
        self._state: GameState = initialize(rows, cols)
        self.phase = Phase.IDLE
        self.outcome: Outcome | None = None
        self.won = False

    @property
    def state(self) -> GameState:
        return self._state

    def start(self) -> Snapshot:
        with self._lock:
            if self.phase is Phase.RUNNING:
                raise RuntimeError("game already running; use restart()")
            return self._begin()

    def restart(self) -> Snapshot:
        with self._lock:
            return self._begin()

    def _begin(self) -> Snapshot:
        self._state = with_food(initialize(self.rows, self.cols), self.rng)
        self.phase = Phase.RUNNING
        self.outcome = None
        self.won = False
        logger.info("game started on %dx%d grid", self.rows, self.cols)
        return self._snapshot()

    def request_direction(self, direction: Direction) -> None:
        with self._lock:
            if self.phase is not Phase.RUNNING:
                return
            self._state = request_direction(self._state, direction)

    def tick(self) -> Snapshot:
        with self._lock:
            if self.phase is not Phase.RUNNING:
                return self._snapshot()

            self._state, self.outcome = step(self._state)
            if self.outcome is Outcome.ATE:
                food = place_food(self._state, self.rng)
                self._state = self._state._replace(food=food)
                if food is None:
                    self.won = True
                    self.phase = Phase.GAME_OVER
                    logger.info("board full after %d ticks, score %d", self._state.ticks, self._state.score)
            elif self.outcome is Outcome.COLLIDED:
                self.phase = Phase.GAME_OVER
                logger.info("collision after %d ticks, score %d", self._state.ticks, self._state.score)
            return self._snapshot()

    def snapshot(self) -> Snapshot:
        with self._lock:
            return self._snapshot()

    def _snapshot(self) -> Snapshot:
        state = self._state
        return Snapshot(
            cells=tuple(reversed(state.snake)),
            food=state.food,
            score=state.score,
            outcome=self.outcome,
            phase=self.phase,
            ticks=state.ticks,
            won=self.won,
        )
