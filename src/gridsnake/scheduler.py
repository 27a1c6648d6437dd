from __future__ import annotations

from . import config


class Ticker:
    """Fixed-period timer fed with elapsed milliseconds from the frame clock."""

    def __init__(self, period_ms: int):
        if period_ms <= 0:
            raise ValueError("period_ms must be > 0")
        self.period_ms = period_ms
        self.acc_ms = 0
        self.cancelled = False

    def advance(self, elapsed_ms: int) -> int:
        """Return how many periods completed during `elapsed_ms`."""
        if self.cancelled:
            return 0
        self.acc_ms += elapsed_ms
        fired, self.acc_ms = divmod(self.acc_ms, self.period_ms)
        return fired

    def cancel(self) -> None:
        self.cancelled = True
        self.acc_ms = 0


class Schedule:
    """Movement ticker plus the display clock. Both stop together."""

    def __init__(self, tick_ms: int = config.TICK_MS, timer_ms: int = config.TIMER_MS):
        self.movement = Ticker(tick_ms)
        self.display = Ticker(timer_ms)
        self.elapsed_seconds = 0

    @property
    def active(self) -> bool:
        return not self.movement.cancelled

    def advance(self, elapsed_ms: int) -> int:
        self.elapsed_seconds += self.display.advance(elapsed_ms)
        return self.movement.advance(elapsed_ms)

    def cancel(self) -> None:
        self.movement.cancel()
        self.display.cancel()
