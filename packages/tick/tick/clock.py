"""Clock - tick counting and real-time pacing for the polling loop."""

import time
from typing import Callable

from tick.types import TickContext


class Clock:
    """Counts ticks and knows when the next one is due.

    Each ``advance()`` stamps the tick's start on the monotonic clock;
    ``sleep_remaining()`` then waits out whatever is left of the tick so a
    paced loop polls at ``tps`` regardless of how long the systems took.
    """

    def __init__(self, tps: int) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        self._tps = tps
        self._dt = 1.0 / tps
        self._tick_number = 0
        self._tick_started: float | None = None

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def tick_number(self) -> int:
        return self._tick_number

    def advance(self) -> int:
        self._tick_number += 1
        self._tick_started = time.monotonic()
        return self._tick_number

    def remaining(self) -> float:
        """Seconds left in the current tick, 0.0 if overrun or not started."""
        if self._tick_started is None:
            return 0.0
        return max(0.0, self._dt - (time.monotonic() - self._tick_started))

    def sleep_remaining(self) -> None:
        delay = self.remaining()
        if delay > 0:
            time.sleep(delay)

    def context(self, stop_fn: Callable[[], None]) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            dt=self._dt,
            elapsed=self._tick_number * self._dt,
            request_stop=stop_fn,
        )

    def reset(self, tick_number: int = 0) -> None:
        self._tick_number = tick_number
        self._tick_started = None
