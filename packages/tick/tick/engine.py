"""Engine - polling loop, pacing, and lifecycle hooks."""

from typing import Callable

from tick.clock import Clock
from tick.types import System, TickContext


class Engine:
    """Runs registered systems once per tick, in registration order.

    ``run(n)`` executes ticks back to back; ``run_forever()`` sleeps out the
    remainder of each tick so systems see a steady ``tps`` polling rate.
    """

    def __init__(self, tps: int = 20) -> None:
        self._clock = Clock(tps)
        self._systems: list[System] = []
        self._start_hooks: list[Callable[[TickContext], None]] = []
        self._stop_hooks: list[Callable[[TickContext], None]] = []
        self._stop_requested: bool = False

    @property
    def clock(self) -> Clock:
        return self._clock

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def on_start(self, hook: Callable[[TickContext], None]) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Callable[[TickContext], None]) -> None:
        self._stop_hooks.append(hook)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _tick(self) -> None:
        self._clock.advance()
        ctx = self._clock.context(self._request_stop)
        for system in self._systems:
            system(ctx)
            if self._stop_requested:
                break

    def _fire(self, hooks: list[Callable[[TickContext], None]]) -> None:
        ctx = self._clock.context(self._request_stop)
        for hook in hooks:
            hook(ctx)

    def step(self) -> None:
        self._stop_requested = False
        self._tick()

    def run(self, n: int) -> None:
        self._stop_requested = False
        self._fire(self._start_hooks)

        for _ in range(n):
            self._tick()
            if self._stop_requested:
                break

        self._fire(self._stop_hooks)

    def run_forever(self) -> None:
        self._stop_requested = False
        self._fire(self._start_hooks)

        while not self._stop_requested:
            self._tick()
            if self._stop_requested:
                break
            self._clock.sleep_remaining()

        self._fire(self._stop_hooks)
