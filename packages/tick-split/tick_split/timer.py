"""Timer sink protocol, an in-memory implementation, and action dispatch."""
from __future__ import annotations

import logging
from enum import Enum
from typing import Protocol, runtime_checkable

from tick_split.types import Action, Pause, ResetAndStart, Resume, SplitAt

logger = logging.getLogger(__name__)


class TimerState(Enum):
    NOT_RUNNING = "not_running"
    RUNNING = "running"
    ENDED = "ended"


@runtime_checkable
class TimerSink(Protocol):
    """Protocol for the timer that keeps the actual elapsed-time books."""

    @property
    def state(self) -> TimerState:
        ...

    def start(self) -> None:
        ...

    def reset(self) -> None:
        ...

    def split(self) -> None:
        ...

    def pause_game_time(self) -> None:
        ...

    def resume_game_time(self) -> None:
        ...


class MemoryTimer:
    """Timer sink that records what it was told instead of measuring time.

    Conforms to the TimerSink protocol. With *segments* set, the split that
    completes the last segment moves the timer to ``ENDED``.
    """

    def __init__(self, segments: int | None = None) -> None:
        self._segments = segments
        self._state = TimerState.NOT_RUNNING
        self.splits = 0
        self.game_time_paused = False
        self.calls: list[str] = []

    @property
    def state(self) -> TimerState:
        return self._state

    def start(self) -> None:
        self.calls.append("start")
        if self._state is TimerState.NOT_RUNNING:
            self._state = TimerState.RUNNING
            self.splits = 0

    def reset(self) -> None:
        self.calls.append("reset")
        self._state = TimerState.NOT_RUNNING
        self.splits = 0
        self.game_time_paused = False

    def split(self) -> None:
        self.calls.append("split")
        if self._state is not TimerState.RUNNING:
            return
        self.splits += 1
        if self._segments is not None and self.splits >= self._segments:
            self._state = TimerState.ENDED

    def pause_game_time(self) -> None:
        self.calls.append("pause_game_time")
        self.game_time_paused = True

    def resume_game_time(self) -> None:
        self.calls.append("resume_game_time")
        self.game_time_paused = False


def dispatch(timer: TimerSink, action: Action) -> None:
    """Apply one action to *timer*."""
    if isinstance(action, ResetAndStart):
        logger.info("Starting new run")
        if timer.state is TimerState.ENDED:
            timer.reset()
        timer.start()
    elif isinstance(action, SplitAt):
        logger.info("Split: %s", action.split.value)
        timer.split()
    elif isinstance(action, Pause):
        logger.debug("Pause game time")
        timer.pause_game_time()
    elif isinstance(action, Resume):
        logger.debug("Resume game time")
        timer.resume_game_time()
    else:
        raise TypeError(f"Not an action: {action!r}")
