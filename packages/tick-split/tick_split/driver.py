"""SplitDriver - attaches to a session, polls Progress, dispatches actions."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from tick_split.progress import Progress
from tick_split.settings import SplitSettings
from tick_split.timer import TimerSink, TimerState, dispatch
from tick_split.types import Action

if TYPE_CHECKING:
    from tick import TickContext

    from tick_split.telemetry import Telemetry

logger = logging.getLogger(__name__)

_IDLE_STATES = (TimerState.NOT_RUNNING, TimerState.ENDED)


class SplitDriver:
    """Owns the run state of one game session at a time.

    ``attach()`` is called every poll until it returns a telemetry source.
    When that source stops being alive, the session and its ``Progress`` are
    discarded; nothing carries over to the next session.
    """

    def __init__(
        self,
        attach: Callable[[], Telemetry | None],
        timer: TimerSink,
        settings: SplitSettings | None = None,
    ) -> None:
        self._attach = attach
        self._timer = timer
        self._settings = settings if settings is not None else SplitSettings()
        self._telemetry: Telemetry | None = None
        self._progress: Progress | None = None

    @property
    def attached(self) -> bool:
        return self._telemetry is not None

    @property
    def progress(self) -> Progress | None:
        return self._progress

    @property
    def settings(self) -> SplitSettings:
        return self._settings

    def _detach(self) -> None:
        logger.info("Game session ended, discarding run state")
        self._telemetry = None
        self._progress = None

    def poll(self) -> list[Action]:
        """Run one tick. Returns the actions dispatched to the timer, in order."""
        if self._telemetry is None:
            telemetry = self._attach()
            if telemetry is None:
                return []
            logger.info("Attached to game session")
            self._telemetry = telemetry
            self._progress = Progress()

        if not self._telemetry.is_alive():
            self._detach()
            return []

        progress = self._progress
        assert progress is not None

        # The user reset the timer or the run ended without us. A deferred
        # action still belongs to the old run and goes out first.
        if self._timer.state in _IDLE_STATES and progress.pending is None:
            progress.reset()

        dispatched: list[Action] = []
        for action in progress.drain(self._telemetry):
            logger.debug("Decided on an action: %r", action)
            allowed = self._settings.filter(action)
            if allowed is None:
                continue
            dispatch(self._timer, allowed)
            dispatched.append(allowed)
        return dispatched


def make_split_system(
    driver: SplitDriver,
    on_action: Callable[[TickContext, Action], None] | None = None,
) -> Callable[[TickContext], None]:
    """Return a system that polls *driver* once per tick."""

    def split_system(ctx: TickContext) -> None:
        for action in driver.poll():
            if on_action is not None:
                on_action(ctx, action)

    return split_system
