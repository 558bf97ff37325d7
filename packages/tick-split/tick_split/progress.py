"""Progress - loading overlay and deferred action on top of SplitProgression."""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

from tick_watch import Watcher

from tick_split.progression import SplitProgression
from tick_split.types import Action, DeferredActionError, Pause, ResetAndStart, Resume

if TYPE_CHECKING:
    from tick_split.telemetry import Telemetry


class Progress:
    """Per-tick entry point of the splitter.

    Level loads are bracketed by ``Pause``/``Resume``. When a load begins on
    the same poll the inner machine decides an action, ``Pause`` goes out
    first and the decided action waits in a single slot until the load ends;
    it is returned by the call right after the matching ``Resume``. The inner
    machine is not polled while an action waits. ``ResetAndStart`` is the
    exception: it follows its ``Pause`` on the very next call.
    """

    def __init__(self, splits: SplitProgression | None = None) -> None:
        self._loading: Watcher[bool] = Watcher()
        self._splits = splits if splits is not None else SplitProgression()
        self._next: Action | None = None

    @property
    def splits(self) -> SplitProgression:
        return self._splits

    @property
    def pending(self) -> Action | None:
        return self._next

    @property
    def loading(self) -> bool:
        return bool(self._loading.value)

    def _defer(self, action: Action | None) -> None:
        if action is None:
            return
        if self._next is not None:
            raise DeferredActionError(
                f"Cannot defer {action!r}, {self._next!r} is still pending"
            )
        self._next = action

    def _releasable(self) -> bool:
        # A run start is not bracketed by the load it began in: the timer has
        # to be running before the load ends.
        return not self.loading or isinstance(self._next, ResetAndStart)

    def act(self, telemetry: Telemetry) -> Action | None:
        if self._next is not None and self._releasable():
            action, self._next = self._next, None
            return action

        change = self._loading.update(telemetry.is_loading())
        if change is not None and change.changed_to(False):
            return Resume()
        if change is not None and change.changed_to(True):
            self._defer(self._splits.act(True, telemetry))
            return Pause()
        if self._next is not None:
            return None
        return self._splits.act(False, telemetry)

    def drain(self, telemetry: Telemetry) -> Iterator[Action]:
        """Yield every action for this tick, stopping at the first ``None``."""
        while True:
            action = self.act(telemetry)
            if action is None:
                return
            yield action

    def reset(self) -> None:
        """Start over from ``NotRunning`` unless already there.

        Repeated resets while idle keep the existing sentinel-seeded watcher.
        """
        if self._splits.is_running:
            self._loading.reset()
            self._splits = SplitProgression()
            self._next = None
