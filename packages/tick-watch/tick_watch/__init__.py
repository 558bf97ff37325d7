"""tick-watch - Edge detection over polled readings for the tick engine."""
from __future__ import annotations

from tick_watch.watcher import Change, Watcher

__all__ = ["Change", "Watcher"]
