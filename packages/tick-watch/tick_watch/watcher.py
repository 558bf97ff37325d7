"""Watcher - remembers the last reading of one attribute."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Change(Generic[T]):
    """One present reading compared against the value stored before it.

    ``old`` is ``None`` when the watcher had never stored a value, so the
    first reading of a target counts as a change to it.
    """

    old: T | None
    new: T

    def changed_to(self, target: T) -> bool:
        return self.new == target and self.old != target


class Watcher(Generic[T]):
    """Tracks one polled attribute across ticks.

    Absent readings (``None``) are ignored entirely: they neither clear the
    stored value nor produce a change, so a watcher resynchronizes silently
    after a telemetry outage.
    """

    def __init__(self) -> None:
        self._value: T | None = None

    @property
    def value(self) -> T | None:
        return self._value

    def update(self, reading: T | None) -> Change[T] | None:
        """Store *reading* and return it paired with the previous value."""
        if reading is None:
            return None
        old = self._value
        self._value = reading
        return Change(old=old, new=reading)

    def update_infallible(self, value: T) -> None:
        """Seed the stored value without reporting a change."""
        self._value = value

    def reset(self) -> None:
        self._value = None
