"""Telemetry protocol - best-effort readings of game counters."""
from __future__ import annotations

from typing import Protocol, runtime_checkable

EnemyId = int


@runtime_checkable
class Telemetry(Protocol):
    """Protocol for telemetry sources.

    Every read is synchronous and non-blocking. ``None`` means the value
    could not be read this tick; a failed read and "not available yet" are
    treated the same.
    """

    def is_alive(self) -> bool:
        """Return False once the game session behind this source has ended."""
        ...

    def play_time(self) -> int | None:
        ...

    def is_loading(self) -> bool | None:
        ...

    def party_level(self) -> int | None:
        ...

    def encounter_size(self) -> int | None:
        ...

    def encounter_done(self) -> bool | None:
        ...

    def first_enemy_start_hp(self) -> tuple[EnemyId, int] | None:
        """Identity of the first enemy in the encounter and its starting hp."""
        ...

    def current_hp(self, enemy: EnemyId) -> int | None:
        ...
