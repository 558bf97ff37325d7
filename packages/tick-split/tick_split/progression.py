"""SplitProgression - the milestone state machine of one run."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from tick_watch import Watcher

from tick_split.types import Action, ResetAndStart, Split, SplitAt

if TYPE_CHECKING:
    from tick_split.telemetry import EnemyId, Telemetry

logger = logging.getLogger(__name__)

# Seeded into the play-time watcher so a reading of exactly 0 registers as a
# change even when the game was already sitting at 0.
PLAY_TIME_SENTINEL = 2**64 - 1

# Per-game signatures, not general rules.
MOB_ENCOUNTER_SIZE = 4
LEVEL_UP_TARGET = 4
BOSS_START_HP = 700

# Level load count -> split. Load 1 leaves the tutorial and is ignored; load 4
# enters the dungeon.
_LOAD_SPLITS = {2: Split.MOUNTAIN, 3: Split.TOWN}
_DUNGEON_LOAD = 4


def _seeded(value: int) -> Watcher[int]:
    watcher: Watcher[int] = Watcher()
    watcher.update_infallible(value)
    return watcher


@dataclass(frozen=True)
class NotRunning:
    play_time: Watcher[int] = field(default_factory=lambda: _seeded(PLAY_TIME_SENTINEL))


@dataclass(frozen=True)
class Started:
    level_loads: int = 0


@dataclass(frozen=True)
class InDungeon:
    pass


@dataclass(frozen=True)
class AgainstMob:
    pass


@dataclass(frozen=True)
class DungeonAgain:
    party_level: Watcher[int] = field(default_factory=Watcher)


@dataclass(frozen=True)
class Leveled:
    pass


@dataclass(frozen=True)
class EncounteredFinalBoss:
    enemy: EnemyId
    hp: Watcher[int] = field(default_factory=lambda: _seeded(BOSS_START_HP))


State = NotRunning | Started | InDungeon | AgainstMob | DungeonAgain | Leveled | EncounteredFinalBoss


class SplitProgression:
    """Walks a run through its milestones, one poll at a time.

    Each call to :meth:`act` evaluates only the exit condition of the current
    state and returns at most one action. A transition replaces the state
    object wholesale. Absent telemetry never moves the machine.
    """

    def __init__(self, state: State | None = None) -> None:
        self._state: State = state if state is not None else NotRunning()

    @property
    def state(self) -> State:
        return self._state

    @property
    def is_running(self) -> bool:
        return not isinstance(self._state, NotRunning)

    def _enter(self, state: State, action: Action | None = None) -> Action | None:
        logger.debug("%s -> %s", type(self._state).__name__, type(state).__name__)
        self._state = state
        return action

    def act(self, loading: bool, telemetry: Telemetry) -> Action | None:
        """Poll the telemetry the current state needs and maybe transition.

        *loading* is True only on the poll where a level load began.
        """
        state = self._state

        if isinstance(state, NotRunning):
            change = state.play_time.update(telemetry.play_time())
            if change is not None and change.changed_to(0):
                return self._enter(Started(), ResetAndStart())

        elif isinstance(state, Started):
            if loading:
                loads = state.level_loads + 1
                if loads == _DUNGEON_LOAD:
                    return self._enter(InDungeon())
                self._state = Started(level_loads=loads)
                split = _LOAD_SPLITS.get(loads)
                if split is not None:
                    return SplitAt(split)

        elif isinstance(state, InDungeon):
            if telemetry.encounter_size() == MOB_ENCOUNTER_SIZE:
                return self._enter(AgainstMob())

        elif isinstance(state, AgainstMob):
            if telemetry.encounter_done():
                return self._enter(DungeonAgain(), SplitAt(Split.MOB))

        elif isinstance(state, DungeonAgain):
            change = state.party_level.update(telemetry.party_level())
            if change is not None and change.changed_to(LEVEL_UP_TARGET):
                return self._enter(Leveled(), SplitAt(Split.LEVEL_UP))

        elif isinstance(state, Leveled):
            reading = telemetry.first_enemy_start_hp()
            if reading is not None:
                enemy, start_hp = reading
                if start_hp == BOSS_START_HP:
                    return self._enter(
                        EncounteredFinalBoss(enemy=enemy), SplitAt(Split.DUNGEON)
                    )

        elif isinstance(state, EncounteredFinalBoss):
            change = state.hp.update(telemetry.current_hp(state.enemy))
            if change is not None and change.changed_to(0):
                logger.info("Final boss defeated, run finished")
                return self._enter(NotRunning(), SplitAt(Split.BOSS))

        return None
