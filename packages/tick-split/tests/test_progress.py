"""Tests for Progress: loading overlay, deferred action, reset."""
from __future__ import annotations

import pytest

from tick_split import (
    AgainstMob,
    DeferredActionError,
    DungeonAgain,
    EncounteredFinalBoss,
    InDungeon,
    NotRunning,
    Pause,
    Progress,
    ResetAndStart,
    Resume,
    Split,
    SplitAt,
    SplitProgression,
    Started,
)
from tick_split.progression import PLAY_TIME_SENTINEL

BOSS_ID = 0xBEEF


def _tick(progress, telemetry, **readings):
    """Show one frame and drain every action for it."""
    return list(progress.drain(telemetry.show(**readings)))


def _started(telemetry) -> Progress:
    progress = Progress(SplitProgression(Started()))
    # First loading reading is a change to False.
    assert _tick(progress, telemetry, is_loading=False) == [Resume()]
    return progress


class TestLoadingOverlay:

    def test_first_not_loading_reading_resumes(self, telemetry):
        progress = Progress()
        assert progress.act(telemetry.show(is_loading=False)) == Resume()
        assert progress.act(telemetry) is None

    def test_absent_loading_flag_polls_inner_machine(self, telemetry):
        progress = Progress()
        assert progress.act(telemetry.show(play_time=0)) == ResetAndStart()

    def test_loading_edges_from_started(self, telemetry):
        """Four loads: nothing, Mountain, Town, then into the dungeon.

        Each split decided when a load begins comes out after its Resume.
        """
        progress = _started(telemetry)
        per_edge = []
        for _ in range(4):
            actions = _tick(progress, telemetry, is_loading=True)
            actions += _tick(progress, telemetry, is_loading=True)
            actions += _tick(progress, telemetry, is_loading=False)
            per_edge.append(actions)

        assert per_edge == [
            [Pause(), Resume()],
            [Pause(), Resume(), SplitAt(Split.MOUNTAIN)],
            [Pause(), Resume(), SplitAt(Split.TOWN)],
            [Pause(), Resume()],
        ]
        assert isinstance(progress.splits.state, InDungeon)

    def test_deferred_split_waits_for_resume(self, telemetry):
        """Pause, then Resume on unload, then the deferred split."""
        progress = _started(telemetry)
        _tick(progress, telemetry, is_loading=True)
        _tick(progress, telemetry, is_loading=False)

        assert progress.act(telemetry.show(is_loading=True)) == Pause()
        assert progress.pending == SplitAt(Split.MOUNTAIN)
        # Still loading: nothing surfaces, even across several polls.
        assert progress.act(telemetry) is None
        assert progress.act(telemetry.show()) is None
        assert progress.pending == SplitAt(Split.MOUNTAIN)

        assert progress.act(telemetry.show(is_loading=False)) == Resume()
        assert progress.act(telemetry) == SplitAt(Split.MOUNTAIN)
        assert progress.pending is None
        assert progress.act(telemetry) is None

    def test_missing_loading_reads_do_not_resume(self, telemetry):
        progress = _started(telemetry)
        assert _tick(progress, telemetry, is_loading=True) == [Pause()]
        assert _tick(progress, telemetry) == []
        assert _tick(progress, telemetry, is_loading=True) == []
        assert _tick(progress, telemetry, is_loading=False) == [Resume()]

    def test_second_deferral_is_an_error(self, telemetry):
        """The slot refuses a second action while one is pending.

        ``act`` never gets here: a new load edge needs a ``False`` reading
        first, and that reading releases the slot. So the slot is filled by
        hand.
        """
        progress = _started(telemetry)
        progress._next = SplitAt(Split.TOWN)
        with pytest.raises(DeferredActionError):
            progress._defer(SplitAt(Split.MOUNTAIN))


class TestActionOnLoadEdge:
    """The inner machine decides something on the poll a load begins."""

    def test_run_start_follows_its_pause(self, telemetry):
        """The timer has to be running before the load ends."""
        progress = Progress()
        assert _tick(progress, telemetry, is_loading=False, play_time=5) == [Resume()]

        assert _tick(progress, telemetry, is_loading=True, play_time=0) == [
            Pause(),
            ResetAndStart(),
        ]
        assert progress.pending is None
        # The load the run starts in is not a level load.
        assert progress.splits.state == Started(level_loads=0)

        assert _tick(progress, telemetry, is_loading=True, play_time=0) == []
        assert _tick(progress, telemetry, is_loading=False, play_time=1) == [Resume()]
        assert progress.splits.state == Started(level_loads=0)

    def test_mob_defeated_as_load_begins(self, telemetry):
        progress = Progress(SplitProgression(AgainstMob()))
        assert _tick(progress, telemetry, is_loading=False) == [Resume()]

        assert _tick(progress, telemetry, is_loading=True, encounter_done=True) == [Pause()]
        assert progress.pending == SplitAt(Split.MOB)
        assert isinstance(progress.splits.state, DungeonAgain)
        assert _tick(progress, telemetry, is_loading=True) == []

        assert _tick(progress, telemetry, is_loading=False) == [
            Resume(),
            SplitAt(Split.MOB),
        ]
        assert progress.pending is None

    def test_boss_defeated_as_load_begins(self, telemetry):
        progress = Progress(SplitProgression(EncounteredFinalBoss(enemy=BOSS_ID)))
        assert _tick(progress, telemetry, is_loading=False) == [Resume()]

        assert _tick(
            progress, telemetry, is_loading=True, enemy_hp={BOSS_ID: 0},
        ) == [Pause()]
        assert progress.pending == SplitAt(Split.BOSS)
        assert not progress.splits.is_running

        assert _tick(progress, telemetry, is_loading=False) == [
            Resume(),
            SplitAt(Split.BOSS),
        ]
        assert progress.pending is None

    def test_reset_keeps_boss_split_of_finished_run(self, telemetry):
        """The machine is already back to NotRunning, so reset has nothing to do."""
        progress = Progress(SplitProgression(EncounteredFinalBoss(enemy=BOSS_ID)))
        _tick(progress, telemetry, is_loading=False)
        _tick(progress, telemetry, is_loading=True, enemy_hp={BOSS_ID: 0})

        progress.reset()
        assert progress.pending == SplitAt(Split.BOSS)
        assert _tick(progress, telemetry, is_loading=False) == [
            Resume(),
            SplitAt(Split.BOSS),
        ]


class TestReset:

    def test_reset_restores_not_running(self, telemetry):
        progress = _started(telemetry)
        progress.reset()
        assert isinstance(progress.splits.state, NotRunning)
        assert progress.pending is None
        # Loading watcher forgot its value.
        assert _tick(progress, telemetry, is_loading=False) == [Resume()]

    def test_reset_when_idle_keeps_state(self, telemetry):
        progress = Progress()
        progress.act(telemetry.show(play_time=42))
        state = progress.splits.state
        progress.reset()
        progress.reset()
        assert progress.splits.state is state
        assert state.play_time.value == 42

    def test_reset_seeds_sentinel(self, telemetry):
        progress = _started(telemetry)
        progress.reset()
        assert progress.splits.state.play_time.value == PLAY_TIME_SENTINEL
