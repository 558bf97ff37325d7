"""tick-split - Autosplitter progress tracking for the tick engine."""
from __future__ import annotations

from tick_split.config import DriverConfig
from tick_split.driver import SplitDriver, make_split_system
from tick_split.progress import Progress
from tick_split.progression import (
    AgainstMob,
    DungeonAgain,
    EncounteredFinalBoss,
    InDungeon,
    Leveled,
    NotRunning,
    SplitProgression,
    Started,
)
from tick_split.settings import SettingsError, SplitSettings, filter_action, load_settings
from tick_split.telemetry import EnemyId, Telemetry
from tick_split.timer import MemoryTimer, TimerSink, TimerState, dispatch
from tick_split.trace import TraceError, TraceTelemetry, load_trace, make_trace_system
from tick_split.types import (
    Action,
    DeferredActionError,
    Pause,
    ResetAndStart,
    Resume,
    Split,
    SplitAt,
)

__all__ = [
    "Action",
    "AgainstMob",
    "DeferredActionError",
    "DriverConfig",
    "DungeonAgain",
    "EncounteredFinalBoss",
    "EnemyId",
    "InDungeon",
    "Leveled",
    "MemoryTimer",
    "NotRunning",
    "Pause",
    "Progress",
    "ResetAndStart",
    "Resume",
    "SettingsError",
    "Split",
    "SplitAt",
    "SplitDriver",
    "SplitProgression",
    "SplitSettings",
    "Started",
    "Telemetry",
    "TimerSink",
    "TimerState",
    "TraceError",
    "TraceTelemetry",
    "dispatch",
    "filter_action",
    "load_settings",
    "load_trace",
    "make_split_system",
    "make_trace_system",
]
