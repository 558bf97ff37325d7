"""Shared fixtures for tick-split tests."""
from __future__ import annotations

from typing import Any

import pytest


class FakeTelemetry:
    """Telemetry whose readings are set directly by the test.

    ``show(**readings)`` replaces the whole frame; anything not passed reads
    as absent.
    """

    def __init__(self, **readings: Any) -> None:
        self.readings: dict[str, Any] = dict(readings)
        self.alive = True

    def show(self, **readings: Any) -> FakeTelemetry:
        self.readings = dict(readings)
        return self

    def is_alive(self) -> bool:
        return self.alive

    def play_time(self):
        return self.readings.get("play_time")

    def is_loading(self):
        return self.readings.get("is_loading")

    def party_level(self):
        return self.readings.get("party_level")

    def encounter_size(self):
        return self.readings.get("encounter_size")

    def encounter_done(self):
        return self.readings.get("encounter_done")

    def first_enemy_start_hp(self):
        return self.readings.get("first_enemy")

    def current_hp(self, enemy):
        return self.readings.get("enemy_hp", {}).get(enemy)


@pytest.fixture
def telemetry() -> FakeTelemetry:
    return FakeTelemetry()


BOSS_ID = 48879

# One frame per tick for a complete run, as a recorded trace would hold it.
FULL_RUN = [
    {"play_time": 3.5, "is_loading": False},
    {"play_time": 0.4, "is_loading": False},
    {"is_loading": True},
    {"is_loading": False},
    {"is_loading": True},
    {"is_loading": False},
    {"is_loading": True},
    {"is_loading": False},
    {"is_loading": True},
    {"is_loading": False},
    {"is_loading": False, "encounter_size": 4},
    {"is_loading": False, "encounter_done": True},
    {"is_loading": False, "party_level": 4},
    {"is_loading": False, "first_enemy": [BOSS_ID, 700]},
    {"is_loading": False, "enemy_hp": {str(BOSS_ID): 700}},
    {"is_loading": False, "enemy_hp": {str(BOSS_ID): 0}},
]


@pytest.fixture
def full_run() -> list[dict[str, Any]]:
    return [dict(frame) for frame in FULL_RUN]
