"""TraceTelemetry - replays recorded telemetry frames, one per tick."""
from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, Mapping, Sequence

from tick_split.telemetry import EnemyId

if TYPE_CHECKING:
    from tick import TickContext

Frame = Mapping[str, Any]


class TraceError(ValueError):
    """Raised when a trace file holds something other than JSON objects."""


class TraceTelemetry:
    """Telemetry source backed by a list of recorded frames.

    Conforms to the Telemetry protocol. A frame is a mapping from reading
    name to value; a missing key (or an explicit null) is an absent reading.
    Recognized keys:

    - ``play_time``: seconds played. Fractional values are truncated.
    - ``is_loading``, ``encounter_done``: booleans.
    - ``party_level``, ``encounter_size``: integers.
    - ``first_enemy``: ``[enemy_id, start_hp]``.
    - ``enemy_hp``: ``{"<enemy_id>": current_hp, ...}``.

    The source is alive while :meth:`advance` has a frame to show.
    """

    def __init__(self, frames: Sequence[Frame]) -> None:
        self._frames = list(frames)
        self._index = -1

    def __len__(self) -> int:
        return len(self._frames)

    @property
    def index(self) -> int:
        return self._index

    def advance(self) -> bool:
        """Move to the next frame. Returns False once the trace is exhausted."""
        if self._index < len(self._frames):
            self._index += 1
        return self.is_alive()

    def is_alive(self) -> bool:
        return 0 <= self._index < len(self._frames)

    def _read(self, key: str) -> Any:
        if not self.is_alive():
            return None
        return self._frames[self._index].get(key)

    def play_time(self) -> int | None:
        value = self._read("play_time")
        return None if value is None else int(value)

    def is_loading(self) -> bool | None:
        return self._read("is_loading")

    def party_level(self) -> int | None:
        return self._read("party_level")

    def encounter_size(self) -> int | None:
        return self._read("encounter_size")

    def encounter_done(self) -> bool | None:
        return self._read("encounter_done")

    def first_enemy_start_hp(self) -> tuple[EnemyId, int] | None:
        value = self._read("first_enemy")
        if value is None:
            return None
        enemy, start_hp = value
        return int(enemy), start_hp

    def current_hp(self, enemy: EnemyId) -> int | None:
        table = self._read("enemy_hp")
        if table is None:
            return None
        return table.get(str(enemy))


def load_trace(path: str | Path) -> TraceTelemetry:
    """Load a JSON Lines trace. Blank lines are skipped."""
    trace_path = Path(path).expanduser()
    frames: list[Frame] = []
    with trace_path.open(encoding="utf-8") as fh:
        for lineno, line in enumerate(fh, start=1):
            line = line.strip()
            if not line:
                continue
            try:
                frame = json.loads(line)
            except json.JSONDecodeError as exc:
                raise TraceError(f"{trace_path}:{lineno}: invalid JSON: {exc.msg}") from exc
            if not isinstance(frame, dict):
                raise TraceError(f"{trace_path}:{lineno}: expected an object, got {frame!r}")
            frames.append(frame)
    return TraceTelemetry(frames)


def make_trace_system(trace: TraceTelemetry) -> Callable[[TickContext], None]:
    """Return a system that shows the next frame each tick, stopping at the end."""

    def trace_system(ctx: TickContext) -> None:
        if not trace.advance():
            ctx.request_stop()

    return trace_system
