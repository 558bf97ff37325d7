"""Full run -- replay a recorded play-through at the live polling rate.

Demonstrates:
- Loading settings from TOML and a telemetry trace from JSON Lines
- Attaching a SplitDriver to the trace as if it were a running game
- Pacing the loop with run_forever() at the splitter's 60 Hz
- The timer sink receiving Pause/Resume around loads and every split

Run: python examples/full-run/main.py
Or:  python -m tick_split -v replay examples/full-run/run.jsonl \
         --settings examples/full-run/settings.toml
"""
from __future__ import annotations

import logging
from pathlib import Path

from tick import Engine, TickContext
from tick_split import (
    Action,
    DriverConfig,
    MemoryTimer,
    SplitDriver,
    load_settings,
    load_trace,
    make_split_system,
    make_trace_system,
)

HERE = Path(__file__).resolve().parent


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    config = DriverConfig(segments=6)
    settings = load_settings(HERE / "settings.toml")
    trace = load_trace(HERE / "run.jsonl")
    timer = MemoryTimer(segments=config.segments)

    driver = SplitDriver(
        attach=lambda: trace if trace.is_alive() else None,
        timer=timer,
        settings=settings,
    )

    def show(ctx: TickContext, action: Action) -> None:
        print(f"  t={ctx.elapsed:6.3f}s  {action}")

    engine = Engine(tps=config.tps)
    engine.add_system(make_trace_system(trace))
    engine.add_system(make_split_system(driver, on_action=show))
    engine.run_forever()

    print(f"\nTimer {timer.state.value} after {timer.splits} splits.")


if __name__ == "__main__":
    main()
