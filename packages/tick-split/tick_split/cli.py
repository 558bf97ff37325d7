"""Command line entry point: replay recorded telemetry through the splitter."""
from __future__ import annotations

import argparse
import logging
import sys

from tick import Engine, TickContext

from tick_split.config import DriverConfig
from tick_split.driver import SplitDriver, make_split_system
from tick_split.settings import SplitSettings, load_settings
from tick_split.timer import MemoryTimer
from tick_split.trace import load_trace, make_trace_system
from tick_split.types import Action, SplitAt


def _describe(action: Action) -> str:
    if isinstance(action, SplitAt):
        return f"split:{action.split.value}"
    return type(action).__name__


def cmd_replay(args: argparse.Namespace) -> int:
    config = DriverConfig(tps=args.tps, segments=args.segments)
    settings = load_settings(args.settings) if args.settings else SplitSettings()
    trace = load_trace(args.trace)
    timer = MemoryTimer(segments=config.segments)

    engine = Engine(tps=config.tps)
    driver = SplitDriver(attach=lambda: trace if trace.is_alive() else None,
                         timer=timer, settings=settings)

    def print_action(ctx: TickContext, action: Action) -> None:
        print(f"{ctx.tick_number}\t{_describe(action)}")

    engine.add_system(make_trace_system(trace))
    engine.add_system(make_split_system(driver, on_action=print_action))
    engine.run(len(trace) + 1)

    logging.getLogger(__name__).info(
        "Replayed %d frames, timer %s after %d splits",
        len(trace), timer.state.value, timer.splits,
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tick-split", description="Autosplitter tools")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="-v for INFO, -vv for DEBUG logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_replay = sub.add_parser("replay", help="Replay a JSON Lines telemetry trace")
    p_replay.add_argument("trace", help="Trace file, one JSON object per tick")
    p_replay.add_argument("--settings", default="", help="TOML settings file")
    p_replay.add_argument("--tps", type=int, default=DriverConfig.tps)
    p_replay.add_argument("--segments", type=int, default=None,
                          help="End the run after this many splits")
    p_replay.set_defaults(func=cmd_replay)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    logging.basicConfig(level=level, stream=sys.stderr,
                        format="%(levelname)s %(name)s: %(message)s")
    return int(args.func(args))

