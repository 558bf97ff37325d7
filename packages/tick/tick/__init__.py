"""tick - A minimal fixed-rate polling loop in Python."""

from tick.clock import Clock
from tick.engine import Engine
from tick.types import System, TickContext

__all__ = [
    "Engine",
    "Clock",
    "System",
    "TickContext",
]
