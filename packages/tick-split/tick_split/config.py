"""Driver configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DriverConfig:
    """Immutable configuration for the polling driver.

    Attributes:
        tps: Polls per second.
        segments: Number of timer segments; the in-memory timer ends the run
            after this many splits. None means the run only ends by reset.
    """

    tps: int = 60
    segments: int | None = None
