"""Split categories, timer actions, and errors."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Split(Enum):
    """Run checkpoints. Values match the settings keys that enable them."""

    MOUNTAIN = "mountain"
    TOWN = "town"
    MOB = "mob"
    LEVEL_UP = "level_up"
    DUNGEON = "dungeon"
    BOSS = "boss"


@dataclass(frozen=True)
class ResetAndStart:
    """Begin a fresh run, resetting the timer first if it had ended."""


@dataclass(frozen=True)
class SplitAt:
    """Advance the timer to its next segment."""

    split: Split


@dataclass(frozen=True)
class Pause:
    """Freeze game time (a level load began)."""


@dataclass(frozen=True)
class Resume:
    """Unfreeze game time (a level load finished)."""


Action = ResetAndStart | SplitAt | Pause | Resume


class DeferredActionError(RuntimeError):
    """Raised when an action is deferred while another is still waiting."""
