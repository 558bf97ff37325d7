"""User settings and the action filter they drive."""
from __future__ import annotations

import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping

from tick_split.types import Action, Pause, ResetAndStart, Resume, Split, SplitAt


class SettingsError(ValueError):
    """Raised when a settings mapping has unknown keys or non-boolean values."""


@dataclass(frozen=True)
class SplitSettings:
    """Which optional splits are enabled, and whether loads stop game time.

    Attributes:
        mountain: Split when descending the mountain.
        town: Split when leaving town.
        mob: Split when defeating the special mob in the blue room.
        level_up: Split when the party levels up.
        dungeon: Split when starting the boss fight.
        stop_when_loading: Stop game time during loads.

    The final boss split has no flag; it always fires.
    """

    mountain: bool = False
    town: bool = False
    mob: bool = False
    level_up: bool = False
    dungeon: bool = False
    stop_when_loading: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SplitSettings:
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise SettingsError(f"Unknown settings: {', '.join(unknown)}")
        for key, value in data.items():
            if not isinstance(value, bool):
                raise SettingsError(f"Setting {key!r} must be a boolean, got {value!r}")
        return cls(**data)

    def enabled(self, split: Split) -> bool:
        if split is Split.BOSS:
            return True
        return bool(getattr(self, split.value))

    def filter(self, action: Action) -> Action | None:
        return filter_action(self, action)


def filter_action(settings: SplitSettings, action: Action) -> Action | None:
    """Return *action* if the settings let it through, else None."""
    if isinstance(action, ResetAndStart):
        return action
    if isinstance(action, SplitAt):
        return action if settings.enabled(action.split) else None
    if isinstance(action, (Pause, Resume)):
        return action if settings.stop_when_loading else None
    raise TypeError(f"Not an action: {action!r}")


def load_settings(path: str | Path) -> SplitSettings:
    """Read settings from a TOML file, top level or under a ``[splits]`` table."""
    settings_path = Path(path).expanduser()
    if not settings_path.exists():
        raise FileNotFoundError(f"Settings file not found: {settings_path}")

    with settings_path.open("rb") as fh:
        payload = tomllib.load(fh)

    return SplitSettings.from_dict(payload.get("splits", payload))
