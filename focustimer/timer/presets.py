"""Fixed catalog of work/break presets."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Preset:
    """A named work/break duration pair (minutes)."""

    id: str
    name: str
    work_minutes: int
    break_minutes: int
    description: str

    @property
    def work_seconds(self) -> int:
        return self.work_minutes * 60

    @property
    def break_seconds(self) -> int:
        return self.break_minutes * 60


# ── catalog ───────────────────────────────────────────────────────────────

PRESETS: tuple[Preset, ...] = (
    Preset(
        id="1",
        name="Classic Pomodoro",
        work_minutes=25,
        break_minutes=5,
        description="25min work + 5min break. The original productivity method.",
    ),
    Preset(
        id="2",
        name="Short Focus",
        work_minutes=15,
        break_minutes=3,
        description="15min work + 3min break. Perfect for quick tasks.",
    ),
    Preset(
        id="3",
        name="Long Focus",
        work_minutes=45,
        break_minutes=15,
        description="45min work + 15min break. For deep work sessions.",
    ),
)

MAX_SESSIONS = 4  # slots shown in the session tracker

_BY_ID: dict[str, Preset] = {p.id: p for p in PRESETS}


def preset_by_id(preset_id: str) -> Preset:
    """Return the catalog entry for *preset_id* (``KeyError`` if unknown)."""
    return _BY_ID[preset_id]
