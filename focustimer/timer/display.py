"""Text and indicator helpers for the session display."""

from __future__ import annotations

from .presets import MAX_SESSIONS, Preset

PHASE_LABELS: dict[bool, str] = {
    False: "Focus Time",
    True:  "Break Time!",
}

ACTION_HINTS: dict[bool, str] = {
    True:  "Tap to pause",
    False: "Tap to resume",
}

END_HINT = "Hold to end session"


def format_time(seconds: int) -> str:
    """``mm:ss`` with minutes allowed past 59 (3600 → ``60:00``)."""
    minutes, secs = divmod(seconds, 60)
    return f"{minutes:02d}:{secs:02d}"


def phase_label(on_break: bool) -> str:
    return PHASE_LABELS[bool(on_break)]


def action_hint(running: bool) -> str:
    return ACTION_HINTS[bool(running)]


def preset_summary(preset: Preset) -> str:
    return f"{preset.work_minutes}min work + {preset.break_minutes}min break"


def session_slots(completed: int, slots: int = MAX_SESSIONS) -> list[bool]:
    """Filled/unfilled flags for a fixed-length row of session dots."""
    return [i < completed for i in range(slots)]
