"""Timer package."""

from .presets import Preset, PRESETS, MAX_SESSIONS, preset_by_id
from .session import TimerSession, SessionSnapshot, Phase, Transition
from .engine import TimerEngine, TICK_INTERVAL_MS
from .display import format_time, phase_label, action_hint, session_slots

__all__ = [
    "Preset",
    "PRESETS",
    "MAX_SESSIONS",
    "preset_by_id",
    "TimerSession",
    "SessionSnapshot",
    "Phase",
    "Transition",
    "TimerEngine",
    "TICK_INTERVAL_MS",
    "format_time",
    "phase_label",
    "action_hint",
    "session_slots",
]
