"""Countdown state machine for one focus session.

A session is one preset run: a work phase followed by a single break
phase.  The machine has no notion of wall-clock time; whoever owns it
calls ``tick()`` once per elapsed second (see ``engine.TimerEngine``).

States
------
IDLE      No preset selected.
WORK      Work phase counting down (running) or paused.
BREAK     Break phase counting down (running) or paused.

Transitions
-----------
IDLE → WORK                  (select_preset)
WORK ⇄ paused WORK           (toggle_pause)
BREAK ⇄ paused BREAK         (toggle_pause)
WORK → BREAK                 (remaining reaches 0, completed += 1)
BREAK → IDLE                 (remaining reaches 0)
Any → IDLE                   (abort, completed count kept)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from .presets import Preset

logger = logging.getLogger(__name__)


class Phase(Enum):
    WORK = "work"
    BREAK = "break"


class Transition(Enum):
    """What a single ``tick()`` did to the session."""

    NONE = "none"
    TICKED = "ticked"
    BREAK_STARTED = "break_started"
    SESSION_FINISHED = "session_finished"


@dataclass(frozen=True)
class SessionSnapshot:
    """Immutable copy of the session state handed to the UI."""

    preset: Preset | None
    remaining_seconds: int
    running: bool
    on_break: bool
    completed_sessions: int
    phase_duration_seconds: int
    progress: float

    @property
    def is_active(self) -> bool:
        return self.preset is not None

    @property
    def phase(self) -> Phase:
        return Phase.BREAK if self.on_break else Phase.WORK


class TimerSession:
    """Work/break countdown with a derived progress value."""

    def __init__(self) -> None:
        self._preset: Preset | None = None
        self._remaining: int = 0
        self._running: bool = False
        self._on_break: bool = False
        self._completed: int = 0

    # ── read-only state ───────────────────────────────────────────────

    @property
    def preset(self) -> Preset | None:
        return self._preset

    @property
    def remaining(self) -> int:
        """Seconds left in the current phase."""
        return self._remaining

    @property
    def running(self) -> bool:
        return self._running

    @property
    def on_break(self) -> bool:
        return self._on_break

    @property
    def completed_sessions(self) -> int:
        """Finished work phases since launch.  Never reset by ``abort``."""
        return self._completed

    @property
    def is_active(self) -> bool:
        return self._preset is not None

    @property
    def phase(self) -> Phase:
        return Phase.BREAK if self._on_break else Phase.WORK

    @property
    def phase_duration_seconds(self) -> int:
        if self._preset is None:
            return 0
        if self._on_break:
            return self._preset.break_seconds
        return self._preset.work_seconds

    @property
    def progress(self) -> float:
        """0.0 → 1.0 elapsed fraction of the current phase."""
        duration = self.phase_duration_seconds
        if duration <= 0:
            return 0.0
        return max(0.0, min(1.0, 1 - self._remaining / duration))

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            preset=self._preset,
            remaining_seconds=self._remaining,
            running=self._running,
            on_break=self._on_break,
            completed_sessions=self._completed,
            phase_duration_seconds=self.phase_duration_seconds,
            progress=self.progress,
        )

    # ── controls ──────────────────────────────────────────────────────

    def select_preset(self, preset: Preset) -> None:
        """Start the work phase of *preset* immediately."""
        self._preset = preset
        self._remaining = preset.work_seconds
        self._running = True
        self._on_break = False
        logger.info(
            "Session started: preset=%s work=%sm break=%sm",
            preset.name, preset.work_minutes, preset.break_minutes,
        )

    def toggle_pause(self) -> None:
        if self._preset is None:
            return
        self._running = not self._running
        logger.debug(
            "Session %s at %ss", "resumed" if self._running else "paused",
            self._remaining,
        )

    def abort(self) -> None:
        """Drop the current session.  The completed count is kept."""
        if self._preset is not None:
            logger.info(
                "Session aborted: preset=%s remaining=%ss",
                self._preset.name, self._remaining,
            )
        self._running = False
        self._preset = None
        self._remaining = 0
        self._on_break = False

    def tick(self) -> Transition:
        """Advance the countdown by one second."""
        if self._preset is None or not self._running:
            return Transition.NONE
        if self._remaining > 0:
            self._remaining -= 1
        if self._remaining == 0:
            return self.on_phase_expired()
        return Transition.TICKED

    def on_phase_expired(self) -> Transition:
        """Move on from a phase whose countdown reached zero."""
        if self._preset is None or not self._running or self._remaining > 0:
            return Transition.NONE

        if not self._on_break:
            self._completed += 1
            self._on_break = True
            self._remaining = self._preset.break_seconds
            logger.info(
                "Work phase done: preset=%s completed=%s",
                self._preset.name, self._completed,
            )
            return Transition.BREAK_STARTED

        logger.info(
            "Session finished: preset=%s completed=%s",
            self._preset.name, self._completed,
        )
        self._running = False
        self._on_break = False
        self._preset = None
        return Transition.SESSION_FINISHED
