"""Qt driver for the session state machine.

``TimerEngine`` owns one ``TimerSession`` and a repeating ``QTimer``.
The timer runs only while the session is counting down; every control
re-synchronises it so no tick can fire against a paused, aborted or
finished session.  Call ``shutdown()`` before discarding the engine.
"""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from .presets import Preset
from .session import SessionSnapshot, TimerSession, Transition

logger = logging.getLogger(__name__)

TICK_INTERVAL_MS = 1000


class TimerEngine(QObject):
    """Drives ``TimerSession.tick()`` once per interval.

    Signals
    -------
    tick(remaining_seconds: int)
        Emitted after every countdown step.
    state_changed(snapshot: SessionSnapshot)
        Emitted after every change, ticks included.
    break_started(completed_sessions: int)
        Emitted when a work phase runs out and the break begins.
    session_finished(completed_sessions: int)
        Emitted when the break runs out and the session ends.
    aborted()
        Emitted when an active session is dropped by the user.
    """

    tick = pyqtSignal(int)
    state_changed = pyqtSignal(object)
    break_started = pyqtSignal(int)
    session_finished = pyqtSignal(int)
    aborted = pyqtSignal()

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        interval_ms: int = TICK_INTERVAL_MS,
    ) -> None:
        super().__init__(parent)
        self._session = TimerSession()

        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(interval_ms)
        self._qt_timer.timeout.connect(self._on_tick)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def session(self) -> TimerSession:
        return self._session

    @property
    def preset(self) -> Preset | None:
        return self._session.preset

    @property
    def remaining(self) -> int:
        return self._session.remaining

    @property
    def is_running(self) -> bool:
        return self._session.running

    @property
    def on_break(self) -> bool:
        return self._session.on_break

    @property
    def is_active(self) -> bool:
        return self._session.is_active

    @property
    def completed_sessions(self) -> int:
        return self._session.completed_sessions

    @property
    def progress(self) -> float:
        return self._session.progress

    @property
    def timer_active(self) -> bool:
        """True while the periodic driver is scheduled."""
        return self._qt_timer.isActive()

    @property
    def interval_ms(self) -> int:
        return self._qt_timer.interval()

    def set_interval(self, interval_ms: int) -> None:
        self._qt_timer.setInterval(max(1, interval_ms))

    def snapshot(self) -> SessionSnapshot:
        return self._session.snapshot()

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def select_preset(self, preset: Preset) -> None:
        self._session.select_preset(preset)
        self._sync_timer()
        self._emit_state()

    def toggle_pause(self) -> None:
        """Flip running.  No-op without an active session."""
        if not self._session.is_active:
            return
        self._session.toggle_pause()
        self._sync_timer()
        self._emit_state()

    def abort(self) -> None:
        """End the session early; the completed count is kept."""
        was_active = self._session.is_active
        self._session.abort()
        self._sync_timer()
        if was_active:
            self.aborted.emit()
        self._emit_state()

    def shutdown(self) -> None:
        """Stop the periodic driver for good (window closing)."""
        self._qt_timer.stop()
        logger.debug("Timer engine shut down")

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL: timer mechanics
    # ══════════════════════════════════════════════════════════════════

    def _on_tick(self) -> None:
        transition = self._session.tick()
        if transition is Transition.NONE:
            self._sync_timer()
            return

        self.tick.emit(self._session.remaining)

        if transition is Transition.BREAK_STARTED:
            self.break_started.emit(self._session.completed_sessions)
        elif transition is Transition.SESSION_FINISHED:
            self._sync_timer()
            self.session_finished.emit(self._session.completed_sessions)

        self._emit_state()

    def _sync_timer(self) -> None:
        should_run = self._session.running and self._session.remaining > 0
        if should_run and not self._qt_timer.isActive():
            self._qt_timer.start()
        elif not should_run and self._qt_timer.isActive():
            self._qt_timer.stop()

    def _emit_state(self) -> None:
        self.state_changed.emit(self._session.snapshot())
