"""Main application window for FocusTimer."""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QStackedWidget

from .audio.sounds import SoundManager
from .settings import Settings, load_settings
from .timer.engine import TimerEngine
from .timer.presets import Preset
from .timer.session import SessionSnapshot
from .ui.preset_list import PresetListWidget
from .ui.session_tracker import SessionTracker
from .ui.styles import build_stylesheet
from .ui.timer_view import TimerView

logger = logging.getLogger(__name__)

_PRESET_KEYS = {
    Qt.Key.Key_1.value: 0,
    Qt.Key.Key_2.value: 1,
    Qt.Key.Key_3.value: 2,
}


class FocusTimerApp(QMainWindow):
    """Single window: preset list or active session, tracker underneath."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        sound_manager: SoundManager | None = None,
    ) -> None:
        super().__init__()
        self._settings: Settings = settings or load_settings()
        self.setWindowTitle("FocusTimer")
        self.setMinimumSize(360, 520)
        self.resize(self._settings.window_width, self._settings.window_height)
        self.setStyleSheet(build_stylesheet())
        if self._settings.always_on_top:
            self.setWindowFlags(
                self.windowFlags() | Qt.WindowType.WindowStaysOnTopHint
            )

        # ── engine ────────────────────────────────────────────────────
        self._engine = TimerEngine(
            self, interval_ms=self._settings.tick_interval_ms,
        )
        self._last_snapshot: SessionSnapshot = self._engine.snapshot()

        # ── sound ─────────────────────────────────────────────────────
        self._sound_manager = sound_manager or SoundManager(parent=self)
        self._sound_manager.set_volume(self._settings.sound_volume)
        self._sound_manager.set_enabled(self._settings.sound_enabled)

        # ── central widget ────────────────────────────────────────────
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(0, 30, 0, 0)
        root.setSpacing(0)

        self._stack = QStackedWidget(central)
        root.addWidget(self._stack, 1)

        self._preset_list = PresetListWidget(self._stack)
        self._stack.addWidget(self._preset_list)

        self._timer_view = TimerView(
            self._stack,
            long_press_ms=self._settings.long_press_ms,
            animation_ms=self._settings.progress_animation_ms,
        )
        self._stack.addWidget(self._timer_view)

        self._tracker = SessionTracker(central)
        root.addWidget(self._tracker)

        # ── wire signals ──────────────────────────────────────────────
        self._preset_list.preset_selected.connect(self._on_preset_selected)
        self._timer_view.tapped.connect(self._engine.toggle_pause)
        self._timer_view.long_pressed.connect(self._engine.abort)

        self._engine.state_changed.connect(self._on_state_changed)
        self._engine.break_started.connect(self._on_break_started)
        self._engine.session_finished.connect(self._on_session_finished)

        self._show_snapshot(self._last_snapshot)

    # ══════════════════════════════════════════════════════════════════
    #  ACCESSORS
    # ══════════════════════════════════════════════════════════════════

    @property
    def engine(self) -> TimerEngine:
        return self._engine

    @property
    def preset_list(self) -> PresetListWidget:
        return self._preset_list

    @property
    def timer_view(self) -> TimerView:
        return self._timer_view

    @property
    def tracker(self) -> SessionTracker:
        return self._tracker

    def showing_timer(self) -> bool:
        return self._stack.currentWidget() is self._timer_view

    # ══════════════════════════════════════════════════════════════════
    #  ENGINE SLOTS
    # ══════════════════════════════════════════════════════════════════

    def _on_preset_selected(self, preset: Preset) -> None:
        if self._engine.is_active:
            return
        self._engine.select_preset(preset)
        self._sound_manager.play("focus_start")

    def _on_break_started(self, completed: int) -> None:
        self._sound_manager.play("break_start")

    def _on_session_finished(self, completed: int) -> None:
        self._sound_manager.play("session_complete")

    def _on_state_changed(self, snap: SessionSnapshot) -> None:
        self._show_snapshot(snap)

    def _show_snapshot(self, snap: SessionSnapshot) -> None:
        prev = self._last_snapshot
        self._last_snapshot = snap

        if snap.is_active:
            # Ease only within one running phase; phase changes jump.
            same_phase = (
                prev.is_active
                and prev.preset == snap.preset
                and prev.on_break == snap.on_break
            )
            self._timer_view.show_snapshot(snap, animate=same_phase)
            self._stack.setCurrentWidget(self._timer_view)
        else:
            self._timer_view.progress_bar.set_value(0.0)
            self._stack.setCurrentWidget(self._preset_list)

        self._tracker.set_completed(snap.completed_sessions)

    # ══════════════════════════════════════════════════════════════════
    #  KEYBOARD SHORTCUTS
    # ══════════════════════════════════════════════════════════════════

    def _on_space(self) -> None:
        """Pause or resume (no-op on the preset list)."""
        if self._engine.is_active:
            self._engine.toggle_pause()

    def _on_escape(self) -> None:
        """End the session (no-op on the preset list)."""
        if self._engine.is_active:
            self._engine.abort()

    def keyPressEvent(self, event) -> None:  # type: ignore[override]
        key = event.key()
        if key == Qt.Key.Key_Space and not event.modifiers():
            self._on_space()
            event.accept()
            return
        if key == Qt.Key.Key_Escape:
            self._on_escape()
            event.accept()
            return
        if key in _PRESET_KEYS and not self._engine.is_active:
            self._preset_list.select_index(_PRESET_KEYS[key])
            event.accept()
            return
        super().keyPressEvent(event)

    # ══════════════════════════════════════════════════════════════════
    #  WINDOW EVENTS
    # ══════════════════════════════════════════════════════════════════

    def closeEvent(self, event) -> None:  # type: ignore[override]
        self._engine.shutdown()
        logger.info("Window closed")
        event.accept()
