"""Active session view.

Layout (top → bottom):
    - Phase label ("Focus Time" / "Break Time!")
    - mm:ss countdown
    - Action hint ("Tap to pause" / "Tap to resume")
    - "Hold to end session"
    - Progress bar along the bottom edge

The whole view is one press target: a short press emits ``tapped``, a
press held for ``long_press_ms`` emits ``long_pressed`` (and the release
that follows is swallowed).
"""

from __future__ import annotations

from PyQt6.QtCore import Qt, QTimer, pyqtSignal
from PyQt6.QtGui import QMouseEvent
from PyQt6.QtWidgets import QWidget, QVBoxLayout, QLabel

from ..timer.display import END_HINT, action_hint, format_time, phase_label
from ..timer.session import SessionSnapshot
from .progress_bar import ProgressBar


class TimerView(QWidget):

    tapped = pyqtSignal()
    long_pressed = pyqtSignal()

    def __init__(
        self,
        parent: QWidget | None = None,
        *,
        long_press_ms: int = 500,
        animation_ms: int = 1000,
    ) -> None:
        super().__init__(parent)

        self._long_press_timer = QTimer(self)
        self._long_press_timer.setSingleShot(True)
        self._long_press_timer.setInterval(long_press_ms)
        self._long_press_timer.timeout.connect(self._on_long_press)

        self._build_ui(animation_ms)

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self, animation_ms: int) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(0)

        body = QVBoxLayout()
        body.setContentsMargins(20, 20, 20, 20)
        body.setSpacing(0)
        body.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._status = QLabel(phase_label(False), self)
        self._status.setObjectName("timerStatus")
        self._status.setAlignment(Qt.AlignmentFlag.AlignCenter)
        body.addWidget(self._status)
        body.addSpacing(10)

        self._time = QLabel(format_time(0), self)
        self._time.setObjectName("timerText")
        self._time.setAlignment(Qt.AlignmentFlag.AlignCenter)
        body.addWidget(self._time)
        body.addSpacing(20)

        self._action = QLabel(action_hint(True), self)
        self._action.setObjectName("timerAction")
        self._action.setAlignment(Qt.AlignmentFlag.AlignCenter)
        body.addWidget(self._action)
        body.addSpacing(5)

        self._hint = QLabel(END_HINT, self)
        self._hint.setObjectName("timerHint")
        self._hint.setAlignment(Qt.AlignmentFlag.AlignCenter)
        body.addWidget(self._hint)

        root.addStretch()
        root.addLayout(body)
        root.addStretch()

        self._progress = ProgressBar(self, duration_ms=animation_ms)
        root.addWidget(self._progress)

    # ── display ───────────────────────────────────────────────────────────

    @property
    def progress_bar(self) -> ProgressBar:
        return self._progress

    def status_text(self) -> str:
        return self._status.text()

    def time_text(self) -> str:
        return self._time.text()

    def action_text(self) -> str:
        return self._action.text()

    def hint_text(self) -> str:
        return self._hint.text()

    def set_long_press_ms(self, ms: int) -> None:
        self._long_press_timer.setInterval(max(1, ms))

    def show_snapshot(self, snap: SessionSnapshot, *, animate: bool = True) -> None:
        """Refresh labels and progress from a session snapshot.

        While paused the bar is pinned to the derived progress rather
        than left to finish its last animation.
        """
        self._status.setText(phase_label(snap.on_break))
        self._time.setText(format_time(snap.remaining_seconds))
        self._action.setText(action_hint(snap.running))

        if animate and snap.running:
            self._progress.animate_to(snap.progress)
        else:
            self._progress.set_value(snap.progress)

    # ── press handling ────────────────────────────────────────────────────

    def mousePressEvent(self, event: QMouseEvent) -> None:  # type: ignore[override]
        if event.button() == Qt.MouseButton.LeftButton:
            self._begin_press()
            event.accept()
            return
        super().mousePressEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:  # type: ignore[override]
        if event.button() == Qt.MouseButton.LeftButton:
            self._end_press()
            event.accept()
            return
        super().mouseReleaseEvent(event)

    def _begin_press(self) -> None:
        self._long_press_timer.start()

    def _end_press(self) -> None:
        if self._long_press_timer.isActive():
            self._long_press_timer.stop()
            self.tapped.emit()

    def _on_long_press(self) -> None:
        self._long_press_timer.stop()
        self.long_pressed.emit()
