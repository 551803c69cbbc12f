"""Row of dots showing finished work phases (4 slots, extra ones truncated)."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QWidget, QHBoxLayout, QLabel

from ..timer.display import session_slots
from ..timer.presets import MAX_SESSIONS
from .styles import PALETTE


_DOT_STYLE = (
    "background-color: {color}; border-radius: 5px;"
)


class SessionTracker(QWidget):
    DOT_SIZE = 10

    def __init__(
        self,
        parent: QWidget | None = None,
        *,
        slots: int = MAX_SESSIONS,
    ) -> None:
        super().__init__(parent)
        self._completed = 0

        row = QHBoxLayout(self)
        row.setContentsMargins(20, 20, 20, 20)
        row.setSpacing(10)
        row.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._dots: list[QLabel] = []
        for _ in range(slots):
            dot = QLabel(self)
            dot.setFixedSize(self.DOT_SIZE, self.DOT_SIZE)
            self._dots.append(dot)
            row.addWidget(dot)
        self.set_completed(0)

    @property
    def completed(self) -> int:
        return self._completed

    def filled_flags(self) -> list[bool]:
        return session_slots(self._completed, len(self._dots))

    def set_completed(self, completed: int) -> None:
        self._completed = completed
        for dot, filled in zip(self._dots, self.filled_flags()):
            color = PALETTE["accent"] if filled else PALETTE["dot"]
            dot.setStyleSheet(_DOT_STYLE.format(color=color))
