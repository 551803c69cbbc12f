"""Thin animated progress bar pinned to the bottom of the session view.

The bar never owns progress: it is handed the session's derived value
after each tick and eases toward it.  Only one animation is in flight;
a new target replaces the running one.
"""

from __future__ import annotations

from PyQt6.QtCore import (
    Qt, QRectF, QAbstractAnimation, QVariantAnimation, QEasingCurve,
)
from PyQt6.QtGui import QPainter, QColor
from PyQt6.QtWidgets import QWidget, QSizePolicy

from .styles import PALETTE


class ProgressBar(QWidget):
    """Custom-painted horizontal bar, width proportional to progress."""

    BAR_HEIGHT = 4

    def __init__(
        self,
        parent: QWidget | None = None,
        *,
        duration_ms: int = 1000,
    ) -> None:
        super().__init__(parent)
        self.setFixedHeight(self.BAR_HEIGHT)
        self.setSizePolicy(
            QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed,
        )
        self._target: float = 0.0
        self._display: float = 0.0
        self._color = QColor(PALETTE["accent"])

        self._anim = QVariantAnimation(self)
        self._anim.setDuration(duration_ms)
        self._anim.setEasingCurve(QEasingCurve.Type.Linear)
        self._anim.valueChanged.connect(self._on_anim)

    # ── public API ────────────────────────────────────────────────────

    @property
    def target(self) -> float:
        return self._target

    @property
    def display_value(self) -> float:
        """Fraction currently painted (lags ``target`` while animating)."""
        return self._display

    @property
    def is_animating(self) -> bool:
        return self._anim.state() == QAbstractAnimation.State.Running

    def set_duration(self, duration_ms: int) -> None:
        self._anim.setDuration(max(0, duration_ms))

    def animate_to(self, value: float) -> None:
        """Ease from the painted value toward *value* (0..1)."""
        value = max(0.0, min(1.0, value))
        self._target = value
        self._anim.stop()
        if self._anim.duration() <= 0:
            self._set_display(value)
            return
        self._anim.setStartValue(self._display)
        self._anim.setEndValue(value)
        self._anim.start()

    def set_value(self, value: float) -> None:
        """Jump straight to *value*, cancelling any running animation."""
        self._anim.stop()
        self._target = max(0.0, min(1.0, value))
        self._set_display(self._target)

    # ── internal ──────────────────────────────────────────────────────

    def _on_anim(self, value: float) -> None:
        self._set_display(float(value))

    def _set_display(self, value: float) -> None:
        self._display = value
        self.update()

    def paintEvent(self, event) -> None:  # type: ignore[override]
        p = QPainter(self)
        p.setRenderHint(QPainter.RenderHint.Antialiasing)
        p.setPen(Qt.PenStyle.NoPen)
        p.setBrush(self._color)
        p.drawRect(QRectF(0, 0, self.width() * self._display, self.height()))
        p.end()
