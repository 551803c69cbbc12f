"""Preset selection view: one clickable card per catalog entry."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QMouseEvent
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QLabel, QFrame, QScrollArea,
)

from ..timer.display import preset_summary
from ..timer.presets import PRESETS, Preset


HEADER_TEXT = "Choose Your Focus Time"


class PresetCard(QFrame):
    """Card showing a preset's name, durations and description."""

    clicked = pyqtSignal(object)

    def __init__(self, preset: Preset, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._preset = preset
        self.setObjectName("presetCard")
        self.setCursor(Qt.CursorShape.PointingHandCursor)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(8)

        self._title = QLabel(preset.name, self)
        self._title.setObjectName("presetTitle")
        layout.addWidget(self._title)

        self._time = QLabel(preset_summary(preset), self)
        self._time.setObjectName("presetTime")
        layout.addWidget(self._time)

        self._description = QLabel(preset.description, self)
        self._description.setObjectName("presetDescription")
        self._description.setWordWrap(True)
        layout.addWidget(self._description)

    @property
    def preset(self) -> Preset:
        return self._preset

    def mousePressEvent(self, event: QMouseEvent) -> None:  # type: ignore[override]
        # Accept so the release is delivered here, not to the list.
        if event.button() == Qt.MouseButton.LeftButton:
            event.accept()
            return
        super().mousePressEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:  # type: ignore[override]
        if (
            event.button() == Qt.MouseButton.LeftButton
            and self.rect().contains(event.position().toPoint())
        ):
            self.clicked.emit(self._preset)
            event.accept()
            return
        super().mouseReleaseEvent(event)


class PresetListWidget(QScrollArea):
    """Scrollable list of preset cards.  Emits ``preset_selected``."""

    preset_selected = pyqtSignal(object)

    def __init__(
        self,
        parent: QWidget | None = None,
        *,
        presets: tuple[Preset, ...] = PRESETS,
    ) -> None:
        super().__init__(parent)
        self.setWidgetResizable(True)
        self.setFrameShape(QFrame.Shape.NoFrame)

        content = QWidget(self)
        layout = QVBoxLayout(content)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(15)

        header = QLabel(HEADER_TEXT, content)
        header.setObjectName("header")
        header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(header)
        layout.addSpacing(5)

        self._cards: list[PresetCard] = []
        for preset in presets:
            card = PresetCard(preset, content)
            card.clicked.connect(self.preset_selected.emit)
            self._cards.append(card)
            layout.addWidget(card)

        layout.addStretch()
        self.setWidget(content)

    @property
    def cards(self) -> list[PresetCard]:
        return list(self._cards)

    def select_index(self, index: int) -> None:
        """Keyboard shortcut path: select the *index*-th card if present."""
        if 0 <= index < len(self._cards):
            self.preset_selected.emit(self._cards[index].preset)
