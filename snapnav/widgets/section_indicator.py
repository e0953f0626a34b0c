"""Vertical dot indicator highlighting the active section."""

from __future__ import annotations

from typing import List, Sequence

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QButtonGroup, QPushButton, QVBoxLayout, QWidget

__all__ = ["SectionIndicator", "IndicatorDot"]


class IndicatorDot(QPushButton):
    """Checkable round button standing for one section."""

    def __init__(self, label: str, parent: QWidget | None = None):
        super().__init__(parent)
        self.setCheckable(True)
        self.setToolTip(label)
        self.setFixedSize(14, 14)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setStyleSheet(
            """
            QPushButton {
                border: 2px solid #4db8ff;
                border-radius: 7px;
                background-color: transparent;
            }
            QPushButton:hover {
                background-color: #3a3a3a;
            }
            QPushButton:checked {
                background-color: #4db8ff;
            }
            """
        )


class SectionIndicator(QWidget):
    """Broadcasts section requests and mirrors the navigator's active section."""

    section_requested = Signal(int)

    def __init__(self, labels: Sequence[str], parent: QWidget | None = None):
        super().__init__(parent)
        self.dots: List[IndicatorDot] = []
        self._group = QButtonGroup(self)
        self._group.setExclusive(True)
        self._setup_ui(labels)

    def _setup_ui(self, labels: Sequence[str]) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(10, 10, 10, 10)
        layout.setSpacing(14)
        layout.addStretch()
        for index, label in enumerate(labels):
            dot = IndicatorDot(label, self)
            self._group.addButton(dot, index)
            self.dots.append(dot)
            layout.addWidget(dot, alignment=Qt.AlignmentFlag.AlignHCenter)
        layout.addStretch()
        self._group.idClicked.connect(self.section_requested.emit)
        self.set_active(0)

    def active_index(self) -> int:
        return self._group.checkedId()

    def set_active(self, index: int) -> None:
        if 0 <= index < len(self.dots):
            self.dots[index].setChecked(True)
