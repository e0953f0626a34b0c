"""
Panneau de section pleine hauteur
=================================

Widget d'une section de la landing page: en-tête (icône, titre, sous-titre)
et texte de présentation, à la hauteur du viewport.
"""

from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QVBoxLayout, QWidget
from PySide6.QtCore import Qt
from PySide6.QtGui import QFont


class SectionPanel(QFrame):
    """Section de page identifiée par ``section_id``."""

    def __init__(self, section_id: str, title: str, icon: str = "", subtitle: str = "",
                 body: str = "", accent: str = "#4db8ff", parent: QWidget | None = None):
        super().__init__(parent)
        self.section_id = section_id
        self.setObjectName(section_id)
        self.setup_ui(title, icon, subtitle, body, accent)

    def setup_ui(self, title: str, icon: str, subtitle: str, body: str, accent: str):
        """Configure l'interface de la section."""
        self.setFrameStyle(QFrame.Shape.NoFrame)
        self.setStyleSheet(f"""
            SectionPanel {{
                background-color: #1f1f1f;
                border-bottom: 1px solid #333333;
            }}
        """)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(60, 40, 60, 40)
        layout.setSpacing(12)
        layout.addStretch()

        header = QHBoxLayout()
        header.setSpacing(10)
        if icon:
            icon_label = QLabel(icon)
            icon_label.setFont(QFont("Segoe UI Emoji", 22))
            header.addWidget(icon_label)

        self.title_label = QLabel(title)
        self.title_label.setFont(QFont("Arial", 26, QFont.Weight.Bold))
        self.title_label.setStyleSheet(f"color: {accent};")
        header.addWidget(self.title_label)
        header.addStretch()
        layout.addLayout(header)

        if subtitle:
            subtitle_label = QLabel(subtitle)
            subtitle_font = QFont("Arial", 13)
            subtitle_font.setItalic(True)
            subtitle_label.setFont(subtitle_font)
            subtitle_label.setStyleSheet("color: #aaaaaa;")
            layout.addWidget(subtitle_label)

        if body:
            body_label = QLabel(body)
            body_label.setWordWrap(True)
            body_label.setFont(QFont("Arial", 12))
            body_label.setStyleSheet("color: #e0e0e0;")
            body_label.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop)
            layout.addWidget(body_label)

        layout.addStretch()

    def fit_to_viewport(self, height: int):
        """Aligne la hauteur minimale de la section sur celle du viewport."""
        self.setMinimumHeight(max(0, height))
