"""
Fenêtre principale de la landing page
=====================================

Single page made of full-height sections, a dot indicator on the right and
a :class:`ScrollNavigator` snapping between sections.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Sequence

from loguru import logger
from PySide6.QtCore import QEvent, Qt
from PySide6.QtWidgets import QFrame, QHBoxLayout, QMainWindow, QScrollArea, QVBoxLayout, QWidget

from ..config import NavigatorConfig
from ..controllers.scroll_navigator import ScrollNavigator
from ..services.qt_host import QtScrollHost
from ..widgets.section_indicator import SectionIndicator
from ..widgets.section_panel import SectionPanel

__all__ = ["LandingWindow", "SectionContent", "LANDING_SECTIONS", "LANDING_NAVIGATOR_CONFIG"]


@dataclass(frozen=True, slots=True)
class SectionContent:
    section_id: str
    title: str
    icon: str = ""
    subtitle: str = ""
    body: str = ""


LANDING_SECTIONS: tuple[SectionContent, ...] = (
    SectionContent(
        "hero",
        "Sitios web gratis. Potencial ilimitado.",
        "✨",
        body="Ayudamos a marcas y negocios a expresar su máximo potencial con diseño web "
        "gratuito y mantenimiento asequible.",
    ),
    SectionContent(
        "services",
        "Precios simples y transparentes",
        "🧩",
        subtitle="Nuestro enfoque",
        body="Creemos que un gran diseño no debe ser una barrera. Obtén un sitio web "
        "profesional gratis y solo paga por el mantenimiento.",
    ),
    SectionContent("work", "Proyectos seleccionados", "🖼️", subtitle="Portafolio"),
    SectionContent(
        "about",
        "Ayudamos a las marcas a expresar su máximo potencial",
        "🚀",
        subtitle="Nuestra misión",
        body="Creemos que todo negocio merece un gran sitio web.",
    ),
    SectionContent(
        "contact",
        "¿Listo para un sitio web gratis?",
        "✉️",
        subtitle="Comienza ahora",
        body="contacto@presenciadigital.com",
    ),
)

# La page d'accueil enchaîne les sections un peu plus vite que la valeur par défaut
LANDING_NAVIGATOR_CONFIG = NavigatorConfig(normal_cooldown_ms=800)


class LandingWindow(QMainWindow):
    """Landing page window owning its scroll navigator."""

    def __init__(self, sections: Sequence[SectionContent] = LANDING_SECTIONS,
                 config: NavigatorConfig | None = None, parent: QWidget | None = None):
        super().__init__(parent)
        self.setWindowTitle("Presencia Digital")
        self.resize(1100, 720)
        self.panels: Dict[str, SectionPanel] = {}
        self._setup_ui(sections)

        self.host = QtScrollHost(self.scroll_area, self.panels)
        self.navigator = ScrollNavigator(
            [content.section_id for content in sections],
            self.host,
            config or LANDING_NAVIGATOR_CONFIG,
        )
        self._indicator_link = self.navigator.subscribe(self.indicator.set_active)
        self.indicator.section_requested.connect(self._on_section_requested)
        self.navigator.mount()

    def _setup_ui(self, sections: Sequence[SectionContent]) -> None:
        central = QWidget()
        central.setStyleSheet("background-color: #1a1a1a;")
        layout = QHBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        self.scroll_area.setFrameShape(QFrame.Shape.NoFrame)
        self.scroll_area.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.scroll_area.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

        content = QWidget()
        content_layout = QVBoxLayout(content)
        content_layout.setContentsMargins(0, 0, 0, 0)
        content_layout.setSpacing(0)
        for section in sections:
            panel = SectionPanel(section.section_id, section.title, section.icon,
                                 section.subtitle, section.body)
            self.panels[section.section_id] = panel
            content_layout.addWidget(panel)
        self.scroll_area.setWidget(content)
        self.scroll_area.viewport().installEventFilter(self)
        layout.addWidget(self.scroll_area, 1)

        self.indicator = SectionIndicator([section.title for section in sections])
        layout.addWidget(self.indicator)

        self.setCentralWidget(central)

    def eventFilter(self, obj, event):  # noqa: N802
        if obj is self.scroll_area.viewport() and event.type() == QEvent.Type.Resize:
            height = obj.height()
            for panel in self.panels.values():
                panel.fit_to_viewport(height)
        return super().eventFilter(obj, event)

    def _on_section_requested(self, index: int) -> None:
        self.navigator.scroll_to_section(index)
        # Un clic refusé ne doit pas laisser le point coché
        self.indicator.set_active(self.navigator.active_index)
        self.scroll_area.setFocus()

    def closeEvent(self, event):  # noqa: N802
        logger.info("Fermeture de la landing page")
        self._indicator_link.dispose()
        self.navigator.dispose()
        super().closeEvent(event)
