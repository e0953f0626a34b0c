# Widgets réutilisables de la landing page
from .section_indicator import IndicatorDot, SectionIndicator
from .section_panel import SectionPanel

__all__ = ["IndicatorDot", "SectionIndicator", "SectionPanel"]
