from .landing_window import LANDING_SECTIONS, LandingWindow, SectionContent

__all__ = ["LANDING_SECTIONS", "LandingWindow", "SectionContent"]
