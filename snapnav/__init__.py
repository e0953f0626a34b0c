"""
snapnav - Landing page avec navigation par sections
===================================================

Single-page landing site whose sections are snapped one at a time by the
:class:`~snapnav.controllers.scroll_navigator.ScrollNavigator`.
"""

__version__ = "0.1.0"
