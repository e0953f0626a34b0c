"""
Host services used by the scroll navigator.

Only the pure-Python parts are exported here; the PySide6 host lives in
``snapnav.services.qt_host`` so importing this package never pulls in Qt.
"""

from .gestures import Direction, KeyCategory, SwipeTracker, key_category, wheel_direction
from .host import InputHandlers, ScheduledTask, ScrollHost, Subscription, VisibilityEntry, VisibilityOptions
from .visibility import SectionGeometry, VisibilityTracker, visible_ratio

__all__ = [
    "Direction",
    "InputHandlers",
    "KeyCategory",
    "ScheduledTask",
    "ScrollHost",
    "SectionGeometry",
    "Subscription",
    "SwipeTracker",
    "VisibilityEntry",
    "VisibilityOptions",
    "VisibilityTracker",
    "key_category",
    "visible_ratio",
    "wheel_direction",
]
