"""
Page behaviours for the landing page.

Behaviours are pure-Python and reach the page only through a host
runtime, so they can be exercised without a running GUI.
"""

from .base import LifecycleMixin, PageBehaviour
from .scroll_navigator import NavigatorState, ScrollNavigator

__all__ = ["LifecycleMixin", "NavigatorState", "PageBehaviour", "ScrollNavigator"]
