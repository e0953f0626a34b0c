"""Exceptions raised while setting up navigation."""

from __future__ import annotations


class NavigatorConfigError(ValueError):
    """Raised when a navigator is built from an unusable section list."""
