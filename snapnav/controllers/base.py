"""
Lifecycle interfaces for page behaviours.

A behaviour is mounted once by the window that hosts it and disposed once
when that window goes away. Everything here is pure-Python so behaviours
can be exercised in unit tests without importing PySide6.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from loguru import logger

from ..services.host import Subscription


@runtime_checkable
class PageBehaviour(Protocol):
    """Minimal lifecycle surface expected from every page behaviour."""

    def mount(self) -> "PageBehaviour":
        """Register the behaviour's subscriptions on its host."""

    def dispose(self) -> None:
        """Release every subscription and pending timer."""


class LifecycleMixin:
    """Tracks mount/dispose state and the subscriptions to release."""

    def __init__(self) -> None:
        self._subscriptions: list[Subscription] = []
        self._mounted = False
        self._disposed = False

    @property
    def mounted(self) -> bool:
        return self._mounted and not self._disposed

    @property
    def disposed(self) -> bool:
        return self._disposed

    def _own(self, subscription: Subscription) -> Subscription:
        self._subscriptions.append(subscription)
        return subscription

    def _release_subscriptions(self) -> None:
        Subscription.combine(self._subscriptions).dispose()
        self._subscriptions = []

    def dispose(self) -> None:
        if self._disposed:
            logger.debug(f"{type(self).__name__} déjà libéré")
            return
        self._disposed = True
        self._release_subscriptions()
