"""
Host runtime contract used by the scroll navigator.

The navigator never touches widgets directly: the page it runs on supplies
viewport queries, smooth scrolling, timers and event subscriptions through
this interface. Keeping the contract pure-Python lets the navigator be
exercised in unit tests without importing PySide6.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Protocol, Sequence, runtime_checkable

from loguru import logger

from ..config import DeviceProfile


class Subscription:
    """Handle returned by every registration; ``dispose()`` runs once."""

    __slots__ = ("_dispose",)

    def __init__(self, dispose: Callable[[], None] | None = None) -> None:
        self._dispose = dispose

    @property
    def active(self) -> bool:
        return self._dispose is not None

    def dispose(self) -> None:
        dispose, self._dispose = self._dispose, None
        if dispose is not None:
            dispose()

    @classmethod
    def combine(cls, subscriptions: Iterable["Subscription"]) -> "Subscription":
        """Merge several subscriptions into one disposer (released in reverse order)."""
        pending = list(subscriptions)

        def _dispose_all() -> None:
            while pending:
                subscription = pending.pop()
                try:
                    subscription.dispose()
                except Exception:
                    logger.exception("Échec de la libération d'un abonnement")

        return cls(_dispose_all)


@runtime_checkable
class ScheduledTask(Protocol):
    """Timer callback that can be cancelled before it fires."""

    def cancel(self) -> None:
        """Prevent the callback from running."""


@dataclass(frozen=True, slots=True)
class VisibilityEntry:
    """One section crossing its visibility threshold."""

    section_id: str
    ratio: float
    is_intersecting: bool


@dataclass(frozen=True, slots=True)
class VisibilityOptions:
    """Threshold and viewport inset (fraction of the viewport height)."""

    threshold: float
    inset: float = 0.0

    @classmethod
    def from_profile(cls, profile: DeviceProfile) -> "VisibilityOptions":
        return cls(threshold=profile.visibility_threshold, inset=profile.viewport_inset)


@dataclass(slots=True)
class InputHandlers:
    """
    Callbacks the host invokes for raw user input.

    ``on_wheel`` and ``on_key`` return True when the host should consume
    the event instead of letting the page scroll natively.
    """

    on_wheel: Callable[[float], bool]
    on_key: Callable[[str], bool]
    on_touch_start: Callable[[float], None]
    on_touch_end: Callable[[float], bool]


@runtime_checkable
class ScrollHost(Protocol):
    """Services the page exposes to the navigator."""

    def viewport_width(self) -> int:
        """Current viewport width in pixels."""

    def scroll_into_view(self, section_id: str) -> None:
        """Smoothly align the section's top with the viewport's top."""

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> ScheduledTask:
        """Run ``callback`` once after ``delay_ms`` milliseconds."""

    def observe_visibility(
        self,
        section_ids: Sequence[str],
        options: VisibilityOptions,
        callback: Callable[[list[VisibilityEntry]], None],
    ) -> Subscription:
        """Report batches of threshold crossings for the given sections."""

    def subscribe_input(self, handlers: InputHandlers) -> Subscription:
        """Route wheel, keyboard and touch input to ``handlers``."""

    def subscribe_resize(self, callback: Callable[[int], None]) -> Subscription:
        """Report the new viewport width after each resize."""
