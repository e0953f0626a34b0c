"""
Scroll navigator
================

Tracks which section of the landing page is in view and snaps between
sections one at a time. Wheel, keyboard and touch input, as well as direct
requests from the section indicator, all go through a single gate: at most
one navigation is in flight, and a new one is accepted only once the
cooldown of the previous one has elapsed.
"""

from __future__ import annotations

import time
from enum import Enum
from typing import Callable, Iterable, Sequence

from loguru import logger

from ..config import DEFAULT_NAVIGATOR_CONFIG, DeviceClass, DeviceProfile, NavigatorConfig
from ..errors import NavigatorConfigError
from ..services.gestures import (
    Direction,
    KeyCategory,
    SwipeTracker,
    key_category,
    key_direction,
    wheel_direction,
)
from ..services.host import (
    InputHandlers,
    ScheduledTask,
    ScrollHost,
    Subscription,
    VisibilityEntry,
    VisibilityOptions,
)
from .base import LifecycleMixin

__all__ = ["NavigatorState", "ScrollNavigator"]


class NavigatorState(str, Enum):
    idle = "idle"
    navigating = "navigating"


class ScrollNavigator(LifecycleMixin):
    """Section-to-section snapping over a :class:`ScrollHost`."""

    def __init__(
        self,
        section_ids: Sequence[str],
        host: ScrollHost,
        config: NavigatorConfig | None = None,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        super().__init__()
        section_ids = tuple(section_ids)
        duplicates = sorted({sid for sid in section_ids if section_ids.count(sid) > 1})
        if duplicates:
            raise NavigatorConfigError(f"Identifiants de section dupliqués: {', '.join(duplicates)}")

        self.section_ids = section_ids
        self.host = host
        self.config = config or DEFAULT_NAVIGATOR_CONFIG
        self._clock = clock
        self._positions = {sid: index for index, sid in enumerate(section_ids)}

        self._active_index = 0
        self._state = NavigatorState.idle
        self._device_class = DeviceClass.wide
        self._last_scroll_at: float | None = None
        self._cooldown_task: ScheduledTask | None = None
        self._observation: Subscription | None = None
        self._listeners: list[Callable[[int], None]] = []
        self._swipe = SwipeTracker()

    # ---- Read accessors -------------------------------------------------
    @property
    def active_index(self) -> int:
        return self._active_index

    @property
    def active_section(self) -> str | None:
        if not self.section_ids:
            return None
        return self.section_ids[self._active_index]

    @property
    def device_class(self) -> DeviceClass:
        return self._device_class

    @property
    def profile(self) -> DeviceProfile:
        return self.config.profile_for(self._device_class)

    @property
    def state(self) -> NavigatorState:
        return self._state

    @property
    def is_navigating(self) -> bool:
        return self._state is NavigatorState.navigating

    @property
    def last_scroll_at(self) -> float | None:
        """Monotonic time at which the last navigation completed."""
        return self._last_scroll_at

    # ---- Lifecycle ------------------------------------------------------
    def mount(self) -> "ScrollNavigator":
        if self._disposed:
            raise RuntimeError("Impossible de monter un navigateur déjà libéré")
        if self._mounted:
            return self
        self._mounted = True
        self._device_class = DeviceClass.from_width(self.host.viewport_width())
        self._observe()
        self._own(
            self.host.subscribe_input(
                InputHandlers(
                    on_wheel=self.handle_wheel,
                    on_key=self.handle_key,
                    on_touch_start=self.handle_touch_start,
                    on_touch_end=self.handle_touch_end,
                )
            )
        )
        self._own(self.host.subscribe_resize(self.handle_viewport_resize))
        logger.info(
            f"Navigation montée sur {len(self.section_ids)} sections "
            f"(appareil {self._device_class.value})"
        )
        return self

    def dispose(self) -> None:
        if self._disposed:
            return
        if self._cooldown_task is not None:
            self._cooldown_task.cancel()
            self._cooldown_task = None
        if self._observation is not None:
            self._observation.dispose()
            self._observation = None
        self._listeners.clear()
        self._swipe.cancel()
        super().dispose()
        logger.debug("Navigation libérée")

    def _observe(self) -> None:
        if self._observation is not None:
            self._observation.dispose()
        self._observation = self.host.observe_visibility(
            self.section_ids,
            VisibilityOptions.from_profile(self.profile),
            self.handle_visibility,
        )

    # ---- Consumers ------------------------------------------------------
    def subscribe(self, callback: Callable[[int], None]) -> Subscription:
        """Call ``callback(index)`` whenever the active section changes."""
        self._listeners.append(callback)

        def _remove() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)

        return Subscription(_remove)

    def _set_active(self, index: int) -> None:
        if index == self._active_index:
            return
        self._active_index = index
        for callback in list(self._listeners):
            try:
                callback(index)
            except Exception:
                logger.exception(f"Erreur dans un abonné à la section active ({index})")

    # ---- Navigation -----------------------------------------------------
    def advance(self, direction: Direction) -> bool:
        """Snap to the previous or next section; returns True when accepted."""
        if not self.section_ids:
            return False
        candidate = min(max(self._active_index + int(direction), 0), len(self.section_ids) - 1)
        if candidate == self._active_index:
            logger.debug(f"Navigation ignorée: déjà en limite ({self.active_section})")
            return False
        return self._navigate(candidate)

    def scroll_to_section(self, index: int) -> None:
        """Snap directly to ``index``; out-of-range requests are ignored."""
        if not 0 <= index < len(self.section_ids):
            logger.debug(f"Navigation ignorée: index {index} hors limites")
            return
        self._navigate(index)

    def _navigate(self, index: int) -> bool:
        if self._disposed:
            logger.debug("Navigation ignorée: navigateur libéré")
            return False
        if self.is_navigating:
            logger.debug(f"Navigation ignorée: défilement en cours vers {self.active_section}")
            return False
        # The completion task holds the gate for the cooldown chosen here
        profile = self.profile
        self._state = NavigatorState.navigating
        target = self.section_ids[index]
        self.host.scroll_into_view(target)
        self._set_active(index)
        self._cooldown_task = self.host.schedule(profile.cooldown_ms, self._finish_navigation)
        logger.debug(f"Navigation vers {target} ({index}), refroidissement {profile.cooldown_ms} ms")
        return True

    def _finish_navigation(self) -> None:
        self._cooldown_task = None
        if self._disposed:
            return
        self._state = NavigatorState.idle
        self._last_scroll_at = self._clock()

    # ---- Host callbacks -------------------------------------------------
    def handle_visibility(self, entries: Iterable[VisibilityEntry]) -> None:
        """
        Update the active section from a batch of threshold crossings.

        The intersecting entry with the highest ratio wins; ties go to the
        section nearest the current one, then to the lower index.
        """
        if self._disposed:
            return
        best: tuple[float, int, int] | None = None
        for entry in entries:
            if not entry.is_intersecting:
                continue
            index = self._positions.get(entry.section_id)
            if index is None:
                continue
            key = (-entry.ratio, abs(index - self._active_index), index)
            if best is None or key < best:
                best = key
        if best is not None:
            self._set_active(best[2])

    def handle_wheel(self, delta_y: float) -> bool:
        """Positive ``delta_y`` scrolls towards the next section."""
        if self._disposed:
            return False
        direction = wheel_direction(delta_y, self.profile.wheel_threshold)
        if direction is None:
            return False
        return self.advance(direction) or self.is_navigating

    def handle_key(self, key: str | KeyCategory) -> bool:
        if self._disposed:
            return False
        category = key if isinstance(key, KeyCategory) else key_category(key)
        direction = key_direction(category)
        if direction is None:
            return False
        return self.advance(direction)

    def handle_touch_start(self, y: float) -> None:
        if self._disposed or not self.profile.touch_enabled:
            return
        self._swipe.start(y)

    def handle_touch_end(self, y: float) -> bool:
        if self._disposed or not self.profile.touch_enabled:
            return False
        direction = self._swipe.finish(y)
        if direction is None:
            return False
        return self.advance(direction)

    def handle_viewport_resize(self, width: int) -> None:
        if self._disposed:
            return
        device_class = DeviceClass.from_width(width)
        if device_class is self._device_class:
            return
        logger.info(f"Classe d'appareil: {self._device_class.value} -> {device_class.value}")
        self._device_class = device_class
        self._swipe.cancel()
        if self._mounted:
            self._observe()
