"""Interpretation of raw wheel, keyboard and touch input."""

from __future__ import annotations

from enum import Enum, IntEnum

from ..config import SWIPE_THRESHOLD


class Direction(IntEnum):
    previous = -1
    next = 1


class KeyCategory(str, Enum):
    next_page = "next_page"
    previous_page = "previous_page"
    other = "other"


_KEY_CATEGORIES = {
    "ArrowDown": KeyCategory.next_page,
    "PageDown": KeyCategory.next_page,
    "ArrowUp": KeyCategory.previous_page,
    "PageUp": KeyCategory.previous_page,
}


def key_category(name: str) -> KeyCategory:
    """Map a key name (``"PageDown"``, ``"ArrowUp"``...) to its category."""
    return _KEY_CATEGORIES.get(name, KeyCategory.other)


def key_direction(category: KeyCategory) -> Direction | None:
    if category is KeyCategory.next_page:
        return Direction.next
    if category is KeyCategory.previous_page:
        return Direction.previous
    return None


def wheel_direction(delta_y: float, minimum: float = 0) -> Direction | None:
    """Direction of a wheel gesture, or None when it is too small to count."""
    if delta_y == 0 or abs(delta_y) < minimum:
        return None
    return Direction.next if delta_y > 0 else Direction.previous


class SwipeTracker:
    """Remembers where a touch started and classifies the swipe at release."""

    def __init__(self, threshold: float = SWIPE_THRESHOLD) -> None:
        self.threshold = threshold
        self._start_y: float | None = None

    def start(self, y: float) -> None:
        self._start_y = y

    def finish(self, y: float) -> Direction | None:
        start, self._start_y = self._start_y, None
        if start is None:
            return None
        displacement = start - y
        if abs(displacement) <= self.threshold:
            return None
        return Direction.next if displacement > 0 else Direction.previous

    def cancel(self) -> None:
        self._start_y = None
