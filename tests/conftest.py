"""Shared fixtures: a scriptable host runtime driven by a fake clock."""

from __future__ import annotations

import os
from typing import Callable, List, Sequence

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from snapnav.config import NavigatorConfig
from snapnav.controllers.scroll_navigator import ScrollNavigator
from snapnav.services.host import InputHandlers, Subscription, VisibilityEntry, VisibilityOptions

LANDING_IDS = ["hero", "services", "work", "about", "contact"]


class FakeClock:
    def __init__(self) -> None:
        self.now_ms = 0

    def __call__(self) -> float:
        return self.now_ms / 1000


class FakeTask:
    def __init__(self, due_ms: int, callback: Callable[[], None]) -> None:
        self.due_ms = due_ms
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeHost:
    """In-memory ScrollHost recording every call the navigator makes."""

    def __init__(self, clock: FakeClock, width: int = 1280) -> None:
        self.clock = clock
        self.width = width
        self.scrolled: List[str] = []
        self.tasks: List[FakeTask] = []
        self.handlers: InputHandlers | None = None
        self.visibility_callback: Callable[[list[VisibilityEntry]], None] | None = None
        self.visibility_options: List[VisibilityOptions] = []
        self.resize_callback: Callable[[int], None] | None = None
        self.subscriptions: List[Subscription] = []

    def _track(self, subscription: Subscription) -> Subscription:
        self.subscriptions.append(subscription)
        return subscription

    # ScrollHost
    def viewport_width(self) -> int:
        return self.width

    def scroll_into_view(self, section_id: str) -> None:
        self.scrolled.append(section_id)

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> FakeTask:
        task = FakeTask(self.clock.now_ms + delay_ms, callback)
        self.tasks.append(task)
        return task

    def observe_visibility(self, section_ids: Sequence[str], options: VisibilityOptions, callback):
        self.visibility_callback = callback
        self.visibility_options.append(options)

        def _stop() -> None:
            if self.visibility_callback is callback:
                self.visibility_callback = None

        return self._track(Subscription(_stop))

    def subscribe_input(self, handlers: InputHandlers) -> Subscription:
        self.handlers = handlers

        def _stop() -> None:
            self.handlers = None

        return self._track(Subscription(_stop))

    def subscribe_resize(self, callback: Callable[[int], None]) -> Subscription:
        self.resize_callback = callback

        def _stop() -> None:
            self.resize_callback = None

        return self._track(Subscription(_stop))

    # Test helpers
    @property
    def pending_tasks(self) -> List[FakeTask]:
        return [task for task in self.tasks if not task.cancelled and not task.fired]

    def advance(self, ms: int) -> None:
        """Move the clock forward, firing every task that becomes due."""
        target = self.clock.now_ms + ms
        while True:
            due = [task for task in self.pending_tasks if task.due_ms <= target]
            if not due:
                break
            task = min(due, key=lambda t: t.due_ms)
            self.clock.now_ms = task.due_ms
            task.fired = True
            task.callback()
        self.clock.now_ms = target

    def resize(self, width: int) -> None:
        self.width = width
        if self.resize_callback is not None:
            self.resize_callback(width)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def host(clock: FakeClock) -> FakeHost:
    return FakeHost(clock)


@pytest.fixture
def compact_host(clock: FakeClock) -> FakeHost:
    return FakeHost(clock, width=390)


@pytest.fixture
def config() -> NavigatorConfig:
    return NavigatorConfig(normal_cooldown_ms=1000, compact_cooldown_ms=600)


@pytest.fixture
def navigator(host: FakeHost, config: NavigatorConfig, clock: FakeClock) -> ScrollNavigator:
    nav = ScrollNavigator(LANDING_IDS, host, config, clock=clock).mount()
    yield nav
    nav.dispose()


@pytest.fixture
def compact_navigator(compact_host: FakeHost, config: NavigatorConfig, clock: FakeClock) -> ScrollNavigator:
    nav = ScrollNavigator(LANDING_IDS, compact_host, config, clock=clock).mount()
    yield nav
    nav.dispose()
