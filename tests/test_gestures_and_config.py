"""Input interpretation, host subscriptions and configuration."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from snapnav.config import (
    COMPACT_BREAKPOINT_PX,
    DeviceClass,
    NavigatorConfig,
)
from snapnav.services.gestures import (
    Direction,
    KeyCategory,
    SwipeTracker,
    key_category,
    key_direction,
    wheel_direction,
)
from snapnav.services.host import Subscription


def test_key_categories():
    assert key_category("PageDown") is KeyCategory.next_page
    assert key_category("ArrowUp") is KeyCategory.previous_page
    assert key_category("Home") is KeyCategory.other
    assert key_direction(KeyCategory.other) is None
    assert key_direction(KeyCategory.next_page) is Direction.next


def test_wheel_direction_threshold():
    assert wheel_direction(20, minimum=20) is Direction.next
    assert wheel_direction(-19.9, minimum=20) is None
    assert wheel_direction(-1) is Direction.previous
    assert wheel_direction(0) is None


def test_swipe_tracker_is_single_use():
    swipe = SwipeTracker()
    swipe.start(300)
    assert swipe.finish(200) is Direction.next
    assert swipe.finish(0) is None


def test_swipe_threshold_is_exclusive():
    swipe = SwipeTracker()
    swipe.start(300)
    assert swipe.finish(250) is None


def test_subscription_disposes_once():
    calls = []
    subscription = Subscription(lambda: calls.append("x"))

    subscription.dispose()
    subscription.dispose()

    assert calls == ["x"]
    assert not subscription.active


def test_combined_subscription_releases_in_reverse_and_survives_errors():
    calls = []

    def _fail():
        calls.append("fail")
        raise RuntimeError("gone")

    combined = Subscription.combine([
        Subscription(lambda: calls.append("first")),
        Subscription(_fail),
        Subscription(lambda: calls.append("last")),
    ])
    combined.dispose()

    assert calls == ["last", "fail", "first"]


def test_config_defaults_and_aliases():
    assert NavigatorConfig().normal_cooldown_ms == 1000
    assert NavigatorConfig().compact_cooldown_ms == 600

    config = NavigatorConfig.model_validate({"normalCooldownMs": 800, "compactCooldownMs": 400})
    assert config.normal_cooldown_ms == 800
    assert config.compact_cooldown_ms == 400


@pytest.mark.parametrize("payload", [{"normal_cooldown_ms": -1}, {"scroll_delay": 10}])
def test_config_rejects_invalid_values(payload):
    with pytest.raises(ValidationError):
        NavigatorConfig(**payload)


def test_config_from_env(monkeypatch):
    monkeypatch.setenv("SNAPNAV_NORMAL_COOLDOWN_MS", "1200")
    monkeypatch.setenv("SNAPNAV_COMPACT_COOLDOWN_MS", "300")

    config = NavigatorConfig.from_env()
    assert (config.normal_cooldown_ms, config.compact_cooldown_ms) == (1200, 300)


def test_device_profiles():
    config = NavigatorConfig()
    wide = config.profile_for(DeviceClass.wide)
    compact = config.profile_for(DeviceClass.compact)

    assert (wide.cooldown_ms, wide.visibility_threshold, wide.touch_enabled) == (1000, 0.5, False)
    assert (compact.cooldown_ms, compact.visibility_threshold, compact.touch_enabled) == (600, 0.25, True)
    assert compact.wheel_threshold == 20


def test_device_class_from_width():
    assert DeviceClass.from_width(COMPACT_BREAKPOINT_PX - 1) is DeviceClass.compact
    assert DeviceClass.from_width(COMPACT_BREAKPOINT_PX) is DeviceClass.wide
