"""PySide6 host and landing window, run on the offscreen platform."""

from __future__ import annotations

import pytest

pytest.importorskip("PySide6")

from PySide6.QtCore import QEvent, QPoint, QPointF, Qt
from PySide6.QtGui import QKeyEvent, QWheelEvent
from PySide6.QtTest import QTest
from PySide6.QtWidgets import QApplication

from snapnav.config import DeviceClass, NavigatorConfig
from snapnav.services.qt_host import SCROLL_ANIMATION_MS
from snapnav.views.landing_window import LANDING_SECTIONS, LandingWindow


@pytest.fixture(scope="module")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def window(qapp):
    win = LandingWindow(config=NavigatorConfig(normal_cooldown_ms=100, compact_cooldown_ms=100))
    win.show()
    qapp.processEvents()
    yield win
    win.close()
    qapp.processEvents()


def _press(widget, key):
    QApplication.sendEvent(widget, QKeyEvent(QEvent.Type.KeyPress, key, Qt.KeyboardModifier.NoModifier))


def _wheel(widget, angle_y):
    event = QWheelEvent(
        QPointF(10, 10),
        QPointF(10, 10),
        QPoint(0, 0),
        QPoint(0, angle_y),
        Qt.MouseButton.NoButton,
        Qt.KeyboardModifier.NoModifier,
        Qt.ScrollPhase.NoScrollPhase,
        False,
    )
    QApplication.sendEvent(widget, event)


def test_window_mounts_navigator_on_every_section(window):
    assert window.navigator.mounted
    assert window.navigator.section_ids == tuple(s.section_id for s in LANDING_SECTIONS)
    assert window.navigator.active_index == 0
    assert window.indicator.active_index() == 0


def test_page_down_advances_and_updates_indicator(window):
    _press(window.scroll_area, Qt.Key.Key_PageDown)

    assert window.navigator.active_index == 1
    assert window.navigator.is_navigating
    assert window.indicator.active_index() == 1


def test_wheel_towards_user_advances(window):
    _wheel(window.scroll_area.viewport(), -120)
    assert window.navigator.active_index == 1


def test_indicator_click_scrolls_to_section(window):
    window.indicator.dots[3].click()
    QTest.qWait(SCROLL_ANIMATION_MS + 200)

    assert window.navigator.active_index == 3
    assert window.indicator.active_index() == 3
    assert window.scroll_area.verticalScrollBar().value() > 0


def test_rejected_click_keeps_indicator_in_sync(window):
    window.indicator.dots[2].click()
    window.indicator.dots[4].click()

    assert window.indicator.active_index() == window.navigator.active_index


def test_host_timer_fires_and_can_be_cancelled(window):
    fired = []
    window.host.schedule(10, lambda: fired.append("a"))
    cancelled = window.host.schedule(10, lambda: fired.append("b"))
    cancelled.cancel()

    QTest.qWait(80)
    assert fired == ["a"]


def test_close_disposes_navigator(qapp):
    win = LandingWindow()
    win.show()
    qapp.processEvents()

    win.close()
    assert win.navigator.disposed


def test_swipe_up_on_compact_window_advances(window, qapp):
    window.resize(400, 720)
    qapp.processEvents()
    assert window.navigator.device_class is DeviceClass.compact

    device = QTest.createTouchDevice()
    viewport = window.scroll_area.viewport()
    QTest.touchEvent(viewport, device).press(0, QPoint(150, 300), viewport).commit()
    QTest.touchEvent(viewport, device).release(0, QPoint(150, 100), viewport).commit()

    assert window.navigator.active_index == 1
    assert window.indicator.active_index() == 1
