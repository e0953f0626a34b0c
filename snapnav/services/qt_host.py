"""PySide6 host runtime backing the scroll navigator with a QScrollArea."""

from __future__ import annotations

from typing import Callable, Dict, Mapping, Sequence

from loguru import logger
from PySide6.QtCore import QEasingCurve, QEvent, QObject, QPoint, QPropertyAnimation, Qt, QTimer
from PySide6.QtWidgets import QScrollArea, QWidget

from .host import InputHandlers, Subscription, VisibilityEntry, VisibilityOptions
from .visibility import SectionGeometry, VisibilityTracker

__all__ = ["QtScrollHost", "SCROLL_ANIMATION_MS"]

SCROLL_ANIMATION_MS = 450

_KEY_NAMES = {
    Qt.Key.Key_Down.value: "ArrowDown",
    Qt.Key.Key_PageDown.value: "PageDown",
    Qt.Key.Key_Up.value: "ArrowUp",
    Qt.Key.Key_PageUp.value: "PageUp",
}


def _key_name(key) -> str:
    return _KEY_NAMES.get(getattr(key, "value", key), "")


class _TimerTask:
    """Single-shot QTimer that can be cancelled before it fires."""

    def __init__(self, parent: QObject, delay_ms: int, callback: Callable[[], None]) -> None:
        self._callback = callback
        self._timer: QTimer | None = QTimer(parent)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self._fire)
        self._timer.start(max(0, int(delay_ms)))

    def _release(self) -> None:
        timer, self._timer = self._timer, None
        if timer is not None:
            timer.stop()
            timer.deleteLater()

    def _fire(self) -> None:
        if self._timer is None:
            return
        self._release()
        self._callback()

    def cancel(self) -> None:
        self._release()


class _InputFilter(QObject):
    """Event filter translating Qt input events for the navigator."""

    def __init__(self, host: "QtScrollHost", handlers: InputHandlers) -> None:
        super().__init__(host)
        self._handlers = handlers

    def eventFilter(self, obj, event):  # noqa: N802
        try:
            return self._dispatch(event)
        except Exception:
            logger.exception(f"Erreur lors du traitement d'un événement {event.type()}")
            return False

    def _dispatch(self, event) -> bool:
        kind = event.type()
        if kind == QEvent.Type.Wheel:
            delta = event.pixelDelta().y() or event.angleDelta().y()
            # Qt reports a positive delta when scrolling up
            return bool(self._handlers.on_wheel(-delta))
        if kind == QEvent.Type.KeyPress:
            name = _key_name(event.key())
            return bool(name) and bool(self._handlers.on_key(name))
        if kind == QEvent.Type.TouchBegin:
            points = event.points()
            if points:
                self._handlers.on_touch_start(points[0].position().y())
            return False
        if kind == QEvent.Type.TouchEnd:
            points = event.points()
            if points:
                return bool(self._handlers.on_touch_end(points[0].position().y()))
            return False
        return False


class _ResizeFilter(QObject):
    def __init__(self, host: "QtScrollHost", callback: Callable[[int], None]) -> None:
        super().__init__(host)
        self._host = host
        self._callback = callback

    def eventFilter(self, obj, event):  # noqa: N802
        if event.type() == QEvent.Type.Resize:
            try:
                self._callback(self._host.viewport_width())
            except Exception:
                logger.exception("Erreur lors du redimensionnement")
        return False


class QtScrollHost(QObject):
    """
    Exposes a QScrollArea and its section widgets as a navigator host.

    Sections must live inside the scroll area's content widget; their
    identifiers are the keys of ``sections``.
    """

    def __init__(self, area: QScrollArea, sections: Mapping[str, QWidget], parent: QObject | None = None) -> None:
        super().__init__(parent if parent is not None else area)
        self._area = area
        self._sections: Dict[str, QWidget] = dict(sections)
        self._animation = QPropertyAnimation(area.verticalScrollBar(), b"value", self)
        self._animation.setDuration(SCROLL_ANIMATION_MS)
        self._animation.setEasingCurve(QEasingCurve.Type.InOutCubic)
        area.viewport().setAttribute(Qt.WidgetAttribute.WA_AcceptTouchEvents, True)

    # ---- Geometry -------------------------------------------------------
    def viewport_width(self) -> int:
        return self._area.width()

    def section_top(self, section_id: str) -> int | None:
        widget = self._sections.get(section_id)
        content = self._area.widget()
        if widget is None or content is None:
            return None
        return widget.mapTo(content, QPoint(0, 0)).y()

    def section_geometry(self) -> Dict[str, SectionGeometry]:
        geometry: Dict[str, SectionGeometry] = {}
        for section_id, widget in self._sections.items():
            top = self.section_top(section_id)
            if top is not None:
                geometry[section_id] = SectionGeometry(top=top, height=widget.height())
        return geometry

    # ---- ScrollHost -----------------------------------------------------
    def scroll_into_view(self, section_id: str) -> None:
        top = self.section_top(section_id)
        if top is None:
            logger.warning(f"Section inconnue: {section_id}")
            return
        bar = self._area.verticalScrollBar()
        target = max(bar.minimum(), min(top, bar.maximum()))
        self._animation.stop()
        self._animation.setStartValue(bar.value())
        self._animation.setEndValue(target)
        self._animation.start()

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> _TimerTask:
        return _TimerTask(self, delay_ms, callback)

    def observe_visibility(
        self,
        section_ids: Sequence[str],
        options: VisibilityOptions,
        callback: Callable[[list[VisibilityEntry]], None],
    ) -> Subscription:
        tracker = VisibilityTracker(section_ids, options)
        bar = self._area.verticalScrollBar()

        def _refresh(*_args) -> None:
            entries = tracker.update(self.section_geometry(), bar.value(), self._area.viewport().height())
            if entries:
                callback(entries)

        bar.valueChanged.connect(_refresh)
        bar.rangeChanged.connect(_refresh)
        _refresh()

        def _disconnect() -> None:
            for signal in (bar.valueChanged, bar.rangeChanged):
                try:
                    signal.disconnect(_refresh)
                except (RuntimeError, TypeError):
                    logger.debug("Signal de défilement déjà déconnecté")

        return Subscription(_disconnect)

    def subscribe_input(self, handlers: InputHandlers) -> Subscription:
        event_filter = _InputFilter(self, handlers)
        targets = (self._area, self._area.viewport())
        for target in targets:
            target.installEventFilter(event_filter)

        def _remove() -> None:
            for target in targets:
                target.removeEventFilter(event_filter)
            event_filter.deleteLater()

        return Subscription(_remove)

    def subscribe_resize(self, callback: Callable[[int], None]) -> Subscription:
        resize_filter = _ResizeFilter(self, callback)
        self._area.installEventFilter(resize_filter)

        def _remove() -> None:
            self._area.removeEventFilter(resize_filter)
            resize_filter.deleteLater()

        return Subscription(_remove)
