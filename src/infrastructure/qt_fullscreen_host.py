"""Top-level window fullscreen control for the player container."""

from __future__ import annotations

import logging
from typing import Callable

from PySide6.QtCore import QEvent, QObject
from PySide6.QtWidgets import QWidget

from src.infrastructure.media_backend import FullscreenRequestError, Subscription

logger = logging.getLogger(__name__)


class QtFullscreenHost(QObject):
    """IFullscreenHost on top of ``QWidget.showFullScreen`` / ``showNormal``.

    Qt can only put top-level windows into fullscreen, so requests act on
    ``container.window()``. State changes are reported from the window's
    ``WindowStateChange`` event, never from the request itself.
    """

    def __init__(self, container: QWidget) -> None:
        super().__init__(container)
        self._container = container
        self._watched: QWidget | None = None
        self._callbacks: list[Callable[[bool], None]] = []

    def request_fullscreen(self) -> None:
        try:
            window = self._watch_window()
            window.showFullScreen()
        except RuntimeError as e:
            raise FullscreenRequestError(f"Cannot enter fullscreen: {e}") from e

    def exit_fullscreen(self) -> None:
        try:
            window = self._watch_window()
            window.showNormal()
        except RuntimeError as e:
            raise FullscreenRequestError(f"Cannot exit fullscreen: {e}") from e

    def subscribe(self, callback: Callable[[bool], None]) -> Subscription:
        self._watch_window()
        self._callbacks.append(callback)

        def _release() -> None:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

        return Subscription(_release)

    def _watch_window(self) -> QWidget:
        window = self._container.window()
        if window is not self._watched:
            if self._watched is not None:
                self._watched.removeEventFilter(self)
            window.installEventFilter(self)
            self._watched = window
        return window

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:
        if obj is self._watched and event.type() == QEvent.Type.WindowStateChange:
            is_full = self._watched.isFullScreen()
            logger.debug(f"Window state changed: fullscreen={is_full}")
            for callback in list(self._callbacks):
                callback(is_full)
        return False
