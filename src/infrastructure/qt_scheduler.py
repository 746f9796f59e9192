"""QTimer 기반 IScheduler 구현."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import QObject, QTimer


class _QtTimerHandle:
    """Single-shot QTimer wrapper returned by QtScheduler.call_later."""

    def __init__(self, timer: QTimer) -> None:
        self._timer: QTimer | None = timer

    @property
    def active(self) -> bool:
        return self._timer is not None and self._timer.isActive()

    def cancel(self) -> None:
        timer = self._timer
        if timer is None:
            return
        self._timer = None
        timer.stop()
        timer.deleteLater()

    def _fire(self, callback: Callable[[], None]) -> None:
        if self._timer is None:
            return
        self.cancel()
        callback()


class QtScheduler:
    """Creates single-shot timers parented to *parent* (GUI thread only)."""

    def __init__(self, parent: QObject | None = None) -> None:
        self._parent = parent

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> _QtTimerHandle:
        timer = QTimer(self._parent)
        timer.setSingleShot(True)
        timer.setInterval(max(0, int(delay_ms)))
        handle = _QtTimerHandle(timer)
        timer.timeout.connect(lambda: handle._fire(callback))
        timer.start()
        return handle
