"""미디어 재생 환경 추상화.

Controller는 QMediaPlayer / QWidget / QTimer에 직접 의존하지 않고
아래 프로토콜에만 의존한다. Qt 구현체는 같은 패키지의 ``qt_*`` 모듈에 있다.
"""

from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable


class FullscreenRequestError(RuntimeError):
    """The environment refused a fullscreen enter/exit request."""


class Subscription:
    """Handle for a registered callback; ``release()`` is idempotent."""

    def __init__(self, release: Callable[[], None]) -> None:
        self._release = release
        self._released = False

    @property
    def released(self) -> bool:
        return self._released

    def release(self) -> None:
        if self._released:
            return
        self._released = True
        self._release()


class MediaEventListener(Protocol):
    """Native notifications delivered by a media primitive."""

    def on_metadata_ready(self, duration_seconds: float | None) -> None: ...
    def on_time_advanced(self, position_seconds: float) -> None: ...
    def on_buffered_updated(self, buffered_seconds: float) -> None: ...
    def on_ended(self) -> None: ...
    def on_waiting(self) -> None: ...
    def on_resumed(self) -> None: ...
    def on_errored(self, message: str) -> None: ...


@runtime_checkable
class IMediaPrimitive(Protocol):
    """One playable media resource and its transport controls."""

    def load(self, url: str) -> None: ...
    def unload(self) -> None: ...

    def play(self, on_rejected: Callable[[str], None]) -> None:
        """Request playback. Never blocks; failure arrives via *on_rejected*."""
        ...

    def pause(self) -> None: ...

    def position_seconds(self) -> float: ...
    def set_position_seconds(self, seconds: float) -> None: ...
    def duration_seconds(self) -> float | None: ...
    def buffered_seconds(self) -> float: ...

    def set_volume(self, volume: float) -> None: ...
    def set_playback_rate(self, rate: float) -> None: ...

    def subscribe(self, listener: MediaEventListener) -> Subscription: ...


@runtime_checkable
class IFullscreenHost(Protocol):
    """Fullscreen capability of the player container.

    ``request_fullscreen`` / ``exit_fullscreen`` may raise
    :class:`FullscreenRequestError`. The authoritative state arrives
    through the callback registered with ``subscribe``.
    """

    def request_fullscreen(self) -> None: ...
    def exit_fullscreen(self) -> None: ...
    def subscribe(self, callback: Callable[[bool], None]) -> Subscription: ...


class TimerHandle(Protocol):
    @property
    def active(self) -> bool: ...

    def cancel(self) -> None: ...


@runtime_checkable
class IScheduler(Protocol):
    """Single-shot timers on the UI event loop."""

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle: ...
