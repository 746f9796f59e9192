"""공용 테스트 더블: 미디어 프리미티브, 전체화면 호스트, 수동 스케줄러 (Qt 불필요)."""

from __future__ import annotations

import os

import pytest

# Qt 위젯 테스트는 디스플레이 없이 실행
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from src.infrastructure.media_backend import FullscreenRequestError, Subscription
from src.ui.controllers import create_player_context


class FakePrimitive:
    """Records transport calls; tests drive notifications through ``emit``."""

    def __init__(self) -> None:
        self.source: str | None = None
        self.position = 0.0
        self.duration: float | None = None
        self.buffered = 0.0
        self.volume: float | None = None
        self.rate: float | None = None
        self.calls: list[str] = []
        self.listeners: list = []
        self.pending_rejection = None
        self.reject_next_play: str | None = None

    def load(self, source_url: str) -> None:
        self.calls.append("load")
        self.source = source_url

    def unload(self) -> None:
        self.calls.append("unload")
        self.source = None

    def play(self, on_rejected) -> None:
        self.calls.append("play")
        if self.reject_next_play is not None:
            on_rejected(self.reject_next_play)
            self.reject_next_play = None
        else:
            self.pending_rejection = on_rejected

    def pause(self) -> None:
        self.calls.append("pause")

    def position_seconds(self) -> float:
        return self.position

    def set_position_seconds(self, seconds: float) -> None:
        self.calls.append("seek")
        self.position = seconds

    def duration_seconds(self) -> float | None:
        return self.duration

    def buffered_seconds(self) -> float:
        return self.buffered

    def set_volume(self, volume: float) -> None:
        self.volume = volume

    def set_playback_rate(self, rate: float) -> None:
        self.rate = rate

    def subscribe(self, listener) -> Subscription:
        self.listeners.append(listener)
        return Subscription(lambda: self.listeners.remove(listener))

    def emit(self, event: str, *args) -> None:
        for listener in list(self.listeners):
            getattr(listener, event)(*args)


class FakeFullscreenHost:
    def __init__(self) -> None:
        self.requests: list[str] = []
        self.callbacks: list = []
        self.fail_with: str | None = None

    def request_fullscreen(self) -> None:
        if self.fail_with:
            raise FullscreenRequestError(self.fail_with)
        self.requests.append("request")

    def exit_fullscreen(self) -> None:
        if self.fail_with:
            raise FullscreenRequestError(self.fail_with)
        self.requests.append("exit")

    def subscribe(self, callback) -> Subscription:
        self.callbacks.append(callback)
        return Subscription(lambda: self.callbacks.remove(callback))

    def notify(self, is_fullscreen: bool) -> None:
        for callback in list(self.callbacks):
            callback(is_fullscreen)


class _ManualHandle:
    def __init__(self, due: int, callback) -> None:
        self.due = due
        self.callback = callback
        self.active = True

    def cancel(self) -> None:
        self.active = False


class ManualScheduler:
    """Virtual clock; ``advance(ms)`` fires due timers in order."""

    def __init__(self) -> None:
        self.now = 0
        self._handles: list[_ManualHandle] = []

    def call_later(self, delay_ms: int, callback) -> _ManualHandle:
        handle = _ManualHandle(self.now + delay_ms, callback)
        self._handles.append(handle)
        return handle

    def pending(self) -> int:
        return sum(1 for h in self._handles if h.active)

    def advance(self, ms: int) -> None:
        target = self.now + ms
        while True:
            due = [h for h in self._handles if h.active and h.due <= target]
            if not due:
                break
            handle = min(due, key=lambda h: h.due)
            self.now = handle.due
            handle.active = False
            handle.callback()
        self.now = target
        self._handles = [h for h in self._handles if h.active]


@pytest.fixture
def primitive() -> FakePrimitive:
    return FakePrimitive()


@pytest.fixture
def fullscreen_host() -> FakeFullscreenHost:
    return FakeFullscreenHost()


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def ctx(primitive, scheduler, fullscreen_host):
    context = create_player_context(primitive, scheduler, fullscreen_host)
    context.refresh_count = 0

    def _refresh() -> None:
        context.refresh_count += 1

    context.refresh_view = _refresh
    return context


@pytest.fixture
def loaded(ctx, primitive):
    """100초 길이 소스가 로드되어 READY 상태인 컨텍스트."""
    ctx.media_ctrl.load_source("https://cdn.example.com/movie.mp4")
    primitive.duration = 100.0
    primitive.emit("on_metadata_ready", 100.0)
    return ctx


@pytest.fixture
def playing(loaded, primitive):
    """재생 중 (position 50s) 컨텍스트."""
    loaded.playback_ctrl.toggle_play()
    primitive.emit("on_time_advanced", 50.0)
    return loaded
