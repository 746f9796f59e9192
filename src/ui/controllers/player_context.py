"""PlayerContext — Controller 간 공유 상태 및 재생 환경 참조.

VideoPlayerWidget(또는 테스트)가 생성하여 모든 Controller에 주입한다.
Controller는 self.ctx 로 접근.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from src.models.playback_session import PlaybackSession
from src.utils.config import CONTROLS_HIDE_DELAY_MS, SKIP_SECONDS

if TYPE_CHECKING:
    from src.infrastructure.media_backend import (
        IFullscreenHost,
        IMediaPrimitive,
        IScheduler,
        Subscription,
        TimerHandle,
    )


class PlayerContext:
    """Controller들이 공유하는 세션 상태, 재생 환경, 타이머/구독 소유권.

    ``generation`` is bumped whenever a session is torn down. Timer and
    notification callbacks captured under an older generation are dropped.
    """

    def __init__(self) -> None:
        # ---- Session ----
        self.session: PlaybackSession = PlaybackSession.for_source("")
        self.generation: int = 0

        # ---- Environment (생성은 Widget / 테스트) ----
        self.primitive: IMediaPrimitive = None  # type: ignore[assignment]
        self.fullscreen_host: IFullscreenHost | None = None
        self.scheduler: IScheduler = None  # type: ignore[assignment]

        # ---- 세션 소유 리소스 ----
        self.subscriptions: list[Subscription] = []
        self.timers: dict[str, TimerHandle] = {}

        # ---- 설정 ----
        self.controls_hide_delay_ms: int = CONTROLS_HIDE_DELAY_MS
        self.skip_seconds: float = SKIP_SECONDS

        # ---- Controller 참조 ----
        self.playback_ctrl: Any = None
        self.visibility_ctrl: Any = None
        self.keyboard_ctrl: Any = None
        self.media_ctrl: Any = None

        # ---- View 콜백 (Controller에서 호출) ----
        self.refresh_view: Callable[[], None] = lambda: None

    # ---- 타이머 ----

    def start_timer(self, name: str, delay_ms: int, callback: Callable[[], None]) -> None:
        """(Re)start the named single-shot timer for the current generation."""
        self.cancel_timer(name)
        generation = self.generation

        def _fire() -> None:
            if self.generation != generation:
                return
            self.timers.pop(name, None)
            callback()

        self.timers[name] = self.scheduler.call_later(delay_ms, _fire)

    def cancel_timer(self, name: str) -> None:
        handle = self.timers.pop(name, None)
        if handle is not None:
            handle.cancel()

    def timer_active(self, name: str) -> bool:
        handle = self.timers.get(name)
        return handle is not None and handle.active

    def cancel_all_timers(self) -> None:
        for name in list(self.timers):
            self.cancel_timer(name)

    # ---- 구독 ----

    def release_subscriptions(self) -> None:
        subscriptions, self.subscriptions = self.subscriptions, []
        for subscription in subscriptions:
            subscription.release()
