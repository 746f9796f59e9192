"""Infrastructure layer: media playback environment (QtMultimedia, windowing, timers).

이 계층은 Qt 재생 환경을 프로토콜 뒤로 숨겨 Controller가
QMediaPlayer / QWidget / QTimer에 직접 의존하지 않도록 합니다.
"""

from src.infrastructure.media_backend import (
    FullscreenRequestError,
    IFullscreenHost,
    IMediaPrimitive,
    IScheduler,
    MediaEventListener,
    Subscription,
    TimerHandle,
)

__all__ = [
    "FullscreenRequestError",
    "IFullscreenHost",
    "IMediaPrimitive",
    "IScheduler",
    "MediaEventListener",
    "Subscription",
    "TimerHandle",
]
