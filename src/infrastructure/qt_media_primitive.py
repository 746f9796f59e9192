"""QMediaPlayer 기반 IMediaPrimitive 구현.

QMediaPlayer 시그널을 MediaEventListener 콜백으로 변환한다.
- durationChanged / LoadedMedia  → on_metadata_ready
- positionChanged                → on_time_advanced
- bufferProgressChanged          → on_buffered_updated
- EndOfMedia                     → on_ended
- BufferingMedia / StalledMedia  → on_waiting
- BufferedMedia                  → on_resumed
- errorOccurred                  → play() 거부 콜백 또는 on_errored
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from PySide6.QtCore import QObject, QUrl
from PySide6.QtMultimedia import QAudioOutput, QMediaPlayer

from src.infrastructure.media_backend import MediaEventListener, Subscription
from src.utils.time_utils import ms_to_seconds, seconds_to_ms

logger = logging.getLogger(__name__)


def to_qurl(source: str) -> QUrl:
    """Local paths become file URLs; everything else is parsed as a URL."""
    path = Path(source)
    if "://" not in source and path.exists():
        return QUrl.fromLocalFile(str(path.resolve()))
    return QUrl.fromUserInput(source)


class QtMediaPrimitive(QObject):
    """Owns one QMediaPlayer + QAudioOutput pair."""

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._audio_output = QAudioOutput(self)
        self._player = QMediaPlayer(self)
        self._player.setAudioOutput(self._audio_output)
        self._listeners: list[MediaEventListener] = []
        self._pending_rejection: Callable[[str], None] | None = None

        self._player.positionChanged.connect(self._on_position_changed)
        self._player.durationChanged.connect(self._on_duration_changed)
        self._player.mediaStatusChanged.connect(self._on_media_status_changed)
        self._player.bufferProgressChanged.connect(self._on_buffer_progress_changed)
        self._player.playingChanged.connect(self._on_playing_changed)
        self._player.errorOccurred.connect(self._on_error_occurred)

    def set_video_output(self, output: QObject) -> None:
        self._player.setVideoOutput(output)

    # ---- 로드 ----

    def load(self, url: str) -> None:
        self._pending_rejection = None
        self._player.setSource(to_qurl(url))
        logger.info(f"Media source set: {url}")

    def unload(self) -> None:
        self._pending_rejection = None
        self._player.stop()
        self._player.setSource(QUrl())

    # ---- 트랜스포트 ----

    def play(self, on_rejected: Callable[[str], None]) -> None:
        if self._player.error() != QMediaPlayer.Error.NoError:
            on_rejected(self._player.errorString() or "Media is not playable")
            return
        self._pending_rejection = on_rejected
        self._player.play()

    def pause(self) -> None:
        self._pending_rejection = None
        self._player.pause()

    def position_seconds(self) -> float:
        return ms_to_seconds(self._player.position())

    def set_position_seconds(self, seconds: float) -> None:
        self._player.setPosition(seconds_to_ms(seconds))

    def duration_seconds(self) -> float | None:
        duration_ms = self._player.duration()
        if duration_ms <= 0:
            return None
        return ms_to_seconds(duration_ms)

    def buffered_seconds(self) -> float:
        if self._player.source().isLocalFile():
            return self.duration_seconds() or 0.0
        ranges = self._player.bufferedTimeRange()
        if ranges.isEmpty():
            return 0.0
        return max(0.0, ms_to_seconds(ranges.latestTime()))

    def set_volume(self, volume: float) -> None:
        self._audio_output.setVolume(float(volume))

    def set_playback_rate(self, rate: float) -> None:
        self._player.setPlaybackRate(float(rate))

    # ---- 구독 ----

    def subscribe(self, listener: MediaEventListener) -> Subscription:
        self._listeners.append(listener)

        def _release() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return Subscription(_release)

    def shutdown(self) -> None:
        """Drop every listener and stop the player (window close)."""
        self._listeners.clear()
        self.unload()

    def _emit(self, method: str, *args) -> None:
        for listener in list(self._listeners):
            getattr(listener, method)(*args)

    # ---- QMediaPlayer 슬롯 ----

    def _on_position_changed(self, position_ms: int) -> None:
        self._emit("on_time_advanced", ms_to_seconds(position_ms))

    def _on_duration_changed(self, duration_ms: int) -> None:
        if duration_ms > 0:
            self._emit("on_metadata_ready", ms_to_seconds(duration_ms))

    def _on_media_status_changed(self, status: QMediaPlayer.MediaStatus) -> None:
        if status == QMediaPlayer.MediaStatus.LoadedMedia:
            self._emit("on_metadata_ready", self.duration_seconds())
        elif status in (
            QMediaPlayer.MediaStatus.BufferingMedia,
            QMediaPlayer.MediaStatus.StalledMedia,
        ):
            self._emit("on_waiting")
        elif status == QMediaPlayer.MediaStatus.BufferedMedia:
            self._emit("on_resumed")
        elif status == QMediaPlayer.MediaStatus.EndOfMedia:
            self._emit("on_ended")

    def _on_buffer_progress_changed(self, _progress: float) -> None:
        self._emit("on_buffered_updated", self.buffered_seconds())

    def _on_playing_changed(self, playing: bool) -> None:
        if playing:
            self._pending_rejection = None

    def _on_error_occurred(self, error: QMediaPlayer.Error, message: str) -> None:
        if error == QMediaPlayer.Error.NoError:
            return
        text = message or str(error)
        rejection = self._pending_rejection
        if rejection is not None:
            self._pending_rejection = None
            rejection(text)
            return
        self._emit("on_errored", text)
