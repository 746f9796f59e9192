"""Playback session state model (pure Python, no Qt dependency)."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, auto

from src.utils.config import DEFAULT_PLAYBACK_RATE, DEFAULT_VOLUME
from src.utils.time_utils import format_time, percent_of


class PlaybackStatus(Enum):
    IDLE = auto()
    LOADING = auto()
    READY = auto()
    PLAYING = auto()
    PAUSED = auto()
    SEEKING = auto()
    ENDED = auto()
    ERRORED = auto()


# Seek/skip are only meaningful once metadata is in and nothing is broken
SEEKABLE_STATUSES = frozenset({
    PlaybackStatus.READY,
    PlaybackStatus.PLAYING,
    PlaybackStatus.PAUSED,
    PlaybackStatus.SEEKING,
})


class PlaybackErrorKind(Enum):
    SOURCE_UNAVAILABLE = auto()
    PLAYBACK_REJECTED = auto()
    RUNTIME_ERROR = auto()


def is_source_available(source_url) -> bool:
    """True when *source_url* is a non-blank string."""
    return isinstance(source_url, str) and source_url.strip() != ""


def is_known_duration(duration) -> bool:
    return (
        isinstance(duration, (int, float))
        and math.isfinite(duration)
        and duration >= 0
    )


@dataclass
class PlaybackSession:
    """State of one mounted player instance.

    A session is created per source. ``ERRORED`` is terminal: recovering
    requires a new session for a new (or the same) source.
    """

    source_url: str = ""
    status: PlaybackStatus = PlaybackStatus.IDLE
    position_seconds: float = 0.0
    duration_seconds: float | None = None  # None = unknown
    buffered_seconds: float = 0.0
    volume: float = DEFAULT_VOLUME
    muted: bool = False
    muted_restore_volume: float = DEFAULT_VOLUME
    playback_rate: float = DEFAULT_PLAYBACK_RATE

    # Controls-visibility sub-state
    controls_visible: bool = True
    is_fullscreen: bool = False
    show_settings: bool = False
    is_scrubbing: bool = False

    play_intent: bool = False  # user wants playback; survives buffering stalls
    resume_status: PlaybackStatus | None = None  # status to return to after a stall or scrub
    show_playback_animation: bool = False

    error_kind: PlaybackErrorKind | None = None
    error_message: str = ""

    @classmethod
    def for_source(cls, source_url, *, volume: float = DEFAULT_VOLUME) -> PlaybackSession:
        """Create a session for *source_url*.

        Blank sources start (and stay) unavailable; anything else starts
        in ``LOADING`` until the primitive reports metadata.
        """
        if not is_source_available(source_url):
            return cls(
                source_url="",
                status=PlaybackStatus.IDLE,
                volume=volume,
                muted=volume == 0,
                error_kind=PlaybackErrorKind.SOURCE_UNAVAILABLE,
            )
        return cls(
            source_url=source_url.strip(),
            status=PlaybackStatus.LOADING,
            volume=volume,
            muted=volume == 0,
            muted_restore_volume=volume if volume > 0 else DEFAULT_VOLUME,
        )

    # ---- 상태 판정 ----

    @property
    def is_available(self) -> bool:
        return is_source_available(self.source_url)

    @property
    def is_errored(self) -> bool:
        return self.status == PlaybackStatus.ERRORED

    @property
    def accepts_transport(self) -> bool:
        """Transport operations are no-ops on unavailable or errored sessions."""
        return self.is_available and not self.is_errored

    @property
    def is_playing(self) -> bool:
        return self.play_intent and self.status in (
            PlaybackStatus.PLAYING,
            PlaybackStatus.LOADING,
            PlaybackStatus.SEEKING,
        )

    @property
    def is_buffering(self) -> bool:
        return self.status == PlaybackStatus.LOADING and self.is_available

    @property
    def duration_known(self) -> bool:
        return is_known_duration(self.duration_seconds)

    @property
    def is_seekable(self) -> bool:
        return (
            self.accepts_transport
            and self.duration_known
            and self.status in SEEKABLE_STATUSES
        )

    # ---- 표시용 파생 값 ----

    @property
    def progress_percent(self) -> float:
        return percent_of(self.position_seconds, self.duration_seconds)

    @property
    def buffered_percent(self) -> float:
        return percent_of(self.buffered_seconds, self.duration_seconds)

    @property
    def current_time_text(self) -> str:
        return format_time(self.position_seconds)

    @property
    def duration_text(self) -> str:
        if not self.duration_known:
            return "0:00"
        return format_time(self.duration_seconds)
