"""PlaybackSession / MovieSource 모델 테스트 (Qt 불필요)."""

from __future__ import annotations

import math

from src.models.movie_source import MovieSource
from src.models.playback_session import (
    PlaybackErrorKind,
    PlaybackSession,
    PlaybackStatus,
    is_known_duration,
    is_source_available,
)
from src.utils.config import DEFAULT_VOLUME


class TestSessionCreation:
    def test_blank_source_is_unavailable(self) -> None:
        session = PlaybackSession.for_source("")
        assert session.status == PlaybackStatus.IDLE
        assert session.error_kind == PlaybackErrorKind.SOURCE_UNAVAILABLE
        assert not session.is_available
        assert not session.accepts_transport

    def test_whitespace_source_is_unavailable(self) -> None:
        assert not PlaybackSession.for_source("   ").is_available

    def test_none_source_is_unavailable(self) -> None:
        assert not PlaybackSession.for_source(None).is_available

    def test_source_starts_loading(self) -> None:
        session = PlaybackSession.for_source(" movie.mp4 ")
        assert session.source_url == "movie.mp4"
        assert session.status == PlaybackStatus.LOADING
        assert session.duration_seconds is None
        assert session.error_kind is None
        assert session.accepts_transport

    def test_volume_carried(self) -> None:
        session = PlaybackSession.for_source("a.mp4", volume=0.3)
        assert session.volume == 0.3
        assert session.muted_restore_volume == 0.3
        assert session.muted is False

    def test_zero_volume_starts_muted(self) -> None:
        session = PlaybackSession.for_source("a.mp4", volume=0.0)
        assert session.muted is True
        assert session.muted_restore_volume == DEFAULT_VOLUME


class TestDerivedValues:
    def test_unknown_duration(self) -> None:
        session = PlaybackSession.for_source("a.mp4")
        session.position_seconds = 12
        assert session.progress_percent == 0.0
        assert session.duration_text == "0:00"
        assert session.current_time_text == "0:12"
        assert not session.is_seekable

    def test_known_duration(self) -> None:
        session = PlaybackSession.for_source("a.mp4")
        session.status = PlaybackStatus.READY
        session.duration_seconds = 200.0
        session.position_seconds = 50.0
        session.buffered_seconds = 100.0
        assert session.progress_percent == 25.0
        assert session.buffered_percent == 50.0
        assert session.duration_text == "3:20"
        assert session.is_seekable

    def test_zero_duration_not_divided(self) -> None:
        session = PlaybackSession.for_source("a.mp4")
        session.duration_seconds = 0.0
        session.position_seconds = 3.0
        assert session.progress_percent == 0.0

    def test_is_playing_requires_intent(self) -> None:
        session = PlaybackSession.for_source("a.mp4")
        assert not session.is_playing
        session.play_intent = True
        assert session.is_playing  # LOADING with intent
        session.status = PlaybackStatus.SEEKING
        assert session.is_playing  # scrubbing during playback
        session.status = PlaybackStatus.PAUSED
        assert not session.is_playing

    def test_errored_not_seekable(self) -> None:
        session = PlaybackSession.for_source("a.mp4")
        session.duration_seconds = 10.0
        session.status = PlaybackStatus.ERRORED
        assert session.is_errored
        assert not session.accepts_transport
        assert not session.is_seekable


class TestHelpers:
    def test_is_source_available(self) -> None:
        assert is_source_available("x")
        assert not is_source_available("")
        assert not is_source_available(42)

    def test_is_known_duration(self) -> None:
        assert is_known_duration(0)
        assert is_known_duration(12.5)
        assert not is_known_duration(None)
        assert not is_known_duration(math.nan)
        assert not is_known_duration(math.inf)
        assert not is_known_duration(-1)


class TestMovieSource:
    def test_from_dict(self) -> None:
        source = MovieSource.from_dict({
            "_id": "abc123",
            "title": "Parasite",
            "year": 2019,
            "genres": ["Drama", "Thriller"],
            "videoUrl": "https://cdn.example.com/parasite.mp4",
            "poster": "poster.jpg",
            "backdrop": "backdrop.jpg",
        })
        assert source.movie_id == "abc123"
        assert source.title == "Parasite"
        assert source.subtitle == "2019 • Drama, Thriller"
        assert source.video_url == "https://cdn.example.com/parasite.mp4"
        assert source.poster == "backdrop.jpg"

    def test_from_dict_poster_fallback(self) -> None:
        source = MovieSource.from_dict({"poster": "poster.jpg"})
        assert source.poster == "poster.jpg"
        assert source.video_url == ""
        assert source.subtitle == ""

    def test_from_dict_year_only(self) -> None:
        assert MovieSource.from_dict({"year": 1999}).subtitle == "1999"
