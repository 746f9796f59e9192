"""PlaybackSession → PlayerView 렌더 함수 테스트 (Qt 불필요)."""

from __future__ import annotations

import pytest

from src.models.movie_source import MovieSource
from src.models.playback_session import PlaybackSession, PlaybackStatus
from src.ui.player_view import build_player_view, rate_label, unavailable_message, volume_icon
from src.utils.i18n import init_language


@pytest.fixture(autouse=True)
def _english():
    init_language("en")
    yield
    init_language("en")


def _playing_session() -> PlaybackSession:
    session = PlaybackSession.for_source("movie.mp4")
    session.status = PlaybackStatus.PLAYING
    session.play_intent = True
    session.duration_seconds = 100.0
    session.position_seconds = 50.0
    session.buffered_seconds = 75.0
    return session


class TestUnavailable:
    def test_blank_source(self) -> None:
        view = build_player_view(PlaybackSession.for_source(""))
        assert view.available is False
        assert view.unavailable_heading == "Video Not Available"
        assert view.unavailable_message == "This content is currently unavailable for playback."
        assert view.controls_visible is False

    def test_titled_message_and_poster(self) -> None:
        source = MovieSource(title="Parasite", poster="backdrop.jpg")
        view = build_player_view(PlaybackSession.for_source(""), source)
        assert view.unavailable_message == '"Parasite" is currently unavailable for playback.'
        assert view.poster == "backdrop.jpg"

    def test_errored_uses_same_page(self) -> None:
        session = _playing_session()
        session.status = PlaybackStatus.ERRORED
        view = build_player_view(session)
        assert view.available is False
        assert view.show_loading is False

    def test_korean(self) -> None:
        init_language("ko")
        assert unavailable_message("") == "이 콘텐츠는 현재 재생할 수 없습니다."


class TestTransport:
    def test_playing(self) -> None:
        view = build_player_view(_playing_session())
        assert view.available is True
        assert view.play_icon == "⏸"
        assert view.play_tooltip == "Pause"
        assert view.progress_percent == 50.0
        assert view.buffered_percent == 75.0
        assert view.current_time_text == "0:50"
        assert view.duration_text == "1:40"

    def test_paused(self) -> None:
        session = _playing_session()
        session.status = PlaybackStatus.PAUSED
        session.play_intent = False
        view = build_player_view(session)
        assert view.play_icon == "▶"
        assert view.animation_icon == "⏸"

    def test_scrubbing_while_playing_shows_pause(self) -> None:
        session = _playing_session()
        session.status = PlaybackStatus.SEEKING
        session.is_scrubbing = True
        assert build_player_view(session).play_icon == "⏸"

    def test_loading_indicator(self) -> None:
        session = _playing_session()
        session.status = PlaybackStatus.LOADING
        assert build_player_view(session).show_loading is True

    def test_info_overlay_follows_controls(self) -> None:
        session = _playing_session()
        source = MovieSource(video_url="movie.mp4", title="Parasite", subtitle="2019 • Drama")
        assert build_player_view(session, source).show_info_overlay is True
        session.controls_visible = False
        view = build_player_view(session, source)
        assert view.show_info_overlay is False
        assert view.controls_visible is False

    def test_fullscreen_icon(self) -> None:
        session = _playing_session()
        assert build_player_view(session).fullscreen_tooltip == "Fullscreen"
        session.is_fullscreen = True
        assert build_player_view(session).fullscreen_tooltip == "Exit Fullscreen"


class TestRateOptions:
    def test_all_rates_listed_one_selected(self) -> None:
        session = _playing_session()
        session.playback_rate = 1.5
        options = build_player_view(session).rate_options
        assert len(options) == 8
        assert [o.rate for o in options if o.selected] == [1.5]

    def test_labels(self) -> None:
        assert rate_label(1.0) == "Normal"
        assert rate_label(0.25) == "0.25x"
        assert rate_label(2.0) == "2x"


class TestVolumeIcon:
    def test_muted(self) -> None:
        assert volume_icon(0.8, True) == "🔇"
        assert volume_icon(0.0, False) == "🔇"

    def test_levels(self) -> None:
        assert volume_icon(0.9, False) == "🔊"
        assert volume_icon(0.5, False) == "🔉"
