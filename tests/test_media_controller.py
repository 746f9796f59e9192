"""세션 교체/정리 테스트: 이전 세션의 늦은 콜백이 새 세션을 건드리지 않아야 한다."""

from __future__ import annotations

from src.models.playback_session import PlaybackErrorKind, PlaybackStatus
from src.ui.controllers.controls_visibility_controller import HIDE_TIMER


class TestLoadSource:
    def test_wires_primitive(self, ctx, primitive, fullscreen_host) -> None:
        session = ctx.media_ctrl.load_source("https://cdn.example.com/a.mp4")
        assert session is ctx.session
        assert primitive.source == "https://cdn.example.com/a.mp4"
        assert primitive.volume == 0.7
        assert primitive.rate == 1.0
        assert len(primitive.listeners) == 1
        assert len(fullscreen_host.callbacks) == 1
        assert ctx.session.status == PlaybackStatus.LOADING

    def test_blank_source_is_unavailable(self, ctx, primitive, fullscreen_host) -> None:
        ctx.media_ctrl.load_source("   ")
        assert ctx.session.error_kind == PlaybackErrorKind.SOURCE_UNAVAILABLE
        assert "load" not in primitive.calls
        assert primitive.listeners == []
        assert len(fullscreen_host.callbacks) == 1

    def test_refreshes_view(self, ctx) -> None:
        ctx.media_ctrl.load_source("a.mp4")
        assert ctx.refresh_count >= 1


class TestSessionReplacement:
    def test_previous_source_unloaded(self, playing, primitive) -> None:
        playing.media_ctrl.load_source("b.mp4")
        assert "unload" in primitive.calls
        assert primitive.source == "b.mp4"

    def test_subscriptions_not_duplicated(self, loaded, primitive, fullscreen_host) -> None:
        loaded.media_ctrl.load_source("b.mp4")
        loaded.media_ctrl.load_source("c.mp4")
        assert len(primitive.listeners) == 1
        assert len(fullscreen_host.callbacks) == 1

    def test_stale_listener_dropped(self, playing, primitive) -> None:
        old_listener = primitive.listeners[0]
        playing.media_ctrl.load_source("b.mp4")
        old_listener.on_time_advanced(42.0)
        old_listener.on_errored("late error")
        assert playing.session.position_seconds == 0.0
        assert playing.session.status == PlaybackStatus.LOADING

    def test_pending_timers_cancelled(self, playing, scheduler) -> None:
        assert scheduler.pending() > 0
        playing.media_ctrl.load_source("b.mp4")
        assert scheduler.pending() == 0
        assert playing.timers == {}

    def test_stale_timer_callback_dropped(self, playing, primitive, scheduler) -> None:
        hide_handle = playing.timers[HIDE_TIMER]
        playing.media_ctrl.load_source("b.mp4")
        primitive.emit("on_metadata_ready", 10.0)
        playing.playback_ctrl.toggle_play()
        hide_handle.callback()
        assert playing.session.controls_visible is True

    def test_volume_and_fullscreen_carried_rate_reset(self, loaded, fullscreen_host) -> None:
        loaded.playback_ctrl.set_volume(0.3)
        loaded.playback_ctrl.set_playback_rate(2.0)
        fullscreen_host.notify(True)
        loaded.media_ctrl.load_source("b.mp4")
        assert loaded.session.volume == 0.3
        assert loaded.session.is_fullscreen is True
        assert loaded.session.playback_rate == 1.0

    def test_new_source_recovers_from_error(self, loaded) -> None:
        loaded.playback_ctrl.report_error("broken")
        loaded.media_ctrl.load_source("b.mp4")
        assert loaded.session.status == PlaybackStatus.LOADING
        assert loaded.session.error_kind is None


class TestClose:
    def test_close_releases_everything(self, playing, primitive, fullscreen_host, scheduler) -> None:
        playing.media_ctrl.close()
        assert primitive.listeners == []
        assert fullscreen_host.callbacks == []
        assert scheduler.pending() == 0
        assert not playing.session.is_available
        assert primitive.calls[-1] == "unload"
