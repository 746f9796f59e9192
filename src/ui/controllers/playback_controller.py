"""PlaybackController — 재생/시크/볼륨/속도/전체화면 및 네이티브 알림 처리."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from src.infrastructure.media_backend import FullscreenRequestError
from src.models.playback_session import (
    PlaybackErrorKind,
    PlaybackStatus,
    is_known_duration,
)
from src.utils.config import (
    DEFAULT_VOLUME,
    FULLSCREEN_DEBOUNCE_MS,
    PLAYBACK_ANIMATION_MS,
    PLAYBACK_RATES,
)
from src.utils.time_utils import clamp

if TYPE_CHECKING:
    from src.ui.controllers.player_context import PlayerContext

logger = logging.getLogger(__name__)

ANIMATION_TIMER = "playback_animation"
FULLSCREEN_TIMER = "fullscreen_debounce"


def _as_float(value) -> float | None:
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


class PlaybackController:
    """재생, 시크, 볼륨 제어를 담당하는 Controller.

    User calls update intent optimistically; position, duration and
    buffering facts come only from the primitive's notifications
    (``on_*`` methods). Guard failures are silent no-ops.
    """

    def __init__(self, ctx: PlayerContext) -> None:
        self.ctx = ctx

    # ---- 내부 헬퍼 ----

    @property
    def session(self):
        return self.ctx.session

    def _changed(self) -> None:
        self.ctx.refresh_view()

    def _set_status(self, status: PlaybackStatus) -> None:
        session = self.ctx.session
        if session.status == status:
            return
        logger.debug(f"Playback status {session.status.name} -> {status.name}")
        session.status = status
        if self.ctx.visibility_ctrl is not None:
            self.ctx.visibility_ctrl.on_status_changed(status)

    def _flash_animation(self) -> None:
        self.ctx.session.show_playback_animation = True
        self.ctx.start_timer(ANIMATION_TIMER, PLAYBACK_ANIMATION_MS, self._clear_animation)

    def _clear_animation(self) -> None:
        self.ctx.session.show_playback_animation = False
        self._changed()

    def _fail(self, kind: PlaybackErrorKind, message: str) -> None:
        session = self.ctx.session
        if session.is_errored:
            return
        session.error_kind = kind
        session.error_message = message
        session.play_intent = False
        session.is_scrubbing = False
        session.show_settings = False
        session.show_playback_animation = False
        session.resume_status = None
        self.ctx.cancel_all_timers()
        self._set_status(PlaybackStatus.ERRORED)
        session.controls_visible = True
        logger.error(f"Playback failed ({kind.name}) for {session.source_url!r}: {message}")
        self._changed()

    # ---- 재생 토글 ----

    def toggle_play(self) -> None:
        session = self.ctx.session
        if not session.accepts_transport:
            return

        # A held scrub stays SEEKING; only the status it resumes to changes.
        scrubbing = session.is_scrubbing and session.status == PlaybackStatus.SEEKING
        if session.is_playing:
            self.ctx.primitive.pause()
            session.play_intent = False
            if scrubbing:
                session.resume_status = PlaybackStatus.PAUSED
            else:
                session.resume_status = None
                self._set_status(PlaybackStatus.PAUSED)
        else:
            session.play_intent = True
            if scrubbing:
                session.resume_status = PlaybackStatus.PLAYING
            else:
                self._set_status(PlaybackStatus.PLAYING)
            generation = self.ctx.generation
            self.ctx.primitive.play(
                lambda message: self._on_play_rejected(generation, message)
            )

        if not session.is_errored:
            self._flash_animation()
        self._changed()

    def _on_play_rejected(self, generation: int, message: str) -> None:
        if generation != self.ctx.generation:
            return
        self._fail(PlaybackErrorKind.PLAYBACK_REJECTED, message or "Play request rejected")

    # ---- 시크 ----

    def seek_to(self, seconds: float) -> None:
        """Seek to an absolute time, clamped to [0, duration]."""
        session = self.ctx.session
        if not session.is_seekable:
            return
        value = _as_float(seconds)
        if value is None:
            return
        self._apply_seek(clamp(value, 0.0, session.duration_seconds))

    def seek_to_fraction(self, fraction: float) -> None:
        """Seek to ``fraction * duration`` (progress-bar click)."""
        session = self.ctx.session
        if not session.is_seekable:
            return
        value = _as_float(fraction)
        if value is None:
            return
        self._apply_seek(clamp(value * session.duration_seconds, 0.0, session.duration_seconds))

    def skip(self, delta_seconds: float) -> None:
        session = self.ctx.session
        if not session.is_seekable:
            return
        delta = _as_float(delta_seconds)
        if delta is None:
            return
        target = clamp(session.position_seconds + delta, 0.0, session.duration_seconds)
        if self._apply_seek(target):
            self._flash_animation()
            self._changed()

    def _apply_seek(self, target: float) -> bool:
        if math.isnan(target) or not math.isfinite(target):
            return False
        self.ctx.primitive.set_position_seconds(target)
        # Optimistic; the next time-advanced notification overrides it.
        self.ctx.session.position_seconds = target
        self._changed()
        return True

    def begin_scrub(self) -> None:
        session = self.ctx.session
        if session.is_scrubbing or not session.is_seekable:
            return
        session.resume_status = session.status
        session.is_scrubbing = True
        self._set_status(PlaybackStatus.SEEKING)
        self._changed()

    def end_scrub(self) -> None:
        session = self.ctx.session
        if not session.is_scrubbing:
            return
        session.is_scrubbing = False
        if session.status == PlaybackStatus.SEEKING:
            resume = session.resume_status
            session.resume_status = None
            if resume is None or resume == PlaybackStatus.SEEKING:
                resume = PlaybackStatus.PLAYING if session.play_intent else PlaybackStatus.PAUSED
            self._set_status(resume)
        if self.ctx.visibility_ctrl is not None:
            self.ctx.visibility_ctrl.restart_hide_timer()
        self._changed()

    # ---- 볼륨 ----

    def set_volume(self, volume: float) -> None:
        session = self.ctx.session
        if not session.accepts_transport:
            return
        value = _as_float(volume)
        if value is None or math.isnan(value):
            return
        value = clamp(value, 0.0, 1.0)
        session.volume = value
        session.muted = value == 0
        if value > 0:
            session.muted_restore_volume = value
        self.ctx.primitive.set_volume(value)
        self._changed()

    def adjust_volume(self, delta: float) -> None:
        """Keyboard volume step; rounded so 0.05 steps land exactly on 0 and 1."""
        self.set_volume(round(self.ctx.session.volume + delta, 4))

    def toggle_mute(self) -> None:
        session = self.ctx.session
        if not session.accepts_transport:
            return
        if session.muted:
            restore = session.muted_restore_volume
            if restore <= 0:
                restore = DEFAULT_VOLUME
            session.muted_restore_volume = restore
            session.volume = restore
            session.muted = False
        else:
            if session.volume > 0:
                session.muted_restore_volume = session.volume
            session.volume = 0.0
            session.muted = True
        self.ctx.primitive.set_volume(session.volume)
        self._changed()

    # ---- 전체 화면 ----

    def toggle_fullscreen(self) -> None:
        session = self.ctx.session
        host = self.ctx.fullscreen_host
        if not session.accepts_transport or host is None:
            return
        if self.ctx.timer_active(FULLSCREEN_TIMER):
            return
        try:
            if session.is_fullscreen:
                host.exit_fullscreen()
            else:
                host.request_fullscreen()
        except FullscreenRequestError as e:
            logger.warning(f"Fullscreen request failed: {e}")
            return
        self.ctx.start_timer(FULLSCREEN_TIMER, FULLSCREEN_DEBOUNCE_MS, lambda: None)

    def on_fullscreen_changed(self, is_fullscreen: bool) -> None:
        """Authoritative fullscreen state from the environment."""
        self.ctx.cancel_timer(FULLSCREEN_TIMER)
        if self.ctx.session.is_fullscreen == bool(is_fullscreen):
            return
        self.ctx.session.is_fullscreen = bool(is_fullscreen)
        self._changed()

    # ---- 재생 속도 ----

    def set_playback_rate(self, rate: float) -> None:
        session = self.ctx.session
        if not session.accepts_transport or rate not in PLAYBACK_RATES:
            return
        session.playback_rate = float(rate)
        self.ctx.primitive.set_playback_rate(session.playback_rate)
        session.show_settings = False
        if self.ctx.visibility_ctrl is not None:
            self.ctx.visibility_ctrl.restart_hide_timer()
        self._changed()

    # ---- 오류 ----

    def report_error(self, message: str = "") -> None:
        """Native error signal: unconditional, terminal."""
        self._fail(PlaybackErrorKind.RUNTIME_ERROR, message or "Media error")

    # ---- 네이티브 알림 (MediaController가 세대 확인 후 전달) ----

    def on_metadata_ready(self, duration_seconds: float | None) -> None:
        session = self.ctx.session
        if not session.accepts_transport or not is_known_duration(duration_seconds):
            return
        session.duration_seconds = float(duration_seconds)
        session.buffered_seconds = min(session.buffered_seconds, session.duration_seconds)
        if session.status in (PlaybackStatus.IDLE, PlaybackStatus.LOADING) and session.resume_status is None:
            self._set_status(PlaybackStatus.PLAYING if session.play_intent else PlaybackStatus.READY)
        self._changed()

    def on_time_advanced(self, position_seconds: float) -> None:
        session = self.ctx.session
        if not session.accepts_transport:
            return
        value = _as_float(position_seconds)
        if value is None or not math.isfinite(value):
            return
        value = max(0.0, value)
        if session.duration_known:
            value = min(value, session.duration_seconds)
        session.position_seconds = value
        self._update_buffered(self.ctx.primitive.buffered_seconds())
        self._changed()

    def on_buffered_updated(self, buffered_seconds: float) -> None:
        if not self.ctx.session.accepts_transport:
            return
        self._update_buffered(buffered_seconds)
        self._changed()

    def _update_buffered(self, buffered_seconds: float) -> None:
        session = self.ctx.session
        value = _as_float(buffered_seconds)
        if value is None or not math.isfinite(value):
            return
        value = max(0.0, value)
        if session.duration_known:
            value = min(value, session.duration_seconds)
        session.buffered_seconds = value

    def on_ended(self) -> None:
        session = self.ctx.session
        if not session.accepts_transport:
            return
        session.play_intent = False
        session.is_scrubbing = False
        session.resume_status = None
        session.position_seconds = 0.0
        self.ctx.primitive.set_position_seconds(0.0)
        self._set_status(PlaybackStatus.ENDED)
        self._changed()

    def on_waiting(self) -> None:
        session = self.ctx.session
        if not session.accepts_transport:
            return
        if session.status not in (PlaybackStatus.READY, PlaybackStatus.PLAYING, PlaybackStatus.PAUSED):
            return
        session.resume_status = session.status
        self._set_status(PlaybackStatus.LOADING)
        self._changed()

    def on_resumed(self) -> None:
        session = self.ctx.session
        if not session.accepts_transport or session.status != PlaybackStatus.LOADING:
            return
        resume = session.resume_status
        session.resume_status = None
        if session.play_intent:
            self._set_status(PlaybackStatus.PLAYING)
        elif resume is not None and resume != PlaybackStatus.PLAYING:
            self._set_status(resume)
        elif session.duration_known:
            self._set_status(PlaybackStatus.READY)
        else:
            return
        self._changed()

    def on_errored(self, message: str) -> None:
        self.report_error(message)
