"""ControlsVisibilityController — 컨트롤 자동 숨김 타이머와 설정 메뉴."""

from __future__ import annotations

from typing import TYPE_CHECKING

from src.models.playback_session import PlaybackStatus

if TYPE_CHECKING:
    from src.ui.controllers.player_context import PlayerContext

HIDE_TIMER = "controls_hide"

_SHOW_ON_STATUSES = frozenset({
    PlaybackStatus.PAUSED,
    PlaybackStatus.SEEKING,
    PlaybackStatus.ENDED,
})


class ControlsVisibilityController:
    """Visible/Hidden sub-state, independent of transport.

    Controls hide after ``ctx.controls_hide_delay_ms`` without pointer
    movement while playing. Scrubbing or an open settings menu suspend
    the timer until released.
    """

    def __init__(self, ctx: PlayerContext) -> None:
        self.ctx = ctx

    def _can_hide(self) -> bool:
        session = self.ctx.session
        return (
            session.accepts_transport
            and session.status == PlaybackStatus.PLAYING
            and not session.is_scrubbing
            and not session.show_settings
        )

    def restart_hide_timer(self) -> None:
        self.ctx.cancel_timer(HIDE_TIMER)
        if self._can_hide():
            self.ctx.start_timer(HIDE_TIMER, self.ctx.controls_hide_delay_ms, self._on_hide_timeout)

    def _on_hide_timeout(self) -> None:
        if not self._can_hide():
            return
        self.ctx.session.controls_visible = False
        self.ctx.refresh_view()

    def _show(self) -> bool:
        session = self.ctx.session
        if session.controls_visible:
            return False
        session.controls_visible = True
        return True

    # ---- 입력 ----

    def on_pointer_activity(self) -> None:
        """Pointer move or enter over the player region."""
        changed = self._show()
        self.restart_hide_timer()
        if changed:
            self.ctx.refresh_view()

    def on_status_changed(self, status: PlaybackStatus) -> None:
        # A buffering stall (LOADING) keeps the current visibility
        if status in _SHOW_ON_STATUSES:
            self._show()
        self.restart_hide_timer()

    # ---- 설정 메뉴 ----

    def toggle_settings(self) -> None:
        session = self.ctx.session
        if not session.accepts_transport:
            return
        session.show_settings = not session.show_settings
        if session.show_settings:
            self._show()
        self.restart_hide_timer()
        self.ctx.refresh_view()

    def close_settings(self) -> None:
        session = self.ctx.session
        if not session.show_settings:
            return
        session.show_settings = False
        self.restart_hide_timer()
        self.ctx.refresh_view()
