"""MediaController — 소스 로드/세션 교체/정리 로직."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from src.models.playback_session import PlaybackSession

if TYPE_CHECKING:
    from src.ui.controllers.player_context import PlayerContext

logger = logging.getLogger(__name__)


class _SessionListener:
    """Forwards primitive notifications for one session generation.

    Anything that arrives after the session was superseded is dropped.
    """

    def __init__(self, ctx: PlayerContext, generation: int) -> None:
        self._ctx = ctx
        self._generation = generation

    def _current(self) -> bool:
        return self._ctx.generation == self._generation

    def on_metadata_ready(self, duration_seconds: float | None) -> None:
        if self._current():
            self._ctx.playback_ctrl.on_metadata_ready(duration_seconds)

    def on_time_advanced(self, position_seconds: float) -> None:
        if self._current():
            self._ctx.playback_ctrl.on_time_advanced(position_seconds)

    def on_buffered_updated(self, buffered_seconds: float) -> None:
        if self._current():
            self._ctx.playback_ctrl.on_buffered_updated(buffered_seconds)

    def on_ended(self) -> None:
        if self._current():
            self._ctx.playback_ctrl.on_ended()

    def on_waiting(self) -> None:
        if self._current():
            self._ctx.playback_ctrl.on_waiting()

    def on_resumed(self) -> None:
        if self._current():
            self._ctx.playback_ctrl.on_resumed()

    def on_errored(self, message: str) -> None:
        if self._current():
            self._ctx.playback_ctrl.on_errored(message)


class MediaController:
    """세션 수명 관리 Controller.

    ``load_source`` tears the previous session down (timers, subscriptions,
    primitive source) before wiring the new one.
    """

    def __init__(self, ctx: PlayerContext) -> None:
        self.ctx = ctx

    def load_source(self, source_url) -> PlaybackSession:
        ctx = self.ctx
        previous = ctx.session
        self.teardown()

        session = PlaybackSession.for_source(source_url, volume=previous.volume)
        if previous.muted_restore_volume > 0:
            session.muted_restore_volume = previous.muted_restore_volume
        session.is_fullscreen = previous.is_fullscreen
        ctx.session = session
        generation = ctx.generation

        if ctx.fullscreen_host is not None:
            ctx.subscriptions.append(
                ctx.fullscreen_host.subscribe(
                    lambda is_full: self._on_fullscreen_changed(generation, is_full)
                )
            )

        if not session.is_available:
            logger.warning("No playable source; player shows the unavailable page")
            ctx.refresh_view()
            return session

        ctx.subscriptions.append(ctx.primitive.subscribe(_SessionListener(ctx, generation)))
        ctx.primitive.set_volume(session.volume)
        ctx.primitive.set_playback_rate(session.playback_rate)
        ctx.primitive.load(session.source_url)
        logger.info(f"Session {generation} loading {session.source_url}")

        if ctx.visibility_ctrl is not None:
            ctx.visibility_ctrl.restart_hide_timer()
        ctx.refresh_view()
        return session

    def teardown(self) -> None:
        """Release every timer and subscription of the current session."""
        ctx = self.ctx
        # Bump first: nothing captured under the old generation may apply.
        ctx.generation += 1
        ctx.cancel_all_timers()
        ctx.release_subscriptions()
        if ctx.session.is_available and ctx.primitive is not None:
            ctx.primitive.unload()
            logger.info(f"Session torn down: {ctx.session.source_url}")

    def close(self) -> None:
        """Player is going away: tear down and leave an empty session."""
        self.teardown()
        self.ctx.session = PlaybackSession.for_source("", volume=self.ctx.session.volume)

    def _on_fullscreen_changed(self, generation: int, is_fullscreen: bool) -> None:
        if generation != self.ctx.generation:
            return
        self.ctx.playback_ctrl.on_fullscreen_changed(is_fullscreen)
