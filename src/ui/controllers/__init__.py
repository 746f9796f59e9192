"""UI Controllers — 플레이어 책임 분리.

각 Controller는 PlayerContext를 통해 공유 상태에 접근한다.
``create_player_context`` wires a context with every controller.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from src.ui.controllers.controls_visibility_controller import ControlsVisibilityController
from src.ui.controllers.keyboard_controller import KeyboardController
from src.ui.controllers.media_controller import MediaController
from src.ui.controllers.playback_controller import PlaybackController
from src.ui.controllers.player_context import PlayerContext

if TYPE_CHECKING:
    from src.infrastructure.media_backend import IFullscreenHost, IMediaPrimitive, IScheduler


def create_player_context(
    primitive: IMediaPrimitive,
    scheduler: IScheduler,
    fullscreen_host: IFullscreenHost | None = None,
    *,
    shortcuts: dict[str, str] | None = None,
    controls_hide_delay_ms: int | None = None,
    skip_seconds: float | None = None,
) -> PlayerContext:
    ctx = PlayerContext()
    ctx.primitive = primitive
    ctx.scheduler = scheduler
    ctx.fullscreen_host = fullscreen_host
    if controls_hide_delay_ms is not None:
        ctx.controls_hide_delay_ms = controls_hide_delay_ms
    if skip_seconds is not None:
        ctx.skip_seconds = skip_seconds

    ctx.playback_ctrl = PlaybackController(ctx)
    ctx.visibility_ctrl = ControlsVisibilityController(ctx)
    ctx.keyboard_ctrl = KeyboardController(ctx, shortcuts)
    ctx.media_ctrl = MediaController(ctx)
    return ctx


__all__ = [
    "ControlsVisibilityController",
    "KeyboardController",
    "MediaController",
    "PlaybackController",
    "PlayerContext",
    "create_player_context",
]
