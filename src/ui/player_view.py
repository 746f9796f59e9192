"""Pure render step: PlaybackSession → PlayerView (no Qt dependency).

The widgets only copy these values onto themselves; every display
decision lives here so it can be tested without a QApplication.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.models.movie_source import MovieSource
from src.models.playback_session import PlaybackSession
from src.utils.config import PLAYBACK_RATES
from src.utils.i18n import tr


@dataclass(frozen=True)
class RateOption:
    rate: float
    label: str
    selected: bool


@dataclass(frozen=True)
class PlayerView:
    available: bool

    # Unavailable page
    unavailable_heading: str
    unavailable_message: str
    unavailable_help: str
    poster: str

    # Info overlay
    title: str
    subtitle: str
    show_info_overlay: bool

    # Overlays
    controls_visible: bool
    show_loading: bool
    show_playback_animation: bool
    animation_icon: str

    # Transport bar
    play_icon: str
    play_tooltip: str
    progress_percent: float
    buffered_percent: float
    current_time_text: str
    duration_text: str
    volume: float
    muted: bool
    volume_icon: str
    mute_tooltip: str

    # Settings / fullscreen
    show_settings: bool
    rate_options: tuple[RateOption, ...]
    is_fullscreen: bool
    fullscreen_icon: str
    fullscreen_tooltip: str


def rate_label(rate: float) -> str:
    if rate == 1:
        return tr("Normal")
    return f"{rate:g}x"


def volume_icon(volume: float, muted: bool) -> str:
    if muted or volume <= 0:
        return "🔇"
    if volume > 0.5:
        return "🔊"
    return "🔉"


def unavailable_message(title: str) -> str:
    subject = f'"{title}" {tr("is")}' if title else tr("This content is")
    return f"{subject} {tr('currently unavailable for playback.')}"


def build_player_view(session: PlaybackSession, source: MovieSource | None = None) -> PlayerView:
    source = source or MovieSource()
    available = session.accepts_transport
    playing = session.is_playing
    return PlayerView(
        available=available,
        unavailable_heading=tr("Video Not Available"),
        unavailable_message=unavailable_message(source.title),
        unavailable_help=tr("Please try again later or contact support if the issue persists."),
        poster=source.poster,
        title=source.title,
        subtitle=source.subtitle,
        show_info_overlay=available and session.controls_visible and bool(source.title or source.subtitle),
        controls_visible=available and session.controls_visible,
        show_loading=available and session.is_buffering,
        show_playback_animation=available and session.show_playback_animation,
        animation_icon="▶" if playing else "⏸",
        play_icon="⏸" if playing else "▶",
        play_tooltip=tr("Pause") if playing else tr("Play"),
        progress_percent=session.progress_percent,
        buffered_percent=session.buffered_percent,
        current_time_text=session.current_time_text,
        duration_text=session.duration_text,
        volume=session.volume,
        muted=session.muted,
        volume_icon=volume_icon(session.volume, session.muted),
        mute_tooltip=tr("Unmute") if session.muted else tr("Mute"),
        show_settings=available and session.show_settings,
        rate_options=tuple(
            RateOption(rate, rate_label(rate), rate == session.playback_rate)
            for rate in PLAYBACK_RATES
        ),
        is_fullscreen=session.is_fullscreen,
        fullscreen_icon="🗗" if session.is_fullscreen else "⛶",
        fullscreen_tooltip=tr("Exit Fullscreen") if session.is_fullscreen else tr("Fullscreen"),
    )
