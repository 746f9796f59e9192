"""KeyboardController — 플레이어 영역 단축키."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from src.services.settings_manager import _SHORTCUT_DEFAULTS
from src.utils.config import VOLUME_STEP

if TYPE_CHECKING:
    from src.ui.controllers.player_context import PlayerContext

# DOM-style key names seen from other input sources
_KEY_ALIASES = {
    " ": "space",
    "spacebar": "space",
    "arrowright": "right",
    "arrowleft": "left",
    "arrowup": "up",
    "arrowdown": "down",
}


def normalize_key(key: str) -> str:
    """'Space', ' ', 'ArrowRight', 'K' → 'space', 'space', 'right', 'k'."""
    if key == " ":
        return "space"
    text = key.strip().lower()
    return _KEY_ALIASES.get(text, text)


class KeyboardController:
    """Maps key names to transport actions.

    Keys are only honoured while the player region holds focus. A handled
    key returns ``True`` so the caller can consume the event.
    """

    def __init__(self, ctx: PlayerContext, shortcuts: dict[str, str] | None = None) -> None:
        self.ctx = ctx
        self._key_map: dict[str, str] = {}
        self.set_shortcuts(shortcuts or dict(_SHORTCUT_DEFAULTS))

    def set_shortcuts(self, shortcuts: dict[str, str]) -> None:
        key_map: dict[str, str] = {}
        for action, key in shortcuts.items():
            if key and action in _SHORTCUT_DEFAULTS:
                key_map[normalize_key(key)] = action
        self._key_map = key_map

    def action_for(self, key: str) -> str | None:
        return self._key_map.get(normalize_key(key))

    def handle_key(self, key: str, *, focus_within: bool = True) -> bool:
        if not focus_within:
            return False
        action = self.action_for(key)
        if action is None:
            return False
        self._actions()[action]()
        return True

    def _actions(self) -> dict[str, Callable[[], None]]:
        playback = self.ctx.playback_ctrl
        skip = self.ctx.skip_seconds
        return {
            "play_pause": playback.toggle_play,
            "play_pause_alt": playback.toggle_play,
            "fullscreen": playback.toggle_fullscreen,
            "mute": playback.toggle_mute,
            "seek_forward": lambda: playback.skip(skip),
            "seek_back": lambda: playback.skip(-skip),
            "volume_up": lambda: playback.adjust_volume(VOLUME_STEP),
            "volume_down": lambda: playback.adjust_volume(-VOLUME_STEP),
        }
