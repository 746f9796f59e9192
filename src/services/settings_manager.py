"""Settings manager for player preferences."""

from PySide6.QtCore import QSettings

from src.utils.config import API_BASE_URL, CONTROLS_HIDE_DELAY_MS, SKIP_SECONDS

# action → default key (QKeySequence text)
_SHORTCUT_DEFAULTS: dict[str, str] = {
    "play_pause": "Space",
    "play_pause_alt": "K",
    "fullscreen": "F",
    "mute": "M",
    "seek_forward": "Right",
    "seek_back": "Left",
    "volume_up": "Up",
    "volume_down": "Down",
}


class SettingsManager:
    """Wrapper around QSettings for type-safe preference management.

    Only configuration lives here; playback state is never persisted.
    """

    def __init__(self):
        self._settings = QSettings()

    # ---------------------------------------------------- Player Settings

    def get_controls_hide_delay(self) -> int:
        """Get the idle delay before controls hide in ms (default: 3000)."""
        return self._settings.value("player/controls_hide_delay", CONTROLS_HIDE_DELAY_MS, int)

    def set_controls_hide_delay(self, ms: int) -> None:
        self._settings.setValue("player/controls_hide_delay", ms)

    def get_skip_seconds(self) -> int:
        """Get the skip step for rewind/forward in seconds (default: 10)."""
        return self._settings.value("player/skip_seconds", SKIP_SECONDS, int)

    def set_skip_seconds(self, seconds: int) -> None:
        self._settings.setValue("player/skip_seconds", seconds)

    # ---------------------------------------------------- Catalog

    def get_api_base_url(self) -> str:
        """Get the AKFLIX catalog API base URL."""
        return self._settings.value("catalog/api_base_url", API_BASE_URL, str)

    def set_api_base_url(self, url: str) -> None:
        self._settings.setValue("catalog/api_base_url", url.rstrip("/"))

    def get_last_video_dir(self) -> str:
        return self._settings.value("general/last_video_dir", "", str)

    def set_last_video_dir(self, path: str) -> None:
        self._settings.setValue("general/last_video_dir", path)

    # ---------------------------------------------------- UI Settings

    def get_ui_language(self) -> str:
        """Get the UI language code (default: en)."""
        return self._settings.value("ui/language", "en", str)

    def set_ui_language(self, lang: str) -> None:
        """Set the UI language code ('en', 'ko', etc.)."""
        self._settings.setValue("ui/language", lang)

    # ---------------------------------------------------- Shortcuts

    def get_shortcut(self, action: str) -> str:
        """Key bound to *action*; unknown actions return ''."""
        return self._settings.value(f"shortcuts/{action}", _SHORTCUT_DEFAULTS.get(action, ""), str)

    def set_shortcut(self, action: str, key: str) -> None:
        self._settings.setValue(f"shortcuts/{action}", key)

    def get_shortcuts(self) -> dict[str, str]:
        """All known actions with their effective keys."""
        return {action: self.get_shortcut(action) for action in _SHORTCUT_DEFAULTS}

    # ---------------------------------------------------- General Methods

    def sync(self) -> None:
        """Force synchronization of settings to disk."""
        self._settings.sync()
