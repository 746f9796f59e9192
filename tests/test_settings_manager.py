"""설정/단축키 단위 테스트 (Qt 불필요 — QSettings 모킹)."""

from __future__ import annotations

from src.services.settings_manager import SettingsManager, _SHORTCUT_DEFAULTS
from src.utils.config import API_BASE_URL, CONTROLS_HIDE_DELAY_MS, SKIP_SECONDS


# QSettings를 in-memory dict로 모킹하는 헬퍼
class _FakeQSettings:
    def __init__(self):
        self._data: dict[str, str] = {}

    def value(self, key: str, default, type_=None):
        return self._data.get(key, default)

    def setValue(self, key: str, value) -> None:
        self._data[key] = value

    def sync(self) -> None:
        pass


def _make_manager() -> tuple[SettingsManager, _FakeQSettings]:
    """SettingsManager + FakeQSettings 쌍 반환."""
    fake = _FakeQSettings()
    mgr = SettingsManager.__new__(SettingsManager)
    mgr._settings = fake
    return mgr, fake


class TestPlayerSettings:
    def test_defaults(self) -> None:
        mgr, _ = _make_manager()
        assert mgr.get_controls_hide_delay() == CONTROLS_HIDE_DELAY_MS
        assert mgr.get_skip_seconds() == SKIP_SECONDS
        assert mgr.get_api_base_url() == API_BASE_URL
        assert mgr.get_ui_language() == "en"
        assert mgr.get_last_video_dir() == ""

    def test_api_base_trailing_slash(self) -> None:
        mgr, fake = _make_manager()
        mgr.set_api_base_url("https://akflix.example.com/api/")
        assert fake._data["catalog/api_base_url"] == "https://akflix.example.com/api"


class TestShortcutDefaults:
    def test_default_value(self) -> None:
        """저장 전 get_shortcut → 기본값 반환."""
        mgr, _ = _make_manager()
        assert mgr.get_shortcut("play_pause") == "Space"
        assert mgr.get_shortcut("play_pause_alt") == "K"
        assert mgr.get_shortcut("seek_forward") == "Right"

    def test_unknown_action_default(self) -> None:
        """미등록 action → 빈 문자열."""
        mgr, _ = _make_manager()
        assert mgr.get_shortcut("nonexistent_action") == ""

    def test_all_defaults_valid(self) -> None:
        """모든 기본 단축키가 비어있지 않음."""
        for action, key in _SHORTCUT_DEFAULTS.items():
            assert key, f"action '{action}'의 기본 단축키가 비어있습니다"


class TestShortcutRoundtrip:
    def test_set_overrides_default(self) -> None:
        """커스텀 값 저장 시 기본값 무시."""
        mgr, _ = _make_manager()
        mgr.set_shortcut("seek_back", "A")
        assert mgr.get_shortcut("seek_back") == "A"
        assert mgr.get_shortcuts()["seek_back"] == "A"

    def test_get_shortcuts_covers_all_actions(self) -> None:
        mgr, _ = _make_manager()
        assert set(mgr.get_shortcuts()) == set(_SHORTCUT_DEFAULTS)
