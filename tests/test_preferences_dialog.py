"""PreferencesDialog 테스트 — QSettings 모킹, 저장은 OK 시에만."""

from __future__ import annotations

from PySide6.QtGui import QKeySequence
from PySide6.QtWidgets import QApplication, QDialog

from src.services.settings_manager import SettingsManager, _SHORTCUT_DEFAULTS
from src.ui.dialogs.preferences_dialog import _SHORTCUT_ACTIONS, PreferencesDialog

# QApplication 인스턴스 보장
_app = QApplication.instance() or QApplication([])


# QSettings를 in-memory dict로 모킹하는 헬퍼
class _FakeQSettings:
    def __init__(self):
        self._data: dict[str, str] = {}
        self.synced = False

    def value(self, key: str, default, type_=None):
        return self._data.get(key, default)

    def setValue(self, key: str, value) -> None:
        self._data[key] = value

    def sync(self) -> None:
        self.synced = True


def _make_manager() -> tuple[SettingsManager, _FakeQSettings]:
    fake = _FakeQSettings()
    mgr = SettingsManager.__new__(SettingsManager)
    mgr._settings = fake
    return mgr, fake


def _row(action: str) -> int:
    return [a for a, _ in _SHORTCUT_ACTIONS].index(action)


class TestLoad:
    def test_loads_current_values(self) -> None:
        mgr, _ = _make_manager()
        mgr.set_skip_seconds(15)
        mgr.set_controls_hide_delay(2000)
        mgr.set_ui_language("ko")
        mgr.set_shortcut("mute", "Q")
        dialog = PreferencesDialog(mgr)
        assert dialog._skip_seconds.value() == 15
        assert dialog._hide_delay.value() == 2000
        assert dialog._ui_language.currentData() == "ko"
        assert dialog._key_edits[_row("mute")].keySequence().toString() == "Q"

    def test_every_action_listed(self) -> None:
        assert {a for a, _ in _SHORTCUT_ACTIONS} == set(_SHORTCUT_DEFAULTS)


class TestSave:
    def test_ok_writes_and_syncs(self) -> None:
        mgr, fake = _make_manager()
        dialog = PreferencesDialog(mgr)
        dialog._skip_seconds.setValue(5)
        dialog._hide_delay.setValue(4500)
        dialog._ui_language.setCurrentIndex(dialog._ui_language.findData("ko"))
        dialog._key_edits[_row("play_pause")].setKeySequence(QKeySequence("P"))
        dialog._save_and_accept()

        assert dialog.result() == QDialog.DialogCode.Accepted
        assert fake.synced
        assert mgr.get_skip_seconds() == 5
        assert mgr.get_controls_hide_delay() == 4500
        assert mgr.get_ui_language() == "ko"
        assert mgr.get_shortcut("play_pause") == "P"
        assert mgr.get_shortcut("seek_back") == "Left"

    def test_cancel_writes_nothing(self) -> None:
        mgr, fake = _make_manager()
        dialog = PreferencesDialog(mgr)
        dialog._skip_seconds.setValue(30)
        dialog.reject()
        assert fake._data == {}
        assert not fake.synced

    def test_reset_restores_default_keys(self) -> None:
        mgr, _ = _make_manager()
        mgr.set_shortcut("fullscreen", "G")
        dialog = PreferencesDialog(mgr)
        dialog._reset_all_shortcuts()
        assert dialog._key_edits[_row("fullscreen")].keySequence().toString() == "F"
        # Not persisted until OK
        assert mgr.get_shortcut("fullscreen") == "G"
        dialog._save_and_accept()
        assert mgr.get_shortcut("fullscreen") == "F"
