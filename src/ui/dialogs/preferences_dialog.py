"""Preferences dialog for player settings."""

from PySide6.QtCore import Qt
from PySide6.QtGui import QKeySequence
from PySide6.QtWidgets import (
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QGroupBox,
    QKeySequenceEdit,
    QLabel,
    QPushButton,
    QSpinBox,
    QTabWidget,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from src.services.settings_manager import SettingsManager, _SHORTCUT_DEFAULTS
from src.utils.i18n import available_languages, tr

# 단축키 탭에 표시될 (action_key, display_name) 목록
_SHORTCUT_ACTIONS: list[tuple[str, str]] = [
    ("play_pause",     "Play / Pause"),
    ("play_pause_alt", "Play / Pause (alternate)"),
    ("fullscreen",     "Toggle Fullscreen"),
    ("mute",           "Toggle Mute"),
    ("seek_forward",   "Skip Forward"),
    ("seek_back",      "Skip Back"),
    ("volume_up",      "Volume Up"),
    ("volume_down",    "Volume Down"),
]

_LANGUAGE_NAMES = {"en": "English", "ko": "한국어"}


class PreferencesDialog(QDialog):
    """Dialog for editing player preferences.

    Values are written to *settings* only when the dialog is accepted.
    """

    def __init__(self, settings: SettingsManager, parent=None):
        super().__init__(parent)
        self.setWindowTitle(tr("Preferences"))
        self.setMinimumSize(480, 420)

        self._settings = settings
        self._build_ui()
        self._load_settings()

    def _build_ui(self):
        layout = QVBoxLayout(self)

        self._tabs = QTabWidget()
        layout.addWidget(self._tabs)
        self._tabs.addTab(self._create_general_tab(), tr("General"))
        self._tabs.addTab(self._create_shortcuts_tab(), tr("Shortcuts"))

        button_box = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel
        )
        button_box.accepted.connect(self._save_and_accept)
        button_box.rejected.connect(self.reject)
        layout.addWidget(button_box)

    def _create_general_tab(self) -> QWidget:
        """Create the General settings tab."""
        widget = QWidget()
        layout = QVBoxLayout(widget)

        # Player group
        player_group = QGroupBox(tr("Player"))
        player_layout = QFormLayout(player_group)

        self._hide_delay = QSpinBox()
        self._hide_delay.setRange(1000, 10_000)
        self._hide_delay.setSingleStep(500)
        self._hide_delay.setSuffix(" ms")
        player_layout.addRow(tr("Hide Controls After:"), self._hide_delay)

        self._skip_seconds = QSpinBox()
        self._skip_seconds.setRange(1, 60)
        self._skip_seconds.setSuffix(f" {tr('seconds')}")
        player_layout.addRow(tr("Skip Step:"), self._skip_seconds)

        layout.addWidget(player_group)

        # UI group
        ui_group = QGroupBox(tr("User Interface"))
        ui_layout = QFormLayout(ui_group)

        self._ui_language = QComboBox()
        for code in available_languages():
            self._ui_language.addItem(_LANGUAGE_NAMES.get(code, code), code)
        ui_layout.addRow(tr("Language:"), self._ui_language)

        info_label = QLabel(tr("Note: Language changes require restart"))
        info_label.setStyleSheet("color: gray; font-style: italic;")
        ui_layout.addRow("", info_label)

        layout.addWidget(ui_group)

        layout.addStretch()
        return widget

    def _create_shortcuts_tab(self) -> QWidget:
        """단축키 커스터마이징 탭을 생성한다."""
        widget = QWidget()
        layout = QVBoxLayout(widget)

        self._shortcuts_table = QTableWidget(len(_SHORTCUT_ACTIONS), 2)
        self._shortcuts_table.setHorizontalHeaderLabels([tr("Action"), tr("Shortcut")])
        self._shortcuts_table.horizontalHeader().setStretchLastSection(True)
        self._shortcuts_table.verticalHeader().setVisible(False)
        self._shortcuts_table.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)

        self._key_edits: list[QKeySequenceEdit] = []
        for row, (_action, label) in enumerate(_SHORTCUT_ACTIONS):
            item = QTableWidgetItem(tr(label))
            item.setFlags(item.flags() & ~Qt.ItemFlag.ItemIsEditable)
            self._shortcuts_table.setItem(row, 0, item)
            edit = QKeySequenceEdit()
            # Player shortcuts are single keys
            edit.setMaximumSequenceLength(1)
            self._shortcuts_table.setCellWidget(row, 1, edit)
            self._key_edits.append(edit)

        layout.addWidget(self._shortcuts_table)

        reset_btn = QPushButton(tr("Reset All Shortcuts"))
        reset_btn.clicked.connect(self._reset_all_shortcuts)
        layout.addWidget(reset_btn)

        return widget

    def _load_shortcuts(self) -> None:
        """SettingsManager에서 단축키를 읽어 QKeySequenceEdit에 적용한다."""
        for row, (action, _) in enumerate(_SHORTCUT_ACTIONS):
            key = self._settings.get_shortcut(action)
            self._key_edits[row].setKeySequence(QKeySequence(key))

    def _save_shortcuts(self) -> None:
        """QKeySequenceEdit 값을 SettingsManager에 저장한다."""
        for row, (action, _) in enumerate(_SHORTCUT_ACTIONS):
            seq = self._key_edits[row].keySequence()
            self._settings.set_shortcut(action, seq.toString())

    def _reset_all_shortcuts(self) -> None:
        """모든 단축키를 기본값으로 초기화한다."""
        for row, (action, _) in enumerate(_SHORTCUT_ACTIONS):
            default = _SHORTCUT_DEFAULTS.get(action, "")
            self._key_edits[row].setKeySequence(QKeySequence(default))

    def _load_settings(self):
        """Load current settings into UI."""
        self._hide_delay.setValue(self._settings.get_controls_hide_delay())
        self._skip_seconds.setValue(self._settings.get_skip_seconds())

        lang_index = self._ui_language.findData(self._settings.get_ui_language())
        if lang_index >= 0:
            self._ui_language.setCurrentIndex(lang_index)

        self._load_shortcuts()

    def _save_and_accept(self):
        """Save settings and close dialog."""
        self._settings.set_controls_hide_delay(self._hide_delay.value())
        self._settings.set_skip_seconds(self._skip_seconds.value())
        self._settings.set_ui_language(self._ui_language.currentData())
        self._save_shortcuts()

        self._settings.sync()
        self.accept()
