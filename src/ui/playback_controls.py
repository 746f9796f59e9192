"""재생 컨트롤: 재생/정지, 건너뛰기, 볼륨, 시간 표시, 진행 바, 재생 속도, 전체 화면."""

from PySide6.QtCore import QRectF, Qt, Signal
from PySide6.QtGui import QColor, QMouseEvent, QPainter, QPaintEvent
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSlider,
    QVBoxLayout,
    QWidget,
)

from src.ui.player_view import PlayerView
from src.utils.config import SKIP_SECONDS
from src.utils.i18n import tr


class ProgressBar(QWidget):
    """Buffered + played progress with click/drag scrubbing (fractions 0..1)."""

    scrub_started = Signal()
    scrub_moved = Signal(float)   # fraction
    scrub_finished = Signal()

    _TRACK_COLOR = QColor(90, 90, 90)
    _BUFFERED_COLOR = QColor(150, 150, 150)
    _PLAYED_COLOR = QColor(229, 9, 20)
    _THUMB_COLOR = QColor(229, 9, 20)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._progress = 0.0
        self._buffered = 0.0
        self._dragging = False
        self.setFixedHeight(14)
        self.setCursor(Qt.CursorShape.PointingHandCursor)

    def set_values(self, progress_percent: float, buffered_percent: float) -> None:
        if (progress_percent, buffered_percent) == (self._progress, self._buffered):
            return
        self._progress = progress_percent
        self._buffered = buffered_percent
        self.update()

    def _fraction_at(self, x: float) -> float:
        width = max(1, self.width())
        return max(0.0, min(1.0, x / width))

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() != Qt.MouseButton.LeftButton:
            return super().mousePressEvent(event)
        self._dragging = True
        self.scrub_started.emit()
        self.scrub_moved.emit(self._fraction_at(event.position().x()))
        event.accept()

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        if self._dragging:
            self.scrub_moved.emit(self._fraction_at(event.position().x()))
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        if self._dragging and event.button() == Qt.MouseButton.LeftButton:
            self._dragging = False
            self.scrub_finished.emit()
            event.accept()
            return
        super().mouseReleaseEvent(event)

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        w = self.width()
        bar_h = 4
        y = (self.height() - bar_h) / 2
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(self._TRACK_COLOR)
        painter.drawRect(QRectF(0, y, w, bar_h))
        painter.setBrush(self._BUFFERED_COLOR)
        painter.drawRect(QRectF(0, y, w * self._buffered / 100.0, bar_h))
        played_w = w * self._progress / 100.0
        painter.setBrush(self._PLAYED_COLOR)
        painter.drawRect(QRectF(0, y, played_w, bar_h))
        painter.setBrush(self._THUMB_COLOR)
        radius = 6 if self._dragging or self.underMouse() else 4
        painter.drawEllipse(QRectF(played_w - radius, self.height() / 2 - radius, radius * 2, radius * 2))
        painter.end()


class SettingsMenu(QFrame):
    """Playback speed list shown above the transport bar."""

    rate_selected = Signal(float)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("settingsMenu")
        self.setFrameShape(QFrame.Shape.StyledPanel)
        self._layout = QVBoxLayout(self)
        self._layout.setContentsMargins(6, 6, 6, 6)
        self._title = QLabel(tr("Playback Speed"))
        self._layout.addWidget(self._title)
        self._buttons: dict[float, QPushButton] = {}

    def set_options(self, options) -> None:
        for option in options:
            btn = self._buttons.get(option.rate)
            if btn is None:
                btn = QPushButton()
                btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
                btn.setFlat(True)
                btn.clicked.connect(lambda _=False, r=option.rate: self.rate_selected.emit(r))
                self._layout.addWidget(btn)
                self._buttons[option.rate] = btn
            btn.setText(f"{option.label}  ✓" if option.selected else option.label)

    def mousePressEvent(self, event: QMouseEvent) -> None:
        # Presses on the padding or title stay with the menu
        event.accept()


class PlaybackControls(QWidget):
    """트랜스포트 바: 진행 바, 재생/일시정지, ±10초, 볼륨, 시간, 설정, 전체 화면."""

    play_toggled = Signal()
    skip_requested = Signal(float)          # seconds (+/-)
    mute_toggled = Signal()
    volume_changed_by_user = Signal(float)  # 0.0 to 1.0
    scrub_started = Signal()
    seek_requested = Signal(float)          # fraction 0.0 to 1.0
    scrub_finished = Signal()
    settings_toggled = Signal()
    rate_selected = Signal(float)
    fullscreen_toggled = Signal()

    def __init__(self, parent=None, skip_seconds: float = SKIP_SECONDS):
        super().__init__(parent)

        # --- 위젯 구성 ---
        self._progress = ProgressBar()

        self._play_btn = self._make_button("▶", tr("Play"))
        self._rewind_btn = self._make_button("", tr("Rewind"))
        self._forward_btn = self._make_button("", tr("Forward"))
        self.set_skip_seconds(skip_seconds)
        self._mute_btn = self._make_button("🔉", tr("Mute"))

        self._volume_slider = QSlider(Qt.Orientation.Horizontal)
        self._volume_slider.setRange(0, 100)
        self._volume_slider.setFixedWidth(80)
        self._volume_slider.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self._volume_slider.setToolTip(tr("Volume"))

        self._time_label = QLabel("0:00 / 0:00")
        self._time_label.setAlignment(Qt.AlignmentFlag.AlignVCenter | Qt.AlignmentFlag.AlignLeft)

        self._settings_btn = self._make_button("⚙", tr("Settings"))
        self._fullscreen_btn = self._make_button("⛶", tr("Fullscreen"))

        self._settings_menu = SettingsMenu(self)
        self._settings_menu.setVisible(False)

        # --- 레이아웃 ---
        buttons = QHBoxLayout()
        buttons.setContentsMargins(0, 0, 0, 0)
        buttons.addWidget(self._play_btn)
        buttons.addWidget(self._rewind_btn)
        buttons.addWidget(self._forward_btn)
        buttons.addWidget(self._mute_btn)
        buttons.addWidget(self._volume_slider)
        buttons.addWidget(self._time_label, 1)
        buttons.addWidget(self._settings_btn)
        buttons.addWidget(self._fullscreen_btn)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 2, 8, 4)
        layout.setSpacing(2)
        layout.addWidget(self._settings_menu, 0, Qt.AlignmentFlag.AlignRight)
        layout.addWidget(self._progress)
        layout.addLayout(buttons)

        # --- 시그널 연결 ---
        self._play_btn.clicked.connect(self.play_toggled.emit)
        self._rewind_btn.clicked.connect(lambda: self.skip_requested.emit(-self._skip_seconds))
        self._forward_btn.clicked.connect(lambda: self.skip_requested.emit(self._skip_seconds))
        self._mute_btn.clicked.connect(self.mute_toggled.emit)
        self._volume_slider.valueChanged.connect(self._on_volume_slider)
        self._progress.scrub_started.connect(self.scrub_started.emit)
        self._progress.scrub_moved.connect(self.seek_requested.emit)
        self._progress.scrub_finished.connect(self.scrub_finished.emit)
        self._settings_btn.clicked.connect(self.settings_toggled.emit)
        self._settings_menu.rate_selected.connect(self.rate_selected.emit)
        self._fullscreen_btn.clicked.connect(self.fullscreen_toggled.emit)

    @staticmethod
    def _make_button(text: str, tooltip: str) -> QPushButton:
        btn = QPushButton(text)
        btn.setFixedWidth(44)
        btn.setFlat(True)
        btn.setToolTip(tooltip)
        # Keep keyboard focus on the player so Space/K reach the shortcut handler.
        btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        return btn

    # --- 슬롯 ---

    def _on_volume_slider(self, value: int) -> None:
        self.volume_changed_by_user.emit(value / 100.0)

    # --- 렌더링 ---

    def set_skip_seconds(self, seconds: float) -> None:
        self._skip_seconds = seconds
        self._rewind_btn.setText(f"⟲ {seconds:g}")
        self._forward_btn.setText(f"{seconds:g} ⟳")

    def settings_menu(self) -> SettingsMenu:
        return self._settings_menu

    def settings_button(self) -> QPushButton:
        return self._settings_btn

    def apply_view(self, view: PlayerView) -> None:
        self._play_btn.setText(view.play_icon)
        self._play_btn.setToolTip(view.play_tooltip)
        self._progress.set_values(view.progress_percent, view.buffered_percent)
        self._time_label.setText(f"{view.current_time_text} / {view.duration_text}")

        self._mute_btn.setText(view.volume_icon)
        self._mute_btn.setToolTip(view.mute_tooltip)
        slider_value = int(round(view.volume * 100))
        if self._volume_slider.value() != slider_value:
            self._volume_slider.blockSignals(True)
            self._volume_slider.setValue(slider_value)
            self._volume_slider.blockSignals(False)

        self._settings_menu.set_options(view.rate_options)
        self._settings_menu.setVisible(view.show_settings)

        self._fullscreen_btn.setText(view.fullscreen_icon)
        self._fullscreen_btn.setToolTip(view.fullscreen_tooltip)
