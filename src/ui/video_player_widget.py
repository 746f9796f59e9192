"""Video player widget: QGraphicsVideoItem surface, overlays, transport bar, unavailable page."""

from __future__ import annotations

import logging
import urllib.parse
from pathlib import Path

from PySide6.QtCore import QEvent, QObject, QSizeF, Qt
from PySide6.QtGui import QColor, QCursor, QFont, QKeyEvent, QKeySequence, QPixmap, QResizeEvent
from PySide6.QtMultimediaWidgets import QGraphicsVideoItem
from PySide6.QtWidgets import (
    QApplication,
    QGraphicsScene,
    QGraphicsTextItem,
    QGraphicsView,
    QLabel,
    QStackedLayout,
    QVBoxLayout,
    QWidget,
)

from src.infrastructure.qt_fullscreen_host import QtFullscreenHost
from src.infrastructure.qt_media_primitive import QtMediaPrimitive
from src.infrastructure.qt_scheduler import QtScheduler
from src.models.movie_source import MovieSource
from src.services.settings_manager import SettingsManager
from src.ui.controllers import PlayerContext, create_player_context
from src.ui.playback_controls import PlaybackControls
from src.ui.player_view import PlayerView, build_player_view
from src.utils.config import PLAYER_MIN_HEIGHT, PLAYER_MIN_WIDTH

logger = logging.getLogger(__name__)

_PAGE_PLAYER = 0
_PAGE_UNAVAILABLE = 1


class _VideoSurface(QGraphicsView):
    """Displays video with title / playback-animation / loading overlays."""

    def __init__(self, primitive: QtMediaPrimitive, parent=None):
        super().__init__(parent)
        self.setMinimumSize(PLAYER_MIN_WIDTH, PLAYER_MIN_HEIGHT)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setStyleSheet("background-color: black; border: none;")
        self.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.setMouseTracking(True)
        self.viewport().setMouseTracking(True)

        self._scene = QGraphicsScene(self)
        self.setScene(self._scene)

        self._video_item = QGraphicsVideoItem()
        self._scene.addItem(self._video_item)
        primitive.set_video_output(self._video_item)
        self._video_item.nativeSizeChanged.connect(lambda _size: self._fit_video())

        self._title_item = self._make_text_item(QFont("Sans", 18, QFont.Weight.Bold), z=10)
        self._subtitle_item = self._make_text_item(QFont("Sans", 11), z=10)
        self._animation_item = self._make_text_item(QFont("Sans", 48), z=11)
        self._loading_item = self._make_text_item(QFont("Sans", 14), z=11)
        self._loading_item.setPlainText("⏳")

    def _make_text_item(self, font: QFont, z: int) -> QGraphicsTextItem:
        item = QGraphicsTextItem()
        item.setDefaultTextColor(QColor(255, 255, 255))
        item.setFont(font)
        item.setZValue(z)
        item.setVisible(False)
        self._scene.addItem(item)
        return item

    def apply_view(self, view: PlayerView) -> None:
        self._title_item.setPlainText(view.title)
        self._subtitle_item.setPlainText(view.subtitle)
        self._title_item.setVisible(view.show_info_overlay and bool(view.title))
        self._subtitle_item.setVisible(view.show_info_overlay and bool(view.subtitle))
        self._animation_item.setPlainText(view.animation_icon)
        self._animation_item.setVisible(view.show_playback_animation)
        self._loading_item.setVisible(view.show_loading)
        self._position_overlays()

    def _fit_video(self) -> None:
        view_size = self.viewport().size()
        self._video_item.setSize(QSizeF(view_size.width(), view_size.height()))
        self._scene.setSceneRect(0, 0, view_size.width(), view_size.height())
        self._position_overlays()

    def _position_overlays(self) -> None:
        rect = self._scene.sceneRect()
        self._title_item.setPos(20, 16)
        self._subtitle_item.setPos(20, 16 + self._title_item.boundingRect().height())
        for item in (self._animation_item, self._loading_item):
            box = item.boundingRect()
            item.setPos((rect.width() - box.width()) / 2, (rect.height() - box.height()) / 2)

    def resizeEvent(self, event: QResizeEvent) -> None:
        super().resizeEvent(event)
        self._fit_video()


class _UnavailablePage(QWidget):
    """Static "Video Not Available" message with optional poster."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setStyleSheet("background-color: #141414; color: #d4d4d4;")
        self._icon = QLabel("⚠")
        self._heading = QLabel()
        self._message = QLabel()
        self._help = QLabel()
        self._poster = QLabel()
        self._poster_source = ""
        for label in (self._icon, self._heading, self._message, self._help, self._poster):
            label.setAlignment(Qt.AlignmentFlag.AlignCenter)
            label.setWordWrap(True)
        self._icon.setFont(QFont("Sans", 36))
        self._heading.setFont(QFont("Sans", 20, QFont.Weight.Bold))
        self._help.setStyleSheet("color: #8c8c8c;")

        layout = QVBoxLayout(self)
        layout.addStretch(1)
        for label in (self._icon, self._heading, self._message, self._help, self._poster):
            layout.addWidget(label)
        layout.addStretch(1)

    def apply_view(self, view: PlayerView) -> None:
        self._heading.setText(view.unavailable_heading)
        self._message.setText(view.unavailable_message)
        self._help.setText(view.unavailable_help)
        if view.poster != self._poster_source:
            self._poster_source = view.poster
            self._poster.setPixmap(_load_local_pixmap(view.poster))
        pixmap = self._poster.pixmap()
        self._poster.setVisible(pixmap is not None and not pixmap.isNull())


def _load_local_pixmap(poster: str) -> QPixmap:
    """Poster pixmap for local paths / file URLs; remote posters are not fetched."""
    if not poster:
        return QPixmap()
    parsed = urllib.parse.urlparse(poster)
    path = Path(parsed.path) if parsed.scheme == "file" else Path(poster)
    if parsed.scheme not in ("", "file") or not path.exists():
        return QPixmap()
    pixmap = QPixmap(str(path))
    if pixmap.isNull():
        return pixmap
    return pixmap.scaledToWidth(480, Qt.TransformationMode.SmoothTransformation)


class VideoPlayerWidget(QWidget):
    """Player region: owns the primitive, the PlayerContext and renders PlayerView.

    Keyboard shortcuts are handled here, so they are only active while the
    player (or one of its children) has focus.
    """

    def __init__(self, settings: SettingsManager | None = None, parent=None):
        super().__init__(parent)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setMouseTracking(True)
        self._source = MovieSource()
        self._watching_app = False
        self._last_pointer_pos = None

        settings = settings or SettingsManager()
        self._primitive = QtMediaPrimitive(self)
        self._ctx: PlayerContext = create_player_context(
            self._primitive,
            QtScheduler(self),
            QtFullscreenHost(self),
            shortcuts=settings.get_shortcuts(),
            controls_hide_delay_ms=settings.get_controls_hide_delay(),
            skip_seconds=settings.get_skip_seconds(),
        )
        self._ctx.refresh_view = self._render

        # --- 페이지 구성 ---
        self._surface = _VideoSurface(self._primitive)
        self._controls = PlaybackControls(skip_seconds=self._ctx.skip_seconds)
        player_page = QWidget()
        player_page.setMouseTracking(True)
        player_layout = QVBoxLayout(player_page)
        player_layout.setContentsMargins(0, 0, 0, 0)
        player_layout.setSpacing(0)
        player_layout.addWidget(self._surface, 1)
        player_layout.addWidget(self._controls)

        self._unavailable = _UnavailablePage()

        self._stack = QStackedLayout(self)
        self._stack.insertWidget(_PAGE_PLAYER, player_page)
        self._stack.insertWidget(_PAGE_UNAVAILABLE, self._unavailable)

        # Pointer activity and surface clicks; presses elsewhere are watched
        # app-wide only while the settings menu is open
        self._pointer_targets = (self._surface.viewport(), self._controls, player_page)
        for watched in self._pointer_targets:
            watched.installEventFilter(self)

        self._connect_controls()
        self._render()

    @property
    def context(self) -> PlayerContext:
        return self._ctx

    def _connect_controls(self) -> None:
        ctx = self._ctx
        c = self._controls
        c.play_toggled.connect(ctx.playback_ctrl.toggle_play)
        c.skip_requested.connect(ctx.playback_ctrl.skip)
        c.mute_toggled.connect(ctx.playback_ctrl.toggle_mute)
        c.volume_changed_by_user.connect(ctx.playback_ctrl.set_volume)
        c.scrub_started.connect(ctx.playback_ctrl.begin_scrub)
        c.seek_requested.connect(ctx.playback_ctrl.seek_to_fraction)
        c.scrub_finished.connect(ctx.playback_ctrl.end_scrub)
        c.settings_toggled.connect(ctx.visibility_ctrl.toggle_settings)
        c.rate_selected.connect(ctx.playback_ctrl.set_playback_rate)
        c.fullscreen_toggled.connect(ctx.playback_ctrl.toggle_fullscreen)

    # ---- 소스 ----

    def load_source(self, source: MovieSource | str) -> None:
        if isinstance(source, str):
            source = MovieSource(video_url=source)
        self._source = source
        logger.debug(f"Player loading {source.title or source.video_url!r}")
        self._ctx.media_ctrl.load_source(source.video_url)
        self.setFocus(Qt.FocusReason.OtherFocusReason)

    def apply_settings(self, settings: SettingsManager) -> None:
        """Push edited preferences into the running player."""
        ctx = self._ctx
        ctx.keyboard_ctrl.set_shortcuts(settings.get_shortcuts())
        ctx.controls_hide_delay_ms = settings.get_controls_hide_delay()
        ctx.skip_seconds = settings.get_skip_seconds()
        self._controls.set_skip_seconds(ctx.skip_seconds)
        ctx.visibility_ctrl.restart_hide_timer()

    def shutdown(self) -> None:
        """Tear the session down; call before the window closes."""
        self._watch_application_presses(False)
        self._ctx.media_ctrl.close()
        self._primitive.shutdown()

    # ---- 렌더링 ----

    def _render(self) -> None:
        view = build_player_view(self._ctx.session, self._source)
        self._watch_application_presses(view.show_settings)
        self._stack.setCurrentIndex(_PAGE_PLAYER if view.available else _PAGE_UNAVAILABLE)
        if not view.available:
            self._unavailable.apply_view(view)
            self.unsetCursor()
            return
        self._surface.apply_view(view)
        self._controls.setVisible(view.controls_visible)
        self._controls.apply_view(view)
        if view.controls_visible:
            self.unsetCursor()
        else:
            self.setCursor(Qt.CursorShape.BlankCursor)

    def _watch_application_presses(self, watch: bool) -> None:
        """Close-on-outside-click needs presses that land on any widget."""
        app = QApplication.instance()
        if app is None or watch == self._watching_app:
            return
        if watch:
            app.installEventFilter(self)
        else:
            app.removeEventFilter(self)
        self._watching_app = watch

    # ---- 입력 ----

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:
        etype = event.type()
        if etype == QEvent.Type.MouseButtonPress:
            return self._on_pointer_press(obj, event)
        if obj in self._pointer_targets and etype in (
            QEvent.Type.MouseMove,
            QEvent.Type.Enter,
            QEvent.Type.HoverMove,
        ):
            self._on_pointer_activity()
        return False

    def _on_pointer_activity(self) -> None:
        # Showing or hiding the bar re-lays out the page and Qt replays Enter /
        # move events under a resting cursor; only real movement counts.
        pos = QCursor.pos()
        if pos == self._last_pointer_pos:
            return
        self._last_pointer_pos = pos
        self._ctx.visibility_ctrl.on_pointer_activity()

    def _inside_settings(self, widget: QWidget) -> bool:
        menu = self._controls.settings_menu()
        return widget is self._controls.settings_button() or widget is menu or menu.isAncestorOf(widget)

    def _on_pointer_press(self, obj: QObject, event) -> bool:
        viewport = self._surface.viewport()
        if self._ctx.session.show_settings:
            # QWindow deliveries precede the widget ones; judge the widget
            if not isinstance(obj, QWidget) or self._inside_settings(obj):
                return False
            self._ctx.visibility_ctrl.close_settings()
            # The press that closes the menu does not also toggle play
            return obj is viewport
        if obj is not viewport:
            return False
        if event.button() == Qt.MouseButton.LeftButton:
            self._ctx.playback_ctrl.toggle_play()
        return True

    def mouseMoveEvent(self, event) -> None:
        self._on_pointer_activity()
        super().mouseMoveEvent(event)

    def enterEvent(self, event) -> None:
        self._on_pointer_activity()
        super().enterEvent(event)

    def keyPressEvent(self, event: QKeyEvent) -> None:
        mods = Qt.KeyboardModifier.ControlModifier | Qt.KeyboardModifier.AltModifier | Qt.KeyboardModifier.MetaModifier
        if event.modifiers() & mods:
            super().keyPressEvent(event)
            return
        key = QKeySequence(event.key()).toString()
        # Only reached while this widget or a child holds focus
        if self._ctx.keyboard_ctrl.handle_key(key):
            event.accept()
            return
        super().keyPressEvent(event)
