"""Main application window."""

from __future__ import annotations

import logging
from pathlib import Path

from PySide6.QtCore import QThread, Slot
from PySide6.QtGui import QAction, QCloseEvent, QIcon, QKeySequence
from PySide6.QtWidgets import QFileDialog, QInputDialog, QMainWindow, QMessageBox

from src.models.movie_source import MovieSource
from src.services.movie_source_service import MovieSourceService
from src.services.settings_manager import SettingsManager
from src.ui.dialogs.preferences_dialog import PreferencesDialog
from src.ui.video_player_widget import VideoPlayerWidget
from src.utils.config import APP_NAME, APP_VERSION, VIDEO_FILTER
from src.utils.i18n import tr
from src.workers.movie_source_worker import MovieSourceWorker

logger = logging.getLogger(__name__)


class PlayerWindow(QMainWindow):
    def __init__(self, settings: SettingsManager | None = None) -> None:
        super().__init__()
        self.setWindowTitle(f"{APP_NAME} v{APP_VERSION}")
        self.setMinimumSize(800, 500)
        self.resize(1280, 760)

        icon_path = Path(__file__).resolve().parent.parent.parent / "resources" / "icon.png"
        if icon_path.is_file():
            self.setWindowIcon(QIcon(str(icon_path)))

        self._settings = settings or SettingsManager()
        self._player = VideoPlayerWidget(self._settings, self)
        self.setCentralWidget(self._player)

        self._movie_thread: QThread | None = None
        self._movie_worker: MovieSourceWorker | None = None

        self._build_menu()

    @property
    def player(self) -> VideoPlayerWidget:
        return self._player

    def _build_menu(self) -> None:
        file_menu = self.menuBar().addMenu(tr("&File"))

        open_action = QAction(tr("&Open Video..."), self)
        open_action.setShortcut(QKeySequence("Ctrl+O"))
        open_action.triggered.connect(self._on_open_video)
        file_menu.addAction(open_action)

        open_url_action = QAction(tr("Open &URL..."), self)
        open_url_action.setShortcut(QKeySequence("Ctrl+U"))
        open_url_action.triggered.connect(self._on_open_url)
        file_menu.addAction(open_url_action)

        file_menu.addSeparator()

        prefs_action = QAction(tr("&Preferences..."), self)
        prefs_action.setShortcut(QKeySequence("Ctrl+,"))
        prefs_action.triggered.connect(self._on_preferences)
        file_menu.addAction(prefs_action)

        file_menu.addSeparator()

        exit_action = QAction(tr("E&xit"), self)
        exit_action.setShortcut(QKeySequence("Ctrl+Q"))
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

    # ---- 소스 열기 ----

    def load_source(self, source: MovieSource | str) -> None:
        if isinstance(source, MovieSource) and source.title:
            self.setWindowTitle(f"{source.title} - {APP_NAME}")
        self._player.load_source(source)

    def load_video_path(self, path: Path) -> None:
        self._settings.set_last_video_dir(str(path.parent))
        self.load_source(MovieSource(video_url=str(path), title=path.stem))

    @Slot()
    def _on_open_video(self) -> None:
        start_dir = self._settings.get_last_video_dir()
        path, _ = QFileDialog.getOpenFileName(self, tr("Open Video"), start_dir, VIDEO_FILTER)
        if path:
            self.load_video_path(Path(path))

    @Slot()
    def _on_open_url(self) -> None:
        url, ok = QInputDialog.getText(self, tr("Open URL"), tr("Video URL:"))
        if ok and url.strip():
            self.load_source(MovieSource(video_url=url.strip()))

    @Slot()
    def _on_preferences(self) -> None:
        """Show the preferences dialog."""
        dialog = PreferencesDialog(self._settings, self)
        if dialog.exec():
            # Settings are saved in the dialog; push them into the running player
            self._player.apply_settings(self._settings)
            logger.info("Preferences updated")

    # ---- 카탈로그 조회 ----

    def load_movie(self, movie_id: str, api_base: str | None = None) -> None:
        """Resolve *movie_id* against the catalog API on a worker thread."""
        self._cancel_movie_lookup()
        service = MovieSourceService(api_base or self._settings.get_api_base_url())
        logger.info(f"Looking up movie {movie_id} at {service.movie_url(movie_id)}")

        self._movie_thread = QThread()
        self._movie_worker = MovieSourceWorker(movie_id, service)
        self._movie_worker.moveToThread(self._movie_thread)

        self._movie_worker.finished.connect(self._on_movie_loaded)
        self._movie_worker.error.connect(self._on_movie_error)
        self._movie_worker.finished.connect(self._movie_thread.quit)
        self._movie_worker.error.connect(self._movie_thread.quit)
        self._movie_worker.finished.connect(self._movie_worker.deleteLater)
        self._movie_worker.error.connect(self._movie_worker.deleteLater)
        self._movie_thread.finished.connect(self._movie_thread.deleteLater)

        self._movie_thread.started.connect(self._movie_worker.run)
        self._movie_thread.start()

    def _cancel_movie_lookup(self) -> None:
        if self._movie_worker is not None:
            self._movie_worker.cancel()
        if self._movie_thread is not None and self._movie_thread.isRunning():
            self._movie_thread.quit()
            self._movie_thread.wait(2000)
        self._movie_worker = None
        self._movie_thread = None

    @Slot(object)
    def _on_movie_loaded(self, source: MovieSource) -> None:
        self._movie_worker = None
        self._movie_thread = None
        self.load_source(source)

    @Slot(str)
    def _on_movie_error(self, message: str) -> None:
        self._movie_worker = None
        self._movie_thread = None
        logger.error(f"Movie lookup failed: {message}")
        QMessageBox.warning(self, tr("Could not load movie"), message)
        # Nothing to play; show the unavailable page
        self._player.load_source(MovieSource())

    def closeEvent(self, event: QCloseEvent) -> None:
        self._cancel_movie_lookup()
        self._player.shutdown()
        super().closeEvent(event)
