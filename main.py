"""AKFLIX Player application entry point."""

import argparse
import logging
import os
import sys
from pathlib import Path

# SIGABRT 등 크래시 시 Python 트레이스백 출력 (원인 분석용)
import faulthandler

faulthandler.enable(all_threads=True)

# Set platform-appropriate media backend
if sys.platform == "darwin":
    os.environ.setdefault("QT_MEDIA_BACKEND", "darwin")
elif sys.platform == "win32":
    os.environ.setdefault("QT_MEDIA_BACKEND", "windows")

from PySide6.QtGui import QColor, QPalette
from PySide6.QtWidgets import QApplication

from src.models.movie_source import MovieSource
from src.services.settings_manager import SettingsManager
from src.ui.main_window import PlayerWindow
from src.utils.config import APP_NAME, APP_VERSION, ORG_NAME
from src.utils.i18n import init_language

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    level_name = os.environ.get("AKFLIX_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _apply_dark_theme(app: QApplication) -> None:
    """Apply a dark color palette using the Fusion style."""
    app.setStyle("Fusion")
    palette = QPalette()

    palette.setColor(QPalette.ColorRole.Window, QColor(20, 20, 20))
    palette.setColor(QPalette.ColorRole.WindowText, QColor(212, 212, 212))
    palette.setColor(QPalette.ColorRole.Base, QColor(30, 30, 30))
    palette.setColor(QPalette.ColorRole.AlternateBase, QColor(45, 45, 45))
    palette.setColor(QPalette.ColorRole.ToolTipBase, QColor(50, 50, 50))
    palette.setColor(QPalette.ColorRole.ToolTipText, QColor(212, 212, 212))
    palette.setColor(QPalette.ColorRole.Text, QColor(212, 212, 212))
    palette.setColor(QPalette.ColorRole.Button, QColor(40, 40, 40))
    palette.setColor(QPalette.ColorRole.ButtonText, QColor(212, 212, 212))
    palette.setColor(QPalette.ColorRole.BrightText, QColor(255, 255, 255))

    # Highlight (AKFLIX red)
    palette.setColor(QPalette.ColorRole.Highlight, QColor(229, 9, 20))
    palette.setColor(QPalette.ColorRole.HighlightedText, QColor(255, 255, 255))

    palette.setColor(QPalette.ColorGroup.Disabled, QPalette.ColorRole.WindowText, QColor(120, 120, 120))
    palette.setColor(QPalette.ColorGroup.Disabled, QPalette.ColorRole.Text, QColor(120, 120, 120))
    palette.setColor(QPalette.ColorGroup.Disabled, QPalette.ColorRole.ButtonText, QColor(120, 120, 120))

    app.setPalette(palette)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="akflix-player", description=f"{APP_NAME} {APP_VERSION}")
    parser.add_argument("source", nargs="?", help="video file path or URL")
    parser.add_argument("--poster", default="", help="poster image shown when the video is unavailable")
    parser.add_argument("--title", default="", help="title for the info overlay")
    parser.add_argument("--subtitle", default="", help="subtitle line for the info overlay")
    parser.add_argument("--movie-id", help="resolve the source from the AKFLIX catalog API")
    parser.add_argument("--api-base", help="catalog API base URL (overrides saved setting)")
    return parser


def source_from_args(args: argparse.Namespace) -> MovieSource | None:
    """Direct-source arguments → MovieSource; None when nothing was given."""
    if not args.source:
        return None
    title = args.title
    if not title and Path(args.source).is_file():
        title = Path(args.source).stem
    return MovieSource(
        video_url=args.source,
        poster=args.poster,
        title=title,
        subtitle=args.subtitle,
    )


def main() -> None:
    _configure_logging()
    args = build_arg_parser().parse_args(sys.argv[1:])

    QApplication.setOrganizationName(ORG_NAME)
    QApplication.setApplicationName(APP_NAME)

    app = QApplication(sys.argv[:1])
    _apply_dark_theme(app)

    settings = SettingsManager()
    init_language(settings.get_ui_language())

    window = PlayerWindow(settings)
    window.show()

    if args.movie_id:
        window.load_movie(args.movie_id, args.api_base)
    else:
        source = source_from_args(args)
        if source is not None:
            window.load_source(source)

    logger.info(f"{APP_NAME} {APP_VERSION} started")
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
