"""Application configuration constants."""

from __future__ import annotations

APP_NAME = "AKFLIX Player"
APP_VERSION = "0.1.0"
ORG_NAME = "AKFLIX"

# Catalog API (GET /movies/:id → {"success": true, "data": {...}})
API_BASE_URL = "http://localhost:5000/api"
API_TIMEOUT_SECONDS = 10

# Volume
DEFAULT_VOLUME = 0.7  # also the unmute fallback when no restore volume exists
VOLUME_STEP = 0.05

# Transport
SKIP_SECONDS = 10
PLAYBACK_RATES = (0.25, 0.5, 0.75, 1.0, 1.25, 1.5, 1.75, 2.0)
DEFAULT_PLAYBACK_RATE = 1.0

# Timers (ms)
CONTROLS_HIDE_DELAY_MS = 3000
PLAYBACK_ANIMATION_MS = 500
FULLSCREEN_DEBOUNCE_MS = 250

# Supported local video formats (file dialog)
VIDEO_EXTENSIONS = [".mp4", ".mkv", ".avi", ".mov", ".webm", ".flv", ".wmv"]
VIDEO_FILTER = "Video Files ({});;All Files (*)".format(
    " ".join(f"*{ext}" for ext in VIDEO_EXTENSIONS)
)

# UI
PLAYER_MIN_WIDTH = 640
PLAYER_MIN_HEIGHT = 360
