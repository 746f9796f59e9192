"""AKFLIX 카탈로그에서 재생 소스 조회 서비스."""

import json
import logging
import urllib.error
import urllib.parse
import urllib.request

from src.models.movie_source import MovieSource
from src.utils.config import API_BASE_URL, API_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)


class MovieSourceError(Exception):
    """Movie lookup failed (network, HTTP status, payload or not found)."""


class MovieSourceService:
    """GET {api_base}/movies/{id} → MovieSource."""

    def __init__(self, api_base: str = API_BASE_URL, timeout: float = API_TIMEOUT_SECONDS) -> None:
        self._api_base = api_base.rstrip("/")
        self._timeout = timeout

    def movie_url(self, movie_id: str) -> str:
        return f"{self._api_base}/movies/{urllib.parse.quote(str(movie_id), safe='')}"

    def fetch_movie(self, movie_id: str) -> MovieSource:
        if not str(movie_id).strip():
            raise MovieSourceError("Movie id is empty")
        url = self.movie_url(movie_id)
        req = urllib.request.Request(url, method="GET")
        req.add_header("Accept", "application/json")
        try:
            with urllib.request.urlopen(req, timeout=self._timeout) as resp:
                payload = json.loads(resp.read().decode("utf-8"))
        except urllib.error.HTTPError as e:
            message = _error_message(e)
            logger.warning(f"Catalog lookup {url} failed: HTTP {e.code} {message}")
            raise MovieSourceError(f"HTTP {e.code}: {message}") from e
        except (urllib.error.URLError, TimeoutError) as e:
            logger.warning(f"Catalog lookup {url} failed: {e}")
            raise MovieSourceError(f"Cannot reach catalog: {e}") from e
        except json.JSONDecodeError as e:
            raise MovieSourceError(f"Invalid JSON from catalog: {e}") from e
        return self.parse_response(payload)

    @staticmethod
    def parse_response(payload) -> MovieSource:
        """Validate a ``{"success": ..., "data": {...}}`` envelope."""
        if not isinstance(payload, dict):
            raise MovieSourceError("Unexpected catalog response")
        if not payload.get("success"):
            raise MovieSourceError(payload.get("message") or "Movie not found")
        data = payload.get("data")
        if not isinstance(data, dict):
            raise MovieSourceError("Catalog response has no movie data")
        return MovieSource.from_dict(data)


def _error_message(error: "urllib.error.HTTPError") -> str:
    try:
        body = json.loads(error.read().decode("utf-8"))
    except (ValueError, OSError):
        return error.reason or ""
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return error.reason or ""
