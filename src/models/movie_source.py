"""Playable movie description from the AKFLIX catalog (pure Python, no Qt dependency)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class MovieSource:
    """What the player needs to mount a session for one catalog entry."""

    video_url: str = ""
    poster: str = ""       # backdrop image shown on the unavailable page
    title: str = ""
    subtitle: str = ""     # "2019 • Drama, Thriller"
    movie_id: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> MovieSource:
        """Build from a catalog movie document (``data`` of GET /movies/:id)."""
        year = data.get("year")
        genres = data.get("genres") or []
        parts = []
        if year:
            parts.append(str(year))
        if genres:
            parts.append(", ".join(str(g) for g in genres))
        return cls(
            video_url=data.get("videoUrl") or "",
            poster=data.get("backdrop") or data.get("poster") or "",
            title=data.get("title") or "",
            subtitle=" • ".join(parts),
            movie_id=str(data.get("_id") or data.get("id") or ""),
        )
