"""Time conversion utilities."""

from __future__ import annotations

import math
from functools import lru_cache


def _is_real(value) -> bool:
    return isinstance(value, (int, float)) and math.isfinite(value)


@lru_cache(maxsize=4096)
def _format_whole_seconds(total: int) -> str:
    hours = total // 3600
    minutes = (total % 3600) // 60
    seconds = total % 60
    if hours > 0:
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    return f"{minutes}:{seconds:02d}"


def format_time(seconds: float) -> str:
    """Convert seconds to player display string.

    'H:MM:SS' from one hour upward, 'M:SS' below. NaN, infinities and
    non-numeric values render as '0:00'; negatives clamp to zero.

    Example:
        >>> format_time(3661)
        '1:01:01'
    """
    if not _is_real(seconds):
        return "0:00"
    return _format_whole_seconds(max(0, int(math.floor(seconds))))


def seconds_to_ms(seconds: float) -> int:
    """Convert seconds (float) to integer milliseconds."""
    return int(round(seconds * 1000))


def ms_to_seconds(ms: int) -> float:
    """Convert integer milliseconds to seconds."""
    return ms / 1000.0


def percent_of(value: float, total: float | None) -> float:
    """Return value/total as a percentage clamped to [0, 100].

    Unknown (None), zero or non-finite totals yield 0.0.
    """
    if total is None or not _is_real(total) or total <= 0 or not _is_real(value):
        return 0.0
    return max(0.0, min(100.0, value / total * 100.0))


def clamp(value: float, low: float, high: float) -> float:
    """Clamp *value* into [low, high]. NaN passes through unchanged."""
    if math.isnan(value):
        return value
    return max(low, min(high, value))
