"""
Time and formatting helpers shared by the core services and cogs.
"""

from __future__ import annotations
import time

MINUTE_MS = 60 * 1000
HOUR_MS = 60 * MINUTE_MS
DAY_MS = 24 * HOUR_MS


def now_ms() -> int:
    return int(time.time() * 1000)


def clamp(x: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, x))


def fmt(n: int) -> str:
    """Format number with thousand separators."""
    return f"{n:,}"


def format_remaining(ms: int) -> str:
    """Format a remaining duration as ``Xh Ym`` (minutes rounded down)."""
    if ms <= 0:
        return "0h 0m"
    hours = ms // HOUR_MS
    minutes = (ms % HOUR_MS) // MINUTE_MS
    return f"{hours}h {minutes}m"
