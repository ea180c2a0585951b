from __future__ import annotations

import math
import time


def now_ms() -> int:
    """Unix epoch milliseconds, the unit upstream timestamps use."""
    return int(time.time() * 1000)


def minutes_since_creation(created_timestamp: float, now: float | None = None) -> int:
    """Whole minutes elapsed since an epoch-millisecond timestamp."""
    current = now_ms() if now is None else now
    return math.floor((current - created_timestamp) / (1000 * 60))


def format_time_ago(minutes: int) -> str:
    if minutes < 60:
        return f"{minutes}m ago"
    hours = minutes // 60
    mins = minutes % 60
    if hours < 24:
        return f"{hours}h {mins}m ago"
    days = hours // 24
    hrs = hours % 24
    return f"{days}d {hrs}h ago"
