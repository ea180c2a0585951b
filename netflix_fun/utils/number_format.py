"""Display formatting for market figures."""

from __future__ import annotations

import math
import re
from typing import Any


NOT_AVAILABLE = "N/A"

_NUMERIC_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_number(value: Any) -> float | None:
    """
    Coerce ints, floats and numeric strings. Strings are read up to their
    first non-numeric character, so "12abc" is 12. Returns None for anything
    else, including NaN and booleans.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        match = _NUMERIC_PREFIX.match(value)
        if match is None:
            return None
        num = float(match.group())
    elif isinstance(value, (int, float)):
        num = float(value)
    else:
        return None
    if math.isnan(num):
        return None
    return num


def format_number(num: Any) -> str:
    """
    Human readable figure with K/M/B suffixes (1200000 -> "1.2M").

    Values below one thousand are returned as-is; integral values drop the
    trailing ".0" so 0 renders as "0".
    """
    value = parse_number(num)
    if value is None:
        return NOT_AVAILABLE

    if value >= 1_000_000_000:
        return f"{value / 1_000_000_000:.1f}B"
    if value >= 1_000_000:
        return f"{value / 1_000_000:.1f}M"
    if value >= 1_000:
        return f"{value / 1_000:.1f}K"

    if value.is_integer():
        return str(int(value))
    return str(value)


def safe_number_format(value: Any, decimals: int = 8) -> str:
    """Fixed-decimal rendering that tolerates strings, None and junk."""
    num = parse_number(value)
    if num is None:
        return NOT_AVAILABLE
    return f"{num:.{decimals}f}"


def format_percent_change(value: Any, missing: str = NOT_AVAILABLE) -> str:
    num = parse_number(value)
    if num is None:
        return missing
    sign = "+" if num > 0 else ""
    return f"{sign}{safe_number_format(num, 2)}%"
