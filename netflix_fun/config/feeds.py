"""Upstream listing feeds served by the coin proxy routes."""

from __future__ import annotations

from typing import Any, Dict


FEED_PROFILES: Dict[str, Dict[str, Any]] = {
    "live": {
        "label": "live coins",
        "path": "/coins/currently-live",
        "params": {"offset": 0, "sort": "currently_live", "order": "DESC"},
        "market_cap_band": False,
    },
    # trending and featured both read the "for-you" feed
    "trending": {
        "label": "trending coins",
        "path": "/coins/for-you",
        "params": {"offset": 0},
        "market_cap_band": True,
    },
    "featured": {
        "label": "featured coins",
        "path": "/coins/for-you",
        "params": {"offset": 0},
        "market_cap_band": True,
    },
    "pumpfun-originals": {
        "label": "Pump.fun top-runners",
        "path": "/coins/top-runners",
        "params": {},
        "market_cap_band": False,
    },
}

# feeds whose query string carries paging/nsfw flags
PAGED_FEEDS = frozenset({"live", "trending", "featured"})


def get_feed_profile(feed: str) -> Dict[str, Any]:
    """
    Returns the upstream profile for a feed or raises ValueError if unknown.
    """
    try:
        return FEED_PROFILES[feed]
    except KeyError as exc:
        raise ValueError(f"Unsupported feed '{feed}'") from exc
