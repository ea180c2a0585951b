"""Pump.fun listing feeds with mock fallback."""

from __future__ import annotations

import logging
from typing import Any, Callable

from netflix_fun.config.feeds import PAGED_FEEDS, get_feed_profile
from netflix_fun.config.settings import get_settings
from netflix_fun.services import mock_data
from netflix_fun.services.errors import UpstreamError
from netflix_fun.services.upstream import (
    ResultStatus,
    extract_coin_array,
    fetch_json,
    filter_by_market_cap,
)


logger = logging.getLogger("netflix_fun.pumpfun")

_NO_DATA_MESSAGES = {
    ResultStatus.NO_DATA: "Empty response",
    ResultStatus.PARSE_FAILURE: "Failed to parse response",
}


class FeedShapeError(ValueError):
    """Upstream answered with JSON we cannot read coins out of."""


def _feed_url(feed: str) -> tuple[str, dict[str, Any]]:
    s = get_settings()
    profile = get_feed_profile(feed)
    params = dict(profile["params"])
    if feed in PAGED_FEEDS:
        params["limit"] = s.FEED_LIMIT
        params["includeNsfw"] = str(s.INCLUDE_NSFW).lower()
    return f"{s.PUMPFUN_API_BASE}{profile['path']}", params


def _fallback(feed: str, mock: Callable[[], list[dict]], message: str) -> dict[str, Any]:
    logger.warning("⚠️ using mock data | feed=%s | reason=%s", feed, message)
    return {"success": False, "message": message, "data": mock()}


def _top_runner_coins(payload: Any) -> list[dict]:
    if not isinstance(payload, list):
        raise FeedShapeError("API response format unexpected - not an array")
    if payload and not (isinstance(payload[0], dict) and "coin" in payload[0]):
        raise FeedShapeError("API response items don't have 'coin' property")
    return payload


async def _listing_feed(feed: str, mock: Callable[[], list[dict]]) -> dict[str, Any]:
    profile = get_feed_profile(feed)
    label = profile["label"]
    url, params = _feed_url(feed)

    try:
        logger.info("fetching %s", label)
        result = await fetch_json(url, source=label, params=params)
        if not result.ok:
            return _fallback(feed, mock, _NO_DATA_MESSAGES[result.status])

        if feed == "pumpfun-originals":
            coins = _top_runner_coins(result.payload)
        else:
            coins = extract_coin_array(result.payload)
        coins = [c for c in coins if isinstance(c, dict)]

        s = get_settings()
        if profile["market_cap_band"] and s.MARKET_CAP_FILTER_ENABLED:
            total = len(coins)
            coins = filter_by_market_cap(coins, s.MARKET_CAP_MIN, s.MARKET_CAP_MAX)
            logger.info(
                "filtered %s by market cap (%s-%s): %s out of %s",
                label, s.MARKET_CAP_MIN, s.MARKET_CAP_MAX, len(coins), total,
            )

        if not coins:
            return _fallback(feed, mock, "No coins found in API response")

        return {"success": True, "message": None, "data": coins}
    except (UpstreamError, FeedShapeError) as exc:
        return _fallback(feed, mock, str(exc))
    except Exception as exc:
        logger.exception("❌ error fetching %s", label)
        return _fallback(feed, mock, str(exc) or "Unknown error")


async def get_live_coins() -> dict[str, Any]:
    return await _listing_feed("live", mock_data.mock_live_coins)


async def get_trending_coins() -> dict[str, Any]:
    return await _listing_feed("trending", mock_data.mock_trending_coins)


async def get_featured_coins() -> dict[str, Any]:
    return await _listing_feed("featured", mock_data.mock_featured_coins)


async def get_pumpfun_originals() -> dict[str, Any]:
    """Top-runners; entries stay nested as {"coin": {...}, "description", "modifiedBy"}."""
    return await _listing_feed("pumpfun-originals", mock_data.mock_pumpfun_coins)
