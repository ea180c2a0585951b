"""Coin rows for the browse pages: feed -> cards, or hardcoded cards on error."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional

from netflix_fun.schemas.coins import CoinCard, CoinRow
from netflix_fun.services import mock_data, pumpfun
from netflix_fun.services.presenters import to_coin_card
from netflix_fun.services.upstream import extract_coin_array


logger = logging.getLogger("netflix_fun.rows")


@dataclass(frozen=True)
class RowProfile:
    key: str
    title: str
    load: Optional[Callable[[], Awaitable[dict[str, Any]]]]
    fallback: Callable[[], list[dict[str, Any]]]
    # string shown for figures the feed does not carry
    missing: str = "N/A"


async def _live() -> dict[str, Any]:
    return await pumpfun.get_live_coins()


async def _trending() -> dict[str, Any]:
    return await pumpfun.get_trending_coins()


async def _featured() -> dict[str, Any]:
    return await pumpfun.get_featured_coins()


async def _pumpfun() -> dict[str, Any]:
    return await pumpfun.get_pumpfun_originals()


def _solana() -> list[dict[str, Any]]:
    return list(mock_data.SOLANA_COINS)


ROWS: dict[str, RowProfile] = {
    "live": RowProfile("live", "Live Now", _live, mock_data.mock_live_coins, missing=""),
    "trending": RowProfile("trending", "Trending Now", _trending, mock_data.mock_trending_coins),
    "featured": RowProfile("featured", "Featured Coins", _featured, mock_data.mock_featured_coins, missing=""),
    "pumpfun": RowProfile("pumpfun", "Pump.fun Originals", _pumpfun, mock_data.mock_pumpfun_coins),
    "solana": RowProfile("solana", "Solana Coins", None, _solana),
}


def _cards(records: list[Any], missing: str) -> list[CoinCard]:
    return [to_coin_card(record, i, missing=missing) for i, record in enumerate(records)]


def _fallback_row(profile: RowProfile, error: Optional[str]) -> CoinRow:
    return CoinRow(
        key=profile.key,
        title=profile.title,
        coins=_cards(profile.fallback(), profile.missing),
        fallback=True,
        error=error,
    )


async def get_row(key: str) -> CoinRow:
    """
    Build one browse row. Raises KeyError for an unknown row key; every other
    failure yields the row's hardcoded records.
    """
    profile = ROWS[key]
    if profile.load is None:
        return CoinRow(key=key, title=profile.title, coins=_cards(profile.fallback(), profile.missing))

    try:
        payload = await profile.load()
        records = extract_coin_array(payload)
        if not records:
            logger.warning("⚠️ no %s coins found, using fallback data", key)
            return _fallback_row(profile, "No coins found in API response")

        error = None if payload.get("success", True) else payload.get("message")
        return CoinRow(
            key=key,
            title=profile.title,
            coins=_cards(records, profile.missing),
            fallback=error is not None,
            error=error,
        )
    except Exception as exc:
        logger.exception("❌ error building %s row, falling back to mock data", key)
        return _fallback_row(profile, str(exc) or "Unknown error fetching coins")
